"""
Stage orchestration
"""
from radix_context.bootstrap.resolve import bundle_at
from radix_context.config import Settings
from radix_context.pipeline import BaseStage, PipelineOrchestrator, StageContext, StageResult
from radix_context.pipeline.stages import CopyContextStage, MergeIndexStage, default_stages


class RecordingStage(BaseStage):
    def __init__(self, name, success=True):
        self.name = name
        self.success = success
        self.ran = False

    def run(self, context):
        self.ran = True
        return StageResult(name=self.name, success=self.success, data=self.name, message="stop here")


def make_context(bundle_dir, target):
    settings = Settings(BUNDLE_DIR=bundle_dir)
    return StageContext(target=target, bundle=bundle_at(bundle_dir, settings), settings=settings)


def test_default_stages_order():
    assert [type(s) for s in default_stages()] == [CopyContextStage, MergeIndexStage]


def test_stages_record_outputs(bundle_dir, target):
    context = make_context(bundle_dir, target)

    results = PipelineOrchestrator(default_stages()).run(context)

    assert [r.name for r in results] == ["copy_context", "merge_index"]
    assert all(r.success for r in results)
    assert context.data["files_copied"] == 1
    assert context.data["index_action"].value == "copy"
    assert context.data["copy_context_result"]["dest"] == target / "context"


def test_failed_stage_halts_remaining(bundle_dir, target, capsys):
    first, second = RecordingStage("first", success=False), RecordingStage("second")

    results = PipelineOrchestrator([first, second]).run(make_context(bundle_dir, target))

    assert len(results) == 1
    assert second.ran is False
    assert "failure in stage 'first'" in capsys.readouterr().out
