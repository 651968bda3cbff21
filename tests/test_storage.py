"""
Unit tests for the copy/merge primitives
"""
from radix_context.io.storage import copy_context, merge_index
from radix_context.types import IndexAction

from tests.conftest import write_bundle


def test_copy_context_creates_dest_and_copies_bytes(tmp_path):
    src = write_bundle(tmp_path / "bundle", {"a.md": b"A", "b.md": b"B\r\n"}) / "context"
    dest = tmp_path / "proj" / "context"

    count = copy_context(src, dest)

    assert count == 2
    assert sorted(p.name for p in dest.iterdir()) == ["a.md", "b.md"]
    assert (dest / "a.md").read_bytes() == b"A"
    assert (dest / "b.md").read_bytes() == b"B\r\n"


def test_copy_context_overwrites_and_keeps_unrelated_files(tmp_path):
    src = write_bundle(tmp_path / "bundle", {"a.md": b"new"}) / "context"
    dest = tmp_path / "proj" / "context"
    dest.mkdir(parents=True)
    (dest / "a.md").write_bytes(b"old")
    (dest / "mine.md").write_bytes(b"keep")

    copy_context(src, dest)

    assert (dest / "a.md").read_bytes() == b"new"
    assert (dest / "mine.md").read_bytes() == b"keep"


def test_copy_context_recurses_into_subdirectories(tmp_path):
    src = write_bundle(tmp_path / "bundle", {"a.md": b"A", "scrypto/blueprints.md": b"S"}) / "context"
    dest = tmp_path / "proj" / "context"
    (dest / "scrypto").mkdir(parents=True)
    (dest / "scrypto" / "local.md").write_bytes(b"L")

    count = copy_context(src, dest)

    # top-level entries: a.md and scrypto/
    assert count == 2
    assert (dest / "scrypto" / "blueprints.md").read_bytes() == b"S"
    assert (dest / "scrypto" / "local.md").read_bytes() == b"L"


def test_copy_context_skips_hidden_entries(tmp_path):
    src = write_bundle(tmp_path / "bundle", {"a.md": b"A", ".DS_Store": b"x"}) / "context"
    dest = tmp_path / "proj" / "context"

    assert copy_context(src, dest) == 1
    assert not (dest / ".DS_Store").exists()


def test_copy_context_empty_source(tmp_path):
    src = write_bundle(tmp_path / "bundle", {}) / "context"
    dest = tmp_path / "proj" / "context"

    assert copy_context(src, dest) == 0
    assert dest.is_dir()


def test_merge_index_copies_when_missing(tmp_path):
    src = write_bundle(tmp_path / "bundle") / "AGENTS.md"
    dest = tmp_path / "AGENTS.md"

    assert merge_index(src, dest) is IndexAction.COPY
    assert dest.read_bytes() == b"INDEX"


def test_merge_index_appends_with_blank_line_separator(tmp_path):
    src = write_bundle(tmp_path / "bundle") / "AGENTS.md"
    dest = tmp_path / "AGENTS.md"
    dest.write_bytes(b"EXISTING\n")

    assert merge_index(src, dest) is IndexAction.APPEND
    assert dest.read_bytes() == b"EXISTING\n\nINDEX"


def test_merge_index_appends_again_on_second_run(tmp_path):
    src = write_bundle(tmp_path / "bundle") / "AGENTS.md"
    dest = tmp_path / "AGENTS.md"
    dest.write_bytes(b"C")

    merge_index(src, dest)
    merge_index(src, dest)

    assert dest.read_bytes() == b"C" + b"\n" + b"INDEX" + b"\n" + b"INDEX"
