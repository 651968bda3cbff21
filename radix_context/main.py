"""
Entry points for the radix-context tooling.

``radix-context-install`` copies the reference bundle into a project:

.. code-block:: bash

   radix-context-install            # into the current directory
   radix-context-install ../my-app  # into another existing directory

When the ``context/`` directory is not next to the installed package
(a plain ``pip install`` rather than a checkout) the bundle is cloned
into a temporary directory first and removed again afterwards.

``radix-context-setup`` clones the upstream repositories the bundle
documents into ``.repos/``.

Both commands can also be run as ``python -m radix_context.main install|setup``.
A first argument of ``setup`` or ``install`` is always taken as the
command, so a target directory literally named ``setup`` needs the
explicit form ``python -m radix_context.main install setup``.
"""

from __future__ import annotations

import argparse
import signal
import sys
from pathlib import Path
from typing import List, Optional

from . import console
from .bootstrap.manager import ensure_bundle
from .bootstrap.sources import select_sources, source_names, sync_sources
from .config import Settings, settings as default_settings
from .errors import EXIT_INTERRUPTED, EXIT_IO_ERROR, EXIT_OK, InstallerError, TargetNotFoundError
from .pipeline import PipelineOrchestrator, StageContext
from .pipeline.stages import default_stages
from .types import InstallReport


# ---------- operations ----------
def run_install(target: str | Path = ".", settings: Optional[Settings] = None) -> InstallReport:
    """Install the bundle into ``target`` and return what was done.

    The target is checked before the bundle is resolved, so a missing
    target never triggers a clone or any write.
    """
    settings = settings or default_settings

    target_path = Path(target)
    if not target_path.is_dir():
        raise TargetNotFoundError(target)
    target_path = target_path.resolve()

    with ensure_bundle(settings) as bundle:
        context = StageContext(target=target_path, bundle=bundle, settings=settings)
        results = PipelineOrchestrator(default_stages()).run(context)

    failed = [r for r in results if not r.success]
    if failed:
        raise InstallerError(f"install stopped at stage '{failed[0].name}': {failed[0].message}")

    report = InstallReport(
        target=target_path,
        files_copied=context.data["files_copied"],
        index_action=context.data["index_action"],
        remote=bundle.remote,
    )
    console.say("done", f"installed into {target_path}")
    return report


def run_setup(
    dest: Optional[Path] = None,
    only: Optional[List[str]] = None,
    settings: Optional[Settings] = None,
) -> dict:
    """Clone the upstream source repositories into ``dest`` (default ``.repos``)."""
    settings = settings or default_settings
    dest = Path(dest) if dest is not None else Path(settings.SOURCES_DIR)

    actions = sync_sources(
        dest,
        select_sources(only),
        git=settings.GIT_EXECUTABLE,
        depth=settings.CLONE_DEPTH,
    )
    console.say("done", f"all repos in {dest}/")
    return actions


# ---------- CLI ----------
def _raise_on_sigterm(signum, frame):
    # unwind `with` blocks so the temporary clone is removed
    raise SystemExit(128 + signum)


def _guarded(fn, *args, **kwargs) -> int:
    previous = signal.signal(signal.SIGTERM, _raise_on_sigterm)
    try:
        fn(*args, **kwargs)
    except InstallerError as e:
        console.err(str(e))
        return e.exit_code
    except OSError as e:
        console.err(str(e))
        return EXIT_IO_ERROR
    except KeyboardInterrupt:
        console.err("interrupted")
        return EXIT_INTERRUPTED
    finally:
        # None: the previous handler was not installed from Python
        signal.signal(signal.SIGTERM, previous if previous is not None else signal.SIG_DFL)
    return EXIT_OK


def build_install_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radix-context-install",
        description="Copy the radix-context bundle (context/ and AGENTS.md) into a project directory",
    )
    parser.add_argument("target", nargs="?", default=".", help="Existing directory to install into (default: .)")
    parser.add_argument("--repo-url", default=None, help="Remote bundle repository (remote mode only)")
    parser.add_argument("--branch", default=None, help="Branch of the remote bundle repository")
    parser.add_argument("--bundle-dir", default=None, help="Use the bundle in this directory instead")
    return parser


def build_setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radix-context-setup",
        description="Shallow-clone the upstream source repositories into .repos/",
    )
    parser.add_argument("--dest", default=None, help="Checkout directory (default: .repos)")
    parser.add_argument(
        "--only",
        action="append",
        choices=source_names(),
        metavar="NAME",
        help="Clone only this repository (repeatable)",
    )
    return parser


def _overrides(args: argparse.Namespace) -> dict:
    update = {}
    if args.repo_url:
        update["REPO_URL"] = args.repo_url
    if args.branch:
        update["REPO_BRANCH"] = args.branch
    if args.bundle_dir:
        update["BUNDLE_DIR"] = Path(args.bundle_dir)
    return update


def install_main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_install_parser().parse_args(argv)
    settings = settings or default_settings
    update = _overrides(args)
    if update:
        settings = settings.model_copy(update=update)
    return _guarded(run_install, args.target, settings)


def setup_main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_setup_parser().parse_args(argv)
    dest = Path(args.dest) if args.dest else None
    return _guarded(run_setup, dest, args.only, settings)


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv and argv[0] == "setup":
        return setup_main(argv[1:])
    if argv and argv[0] == "install":
        argv = argv[1:]
    return install_main(argv)


if __name__ == "__main__":
    sys.exit(main())
