"""
Installer error types.

Each error carries the process exit status the CLI should use when it
reaches the top level. ``OSError`` raised while copying is not wrapped;
the CLI maps it to ``EXIT_IO_ERROR`` itself.
"""

from __future__ import annotations

from typing import Optional

EXIT_OK = 0
EXIT_TARGET_NOT_FOUND = 1
EXIT_FETCH_FAILED = 2
EXIT_BAD_BUNDLE = 3
EXIT_IO_ERROR = 4
EXIT_INTERRUPTED = 130


class InstallerError(RuntimeError):
    exit_code: int = 1


class TargetNotFoundError(InstallerError):
    """The target directory does not exist (or is not a directory)."""

    exit_code = EXIT_TARGET_NOT_FOUND

    def __init__(self, target) -> None:
        self.target = target
        super().__init__(f"directory '{target}' does not exist")


class FetchError(InstallerError):
    """A git clone failed. ``stderr`` is only set when output was captured."""

    exit_code = EXIT_FETCH_FAILED

    def __init__(
        self,
        remote: str,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
        *,
        message: Optional[str] = None,
    ) -> None:
        self.remote = remote
        self.returncode = returncode
        self.stderr = stderr
        if message is None:
            message = f"failed to clone {remote}"
            if returncode is not None:
                message += f" (git exit status {returncode})"
            if stderr:
                message += f"\n{stderr.strip()}"
        super().__init__(message)


class GitNotFoundError(FetchError):
    def __init__(self, git: str, remote: str = "") -> None:
        self.git = git
        super().__init__(remote, message=f"git executable '{git}' not found on PATH")


class BundleError(InstallerError):
    """The resolved bundle lacks its context directory or index file."""

    exit_code = EXIT_BAD_BUNDLE
