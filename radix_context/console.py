"""
Console helpers.

Every user-facing line is ``<action>: <detail>`` on stdout; errors go
to stderr as ``error: <detail>``. These lines are informational only
and are not meant to be machine parsed.
"""

from __future__ import annotations

import sys


def say(action: str, msg: str) -> None:
    print(f"{action}: {msg}")


def notice(msg: str) -> None:
    print(msg)


def err(msg: str) -> None:
    print(f"error: {msg}", file=sys.stderr)
