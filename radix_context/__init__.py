"""
radix-context installer package

This package ships the tooling around the radix-context reference
bundle: a ``context/`` directory of markdown digests plus an
``AGENTS.md`` index that agent tooling discovers in a project root.

- ``radix-context-install`` copies the bundle into a target project.
- ``radix-context-setup`` clones the upstream repositories the digests
  are written against into ``.repos/``.

See `main.py` for both entry points.
"""

__version__ = "0.1.0"
