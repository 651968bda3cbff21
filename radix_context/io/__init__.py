"""Filesystem primitives used by the install stages."""
