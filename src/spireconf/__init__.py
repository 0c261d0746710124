"""Declarative management of SPIRE registration entries."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # source checkout without install metadata
    __version__ = "0.0.0+local"
