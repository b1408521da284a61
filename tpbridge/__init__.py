"""Query compilation for a remote project-tracking service."""

from . import lib

__all__ = ["lib"]
