"""Durable storage primitives: atomic writes and the state record."""

from .atomic import AtomicFileWriter
from .state import StateStore

__all__ = ["AtomicFileWriter", "StateStore"]
