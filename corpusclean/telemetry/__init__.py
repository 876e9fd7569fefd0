"""Run logging for corpus cleaning."""

from .logger import RunLogger

__all__ = ["RunLogger"]
