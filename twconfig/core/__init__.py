"""Inspection orchestration."""

from .inspector import Inspector

__all__ = ['Inspector']
