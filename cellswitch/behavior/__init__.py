"""Behaviour modules evaluated once per cell per step."""

from .general_module import GeneralModule

__all__ = ["GeneralModule"]
