"""Core cellular automata logic."""

from .errors import InvalidCoordinate, InvalidDimension, InvalidInput, LifeGridError
from .grid import Grid
from .engine import GenerationEngine, next_state
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Grid",
    "GenerationEngine",
    "next_state",
    "Pattern",
    "PatternLibrary",
    "LifeGridError",
    "InvalidDimension",
    "InvalidCoordinate",
    "InvalidInput",
]
