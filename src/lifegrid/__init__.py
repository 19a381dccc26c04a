"""Bounded Conway's Game of Life engine with CLI and Tkinter frontends."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.engine import GenerationEngine
from .core.errors import InvalidCoordinate, InvalidDimension, InvalidInput, LifeGridError
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "Grid",
    "GenerationEngine",
    "Pattern",
    "PatternLibrary",
    "LifeGridError",
    "InvalidDimension",
    "InvalidCoordinate",
    "InvalidInput",
]
