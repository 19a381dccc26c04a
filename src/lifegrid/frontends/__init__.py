"""Frontend interfaces for the Game of Life engine."""

from .tkinter_gui import TkinterLifeGUI
from .cli import CLIGameOfLife

__all__ = ["TkinterLifeGUI", "CLIGameOfLife"]
