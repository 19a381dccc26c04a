"""Tkinter GUI frontend for Conway's Game of Life."""

import logging
import sys
import tkinter as tk
from typing import Optional, Sequence

from ..core.engine import GenerationEngine
from ..core.errors import InvalidInput
from ..core.patterns import PatternLibrary
from .cli import collect_initial_cells, create_parser, validate_args

# Pixel size of one cell
SQUARE_SIZE = 100

# The loop ticks at about 60 Hz and advances once every 30 ticks
TICK_MS = 16
TICKS_PER_GENERATION = 30

BACKGROUND = "white"
CELL_COLOR = "black"


class TkinterLifeGUI:
    """Tkinter window that draws a GenerationEngine and drives it on a timer."""

    def __init__(self, master: tk.Tk, engine: GenerationEngine, square_size: int = SQUARE_SIZE) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
            engine: Engine to render and advance
            square_size: Pixel size of one cell
        """
        self.master = master
        self.master.title("Game of Life")
        self.engine = engine

        # Display parameters
        self.square_size = square_size
        self.canvas_width = engine.columns * square_size
        self.canvas_height = engine.rows * square_size

        # Loop state; the first tick renders immediately
        self.running = True
        self.ticks = TICKS_PER_GENERATION
        self._after_id: Optional[str] = None

        self.setup_ui()
        self.master.protocol("WM_DELETE_WINDOW", self.on_close)

    def setup_ui(self) -> None:
        """Create the canvas and controls."""
        self.canvas = tk.Canvas(
            self.master,
            width=self.canvas_width,
            height=self.canvas_height,
            bg=BACKGROUND,
            highlightthickness=0,
        )
        self.canvas.pack()

        controls = tk.Frame(self.master)
        controls.pack(fill=tk.X)

        self.pause_btn = tk.Button(controls, text="Pause", command=self.toggle_running)
        self.pause_btn.pack(side=tk.LEFT)

        self.step_btn = tk.Button(controls, text="Step", command=self.step)
        self.step_btn.pack(side=tk.LEFT)

        self.generation_label = tk.Label(controls, text="Generation: 0")
        self.generation_label.pack(side=tk.RIGHT)

    def render(self) -> None:
        """Clear the canvas and draw every living cell as a filled square."""
        self.canvas.delete("all")
        self.canvas.create_rectangle(
            0, 0, self.canvas_width, self.canvas_height, fill=BACKGROUND, outline=""
        )

        size = self.square_size
        for row, column in self.engine.grid.alive_cells():
            x, y = column * size, row * size
            self.canvas.create_rectangle(x, y, x + size, y + size, fill=CELL_COLOR, outline="")

        self.generation_label.config(text=f"Generation: {self.engine.generation}")

    def step(self) -> None:
        """Render the current generation, then advance the engine."""
        self.render()
        self.engine.advance()

    def toggle_running(self) -> None:
        """Pause or resume the timed loop."""
        self.running = not self.running
        self.pause_btn.config(text="Pause" if self.running else "Resume")

    def tick(self) -> None:
        """Handle one timer tick, stepping every TICKS_PER_GENERATION ticks."""
        if not self.running:
            return

        if self.ticks >= TICKS_PER_GENERATION:
            self.step()
            self.ticks = 0
        else:
            self.ticks += 1

    def update_loop(self) -> None:
        """Main update loop."""
        self.tick()
        self._after_id = self.master.after(TICK_MS, self.update_loop)

    def stop(self) -> None:
        """Cancel the scheduled update loop."""
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None

    def on_close(self) -> None:
        """Stop the loop and close the window."""
        self.stop()
        self.master.destroy()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the Tkinter GUI.

    The initial cells are validated before any window is created.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for invalid input)
    """
    args = create_parser(gui=True).parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not validate_args(args):
        return 1

    try:
        cells = collect_initial_cells(args, PatternLibrary())
    except InvalidInput as e:
        print(e.describe_ranges())
        return 1

    engine = GenerationEngine(args.rows, args.columns, cells)

    root = tk.Tk()
    root.resizable(False, False)

    app = TkinterLifeGUI(root, engine)
    app.update_loop()

    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
