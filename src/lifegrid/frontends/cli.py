"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.engine import GenerationEngine
from ..core.errors import InvalidInput, LifeGridError
from ..core.patterns import PatternLibrary

# Grid size of the original window, one row of ten cells
DEFAULT_ROWS = 1
DEFAULT_COLUMNS = 10
DEFAULT_GENERATIONS = 10


def validate_cells(cells: Iterable[Tuple[int, int]], rows: int, columns: int) -> List[Tuple[int, int]]:
    """Check that every (row, column) pair lies inside the grid.

    Args:
        cells: Candidate (row, column) pairs
        rows: Number of grid rows
        columns: Number of grid columns

    Returns:
        The pairs as a list

    Raises:
        InvalidInput: On the first pair outside the grid
    """
    checked = []
    for row, column in cells:
        if not 0 <= row < rows:
            raise InvalidInput(f"Row {row} is outside 0-{rows - 1}", rows, columns)
        if not 0 <= column < columns:
            raise InvalidInput(f"Column {column} is outside 0-{columns - 1}", rows, columns)
        checked.append((row, column))
    return checked


def parse_cells(values: Sequence[str], rows: int, columns: int) -> List[Tuple[int, int]]:
    """Parse raw "row column row column ..." arguments into cell pairs.

    The whole input is rejected if any value is malformed or out of range.

    Args:
        values: Raw string values from the command line
        rows: Number of grid rows
        columns: Number of grid columns

    Returns:
        List of (row, column) pairs

    Raises:
        InvalidInput: If a value is not an integer, the count is odd, or a
            coordinate lies outside the grid
    """
    numbers = []
    for value in values:
        try:
            numbers.append(int(value))
        except (TypeError, ValueError):
            raise InvalidInput(f"Cell coordinate '{value}' is not an integer", rows, columns) from None

    if len(numbers) % 2 != 0:
        raise InvalidInput(
            f"Every cell needs a row and a column, got {len(numbers)} values", rows, columns
        )

    return validate_cells(zip(numbers[0::2], numbers[1::2]), rows, columns)


def collect_initial_cells(
    args: argparse.Namespace, pattern_library: PatternLibrary
) -> List[Tuple[int, int]]:
    """Gather the initial living cells from positional values and --pattern.

    Args:
        args: Parsed (and validated) arguments
        pattern_library: Library used to resolve --pattern

    Returns:
        List of (row, column) pairs, all inside the grid

    Raises:
        InvalidInput: If the cells are malformed, out of range, or the
            pattern is unknown
    """
    cells = parse_cells(args.cells, args.rows, args.columns)

    if args.pattern:
        pattern = pattern_library.get_pattern(args.pattern)
        if pattern is None:
            raise InvalidInput(f"Pattern '{args.pattern}' not found", args.rows, args.columns)
        placed = pattern.offset(args.offset_row, args.offset_column)
        cells.extend(validate_cells(placed.cells, args.rows, args.columns))

    return cells


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self) -> None:
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def run_simulation(
        self,
        rows: int,
        columns: int,
        cells: List[Tuple[int, int]],
        generations: int,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, Dict[str, Any]]:
        """Run a Game of Life simulation for a fixed number of generations.

        Args:
            rows: Grid rows
            columns: Grid columns
            cells: Initial (row, column) pairs of living cells
            generations: Number of generations to advance
            verbose: Print progress updates
            show_grid: Print the grid after every generation

        Returns:
            Tuple of (final_generation, statistics)
        """
        engine = GenerationEngine(rows, columns, cells)
        initial_population = engine.population

        if verbose:
            print(f"Initializing {rows}x{columns} grid")
            print(f"Initial population: {initial_population} cells")

        if show_grid:
            print("\nGeneration 0:")
            print(self._format_grid(engine))

        start_time = time.time()
        for _ in range(generations):
            engine.advance()
            if show_grid:
                print(f"\nGeneration {engine.generation}:")
                print(self._format_grid(engine))
        duration = time.time() - start_time

        stats = {
            "generation": engine.generation,
            "population": engine.population,
            "initial_population": initial_population,
            "grid_size": engine.shape,
            "population_density": engine.population / (rows * columns),
            "alive_cells": engine.grid.alive_cells(),
            "duration_seconds": duration,
            "generations_per_second": engine.generation / duration if duration > 0 else 0.0,
        }

        return engine.generation, stats

    def _format_grid(self, engine: GenerationEngine, max_size: int = 80) -> str:
        """Format grid for display, truncating if too large.

        Args:
            engine: Engine whose current generation is shown
            max_size: Maximum dimension to display

        Returns:
            Formatted grid string
        """
        if engine.rows > max_size or engine.columns > max_size:
            return f"Grid too large to display ({engine.rows}x{engine.columns})"

        return str(engine.grid)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


CLI_EPILOG = """
Initial cells are given as row/column pairs:
  lifegrid-cli --rows 23 --columns 35 5 5 5 6 5 7

Examples:
  # Blinker, printing every generation
  lifegrid-cli -r 10 -c 10 -n 4 --show-grid 5 4 5 5 5 6

  # Glider from the pattern library
  lifegrid-cli -r 20 -c 20 --pattern Glider --offset-row 2 --offset-column 2 -g

  # List available patterns
  lifegrid-cli --list-patterns
"""

GUI_EPILOG = """
Initial cells are given as row/column pairs:
  lifegrid-gui --rows 23 --columns 35 5 5 5 6 5 7

Examples:
  # Glider from the pattern library
  lifegrid-gui -r 20 -c 20 --pattern Glider --offset-row 2 --offset-column 2
"""


def create_parser(gui: bool = False) -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Args:
        gui: Build the parser for the windowed frontend, which runs until
            closed and has no generation count, grid printing, or pattern listing

    Returns:
        Configured ArgumentParser
    """
    if gui:
        description = "Show Conway's Game of Life on a bounded grid"
    else:
        description = "Run Conway's Game of Life on a bounded grid"

    parser = argparse.ArgumentParser(
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=GUI_EPILOG if gui else CLI_EPILOG,
    )

    parser.add_argument(
        "cells",
        nargs="*",
        metavar="N",
        help="Initial living cells as row column pairs",
    )

    # Grid configuration
    parser.add_argument(
        "-r", "--rows", type=int, default=DEFAULT_ROWS, help=f"Grid rows (default: {DEFAULT_ROWS})"
    )

    parser.add_argument(
        "-c",
        "--columns",
        type=int,
        default=DEFAULT_COLUMNS,
        help=f"Grid columns (default: {DEFAULT_COLUMNS})",
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Add a library pattern to the initial cells",
    )

    parser.add_argument(
        "--offset-row",
        type=int,
        default=0,
        help="Row offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "--offset-column",
        type=int,
        default=0,
        help="Column offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    if gui:
        return parser

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=DEFAULT_GENERATIONS,
        help=f"Generations to simulate (default: {DEFAULT_GENERATIONS})",
    )

    # Output configuration
    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display the grid after every generation",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.rows <= 0:
        errors.append("Rows must be positive")

    if args.columns <= 0:
        errors.append("Columns must be positive")

    if getattr(args, "generations", 1) <= 0:
        errors.append("Generations must be positive")

    if args.offset_row < 0:
        errors.append("Pattern row offset must be non-negative")

    if args.offset_column < 0:
        errors.append("Pattern column offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(final_generation: int, stats: Dict[str, Any], verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        stats: Simulation statistics
        verbose: Whether to print detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Final population: {stats['population']}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
        print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI interface.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        cells = collect_initial_cells(args, cli.pattern_library)
    except InvalidInput as e:
        print(f"Error: {e.reason}")
        print(e.describe_ranges())
        return 1

    try:
        final_generation, stats = cli.run_simulation(
            rows=args.rows,
            columns=args.columns,
            cells=cells,
            generations=args.generations,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except LifeGridError as e:
        print(f"Error: {e}")
        return 1

    print_results(final_generation, stats, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
