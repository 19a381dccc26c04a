"""Tests for the CLI frontend."""

import pytest

from lifegrid.core.engine import GenerationEngine
from lifegrid.core.errors import InvalidInput
from lifegrid.core.patterns import PatternLibrary
from lifegrid.frontends.cli import (
    CLIGameOfLife,
    collect_initial_cells,
    create_parser,
    main,
    parse_cells,
    print_results,
    validate_args,
)


class TestParseCells:
    """Test cases for raw initial-state parsing."""

    def test_valid_pairs(self):
        """Test parsing row/column pairs."""
        assert parse_cells(["5", "5", "5", "6"], 23, 35) == [(5, 5), (5, 6)]

    def test_empty(self):
        """Test that no values means no cells."""
        assert parse_cells([], 1, 10) == []

    def test_odd_length(self):
        """Test that an unpaired value rejects the input."""
        with pytest.raises(InvalidInput) as exc_info:
            parse_cells(["0", "1", "0"], 1, 10)
        assert "row and a column" in exc_info.value.reason

    def test_not_an_integer(self):
        """Test that a non-numeric value rejects the input."""
        with pytest.raises(InvalidInput):
            parse_cells(["0", "x"], 1, 10)

    @pytest.mark.parametrize(
        "values", [["-1", "0"], ["1", "0"], ["0", "-1"], ["0", "10"], ["0", "1", "0", "10"]]
    )
    def test_out_of_range(self, values):
        """Test that a single bad coordinate rejects the whole input."""
        with pytest.raises(InvalidInput):
            parse_cells(values, 1, 10)

    def test_describe_ranges(self):
        """Test the message reported for invalid input."""
        with pytest.raises(InvalidInput) as exc_info:
            parse_cells(["0", "10"], 1, 10)

        assert exc_info.value.describe_ranges() == (
            "The input is invalid!\n"
            "The y position for a cell should be between 0 and 0.\n"
            "The x position for a cell should be between 0 and 9."
        )


class TestCollectInitialCells:
    """Test cases for combining positional cells with patterns."""

    def test_pattern_with_offset(self):
        """Test placing a library pattern."""
        args = create_parser().parse_args(["-r", "10", "-c", "10", "--pattern", "Blinker", "--offset-row", "4"])
        cells = collect_initial_cells(args, PatternLibrary())
        assert cells == [(4, 0), (4, 1), (4, 2)]

    def test_pattern_and_cells(self):
        """Test that positional cells are kept alongside a pattern."""
        args = create_parser().parse_args(["-r", "10", "-c", "10", "--pattern", "Block", "9", "9"])
        cells = collect_initial_cells(args, PatternLibrary())
        assert cells == [(9, 9), (0, 0), (0, 1), (1, 0), (1, 1)]

    def test_unknown_pattern(self):
        """Test that an unknown pattern is rejected."""
        args = create_parser().parse_args(["--pattern", "Nope"])
        with pytest.raises(InvalidInput):
            collect_initial_cells(args, PatternLibrary())

    def test_pattern_out_of_bounds(self):
        """Test that a pattern placed off the grid is rejected."""
        args = create_parser().parse_args(["-r", "5", "-c", "5", "--pattern", "Glider", "--offset-column", "3"])
        with pytest.raises(InvalidInput):
            collect_initial_cells(args, PatternLibrary())


class TestCLIGameOfLife:
    """Test cases for the CLI Game of Life."""

    def test_initialization(self):
        """Test CLI initialization."""
        cli = CLIGameOfLife()
        assert len(cli.pattern_library.list_patterns()) > 0

    def test_run_simulation(self):
        """Test running a blinker for an odd number of generations."""
        cli = CLIGameOfLife()

        final_gen, stats = cli.run_simulation(
            rows=23,
            columns=35,
            cells=[(5, 5), (5, 6), (5, 7)],
            generations=3,
        )

        assert final_gen == 3
        assert stats["generation"] == 3
        assert stats["initial_population"] == 3
        assert stats["population"] == 3
        assert stats["grid_size"] == (23, 35)
        assert stats["alive_cells"] == [(4, 6), (5, 6), (6, 6)]
        assert "duration_seconds" in stats

    def test_run_simulation_show_grid(self, capsys):
        """Test that every generation is printed with --show-grid."""
        cli = CLIGameOfLife()
        cli.run_simulation(rows=1, columns=3, cells=[(0, 1)], generations=1, show_grid=True)

        out = capsys.readouterr().out
        assert "Generation 0:\n.*." in out
        assert "Generation 1:\n..." in out

    def test_format_grid_too_large(self):
        """Test that large grids are not printed."""
        cli = CLIGameOfLife()
        engine = GenerationEngine(100, 5)
        assert cli._format_grid(engine) == "Grid too large to display (100x5)"

    def test_list_patterns(self, capsys):
        """Test pattern listing output."""
        CLIGameOfLife().list_patterns()

        out = capsys.readouterr().out
        assert "Available patterns:" in out
        assert "Oscillators:" in out
        assert "Glider: 3x3, 5 cells" in out


class TestArguments:
    """Test cases for argument parsing and validation."""

    def test_defaults(self):
        """Test default option values."""
        args = create_parser().parse_args([])

        assert args.rows == 1
        assert args.columns == 10
        assert args.generations == 10
        assert args.cells == []
        assert args.pattern is None

    def test_negative_cell_values_parse(self):
        """Test that negative positionals reach validation instead of argparse."""
        args = create_parser().parse_args(["--", "-1", "0"])
        assert args.cells == ["-1", "0"]

    def test_validate_args(self, capsys):
        """Test validation of numeric options."""
        parser = create_parser()

        assert validate_args(parser.parse_args(["-r", "3", "-c", "3"]))
        assert not validate_args(parser.parse_args(["-r", "0"]))
        assert not validate_args(parser.parse_args(["-c", "-2"]))
        assert not validate_args(parser.parse_args(["-n", "0"]))
        assert not validate_args(parser.parse_args(["--offset-row", "-1"]))

        assert "Rows must be positive" in capsys.readouterr().out

    def test_gui_parser(self):
        """Test the windowed parser keeps grid and pattern options only."""
        parser = create_parser(gui=True)
        args = parser.parse_args(["-r", "3", "-c", "3", "1", "1"])

        assert not hasattr(args, "generations")
        assert not hasattr(args, "show_grid")
        assert not hasattr(args, "list_patterns")
        assert validate_args(args)

        assert "lifegrid-gui" in parser.epilog
        assert "lifegrid-cli" not in parser.epilog
        assert "lifegrid-gui" not in create_parser().epilog

    def test_print_results(self, capsys):
        """Test result printing."""
        stats = {
            "population": 3,
            "initial_population": 3,
            "grid_size": (23, 35),
            "population_density": 3 / (23 * 35),
            "duration_seconds": 0.01,
            "generations_per_second": 100.0,
        }
        print_results(2, stats, verbose=True)

        out = capsys.readouterr().out
        assert "Simulation completed after 2 generations" in out
        assert "Grid size: 23x35" in out


class TestMain:
    """Test cases for the CLI entry point."""

    def test_success(self, capsys):
        """Test a normal run."""
        assert main(["-r", "23", "-c", "35", "-n", "2", "5", "5", "5", "6", "5", "7"]) == 0
        assert "Final population: 3" in capsys.readouterr().out

    def test_invalid_cells(self, capsys):
        """Test that invalid cells abort before simulating."""
        assert main(["-r", "1", "-c", "10", "0", "10"]) == 1

        out = capsys.readouterr().out
        assert "The input is invalid!" in out
        assert "between 0 and 9" in out
        assert "Simulation completed" not in out

    def test_odd_cells(self, capsys):
        """Test that an unpaired value aborts."""
        assert main(["0", "1", "0"]) == 1
        assert "The input is invalid!" in capsys.readouterr().out

    def test_invalid_dimensions(self, capsys):
        """Test that non-positive dimensions abort."""
        assert main(["-r", "0"]) == 1
        assert "Rows must be positive" in capsys.readouterr().out

    def test_list_patterns(self, capsys):
        """Test --list-patterns exits early."""
        assert main(["--list-patterns"]) == 0
        assert "Available patterns:" in capsys.readouterr().out
