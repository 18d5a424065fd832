"""Tests for the command line interface."""

import pytest
from percolation_fire.cli import build_parser, main


def output_lines(capsys) -> tuple[list[str], str]:
    captured = capsys.readouterr()
    return captured.out.splitlines(), captured.err


class TestParser:
    """Test cases for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(["16"])
        assert args.side == 16
        assert args.resolution == 100
        assert args.sample_size == 10_000
        assert args.workers is None
        assert args.verbose == 0

    def test_short_and_long_options(self):
        args = build_parser().parse_args(["8", "-r", "5", "--sample", "40", "-w", "2", "--seed", "9"])
        assert (args.side, args.resolution, args.sample_size, args.workers, args.seed) == (8, 5, 40, 2, 9)

    @pytest.mark.parametrize("argv", [["abc"], ["-3"], ["8", "-r", "x"], ["8", "-s", "1.5"], []])
    def test_parse_failures_exit_with_error(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2
        assert capsys.readouterr().out == ""


class TestMain:
    """Test cases for the main entry point."""

    def test_zero_side_prints_error_only(self, capsys):
        assert main(["0"]) == 0
        out, err = output_lines(capsys)
        assert out == []
        assert "non-zero lattice" in err

    def test_low_resolution_prints_error_only(self, capsys):
        assert main(["5", "-r", "2"]) == 0
        out, err = output_lines(capsys)
        assert out == []
        assert "resolution must be higher than 2" in err

    def test_zero_sample_prints_error_only(self, capsys):
        assert main(["5", "-r", "3", "-s", "0"]) == 0
        out, err = output_lines(capsys)
        assert out == []
        assert err

    def test_resolution_three_gives_four_records(self, capsys):
        assert main(["4", "-r", "3", "-s", "10", "-w", "1", "--seed", "1"]) == 0
        out, _ = output_lines(capsys)
        assert len(out) == 4
        assert [line.split("\t")[0] for line in out] == ["0.0000", "0.3333", "0.6667", "1.0000"]

    def test_record_format(self, capsys):
        main(["3", "-r", "4", "-s", "5", "-w", "1", "--seed", "2"])
        out, _ = output_lines(capsys)
        assert out[0] == "0.0000\t0.00000"
        assert out[-1] == "1.0000\t1.00000"
        for line in out:
            p, mean = line.split("\t")
            assert len(p.split(".")[1]) == 4
            assert len(mean.split(".")[1]) == 5
