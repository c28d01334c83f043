from __future__ import annotations

import argparse
import io

import pytest

from gaussjordan.cli import build_parser, main
from gaussjordan.config import EMPTY_NOTICE, EPSILON, Settings


def run_cli(text: str, *argv: str):
    out = io.StringIO()
    code = main(list(argv), io.StringIO(text), out)
    return code, out.getvalue()


def test_reduces_and_prints_both_matrices():
    code, output = run_cli("2 2\n2 4\n1 3\n", "--no-banner")
    assert code == 0
    original, reduced = output.split("The row reduced matrix: \n")
    assert "The original matrix: \n" in original
    assert "|2.0000000000 " in original
    assert reduced == (
        "\n"
        "|" + "1.0000000000 ".ljust(25) + "0.0000000000 ".ljust(25) + "|\n"
        "|" + "0.0000000000 ".ljust(25) + "1.0000000000 ".ljust(25) + "|\n"
        "\n"
    )


def test_banner_is_printed_by_default():
    code, output = run_cli("1 1 5\n")
    assert code == 0
    assert output.startswith("*****")
    assert output.rstrip().endswith("|1.0000000000             |")


def test_empty_matrix_prints_notice_twice():
    code, output = run_cli("0\n3\n", "--no-banner")
    assert code == 0
    assert output.count(EMPTY_NOTICE) == 2
    assert "elements for row" not in output


def test_truncated_input_exits_with_error(capsys):
    code, _ = run_cli("2 2\n1\n", "--no-banner")
    assert code == 1
    assert "Input ended before the matrix was complete." in capsys.readouterr().err


def test_width_and_epsilon_options():
    code, output = run_cli("1 2\n0.25 1\n", "--no-banner", "--width", "14", "--epsilon", "0.5")
    assert code == 0
    reduced = output.split("The row reduced matrix: \n")[1]
    assert "|0.2500000000  1.0000000000  |" in reduced


def test_negative_epsilon_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        run_cli("1 1 1\n", "--epsilon", "-1")
    assert excinfo.value.code == 2


def test_settings_from_parsed_args():
    args = build_parser().parse_args(["--progress", "--epsilon", "1e-9"])
    settings = Settings.from_args(args)
    assert settings == Settings(epsilon=1e-9, field_width=25, progress=True)
    assert Settings.from_args(argparse.Namespace()).epsilon == EPSILON
