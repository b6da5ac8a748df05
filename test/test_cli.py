"""
Tests for the psi-power-tables, shoup-tables and find-psi drivers
"""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from ntt_tables.cli import EXIT_FAILURE, EXIT_SUCCESS, find_psi_main, psi_power_main, shoup_main


def error_messages(caplog):
    return [r.getMessage() for r in caplog.records if r.levelno >= logging.ERROR]


def test_psi_power_tables_output(capsys, caplog):
    caplog.set_level(logging.INFO)
    assert psi_power_main(["17", "4", "2"]) == EXIT_SUCCESS

    out = capsys.readouterr().out
    assert out == (
        "\nconst int32_t psi_powers_ntt17n4[4] = {\n"
        "        1,     2,     4,     8,\n"
        "};\n\n"
        "\nconst int32_t inv_psi_powers_ntt17n4[4] = {\n"
        "        1,     9,    13,    15,\n"
        "};\n\n"
        "\nconst int32_t scaled_inv_psi_powers_ntt17n4[4] = {\n"
        "       13,    15,    16,     8,\n"
        "};\n\n"
    )

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "Parameters"
    assert "q = 17" in messages
    assert "psi^2 = 4" in messages
    assert "psi^(-1) = 9" in messages
    assert "psi^(-2) = 13" in messages
    assert "n^(-1) = 13" in messages


def test_shoup_tables_output(capsys, caplog):
    caplog.set_level(logging.INFO)
    assert shoup_main(["17", "4", "2"]) == EXIT_SUCCESS

    out = capsys.readouterr().out
    assert out == (
        "\nconst int32_t shoup_ntt4_17[4] = {\n"
        "        0,     1,     1,     4,\n"
        "};\n\n"
    )
    messages = [r.getMessage() for r in caplog.records]
    assert "n^(-1) = 13" in messages
    assert "psi^(-1) = 9" not in messages


@pytest.mark.parametrize("main", [psi_power_main, shoup_main])
@pytest.mark.parametrize(
    "args,message",
    [
        (["17", "4"], "Usage:"),
        (["17", "4", "2", "1"], "Usage:"),
        (["1", "4", "2"], "Invalid modulus 1: must be at least 2"),
        (["65535", "4", "2"], "The modulus is too large"),
        (["17", "1", "2"], "Invalid size 1: must be at least 2"),
        (["17", "100000", "2"], "The size is too large"),
        (["17", "4", "1"], "psi must be between 2 and 16"),
        (["17", "4", "17"], "psi must be between 2 and 16"),
        (["abc", "4", "2"], "Invalid modulus abc"),
        (["1_7", "4", "2"], "Invalid modulus 1_7"),
        (["\u0661\u0667", "4", "2"], "not a decimal integer"),
        (["17", "0x4", "2"], "Invalid size 0x4"),
        (["17", "4", "3"], "is not an n-th root of -1"),
        (["17", "6", "4"], "not a primitive n-th root of unity"),
        (["9", "3", "2"], "not invertible modulo 9"),
    ],
)
def test_rejected_arguments(main, args, message, capsys, caplog):
    assert main(args) == EXIT_FAILURE
    assert capsys.readouterr().out == ""
    errors = error_messages(caplog)
    assert len(errors) == 1
    assert message in errors[0]


def test_shoup_requires_power_of_two(capsys, caplog):
    # valid root for n = 3, but the Shoup layout needs n = 2^k
    assert psi_power_main(["13", "3", "4"]) == EXIT_SUCCESS
    capsys.readouterr()

    assert shoup_main(["13", "3", "4"]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""
    assert "not a power of two" in error_messages(caplog)[0]


def test_large_table_shape(capsys):
    assert psi_power_main(["257", "128", "3"]) == EXIT_SUCCESS
    out = capsys.readouterr().out
    assert out.count("const int32_t") == 3
    assert "psi_powers_ntt257n128[128] = {" in out
    # 128 values, 8 per row
    rows = [line for line in out.splitlines() if line.startswith("    ")]
    assert len(rows) == 3 * 16


def test_find_psi_with_arguments(capsys):
    assert find_psi_main(["17", "4"]) == EXIT_SUCCESS
    assert capsys.readouterr().out == "2\n"


def test_find_psi_not_found(capsys, caplog):
    assert find_psi_main(["13", "8"]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""
    assert "No psi found" in error_messages(caplog)[0]


def test_find_psi_bad_arguments(caplog):
    assert find_psi_main(["17"]) == EXIT_FAILURE
    assert "Usage:" in error_messages(caplog)[0]


def test_find_psi_param_sets(capsys):
    assert find_psi_main([]) == EXIT_SUCCESS
    out = capsys.readouterr().out
    assert "Toy n=4: n=4, q=7681, psi=" in out
    assert "BLISS-I: n=512, q=12289, psi=" in out


def test_unknown_log_level_falls_back_to_info(monkeypatch, capsys):
    monkeypatch.setenv("NTT_TABLES_LOG_LEVEL", "LOUD")
    assert psi_power_main(["17", "4", "2"]) == EXIT_SUCCESS
    assert logging.getLogger("ntt_tables").level == logging.INFO
    assert "psi_powers_ntt17n4" in capsys.readouterr().out


def test_log_level_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("NTT_TABLES_LOG_LEVEL", "debug")
    assert shoup_main(["17", "4", "2"]) == EXIT_SUCCESS
    assert logging.getLogger("ntt_tables").level == logging.DEBUG
    capsys.readouterr()


def run_driver(main, args):
    """Run a driver in a fresh interpreter, where no pytest handlers are installed"""
    env = dict(os.environ)
    env.pop("NTT_TABLES_LOG_LEVEL", None)
    code = f"import sys; from ntt_tables.cli import {main}; sys.exit({main}({args!r}))"
    return subprocess.run(
        [sys.executable, "-c", code],
        cwd=Path(__file__).resolve().parent.parent,
        env=env,
        capture_output=True,
        text=True,
    )


def test_parameters_echoed_on_stderr():
    result = run_driver("psi_power_main", ["17", "4", "2"])
    assert result.returncode == EXIT_SUCCESS
    assert result.stderr.splitlines() == [
        "Parameters",
        "q = 17",
        "n = 4",
        "psi = 2",
        "psi^2 = 4",
        "psi^(-1) = 9",
        "psi^(-2) = 13",
        "n^(-1) = 13",
    ]
    assert result.stdout.startswith("\nconst int32_t psi_powers_ntt17n4[4] = {\n")
    assert "Parameters" not in result.stdout


def test_errors_reported_on_stderr():
    result = run_driver("shoup_main", ["17", "4", "3"])
    assert result.returncode == EXIT_FAILURE
    assert result.stdout == ""
    assert "is not an n-th root of -1" in result.stderr
