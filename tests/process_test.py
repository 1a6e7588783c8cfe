"""
Tests the helper-program runner
"""

import subprocess
from unittest.mock import patch

import pytest

from pywhoami.exceptions.exceptions import ExecutionError, UnavailableError
from pywhoami.utilities.os.process import run_command


def completed(stdout=b"", stderr=b"", returncode=0):
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=stderr
    )


@patch("pywhoami.utilities.os.process.subprocess.run")
def test_run_command_strips_one_newline(mock_run):
    """
    Tests that exactly one trailing newline is removed
    """
    mock_run.return_value = completed(stdout=b"Alice's Laptop\n")
    assert run_command(["hostnamectl", "--pretty"]) == b"Alice's Laptop"

    mock_run.return_value = completed(stdout=b"two\n\n")
    assert run_command(["hostnamectl", "--pretty"]) == b"two\n"

    mock_run.return_value = completed(stdout=b"crlf\r\n")
    assert run_command(["hostnamectl", "--pretty"]) == b"crlf"


@patch("pywhoami.utilities.os.process.subprocess.run")
def test_run_command_non_zero_exit(mock_run):
    """
    Tests that a failing program raises ExecutionError with its details
    """
    mock_run.return_value = completed(stderr=b"not set\n", returncode=1)

    with pytest.raises(ExecutionError) as exc_info:
        run_command(["scutil", "--get", "ComputerName"])

    assert exc_info.value.exit_code == 1
    assert exc_info.value.command == "scutil --get ComputerName"
    assert exc_info.value.context["stderr"] == "not set"


@patch(
    "pywhoami.utilities.os.process.subprocess.run",
    side_effect=FileNotFoundError("hostnamectl"),
)
def test_run_command_missing_program(mock_run):
    """
    Tests that a program that cannot be spawned counts as unavailable
    """
    with pytest.raises(UnavailableError):
        run_command(["hostnamectl", "--pretty"])
