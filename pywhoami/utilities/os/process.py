"""
process.py - Run short-lived helper programs and capture their output.

Some identity facts have no file or library source on some systems and are only
available from small helper programs (`hostnamectl --pretty`, `scutil --get
ComputerName`, `sw_vers`). These helpers block until the program exits; no timeout
is applied here, so callers that need one must wrap the query themselves.

Output is returned as raw bytes: decoding is the codec's job, not this module's.
"""

import subprocess
from typing import Sequence

from pywhoami.exceptions.exceptions import ExecutionError


def run_command(command: Sequence[str]) -> bytes:
    """
    Run a command and return its standard output with one trailing newline removed.

    Args:
        command: Program and arguments, e.g. ``["hostnamectl", "--pretty"]``.

    Returns:
        bytes: Captured stdout.

    Raises:
        ExecutionError: If the program cannot be spawned or exits non-zero.
    """
    printable = " ".join(command)
    try:
        result = subprocess.run(
            list(command),
            capture_output=True,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        raise ExecutionError(
            message=f"Could not spawn `{command[0]}`",
            command=printable,
            context={"os_error": str(exc)},
        ) from exc

    if result.returncode != 0:
        raise ExecutionError(
            message=f"`{printable}` exited unsuccessfully",
            command=printable,
            exit_code=result.returncode,
            stderr=result.stderr.decode("utf-8", errors="replace").strip(),
        )

    output = result.stdout
    if output.endswith(b"\r\n"):
        return output[:-2]
    if output.endswith(b"\n"):
        return output[:-1]
    return output
