"""
release.py - Read freedesktop-style ``KEY=value`` files.

Used for ``/etc/os-release`` (``PRETTY_NAME``, ``NAME``) and ``/etc/machine-info``
(``PRETTY_HOSTNAME``). Parsing is done by the ``distro`` package, which applies shell
quoting and escaping rules and returns the keys lower-cased.
"""

from pathlib import Path
from typing import Dict, Union

import distro

from pywhoami.exceptions.exceptions import InvalidDataError, UnavailableError


def read_key_values(path: Union[str, Path]) -> Dict[str, str]:
    """
    Read and parse a ``KEY=value`` file.

    Args:
        path: File in os-release syntax.

    Returns:
        dict: Values by lower-cased key.

    Raises:
        UnavailableError: If the file cannot be read.
        InvalidDataError: If the file is not UTF-8 or not valid shell syntax.
    """
    p = Path(path)
    # distro treats a missing file as an empty one
    if not p.is_file():
        raise UnavailableError(
            message=f"Could not read '{p}'",
            source=str(p),
            context={"os_error": "no such file"},
        )

    release = distro.LinuxDistribution(
        include_lsb=False,
        include_uname=False,
        os_release_file=str(p),
    )
    try:
        return release.os_release_info()
    except OSError as exc:
        raise UnavailableError(
            message=f"Could not read '{p}'",
            source=str(p),
            context={"os_error": str(exc)},
        ) from exc
    except UnicodeDecodeError as exc:
        raise InvalidDataError(
            message=f"'{p}' is not valid UTF-8",
            data=exc.object,
            context={"source": str(p), "position": exc.start},
        ) from exc
    except ValueError as exc:
        raise InvalidDataError(
            message=f"'{p}' could not be parsed",
            context={"source": str(p), "error": str(exc)},
        ) from exc
