"""
Tests reading /etc/os-release and /etc/machine-info style files
"""

import pytest

from pywhoami.exceptions.exceptions import InvalidDataError, UnavailableError
from pywhoami.utilities.os.release import read_key_values

# ---- Constants ----
fedora_release = b"""\
NAME="Fedora Linux"
VERSION="40 (Workstation Edition)"
ID=fedora
# PRETTY_NAME="commented out"
PRETTY_NAME='Fedora Linux 40 (Workstation Edition)'

HOME_URL="https://fedoraproject.org/"
"""


@pytest.fixture
def release_file(tmp_path):
    return tmp_path / "os-release"


def test_read_key_values(release_file):
    """
    Tests bare, single-quoted and double-quoted values, comments and blank lines
    """
    release_file.write_bytes(fedora_release)
    values = read_key_values(release_file)

    assert values["name"] == "Fedora Linux"
    assert values["id"] == "fedora"
    assert values["pretty_name"] == "Fedora Linux 40 (Workstation Edition)"
    assert values["home_url"] == "https://fedoraproject.org/"


def test_shell_escapes(release_file):
    """
    Tests backslash escapes, bare and inside double quotes
    """
    release_file.write_bytes(b"NAME=Fedora\\ Linux\n")
    assert read_key_values(release_file)["name"] == "Fedora Linux"

    release_file.write_bytes(b'PRETTY_HOSTNAME="Alice\\"s \\\\ box"\n')
    assert read_key_values(release_file)["pretty_hostname"] == 'Alice"s \\ box'


def test_missing_file(tmp_path):
    """
    Tests that a missing file is unavailable rather than empty
    """
    missing = tmp_path / "missing"
    with pytest.raises(UnavailableError) as exc_info:
        read_key_values(missing)
    assert exc_info.value.source == str(missing)


def test_not_utf8(release_file):
    """
    Tests that a file in a foreign encoding is invalid data
    """
    release_file.write_bytes(b'PRETTY_HOSTNAME="caf\xe9"\n')
    with pytest.raises(InvalidDataError):
        read_key_values(release_file)


def test_unclosed_quote(release_file):
    """
    Tests that a file that is not valid shell syntax is invalid data
    """
    release_file.write_bytes(b'NAME="Fedora\n')
    with pytest.raises(InvalidDataError) as exc_info:
        read_key_values(release_file)
    assert exc_info.value.context["source"] == str(release_file)
