"""
Tests the Unix provider against temporary files, a patched passwd database and a
patched environment
"""

from unittest.mock import patch

import pytest

pwd = pytest.importorskip("pwd")

from pywhoami import api, fallible  # noqa: E402
from pywhoami.config import config  # noqa: E402
from pywhoami.descriptors.arch import Arch  # noqa: E402
from pywhoami.descriptors.desktop import DesktopEnv  # noqa: E402
from pywhoami.descriptors.platform import Platform  # noqa: E402
from pywhoami.exceptions.exceptions import (  # noqa: E402
    ExecutionError,
    InvalidDataError,
    UnavailableError,
)
from pywhoami.targets.unix import UnixTarget  # noqa: E402

# ---- Constants ----
alice = pwd.struct_passwd(
    ("alice", "x", 1000, 1000, "Alice Liddell,Room 1,555-0100,,", "/home/alice", "/bin/sh")
)
alice_no_gecos = pwd.struct_passwd(
    ("alice", "x", 1000, 1000, "", "/home/alice", "/bin/sh")
)


@pytest.fixture
def target():
    return UnixTarget(platform=Platform.LINUX, machine="x86_64")


@pytest.fixture
def files(tmp_path):
    """Point the provider at temporary os-release and machine-info files."""
    config.os_release_file = tmp_path / "os-release"
    config.machine_info_file = tmp_path / "machine-info"
    return tmp_path


@patch("pywhoami.targets.unix.pwd.getpwuid", return_value=alice)
def test_passwd_names(mock_getpwuid, target):
    """
    Tests username and the GECOS full name, truncated at the first comma
    """
    assert target.username() == b"alice"
    assert target.realname() == b"Alice Liddell"
    assert target.account() == b"alice"


@patch("pywhoami.targets.unix.pwd.getpwuid", return_value=alice_no_gecos)
def test_empty_gecos(mock_getpwuid, target):
    """
    Tests that an empty GECOS field is absent, and the public realname is the login
    """
    assert target.realname() == b""
    assert api.realname(target=target) == "alice"


@patch("pywhoami.targets.unix.pwd.getpwuid", side_effect=KeyError("getpwuid(): uid not found"))
def test_missing_passwd_record(mock_getpwuid, target):
    """
    Tests that a missing passwd record is unavailable, and the public name is the default
    """
    with pytest.raises(UnavailableError):
        target.username()
    assert api.username(target=target) == "unknown"


def test_distro_pretty_name(files, target):
    """
    Tests that PRETTY_NAME is preferred
    """
    config.os_release_file.write_bytes(b'NAME="Fedora Linux"\nPRETTY_NAME="Fedora Linux 40"\n')
    assert target.distro() == "Fedora Linux 40"


def test_distro_name_only(files, target):
    """
    Tests that NAME is used when PRETTY_NAME is missing
    """
    config.os_release_file.write_bytes(b'NAME="Fedora"\nID=fedora\n')
    assert target.distro() == "Fedora"
    assert api.distro(target=target) == "Fedora"


def test_distro_unreadable(files, target):
    """
    Tests that a missing os-release is unavailable and the public distro is synthesized
    """
    with pytest.raises(UnavailableError):
        target.distro()
    assert api.distro(target=target) == "Unknown Linux"


def test_distro_without_keys(files, target):
    """
    Tests that an os-release without names is absent rather than an error
    """
    config.os_release_file.write_bytes(b"ID=custom\n")
    assert target.distro() == ""
    assert api.distro(target=target) == "Unknown Linux"


def test_devicename_from_machine_info(files, target):
    """
    Tests PRETTY_HOSTNAME from /etc/machine-info
    """
    config.machine_info_file.write_bytes(b'PRETTY_HOSTNAME="Alice\'s Laptop"\n')
    assert target.devicename() == b"Alice's Laptop"

    config.machine_info_file.write_bytes(b"ICON_NAME=computer-laptop\n")
    assert target.devicename() == b""


@patch("pywhoami.targets.unix.socket.gethostname", return_value="Wonderland")
def test_devicename_machine_info_not_utf8(mock_hostname, files, target):
    """
    Tests that an undecodable machine-info is invalid data, and the public devicename
    is the hostname
    """
    config.machine_info_file.write_bytes(b'PRETTY_HOSTNAME="caf\xe9"\n')
    with pytest.raises(InvalidDataError):
        target.devicename()
    assert api.devicename(target=target) == "wonderland"


@patch("pywhoami.targets.unix.run_command", return_value=b"Rabbit Hole")
def test_devicename_from_hostnamectl(mock_run, files, target):
    """
    Tests that hostnamectl is asked when machine-info is missing
    """
    assert target.devicename() == b"Rabbit Hole"
    mock_run.assert_called_once_with(["hostnamectl", "--pretty"])


@patch(
    "pywhoami.targets.unix.run_command",
    side_effect=ExecutionError("Could not spawn `hostnamectl`", command="hostnamectl --pretty"),
)
@patch("pywhoami.targets.unix.socket.gethostname", return_value="Wonderland")
def test_devicename_unavailable(mock_hostname, mock_run, files, target):
    """
    Tests that with neither source the public devicename is the hostname
    """
    with pytest.raises(UnavailableError):
        target.devicename()
    assert api.devicename(target=target) == "wonderland"


@patch("pywhoami.targets.unix.socket.gethostname", return_value="Wonderland")
def test_hostname_keeps_case(mock_hostname, target):
    """
    Tests that the provider preserves case
    """
    assert target.hostname() == "Wonderland"
    assert fallible.hostname(target=target) == "Wonderland"
    assert api.hostname(target=target) == "wonderland"


@patch("pywhoami.targets.unix.socket.gethostname", return_value="host\udce9")
def test_hostname_invalid_utf8(mock_hostname, target):
    """
    Tests that a hostname that is not UTF-8 is invalid data
    """
    with pytest.raises(InvalidDataError) as exc_info:
        target.hostname()
    assert exc_info.value.data == b"host\xe9"
    assert api.hostname(target=target) == "localhost"


@patch("pywhoami.targets.unix.socket.gethostname", return_value="a" * 300)
def test_hostname_bounded(mock_hostname, target):
    """
    Tests that the hostname is bounded to 255 bytes
    """
    assert len(target.hostname()) == 255


@patch("pywhoami.targets.unix.socket.gethostname", return_value="a" * 254 + "é")
def test_hostname_bounded_on_character(mock_hostname, target):
    """
    Tests that the 255-byte bound never splits a multi-byte character
    """
    assert target.hostname() == "a" * 254
    assert api.hostname(target=target) == "a" * 254


def test_desktop_env(monkeypatch, target):
    """
    Tests DESKTOP_SESSION, then XDG_CURRENT_DESKTOP, then the unknown default
    """
    monkeypatch.setenv("DESKTOP_SESSION", "plasma")
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "GNOME")
    assert target.desktop_env() == DesktopEnv.KDE

    monkeypatch.delenv("DESKTOP_SESSION")
    assert target.desktop_env() == DesktopEnv.GNOME

    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "Hyprland")
    assert target.desktop_env() == DesktopEnv.unknown("Hyprland")

    monkeypatch.delenv("XDG_CURRENT_DESKTOP")
    assert target.desktop_env() == DesktopEnv.unknown()
    assert str(target.desktop_env()) == "Unknown"


def test_langs_precedence(monkeypatch, clean_locale, target):
    """
    Tests the locale variable precedence
    """
    assert target.langs() == ""
    assert api.langs(target=target) == []

    monkeypatch.setenv("LANG", "de_DE.UTF-8")
    assert [str(lang) for lang in api.langs(target=target)] == ["de/DE"]

    monkeypatch.setenv("LC_ALL", "fr_FR.UTF-8")
    assert target.langs() == "fr_FR.UTF-8"

    monkeypatch.setenv("LANGUAGE", "pt_BR:pt:en")
    assert target.langs() == "pt_BR;pt;en"
    assert [str(lang) for lang in api.langs(target=target)] == ["pt/BR", "pt", "en"]


def test_platform_and_arch():
    """
    Tests platform passthrough and machine mapping
    """
    target = UnixTarget(platform=Platform.BSD, machine="amd64")
    assert target.platform() == Platform.BSD
    assert target.arch() == Arch.X64

    target = UnixTarget(platform=Platform.LINUX, machine="")
    with pytest.raises(UnavailableError):
        target.arch()
    assert api.arch(target=target) == Arch.unknown()
