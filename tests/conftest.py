"""
Shared fixtures: a scriptable provider, and isolation of the package-wide config.
"""

import pytest

from pywhoami.config import config
from pywhoami.descriptors.arch import Arch
from pywhoami.descriptors.desktop import DesktopEnv
from pywhoami.descriptors.platform import Platform
from pywhoami.targets.base import Target

LOCALE_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


class StubTarget(Target):
    """
    Provider whose answers are given up front. An answer that is an exception
    instance is raised instead of returned.
    """

    def __init__(self, wide_strings=False, **answers):
        self.wide_strings = wide_strings
        self.answers = {
            "langs": "en_US.UTF-8",
            "username": b"alice",
            "realname": b"Alice Liddell",
            "devicename": b"Alice's Laptop",
            "hostname": "Wonderland",
            "distro": "Fedora Linux 40",
            "desktop_env": DesktopEnv.GNOME,
            "platform": Platform.LINUX,
            "arch": Arch.X64,
        }
        self.answers.update(answers)
        self.calls = []

    def _answer(self, name):
        self.calls.append(name)
        value = self.answers[name]
        if isinstance(value, Exception):
            raise value
        return value

    def langs(self):
        return self._answer("langs")

    def username(self):
        return self._answer("username")

    def realname(self):
        return self._answer("realname")

    def account(self):
        if "account" in self.answers:
            return self._answer("account")
        return super().account()

    def devicename(self):
        return self._answer("devicename")

    def hostname(self):
        return self._answer("hostname")

    def distro(self):
        return self._answer("distro")

    def desktop_env(self):
        return self._answer("desktop_env")

    def platform(self):
        return self._answer("platform")

    def arch(self):
        return self._answer("arch")


@pytest.fixture
def stub_target():
    """Factory for StubTarget instances."""
    return StubTarget


@pytest.fixture(autouse=True)
def restore_config():
    """Undo any change a test makes to the package-wide config."""
    saved = dict(vars(config))
    yield
    for key, value in saved.items():
        setattr(config, key, value)


@pytest.fixture
def clean_locale(monkeypatch):
    """Remove every locale variable from the environment."""
    for variable in LOCALE_VARIABLES:
        monkeypatch.delenv(variable, raising=False)
