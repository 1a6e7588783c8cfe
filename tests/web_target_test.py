"""
Tests the browser provider
"""

import pytest

from pywhoami import api
from pywhoami.descriptors.arch import Arch
from pywhoami.descriptors.desktop import DesktopEnv
from pywhoami.descriptors.platform import Platform
from pywhoami.exceptions.exceptions import UnavailableError
from pywhoami.targets.web import WebTarget, parse_accept_language, platform_segment

# ---- Constants ----
chrome_windows = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
firefox_ubuntu = "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:120.0) Gecko/20100101 Firefox/120.0"
firefox_linux = "Mozilla/5.0 (X11; Linux x86_64; rv:120.0) Gecko/20100101 Firefox/120.0"
safari_mac = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Safari/605.1.15"
)
safari_iphone = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 16_5 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.5 Mobile/15E148 Safari/604.1"
)
chrome_android = (
    "Mozilla/5.0 (Linux; Android 13; Pixel 7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
)


def test_platform_segment():
    """
    Tests extraction of the first parenthesised segment
    """
    assert platform_segment(chrome_windows) == "Windows NT 10.0; Win64; x64"
    assert platform_segment("curl/8.4.0") is None


def test_distro():
    """
    Tests distro names parsed from user agents
    """
    assert WebTarget(chrome_windows).distro() == "Windows 10"
    assert WebTarget(firefox_ubuntu).distro() == "Ubuntu"
    assert WebTarget(firefox_linux).distro() == "Unknown Linux"
    assert WebTarget(safari_mac).distro() == "macOS 10.15.7"
    assert WebTarget(safari_iphone).distro() == "iOS 16.5"
    assert WebTarget(chrome_android).distro() == "Android 13"
    assert WebTarget("curl/8.4.0").distro() == ""


def test_platform():
    """
    Tests platforms parsed from user agents
    """
    assert WebTarget(chrome_windows).platform() == Platform.WINDOWS
    assert WebTarget(firefox_linux).platform() == Platform.LINUX
    assert WebTarget(safari_mac).platform() == Platform.MAC
    assert WebTarget(safari_iphone).platform() == Platform.IOS
    assert WebTarget(chrome_android).platform() == Platform.ANDROID
    assert WebTarget("curl/8.4.0").platform() == Platform.unknown()


def test_devicename_is_browser():
    """
    Tests that the device name is the browser name
    """
    assert WebTarget(chrome_windows).devicename() == "Chrome"
    assert WebTarget(firefox_linux).devicename() == "Firefox"
    assert WebTarget(safari_mac).devicename() == "Safari"
    assert WebTarget("Mozilla/5.0 (Windows NT 10.0) Chrome/120.0 Safari/537.36 Edg/120.0").devicename() == "Edge"


def test_anonymous_identity():
    """
    Tests the fixed identity of a browser client
    """
    target = WebTarget(firefox_linux)

    assert api.username(target=target) == "anonymous"
    assert api.realname(target=target) == "Anonymous"
    assert api.hostname(target=target) == "localhost"
    assert api.desktop_env(target=target) == DesktopEnv.WEB_BROWSER
    assert api.distro(target=WebTarget("curl/8.4.0")) == "Unknown"


def test_arch():
    """
    Tests architectures named by user agents
    """
    assert WebTarget(chrome_windows).arch() == Arch.X64
    assert WebTarget(firefox_linux).arch() == Arch.X64

    with pytest.raises(UnavailableError):
        WebTarget(safari_mac).arch()
    assert api.arch(target=WebTarget(safari_mac)) == Arch.unknown()


def test_langs_from_accept_language():
    """
    Tests that Accept-Language is ordered by quality
    """
    assert parse_accept_language("fr;q=0.5, de-DE, en;q=0.9, *;q=0.1") == ["de-DE", "en", "fr"]
    assert parse_accept_language("") == []
    assert parse_accept_language("en;q=0") == []

    target = WebTarget(chrome_windows, accept_language="de-DE,de;q=0.9,en;q=0.8")
    assert [str(lang) for lang in api.langs(target=target)] == ["de/DE", "de", "en"]
    assert api.langs(target=WebTarget(chrome_windows)) == []
