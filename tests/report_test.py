"""
Tests the identity report model and its renderings
"""

import json

import pytest
import yaml

from pywhoami.descriptors.arch import Arch
from pywhoami.exceptions.exceptions import TemplateError, UnavailableError
from pywhoami.report.render import render_text
from pywhoami.report.schema import IdentityReport, collect_report


def test_collect_report(stub_target):
    """
    Tests that the report holds the defaulting layer's answers
    """
    report = collect_report(target=stub_target(realname=b""))

    assert report.username == "alice"
    assert report.realname == "alice"
    assert report.hostname == "wonderland"
    assert report.platform == "Linux"
    assert report.desktop_env == "Gnome"
    assert report.arch == "x86_64"
    assert report.arch_width == 64
    assert [lang.tag for lang in report.langs] == ["en/US"]
    assert report.langs[0].region == "US"


def test_collect_report_unknown_arch(stub_target):
    """
    Tests that an architecture outside the catalog has no width
    """
    report = collect_report(target=stub_target(arch=Arch.unknown("vax")))
    assert report.arch == "Unknown: vax"
    assert report.arch_width is None
    assert "arch_width" not in report.dump()

    report = collect_report(target=stub_target(arch=UnavailableError("no machine")))
    assert report.arch == "Unknown"


def test_json_and_yaml(stub_target):
    """
    Tests the machine-readable renderings
    """
    report = collect_report(target=stub_target(langs="de_DE;en"))

    as_json = json.loads(report.to_json())
    as_yaml = yaml.safe_load(report.to_yaml())

    assert as_json == as_yaml == report.dump()
    assert list(as_json) == [
        "version",
        "username",
        "realname",
        "account",
        "devicename",
        "hostname",
        "distro",
        "desktop_env",
        "platform",
        "arch",
        "arch_width",
        "langs",
    ]
    assert as_json["langs"] == [
        {"tag": "de/DE", "code": "de", "region": "DE"},
        {"tag": "en", "code": "en"},
    ]
    assert IdentityReport.model_validate(as_json).dump() == report.dump()


def test_render_text(stub_target):
    """
    Tests the aligned text table
    """
    text = render_text(collect_report(target=stub_target()))
    lines = text.splitlines()

    assert len(lines) == 11
    assert lines[0].startswith("User's Name ")
    assert lines[0].endswith("Alice Liddell")
    assert "Device's CPU Width     64 bits" in lines
    # values start in the same column, after the widest label
    assert all(line[21:23] == "  " and line[23] != " " for line in lines)
    assert lines[1].split("  ")[-1].strip() == "alice"


def test_render_custom_template(stub_target):
    """
    Tests rendering with an embedder's template, and template failures
    """
    report = collect_report(target=stub_target())

    assert render_text(report, template="{{ report.username }}@{{ report.hostname }}") == "alice@wonderland"

    with pytest.raises(TemplateError) as exc_info:
        render_text(report, template="{% for %}", template_name="broken")
    assert exc_info.value.context["template_name"] == "broken"
