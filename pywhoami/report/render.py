"""
render.py

Render an ``IdentityReport`` as the aligned text table printed by ``pywhoami report``.

The table is a Jinja2 template rendered from a string, so embedders can pass their own
layout with the same variables (``report`` plus ``rows``, a list of ``(label, value)``
pairs).
"""

from typing import List, Optional, Tuple

from jinja2 import Environment, TemplateError as JinjaTemplateError

from pywhoami.exceptions.exceptions import TemplateError
from pywhoami.report.schema import IdentityReport

REPORT_TEMPLATE = """\
{% set width = rows | map(attribute=0) | map('length') | max %}
{% for label, value in rows %}
{{ label.ljust(width) }}  {{ value }}
{% endfor %}
"""


def report_rows(report: IdentityReport) -> List[Tuple[str, str]]:
    width = f"{report.arch_width} bits" if report.arch_width else "unknown"
    langs = ", ".join(lang.tag for lang in report.langs) or "none"
    return [
        ("User's Name", report.realname),
        ("User's Username", report.username),
        ("User's Account", report.account),
        ("User's Languages", langs),
        ("Device's Pretty Name", report.devicename),
        ("Device's Hostname", report.hostname),
        ("Device's Platform", report.platform),
        ("Device's OS Distro", report.distro),
        ("Device's Desktop Env.", report.desktop_env),
        ("Device's CPU Arch", report.arch),
        ("Device's CPU Width", width),
    ]


def render_text(
    report: IdentityReport,
    template: Optional[str] = None,
    template_name: str = "report",
) -> str:
    """
    Render ``report`` with the default table layout, or with ``template``.

    Raises:
        TemplateError: If the template cannot be compiled or rendered.
    """
    try:
        env = Environment(
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        compiled = env.from_string(template or REPORT_TEMPLATE)
        return compiled.render(report=report, rows=report_rows(report)).rstrip("\n")

    except JinjaTemplateError as exc:
        raise TemplateError(
            message="Failed to render identity report",
            template_name=template_name,
            context={"jinja_error": str(exc)},
        ) from exc
