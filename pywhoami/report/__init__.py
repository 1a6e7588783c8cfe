from pywhoami.report.render import render_text
from pywhoami.report.schema import IdentityReport, LanguageEntry, collect_report

__all__ = ["IdentityReport", "LanguageEntry", "collect_report", "render_text"]
