import json
from typing import Any, Optional

from pydantic import BaseModel
import yaml

from pywhoami.targets.base import Target
from pywhoami.exceptions.exceptions import UnknownArchError
from pywhoami import api


class LanguageEntry(BaseModel):
    """One preferred language."""

    tag: str
    """Normalised locale tag, e.g. "de/DE"."""
    code: str
    """ISO 639-1 language code, or the raw token when it is not one."""
    region: Optional[str] = None
    """ISO 3166-1 alpha-2 region code, if the locale named one."""


class IdentityReport(BaseModel):
    """Snapshot of every identity query for the running (or given) system."""

    version: str = '0.1'
    """Version of the schema."""
    username: str
    realname: str
    account: str
    devicename: str
    hostname: str
    distro: str
    desktop_env: str
    platform: str
    arch: str
    arch_width: Optional[int] = None
    """Pointer width in bits; absent for an architecture outside the catalog."""
    langs: list[LanguageEntry] = []

    def dump(self) -> dict[str, Any]:
        """Convert IdentityReport to dict.

        Returns:
            dict: Defined fields of IdentityReport.
        """
        return self.model_dump(
            mode="json",
            exclude_none=True,
        )

    def to_json(self) -> str:
        """Return IdentityReport as JSON."""
        return json.dumps(self.dump(), indent=2)

    def to_yaml(self) -> str:
        """Return IdentityReport as YAML."""
        return yaml.dump(self.dump(), indent=2, sort_keys=False)


def collect_report(target: Optional[Target] = None) -> IdentityReport:
    """
    Query every identity fact through the defaulting layer.

    Args:
        target: Provider to query; the current system when None.

    Returns:
        IdentityReport: The populated report. Never raises for OS failures.
    """
    arch = api.arch(target=target)
    try:
        width = int(arch.width())
    except UnknownArchError:
        width = None

    return IdentityReport(
        username=api.username(target=target),
        realname=api.realname(target=target),
        account=api.account(target=target),
        devicename=api.devicename(target=target),
        hostname=api.hostname(target=target),
        distro=api.distro(target=target),
        desktop_env=str(api.desktop_env(target=target)),
        platform=str(api.platform(target=target)),
        arch=str(arch),
        arch_width=width,
        langs=[
            LanguageEntry(
                tag=lang.tag,
                code=lang.code,
                region=lang.region.code or None,
            )
            for lang in api.langs(target=target)
        ],
    )
