"""
config.py

Singleton-style package configuration using only a dataclass.
Provides a single package-wide instance that can be imported and used
across all modules to access logging settings, the well-known files that
providers read, and the last-resort defaults used by the fallback chains.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class WhoamiConfig:
    """
    Stores logging settings, provider file locations, and fallback defaults.

    Attributes:
        log_dir (Optional[Path]): Directory for log files; console only when None.
        verbose (bool): Enable debug logging to console.
        os_release_file (Path): Distribution description read by Unix providers.
        machine_info_file (Path): Holds PRETTY_HOSTNAME on systemd machines.
        default_username (str): Returned when no username source answers.
        default_hostname (str): Returned when no hostname source answers.
    """

    log_dir: Optional[Path] = None
    verbose: bool = False
    os_release_file: Path = field(default_factory=lambda: Path("/etc/os-release"))
    machine_info_file: Path = field(default_factory=lambda: Path("/etc/machine-info"))
    default_username: str = "unknown"
    default_hostname: str = "localhost"


# Create a SINGLE package-wide instance.
# The CLI configures it via setup_logging(); embedders and tests may
# adjust fields directly. Providers read it on every call.
config = WhoamiConfig()
