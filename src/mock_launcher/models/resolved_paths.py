"""Filesystem locations used to build the installer command."""

from dataclasses import dataclass


@dataclass
class ResolvedPaths:
    """Absolute, Windows-convention paths ready for command construction."""

    executable: str
    executable_dir: str
    home: str
    java_home: str
    installer_jar: str
