"""Model package for mock_launcher."""

from mock_launcher.models.command_line import CommandLine
from mock_launcher.models.launcher_config import LauncherConfig
from mock_launcher.models.resolved_paths import ResolvedPaths

__all__ = [
    "CommandLine",
    "LauncherConfig",
    "ResolvedPaths",
]
