"""Build the java command line that runs the real installer."""

import logging
from collections.abc import Sequence
from pathlib import Path

from mock_launcher.constants import (
    APPXML_PROPERTY,
    INSTALLER_JAR_RELPATH,
    LAUNCHER_PROPERTY,
    MANIFEST_RELPATH,
    MAX_COMMAND_LENGTH,
)
from mock_launcher.errors import CommandTooLong
from mock_launcher.models import CommandLine, LauncherConfig, ResolvedPaths
from mock_launcher.paths import executable_path, join_native, translate_path, windows_dirname

log = logging.getLogger(__name__)


def resolve_paths(
    config: LauncherConfig,
    home: Path,
    executable: str | None = None,
) -> ResolvedPaths:
    """Derive every path the command needs from the config and the launcher location.

    *home* is the directory the environment was resolved against.
    """
    exe = executable if executable is not None else executable_path()
    return ResolvedPaths(
        executable=exe,
        executable_dir=windows_dirname(exe),
        home=str(home),
        java_home=translate_path(config.java_home),
        installer_jar=join_native(config.project_path, *INSTALLER_JAR_RELPATH),
    )


def _property(name: str, value: str) -> str:
    return f'-D{name}="{value}"'


def build_command(
    paths: ResolvedPaths,
    config: LauncherConfig,
    forwarded_args: Sequence[str],
    max_length: int = MAX_COMMAND_LENGTH,
) -> CommandLine:
    """Assemble the flat installer command line.

    Order: java binary, manifest property, launcher property, jar, extra
    installer args, forwarded args. Forwarded arguments are appended
    verbatim with one space before each. The extra-arguments slot is kept
    even when empty.
    """
    tokens = [
        f'"{join_native(paths.java_home, "bin", "java")}"',
        _property(APPXML_PROPERTY, join_native(paths.executable_dir, *MANIFEST_RELPATH)),
        _property(LAUNCHER_PROPERTY, paths.executable),
        "-jar",
        paths.installer_jar,
        config.installer_args,
        *forwarded_args,
    ]
    text = " ".join(tokens)
    if len(text) > max_length:
        raise CommandTooLong(len(text), max_length)
    log.info("Executing command: %s", text)
    return CommandLine(tokens=tokens, text=text)
