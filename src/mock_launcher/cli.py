"""Command-line entry point for the mock installer launcher."""

import logging
import os
import sys

from mock_launcher.command import build_command, resolve_paths
from mock_launcher.constants import DEBUG_VAR
from mock_launcher.env import apply_environment, home_dir, resolve_environment
from mock_launcher.errors import LauncherError
from mock_launcher.runner import ProcessRunner

log = logging.getLogger("mock_launcher")


def _debug_enabled() -> bool:
    return os.environ.get(DEBUG_VAR, "").strip().lower() in {"1", "true", "yes", "on"}


def main(argv: list[str] | None = None) -> int:
    """Launch the installer with *argv* forwarded and return its exit code.

    No arguments are interpreted here; all of them go to the installer.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if _debug_enabled() else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )
    log.debug("forwarded args=%r", args)

    try:
        home = home_dir()
        snapshot, config = resolve_environment(home=home)
        paths = resolve_paths(config, home)
        command = build_command(paths, config, args)
        apply_environment(snapshot)
        return ProcessRunner().run(command)
    except LauncherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
