"""Environment discovery with a developer-local fallback file."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from mock_launcher.constants import (
    ENV_FILE_DIR,
    ENV_FILE_NAME,
    INSTALLER_ARGS_VAR,
    JAVA_HOME_VAR,
    PROJECT_PATH_VAR,
)
from mock_launcher.errors import MissingConfiguration
from mock_launcher.models import LauncherConfig

log = logging.getLogger(__name__)


def home_dir() -> Path:
    """Return the current user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        log.debug("home directory lookup failed: %s", e)
        raise MissingConfiguration("home directory") from e


def env_file_path(home: Path | None = None) -> Path:
    """Return the location of the fallback ``.env.dev`` file."""
    base = home if home is not None else home_dir()
    return base / ENV_FILE_DIR / ENV_FILE_NAME


def parse_env_line(line: str) -> tuple[str, str] | None:
    """Split one ``KEY=VALUE`` line, or return None when it holds no pair."""
    line = line.rstrip("\r\n")
    key, sep, value = line.partition("=")
    if not sep or not key or not value:
        return None
    return key, value


def load_env_file(path: Path) -> dict[str, str]:
    """Read ``KEY=VALUE`` pairs from *path*; a missing file yields no pairs."""
    values: dict[str, str] = {}
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            for line in f:
                pair = parse_env_line(line)
                if pair is None:
                    continue
                key, value = pair
                values[key] = value
    except OSError as e:
        log.debug("fallback env file %s not loaded: %s", path, e)
        return {}
    log.debug("loaded %d variables from %s", len(values), path)
    return values


def resolve_environment(
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> tuple[dict[str, str], LauncherConfig]:
    """Build the environment snapshot and the config read from it.

    The fallback file is consulted only when ``JAVA_HOME`` is missing. Its
    values replace any existing ones with the same key.
    """
    snapshot = dict(os.environ if environ is None else environ)
    home = home if home is not None else home_dir()
    env_file = env_file_path(home)

    log.info("JAVA_HOME: %s", snapshot.get(JAVA_HOME_VAR))
    log.info("HOME: %s", home)

    if not snapshot.get(JAVA_HOME_VAR):
        log.debug("%s not set, loading %s", JAVA_HOME_VAR, env_file)
        snapshot.update(load_env_file(env_file))

    if not snapshot.get(PROJECT_PATH_VAR):
        raise MissingConfiguration(PROJECT_PATH_VAR, str(env_file))
    if not snapshot.get(JAVA_HOME_VAR):
        raise MissingConfiguration(JAVA_HOME_VAR, str(env_file))

    config = LauncherConfig(
        java_home=snapshot[JAVA_HOME_VAR],
        project_path=snapshot[PROJECT_PATH_VAR],
        installer_args=snapshot.get(INSTALLER_ARGS_VAR, ""),
        env_file=str(env_file),
    )
    log.debug("config=%s", config.model_dump())
    return snapshot, config


def apply_environment(snapshot: Mapping[str, str]) -> None:
    """Install the snapshot into the live process environment for the child."""
    changed = [key for key, value in snapshot.items() if os.environ.get(key) != value]
    for key in changed:
        os.environ[key] = snapshot[key]
    log.debug("applied %d environment changes", len(changed))
