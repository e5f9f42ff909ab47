"""Spawn the installer command, wait for it, and relay its exit code."""

import enum
import logging
import os
import shlex
import subprocess
from collections.abc import Mapping

from mock_launcher.errors import SpawnFailed
from mock_launcher.models import CommandLine

log = logging.getLogger(__name__)


class RunnerState(enum.Enum):
    NOT_STARTED = "not_started"
    SPAWNED = "spawned"
    WAITED = "waited"
    REAPED = "reaped"


def _os_error_code(exc: OSError) -> int | None:
    """Prefer the Windows error code, as GetLastError would report it."""
    winerror = getattr(exc, "winerror", None)
    if winerror is not None:
        return winerror
    return exc.errno


def spawn_args(text: str) -> str | list[str]:
    """Return what to hand to ``Popen`` for the flat command *text*.

    Windows process creation takes the command line as is. Elsewhere it is
    split with POSIX shell rules and the program is exec'd directly, so a
    missing binary fails the spawn instead of surfacing as a shell exit code.
    """
    if os.name == "nt":
        return text
    try:
        return shlex.split(text)
    except ValueError as e:
        raise SpawnFailed(None, f"cannot tokenize command line: {e}") from e


class ProcessRunner:
    """Run one child process to completion. Each instance runs at most once."""

    def __init__(self) -> None:
        self.state = RunnerState.NOT_STARTED
        self.history: list[RunnerState] = [self.state]
        self.exit_code: int | None = None

    def _transition(self, state: RunnerState) -> None:
        self.state = state
        self.history.append(state)

    def run(self, command_line: CommandLine | str, env: Mapping[str, str] | None = None) -> int:
        """Spawn *command_line*, block until it exits, and return its exit status.

        Standard streams are inherited. The child handle is released on every
        path once the process has been spawned.
        """
        if self.state is not RunnerState.NOT_STARTED:
            raise RuntimeError(f"ProcessRunner already used (state={self.state.value})")

        args = spawn_args(str(command_line))
        child_env = dict(env) if env is not None else None
        try:
            proc = subprocess.Popen(args, env=child_env)
        except OSError as e:
            raise SpawnFailed(_os_error_code(e), e.strerror or str(e)) from e

        self._transition(RunnerState.SPAWNED)
        log.debug("spawned pid=%s", proc.pid)
        try:
            with proc:
                self.exit_code = proc.wait()
        finally:
            # Exit-code retrieval is best effort; the wait is over either way.
            self._transition(RunnerState.WAITED)
            self._transition(RunnerState.REAPED)
        log.debug("child exited with %s", self.exit_code)
        return self.exit_code
