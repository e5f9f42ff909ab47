"""Failures the launcher reports before (or instead of) relaying a child exit code."""


class LauncherError(Exception):
    """Base class for launcher failures. Every one maps to exit code 1."""


class MissingConfiguration(LauncherError):
    """A required value is unavailable even after loading the fallback file."""

    def __init__(self, name: str, env_file: str | None = None) -> None:
        self.name = name
        self.env_file = env_file
        if env_file:
            message = f"{name} is not set.  Please set it in {env_file}"
        else:
            message = f"Unable to determine {name}"
        super().__init__(message)


class CommandTooLong(LauncherError):
    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(
            f"Command line is too long ({length} characters). "
            f"The maximum supported length is {limit} characters."
        )


class SpawnFailed(LauncherError):
    """The OS refused to create the child process."""

    def __init__(self, code: int | None, reason: str = "") -> None:
        self.code = code
        detail = f": {reason}" if reason else ""
        super().__init__(f"CreateProcess failed ({code}){detail}")
