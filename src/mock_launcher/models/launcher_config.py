"""Configuration model for mock_launcher."""

from pydantic import BaseModel


class LauncherConfig(BaseModel):
    """Values read from the environment snapshot after the fallback load."""

    java_home: str
    project_path: str
    installer_args: str = ""
    env_file: str | None = None
