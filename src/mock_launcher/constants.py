"""Fixed names and locations shared by the launcher stages."""

JAVA_HOME_VAR = "JAVA_HOME"
PROJECT_PATH_VAR = "JDEPLOY_PROJECT_PATH"
INSTALLER_ARGS_VAR = "JDEPLOY_INSTALLER_ARGS"
DEBUG_VAR = "JDEPLOY_LAUNCHER_DEBUG"

# Fallback file, relative to the user's home directory.
ENV_FILE_DIR = ".jdeploy"
ENV_FILE_NAME = ".env.dev"

# The emulated installer runs on Windows, so built paths use its separator.
NATIVE_SEP = "\\"

MANIFEST_RELPATH = (".jdeploy-files", "app.xml")
INSTALLER_JAR_RELPATH = ("installer", "target", "jdeploy-installer-1.0-SNAPSHOT.jar")

APPXML_PROPERTY = "client4j.appxml.path"
LAUNCHER_PROPERTY = "client4j.launcher.path"

# CreateProcess rejects command lines longer than this.
MAX_COMMAND_LENGTH = 32767
