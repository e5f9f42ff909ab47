"""Native-style launcher test double for the jDeploy installer."""

__version__ = "0.1.0"
