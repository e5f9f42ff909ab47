"""Command line model handed to the process runner."""

from dataclasses import dataclass


@dataclass
class CommandLine:
    """Ordered command tokens plus the flat text passed to process creation.

    ``tokens`` keeps the pieces in order for inspection; only ``text`` is used
    to spawn the child.
    """

    tokens: list[str]
    text: str

    def __str__(self) -> str:
        return self.text
