"""Text type registration models."""

from collections.abc import Callable
from dataclasses import dataclass

# Content predicate: (raw bytes, read limit) -> matches
Detector = Callable[[bytes, int], bool]


@dataclass
class TextType:
    """A mime type to register as a descendant of text/plain."""

    mime: str
    extension: str
    detector: Detector | None = None

    @classmethod
    def parse(cls, value: str) -> "TextType":
        """Parse a ``mime=extension`` pair.

        Args:
            value: Pair such as ``text/x-rst=rst``

        Returns:
            TextType without a detector

        Raises:
            ValueError: If the pair is missing either side
        """
        mime, sep, extension = value.partition("=")
        mime, extension = mime.strip(), extension.strip()
        if not sep or not mime or not extension:
            raise ValueError(f"Expected mime=extension, got: {value!r}")
        return cls(mime=mime, extension=extension)
