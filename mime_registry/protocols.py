"""Protocol interfaces for the collaborators a registry depends on.

The registry only talks to the filesystem, the system mime database and
the content-sniffing hierarchy through these contracts, so tests can
substitute small fakes:

    class FakeProbe:
        def is_dir(self, path: str) -> bool:
            return path == "/srv"

        def is_file(self, path: str) -> bool:
            return False

    registry = MimeRegistry(probe=FakeProbe())

Default implementations:
    FileProbe      -> mime_registry.utils.path.LocalFileProbe
    SystemTypes    -> mime_registry.utils.mime.SystemMimeTypes
    MimeHierarchy  -> mime_registry.services.hierarchy.TypeTree
"""

from typing import Optional, Protocol, runtime_checkable

from mime_registry.models import Detector


@runtime_checkable
class FileProbe(Protocol):
    """Protocol for filesystem existence checks."""

    def is_dir(self, path: str) -> bool:
        """Return True if ``path`` is a directory."""
        ...

    def is_file(self, path: str) -> bool:
        """Return True if ``path`` is a regular file."""
        ...


@runtime_checkable
class SystemTypes(Protocol):
    """Protocol for the extension database consulted when no override exists."""

    def type_by_extension(self, extension: str) -> str:
        """Look up a dotted extension.

        Args:
            extension: Extension including the leading dot

        Returns:
            Mime type, or empty string if unknown
        """
        ...

    def add_extension_type(self, extension: str, mime: str) -> None:
        """Associate a dotted extension with a base mime type."""
        ...


@runtime_checkable
class MimeNode(Protocol):
    """Protocol for one node of a mime type hierarchy."""

    mime: str
    extension: str

    @property
    def parent(self) -> Optional["MimeNode"]:
        """Parent node, or None at the root."""
        ...

    def is_type(self, candidate: str) -> bool:
        """Return True if ``candidate`` names this node, ignoring parameters."""
        ...

    def extend(self, detector: Detector, mime: str, extension: str) -> "MimeNode":
        """Add a child type detected by ``detector``.

        Args:
            detector: Content predicate for the child
            mime: Child mime type string, matched exactly by lookups
            extension: Dotted file extension for the child

        Returns:
            The new child node
        """
        ...


@runtime_checkable
class MimeHierarchy(Protocol):
    """Protocol for a content-sniffing mime type hierarchy."""

    def lookup(self, mime: str) -> MimeNode | None:
        """Find the node registered under exactly ``mime``."""
        ...

    def detect_file(self, path: str, limit: int) -> str:
        """Detect the mime type of a file from its leading bytes.

        Raises:
            OSError: If the file cannot be read
        """
        ...
