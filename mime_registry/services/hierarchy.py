"""Content-sniffing mime type tree.

The tree is rooted at application/octet-stream. The root's children are
every signature type the ``filetype`` library knows, followed by
text/plain. Text formats are recognized by libmagic through
``python-magic``. Detection walks children in order and descends into the
first one whose detector matches, so the deepest match wins. Types added
with ``extend`` go in front of their siblings, so the most recently
registered type is tried first.

Locking Strategy:
- One ReadWriteLock per tree, shared by all of its nodes
- ``extend`` takes the write lock; lookups and detection take the read lock
"""

import functools
import logging
from collections.abc import Iterable
from typing import Any

import magic
from filetype.types import TYPES as SIGNATURE_TYPES

from mime_registry.constants import (
    BINARY_MIME_TYPE,
    HTML_MIME_TYPE,
    JSON_MIME_TYPE,
    TEXT_MIME_TYPE,
)
from mime_registry.models import Detector
from mime_registry.services.store import ReadWriteLock
from mime_registry.utils.mime import format_media_type, parse_media_type, prune_charset
from mime_registry.utils.validation import MediaTypeError

logger = logging.getLogger(__name__)

SVG_MIME_TYPE = "image/svg+xml"

# libmagic reports these for text content outside the text/* tree
_TEXTUAL_TYPES = frozenset({JSON_MIME_TYPE, SVG_MIME_TYPE})
_TEXT_ENCODINGS = frozenset({"us-ascii", "utf-8"})

_encodings = magic.Magic(mime_encoding=True)


@functools.lru_cache(maxsize=64)
def _sniff(raw: bytes) -> str:
    """Return libmagic's mime type for ``raw``."""
    return magic.from_buffer(raw, mime=True)


def _any(raw: bytes, limit: int) -> bool:
    return True


def _is_text(raw: bytes, limit: int) -> bool:
    """Match empty content and anything libmagic reads as text."""
    if not raw:
        return True
    sniffed = _sniff(raw)
    return sniffed.startswith("text/") or sniffed in _TEXTUAL_TYPES


def _sniffed_as(mime: str) -> Detector:
    def detector(raw: bytes, limit: int) -> bool:
        return bool(raw) and _sniff(raw) == mime

    return detector


def _is_utf8(raw: bytes) -> bool:
    return not raw or _encodings.from_buffer(raw) in _TEXT_ENCODINGS


def _signature_detector(kind: Any) -> Detector:
    def detector(raw: bytes, limit: int) -> bool:
        return bool(raw) and kind.match(raw)

    return detector


class TypeNode:
    """One mime type in the tree."""

    def __init__(
        self,
        mime: str,
        extension: str,
        detector: Detector,
        aliases: Iterable[str] = (),
        parent: "TypeNode | None" = None,
        lock: ReadWriteLock | None = None,
    ) -> None:
        self.mime = mime
        self.extension = extension
        self.detector = detector
        self.aliases = list(aliases)
        self._parent = parent
        self._children: list[TypeNode] = []
        self._lock = lock or ReadWriteLock()

    def __repr__(self) -> str:
        return f"TypeNode({self.mime!r}, {self.extension!r})"

    @property
    def parent(self) -> "TypeNode | None":
        return self._parent

    @property
    def children(self) -> list["TypeNode"]:
        with self._lock.read():
            return list(self._children)

    def is_type(self, candidate: str) -> bool:
        """Return True if ``candidate`` names this node, ignoring parameters."""
        pruned = prune_charset(candidate)
        if not pruned:
            return False
        return any(prune_charset(m) == pruned for m in (self.mime, *self.aliases))

    def extend(
        self,
        detector: Detector,
        mime: str,
        extension: str,
        *aliases: str,
    ) -> "TypeNode":
        """Add a child type matched by ``detector``, ahead of existing children."""
        child = self._child(detector, mime, extension, aliases)
        with self._lock.write():
            self._children.insert(0, child)
        logger.debug("Extended %s with %s (%s)", self.mime, mime, extension)
        return child

    def _child(
        self, detector: Detector, mime: str, extension: str, aliases: Iterable[str] = ()
    ) -> "TypeNode":
        return TypeNode(mime, extension, detector, aliases, parent=self, lock=self._lock)

    def _append(self, detector: Detector, mime: str, extension: str) -> "TypeNode":
        # Built-in children keep their declared order
        child = self._child(detector, mime, extension)
        with self._lock.write():
            self._children.append(child)
        return child

    def _find(self, mime: str) -> "TypeNode | None":
        if mime == self.mime or mime in self.aliases:
            return self
        for child in self._children:
            if found := child._find(mime):
                return found
        return None

    def _detect(self, raw: bytes, limit: int) -> "TypeNode":
        for child in self._children:
            if child.detector(raw, limit):
                return child._detect(raw, limit)
        return self

    def descends_from(self, mime: str) -> bool:
        """Return True if this node or any ancestor is ``mime``."""
        node: TypeNode | None = self
        while node is not None:
            if node.is_type(mime):
                return True
            node = node.parent
        return False


class TypeTree:
    """Mime type hierarchy with content detection.

    Example:
        >>> tree = TypeTree()
        >>> tree.detect(b"\\x89PNG\\r\\n\\x1a\\n")
        'image/png'
    """

    def __init__(self, signatures: Iterable[Any] | None = None) -> None:
        """Build the default tree.

        Args:
            signatures: ``filetype`` type matchers to place under the root.
                Defaults to every type ``filetype`` supports.
        """
        self.root = TypeNode(BINARY_MIME_TYPE, "", _any)
        if signatures is None:
            signatures = SIGNATURE_TYPES
        for kind in signatures:
            self.root._append(_signature_detector(kind), kind.mime, f".{kind.extension}")

        text = self.root._append(_is_text, TEXT_MIME_TYPE, ".txt")
        text._append(_sniffed_as(HTML_MIME_TYPE), HTML_MIME_TYPE, ".html")
        text._append(_sniffed_as(SVG_MIME_TYPE), SVG_MIME_TYPE, ".svg")
        text._append(_sniffed_as(JSON_MIME_TYPE), JSON_MIME_TYPE, ".json")

    def lookup(self, mime: str) -> TypeNode | None:
        """Find the node registered under exactly ``mime``."""
        if not mime:
            return None
        with self.root._lock.read():
            return self.root._find(mime)

    def detect(self, raw: bytes, limit: int | None = None) -> str:
        """Detect the mime type of ``raw`` content.

        text/* results whose node carries no parameters get
        ``; charset=utf-8`` when libmagic reads the content as ASCII or UTF-8.
        """
        if limit is None:
            limit = len(raw) + 1
        raw = raw[:limit]
        with self.root._lock.read():
            node = self.root._detect(raw, limit)

        mime = node.mime
        if node.descends_from(TEXT_MIME_TYPE) and _is_utf8(raw):
            try:
                base, params = parse_media_type(mime)
            except MediaTypeError:
                return mime
            if not params and base.startswith("text/"):
                mime = format_media_type(base, {"charset": "utf-8"})
        return mime

    def detect_file(self, path: str, limit: int) -> str:
        """Detect the mime type of a file from its first ``limit`` bytes.

        Raises:
            OSError: If the file cannot be read
        """
        with open(path, "rb") as f:
            raw = f.read(limit)
        return self.detect(raw, limit)
