"""Extension and charset registries with text type registration."""

import logging
from collections.abc import Iterable, Mapping

from mime_registry.constants import (
    DEFAULT_CHARSET,
    DEFAULT_CHARSETS,
    DEFAULT_EXTENSIONS,
    DEFAULT_READ_LIMIT,
    DEFAULT_TEXT_TYPES,
    DIRECTORY_MIME_TYPE,
    TEMPLATE_EXTENSION,
    TEXT_MIME_TYPE,
)
from mime_registry.models import Detector, MediaType, TextType
from mime_registry.protocols import FileProbe, MimeHierarchy, SystemTypes
from mime_registry.services.hierarchy import TypeTree
from mime_registry.services.store import AssociativeStore
from mime_registry.utils.mime import SystemMimeTypes, parse_media_type, prune_charset
from mime_registry.utils.path import LocalFileProbe, split_extensions
from mime_registry.utils.validation import strip_dot, validate_text_type

logger = logging.getLogger(__name__)


def plain_text_detector(raw: bytes, limit: int) -> bool:
    """Default detector for text types registered without one.

    Always matches. Content alone cannot tell, for example, markdown from
    plain text, so a file without a known extension resolves to the most
    recently registered permissive text type.
    """
    return True


class MimeRegistry:
    """Resolves extensions, paths and content to mime types.

    Holds two associative stores (extension -> mime, mime -> charset) and
    the collaborators used when they have no answer. Construct one per test;
    application code normally goes through the process-wide default in
    ``mime_registry.services.state``.
    """

    def __init__(
        self,
        extensions: Mapping[str, str] | None = None,
        charsets: Mapping[str, str] | None = None,
        hierarchy: MimeHierarchy | None = None,
        system: SystemTypes | None = None,
        probe: FileProbe | None = None,
        read_limit: int = DEFAULT_READ_LIMIT,
    ) -> None:
        """Initialize registry.

        Args:
            extensions: Initial extension -> mime associations (undotted keys)
            charsets: Initial base mime -> charset associations
            hierarchy: Content-sniffing hierarchy, defaults to a new TypeTree
            system: Fallback extension database, defaults to SystemMimeTypes
            probe: Filesystem probe, defaults to LocalFileProbe
            read_limit: Bytes read from files for content detection
        """
        self._extensions = AssociativeStore(
            {strip_dot(k): v for k, v in (extensions or {}).items()}
        )
        self._charsets = AssociativeStore(
            {prune_charset(k): v for k, v in (charsets or {}).items()}
        )
        self.hierarchy: MimeHierarchy = hierarchy if hierarchy is not None else TypeTree()
        self.system: SystemTypes = system if system is not None else SystemMimeTypes()
        self.probe: FileProbe = probe if probe is not None else LocalFileProbe()
        self.read_limit = read_limit

    @classmethod
    def create_default(
        cls,
        text_types: Iterable[TextType] = (),
        read_limit: int = DEFAULT_READ_LIMIT,
        hierarchy: MimeHierarchy | None = None,
        system: SystemTypes | None = None,
        probe: FileProbe | None = None,
    ) -> "MimeRegistry":
        """Create a registry seeded with the well-known types.

        The Go-Enjin page formats (njn, org, md) are registered as text
        types, followed by any extra ``text_types``.

        Args:
            text_types: Additional text types to register
            read_limit: Bytes read from files for content detection
            hierarchy: Content-sniffing hierarchy override
            system: Fallback extension database override
            probe: Filesystem probe override

        Raises:
            RegistrationError: If an extra text type has an empty field
            MediaTypeError: If an extra text type is malformed
        """
        registry = cls(
            extensions=DEFAULT_EXTENSIONS,
            charsets=DEFAULT_CHARSETS,
            hierarchy=hierarchy,
            system=system,
            probe=probe,
            read_limit=read_limit,
        )
        for mime, extension in DEFAULT_TEXT_TYPES:
            registry.register_text_type(mime, extension)
        for text_type in text_types:
            registry.register_text_type(text_type.mime, text_type.extension, text_type.detector)
        return registry

    def get_extension(self, extension: str) -> tuple[str, bool]:
        """Return the mime type associated with ``extension``.

        Overrides set with ``set_extension`` win; otherwise the system
        database is consulted.

        Returns:
            Tuple of (mime, found)
        """
        extension = strip_dot(extension)
        mime, ok = self._extensions.get(extension)
        if not ok:
            mime = self.system.type_by_extension("." + extension)
            ok = mime != ""
        return mime, ok

    def set_extension(self, extension: str, mime: str) -> None:
        """Associate ``extension`` with ``mime``; an empty mime clears it."""
        extension = strip_dot(extension)
        if not mime:
            self._extensions.unset(extension)
            logger.debug("Cleared extension override: %s", extension)
            return
        self._extensions.set(extension, mime)
        logger.debug("Set extension %s -> %s", extension, mime)

    def get_charset(self, mime: str) -> tuple[str, bool]:
        """Return the charset registered for ``mime``, ignoring its parameters."""
        return self._charsets.get(prune_charset(mime))

    def set_charset(self, mime: str, charset: str) -> None:
        """Associate ``mime`` with ``charset``; an empty charset clears it."""
        mime = prune_charset(mime)
        if not charset:
            self._charsets.unset(mime)
            logger.debug("Cleared charset: %s", mime)
            return
        self._charsets.set(mime, charset)
        logger.debug("Set charset %s -> %s", mime, charset)

    def register_text_type(
        self,
        mime: str,
        extension: str,
        detector: Detector | None = None,
    ) -> None:
        """Register ``mime`` as a UTF-8 text type for ``extension``.

        Updates both stores, adds the type (bare and with its charset
        parameter) under text/plain in the hierarchy, and records the
        extension in the system database. The steps are not atomic and a
        failure part way through is not rolled back.

        Args:
            mime: Media type, parameters allowed
            extension: File extension, with or without a leading dot
            detector: Content predicate, defaults to plain_text_detector

        Raises:
            RegistrationError: If mime or extension is empty
            MediaTypeError: If mime is not a valid media type
        """
        mime, extension = validate_text_type(mime, extension)
        media = MediaType(*parse_media_type(mime))
        media.params["charset"] = DEFAULT_CHARSET
        full_mime = media.format()

        self.set_extension(extension, full_mime)
        self.set_charset(media.base, DEFAULT_CHARSET)

        text = self.hierarchy.lookup(TEXT_MIME_TYPE)
        if text is not None:
            for key in (media.base, full_mime):
                text.extend(detector or plain_text_detector, key, "." + extension)
        else:
            logger.warning("Hierarchy has no %s node, %s not extended", TEXT_MIME_TYPE, mime)

        self.system.add_extension_type("." + extension, media.base)
        logger.info("Registered text type %s for .%s", full_mime, extension)

    def is_plain_text(self, mime: str) -> bool:
        """Return True if ``mime`` should be treated as plain text.

        A registered charset answers first; otherwise the hierarchy is
        searched for text/plain among the type and its ancestors.
        """
        mime = prune_charset(mime)
        if self.get_charset(mime)[1]:
            return True
        node = self.hierarchy.lookup(mime)
        while node is not None:
            if node.is_type(TEXT_MIME_TYPE):
                return True
            node = node.parent
        return False

    def from_path_only(self, path: str) -> str:
        """Resolve ``path`` by its extension alone.

        ``name.html.tmpl`` resolves as ``html``.
        """
        if not path:
            return ""
        first, second = split_extensions(path)
        if second and first == TEMPLATE_EXTENSION:
            return self.get_extension(second)[0]
        if first:
            return self.get_extension(first)[0]
        return ""

    def mime(self, path: str) -> str:
        """Return the mime type of a local directory or file.

        Directories are ``inode/directory``. Files resolve by extension
        first, then by content. Anything else yields an empty string.
        """
        if self.probe.is_dir(path):
            return DIRECTORY_MIME_TYPE
        if not self.probe.is_file(path):
            return ""
        if mime := self.from_path_only(path):
            return mime
        try:
            return self.hierarchy.detect_file(path, self.read_limit)
        except OSError as e:
            logger.debug("Content detection failed for %s: %s", path, e)
            return ""

    def extensions(self) -> dict[str, str]:
        """Snapshot of the extension overrides."""
        return self._extensions.snapshot()

    def charsets(self) -> dict[str, str]:
        """Snapshot of the registered charsets."""
        return self._charsets.snapshot()
