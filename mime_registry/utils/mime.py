"""Media type parsing and the system mime database."""

import mimetypes
import re

from mime_registry.utils.validation import MediaTypeError

# RFC 2045 token: printable ASCII minus tspecials
_TOKEN = r"[!#$%&'*+\-.0-9A-Z^_`a-z{|}~]+"
# A subtype is optional, so dispositions such as "attachment" parse too
_BASE_PATTERN = re.compile(rf"^({_TOKEN})(?:/({_TOKEN}))?$")
_TOKEN_PATTERN = re.compile(rf"^{_TOKEN}$")
_PARAM_PATTERN = re.compile(
    rf'\s*;\s*({_TOKEN})\s*=\s*({_TOKEN}|"(?:[^"\\]|\\.)*")'
)
_QUOTED_PAIR = re.compile(r"\\(.)")


def parse_media_type(value: str) -> tuple[str, dict[str, str]]:
    """Parse a media type string such as ``text/plain; charset=utf-8``.

    Args:
        value: Media type with optional parameters

    Returns:
        Tuple of (lower-cased base type, parameter mapping). Parameter
        names are lower-cased, values keep their case.

    Raises:
        MediaTypeError: If the value is empty or malformed
    """
    base, _, rest = value.partition(";")
    base = base.strip().lower()
    if not _BASE_PATTERN.match(base):
        raise MediaTypeError(f"Invalid media type: {value!r}")

    params: dict[str, str] = {}
    rest = ";" + rest if rest else ""
    pos = 0
    while pos < len(rest):
        match = _PARAM_PATTERN.match(rest, pos)
        if match is None:
            # Tolerate trailing whitespace and a dangling separator
            if rest[pos:].strip() in ("", ";"):
                break
            raise MediaTypeError(f"Invalid media type parameter: {value!r}")

        key = match.group(1).lower()
        if key in params:
            raise MediaTypeError(f"Duplicate media type parameter {key!r}: {value!r}")

        raw = match.group(2)
        if raw.startswith('"'):
            raw = _QUOTED_PAIR.sub(r"\1", raw[1:-1])
        params[key] = raw
        pos = match.end()

    return base, params


def format_media_type(base: str, params: dict[str, str] | None = None) -> str:
    """Serialize a media type and parameters.

    Parameters are emitted in sorted order, quoting values that are not
    plain tokens. Returns an empty string if ``base`` or any parameter name
    is not valid.
    """
    base = base.strip().lower()
    if not _BASE_PATTERN.match(base):
        return ""

    parts = [base]
    for key in sorted(params or {}):
        value = params[key]
        if not _TOKEN_PATTERN.match(key):
            return ""
        if not _TOKEN_PATTERN.match(value):
            value = '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
        parts.append(f"{key.lower()}={value}")
    return "; ".join(parts)


def prune_charset(mime: str) -> str:
    """Return only the base type of ``mime``.

    >>> prune_charset("text/plain; charset=utf-8")
    'text/plain'

    Malformed or empty input yields an empty string.
    """
    try:
        base, _ = parse_media_type(mime)
    except MediaTypeError:
        return ""
    return base


class SystemMimeTypes:
    """Extension lookups backed by a private ``mimetypes.MimeTypes`` database.

    Each instance starts from the standard library's built-in table, so
    additions made through one registry never leak into another.
    """

    def __init__(self) -> None:
        self._types = mimetypes.MimeTypes()

    def type_by_extension(self, extension: str) -> str:
        """Look up a dotted extension, returning an empty string if unknown."""
        for strict in (True, False):
            table = self._types.types_map[strict]
            if mime := table.get(extension) or table.get(extension.lower()):
                return mime
        return ""

    def add_extension_type(self, extension: str, mime: str) -> None:
        """Associate a dotted extension with a base mime type."""
        self._types.add_type(mime, extension, strict=True)
