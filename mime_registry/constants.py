"""Well-known mime types and file extensions."""

from typing import Final

TEXT_MIME_TYPE: Final = "text/plain"
HTML_MIME_TYPE: Final = "text/html"
CSS_MIME_TYPE: Final = "text/css"
SCSS_MIME_TYPE: Final = "text/x-scss"
JSON_MIME_TYPE: Final = "application/json"
JAVASCRIPT_MIME_TYPE: Final = "text/javascript"
BINARY_MIME_TYPE: Final = "application/octet-stream"

# Reported for filesystem directories
DIRECTORY_MIME_TYPE: Final = "inode/directory"
# Go-Enjin page formats
ENJIN_MIME_TYPE: Final = "text/enjin"
ORG_MODE_MIME_TYPE: Final = "text/org-mode"
MARKDOWN_MIME_TYPE: Final = "text/markdown"

ENJIN_EXTENSION: Final = "njn"
ORG_MODE_EXTENSION: Final = "org"
MARKDOWN_EXTENSION: Final = "md"

# Double extensions ending in this marker resolve using the inner extension
TEMPLATE_EXTENSION: Final = "tmpl"

DEFAULT_CHARSET: Final = "utf-8"

# Bytes read from a file for content detection
DEFAULT_READ_LIMIT: Final = 3072

DEFAULT_EXTENSIONS: Final[dict[str, str]] = {
    "txt": f"{TEXT_MIME_TYPE}; charset=utf-8",
    "html": f"{HTML_MIME_TYPE}; charset=utf-8",
    "css": f"{CSS_MIME_TYPE}; charset=utf-8",
    "scss": f"{SCSS_MIME_TYPE}; charset=utf-8",
    "json": f"{JSON_MIME_TYPE}; charset=utf-8",
    "js": f"{JAVASCRIPT_MIME_TYPE}; charset=utf-8",
}

DEFAULT_CHARSETS: Final[dict[str, str]] = {
    TEXT_MIME_TYPE: DEFAULT_CHARSET,
    HTML_MIME_TYPE: DEFAULT_CHARSET,
    CSS_MIME_TYPE: DEFAULT_CHARSET,
    SCSS_MIME_TYPE: DEFAULT_CHARSET,
    JSON_MIME_TYPE: DEFAULT_CHARSET,
    JAVASCRIPT_MIME_TYPE: DEFAULT_CHARSET,
    ENJIN_MIME_TYPE: DEFAULT_CHARSET,
    ORG_MODE_MIME_TYPE: DEFAULT_CHARSET,
    MARKDOWN_MIME_TYPE: DEFAULT_CHARSET,
}

# Registered as text types on every default registry
DEFAULT_TEXT_TYPES: Final[list[tuple[str, str]]] = [
    (ENJIN_MIME_TYPE, ENJIN_EXTENSION),
    (ORG_MODE_MIME_TYPE, ORG_MODE_EXTENSION),
    (MARKDOWN_MIME_TYPE, MARKDOWN_EXTENSION),
]
