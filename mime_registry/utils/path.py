"""Local filesystem probing and path extension helpers."""

import os
from pathlib import PurePath


def split_extensions(path: str) -> tuple[str, str]:
    """Return the last and second-to-last extensions of ``path``.

    Extensions are returned without their leading dot; missing ones are
    empty strings.

    >>> split_extensions("page.html.tmpl")
    ('tmpl', 'html')
    >>> split_extensions("notes.txt")
    ('txt', '')
    >>> split_extensions(".bashrc")
    ('bashrc', '')
    """
    if not path:
        return "", ""
    # A leading dot starts an extension too: ".bashrc" has extension "bashrc"
    stem, dot, first = PurePath(path).name.rpartition(".")
    if not dot:
        return "", ""
    _, dot, second = stem.rpartition(".")
    return first, second if dot else ""


class LocalFileProbe:
    """Answers directory/file questions about the local filesystem."""

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)
