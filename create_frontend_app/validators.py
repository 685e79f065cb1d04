"""Input validation and sanitisation for user-supplied strings.

Project names, filesystem paths, and command strings all pass through here
before they reach the filesystem or a subprocess.
"""

from __future__ import annotations

import re
from typing import Any

PROJECT_NAME_RE = re.compile(r"^[A-Za-z0-9\-_]+$")
PROJECT_NAME_MAX_LENGTH = 50

_DANGEROUS_CHARS_RE = re.compile(r"[;&|`$(){}\[\]\\]")
_INVALID_PATH_CHARS_RE = re.compile(r'[<>"|?*]')
_RESERVED_NAME_RE = re.compile(r"^(con|prn|aux|nul|com[1-9]|lpt[1-9])$", re.IGNORECASE)


def validate_project_name(name: Any) -> bool:
    """Return ``True`` if *name* is 1-50 letters, digits, hyphens or underscores."""
    if not name or not isinstance(name, str):
        return False
    return bool(PROJECT_NAME_RE.fullmatch(name)) and len(name) <= PROJECT_NAME_MAX_LENGTH


def project_name_error(name: Any) -> str | None:
    """Return the inline prompt message for an invalid name, or ``None``."""
    if not isinstance(name, str) or not name.strip():
        return "Project name is required."
    if len(name) > PROJECT_NAME_MAX_LENGTH:
        return f"Project name must be {PROJECT_NAME_MAX_LENGTH} characters or less."
    if not PROJECT_NAME_RE.fullmatch(name):
        return "Project name may only include letters, numbers, hyphens, and underscores."
    return None


def sanitize_input(value: Any) -> str:
    """Strip shell metacharacters from *value*.

    Removes every occurrence of ``; & | ` $ ( ) { } [ ] \\``.  Non-string
    input yields an empty string.

    Examples::

        sanitize_input("test; rm -rf /") -> "test rm -rf /"
        sanitize_input("normal-input")   -> "normal-input"
    """
    if not isinstance(value, str):
        return ""
    return _DANGEROUS_CHARS_RE.sub("", value)


def validate_path(path: Any) -> bool:
    """Return ``True`` if *path* is safe to create, write, or remove.

    Rejects directory traversal (``..``), characters that are invalid in
    file names (``< > " | ? *``), and Windows reserved device names as the
    final path segment.  A drive-letter colon is allowed.
    """
    if not path or not isinstance(path, str):
        return False

    if ".." in path or _INVALID_PATH_CHARS_RE.search(path):
        return False

    filename = re.split(r"[\\/]", path)[-1]
    return not _RESERVED_NAME_RE.fullmatch(filename)
