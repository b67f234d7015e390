"""Parsing and formatting of guest (``C:\\x``) and host (``/x``) path strings.

Everything here is pure string handling: no function touches the
filesystem, so resolution logic can work on ``GuestPath`` / ``HostPath``
values instead of raw strings.

Guest syntax accepted by :func:`parse_guest`:

* ``C:\\dir\\file`` or ``c:/dir/file`` (drive-rooted, letter uppercased)
* ``\\\\server\\share\\dir`` or ``//server/share/dir`` (UNC)
* ``\\\\?\\C:\\dir``, ``\\??\\C:\\dir`` and ``\\\\?\\UNC\\server\\share``
  (namespace prefixes are stripped)
* ``dir\\file`` or ``\\dir\\file`` (relative; parsed, but not translatable)
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterable
from dataclasses import dataclass

from wine_pathmap.constants import (
    GUEST_SEPARATOR,
    GUEST_SEPARATORS,
    HOST_SEPARATOR,
    INVALID_GUEST_CHARS,
    WIN32_NAMESPACE_PREFIXES,
)
from wine_pathmap.mapping.errors import ParseError, RelativePathUnsupportedError

_SEPARATOR_RE = re.compile(r"[\\/]")
_DOT_SEGMENTS = (".", "..")


@dataclass(frozen=True, slots=True)
class GuestPath:
    drive: str | None = None
    is_unc: bool = False
    server: str | None = None
    share: str | None = None
    segments: tuple[str, ...] = ()
    rooted: bool = False

    @property
    def is_relative(self) -> bool:
        return self.drive is None and not self.is_unc


@dataclass(frozen=True, slots=True)
class HostPath:
    is_absolute: bool
    segments: tuple[str, ...] = ()

    def joinpath(self, *segments: str) -> HostPath:
        return HostPath(self.is_absolute, self.segments + segments)


# ---------------------------------------------------------------------------
# Guest paths
# ---------------------------------------------------------------------------


def _strip_namespace_prefix(raw: str) -> str:
    """Drop a leading ``\\\\?\\``-style prefix, turning ``UNC\\`` into ``\\\\``."""
    for prefix in WIN32_NAMESPACE_PREFIXES:
        if raw.startswith(prefix):
            rest = raw[len(prefix) :]
            if rest[:3].upper() == "UNC" and rest[3:4] and rest[3] in GUEST_SEPARATORS:
                return GUEST_SEPARATOR * 2 + rest[4:]
            return rest
    return raw


def _split_segments(raw: str, body: str) -> tuple[str, ...]:
    """Split *body* on either separator, rejecting empty and illegal segments.

    A single trailing separator is tolerated (``C:\\dir\\``).
    """
    if not body:
        return ()
    parts = _SEPARATOR_RE.split(body)
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        if not part:
            raise ParseError(raw, "empty path segment")
    check_guest_segments(raw, parts)
    return tuple(parts)


def check_guest_segments(raw: str, segments: Iterable[str]) -> None:
    """Raise ``ParseError`` if any segment cannot be written in a guest path.

    Separators count as invalid, so a host name like ``a\\b`` is rejected
    rather than read back as two segments.
    """
    for segment in segments:
        if INVALID_GUEST_CHARS.intersection(segment) or _SEPARATOR_RE.search(segment):
            raise ParseError(raw, f"segment {segment!r} contains invalid characters")


def parse_guest(raw: str) -> GuestPath:
    if not raw:
        raise ParseError(raw, "empty path")

    path = _strip_namespace_prefix(raw)
    if not path:
        raise ParseError(raw, "nothing follows the namespace prefix")

    if len(path) >= 2 and path[0] in GUEST_SEPARATORS and path[1] in GUEST_SEPARATORS:
        parts = _split_segments(raw, path[2:])
        if len(parts) < 2:
            raise ParseError(raw, "UNC path needs both a server and a share")
        if parts[0] in _DOT_SEGMENTS or parts[1] in _DOT_SEGMENTS:
            raise ParseError(raw, "UNC server and share cannot be '.' or '..'")
        return GuestPath(is_unc=True, server=parts[0], share=parts[1], segments=parts[2:])

    if len(path) >= 2 and path[1] == ":":
        letter = path[0]
        if letter not in string.ascii_letters:
            raise ParseError(raw, f"malformed drive designator {path[:2]!r}")
        rest = path[2:]
        if not rest or rest[0] not in GUEST_SEPARATORS:
            # ``C:`` and ``C:dir`` are relative to the drive's current directory
            raise RelativePathUnsupportedError(raw)
        return GuestPath(drive=letter.upper(), segments=_split_segments(raw, rest[1:]))

    rooted = path[0] in GUEST_SEPARATORS
    return GuestPath(segments=_split_segments(raw, path[1:] if rooted else path), rooted=rooted)


def format_guest(path: GuestPath) -> str:
    tail = GUEST_SEPARATOR.join(path.segments)
    if path.is_unc:
        head = f"\\\\{path.server}\\{path.share}"
        return f"{head}\\{tail}" if tail else head
    if path.drive:
        return f"{path.drive.upper()}:\\{tail}"
    return f"\\{tail}" if path.rooted else tail


# ---------------------------------------------------------------------------
# Host paths
# ---------------------------------------------------------------------------


def parse_host(raw: str) -> HostPath:
    if not raw:
        raise ParseError(raw, "empty path")
    segments = tuple(s for s in raw.split(HOST_SEPARATOR) if s)
    return HostPath(is_absolute=raw.startswith(HOST_SEPARATOR), segments=segments)


def format_host(path: HostPath) -> str:
    body = HOST_SEPARATOR.join(path.segments)
    return HOST_SEPARATOR + body if path.is_absolute else body


def normalize_segments(segments: Iterable[str]) -> tuple[str, ...]:
    """Collapse ``.`` and ``..`` lexically; ``..`` never climbs above the root.

    >>> normalize_segments(["a", ".", "b", "..", "c"])
    ('a', 'c')
    >>> normalize_segments(["..", "a"])
    ('a',)
    """
    out: list[str] = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if out:
                out.pop()
            continue
        out.append(segment)
    return tuple(out)
