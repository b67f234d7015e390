"""Bidirectional guest <-> host path translation for one Wine prefix.

``Translator`` combines the drive snapshot, case resolution and path
syntax.  It holds no state besides the prefix and its immutable
``DriveMap``; ``refresh()`` builds a new translator from a fresh discovery.

UNC paths (``\\\\server\\share\\x``) live under ``<prefix>/dosdevices/unc``,
the same place Wine itself looks for them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from wine_pathmap.constants import DOSDEVICES_DIR, UNC_DIR
from wine_pathmap.mapping.case import resolve_path
from wine_pathmap.mapping.drives import DriveMap
from wine_pathmap.mapping.errors import (
    NoDriveCoversPathError,
    ParseError,
    PathNotFoundError,
    RelativePathUnsupportedError,
    UnmappedDriveError,
)
from wine_pathmap.mapping.syntax import (
    GuestPath,
    HostPath,
    check_guest_segments,
    format_guest,
    format_host,
    normalize_segments,
    parse_guest,
    parse_host,
)

logger = logging.getLogger(__name__)


class Translator:
    def __init__(self, prefix: str | Path, drives: DriveMap | None = None) -> None:
        self._prefix = Path(prefix)
        self._drives = drives if drives is not None else DriveMap.discover(self._prefix)
        self._unc_root = os.path.join(os.path.realpath(self._prefix), DOSDEVICES_DIR, UNC_DIR)
        self._unc_segments = parse_host(self._unc_root).segments

    @classmethod
    def from_env(cls, prefix: str | Path | None = None) -> Translator:
        """Build a translator for *prefix*, or the configured ``WINEPREFIX``."""
        from wine_pathmap.config import resolve_prefix

        return cls(resolve_prefix(prefix))

    @property
    def prefix(self) -> Path:
        return self._prefix

    @property
    def drives(self) -> DriveMap:
        return self._drives

    @property
    def unc_root(self) -> str:
        return self._unc_root

    def refresh(self) -> Translator:
        return type(self)(self._prefix)

    def guest_to_host(self, raw: str, *, strict: bool = False) -> str:
        """Translate a guest path to the host path it names.

        Existing components are matched case-insensitively and returned with
        their on-disk spelling; the first missing component and everything
        after it is appended as given.  With ``strict=True`` a missing
        component raises ``PathNotFoundError`` instead.
        """
        guest = parse_guest(raw)
        segments = normalize_segments(guest.segments)

        if guest.is_unc:
            root = self._unc_root
            segments = (guest.server or "", guest.share or "", *segments)
        elif guest.drive:
            drive_root = self._drives.host_root(guest.drive)
            if drive_root is None:
                raise UnmappedDriveError(guest.drive, raw)
            root = drive_root
        else:
            raise RelativePathUnsupportedError(raw)

        resolution = resolve_path(root, segments)
        if strict and not resolution.complete:
            raise PathNotFoundError(raw, resolution)

        host = parse_host(root).joinpath(*resolution.resolved, *resolution.unresolved)
        result = format_host(host)
        logger.debug("Guest %r -> host %r", raw, result)
        return result

    def host_to_guest(self, raw: str) -> str:
        """Translate an absolute host path to a guest path, keeping its case.

        Raises ``ParseError`` when a component has no guest spelling.
        """
        parsed = parse_host(raw)
        if not parsed.is_absolute:
            raise ParseError(raw, "host path must be absolute")
        host = HostPath(True, normalize_segments(parsed.segments))

        guest = self._match_unc(host)
        match = self._drives.longest_match(host)
        if match is not None:
            letter, remaining = match
            # a drive only beats the UNC area when its root lies deeper
            drive_depth = len(host.segments) - len(remaining)
            if guest is None or drive_depth > len(self._unc_segments):
                guest = GuestPath(drive=letter, segments=remaining)
        if guest is None:
            raise NoDriveCoversPathError(raw)
        # a host name holding ``\`` or ``:`` would read back as a different path
        check_guest_segments(raw, (guest.server or "", guest.share or "", *guest.segments))

        result = format_guest(guest)
        logger.debug("Host %r -> guest %r", raw, result)
        return result

    def _match_unc(self, host: HostPath) -> GuestPath | None:
        depth = len(self._unc_segments)
        if host.segments[:depth] != self._unc_segments or len(host.segments) < depth + 2:
            return None
        server, share, *rest = host.segments[depth:]
        return GuestPath(is_unc=True, server=server, share=share, segments=tuple(rest))


def guest_to_host(prefix: str | Path, raw: str, *, strict: bool = False) -> str:
    """One-shot ``Translator(prefix).guest_to_host(raw)`` with fresh discovery."""
    return Translator(prefix).guest_to_host(raw, strict=strict)


def host_to_guest(prefix: str | Path, raw: str) -> str:
    """One-shot ``Translator(prefix).host_to_guest(raw)`` with fresh discovery."""
    return Translator(prefix).host_to_guest(raw)
