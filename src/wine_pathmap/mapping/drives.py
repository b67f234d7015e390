"""Drive letter discovery from a prefix's ``dosdevices`` directory.

Wine keeps one entry per drive in ``<prefix>/dosdevices``: ``c:`` is
usually a relative symlink to ``../drive_c`` and ``z:`` points at ``/``.
A ``DriveMap`` is a snapshot of those links taken once; it never re-reads
the directory, so callers wanting fresh mappings discover again.
"""

from __future__ import annotations

import errno
import logging
import os
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from wine_pathmap.constants import DOSDEVICES_DIR
from wine_pathmap.mapping.errors import MappingDirectoryUnreadableError
from wine_pathmap.mapping.syntax import HostPath, parse_host

logger = logging.getLogger(__name__)

# ``c:`` but not ``c::`` (raw device entries) or ``unc``
_DRIVE_ENTRY_RE = re.compile(r"[A-Za-z]:")


@dataclass(frozen=True, slots=True)
class DriveMapping:
    letter: str
    host_root: str


def _read_drive_root(mapping_dir: str, name: str) -> str:
    """Resolve one ``dosdevices`` entry to a canonical directory.

    Raises ``OSError`` when the link cannot be read or does not end at a
    directory.
    """
    entry = os.path.join(mapping_dir, name)
    if os.path.islink(entry):
        # absolute targets replace mapping_dir in the join
        entry = os.path.join(mapping_dir, os.readlink(entry))
    root = os.path.realpath(entry)
    if not os.path.isdir(root):
        raise NotADirectoryError(errno.ENOTDIR, "not a directory", root)
    return root


class DriveMap(Mapping[str, str]):
    """Immutable drive letter -> host root table, iterated in letter order."""

    def __init__(self, roots: Mapping[str, str] | None = None) -> None:
        self._roots = dict(sorted((letter.upper(), root) for letter, root in (roots or {}).items()))
        self._root_segments = {
            letter: parse_host(root).segments for letter, root in self._roots.items()
        }

    @classmethod
    def discover(cls, prefix: str | Path) -> DriveMap:
        mapping_dir = os.path.join(os.fspath(prefix), DOSDEVICES_DIR)
        try:
            names = sorted(os.listdir(mapping_dir))
        except OSError as exc:
            raise MappingDirectoryUnreadableError(mapping_dir, exc.strerror or str(exc)) from exc

        roots: dict[str, str] = {}
        # sorted() yields ``C:`` before ``c:``, so Wine's lowercase entry wins
        for name in names:
            if not _DRIVE_ENTRY_RE.fullmatch(name):
                continue
            try:
                root = _read_drive_root(mapping_dir, name)
            except OSError as exc:
                logger.debug("Skipping %s/%s: %s", mapping_dir, name, exc)
                continue
            roots[name[0].upper()] = root

        logger.debug("Discovered %d drive(s) in %s", len(roots), mapping_dir)
        return cls(roots)

    def __getitem__(self, letter: str) -> str:
        return self._roots[letter.upper()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._roots)

    def __len__(self) -> int:
        return len(self._roots)

    def __repr__(self) -> str:
        return f"DriveMap({self._roots!r})"

    def host_root(self, letter: str) -> str | None:
        return self._roots.get(letter.upper())

    def mappings(self) -> list[DriveMapping]:
        return [DriveMapping(letter, root) for letter, root in self._roots.items()]

    def longest_match(self, host_path: HostPath) -> tuple[str, tuple[str, ...]] | None:
        """Pick the drive whose root shares the most leading segments with *host_path*.

        Comparison is per segment, so ``/a/bc`` is not under ``/a/b``.  Ties
        go to the smallest letter.  Returns ``(letter, remaining_segments)``.
        """
        if not host_path.is_absolute:
            return None

        best_letter: str | None = None
        best_depth = -1
        for letter, root_segments in self._root_segments.items():
            depth = len(root_segments)
            if depth > best_depth and host_path.segments[:depth] == root_segments:
                best_letter, best_depth = letter, depth

        if best_letter is None:
            return None
        return best_letter, host_path.segments[best_depth:]


def discover_drives(prefix: str | Path) -> DriveMap:
    return DriveMap.discover(prefix)
