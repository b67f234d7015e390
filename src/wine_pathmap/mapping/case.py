"""Case-insensitive lookup of guest path segments on a case-sensitive host.

Guest names compare case-insensitively, but the host filesystem is the
source of truth for spelling: a match always returns the on-disk name.
Only entries that exist are ever matched, so a tail that does not exist
yet is left exactly as the caller wrote it.

When several entries differ only by case (``FILE.TXT`` and ``File.txt``),
the first in sorted code-point order wins.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

_ASCII_FOLD = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


@dataclass(frozen=True, slots=True)
class Resolution:
    root: str
    resolved: tuple[str, ...]
    unresolved: tuple[str, ...]

    @property
    def complete(self) -> bool:
        return not self.unresolved

    @property
    def path(self) -> str:
        """The resolved prefix with the unresolved tail appended verbatim."""
        return os.path.join(self.root, *self.resolved, *self.unresolved)

    @property
    def existing_path(self) -> str:
        return os.path.join(self.root, *self.resolved)


def ascii_fold(name: str) -> str:
    """Lowercase ``A``-``Z`` only, leaving every other character untouched."""
    return name.translate(_ASCII_FOLD)


def resolve_segment(directory: str, wanted: str) -> str | None:
    """Return the on-disk spelling of *wanted* inside *directory*, or ``None``."""
    if wanted in (".", ".."):
        return None
    try:
        names = sorted(os.listdir(directory))
    except OSError:
        return None
    # compare against the listing, not the filesystem, which may fold case itself
    if wanted in names:
        return wanted

    folded = ascii_fold(wanted)
    for name in names:
        if ascii_fold(name) == folded:
            return name
    return None


def resolve_path(root: str, segments: Sequence[str]) -> Resolution:
    """Walk *segments* below *root*, fixing case until the first miss."""
    resolved: list[str] = []
    current = root
    for index, segment in enumerate(segments):
        actual = resolve_segment(current, segment)
        if actual is None:
            return Resolution(root, tuple(resolved), tuple(segments[index:]))
        resolved.append(actual)
        current = os.path.join(current, actual)
    return Resolution(root, tuple(resolved), ())
