"""Errors raised while translating between guest and host paths.

Every failure is reported as a ``TranslationError`` subclass; no translation
ever falls back to a best-guess path.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wine_pathmap.mapping.case import Resolution


class TranslationErrorCode(StrEnum):
    PARSE_ERROR = "parse_error"
    UNMAPPED_DRIVE = "unmapped_drive"
    NO_DRIVE_COVERS_PATH = "no_drive_covers_path"
    RELATIVE_PATH_UNSUPPORTED = "relative_path_unsupported"
    MAPPING_DIRECTORY_UNREADABLE = "mapping_directory_unreadable"
    PATH_NOT_FOUND = "path_not_found"
    PREFIX_NOT_FOUND = "prefix_not_found"


class TranslationError(Exception):
    """Base error for all path translation failures."""

    code: TranslationErrorCode

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ParseError(TranslationError):
    code = TranslationErrorCode.PARSE_ERROR

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid path {path!r}: {reason}", path)
        self.reason = reason


class UnmappedDriveError(TranslationError):
    code = TranslationErrorCode.UNMAPPED_DRIVE

    def __init__(self, letter: str, path: str | None = None) -> None:
        super().__init__(f"Drive {letter}: is not mapped", path)
        self.letter = letter


class NoDriveCoversPathError(TranslationError):
    code = TranslationErrorCode.NO_DRIVE_COVERS_PATH

    def __init__(self, path: str) -> None:
        super().__init__(f"Host path {path!r} is not mapped to a drive", path)


class RelativePathUnsupportedError(TranslationError):
    code = TranslationErrorCode.RELATIVE_PATH_UNSUPPORTED

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Relative guest path {path!r} cannot be translated without a current directory",
            path,
        )


class MappingDirectoryUnreadableError(TranslationError):
    code = TranslationErrorCode.MAPPING_DIRECTORY_UNREADABLE

    def __init__(self, directory: str | Path, reason: str) -> None:
        super().__init__(f"Cannot read drive mappings from {directory}: {reason}")
        self.directory = Path(directory)


class PathNotFoundError(TranslationError):
    code = TranslationErrorCode.PATH_NOT_FOUND

    def __init__(self, path: str, resolution: Resolution) -> None:
        missing = resolution.unresolved[0] if resolution.unresolved else ""
        super().__init__(f"Path {path!r} does not exist (no entry matching {missing!r})", path)
        self.resolution = resolution


class PrefixNotFoundError(TranslationError):
    code = TranslationErrorCode.PREFIX_NOT_FOUND

    def __init__(self) -> None:
        super().__init__("Could not determine the Wine prefix; set WINEPREFIX")
