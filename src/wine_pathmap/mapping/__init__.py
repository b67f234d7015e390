from wine_pathmap.mapping.case import Resolution, ascii_fold, resolve_path, resolve_segment
from wine_pathmap.mapping.drives import DriveMap, DriveMapping, discover_drives
from wine_pathmap.mapping.errors import (
    MappingDirectoryUnreadableError,
    NoDriveCoversPathError,
    ParseError,
    PathNotFoundError,
    PrefixNotFoundError,
    RelativePathUnsupportedError,
    TranslationError,
    TranslationErrorCode,
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
from wine_pathmap.mapping.translator import Translator, guest_to_host, host_to_guest

__all__ = [
    "DriveMap",
    "DriveMapping",
    "GuestPath",
    "HostPath",
    "MappingDirectoryUnreadableError",
    "NoDriveCoversPathError",
    "ParseError",
    "PathNotFoundError",
    "PrefixNotFoundError",
    "RelativePathUnsupportedError",
    "Resolution",
    "TranslationError",
    "TranslationErrorCode",
    "Translator",
    "UnmappedDriveError",
    "ascii_fold",
    "check_guest_segments",
    "discover_drives",
    "format_guest",
    "format_host",
    "guest_to_host",
    "host_to_guest",
    "normalize_segments",
    "parse_guest",
    "parse_host",
    "resolve_path",
    "resolve_segment",
]
