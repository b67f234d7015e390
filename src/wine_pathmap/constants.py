# Layout of a Wine prefix, relative to the prefix root.
DOSDEVICES_DIR = "dosdevices"
UNC_DIR = "unc"
DEFAULT_PREFIX_NAME = ".wine"

GUEST_SEPARATOR = "\\"
GUEST_SEPARATORS = "\\/"
HOST_SEPARATOR = "/"

# Characters Win32 refuses in a file or directory name.
INVALID_GUEST_CHARS = frozenset('<>:"|?*') | frozenset(chr(c) for c in range(0x20))

# Win32 and NT namespace prefixes stripped before parsing (``\\?\C:\x``, ``\??\C:\x``).
WIN32_NAMESPACE_PREFIXES = ("\\??\\", "\\\\?\\", "\\\\.\\", "//?/", "//./")
