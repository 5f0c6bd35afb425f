"""pathio package.

Path helpers and charset-aware file reading:

    from pathio import dirname, join_path, read_file_lines, read_file_text, resolve_real_path

    content = read_file_text(join_path("folder", "folder", "file"))
    lines = read_file_lines(join_path("folder", "folder", "file"))

    dirname("path/to/file")            # 'path/to'
    resolve_real_path("path/to/file")  # '/abs/path/to/file' or None

The charset used to decode files comes from a SettingSource (``PATHIO_CHARSET``
in the environment by default, falling back to utf-8).
"""

from .config import (
    DEFAULT_CHARSET,
    EnvSettings,
    SettingSource,
    StaticSettings,
    default_settings,
    load_settings_file,
    resolve_charset,
)
from .util.paths import (
    SplitPath,
    canonicalize,
    dirname,
    join_path,
    join_volume_path,
    resolve_path_unverified,
    resolve_real_path,
    split_path,
)
from .util.text import (
    FileOpenError,
    apply_encoding,
    open_for_read,
    read_file_lines,
    read_file_text,
    read_lines,
    read_text,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CHARSET",
    "EnvSettings",
    "SettingSource",
    "StaticSettings",
    "default_settings",
    "load_settings_file",
    "resolve_charset",
    "SplitPath",
    "canonicalize",
    "dirname",
    "join_path",
    "join_volume_path",
    "resolve_path_unverified",
    "resolve_real_path",
    "split_path",
    "FileOpenError",
    "apply_encoding",
    "open_for_read",
    "read_file_lines",
    "read_file_text",
    "read_lines",
    "read_text",
]
