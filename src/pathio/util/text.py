from __future__ import annotations

"""Text IO utilities.

CONTRACT
- Inputs: filename or an open text handle; optional SettingSource
- Outputs:
  - open_for_read() returns an open handle decoding with the configured charset
  - read_lines()/read_text() return full remaining content
  - read_file_lines()/read_file_text() return None for a missing filename
- Invariants:
  - Charset is looked up on every open (never cached)
  - Line terminators are preserved exactly (newline="")
  - read_lines()/read_text() always close the handle, even on error
- Failure:
  - open_for_read raises FileOpenError (an OSError) with mode and filename
  - Unknown charsets raise LookupError
"""

import io
from typing import TextIO

from loguru import logger

from ..config import SettingSource, resolve_charset


class FileOpenError(OSError):
    """Raised when a file cannot be opened for reading."""

    def __init__(self, errno: int | None, strerror: str, filename: str, mode: str) -> None:
        super().__init__(errno, strerror, filename)
        self.mode = mode

    def __reduce__(self):
        # OSError.__reduce__ drops mode from the constructor args.
        return (type(self), (self.errno, self.strerror, self.filename, self.mode))

    def __str__(self) -> str:
        return f"{self.strerror} while opening '{self.filename}' using mode '{self.mode}'"


def open_for_read(mode: str, filename: str, *, settings: SettingSource | None = None) -> TextIO:
    charset = resolve_charset(settings)
    try:
        fh = open(filename, mode, encoding=charset, newline="")
    except OSError as e:
        raise FileOpenError(e.errno, e.strerror or str(e), filename, mode) from e
    logger.debug(f"Opened {filename} (mode={mode}, charset={charset})")
    return fh


def apply_encoding(fh: TextIO, *, settings: SettingSource | None = None) -> TextIO:
    """Switch an already-open text handle to the configured charset.

    Must be called before anything is read from ``fh``.
    """
    if not isinstance(fh, io.TextIOWrapper):
        raise TypeError(f"Expected a text file handle, got {type(fh).__name__}")
    fh.reconfigure(encoding=resolve_charset(settings))
    return fh


def read_lines(fh: TextIO) -> list[str]:
    # Handle is consumed: closed whether or not reading succeeds.
    try:
        return fh.readlines()
    finally:
        fh.close()


def read_text(fh: TextIO) -> str:
    return "".join(read_lines(fh))


def read_file_lines(filename: str | None, *, settings: SettingSource | None = None) -> list[str] | None:
    if not filename:
        return None
    return read_lines(open_for_read("r", filename, settings=settings))


def read_file_text(filename: str | None, *, settings: SettingSource | None = None) -> str | None:
    if not filename:
        return None
    return read_text(open_for_read("r", filename, settings=settings))


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Read a text file with the configured charset")
    parser.add_argument("filename", help="File to read")
    parser.add_argument("--lines", action="store_true", help="Print line count instead of content")
    args = parser.parse_args()

    try:
        if args.lines:
            print(len(read_file_lines(args.filename) or []))
        else:
            sys.stdout.write(read_file_text(args.filename) or "")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
