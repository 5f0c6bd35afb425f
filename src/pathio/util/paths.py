from __future__ import annotations

"""Path utilities.

CONTRACT
- Inputs: path segments (strings), joined with host separator rules
- Outputs:
  - join_path()/canonicalize() return strings (no filesystem access)
  - split_path() returns SplitPath(volume, directory, file)
  - resolve_real_path() returns absolute canonical path or None
  - resolve_path_unverified() returns absolute path; file part unresolved
- Invariants:
  - Segments go through the host SegmentStrategy before joining
  - resolve_real_path never raises for a missing path
- Failure:
  - resolve_path_unverified raises FileNotFoundError if the directory part
    does not exist
"""

import os
from typing import NamedTuple

from .platform_quirks import STRATEGY, SegmentStrategy


class SplitPath(NamedTuple):
    volume: str
    directory: str
    file: str


def _corrected(segments: tuple[str, ...], strategy: SegmentStrategy | None) -> list[str]:
    return (strategy or STRATEGY).correct(segments)


def join_path(*segments: str, strategy: SegmentStrategy | None = None) -> str:
    parts = _corrected(segments, strategy)
    if not parts:
        return ""
    return os.path.join(*parts)


def canonicalize(*segments: str, strategy: SegmentStrategy | None = None) -> str:
    """Lexically normalize the joined path.

    Collapses ``.``, ``..`` and doubled separators without looking at the
    filesystem, so ``..`` through a symlink is not honoured. A leading ``//``
    is also collapsed, except under the Cygwin strategy where it marks a
    network share.
    """
    joined = join_path(*segments, strategy=strategy)
    if not joined:
        return ""
    normalized = os.path.normpath(joined)
    # posixpath.normpath keeps exactly two leading slashes.
    if (
        os.sep == "/"
        and (strategy or STRATEGY).name != "cygwin"
        and normalized.startswith("//")
    ):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def split_path(*segments: str, strategy: SegmentStrategy | None = None) -> SplitPath:
    joined = join_path(*segments, strategy=strategy)
    volume, rest = os.path.splitdrive(joined)
    directory, file = os.path.split(rest)
    return SplitPath(volume, directory, file)


def join_volume_path(volume: str, directory: str, file: str) -> str:
    # Inverse of split_path.
    if not directory:
        return volume + file
    return volume + os.path.join(directory, file)


def dirname(path: str) -> str:
    """Return all but the last component of ``path`` (POSIX dirname rules).

    >>> dirname("a/b/c.txt")
    'a/b'
    >>> dirname("a/b/")
    'a'
    >>> dirname("c.txt")
    '.'
    """
    seps = os.sep + (os.altsep or "")
    volume, rest = os.path.splitdrive(path)
    trimmed = rest.rstrip(seps)
    if not trimmed:
        # Either "" or nothing but separators.
        return volume + (os.sep if rest else ".")
    head = os.path.dirname(trimmed)
    if not head:
        return volume + "."
    return volume + (head.rstrip(seps) or os.sep)


def resolve_real_path(*segments: str, strategy: SegmentStrategy | None = None) -> str | None:
    """Return the canonical absolute path, or None if it does not exist.

    Symlinks and relative components are resolved via ``os.path.realpath``.
    """
    path = join_path(*segments, strategy=strategy)
    if not path or not os.path.exists(path):
        return None
    try:
        return os.path.realpath(path, strict=True)
    except FileNotFoundError:
        # Removed between the existence check and resolution.
        return None


def resolve_path_unverified(*segments: str, strategy: SegmentStrategy | None = None) -> str:
    """Like resolve_real_path, but the final component need not exist.

    Only the directory part is resolved (and must exist); the file name is
    appended as given. With no directory part the current working directory
    is used as the base.
    """
    volume, directory, file = split_path(*segments, strategy=strategy)
    if directory:
        base = os.path.realpath(volume + directory, strict=True)
    else:
        base = os.getcwd()
    return os.path.join(base, file)


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Path utilities")
    parser.add_argument("segments", nargs="+", help="Path segments to join")
    parser.add_argument("--real", action="store_true", help="Resolve to a canonical path")
    parser.add_argument("--no-verify", action="store_true", help="Resolve without checking the file")
    args = parser.parse_args()

    try:
        if args.real:
            resolved = resolve_real_path(*args.segments)
            if resolved is None:
                print("Path does not exist", file=sys.stderr)
                sys.exit(1)
            print(resolved)
        elif args.no_verify:
            print(resolve_path_unverified(*args.segments))
        else:
            print(join_path(*args.segments))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
