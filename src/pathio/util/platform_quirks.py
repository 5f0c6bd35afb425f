from __future__ import annotations

"""Host-specific path segment correction.

CONTRACT
- Inputs: ordered path segments (strings)
- Outputs:
  - Corrected list of segments, ready for os.path.join
- Invariants:
  - Strategy is picked once per process from sys.platform (STRATEGY)
  - PassthroughStrategy is the identity transform
  - CygwinSlashStrategy rebuilds leading slashes from a literal count:
    exactly 2 -> single "/" prefix (UNC), otherwise "/" * count
- Failure:
  - None (pure string manipulation)
"""

import sys
from dataclasses import dataclass
from typing import Protocol, Sequence

from loguru import logger

_LEADING_SLASHES = "/\\"


class SegmentStrategy(Protocol):
    name: str

    def correct(self, segments: Sequence[str]) -> list[str]: ...


@dataclass(frozen=True)
class PassthroughStrategy:
    name: str = "passthrough"

    def correct(self, segments: Sequence[str]) -> list[str]:
        return list(segments)


@dataclass(frozen=True)
class CygwinSlashStrategy:
    """Undo the UNC special-casing Cygwin applies to leading slashes.

    Leading empty (or whitespace-only) segments each count as one slash, and
    a run of slashes stripped from the first real segment counts as one more.
    A total of two means the caller spelled a network share; anything else is
    passed through with that many slashes.
    """

    name: str = "cygwin"

    def correct(self, segments: Sequence[str]) -> list[str]:
        if not segments:
            return []

        slashes = 0
        idx = 0
        while idx < len(segments) and not segments[idx].strip():
            slashes += 1
            idx += 1

        part = segments[idx] if idx < len(segments) else ""
        rest = list(segments[idx + 1:])

        stripped = part.lstrip(_LEADING_SLASHES)
        # A run of leading slashes counts once, however long.
        if stripped != part:
            slashes += 1

        if slashes == 2:
            return ["/" + stripped, *rest]
        return ["/" * slashes + stripped, *rest]


def select_strategy(platform: str | None = None) -> SegmentStrategy:
    platform = sys.platform if platform is None else platform
    if platform == "cygwin":
        return CygwinSlashStrategy()
    return PassthroughStrategy()


STRATEGY: SegmentStrategy = select_strategy()
logger.debug(f"Path segment strategy: {STRATEGY.name} (platform={sys.platform})")
