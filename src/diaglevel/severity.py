# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tri-state check levels shared by every diagnostic setting."""

from __future__ import annotations

from enum import Enum
from typing import Final


class CheckLevel(str, Enum):
    """Level at which a check or diagnostic group reports findings."""

    OFF = "off"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Return the ordinal of the level, ``OFF`` being the lowest."""

        return _LEVEL_RANK[self]

    def is_on(self) -> bool:
        """Return ``True`` when the level reports anything at all."""

        return self is not CheckLevel.OFF

    def at_least(self, other: CheckLevel) -> bool:
        """Return ``True`` when this level is as verbose as ``other``.

        Args:
            other: Level to compare against.

        Returns:
            bool: ``True`` when ``self`` ranks at or above ``other``.
        """

        return self.rank >= other.rank


_LEVEL_RANK: Final[dict[CheckLevel, int]] = {
    CheckLevel.OFF: 0,
    CheckLevel.WARNING: 1,
    CheckLevel.ERROR: 2,
}


__all__ = ["CheckLevel"]
