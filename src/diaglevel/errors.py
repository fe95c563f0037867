# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised while resolving diagnostic presets."""

from __future__ import annotations


class UnreachablePresetError(AssertionError):
    """Raised when preset dispatch receives a value outside the closed preset set.

    This signals a programming defect rather than bad user input, so callers
    are not expected to catch it.
    """

    def __init__(self, level: object) -> None:
        """Record the offending value.

        Args:
            level: Value that reached the dispatch fallback.
        """

        super().__init__(f"Unknown warning level: {level!r}")
        self.level = level


__all__ = ["UnreachablePresetError"]
