# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Warnings guards that override the level of individual diagnostics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, IntEnum

from .groups import DiagnosticGroup
from .severity import CheckLevel


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Finding produced by an analysis before guards have been consulted."""

    message: str
    default_level: CheckLevel = CheckLevel.WARNING
    source_name: str | None = None
    group: DiagnosticGroup | None = None


class GuardPriority(IntEnum):
    """Ordering of guards on an options object; lower values are consulted first."""

    MAX = 1
    FILTER_BY_PATH = 100
    DEFAULT = 200
    MIN = 300


class WarningsGuard(ABC):
    """Rule consulted for every diagnostic that may override its level."""

    priority: GuardPriority = GuardPriority.DEFAULT

    @abstractmethod
    def level_for(self, diagnostic: Diagnostic) -> CheckLevel | None:
        """Return the overriding level for ``diagnostic``.

        Args:
            diagnostic: Finding being reported.

        Returns:
            CheckLevel | None: New level, or ``None`` when the guard has no opinion.
        """

    def disables(self, group: DiagnosticGroup) -> bool:
        """Return ``True`` when the guard turns every diagnostic in ``group`` off."""

        return False

    def describe(self) -> dict[str, object]:
        """Return a JSON-friendly description of the guard."""

        return {"type": type(self).__name__, "priority": int(self.priority)}


class ShowType(str, Enum):
    """Whether a path guard keeps or drops warnings from matching paths."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


class ShowByPathWarningsGuard(WarningsGuard):
    """Silence warnings according to the source path they were reported against.

    With ``ShowType.INCLUDE`` only warnings whose path contains one of
    ``paths`` survive; with ``ShowType.EXCLUDE`` warnings from those paths are
    dropped. Errors and diagnostics without a source path are never touched.
    """

    priority = GuardPriority.FILTER_BY_PATH

    def __init__(self, paths: str | Iterable[str], show_type: ShowType = ShowType.INCLUDE) -> None:
        """Create the guard.

        Args:
            paths: Path fragment or fragments matched by substring containment.
            show_type: Whether matching paths are shown or hidden.
        """

        self.paths: tuple[str, ...] = (paths,) if isinstance(paths, str) else tuple(paths)
        self.show_type = show_type

    def level_for(self, diagnostic: Diagnostic) -> CheckLevel | None:
        """Return ``OFF`` for warnings on the wrong side of the path filter."""

        source = diagnostic.source_name
        if diagnostic.default_level is CheckLevel.ERROR or source is None:
            return None
        in_path = any(path in source for path in self.paths)
        if (self.show_type is ShowType.INCLUDE) != in_path:
            return CheckLevel.OFF
        return None

    def describe(self) -> dict[str, object]:
        """Return a JSON-friendly description including the path filter."""

        payload = super().describe()
        payload["paths"] = list(self.paths)
        payload["show_type"] = self.show_type.value
        return payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShowByPathWarningsGuard):
            return NotImplemented
        return self.paths == other.paths and self.show_type is other.show_type

    def __hash__(self) -> int:
        return hash((self.paths, self.show_type))

    def __repr__(self) -> str:
        return f"ShowByPathWarningsGuard(paths={self.paths!r}, show_type={self.show_type.value!r})"


__all__ = [
    "Diagnostic",
    "GuardPriority",
    "ShowByPathWarningsGuard",
    "ShowType",
    "WarningsGuard",
]
