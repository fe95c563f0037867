# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocol describing the options object that presets write into."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .groups import DiagnosticGroup
    from .guards import WarningsGuard
    from .severity import CheckLevel


@runtime_checkable
class OptionsTarget(Protocol):
    """Write-only surface the preset resolver assigns settings through."""

    check_requires: CheckLevel
    check_provides: CheckLevel
    check_missing_get_css_name_level: CheckLevel
    aggressive_var_check: CheckLevel
    check_unreachable_code: CheckLevel
    check_missing_return: CheckLevel
    check_global_names_level: CheckLevel
    check_global_this_level: CheckLevel

    check_types: bool
    check_suspicious_code: bool
    check_control_structures: bool
    check_symbols: bool
    check_caja: bool

    @abstractmethod
    def set_warning_level(self, group: DiagnosticGroup, level: CheckLevel) -> None:
        """Set the level applied to every diagnostic in ``group``.

        Args:
            group: Diagnostic group being leveled.
            level: Level assigned to the group.
        """

    @abstractmethod
    def add_warnings_guard(self, guard: WarningsGuard) -> None:
        """Register ``guard`` so it is consulted for every diagnostic.

        Args:
            guard: Guard to install.
        """


__all__ = ["OptionsTarget"]
