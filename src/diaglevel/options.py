# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Options model accumulating resolved diagnostic settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .groups import DiagnosticGroup
from .guards import Diagnostic, WarningsGuard
from .severity import CheckLevel


class CompilerOptions(BaseModel):
    """Diagnostic settings handed to the analyses of a single compilation run.

    Every tri-state check starts ``OFF`` and every flag starts ``False``; presets
    and callers assign the values they care about. Instances are not meant to be
    shared between runs.
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    check_requires: CheckLevel = CheckLevel.OFF
    check_provides: CheckLevel = CheckLevel.OFF
    check_missing_get_css_name_level: CheckLevel = CheckLevel.OFF
    aggressive_var_check: CheckLevel = CheckLevel.OFF
    check_unreachable_code: CheckLevel = CheckLevel.OFF
    check_missing_return: CheckLevel = CheckLevel.OFF
    check_global_names_level: CheckLevel = CheckLevel.OFF
    check_global_this_level: CheckLevel = CheckLevel.OFF

    check_types: bool = False
    check_suspicious_code: bool = False
    check_control_structures: bool = False
    check_symbols: bool = False
    check_caja: bool = False

    warning_levels: dict[str, CheckLevel] = Field(default_factory=dict)
    warnings_guards: list[WarningsGuard] = Field(default_factory=list)

    @field_validator("warnings_guards")
    @classmethod
    def _order_guards(cls, value: list[WarningsGuard]) -> list[WarningsGuard]:
        """Return ``value`` without repeated guards, sorted by priority.

        Args:
            value: Guards in registration order.

        Returns:
            list[WarningsGuard]: First occurrence of each guard, lowest priority
            value first. Ties keep their registration order.
        """

        unique: list[WarningsGuard] = []
        for guard in value:
            if guard not in unique:
                unique.append(guard)
        return sorted(unique, key=lambda item: item.priority)

    def set_warning_level(self, group: DiagnosticGroup, level: CheckLevel) -> None:
        """Set the level applied to every diagnostic in ``group``.

        Args:
            group: Diagnostic group being leveled.
            level: Level assigned to the group; replaces any earlier value.
        """

        self.warning_levels[group.name] = CheckLevel(level)

    def warning_level(self, group: DiagnosticGroup) -> CheckLevel | None:
        """Return the level assigned to ``group`` or ``None`` when never set."""

        return self.warning_levels.get(group.name)

    def add_warnings_guard(self, guard: WarningsGuard) -> None:
        """Register ``guard`` so it is consulted for every diagnostic.

        Args:
            guard: Guard to install. Guards are kept in priority order, ties
                keeping their registration order. Registering a guard equal to
                one already installed is a no-op.
        """

        self.warnings_guards = [*self.warnings_guards, guard]

    def disables(self, group: DiagnosticGroup) -> bool:
        """Return ``True`` when nothing from ``group`` can ever be reported.

        Analyses use this to skip work whose findings would be discarded.

        Args:
            group: Diagnostic group to inspect.

        Returns:
            bool: ``True`` when a guard disables the group or its level is ``OFF``.
        """

        if any(guard.disables(group) for guard in self.warnings_guards):
            return True
        level = self.warning_level(group)
        return level is not None and not level.is_on()

    def level_for(self, diagnostic: Diagnostic) -> CheckLevel:
        """Return the level ``diagnostic`` should be reported at.

        Guards are consulted first and the first one with an opinion wins. The
        group level comes next, then the diagnostic's own default.

        Args:
            diagnostic: Finding produced by an analysis.

        Returns:
            CheckLevel: Effective level for the finding.
        """

        for guard in self.warnings_guards:
            level = guard.level_for(diagnostic)
            if level is not None:
                return level
        if diagnostic.group is not None:
            group_level = self.warning_level(diagnostic.group)
            if group_level is not None:
                return group_level
        return diagnostic.default_level

    def to_dict(self) -> dict[str, object]:
        """Return a dictionary representation suitable for serialization."""
        payload: dict[str, object] = dict(
            self.model_dump(mode="json", exclude={"warning_levels", "warnings_guards"})
        )
        payload["warning_levels"] = {name: level.value for name, level in sorted(self.warning_levels.items())}
        payload["warnings_guards"] = [guard.describe() for guard in self.warnings_guards]
        return payload


__all__ = ["CompilerOptions"]
