# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the options model presets write into."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from diaglevel.groups import DiagnosticGroup, DiagnosticGroups
from diaglevel.guards import Diagnostic, GuardPriority, ShowByPathWarningsGuard, ShowType, WarningsGuard
from diaglevel.interfaces import OptionsTarget
from diaglevel.options import CompilerOptions
from diaglevel.severity import CheckLevel


class _EverythingIsAnError(WarningsGuard):
    priority = GuardPriority.MIN

    def level_for(self, diagnostic: Diagnostic) -> CheckLevel | None:
        return CheckLevel.ERROR


class _DisablesDeprecated(WarningsGuard):
    def level_for(self, diagnostic: Diagnostic) -> CheckLevel | None:
        return None

    def disables(self, group: DiagnosticGroup) -> bool:
        return group == DiagnosticGroups.DEPRECATED


def test_defaults_are_silent(options: CompilerOptions) -> None:
    payload = options.to_dict()

    assert payload["check_types"] is False
    assert payload["check_unreachable_code"] == "off"
    assert payload["warning_levels"] == {}
    assert payload["warnings_guards"] == []
    assert options.warning_level(DiagnosticGroups.CHECK_TYPES) is None


def test_satisfies_options_target(options: CompilerOptions) -> None:
    assert isinstance(options, OptionsTarget)


def test_set_warning_level_overwrites(options: CompilerOptions) -> None:
    options.set_warning_level(DiagnosticGroups.CONST, CheckLevel.ERROR)
    options.set_warning_level(DiagnosticGroups.CONST, CheckLevel.WARNING)

    assert options.warning_level(DiagnosticGroups.CONST) is CheckLevel.WARNING
    assert options.to_dict()["warning_levels"] == {"const": "warning"}


def test_assignment_is_validated(options: CompilerOptions) -> None:
    options.check_requires = "warning"  # type: ignore[assignment]
    assert options.check_requires is CheckLevel.WARNING

    with pytest.raises(ValidationError):
        options.check_requires = "loud"  # type: ignore[assignment]


def test_level_for_prefers_guards_then_groups(options: CompilerOptions) -> None:
    deprecated = Diagnostic("old api", CheckLevel.WARNING, "lib/a.js", DiagnosticGroups.DEPRECATED)
    ungrouped = Diagnostic("odd code", CheckLevel.WARNING, "lib/a.js")

    assert options.level_for(deprecated) is CheckLevel.WARNING

    options.set_warning_level(DiagnosticGroups.DEPRECATED, CheckLevel.OFF)
    assert options.level_for(deprecated) is CheckLevel.OFF
    assert options.level_for(ungrouped) is CheckLevel.WARNING

    options.add_warnings_guard(_EverythingIsAnError())
    assert options.level_for(deprecated) is CheckLevel.ERROR
    assert options.level_for(ungrouped) is CheckLevel.ERROR


def test_guards_are_consulted_in_priority_order(options: CompilerOptions) -> None:
    catch_all = _EverythingIsAnError()
    by_path = ShowByPathWarningsGuard("lib/", ShowType.EXCLUDE)
    options.add_warnings_guard(catch_all)
    options.add_warnings_guard(by_path)

    assert options.warnings_guards == [by_path, catch_all]
    assert options.level_for(Diagnostic("w", CheckLevel.WARNING, "lib/a.js")) is CheckLevel.OFF
    assert options.level_for(Diagnostic("w", CheckLevel.WARNING, "src/a.js")) is CheckLevel.ERROR


def test_equal_guard_is_registered_once(options: CompilerOptions) -> None:
    options.add_warnings_guard(ShowByPathWarningsGuard("src/"))
    options.add_warnings_guard(ShowByPathWarningsGuard("src/"))
    options.add_warnings_guard(ShowByPathWarningsGuard("src/", ShowType.EXCLUDE))

    assert len(options.warnings_guards) == 2


def test_constructor_orders_and_dedupes_guards() -> None:
    by_path = ShowByPathWarningsGuard("lib/", ShowType.EXCLUDE)
    catch_all = _EverythingIsAnError()
    options = CompilerOptions(warnings_guards=[catch_all, by_path, ShowByPathWarningsGuard("lib/", ShowType.EXCLUDE)])

    assert options.warnings_guards == [by_path, catch_all]
    assert options.level_for(Diagnostic("w", CheckLevel.WARNING, "lib/a.js")) is CheckLevel.OFF


def test_assigned_guards_are_ordered_and_deduped(options: CompilerOptions) -> None:
    catch_all = _EverythingIsAnError()
    first = ShowByPathWarningsGuard("src/")
    second = ShowByPathWarningsGuard("lib/", ShowType.EXCLUDE)
    options.warnings_guards = [catch_all, first, second, ShowByPathWarningsGuard("src/")]

    assert options.warnings_guards == [first, second, catch_all]


def test_disables(options: CompilerOptions) -> None:
    assert not options.disables(DiagnosticGroups.DEPRECATED)

    options.add_warnings_guard(_DisablesDeprecated())
    assert options.disables(DiagnosticGroups.DEPRECATED)
    assert not options.disables(DiagnosticGroups.CONST)

    options.set_warning_level(DiagnosticGroups.CONST, CheckLevel.OFF)
    assert options.disables(DiagnosticGroups.CONST)


def test_to_dict_describes_guards(options: CompilerOptions) -> None:
    options.add_warnings_guard(ShowByPathWarningsGuard(["a/", "b/"]))

    assert options.to_dict()["warnings_guards"] == [
        {
            "type": "ShowByPathWarningsGuard",
            "priority": int(GuardPriority.FILTER_BY_PATH),
            "paths": ["a/", "b/"],
            "show_type": "include",
        }
    ]
