# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from diaglevel.groups import DiagnosticGroup, DiagnosticGroups
from diaglevel.guards import WarningsGuard
from diaglevel.options import CompilerOptions
from diaglevel.severity import CheckLevel


@dataclass
class RecordingOptions:
    """Options double that records every assignment in call order."""

    assignments: list[tuple[str, object]] = field(default_factory=list)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "assignments":
            object.__setattr__(self, name, value)
            return
        self.assignments.append((name, value))

    def set_warning_level(self, group: DiagnosticGroup, level: CheckLevel) -> None:
        self.assignments.append((f"group:{group.name}", level))

    def add_warnings_guard(self, guard: WarningsGuard) -> None:
        self.assignments.append(("guard", guard))

    def final(self) -> dict[str, object]:
        """Return the last value assigned to each setting."""
        return dict(self.assignments)


@pytest.fixture
def options() -> CompilerOptions:
    """Return freshly constructed options."""
    return CompilerOptions()


@pytest.fixture
def loud_options() -> CompilerOptions:
    """Return options with every check switched on before any preset runs."""
    loud = CompilerOptions(
        check_requires=CheckLevel.ERROR,
        check_provides=CheckLevel.ERROR,
        check_missing_get_css_name_level=CheckLevel.ERROR,
        aggressive_var_check=CheckLevel.ERROR,
        check_unreachable_code=CheckLevel.ERROR,
        check_missing_return=CheckLevel.ERROR,
        check_global_names_level=CheckLevel.ERROR,
        check_global_this_level=CheckLevel.ERROR,
        check_types=True,
        check_suspicious_code=True,
        check_control_structures=True,
        check_symbols=True,
        check_caja=True,
    )
    for group in DiagnosticGroups.ALL:
        loud.set_warning_level(group, CheckLevel.ERROR)
    return loud


@pytest.fixture
def recorder() -> RecordingOptions:
    """Return an empty recording options double."""
    return RecordingOptions()


@pytest.fixture
def make_recorder() -> type[RecordingOptions]:
    """Return the recording double type for tests needing several instances."""
    return RecordingOptions
