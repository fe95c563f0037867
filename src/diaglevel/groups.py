# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Catalog of diagnostic groups that can be leveled as a unit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final


@dataclass(frozen=True, slots=True)
class DiagnosticGroup:
    """Opaque key naming a set of related diagnostics."""

    name: str
    description: str = ""


class DiagnosticGroups:
    """Well-known diagnostic groups referenced by the warning-level presets."""

    ACCESS_CONTROLS: ClassVar[DiagnosticGroup] = DiagnosticGroup(
        "accessControls", "Visibility annotations such as @private and @protected."
    )
    CHECK_TYPES: ClassVar[DiagnosticGroup] = DiagnosticGroup("checkTypes", "Type checking diagnostics.")
    CONST: ClassVar[DiagnosticGroup] = DiagnosticGroup("const", "Reassignment of @const declarations.")
    CONSTANT_PROPERTY: ClassVar[DiagnosticGroup] = DiagnosticGroup(
        "constantProperty", "Writes to properties declared constant."
    )
    DEPRECATED: ClassVar[DiagnosticGroup] = DiagnosticGroup("deprecated", "Use of @deprecated symbols.")
    ES5_STRICT: ClassVar[DiagnosticGroup] = DiagnosticGroup(
        "es5Strict", "Constructs rejected by ECMAScript 5 strict mode."
    )
    GLOBAL_THIS: ClassVar[DiagnosticGroup] = DiagnosticGroup(
        "globalThis", "Use of ``this`` outside of a method or constructor."
    )
    MISSING_PROPERTIES: ClassVar[DiagnosticGroup] = DiagnosticGroup(
        "missingProperties", "Reads of properties never defined on the type."
    )
    NON_STANDARD_JSDOC: ClassVar[DiagnosticGroup] = DiagnosticGroup(
        "nonStandardJsDocs", "Documentation tags the compiler does not understand."
    )

    ALL: ClassVar[tuple[DiagnosticGroup, ...]] = (
        ACCESS_CONTROLS,
        CHECK_TYPES,
        CONST,
        CONSTANT_PROPERTY,
        DEPRECATED,
        ES5_STRICT,
        GLOBAL_THIS,
        MISSING_PROPERTIES,
        NON_STANDARD_JSDOC,
    )

    @classmethod
    def for_name(cls, name: str) -> DiagnosticGroup | None:
        """Return the group registered under ``name`` if one exists.

        Args:
            name: Stable identifier of the group.

        Returns:
            DiagnosticGroup | None: Matching group, or ``None`` when unknown.
        """

        return _GROUPS_BY_NAME.get(name)


_GROUPS_BY_NAME: Final[dict[str, DiagnosticGroup]] = {group.name: group for group in DiagnosticGroups.ALL}


__all__ = ["DiagnosticGroup", "DiagnosticGroups"]
