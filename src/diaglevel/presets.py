# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Warning-level presets and the option assignments they resolve into.

Each preset is a fixed sequence of unconditional assignments. ``VERBOSE`` is
layered on top of ``DEFAULT``: the default layer is applied first and the
verbose overrides win wherever both touch the same setting.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final

from .errors import UnreachablePresetError
from .groups import DiagnosticGroups
from .guards import ShowByPathWarningsGuard
from .interfaces import OptionsTarget
from .severity import CheckLevel

LOGGER = logging.getLogger(__name__)

# No real source path contains this string, so the guard drops every warning
# that carries a path.
QUIET_GUARD_PATH: Final[str] = "the_longest_path_that_cannot_be_expressed_as_a_string"


class WarningLevel(str, Enum):
    """Coarse diagnostic verbosity chosen by the user."""

    QUIET = "quiet"
    DEFAULT = "default"
    VERBOSE = "verbose"

    def set_options_for_warning_level(self, options: OptionsTarget) -> None:
        """Apply this preset to ``options``."""

        apply_preset(self, options)


def apply_preset(level: WarningLevel, options: OptionsTarget) -> None:
    """Assign every setting governed by ``level`` on ``options``.

    Args:
        level: Preset to resolve.
        options: Target receiving the assignments. It is written to, never read.

    Raises:
        UnreachablePresetError: If ``level`` is not a member of :class:`WarningLevel`.
    """

    LOGGER.debug("applying warning level preset=%s", getattr(level, "value", level))
    if level is WarningLevel.QUIET:
        silence_all_warnings(options)
    elif level is WarningLevel.DEFAULT:
        add_default_warnings(options)
    elif level is WarningLevel.VERBOSE:
        add_verbose_warnings(options)
    else:
        raise UnreachablePresetError(level)


def silence_all_warnings(options: OptionsTarget) -> None:
    """Silence all non-essential warnings.

    Reuses the path filter as a blanket silencer, then turns off each check that
    is gated on its own so the passes behind them can be skipped entirely.
    """

    options.add_warnings_guard(ShowByPathWarningsGuard(QUIET_GUARD_PATH))

    options.check_requires = CheckLevel.OFF
    options.check_provides = CheckLevel.OFF
    options.check_missing_get_css_name_level = CheckLevel.OFF
    options.aggressive_var_check = CheckLevel.OFF
    options.check_types = False
    options.set_warning_level(DiagnosticGroups.CHECK_TYPES, CheckLevel.OFF)
    options.check_unreachable_code = CheckLevel.OFF
    options.check_missing_return = CheckLevel.OFF
    options.set_warning_level(DiagnosticGroups.ACCESS_CONTROLS, CheckLevel.OFF)
    options.set_warning_level(DiagnosticGroups.CONST, CheckLevel.OFF)
    options.set_warning_level(DiagnosticGroups.CONSTANT_PROPERTY, CheckLevel.OFF)
    options.check_global_names_level = CheckLevel.OFF
    options.check_suspicious_code = False
    options.check_global_this_level = CheckLevel.OFF
    options.set_warning_level(DiagnosticGroups.GLOBAL_THIS, CheckLevel.OFF)
    options.set_warning_level(DiagnosticGroups.ES5_STRICT, CheckLevel.OFF)
    options.check_caja = False

    # Tolerate annotations that are not standard.
    options.set_warning_level(DiagnosticGroups.NON_STANDARD_JSDOC, CheckLevel.OFF)


def add_default_warnings(options: OptionsTarget) -> None:
    """Apply the default checks; also the base layer of the verbose preset."""

    options.check_suspicious_code = True
    options.check_unreachable_code = CheckLevel.WARNING
    options.check_control_structures = True

    # Tolerate annotations that are not standard.
    options.set_warning_level(DiagnosticGroups.NON_STANDARD_JSDOC, CheckLevel.OFF)


def add_verbose_warnings(options: OptionsTarget) -> None:
    """Apply the default layer, then every check relevant outside a single codebase.

    Enabling ``check_types`` also validates argument counts at call sites. Code
    written under a convention with no way to mark parameters optional will see
    false positives from that.
    """

    add_default_warnings(options)

    # Global ``this`` detection only runs alongside the suspicious-code pass.
    options.check_suspicious_code = True
    options.check_global_this_level = CheckLevel.WARNING
    options.check_symbols = True
    options.check_missing_return = CheckLevel.WARNING
    options.check_types = True
    options.check_global_names_level = CheckLevel.WARNING
    options.aggressive_var_check = CheckLevel.WARNING
    options.set_warning_level(DiagnosticGroups.MISSING_PROPERTIES, CheckLevel.WARNING)
    options.set_warning_level(DiagnosticGroups.DEPRECATED, CheckLevel.WARNING)
    options.set_warning_level(DiagnosticGroups.ES5_STRICT, CheckLevel.WARNING)

    # Report documentation tags that cannot be interpreted.
    options.set_warning_level(DiagnosticGroups.NON_STANDARD_JSDOC, CheckLevel.WARNING)


__all__ = [
    "QUIET_GUARD_PATH",
    "WarningLevel",
    "add_default_warnings",
    "add_verbose_warnings",
    "apply_preset",
    "silence_all_warnings",
]
