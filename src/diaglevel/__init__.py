# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic verbosity presets and the options they resolve into."""

from __future__ import annotations

from importlib import metadata

from .errors import UnreachablePresetError
from .groups import DiagnosticGroup, DiagnosticGroups
from .options import CompilerOptions
from .presets import WarningLevel, apply_preset
from .severity import CheckLevel

__all__ = [
    "CheckLevel",
    "CompilerOptions",
    "DiagnosticGroup",
    "DiagnosticGroups",
    "UnreachablePresetError",
    "WarningLevel",
    "__version__",
    "apply_preset",
]

try:
    __version__ = metadata.version("diaglevel")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
