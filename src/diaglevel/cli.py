# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for inspecting resolved warning-level presets."""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum

import typer
from rich.table import Table

from . import __version__
from .groups import DiagnosticGroups
from .logging import get_console, info, section
from .options import CompilerOptions
from .presets import WarningLevel, apply_preset

app = typer.Typer(
    name="diaglevel",
    help="Resolve diagnostic warning-level presets into concrete settings.",
    add_completion=False,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Rendering used for command output."""

    TABLE = "table"
    JSON = "json"


def resolve(level: WarningLevel) -> CompilerOptions:
    """Return fresh options with ``level`` applied."""

    options = CompilerOptions()
    apply_preset(level, options)
    return options


def flatten_settings(payload: Mapping[str, object], prefix: str = "") -> dict[str, str]:
    """Flatten a serialized options payload into ``dotted.key -> text`` pairs.

    Non-empty lists are expanded one entry per key (``name[0]``, ``name[0].key``)
    so each value stays short enough to render in a table cell.

    Args:
        payload: Mapping produced by :meth:`CompilerOptions.to_dict`.
        prefix: Key prefix used while recursing into nested mappings.

    Returns:
        dict[str, str]: Flat mapping with stringified values.
    """

    flat: dict[str, str] = {}
    for key, value in payload.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_settings(value, prefix=f"{name}."))
        elif isinstance(value, list) and value:
            flat.update(flatten_settings({f"[{index}]": item for index, item in enumerate(value)}, prefix=name))
        elif isinstance(value, str):
            flat[name] = value
        else:
            flat[name] = json.dumps(value, sort_keys=True)
    return flat


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the installed version and exit.",
    ),
) -> None:
    """Resolve diagnostic warning-level presets into concrete settings."""


@app.command("show")
def show(
    level: WarningLevel = typer.Argument(..., case_sensitive=False, help="Preset to resolve."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format.",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
) -> None:
    """Print every setting the preset resolves to."""

    payload = resolve(level).to_dict()
    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    use_color = not no_color
    section(f"Warning level: {level.value}", use_color=use_color)
    table = Table()
    table.add_column("setting", no_wrap=True)
    table.add_column("value", overflow="fold")
    for name, value in sorted(flatten_settings(payload).items()):
        table.add_row(name, value)
    get_console(color=use_color).print(table)


@app.command("diff")
def diff(
    base: WarningLevel = typer.Argument(..., case_sensitive=False, help="Preset used as the baseline."),
    other: WarningLevel = typer.Argument(..., case_sensitive=False, help="Preset compared to the baseline."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format.",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
) -> None:
    """Print the settings whose resolved values differ between two presets."""

    base_flat = flatten_settings(resolve(base).to_dict())
    other_flat = flatten_settings(resolve(other).to_dict())
    changes = {
        name: {"base": base_flat.get(name), "other": other_flat.get(name)}
        for name in sorted(base_flat.keys() | other_flat.keys())
        if base_flat.get(name) != other_flat.get(name)
    }
    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps(changes, indent=2, sort_keys=True))
        return

    use_color = not no_color
    if not changes:
        info(f"{base.value} and {other.value} resolve to identical settings", use_emoji=False, use_color=use_color)
        return
    section(f"{base.value} -> {other.value}", use_color=use_color)
    table = Table()
    table.add_column("setting", no_wrap=True)
    table.add_column(base.value, overflow="fold")
    table.add_column(other.value, overflow="fold")
    for name, values in changes.items():
        table.add_row(name, values["base"] or "-", values["other"] or "-")
    get_console(color=use_color).print(table)


@app.command("groups")
def groups() -> None:
    """List the diagnostic groups presets can level."""

    for group in DiagnosticGroups.ALL:
        typer.echo(f"{group.name}\t{group.description}")


__all__ = ["OutputFormat", "app", "flatten_settings", "resolve"]
