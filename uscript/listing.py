"""Human-readable listings of a script's macros, plugins and commands."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .entries import Command, MacroCommand, ScriptEntries

log = logging.getLogger(__name__)

CMACROS_HEADER = "----- cmacros -----"
VMACROS_HEADER = "----- vmacros -----"
SHELL_VMACROS_HEADER = "---vmacros-shell---"
PLUGINS_HEADER = "----- plugins -----"
COMMANDS_HEADER = "----- commands -----"


def _emit(lines: list[str]) -> list[str]:
    for line in lines:
        log.info("%s", line)
    return lines


def list_items(entries: ScriptEntries, shell_macros: Mapping[str, str] | None = None) -> list[str]:
    """List constant macros, variable macros, shell macros and plugins.

    Variable macros are reported once each, with their most recently assigned value.
    The lines are logged and returned.
    """
    lines: list[str] = []

    if entries.macros:
        lines.append(CMACROS_HEADER)
        lines.extend(f"{name} : {value}" for name, value in entries.macros.items())

    if entries.commands:
        lines.append(VMACROS_HEADER)
        reported: set[str] = set()
        for item in reversed(entries.commands):
            if isinstance(item, MacroCommand) and item.var_macro_name not in reported:
                reported.add(item.var_macro_name)
                lines.append(f"{item.var_macro_name} : {item.var_macro_value}")

    if shell_macros:
        lines.append(SHELL_VMACROS_HEADER)
        lines.extend(f"{name} : {value}" for name, value in shell_macros.items())

    if entries.plugins:
        lines.append(PLUGINS_HEADER)
        lines.extend(
            f"{entry.name} | {entry.info.version} | {' '.join(entry.info.commands)}"
            for entry in entries.plugins
        )

    return _emit(lines)


def list_commands(entries: ScriptEntries) -> list[str]:
    """List the script's plugin commands and variable-macro commands, in script order.

    The lines are logged and returned.
    """
    lines = [COMMANDS_HEADER]
    for item in entries.commands:
        if isinstance(item, MacroCommand):
            fields = [item.plugin, item.command, item.params, item.var_macro_name, item.var_macro_value]
            lines.append("VMacroC: " + "|".join(fields))
        elif isinstance(item, Command):
            lines.append("Command: " + "|".join([item.plugin, item.command, item.params]))
    return _emit(lines)