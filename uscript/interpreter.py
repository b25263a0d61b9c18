"""Interpreting validated scripts: loading plugins and executing their commands."""

from __future__ import annotations

import configparser
import logging
import os
import re
from collections.abc import Callable

from .entries import (
    MACRO_MARKER,
    SCRIPT_INI_CONFIG,
    Command,
    Condition,
    InterpretError,
    Label,
    MacroCommand,
    PluginEntry,
    PluginError,
    ScriptEntries,
    ScriptItem,
    evaluate_condition,
)
from .plugin import PluginRegistry

log = logging.getLogger(__name__)

_MACRO_RE = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)")


class ScriptInterpreter:
    """Loads the plugins a script names and runs its commands.

    Commands are first run with the plugins not yet enabled, which only
    validates their arguments, and then run for real.
    """

    def __init__(
        self,
        registry: PluginRegistry,
        config_path: str | os.PathLike[str] | None = SCRIPT_INI_CONFIG,
        evaluate: Callable[[str], bool] = evaluate_condition,
    ) -> None:
        self.registry = registry
        self.config_path = config_path
        self.evaluate = evaluate
        self.entries = ScriptEntries()
        self.shell_macros: dict[str, str] = {}
        self._config: configparser.ConfigParser | None = None
        self._skip_until_label = ""

    def interpret_script(self, entries: ScriptEntries) -> None:
        """Load, check, initialise and run everything in ``entries``.

        Raises PluginError or InterpretError on the first failure.
        """
        self.entries = entries
        self._skip_until_label = ""
        self._config = self._load_config()
        try:
            for entry in entries.plugins:
                self._load_entry(entry)
            log.debug("Plugin loading passed")
            self._cross_check_commands()
            self._init_plugins()
            self._execute_commands(real=False)
            for entry in entries.plugins:
                entry.plugin.enable()
            log.debug("Plugins enabling passed")
            self._execute_commands(real=True)
        except (PluginError, InterpretError):
            log.error("Script execution failed")
            raise
        log.debug("Script execution passed")

    def load_plugin(self, name: str) -> PluginEntry:
        """Load a plugin by name and add it to the current script entries."""
        entry = PluginEntry(name=name.upper())
        self._load_entry(entry)
        self.entries.plugins.append(entry)
        return entry

    def replace_variable_macros(self, text: str) -> str:
        """Replace $NAME with the most recently assigned value of variable macro NAME."""
        for match in _MACRO_RE.finditer(text):
            name = match.group(1)
            value = self._latest_macro_value(name)
            if value is not None:
                text = text.replace(MACRO_MARKER + name, value)
        return text

    def _latest_macro_value(self, name: str) -> str | None:
        for item in reversed(self.entries.commands):
            if isinstance(item, MacroCommand) and item.var_macro_name == name:
                return item.var_macro_value
        return None

    def _load_config(self) -> configparser.ConfigParser | None:
        if self.config_path is None:
            return None
        parser = configparser.ConfigParser(interpolation=configparser.ExtendedInterpolation())
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        try:
            if not parser.read(self.config_path, encoding="utf-8"):
                return None
        except configparser.Error:
            return None
        log.debug("Loaded settings from: %s", self.config_path)
        return parser

    def _load_entry(self, entry: PluginEntry) -> None:
        plugin = self.registry.load(entry.name)
        entry.plugin = plugin
        entry.info = plugin.get_params()

        if self._config is not None:
            if self._config.has_section(entry.name):
                try:
                    entry.settings = dict(self._config.items(entry.name))
                except configparser.Error as exc:
                    raise PluginError(f"{entry.name}: failed to load settings from .ini file") from exc
            else:
                log.debug("%s: no settings in .ini file", entry.name)

        try:
            plugin.set_params(entry.settings)
        except PluginError as exc:
            raise PluginError(f"{entry.name}: failed to set params: {exc}") from exc

        log.debug(
            "%s v%s %s -> loaded ok", entry.name, entry.info.version, " ".join(entry.info.commands)
        )

    def _find_plugin(self, name: str) -> PluginEntry | None:
        return next((entry for entry in self.entries.plugins if entry.name == name), None)

    def _cross_check_commands(self) -> None:
        unsupported = [
            f"{item.plugin}.{item.command}"
            for item in self.entries.commands
            if isinstance(item, (Command, MacroCommand))
            for entry in self.entries.plugins
            if entry.name == item.plugin and item.command not in entry.info.commands
        ]
        if unsupported:
            raise InterpretError(f"commands unsupported by plugin: {', '.join(unsupported)}")
        log.debug("Commands check passed")

    def _init_plugins(self) -> None:
        for entry in self.entries.plugins:
            try:
                entry.plugin.init(self if entry.plugin.privileged else None)
            except PluginError as exc:
                raise PluginError(f"failed to initialize plugin {entry.name}: {exc}") from exc
        log.debug("Plugins initialization passed")

    def _execute_commands(self, real: bool) -> None:
        for item in self.entries.commands:
            self._execute_command(item, real)

    def _execute_command(self, item: ScriptItem, real: bool) -> None:
        if isinstance(item, (Command, MacroCommand)):
            self._run_plugin_command(item, real)
        elif isinstance(item, Condition):
            if real:
                self._run_condition(item)
        elif isinstance(item, Label):
            if real and self._skip_until_label == item.label:
                self._skip_until_label = ""
                log.debug("Stop skipping at label: %s", item.label)

    def _run_plugin_command(self, item: Command | MacroCommand, real: bool) -> None:
        if self._skip_until_label:
            log.debug("Skipped: %s %s args[%s]", item.plugin, item.command, item.params)
            return
        entry = self._find_plugin(item.plugin)
        if entry is None:
            return
        params = item.params
        if real:
            params = item.params = self.replace_variable_macros(item.params)
            log.info("Executing %s.%s %s", item.plugin, item.command, params)
        try:
            entry.plugin.dispatch(item.command, params)
        except PluginError as exc:
            raise PluginError(
                f"failed executing {item.plugin} {item.command} args[{params}]: {exc}"
            ) from exc
        if real and isinstance(item, MacroCommand):
            item.var_macro_value = entry.plugin.data
            log.debug("VMACRO[%s] -> [%s]", item.var_macro_name, item.var_macro_value)
            entry.plugin.reset_data()

    def _run_condition(self, item: Condition) -> None:
        if self._skip_until_label:
            log.debug("Skipped: [IF ..] GOTO: %s", item.label)
            return
        try:
            result = self.evaluate(item.condition)
        except ValueError as exc:
            raise InterpretError(f"failed to evaluate condition: {item.condition}") from exc
        if result:
            self._skip_until_label = item.label
            log.debug("Start skipping to label: %s", item.label)