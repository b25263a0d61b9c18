"""Base class for script plugins and a registry to load them by name."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .entries import PluginError, PluginInfo, evaluate_condition

log = logging.getLogger(__name__)

CFG_FAULT_TOLERANT = "FAULT_TOLERANT"
CFG_PRIVILEGED = "PRIVILEGED"

CommandHandler = Callable[[str], None]


class Plugin:
    """A plugin exposing named commands that take a parameter string.

    Handlers raise PluginError on failure and may store a result in ``data``.
    """

    def __init__(self, version: str, commands: Mapping[str, CommandHandler]) -> None:
        self.version = version
        self._commands = dict(commands)
        self.initialized = False
        self.enabled = False
        self.fault_tolerant = False
        self.privileged = False
        self.data = ""
        self.interpreter: Any = None

    @property
    def commands(self) -> list[str]:
        return sorted(self._commands)

    def dispatch(self, command: str, params: str) -> None:
        """Run a command; in fault-tolerant mode failures are logged and ignored."""
        try:
            handler = self._commands.get(command)
            if handler is None:
                raise PluginError(f"command {command} not supported")
            if not (self.initialized or self.fault_tolerant):
                raise PluginError("plugin not initialized")
            handler(params)
        except PluginError as exc:
            if not self.fault_tolerant:
                raise
            log.warning("%s: failed but continue [fault-tolerant mode]", exc)

    def get_params(self) -> PluginInfo:
        return PluginInfo(version=self.version, commands=self.commands)

    def set_params(self, settings: Mapping[str, str]) -> None:
        """Apply settings; FAULT_TOLERANT and PRIVILEGED are boolean expressions."""
        if not settings:
            log.debug("no specific settings (empty)")
            return
        for key, attribute in ((CFG_FAULT_TOLERANT, "fault_tolerant"), (CFG_PRIVILEGED, "privileged")):
            if key in settings:
                try:
                    value = evaluate_condition(settings[key])
                except ValueError as exc:
                    raise PluginError(f"invalid value for {key}: {settings[key]!r}") from exc
                setattr(self, attribute, value)
                log.debug("%s: %s", attribute, value)

    def init(self, interpreter: Any) -> None:
        self.interpreter = interpreter
        self.initialized = True

    def enable(self) -> None:
        self.enabled = True

    def cleanup(self) -> None:
        self.initialized = False
        self.enabled = False

    def reset_data(self) -> None:
        self.data = ""


class PluginRegistry:
    """Maps plugin names to factories producing Plugin instances."""

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], Plugin]] = {}

    def register(self, name: str, factory: Callable[[], Plugin]) -> None:
        self._factories[name.upper()] = factory

    def load(self, name: str) -> Plugin:
        try:
            factory = self._factories[name.upper()]
        except KeyError:
            raise PluginError(f"{name} -> loading failed") from None
        return factory()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._factories

    def names(self) -> list[str]:
        return sorted(self._factories)