"""A sample plugin with a few commands, used as a starting point for new plugins."""

from __future__ import annotations

import logging

from .entries import PluginError
from .plugin import Plugin

log = logging.getLogger(__name__)

TEMPLATE_PLUGIN_VERSION = "1.0.0.0"


class TemplatePlugin(Plugin):
    """Plugin offering INFO, DUMMY1, DUMMY2 and DUMMY3.

    While not enabled, commands only validate their arguments.
    """

    def __init__(self) -> None:
        super().__init__(
            TEMPLATE_PLUGIN_VERSION,
            {
                "INFO": self._info,
                "DUMMY1": self._dummy1,
                "DUMMY2": self._dummy2,
                "DUMMY3": self._dummy3,
            },
        )

    @staticmethod
    def _expect_no_args(args: str) -> None:
        if args:
            raise PluginError("expected no argument(s)")

    @staticmethod
    def _expect_args(args: str) -> None:
        if not args:
            raise PluginError("expected argument(s)")

    def _info(self, args: str) -> None:
        self._expect_no_args(args)
        if not self.enabled:
            return
        log.info("Executing INFO")
        log.info("Version: %s", self.version)
        log.info("Description: ")

    def _dummy1(self, args: str) -> None:
        self._expect_no_args(args)
        if not self.enabled:
            return
        log.info("Executing DUMMY1 (no-args, no-return)")

    def _dummy2(self, args: str) -> None:
        self._expect_args(args)
        if not self.enabled:
            return
        log.info("Executing DUMMY2 (args, return) Arg: %s", args)
        self.data = args

    def _dummy3(self, args: str) -> None:
        self._expect_args(args)
        if not self.enabled:
            return
        log.info("Executing DUMMY3 (args, no-return) Arg: %s", args)


def create_plugin() -> TemplatePlugin:
    """Return a fresh TemplatePlugin instance."""
    return TemplatePlugin()