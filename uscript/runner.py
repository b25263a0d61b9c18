"""Running a script: read, validate, interpret."""

from __future__ import annotations

import logging
from typing import Protocol

from .entries import ScriptEntries, ScriptError

log = logging.getLogger(__name__)


class Reader(Protocol):
    def read_script(self) -> list[str]: ...


class Validator(Protocol):
    def validate_script(self, lines: list[str]) -> ScriptEntries: ...


class Interpreter(Protocol):
    def interpret_script(self, entries: ScriptEntries) -> None: ...


class ScriptRunner:
    """Chains a reader, a validator and an interpreter."""

    def __init__(self, reader: Reader, validator: Validator, interpreter: Interpreter) -> None:
        self.reader = reader
        self.validator = validator
        self.interpreter = interpreter

    def run_script(self) -> ScriptEntries:
        """Run the whole script and return its entries; stages raise ScriptError on failure."""
        try:
            lines = self.reader.read_script()
        except ScriptError:
            log.error("Failed to read script")
            raise
        try:
            entries = self.validator.validate_script(lines)
        except ScriptError:
            log.error("Failed to validate script")
            raise
        try:
            self.interpreter.interpret_script(entries)
        except ScriptError:
            log.error("Failed to interpret script")
            raise
        return entries