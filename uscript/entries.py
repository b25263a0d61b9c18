"""Script data model, shared settings and the condition evaluator."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Union

SCRIPT_INI_CONFIG = "uscript.ini"

LINE_COMMENT = "#"
BEGIN_BLOCK_COMMENT = "---"
END_BLOCK_COMMENT = "!--"

CONSTANT_MACRO_SEPARATOR = ":="
VARIABLE_MACRO_SEPARATOR = "?="
PLUGIN_COMMAND_SEPARATOR = "."
COMMAND_PARAMS_SEPARATOR = " "

MACRO_MARKER = "$"

COND_TRUE = "TRUE"
COND_FALSE = "FALSE"


class ScriptError(Exception):
    """Base class for every error raised while handling a script."""


class ReadError(ScriptError):
    """The script file could not be read or is malformed."""


class InterpretError(ScriptError):
    """The script could not be interpreted."""


class PluginError(ScriptError):
    """A plugin could not be loaded, configured or run a command."""


@dataclass
class Command:
    """A plugin command: PLUGIN.COMMAND params."""

    plugin: str
    command: str
    params: str = ""


@dataclass
class MacroCommand:
    """A command whose result is stored in a variable macro."""

    plugin: str
    command: str
    params: str = ""
    var_macro_name: str = ""
    var_macro_value: str = ""


@dataclass
class Condition:
    """A conditional jump to a label."""

    condition: str
    label: str


@dataclass
class Label:
    """A jump target."""

    label: str


ScriptItem = Union[Command, MacroCommand, Condition, Label]


@dataclass
class PluginInfo:
    """What a plugin reports about itself."""

    version: str = ""
    commands: list[str] = field(default_factory=list)


@dataclass
class PluginEntry:
    """A plugin named by a script, together with its loaded instance."""

    name: str
    version_rule: str = ""
    version_requested: str = ""
    plugin: Any = None
    info: PluginInfo = field(default_factory=PluginInfo)
    settings: dict[str, str] = field(default_factory=dict)


@dataclass
class ScriptEntries:
    """Everything a validated script holds."""

    macros: dict[str, str] = field(default_factory=dict)
    commands: list[ScriptItem] = field(default_factory=list)
    plugins: list[PluginEntry] = field(default_factory=list)


_TOKEN_RE = re.compile(r"\s*(\|\||&&|==|!=|!|\(|\)|[^\s()!&|=]+)")


def _tokenize(expression: str) -> list[str]:
    tokens = []
    pos = 0
    text = expression.rstrip()
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ValueError(f"invalid character in condition: {text[pos:]!r}")
        tokens.append(match.group(1))
        pos = match.end()
    return tokens


class _Parser:
    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens
        self._pos = 0

    def _peek(self) -> str | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _take(self) -> str:
        token = self._peek()
        if token is None:
            raise ValueError("unexpected end of condition")
        self._pos += 1
        return token

    def parse(self) -> bool:
        if not self._tokens:
            raise ValueError("empty condition")
        value = self._as_bool(self._or())
        if self._peek() is not None:
            raise ValueError(f"unexpected token {self._peek()!r}")
        return value

    @staticmethod
    def _as_bool(value: bool | str) -> bool:
        if isinstance(value, bool):
            return value
        raise ValueError(f"not a boolean value: {value!r}")

    def _or(self) -> bool | str:
        value = self._and()
        while self._peek() == "||":
            self._take()
            right = self._as_bool(self._and())
            value = self._as_bool(value) or right
        return value

    def _and(self) -> bool | str:
        value = self._not()
        while self._peek() == "&&":
            self._take()
            right = self._as_bool(self._not())
            value = self._as_bool(value) and right
        return value

    def _not(self) -> bool | str:
        if self._peek() == "!":
            self._take()
            return not self._as_bool(self._not())
        return self._compare()

    def _compare(self) -> bool | str:
        left = self._primary()
        if self._peek() in ("==", "!="):
            operator = self._take()
            right = self._primary()
            equal = left == right
            return equal if operator == "==" else not equal
        return left

    def _primary(self) -> bool | str:
        token = self._take()
        if token == "(":
            value = self._or()
            if self._take() != ")":
                raise ValueError("missing closing parenthesis")
            return value
        if token in (")", "&&", "||", "==", "!="):
            raise ValueError(f"unexpected token {token!r}")
        if token.upper() == COND_TRUE:
            return True
        if token.upper() == COND_FALSE:
            return False
        return token


def evaluate_condition(expression: str) -> bool:
    """Evaluate a boolean expression built from TRUE, FALSE, !, &&, ||, ==, != and parentheses.

    Raises ValueError when the expression cannot be evaluated.
    """
    return _Parser(_tokenize(expression)).parse()