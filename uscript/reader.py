"""Reading script files into a list of meaningful lines."""

from __future__ import annotations

import logging
import os

from .entries import BEGIN_BLOCK_COMMENT, END_BLOCK_COMMENT, LINE_COMMENT, ReadError

log = logging.getLogger(__name__)


class ScriptReader:
    """Reads a script, dropping blank lines and comments."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path

    def read_script(self) -> list[str]:
        """Return the script's lines, trimmed and without comments."""
        try:
            with open(self.path, encoding="utf-8") as file:
                raw_lines = file.read().splitlines()
        except OSError as exc:
            raise ReadError(f"unable to open file: {self.path}") from exc

        lines: list[str] = []
        in_block = False
        for raw in raw_lines:
            line = raw.strip()
            if not line or line.startswith(LINE_COMMENT):
                continue
            if line == BEGIN_BLOCK_COMMENT:
                if in_block:
                    raise ReadError("nested block comment not supported")
                in_block = True
                continue
            if line == END_BLOCK_COMMENT:
                if not in_block:
                    raise ReadError("invalid end of block comment")
                in_block = False
                continue
            if in_block:
                continue
            before, _, comment = line.partition(LINE_COMMENT)
            lines.append(before.rstrip() if comment else line)

        for line in lines:
            log.debug("%s", line)
        return lines