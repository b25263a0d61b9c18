import pytest

from uscript.entries import (
    Command,
    InterpretError,
    ReadError,
    ScriptEntries,
    ScriptError,
)
from uscript.reader import ScriptReader
from uscript.runner import ScriptRunner


class RecordingValidator:
    def __init__(self, fail=False):
        self.fail = fail
        self.seen = None

    def validate_script(self, lines):
        self.seen = list(lines)
        if self.fail:
            raise ScriptError("bad script")
        entries = ScriptEntries()
        for line in lines:
            target, _, params = line.partition(" ")
            plugin, _, command = target.partition(".")
            entries.commands.append(Command(plugin, command, params))
        return entries


class RecordingInterpreter:
    def __init__(self, fail=False):
        self.fail = fail
        self.seen = None

    def interpret_script(self, entries):
        self.seen = entries
        if self.fail:
            raise InterpretError("failed")


class ListReader:
    def __init__(self, lines):
        self.lines = lines

    def read_script(self):
        return list(self.lines)


def test_runs_all_stages(tmp_path):
    script = tmp_path / "s.txt"
    script.write_text("# header\nTEMPLATE.DUMMY2 abc  # note\n---\nX.Y\n!--\n")
    validator = RecordingValidator()
    interpreter = RecordingInterpreter()
    entries = ScriptRunner(ScriptReader(script), validator, interpreter).run_script()
    assert validator.seen == ["TEMPLATE.DUMMY2 abc"]
    assert interpreter.seen is entries
    assert entries.commands == [Command("TEMPLATE", "DUMMY2", "abc")]


def test_read_failure_stops_pipeline(tmp_path):
    validator = RecordingValidator()
    interpreter = RecordingInterpreter()
    runner = ScriptRunner(ScriptReader(tmp_path / "missing.txt"), validator, interpreter)
    with pytest.raises(ReadError):
        runner.run_script()
    assert validator.seen is None
    assert interpreter.seen is None


def test_validation_failure_stops_pipeline():
    interpreter = RecordingInterpreter()
    runner = ScriptRunner(ListReader(["A.B"]), RecordingValidator(fail=True), interpreter)
    with pytest.raises(ScriptError):
        runner.run_script()
    assert interpreter.seen is None


def test_interpret_failure_propagates():
    interpreter = RecordingInterpreter(fail=True)
    runner = ScriptRunner(ListReader(["A.B p"]), RecordingValidator(), interpreter)
    with pytest.raises(InterpretError):
        runner.run_script()
    assert interpreter.seen.commands == [Command("A", "B", "p")]


def test_empty_script_runs():
    interpreter = RecordingInterpreter()
    entries = ScriptRunner(ListReader([]), RecordingValidator(), interpreter).run_script()
    assert entries.commands == []
    assert interpreter.seen is entries