import pytest

from uscript.entries import PluginError
from uscript.plugin import Plugin, PluginRegistry

VERSION = "1.0.0.0"


def _handlers(calls, holder):
    """Build ECHO/FAIL handlers; ECHO stores its params on holder[0]."""

    def echo(params):
        calls.append(params)
        holder[0].data = params

    def fail(params):
        raise PluginError("failure")

    return {"ECHO": echo, "FAIL": fail}


class EchoPlugin(Plugin):
    def __init__(self):
        super().__init__(VERSION, {"ECHO": self._echo})

    def _echo(self, params):
        self.data = params


def test_dispatch_runs_handler_when_initialized():
    calls, holder = [], []
    plugin = Plugin(VERSION, _handlers(calls, holder))
    holder.append(plugin)
    plugin.init(None)
    plugin.dispatch("ECHO", "hello")
    assert plugin.data == "hello"
    plugin.reset_data()
    assert plugin.data == ""


def test_dispatch_requires_init():
    calls, holder = [], []
    plugin = Plugin(VERSION, _handlers(calls, holder))
    holder.append(plugin)
    with pytest.raises(PluginError):
        plugin.dispatch("ECHO", "x")
    assert calls == []


def test_unknown_command_raises():
    calls, holder = [], []
    plugin = Plugin(VERSION, _handlers(calls, holder))
    holder.append(plugin)
    plugin.init(None)
    with pytest.raises(PluginError):
        plugin.dispatch("NOPE", "")


def test_handler_failure_raises():
    calls, holder = [], []
    plugin = Plugin(VERSION, _handlers(calls, holder))
    holder.append(plugin)
    plugin.init(None)
    with pytest.raises(PluginError):
        plugin.dispatch("FAIL", "")


def test_fault_tolerant_swallows_failures_and_runs_uninitialized():
    calls, holder = [], []
    plugin = Plugin(VERSION, _handlers(calls, holder))
    holder.append(plugin)
    plugin.set_params({"FAULT_TOLERANT": "TRUE"})
    assert plugin.fault_tolerant is True
    plugin.dispatch("FAIL", "")
    plugin.dispatch("NOPE", "")
    plugin.dispatch("ECHO", "x")
    assert calls == ["x"]


def test_get_params_sorted_commands():
    info = Plugin(VERSION, _handlers([], [])).get_params()
    assert info.version == "1.0.0.0"
    assert info.commands == ["ECHO", "FAIL"]


def test_set_params_privileged_and_invalid():
    plugin = Plugin(VERSION, _handlers([], []))
    plugin.set_params({"PRIVILEGED": "TRUE", "FAULT_TOLERANT": "FALSE"})
    assert plugin.privileged is True
    assert plugin.fault_tolerant is False
    with pytest.raises(PluginError):
        plugin.set_params({"PRIVILEGED": "maybe"})


def test_enable_and_cleanup():
    plugin = Plugin(VERSION, _handlers([], []))
    marker = object()
    plugin.init(marker)
    plugin.enable()
    assert (plugin.initialized, plugin.enabled, plugin.interpreter) == (True, True, marker)
    plugin.cleanup()
    assert (plugin.initialized, plugin.enabled) == (False, False)


def test_registry_load_and_unknown():
    registry = PluginRegistry()
    registry.register("echo", EchoPlugin)
    first = registry.load("ECHO")
    second = registry.load("echo")
    assert isinstance(first, EchoPlugin)
    assert first is not second
    assert "Echo" in registry
    assert registry.names() == ["ECHO"]
    with pytest.raises(PluginError):
        registry.load("missing")