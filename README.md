# uscript

`uscript` is a small scripting engine whose commands are carried out by
plugins. A script names the plugins it needs and then calls their commands
in order. Every command is first run in a validation-only pass, with the
plugins not yet enabled; only if every command passes are the plugins
enabled and the commands run for real.

## Modules

- `uscript.entries`: the data model (`Command`, `MacroCommand`,
  `Condition`, `Label`, `PluginInfo`, `PluginEntry`, `ScriptEntries`), the
  exceptions (`ScriptError` and its subclasses `ReadError`,
  `InterpretError`, `PluginError`) and `evaluate_condition`.
- `uscript.reader`: `ScriptReader`, which reads a script file into its
  meaningful lines.
- `uscript.plugin`: the `Plugin` base class and `PluginRegistry`.
- `uscript.template_plugin`: `TemplatePlugin`, an example plugin, and
  `create_plugin()`.
- `uscript.interpreter`: `ScriptInterpreter`, which loads plugins and runs
  the commands held in a `ScriptEntries` object.
- `uscript.runner`: `ScriptRunner`, which chains a reader, a validator and
  an interpreter.
- `uscript.listing`: `list_items` and `list_commands`, readable listings
  of a script's contents.

## Reading a script

`ScriptReader(path).read_script()` returns the script's lines, each
stripped of surrounding whitespace:

- empty lines and lines starting with `#` are dropped;
- text from a `#` to the end of a line is removed;
- a line holding only `---` starts a block comment and a line holding only
  `!--` ends it; the lines between are dropped.

A missing file, a nested `---` or a `!--` outside a block comment raises
`ReadError`.

## Plugins

A plugin is a `Plugin` with a version string and a mapping from command
names to handlers. A handler takes the parameter string, raises
`PluginError` on failure and may leave a result in the plugin's `data`.
Plugins are made available through a `PluginRegistry`, which maps a name
(case-insensitive) to a factory:

```python
from uscript.plugin import PluginRegistry
from uscript.template_plugin import create_plugin

registry = PluginRegistry()
registry.register("TEMPLATE", create_plugin)
```

`TemplatePlugin` offers `INFO` and `DUMMY1` (no arguments allowed),
`DUMMY2` (arguments required; its argument string becomes the result) and
`DUMMY3` (arguments required).

`Plugin.set_params` reads two settings, each a boolean expression:

- `FAULT_TOLERANT`: failures of the plugin's commands, including unknown
  commands, are logged as warnings and ignored, and commands run even
  before the plugin is initialised;
- `PRIVILEGED`: the plugin receives the interpreter when it is
  initialised (otherwise it receives `None`).

## Running entries

`ScriptInterpreter(registry, config_path, evaluate)` takes a plugin
registry, the path of an ini file (`"uscript.ini"` by default, or `None`
for none) and a condition evaluator (`evaluate_condition` by default).
When the ini file exists, the section named after a plugin (its
upper-case name) supplies that plugin's settings; values may use
`${section:key}` interpolation.

`interpret_script(entries)` then:

1. loads every plugin in `entries.plugins` from the registry and applies
   its settings;
2. checks that each command names a command its plugin supports;
3. initialises the plugins;
4. runs every command with the plugins not enabled (validation only);
5. enables the plugins and runs every command for real.

In the real pass, `$NAME` in a command's parameters is replaced with the
value most recently stored in the variable macro `NAME`, and a
`MacroCommand` stores its plugin's result in `var_macro_value`. When a
`Condition` evaluates true, the commands that follow are skipped until the
`Label` it names.

```python
from uscript.entries import Command, MacroCommand, PluginEntry, ScriptEntries
from uscript.interpreter import ScriptInterpreter

entries = ScriptEntries(
    plugins=[PluginEntry(name="TEMPLATE")],
    commands=[
        MacroCommand("TEMPLATE", "DUMMY2", "hello", var_macro_name="GREETING"),
        Command("TEMPLATE", "DUMMY3", "$GREETING world"),
    ],
)
ScriptInterpreter(registry, config_path=None).interpret_script(entries)
# entries.commands[0].var_macro_value == "hello"
# entries.commands[1].params == "hello world"
```

`load_plugin(name)` loads one more plugin into the current entries.
Failures raise `PluginError` (a plugin that cannot be loaded, configured,
initialised or that fails a command) or `InterpretError` (an unsupported
command or a condition that cannot be evaluated).

`evaluate_condition` understands `TRUE` and `FALSE` (in any case), `!`,
`&&`, `||`, `==`, `!=` and parentheses, and raises `ValueError` for
anything it cannot evaluate.

`ScriptRunner(reader, validator, interpreter).run_script()` calls
`reader.read_script()`, passes the lines to
`validator.validate_script(lines)`, hands the returned `ScriptEntries` to
`interpreter.interpret_script` and returns them. A `ScriptError` from any
stage is logged and raised again.

## Listings

`list_items(entries, shell_macros)` lists constant macros, variable macros
(each once, with its latest value), the given extra macros and the loaded
plugins with their versions and commands. `list_commands(entries)` lists
the plugin and variable-macro commands in script order. Both log the lines
and return them.

## What this package does not do

- It has no validator: nothing here turns script lines into a
  `ScriptEntries` object or replaces constant macros in them.
  `ScriptRunner` needs one supplied by the caller, with a
  `validate_script(lines)` method.
- It has no command-line program and no interactive shell.
- Plugins are Python objects registered in a `PluginRegistry`; nothing is
  loaded from a plugins directory.