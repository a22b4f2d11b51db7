# maatools

Building blocks for an assistant command-line tool:

- **Directory layout** (`maatools.dirs`): the data, state, cache and config
  directories come from the `MAA_*_DIR` variables, then from the `XDG_*_HOME`
  variables (with `maa` appended), and otherwise from the platform's defaults
  (`ProjectDirs.detect()`). Derived directories are `library` (`data/lib`),
  `resource` (`data/resource`), `hot_update` (`data/MaaResource`), `copilot`
  (`cache/copilot`) and `log` (`state/debug`).
- **Path helpers** (`maatools.pathutil`): `home`, `expand_tilde`, `ensure`,
  `ensure_clean`, `global_path`, `global_find` and `ensure_name`.
- **Primitive values** (`maatools.primate`): `Primate`, a tagged bool, int
  (32-bit), float or string.
- **Interactive inputs** (`maatools.userinput`, `maatools.bool_input`,
  `maatools.text_input`, `maatools.select`): `BoolInput`, `Input` and `Select`
  ask the user on a writer and read answers from a reader, or take their
  defaults in batch mode (`enable_batch_mode`, `set_batch_mode`).
- **Task parameter values** (`maatools.value`, `maatools.value_serde`,
  `maatools.value_init`): nested objects (`dict`), arrays (`list`), primitives,
  inputs and `Optional` entries that depend on other keys of the same object.
  `deserialize` reads them from decoded JSON/TOML-like data, `initialize` asks
  for each input and drops every optional entry whose conditions do not hold,
  and `serialize` turns the result back into plain data with sorted keys.
  `merge`, `merge_into`, `get_or`, `insert` and `maybe_insert` work on objects.

## Installation

```
pip install .
```

## Examples

Load task parameters and resolve them without prompting:

```python
from maatools.userinput import enable_batch_mode
from maatools.value_serde import deserialize, serialize
from maatools.value_init import initialize

enable_batch_mode()
params = deserialize({
    "medicine": {"default": 1},
    "stage": {"alternatives": ["CE-5", "CE-6"], "default_index": 2},
    "extra": {"conditions": {"medicine": 2}, "default": True},
})
print(serialize(initialize(params)))
# {'medicine': 1, 'stage': 'CE-6'}
```

Here `extra` is left out because its condition `medicine == 2` does not hold.
In batch mode an input without a default raises `BatchModeError`, and a
circular dependency between optional entries raises `ValueInitError`.

Ask a question on any pair of text streams:

```python
import io
from maatools.select import Select

stage = Select(["CE-5", "CE-6"], 2, "a stage to fight", True)
print(stage.ask(io.StringIO(), io.StringIO("\n")))   # CE-6 (the default)
print(stage.ask(io.StringIO(), io.StringIO("1\n")))  # CE-5
print(stage.ask(io.StringIO(), io.StringIO("CE-4\n")))  # CE-4 (custom value)
```

Look up directories:

```python
from maatools import dirs

print(dirs.config(), dirs.cache(), dirs.log())
print(dirs.abs_config("daily.toml", "tasks"))
```

`Dirs(project, env)` builds the same layout from a given `ProjectDirs` and
mapping of environment variables.

## What this package does not do

- It has no command to run; it is a library only.
- It does not define task types, touch modes or option keys.
- It does not search for the core library or the resource directory next to an
  executable; `dirs.library()` and `dirs.resource()` only give the default
  locations inside the data directory.

## Tests

```
pip install .[test]
pytest
```