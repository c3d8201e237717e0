# dryad

Native functions for the Dryad language, and Oak, a command-line tool for
Dryad projects.

## Installation

```bash
pip install .
```

For the tests:

```bash
pip install ".[test]"
pytest
```

## Native functions

`dryad.natives.NativeFunctionRegistry` holds the built-in functions that a
Dryad program turns on with directives such as `#<console_io>`. A module is
named by `dryad.natives.NativeModule`; `NativeModule.from_name(name)` looks
one up by its directive name and returns `None` for an unknown name.

```python
from dryad.natives import NativeFunctionRegistry, NativeModule
from dryad.values import NativeError

registry = NativeFunctionRegistry()
registry.enable_module(NativeModule.from_name("terminal_ansi"))
registry.enable_module(NativeModule.from_name("binary_io"))

registry.is_native_function("ansi_red")   # True
registry.call("to_hex", [255.0])          # 'ff'
registry.call("from_hex", ["ff"])         # 255.0

try:
    registry.call("sha256", ["data"])     # crypto module not enabled
except NativeError as err:
    print(err.code)                       # 3005
```

Enabling a module twice has no effect. `registry.enabled_modules` lists the
modules enabled so far, in order.

The modules that register functions:

| Directive       | Functions |
|-----------------|-----------|
| `console_io`    | `native_input`, `native_input_char`, `native_input_bytes`, `native_print`, `print`, `native_println`, `println`, `native_flush` |
| `file_io`       | `native_read_file`, `native_write_file`, `native_append_file`, `native_delete_file`, `native_file_exists`, `file_exists`, `native_is_dir`, `native_mkdir`, `native_getcwd` |
| `terminal_ansi` | `native_clear_screen`, `native_move_cursor`, `native_hide_cursor`, `native_show_cursor`, `native_reset_style`, `ansi_red`, `ansi_green`, `ansi_yellow`, `ansi_blue` |
| `binary_io`     | `native_read_bytes`, `native_write_bytes`, `native_file_size`, `to_hex`, `from_hex` |
| `date_time`     | `native_now`, `native_timestamp`, `native_sleep`, `native_uptime`, `current_timestamp` |
| `system_env`    | `native_platform`, `native_arch`, `native_env`, `native_set_env`, `native_exec`, `native_exec_output`, `native_pid`, `native_exit`, `get_current_dir`, `native_current_dir` |
| `debug`         | `debug`, `native_log`, `native_typeof`, `native_memory_usage` |
| `crypto`        | `native_uuid`, `sha256` |

The same tables are available as plain dictionaries from
`dryad.native_io` (`console_io_functions()`, `file_io_functions()`,
`terminal_ansi_functions()`, `binary_io_functions()`) and
`dryad.native_system` (`date_time_functions()`, `system_env_functions()`,
`debug_functions()`, `crypto_functions()`). Each function takes a sequence
of arguments.

Errors are raised as `dryad.values.NativeError`, which carries a numeric
`code` and a `message`: 3002 for an argument of the wrong type, 3004 for the
wrong number of arguments, 3005 for an unknown function, and 5001–5010 for
failed input/output or system calls. `native_exit` raises `SystemExit`.

Values use plain Python types: numbers are `int` or `float` (functions
return `float`), strings are `str`, booleans are `bool`, `None` is null,
lists are arrays and tuples are tuples. `dryad.values.display(value)` renders
a value as Dryad prints it (`None` as `null`, `5.0` as `5`, `True` as
`true`), and `dryad.values.type_name(value)` gives its Dryad type name.

## Oak

```bash
oak init my-project          # create my-project/ with oaklibs.json, main.dryad, README.md, src/, .gitignore
cd my-project
oak install some-lib -v 1.2.0
oak install                  # list the dependencies in oaklibs.json
oak list
oak remove some-lib
oak update
oak info
oak run start                # run a script listed in oaklibs.json
oak clean                    # remove oak_modules, .oak_cache and target
oak publish
```

`oak init NAME -p DIR` creates the project in `DIR` instead of `NAME`; it
fails if the directory already exists. Every other command works on the
`oaklibs.json` in the current directory. On failure a command prints an
error to standard error and exits with status 1.

The same operations are functions in `dryad.oak` (`init_project`,
`install_package`, `remove_package`, `list_dependencies`,
`update_dependencies`, `run_script`, `clean_project`, `show_info`), with the
configuration file read and written by `load_config`, `save_config` and the
`OakConfig` dataclass. They raise `dryad.oak.OakError`.

## What this package does not do

- It does not read, parse or run Dryad source code. There is no lexer,
  parser or interpreter here, and no `dryad` command; the registry only
  holds and calls native functions. The default scripts in a new project's
  `oaklibs.json` (`dryad run main.dryad` and so on) need a `dryad` command
  from elsewhere.
- `oak install`, `oak update` and `oak publish` download and publish
  nothing: `install` only records the dependency in `oaklibs.json`,
  `update` only lists dependencies, and `publish` prints a notice.
  `oak clean` reports the `*.log` and `*.tmp` patterns but deletes no such
  files.
- The `http`, `websocket`, `tcp`, `udp` and `web_server` modules register no
  functions; enabling one prints a notice to standard error. The name
  `data_structures` is not recognised by `NativeModule.from_name`.
- `native_uptime` and `native_memory_usage` always return `0.0`.
- `sha256` is not SHA-256: it returns a 16-digit hexadecimal 64-bit hash,
  and `native_uuid` returns a time-based identifier, not an RFC 4122 UUID.
  Neither is fit for security.