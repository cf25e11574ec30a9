# tinyshell

The core pieces of a small shell, written as a plain Python library with no
third-party dependencies: the shell's state, its builtin commands, error
reporting and a few string helpers.

## Modules

- **`tinyshell.state`**: the `Shell` dataclass. It holds `env` (a dict kept
  in insertion order), `interactive`, `working_dir`, `old_working_dir`,
  `last_exit_code` and `in_pipeline`. `get_env`, `set_env`, `unset_env` and
  `env_lines` read and change variables. `set_env` stores a missing value as
  an empty string. `env_lines` returns `KEY=VALUE` strings.
- **Builtins**: each takes a `Shell` and the argument list, command name
  first, and returns the exit status.
  - `tinyshell.simple_builtins`:
    - `echo_builtin` handles `-n`, `-nnn` and so on, through `is_n_flag`. A
      first argument of `$?` prints the last exit status.
    - `env_builtin` prints only variables with a non-empty value. With any
      argument it fails with status 2.
    - `pwd_builtin` prints the remembered working directory, or the process
      one if none is remembered.
  - `tinyshell.exit_builtin`:
    - `exit_builtin` ends the shell. It returns only when it is given too
      many arguments.
    - `parse_exit_code` checks a numeric argument, rejects values outside
      the signed 64-bit range with `ValueError`, and reduces the value
      modulo 256.
  - `tinyshell.export`:
    - `export_builtin` and `handle_export_arg` set variables.
    - `is_valid_identifier` checks variable names.
    - `format_export` and `print_export` produce the sorted `declare -x`
      listing.
  - `tinyshell.unset`: `unset_builtin`.
  - `tinyshell.cd`: `cd_builtin` changes directory. It goes to `HOME` when
    there is no argument or the argument is `--`, and to `OLDPWD` for `-`.
    It updates `PWD` and `OLDPWD` after each change.
- **`tinyshell.errors`**: writes error messages to standard error, prefixed
  with `tinyshell: `.
  - `format_cmd_error` and `report_cmd_error` build and write command
    errors. For `export` and `unset` the detail is quoted.
  - `format_error` and `report_error` build and write general errors.
  - `usage_message` writes the usage text and returns it.
  - `exit_shell` raises `ShellExit`, whose `status` attribute carries the
    exit status.
- **`tinyshell.textutils`**: string and character helpers.
  - Parsing and conversion: `atoi` and `itoa`.
  - Splitting and slicing: `split`, `strtrim` and `substr`.
  - Searching and comparison: `strnstr`, `strcmp` and `strncmp`.
  - ASCII character classes: `is_space`, `is_alpha`, `is_digit`,
    `is_alnum`, `is_ascii` and `is_print`.

## Examples

```python
from tinyshell.textutils import atoi, itoa, split

atoi("   -42")                # -42
atoi("123abc456")             # 123
itoa(1234)                    # "1234"
split("hola,cola,malo", ",")  # ["hola", "cola", "malo"]
```

```python
from tinyshell.simple_builtins import is_n_flag

is_n_flag("-nnn")   # True
is_n_flag("-nx")    # False
```

```python
from tinyshell.errors import ShellExit
from tinyshell.exit_builtin import exit_builtin
from tinyshell.state import Shell

shell = Shell(env={"HOME": "/tmp"})
try:
    exit_builtin(shell, ["exit", "300"])
except ShellExit as done:
    print(done.status)   # 44
```

Builtins never end the interpreter themselves. `exit_builtin` reaches
`exit_shell`, which raises `ShellExit`, and the caller decides how to shut
down.

## What it does not do

The package has no command to run and no prompt or read loop. It does not
tokenize or parse command lines. It does not expand variables or handle
quotes. It has no pipes, redirections, here-documents or signal handling,
and it does not run external programs. It supplies the state and the
builtins that such a shell would call.