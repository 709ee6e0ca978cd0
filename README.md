# snitch

The building blocks of a small unit-test runner. Everything is written for
predictable output. Strings have a fixed capacity and are truncated cleanly.
Numbers are printed in a fixed format. Fatal errors are raised as exceptions.

## What is inside

- `snitch.append`
  - `SmallString` is a string with a fixed capacity. Its methods are
    `capacity`, `available`, `grow`, `resize`, `push_back`, `pop_back` and
    `clear`.
  - `append(buffer, *args)` adds the text of each argument:
    - strings as they are
    - integers in decimal
    - `True`/`False` as `true`/`false`
    - `None` as `nullptr`
    - enum members by their value
    - floats in scientific notation with 15 fractional digits

    When something does not fit, it keeps what fits and returns `False`.
  - `append_or_truncate` does the same, then ends the text with `...` if it
    was cut off.
  - `truncate_end` writes that `...` marker.
  - `format_float(value, precision)` writes a float in scientific notation.
    For example, `format_float(1.5, 6)` gives `1.500000e+00`.
- `snitch.console`
  - `Color` holds ANSI escape codes.
  - `make_colored` wraps a value in a colour code and a reset code. When colour
    is off, it wraps the value in nothing.
  - `append_colored` appends such a value to a `SmallString`. It always keeps
    room for the reset code.
  - Output goes through `console_print`. By default this is `stdout_print`.
    `set_console_printer` installs another printer and returns the previous
    one.
- `snitch.errors`
  - `terminate_with(msg)` prints the message and raises `Terminated`.
  - `assertion_failed(msg)` calls the current handler, which is
    `terminate_with` by default. It raises `Terminated` if the handler returns.
  - `set_assertion_failed_handler` installs another handler.
- `snitch.fileio`: `FileWriter` writes each message to a file and flushes it.
  - A writer made without a path discards everything.
  - A path that cannot be opened goes to `assertion_failed`.
  - The writer is a context manager and also has `close()`.
- `snitch.test_data` holds the data passed around during a run:
  - test ids, sections and source locations
  - test states
  - the event records for reporters: `TestRunStarted`, `TestRunEnded`,
    `TestCaseStarted`, `TestCaseEnded`, `AssertionFailed`,
    `AssertionSucceeded`, `TestCaseSkipped`, `ListTestRunStarted`,
    `TestCaseListed` and `ListTestRunEnded`
- `snitch.capture`: captured values and info messages for a `TestState`.
  - `add_captures(state, names, *args)` stores each value as `name := value`.
    It takes the names from a comma-separated list of expressions.
  - `extract_next_name` splits that list at top-level commas. It leaves commas
    inside quotes or parentheses alone.
  - `add_info(state, *args)` stores one message made of all its arguments.
  - Both return a `ScopedCapture`. `release()` removes what it added. Used as
    a context manager, it also keeps a copy of the state when an exception
    leaves the block.
- `snitch.matcher`: `ContainsSubstring` matches strings. `WithWhatContains`
  matches the message of an exception.
  - Each has `match` and `describe_match`. `describe_match` gives messages
    such as `found 'hello' in 'info: hello'`.
  - Each compares equal to a subject that it matches.
- `snitch.cli`: the test runner's command line.
  - Parsing: `parse_arguments`, and `parse_expected_arguments` for your own
    argument tables.
  - Help: `print_help` and `print_expected_help`.
  - Reading the result: `get_option`, `get_positional_argument` and
    `iter_positional_arguments`.
  - The runner accepts `--list-tests`, `--list-tags`, `--list-tests-with-tag`,
    `--list-reporters`, `--reporter`, `--verbosity`, `--out`, `--color`,
    `--colour-mode` and `--help`. It also accepts any number of positional
    `test regex` values.
  - A few options of a compatible runner are skipped together with their
    values. A warning is printed for each.

## Example

```python
from snitch.append import SmallString, append_or_truncate, format_float
from snitch.cli import extract_executable, get_option, parse_arguments

print(format_float(1.5, 6))                   # 1.500000e+00
print(extract_executable("build/tests.exe"))  # tests

s = SmallString(5)
append_or_truncate(s, "i=", 1, "+", 2, "+", 3)
print(s)                                      # i=...

args = parse_arguments(["tests", "--verbosity", "high", "my test*"])
if args is not None:
    print(get_option(args, "--verbosity").value)  # high
```

`parse_arguments` returns `None` on a bad command line. In that case it has
already printed the errors and the help text.

## What it does not do

This package supplies parts, not a complete runner:

- It has no test registry.
- It does not run tests or match test names against filters.
- It has no reporters.
- It installs no command.

The parsed command line and the event records are there for such a runner to
use.