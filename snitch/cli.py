"""Command-line parsing and help output for the test runner."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from enum import Flag
from typing import Iterator, Optional, Sequence

from snitch.append import SmallString, append, truncate_end
from snitch.console import Color, console_print, make_colored
from snitch.errors import terminate_with

VERSION = "1.0.0"
DEFAULT_WITH_COLOR = True
_MAX_MESSAGE_LENGTH = 1024

PROGRAM_DESCRIPTION = f"Test runner (snitch v{VERSION} | compatible with Catch2 v3.4.0)"


class ArgumentType(Flag):
    """Whether an expected argument must be given and whether it may repeat."""

    OPTIONAL = 0
    MANDATORY = 1
    REPEATABLE = 2


@dataclass(frozen=True)
class ExpectedArgument:
    """Description of an argument the parser accepts.

    Options have one or two names (short first, long second); positional
    arguments have no name but must have a value name.
    """

    names: tuple[str, ...] = ()
    value_name: Optional[str] = None
    ignored: bool = False
    description: str = ""
    type: ArgumentType = ArgumentType.OPTIONAL

    @property
    def is_option(self) -> bool:
        return bool(self.names)

    @property
    def has_value(self) -> bool:
        return self.value_name is not None

    @property
    def is_mandatory(self) -> bool:
        return ArgumentType.MANDATORY in self.type

    @property
    def is_repeatable(self) -> bool:
        return ArgumentType.REPEATABLE in self.type


@dataclass(frozen=True)
class Argument:
    """A parsed argument: an option (with a name) or a positional value."""

    name: str = ""
    value_name: Optional[str] = None
    value: Optional[str] = None

    @property
    def is_option(self) -> bool:
        return bool(self.name)


@dataclass
class Input:
    """Result of parsing a command line."""

    executable: str = ""
    arguments: list[Argument] = field(default_factory=list)


@dataclass(frozen=True)
class ParserSettings:
    silent: bool = False
    tolerant: bool = False
    with_color: bool = True


@dataclass(frozen=True)
class PrintHelpSettings:
    with_color: bool = True


def _opt(
    names: tuple[str, ...],
    value_name: Optional[str] = None,
    description: str = "",
    ignored: bool = False,
) -> ExpectedArgument:
    return ExpectedArgument(names, value_name, ignored, description)


EXPECTED_ARGS: tuple[ExpectedArgument, ...] = (
    _opt(("-l", "--list-tests"), None, "List tests by name"),
    _opt(("--list-tags",), None, "List tags by name"),
    _opt(("--list-tests-with-tag",), "tag", "List tests by name with a given tag"),
    _opt(("--list-reporters",), None, "List available test reporters (see --reporter)"),
    _opt(
        ("-r", "--reporter"),
        "reporter[::key=value]*",
        "Choose which reporter to use to output the test results",
    ),
    _opt(
        ("-v", "--verbosity"),
        "quiet|normal|high|full",
        "Define how much gets sent to the standard output",
    ),
    _opt(("-o", "--out"), "path", "Saves output to a file given as 'path'"),
    _opt(("--color",), "always|default|never", "Enable/disable color in output"),
    _opt(
        ("--colour-mode",),
        "ansi|default|none",
        "Enable/disable color in output (for compatibility with Catch2)",
    ),
    _opt(("-h", "--help"), None, "Print help"),
    ExpectedArgument(
        (), "test regex", False, "A regex to select which test cases to run",
        ArgumentType.REPEATABLE,
    ),
    # Accepted for compatibility with Catch2 and otherwise unused: these only
    # swallow the argument and its value; they are still reported as unknown.
    _opt(("-s", "--success"), ignored=True),
    _opt(("-b", "--break"), ignored=True),
    _opt(("-e", "--nothrow"), ignored=True),
    _opt(("-i", "--invisibles"), ignored=True),
    _opt(("-n", "--name"), ignored=True),
    _opt(("-a", "--abort"), ignored=True),
    _opt(("-x", "--abortx"), "x", ignored=True),
    _opt(("-w", "--warn"), "x", ignored=True),
    _opt(("-d", "--durations"), "x", ignored=True),
    _opt(("-D", "--min-duration"), "x", ignored=True),
    _opt(("-f", "--input-file"), "x", ignored=True),
    _opt(("-#", "--filenames-as-tags"), "x", ignored=True),
    _opt(("-c", "--section"), "x", ignored=True),
    _opt(("--list-listeners",), ignored=True),
    _opt(("--order",), "x", ignored=True),
    _opt(("--rng-seed",), "x", ignored=True),
    _opt(("--libidentify",), ignored=True),
    _opt(("--wait-for-keypress",), "x", ignored=True),
    _opt(("--shard-count",), "x", ignored=True),
    _opt(("--shard-index",), "x", ignored=True),
    _opt(("--allow-running-no-tests",), ignored=True),
)


def extract_executable(path: str) -> str:
    """Strip the folder and the extension from a program path."""
    folder_end = max(path.rfind("\\"), path.rfind("/"))
    if folder_end != -1:
        path = path[folder_end + 1:]
    extension_start = path.rfind(".")
    if extension_start != -1:
        path = path[:extension_start]
    return path


def _validate(expected: Sequence[ExpectedArgument]) -> None:
    for e in expected:
        if e.is_option:
            if len(e.names) == 1:
                if not e.names[0].startswith("-"):
                    terminate_with("option name must start with '-' or '--'")
            elif not (e.names[0].startswith("-") and e.names[1].startswith("--")):
                terminate_with("option names must be given with '-' first and '--' second")
        elif not e.has_value:
            terminate_with("positional argument must have a value name")


def _report(settings: ParserSettings, label: str, color: Color, message: str) -> None:
    if not settings.silent:
        console_print(str(make_colored(label, settings.with_color, color)) + message)


def parse_expected_arguments(
    argv: Sequence[str],
    expected: Sequence[ExpectedArgument],
    settings: Optional[ParserSettings] = None,
) -> Optional[Input]:
    """Parse ``argv`` against ``expected``; return None on error unless tolerant."""
    settings = settings or ParserSettings()
    if not argv:
        raise ValueError("argv must contain at least the program path")

    _validate(expected)

    result = Input(extract_executable(argv[0]))
    found = [False] * len(expected)
    bad = False

    remaining = iter(argv[1:])
    for arg in remaining:
        if arg.startswith("-"):
            matched = False
            for index, e in enumerate(expected):
                if e.ignored or not e.is_option or arg not in e.names:
                    continue

                matched = True
                if found[index] and not e.is_repeatable:
                    _report(
                        settings, "error:", Color.ERROR,
                        f" duplicate command line argument '{arg}'\n",
                    )
                    bad = True
                    break

                found[index] = True
                if e.has_value:
                    value = next(remaining, None)
                    if value is None:
                        _report(
                            settings, "error:", Color.ERROR,
                            f" missing value '<{e.value_name}>' "
                            f"for command line argument '{arg}'\n",
                        )
                        bad = True
                        break
                    result.arguments.append(Argument(e.names[-1], e.value_name, value))
                else:
                    result.arguments.append(Argument(e.names[-1]))
                break

            if not matched:
                _report(
                    settings, "warning:", Color.WARNING,
                    f" unknown command line argument '{arg}'\n",
                )

            # Known but unsupported arguments swallow their value, if they take one.
            for e in expected:
                if e.ignored and arg in e.names:
                    if e.has_value:
                        next(remaining, None)
                    break
        else:
            for index, e in enumerate(expected):
                if e.ignored or e.is_option:
                    continue
                if found[index] and not e.is_repeatable:
                    continue
                result.arguments.append(Argument("", e.value_name, arg))
                found[index] = True
                break
            else:
                _report(settings, "error:", Color.ERROR, " too many positional arguments\n")
                bad = True

    for index, e in enumerate(expected):
        if found[index] or not e.is_mandatory or e.ignored:
            continue
        if e.is_option:
            message = f" missing option '<{e.names[-1]}>'\n"
        else:
            message = f" missing positional argument '<{e.value_name}>'\n"
        _report(settings, "error:", Color.ERROR, message)
        bad = True

    if bad and not settings.tolerant:
        return None
    return result


def _usage_item(e: ExpectedArgument) -> str:
    if e.is_mandatory and e.is_repeatable:
        return f" <{e.value_name}>..."
    if e.is_mandatory:
        return f" <{e.value_name}>"
    if e.is_repeatable:
        return f" [<{e.value_name}>...]"
    return f" [<{e.value_name}>]"


def _heading(e: ExpectedArgument) -> str:
    heading = SmallString(_MAX_MESSAGE_LENGTH)
    if e.is_option:
        parts: list[str] = []
        if e.names[0].startswith("--"):
            parts.append("    ")
        parts.append(e.names[0])
        if len(e.names) == 2:
            parts += [", ", e.names[1]]
        if e.has_value:
            parts += [" <", e.value_name or "", ">"]
    else:
        parts = ["<", e.value_name or "", ">"]

    if not append(heading, *parts):
        truncate_end(heading)
    return str(heading)


def print_expected_help(
    program_name: str,
    program_description: str,
    expected: Sequence[ExpectedArgument],
    settings: Optional[PrintHelpSettings] = None,
) -> None:
    """Print the program description, a usage line and the list of arguments."""
    settings = settings or PrintHelpSettings()
    with_color = settings.with_color

    console_print(str(make_colored(program_description, with_color, Color.HIGHLIGHT2)) + "\n")
    console_print(str(make_colored("Usage:", with_color, Color.PASS)) + "\n")

    usage = "  " + program_name
    if any(e.is_option for e in expected):
        usage += " [options...]"
    usage += "".join(_usage_item(e) for e in expected if not e.ignored and not e.is_option)
    console_print(usage + "\n\n")

    for e in expected:
        if e.ignored:
            continue
        heading = make_colored(_heading(e), with_color, Color.HIGHLIGHT1)
        console_print(f"  {heading} {e.description}\n")


def get_option(args: Input, name: str) -> Optional[Argument]:
    """Return the first option with the given (long) name, if any."""
    return next((arg for arg in args.arguments if arg.name == name), None)


def get_positional_argument(args: Input, name: str) -> Optional[Argument]:
    """Return the first positional argument with the given value name, if any."""
    return next(
        (a for a in args.arguments if not a.is_option and a.value_name == name), None
    )


def iter_positional_arguments(args: Input, name: str) -> Iterator[str]:
    """Yield the values of all positional arguments with the given value name."""
    for arg in args.arguments:
        if not arg.is_option and arg.value_name == name:
            yield arg.value or ""


def parse_color_options(argv: Sequence[str]) -> bool:
    """Look only at the colour options to decide whether output is coloured."""
    with_color = DEFAULT_WITH_COLOR
    color_names = ("--color", "--colour-mode")
    output_args = [
        replace(e, ignored=not any(n in color_names for n in e.names))
        for e in EXPECTED_ARGS
    ]

    parsed = parse_expected_arguments(
        argv, output_args, ParserSettings(silent=True, tolerant=True)
    )
    if parsed is not None:
        color = get_option(parsed, "--color")
        if color is not None:
            if color.value == "always":
                with_color = True
            elif color.value == "never":
                with_color = False
        colour_mode = get_option(parsed, "--colour-mode")
        if colour_mode is not None:
            if colour_mode.value == "ansi":
                with_color = True
            elif colour_mode.value == "none":
                with_color = False

    return with_color


def print_help(program_name: str, settings: Optional[PrintHelpSettings] = None) -> None:
    """Print the help for the test runner's own command line."""
    print_expected_help(program_name, PROGRAM_DESCRIPTION, EXPECTED_ARGS, settings)


def parse_arguments(argv: Optional[Sequence[str]] = None) -> Optional[Input]:
    """Parse the test runner's command line; print help and return None on error."""
    argv = list(sys.argv if argv is None else argv)
    with_color = parse_color_options(argv)

    parsed = parse_expected_arguments(argv, EXPECTED_ARGS, ParserSettings(with_color=with_color))
    if parsed is None:
        console_print("\n")
        print_help(argv[0], PrintHelpSettings(with_color=with_color))
    return parsed