"""
An option registry built on argparse that renders its own help page.

Options take one or two dashes (`-s 128`, `--s 128`, `-w`, `-help`) and are
described with back-quoted markers in the description. As with most Unix
tools, option parsing stops at the first operand; everything from there on is
returned by `Flags.args()`:

    flags = Flags("pping", "pping - Protocol Ping", "", "[options] host port")
    flags.add_int("s", 64, "Payload `size` in bytes `default`.")
    flags.parse()
    flags.help()
    host, port = flags.args()
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence

from flaghelp.core import HelpPage, print_err, print_output, render_help
from flaghelp.options import OptionSpec, format_default

logger = logging.getLogger(__name__)

# Not a valid option name, so it cannot clash with a registered option.
_OPERANDS = "flaghelp operands"


class _HintingParser(argparse.ArgumentParser):
    """An ArgumentParser whose usage is a one-line pointer to the help option."""

    def __init__(self, prog: str, hint: str):
        super().__init__(prog=prog, add_help=False, allow_abbrev=False)
        self._hint = hint

    def format_usage(self) -> str:
        return self._hint

    def format_help(self) -> str:
        return self._hint


class Flags:
    """
    Registry of command-line options with a formatted help screen.

    Args:
        cmd_name: Name of the command; only the base name is kept.
        title: Shown verbatim on the first line of the help page.
        description: Wrapped below the title.
        usage_options: What follows the command name on the usage line, e.g.
            "[options] host port". Further newline-separated lines are wrapped
            below it.
        help_flag_name: Name of the auto-registered boolean help option. When
            empty no help option is registered.
        print_all_defaults: Show every non-zero default on its own line instead
            of at the `default` marker.
    """

    def __init__(
        self,
        cmd_name: str,
        title: str = "",
        description: str = "",
        usage_options: str = "",
        help_flag_name: str = "help",
        print_all_defaults: bool = False,
    ):
        self.cmd_name = os.path.basename(cmd_name)
        self.title = title
        self.description = description
        self.usage_options = usage_options
        self.help_flag_name = help_flag_name
        self.print_all_defaults = print_all_defaults
        self.examples: List[str] = []

        self._options: Dict[str, OptionSpec] = {}
        self._values: Optional[argparse.Namespace] = None
        self._operands: List[str] = []
        self._parser = _HintingParser(self.cmd_name, self._hint())
        self._parser.add_argument(_OPERANDS, nargs=argparse.REMAINDER)

        if help_flag_name:
            self.add_bool(help_flag_name, False, "Help screen.")

    def _hint(self) -> str:
        return f"See '{self.cmd_name} -{self.help_flag_name}'\n"

    def _add(
        self,
        name: str,
        default: Any,
        usage: str,
        zero_text: str,
        convert: Optional[Callable[[str], Any]] = None,
    ) -> None:
        if not name:
            raise ValueError("Option name must not be empty.")
        if name in self._options:
            raise ValueError(f"Option '-{name}' is already registered.")

        is_bool = convert is None
        option_strings = ("-" + name, "--" + name)
        if is_bool:
            self._parser.add_argument(
                *option_strings, dest=name, action="store_true", default=default
            )
        else:
            self._parser.add_argument(
                *option_strings, dest=name, type=convert, default=default
            )

        self._options[name] = OptionSpec(
            name=name,
            description=usage,
            default_text=format_default(default),
            is_bool=is_bool,
            zero_text=zero_text,
        )
        logger.debug("Registered option -%s (default=%r)", name, default)

    def add_int(self, name: str, default: int, usage: str) -> None:
        self._add(name, default, usage, "0", int)

    def add_float(self, name: str, default: float, usage: str) -> None:
        self._add(name, default, usage, "0.0", float)

    def add_string(self, name: str, default: str, usage: str) -> None:
        self._add(name, default, usage, "", str)

    def add_bool(self, name: str, default: bool, usage: str) -> None:
        """Register an option that takes no value; passing it sets it to True."""
        self._add(name, default, usage, "false")

    def list_options(self) -> List[OptionSpec]:
        """All options in registration order, the help option included."""
        return list(self._options.values())

    def lookup(self, name: str) -> Optional[OptionSpec]:
        return self._options.get(name)

    def parse(self, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
        """
        Parse `argv` (default: `sys.argv[1:]`).

        On an unknown option or a bad value the help hint is printed to stderr
        and the process exits with status 2.
        """
        values = self._parser.parse_args(argv)
        operands = getattr(values, _OPERANDS)
        delattr(values, _OPERANDS)
        if operands[:1] == ["--"]:
            operands = operands[1:]

        self._values = values
        self._operands = list(operands)
        logger.debug("Parsed options: %s, operands: %s", vars(values), operands)
        return values

    def args(self) -> List[str]:
        """The operands left after the options, empty before parsing."""
        return list(self._operands)

    def value(self, name: str) -> Any:
        """The parsed value of option `name`, or its default before parsing."""
        if self._values is None:
            return self._parser.get_default(name)
        return getattr(self._values, name)

    def asking_help(self) -> bool:
        """True if the help option was given on the command line."""
        if self.lookup(self.help_flag_name) is None:
            print_err("Help invoked but the option is not implemented.\n")
            return False
        return bool(self.value(self.help_flag_name))

    def help(self) -> None:
        """Print the help page and exit if the help option was given."""
        if self.asking_help():
            self.print_help()
            sys.exit(0)

    def print_usage(self) -> None:
        """Print the one-line pointer to the help option."""
        print_err("%s", self._hint())

    def print_help(self) -> None:
        print_output(self.help_text(), file=sys.stderr)

    def help_page(self) -> HelpPage:
        """Everything on the help page apart from the options."""
        return HelpPage(
            cmd_name=self.cmd_name,
            title=self.title,
            description=self.description,
            usage_options=self.usage_options,
            examples=tuple(self.examples),
            help_flag_name=self.help_flag_name,
            print_all_defaults=self.print_all_defaults,
        )

    def help_text(self) -> str:
        """
        The rendered help page.

        `%` signs in user-supplied text are doubled, so the result can be passed
        to a `%`-formatter (or `print_output`) safely.
        """
        return render_help(self.help_page(), self.list_options())


def _expand_help(action: argparse.Action, prog: str) -> str:
    """Expand argparse-style `%(default)s` placeholders in an action's help."""
    text = action.help or ""
    if "%" not in text:
        return text
    params = dict(vars(action), prog=prog)
    try:
        return text % params
    except (KeyError, TypeError, ValueError):
        logger.debug("Leaving help of %s unexpanded", action.dest)
        return text


def options_from_parser(parser: argparse.ArgumentParser) -> List[OptionSpec]:
    """
    Read the optional arguments of an existing ArgumentParser as option specs.

    Positional arguments, the help action and suppressed options are skipped.
    The name is the first option string minus one prefix character, so
    `--max-count` appears as `--max-count` in the table.
    """
    specs: List[OptionSpec] = []
    for action in parser._actions:
        if not action.option_strings:
            continue
        if isinstance(action, argparse._HelpAction) or action.help == argparse.SUPPRESS:
            continue

        default = None if action.default is argparse.SUPPRESS else action.default
        is_bool = action.nargs == 0
        if is_bool:
            zero_text = "false"
        elif action.type in (int, float):
            zero_text = format_default(action.type())
        else:
            zero_text = ""

        specs.append(
            OptionSpec(
                name=action.option_strings[0][1:],
                description=_expand_help(action, parser.prog),
                default_text=format_default(default),
                is_bool=is_bool,
                zero_text=zero_text,
            )
        )
    return specs
