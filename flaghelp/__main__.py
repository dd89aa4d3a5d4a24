"""
flaghelp: aligned, wrapped help pages for command-line options.

Run as a command, it renders the help page of a `Flags` registry or of an
existing argparse parser found in an importable module.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Any, Optional

from flaghelp.core import HelpPage, __version__, print_output, render_help
from flaghelp.flags import Flags, options_from_parser

logger = logging.getLogger(__name__)


def _resolve_target(target: str) -> Any:
    """Import `module:attribute`, calling the attribute if it is a factory."""
    module_name, sep, attr = target.partition(":")
    if not sep or not attr:
        raise ValueError(f"Target must look like 'module:attribute', got '{target}'.")
    obj: Any = importlib.import_module(module_name)
    for part in attr.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, (Flags, argparse.ArgumentParser)) and callable(obj):
        logger.debug("Calling %s to build the parser", target)
        obj = obj()
    return obj


def _usage_options(parser: argparse.ArgumentParser) -> str:
    """`[options]` followed by the parser's positional arguments."""
    formatter = parser._get_formatter()
    parts = ["[options]"]
    for action in parser._actions:
        if action.option_strings or action.help == argparse.SUPPRESS:
            continue
        metavar = formatter._get_default_metavar_for_positional(action)
        parts.append(formatter._format_args(action, metavar))
    return " ".join(parts)


def render_target(
    obj: Any, prog: Optional[str] = None, print_all_defaults: bool = False
) -> str:
    """Render the help page of a `Flags` registry or an ArgumentParser."""
    if isinstance(obj, Flags):
        page = obj.help_page()
        page = page._replace(
            cmd_name=prog or page.cmd_name,
            print_all_defaults=print_all_defaults or page.print_all_defaults,
        )
        return render_help(page, obj.list_options())
    if isinstance(obj, argparse.ArgumentParser):
        page = HelpPage(
            cmd_name=prog or obj.prog,
            description=obj.description or "",
            usage_options=_usage_options(obj),
            print_all_defaults=print_all_defaults,
        )
        return render_help(page, options_from_parser(obj))
    raise TypeError(f"Expected Flags or ArgumentParser, got {type(obj).__name__}.")


def main() -> None:
    """Console script entry point for flaghelp."""
    parser = argparse.ArgumentParser(
        prog="flaghelp",
        description="Print the aligned help page of a Flags registry or an "
        "argparse parser.",
    )
    parser.add_argument(
        "target",
        help="Where to find the options, as 'module:attribute'. The attribute may "
        "be a Flags object, an ArgumentParser, or a callable returning one.",
    )
    parser.add_argument("--prog", help="Override the command name shown in the page.")
    parser.add_argument(
        "--all-defaults",
        action="store_true",
        help="Show every non-zero default on its own line.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug output to stderr."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        doc = render_target(
            _resolve_target(args.target),
            prog=args.prog,
            print_all_defaults=args.all_defaults,
        )
    except (ImportError, AttributeError, TypeError, ValueError) as e:
        print(f"An error occurred: {e}", file=sys.stderr)
        sys.exit(1)

    print_output(doc)


if __name__ == "__main__":
    main()
