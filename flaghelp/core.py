from __future__ import annotations

import sys
from typing import IO, Any, Iterable, List, NamedTuple, Optional, Sequence

from flaghelp.options import OptionSpec, annotate, plan_columns
from flaghelp.text import MAX_LINE_LENGTH, escape_percent, wrap_text

__version__ = "0.1.0"


class HelpPage(NamedTuple):
    """Everything on a help page apart from the options themselves."""

    cmd_name: str
    title: str = ""
    description: str = ""
    usage_options: str = ""
    examples: Sequence[str] = ()
    help_flag_name: str = ""
    print_all_defaults: bool = False


def _render_usage(page: HelpPage) -> str:
    first, *rest = page.usage_options.split("\n")
    head = " ".join(part for part in (page.cmd_name, first) if part)
    output = f"Usage: {head}\n"
    if rest:
        output += wrap_text("\n".join(rest), 2, MAX_LINE_LENGTH, True)
    return output


def _render_options(page: HelpPage, options: Iterable[OptionSpec]) -> str:
    annotated = [
        annotate(spec, print_all_defaults=page.print_all_defaults)
        for spec in options
        # The help option is never listed.
        if spec.name != page.help_flag_name
    ]
    layout = plan_columns(annotated)

    output: List[str] = []
    for option in annotated:
        prefix = layout.prefix(option)
        output.append(prefix)
        output.append(
            wrap_text(option.description, len(prefix), MAX_LINE_LENGTH, False)
        )
    return "".join(output)


def render_help(page: HelpPage, options: Iterable[OptionSpec]) -> str:
    """
    Render a complete help page.

    Layout is computed on the text as the reader will see it; the finished page
    then has every `%` doubled so it can go through `%`-formatting (see
    `print_output`) without any user text being read as a directive.

    Args:
        page: Title, description, usage, examples and rendering switches.
        options: Registered options in registration order. The option named
            `page.help_flag_name` is left out of the table.

    Returns:
        The help page, newline-terminated.
    """
    output: List[str] = []

    if page.title:
        output.append(page.title + "\n")

    if page.description:
        output.append(wrap_text(page.description, 2, MAX_LINE_LENGTH, True))
        output.append("\n")

    output.append(_render_usage(page))

    output.append("\nOptions:\n")
    output.append(_render_options(page, options))

    if page.examples:
        output.append("\nExamples:\n")
        for example in page.examples:
            output.append(f"  {page.cmd_name} {example}\n")

    return escape_percent("".join(output))


def print_err(msg: str, *args: Any) -> None:
    """`%`-format `msg` with `args` and write it to stderr."""
    sys.stderr.write(msg % args)


def print_output(doc: str, file: Optional[IO[str]] = None) -> None:
    """
    Write a rendered help page, collapsing its `%%` escapes.

    Args:
        doc: Output of `render_help`.
        file: Destination stream, stdout when omitted.
    """
    (file or sys.stdout).write(doc % ())
