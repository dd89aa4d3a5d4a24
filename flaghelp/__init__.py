from __future__ import annotations

from flaghelp.core import HelpPage, print_err, print_output, render_help
from flaghelp.flags import Flags, options_from_parser
from flaghelp.options import OptionSpec

__all__ = [
    "Flags",
    "HelpPage",
    "OptionSpec",
    "options_from_parser",
    "print_err",
    "print_output",
    "render_help",
]
