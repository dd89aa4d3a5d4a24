"""
Option annotation and column planning for the options table.

A description may embed two kinds of back-quoted markers:

* the literal `` `default` ``, replaced by the option's default value, and
* one back-quoted term such as `` `size` ``, shown as the parameter label next to
  the option name and kept (without quotes) in the description.
"""

from __future__ import annotations

from typing import Any, Iterable, List, NamedTuple, Tuple

from flaghelp.text import pad

DELIMITER = "`"
DEFAULT_MARKER = DELIMITER + "default" + DELIMITER

ZERO_TEXTS = frozenset({"", "0", "false"})


class OptionSpec(NamedTuple):
    """A registered option as the renderer sees it."""

    name: str
    description: str = ""
    default_text: str = ""
    is_bool: bool = False
    zero_text: str = ""

    def default_is_zero(self) -> bool:
        """Best-effort guess whether the default is the zero value of its type."""
        return is_zero_text(self.default_text) or self.default_text == self.zero_text


class AnnotatedOption(NamedTuple):
    """An option ready for the table: name, parameter label and final description."""

    name: str
    param_label: str
    description: str


class ColumnLayout(NamedTuple):
    """Shared widths of the name and parameter-label fields."""

    name_width: int = 0
    param_width: int = 0

    @property
    def description_column(self) -> int:
        return len("  -") + self.name_width + 1 + self.param_width + len("  ")

    def prefix(self, option: AnnotatedOption) -> str:
        """The row text written before an option's description."""
        name = pad(option.name, self.name_width)
        param = pad(option.param_label, self.param_width)
        return f"  -{name} {param}  "


def is_zero_text(text: str) -> bool:
    return text in ZERO_TEXTS


def format_default(value: Any) -> str:
    """Render a default value the way it is shown in help output."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _extract_label(segments: List[str]) -> Tuple[str, List[str]]:
    """
    Find the first delimiter pair in the text around the default markers.

    `segments` is the description split on the default marker, so neither a
    marker's delimiters nor the default value are ever searched. Returns the
    label and the segments with the pair's two delimiters removed.
    """
    found: List[Tuple[int, int]] = []
    for index, segment in enumerate(segments):
        pos = segment.find(DELIMITER)
        while pos != -1 and len(found) < 2:
            found.append((index, pos))
            pos = segment.find(DELIMITER, pos + 1)
        if len(found) == 2:
            break
    else:
        return "", segments

    (first, start), (last, end) = found
    stripped = list(segments)
    if first == last:
        segment = segments[first]
        label = segment[start + 1 : end]
        stripped[first] = segment[:start] + label + segment[end + 1 :]
    else:
        # A pair enclosing a marker is malformed; the marker is left out of the label.
        label = "".join(
            [segments[first][start + 1 :]]
            + segments[first + 1 : last]
            + [segments[last][:end]]
        )
        stripped[first] = segments[first][:start] + segments[first][start + 1 :]
        stripped[last] = segments[last][:end] + segments[last][end + 1 :]
    return label, stripped


def annotate(
    spec: OptionSpec, *, print_all_defaults: bool = False
) -> AnnotatedOption:
    """
    Resolve the default marker and parameter label of one option.

    Args:
        spec: The registered option.
        print_all_defaults: Append a separate `[default=...]` line instead of
            substituting `(default=...)` at the marker. Only applies when the
            default is not a zero value.

    Returns:
        The option's name, its parameter label (possibly empty) and its display
        description.
    """
    show_default = not spec.default_is_zero()

    label, segments = _extract_label(spec.description.split(DEFAULT_MARKER))

    if show_default and not print_all_defaults:
        description = f"(default={spec.default_text})".join(segments)
    else:
        description = "".join(segments)
    if show_default and print_all_defaults:
        description += f"\n[default={spec.default_text}]"

    return AnnotatedOption(name=spec.name, param_label=label, description=description)


def plan_columns(options: Iterable[AnnotatedOption]) -> ColumnLayout:
    """Compute the widest name and parameter label across `options`."""
    name_width = 0
    param_width = 0
    for option in options:
        name_width = max(name_width, len(option.name))
        param_width = max(param_width, len(option.param_label))
    return ColumnLayout(name_width=name_width, param_width=param_width)
