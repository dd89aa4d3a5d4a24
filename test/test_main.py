"""
Tests for the flaghelp console script.
"""

import argparse
import sys
import types
from unittest.mock import patch

import pytest

from flaghelp import Flags
from flaghelp.__main__ import _resolve_target, main, render_target


@pytest.fixture
def target_module():
    """Registers a throwaway module holding a parser, a factory and a registry."""
    module = types.ModuleType("fake_cli")

    parser = argparse.ArgumentParser(prog="fake", description="A fake CLI.")
    parser.add_argument(
        "--level", type=int, default=3, help="Compression `level` `default`."
    )
    module.parser = parser
    module.build_parser = lambda: parser

    flags = Flags("fake", "fake - a fake tool")
    flags.add_string("o", "out.txt", "Write to `file` `default`.")
    module.flags = flags

    with patch.dict(sys.modules, {"fake_cli": module}):
        yield module


def test_resolve_target(target_module):
    assert _resolve_target("fake_cli:parser") is target_module.parser
    assert _resolve_target("fake_cli:build_parser") is target_module.parser
    assert _resolve_target("fake_cli:flags") is target_module.flags


def test_resolve_target_rejects_missing_attribute():
    with pytest.raises(ValueError):
        _resolve_target("fake_cli")


def test_render_parser(target_module):
    doc = render_target(target_module.parser)
    assert doc == (
        "  A fake CLI.\n"
        "\n"
        "Usage: fake [options]\n"
        "\n"
        "Options:\n"
        "  --level level  Compression level (default=3).\n"
    )


def test_render_parser_all_defaults(target_module):
    doc = render_target(target_module.parser, prog="other", print_all_defaults=True)
    assert "Usage: other [options]\n" in doc
    assert "[default=3]" in doc


def test_render_flags(target_module):
    doc = render_target(target_module.flags)
    assert doc.startswith("fake - a fake tool\n")
    assert "  -o file  Write to file (default=out.txt).\n" in doc


def test_render_rejects_other_objects():
    with pytest.raises(TypeError):
        render_target(object())


def test_main_prints_page(target_module, capsys):
    with patch.object(sys, "argv", ["flaghelp", "fake_cli:parser"]):
        main()
    assert "Compression level (default=3)." in capsys.readouterr().out


def test_main_reports_errors(capsys):
    with patch.object(sys, "argv", ["flaghelp", "no_such_module_here:thing"]):
        with pytest.raises(SystemExit) as exc:
            main()
    assert exc.value.code == 1
    assert "An error occurred:" in capsys.readouterr().err


def test_render_flags_leaves_registry_untouched(target_module):
    flags = target_module.flags
    doc = render_target(flags, prog="other", print_all_defaults=True)
    assert "Usage: other\n" in doc
    assert "[default=out.txt]" in doc
    assert flags.cmd_name == "fake"
    assert flags.print_all_defaults is False
    assert "(default=out.txt)" in flags.help_text()


def test_render_parser_lists_positionals():
    parser = argparse.ArgumentParser(prog="net")
    parser.add_argument("host", help="Host to reach.")
    parser.add_argument("port", nargs="?", help="Port to use.")
    parser.add_argument("--hidden", help=argparse.SUPPRESS)
    assert "Usage: net [options] host [port]\n" in render_target(parser)
