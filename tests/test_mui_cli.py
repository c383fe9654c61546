"""Tests for the mui entry point: global flags, exit codes, frontend errors."""

import io
import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import mui_cli
from mui.errors import FrontendUnavailableError


@pytest.fixture(autouse=True)
def _no_dotenv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_parser_leaves_command_args_untouched() -> None:
    parser = mui_cli._build_parser()
    args = parser.parse_args(["question", "--text", "Sure?", "--title", "X"])
    assert args.argv == ["question", "--text", "Sure?", "--title", "X"]
    assert args.question is False and args.entry is False


def test_parser_global_flags_before_command() -> None:
    parser = mui_cli._build_parser()
    args = parser.parse_args(["--frontend", "console", "--verbose", "entry", "--hide-text"])
    assert args.frontend == "console"
    assert args.verbose is True
    assert args.argv == ["entry", "--hide-text"]


def test_parser_single_dash_shortcuts() -> None:
    parser = mui_cli._build_parser()
    assert parser.parse_args(["-question"]).question is True
    assert parser.parse_args(["-entry"]).entry is True


def test_parser_rejects_both_shortcuts() -> None:
    parser = mui_cli._build_parser()
    with pytest.raises(SystemExit) as exc:
        parser.parse_args(["-question", "-entry"])
    assert exc.value.code == 2


def test_parser_rejects_unknown_global_flag() -> None:
    parser = mui_cli._build_parser()
    with pytest.raises(SystemExit) as exc:
        parser.parse_args(["-bogus", "question"])
    assert exc.value.code == 2


def test_main_without_command_prints_usage_to_stderr(capsys) -> None:
    assert mui_cli.main([]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Mui is a tool to display graphical dialog boxes.\n")
    assert "\tquestion   display question dialog\n\tentry      display text entry dialog\n" in captured.err


def test_main_help_exits_zero(capsys) -> None:
    assert mui_cli.main(["help"]) == 0
    captured = capsys.readouterr()
    assert "Use \"mui help <command>\" for more information about a command." in captured.out
    assert captured.err == ""


def test_main_help_topic(capsys) -> None:
    assert mui_cli.main(["help", "entry"]) == 0
    assert capsys.readouterr().out.startswith("usage: mui entry")


def test_main_unknown_command(capsys) -> None:
    assert mui_cli.main(["calendar"]) == 2
    assert "mui calendar: unknown command" in capsys.readouterr().err


def test_main_console_question_yes(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("y\n"))
    assert mui_cli.main(["--frontend", "console", "question", "--text", "Go?"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Go? [Yes/No]: " in captured.err


def test_main_question_shortcut_uses_env_frontend(monkeypatch) -> None:
    monkeypatch.setenv("MUI_FRONTEND", "console")
    monkeypatch.setattr(sys, "stdin", io.StringIO("n\n"))
    assert mui_cli.main(["-question"]) == 1


def test_main_entry_shortcut_prints_text(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("hello\n"))
    assert mui_cli.main(["--frontend", "console", "-entry"]) == 0
    assert capsys.readouterr().out == "hello\n"


def test_positional_command_wins_over_shortcut(monkeypatch, capsys) -> None:
    assert mui_cli.main(["-question", "help"]) == 0
    assert "The commands are:" in capsys.readouterr().out


def test_main_reports_unavailable_frontend(monkeypatch, capsys) -> None:
    def _fail(name):
        raise FrontendUnavailableError("no display available for Qt dialogs")

    monkeypatch.setattr("mui.frontend.load_frontend", _fail)
    assert mui_cli.main(["question"]) == mui_cli.EXIT_FRONTEND
    assert "mui: no display available for Qt dialogs" in capsys.readouterr().err


def test_main_title_from_env(monkeypatch, capsys) -> None:
    monkeypatch.setenv("MUI_TITLE", "Installer")
    monkeypatch.setattr(sys, "stdin", io.StringIO("yes\n"))
    assert mui_cli.main(["--frontend", "console", "question"]) == 0
    assert "[Installer] Are you sure you want to proceed?" in capsys.readouterr().err


def test_version_flag(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        mui_cli.main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("mui ")


def test_main_applies_log_level_from_env(monkeypatch, capsys) -> None:
    monkeypatch.setenv("MUI_LOG_LEVEL", "debug")
    assert mui_cli.main(["calendar"]) == 2
    assert logging.getLogger("mui").level == logging.DEBUG
    assert "dispatch: unknown command 'calendar'\n" in capsys.readouterr().err


def test_main_quiet_beats_env_log_level(monkeypatch, capsys) -> None:
    monkeypatch.setenv("MUI_LOG_LEVEL", "debug")
    assert mui_cli.main(["--quiet", "calendar"]) == 2
    assert logging.getLogger("mui").level == logging.ERROR
    assert "dispatch:" not in capsys.readouterr().err


def test_main_routes_through_dispatch(monkeypatch) -> None:
    seen = []

    def _dispatch(argv, registry, *, prog):
        seen.append((list(argv), registry.names(), prog))
        return 7

    monkeypatch.setattr(mui_cli, "dispatch", _dispatch)
    assert mui_cli.main(["-entry"]) == 7
    assert seen == [(["entry"], ["question", "entry"], "mui")]
