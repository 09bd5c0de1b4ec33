"""Tests for the actionselect command line."""

import json

import click
import pytest
from click.testing import CliRunner

from actionselect.cli import cli as cli_module
from actionselect.cli.cli import cli, parse_choice
from actionselect.core.choices import UNSET, Choice, Separator, is_selectable
from actionselect.core.errors import NoSelectableChoicesError
from actionselect.core.state import PromptResult
from actionselect.core.theme import THEME_NORD, get_current_theme, styled


class _FakePrompt:
    def __init__(self, result=None, error=None):
        self.result = result or PromptResult(answer="b")
        self.error = error
        self.calls = []

    def __call__(self, message, choices, **kwargs):
        self.calls.append((message, choices, kwargs))
        if self.error is not None:
            raise self.error
        return self.result


def test_parse_choice_syntax():
    plain = parse_choice("a")
    assert plain.value == "a" and plain.name is None

    named = parse_choice("a=Apple pie")
    assert named.value == "a" and named.name == "Apple pie"

    disabled = parse_choice("!b")
    assert disabled.value == "b" and not is_selectable(disabled)

    assert isinstance(parse_choice("::"), Separator)

    with pytest.raises(click.BadParameter):
        parse_choice("=Name only")


def test_cli_passes_options_to_prompt(monkeypatch):
    fake = _FakePrompt(PromptResult(answer="b", action="edit"))
    monkeypatch.setattr(cli_module, "prompt_select", fake)

    result = CliRunner().invoke(
        cli,
        ["a", "::", "b=Bee", "-m", "Pick", "--default", "b", "-a", "e:edit:Edit", "--no-loop", "--page-size", "3"],
    )

    assert result.exit_code == 0, result.output
    message, choices, kwargs = fake.calls[0]
    assert message == "Pick"
    assert isinstance(choices[0], Choice) and isinstance(choices[1], Separator)
    assert kwargs["default"] == "b"
    assert kwargs["loop"] is False
    assert kwargs["page_size"] == 3
    assert [(a.key, a.value, a.name) for a in kwargs["actions"]] == [("e", "edit", "Edit")]
    assert "edit" in result.output
    assert "b" in result.output


def test_cli_without_default_leaves_it_unset(monkeypatch):
    fake = _FakePrompt()
    monkeypatch.setattr(cli_module, "prompt_select", fake)

    result = CliRunner().invoke(cli, ["a", "b"])

    assert result.exit_code == 0, result.output
    assert fake.calls[0][2]["default"] is UNSET


def test_cli_json_output(monkeypatch):
    monkeypatch.setattr(cli_module, "prompt_select", _FakePrompt(PromptResult(answer="b", action="open")))

    result = CliRunner().invoke(cli, ["a", "b", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"action": "open", "answer": "b"}


def test_cli_rejects_malformed_action(monkeypatch):
    monkeypatch.setattr(cli_module, "prompt_select", _FakePrompt())

    result = CliRunner().invoke(cli, ["a", "-a", "nocolon"])

    assert result.exit_code == 2
    assert "KEY:VALUE" in result.output


def test_cli_reports_unselectable_list(monkeypatch):
    monkeypatch.setattr(cli_module, "prompt_select", _FakePrompt(error=NoSelectableChoicesError()))

    result = CliRunner().invoke(cli, ["!a", "!b"])

    assert result.exit_code == 1
    assert "[select prompt] No selectable choices" in result.output
    assert "Error:" not in result.output


def test_cli_interrupt_exits_130(monkeypatch):
    monkeypatch.setattr(cli_module, "prompt_select", _FakePrompt(error=KeyboardInterrupt()))

    result = CliRunner().invoke(cli, ["a"])

    assert result.exit_code == 130


def test_cli_log_file(monkeypatch, tmp_path):
    monkeypatch.setattr(cli_module, "prompt_select", _FakePrompt())
    log_file = tmp_path / "select.log"

    result = CliRunner().invoke(cli, ["a", "b", "--log-file", str(log_file)])

    assert result.exit_code == 0, result.output
    assert "[cli] Starting select prompt" in log_file.read_text(encoding="utf-8")


def test_cli_theme_switches_current_theme(monkeypatch, restore_theme):
    monkeypatch.setattr(cli_module, "prompt_select", _FakePrompt(PromptResult(answer="b")))
    printed = []
    monkeypatch.setattr(cli_module.console, "print", lambda text, *a, **kw: printed.append(text))
    restore_theme.set_theme("dark")

    result = CliRunner().invoke(cli, ["a", "b", "--theme", "nord"])

    assert result.exit_code == 0, result.output
    assert get_current_theme() is THEME_NORD
    assert printed == [styled("b", "answer", THEME_NORD)]


def test_cli_rejects_unknown_theme(monkeypatch):
    monkeypatch.setattr(cli_module, "prompt_select", _FakePrompt())

    result = CliRunner().invoke(cli, ["a", "--theme", "nope"])

    assert result.exit_code == 2
