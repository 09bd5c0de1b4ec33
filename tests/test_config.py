"""Tests for prompt configuration models."""

import logging

import pytest
from pydantic import ValidationError

from actionselect.core.choices import UNSET, Choice, Separator
from actionselect.core.config import Action, SelectConfig
from actionselect.utils.log import LOGGER_NAME


class _Collector(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def warnings_log():
    handler = _Collector()
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    yield handler.records
    logger.removeHandler(handler)


def test_action_key_is_normalized():
    action = Action(key="  E ", value="edit")
    assert action.key == "e"
    assert action.display_name == "edit"
    assert Action(key="o", value="open", name="Open").display_name == "Open"


def test_action_key_must_not_be_empty():
    with pytest.raises(ValidationError):
        Action(key="   ", value="x")


def test_choices_are_normalized():
    config = SelectConfig(
        message="Pick",
        choices=["a", ("b", "Bee"), {"value": "c", "disabled": "soon"}, {"separator": "--"}],
    )
    a, b, c, sep = config.choices
    assert isinstance(a, Choice) and a.name == "a"
    assert (b.value, b.name) == ("b", "Bee")
    assert c.disabled == "soon"
    assert isinstance(sep, Separator) and sep.separator == "--"


@pytest.mark.parametrize("bad", [[object()], [{"name": "no value"}]])
def test_invalid_choices_raise_validation_error(bad):
    with pytest.raises(ValidationError):
        SelectConfig(message="Pick", choices=bad)


def test_default_value_distinguishes_unset_from_none():
    assert SelectConfig(message="Pick", choices=["a"]).default_value is UNSET
    assert SelectConfig(message="Pick", choices=["a"], default=None).default_value is None
    assert SelectConfig(message="Pick", choices=["a"], default="a").default_value == "a"


def test_duplicate_action_key_warns(warnings_log):
    SelectConfig(
        message="Pick",
        choices=["a"],
        actions=[Action(key="e", value="edit"), Action(key="E", value="erase")],
    )
    messages = [r.getMessage() for r in warnings_log if r.levelno == logging.WARNING]
    assert any("Duplicate action key" in m for m in messages)


def test_enter_shadowing_action_warns(warnings_log):
    SelectConfig(message="Pick", choices=["a"], actions=[Action(key="Enter", value="go")])
    messages = [r.getMessage() for r in warnings_log if r.levelno == logging.WARNING]
    assert any("shadows the Enter key" in m for m in messages)


def test_search_reset_delay_must_be_positive():
    with pytest.raises(ValidationError):
        SelectConfig(message="Pick", choices=["a"], search_reset_delay=0)
