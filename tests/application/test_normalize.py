"""Error normalisation tests: duck typing, exception shells, JSON fallback hook."""

from __future__ import annotations

import json

import pytest

from guild_logger.application.normalize import (
    classify_value,
    is_error_like,
    json_default,
    normalize_error,
    render_stack,
)


class ForeignError:
    """Error-shaped value that is not a Python exception."""

    def __init__(self, name: str, message: str, stack: str) -> None:
        self.name = name
        self.message = message
        self.stack = stack


class ExplodingError:
    """Looks error-shaped but blows up when its stack is read."""

    name = "Exploding"
    message = "no"

    @property
    def stack(self) -> str:
        raise RuntimeError("stack unavailable")


def _raised(exc: BaseException) -> BaseException:
    try:
        raise exc
    except BaseException as caught:  # noqa: BLE001 - capture traceback for assertions
        return caught


def test_duck_typed_error_round_trip() -> None:
    """Objects with name, message and stack normalise to exactly those fields."""

    value = ForeignError("TypeError", "x", "TypeError: x\n at handler (app.js:1:1)")
    assert is_error_like(value)
    assert normalize_error(value) == {"name": "TypeError", "message": "x", "stack": "TypeError: x\n at handler (app.js:1:1)"}


def test_exception_shell_contains_traceback() -> None:
    """Raised exceptions normalise with their formatted traceback."""

    exc = _raised(ValueError("bad value"))
    shell = normalize_error(exc)
    assert shell is not None
    assert shell["name"] == "ValueError"
    assert shell["message"] == "bad value"
    assert shell["stack"].startswith("Traceback (most recent call last):")
    assert shell["stack"].endswith("ValueError: bad value")


def test_exception_without_traceback() -> None:
    """Never-raised exceptions still get a one-line stack."""

    shell = normalize_error(KeyError("k"))
    assert shell == {"name": "KeyError", "message": "'k'", "stack": "KeyError: 'k'"}


@pytest.mark.parametrize("value", [None, 1, "error", {"name": "a", "message": "b", "stack": "c"}, ["x"]])
def test_non_errors_are_not_normalized(value: object) -> None:
    """Plain values, including lookalike dicts, are not error-like."""

    assert not is_error_like(value)
    assert normalize_error(value) is None


def test_normalization_failure_treated_as_not_error_like() -> None:
    """Objects whose attributes explode are rendered as text instead."""

    value = ExplodingError()
    assert normalize_error(value) is None
    assert isinstance(json_default(value), str)


def test_render_stack_uses_native_rendering() -> None:
    """The plain-text stack is the object's own stack string."""

    value = ForeignError("TypeError", "x", "TypeError: x\n at a\n at b")
    assert render_stack(value) == "TypeError: x\n at a\n at b"


def test_classify_value_tags() -> None:
    """Values are classified as error, composite or primitive."""

    assert classify_value(RuntimeError()) == "error"
    assert classify_value({"a": 1}) == "composite"
    assert classify_value((1, 2)) == "composite"
    assert classify_value({1}) == "composite"
    assert classify_value(3.5) == "primitive"
    assert classify_value(None) == "primitive"


def test_json_default_handles_nested_errors_and_sets() -> None:
    """The JSON hook normalises errors and sorts sets."""

    payload = {"cause": RuntimeError("inner"), "tags": {"b", "a"}, "obj": object}
    encoded = json.loads(json.dumps(payload, default=json_default))
    assert encoded["cause"]["name"] == "RuntimeError"
    assert encoded["tags"] == ["a", "b"]
    assert encoded["obj"] == str(object)
