# -*- coding: utf-8 -*-
"""Text entry buffer bound to a typed value.

A :class:`ValidatedField` is the single owner of an entry's state: the raw
text the user typed, the last parse result and the parse error. The edit
handler writes it and the widget reads it to pick a style, both through the
same object.

Parsers follow the ``(value, error_message)`` convention used by the
expression service: ``value`` is None exactly when parsing failed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from .expression_service import eval_number_expression

T = TypeVar("T")

Parser = Callable[[str], Tuple[Optional[T], Optional[str]]]


@dataclass(frozen=True)
class FieldState(Generic[T]):
    raw_text: str
    parsed: Optional[T]
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.parsed is not None


class ValidatedField(Generic[T]):
    def __init__(self, text: str, parser: Parser[T]):
        self._parser = parser
        self._listeners: List[Callable[[FieldState[T]], None]] = []
        self._state: FieldState[T] = self._parse(text)

    @classmethod
    def from_value(cls, value: T, parser: Parser[T], fmt: Callable[[T], str] = str) -> "ValidatedField[T]":
        field = cls(fmt(value), parser)
        if field._state.parsed is None:
            raise ValueError(f"Initial value {value!r} is rejected by its own parser: {field._state.error}")
        return field

    def _parse(self, text: str) -> FieldState[T]:
        text = "" if text is None else str(text)
        try:
            value, err = self._parser(text)
        except (TypeError, ValueError, ArithmeticError) as ex:
            value, err = None, str(ex)
        if value is None and not err:
            err = "Invalid value"
        if value is not None:
            err = None
        return FieldState(text, value, err)

    @property
    def state(self) -> FieldState[T]:
        return self._state

    @property
    def raw_text(self) -> str:
        return self._state.raw_text

    @property
    def parsed(self) -> Optional[T]:
        return self._state.parsed

    @property
    def valid(self) -> bool:
        return self._state.valid

    def edit(self, text: str) -> Tuple[Optional[T], bool]:
        """Replace the buffer with ``text`` and reparse it."""
        self._state = self._parse(text)
        self._notify()
        return self._state.parsed, self._state.valid

    def set_value(self, value: T, fmt: Callable[[T], str] = str) -> None:
        """Overwrite the buffer after a programmatic change of the bound value."""
        if value is None:
            raise ValueError("A field value cannot be None")
        self._state = FieldState(fmt(value), value, None)
        self._notify()

    def _notify(self) -> None:
        for cb in list(self._listeners):
            cb(self._state)

    def subscribe(self, callback: Callable[[FieldState[T]], None]) -> Callable[[], None]:
        """Call ``callback`` with the new state after every change. Returns an unsubscribe function."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe


# ---- stock parsers ----

def parse_number(text: str) -> Tuple[Optional[float], Optional[str]]:
    return eval_number_expression(text)


def parse_length(text: str) -> Tuple[Optional[float], Optional[str]]:
    value, err = eval_number_expression(text)
    if value is None:
        return None, err
    if not math.isfinite(value):
        return None, "Length must be finite"
    if value < 0.0:
        return None, "Length must not be negative"
    return value, None


def parse_period(text: str) -> Tuple[Optional[float], Optional[str]]:
    value, err = eval_number_expression(text)
    if value is None:
        return None, err
    if not math.isfinite(value):
        return None, "Period must be finite"
    if value < 0.0:
        return None, "Period must not be negative"
    return value, None

