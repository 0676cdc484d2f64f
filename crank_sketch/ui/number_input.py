# -*- coding: utf-8 -*-
"""Line edit bound to a :class:`ValidatedField`.

The widget and the edit handler share one field object: the handler updates
it on every keystroke and the widget restyles from the field's state.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from PyQt6.QtWidgets import QLineEdit, QWidget

from ..core.validated_field import FieldState, ValidatedField
from ..utils.constants import ERROR_BACKGROUND, ERROR_BORDER
from ..utils.qt_safe import safe_slot

ERROR_STYLE = (
    "QLineEdit {"
    f" background: {ERROR_BACKGROUND};"
    f" border: 1px solid {ERROR_BORDER};"
    " border-radius: 5px;"
    "}"
)


class NumberInput(QLineEdit):
    def __init__(
        self,
        field: ValidatedField[Any],
        placeholder: str = "",
        on_edit: Optional[Callable[[str], Any]] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(field.raw_text, parent)
        self.field = field
        self._on_edit = on_edit if on_edit is not None else field.edit
        self.setPlaceholderText(placeholder)
        unsubscribe = field.subscribe(self.apply_state)
        self.textEdited.connect(self._text_edited)
        self.destroyed.connect(lambda *_: unsubscribe())
        self.apply_state(field.state)

    @safe_slot
    def _text_edited(self, text: str):
        self._on_edit(text)

    def apply_state(self, state: FieldState[Any]):
        if state.raw_text != self.text():
            self.setText(state.raw_text)
        self.setStyleSheet("" if state.valid else ERROR_STYLE)
        self.setToolTip(state.error or "")

    def is_error_styled(self) -> bool:
        return not self.field.valid
