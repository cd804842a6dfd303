"""Immutable state holders for the chat screen: messages, input, status bar and alerts."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Sequence


class Key(enum.Enum):
    """Keys that the interface distinguishes."""

    RUNE = "rune"
    ENTER = "enter"
    BACKSPACE = "backspace"
    BACKSPACE2 = "backspace2"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ESCAPE = "escape"
    CTRL_C = "ctrl_c"
    CTRL_P = "ctrl_p"


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``char`` holds the typed character for printable keys, else is empty."""

    key: Key
    char: str = ""


@dataclass(frozen=True)
class MessageDisplay:
    """The scrollable list of chat messages."""

    width: int
    height: int
    messages: list[Any] = field(default_factory=list)
    scroll: int = 0

    def with_messages(self, messages: Sequence[Any]) -> "MessageDisplay":
        return replace(self, messages=list(messages))

    def with_size(self, width: int, height: int) -> "MessageDisplay":
        return replace(self, width=width, height=height)

    def with_scroll(self, scroll: int) -> "MessageDisplay":
        return replace(self, scroll=scroll)


@dataclass(frozen=True)
class InputField:
    """A single-line text input with a cursor."""

    width: int
    content: str = ""
    cursor: int = 0

    def with_content(self, content: str) -> "InputField":
        """Replace the text, pulling the cursor back if it now lies past the end."""
        return replace(self, content=content, cursor=min(self.cursor, len(content)))

    def with_cursor(self, cursor: int) -> "InputField":
        """Move the cursor, clamped to the text."""
        return replace(self, cursor=max(0, min(cursor, len(self.content))))

    def with_width(self, width: int) -> "InputField":
        return replace(self, width=width)

    def insert_rune(self, char: str) -> "InputField":
        """Insert one character at the cursor and move the cursor past it."""
        if len(char) != 1:
            raise ValueError("insert_rune expects a single character")
        left, right = self.content[: self.cursor], self.content[self.cursor :]
        return replace(self, content=left + char + right, cursor=self.cursor + 1)

    def delete_backward(self) -> "InputField":
        """Delete the character before the cursor, if any."""
        if self.cursor == 0:
            return self
        left, right = self.content[: self.cursor - 1], self.content[self.cursor :]
        return replace(self, content=left + right, cursor=self.cursor - 1)

    def clear(self) -> "InputField":
        return replace(self, content="", cursor=0)


@dataclass(frozen=True)
class StatusBar:
    """The status line: model, state, token counts and model-view totals."""

    width: int
    model: str = ""
    status: str = "Ready"
    prompt_tokens: int = 0
    response_tokens: int = 0
    model_available: bool = True
    is_model_view: bool = False
    total_models: int = 0
    total_size: int = 0

    def with_model(self, model: str) -> "StatusBar":
        return replace(self, model=model)

    def with_status(self, status: str) -> "StatusBar":
        return replace(self, status=status)

    def with_width(self, width: int) -> "StatusBar":
        return replace(self, width=width)

    def with_tokens(self, prompt_tokens: int, response_tokens: int) -> "StatusBar":
        return replace(self, prompt_tokens=prompt_tokens, response_tokens=response_tokens)

    def with_model_availability(self, available: bool) -> "StatusBar":
        return replace(self, model_available=available)

    def with_model_view_data(self, total_models: int, total_size: int) -> "StatusBar":
        """Switch the bar to model-view mode with the given totals."""
        return replace(self, is_model_view=True, total_models=total_models, total_size=total_size)


@dataclass(frozen=True)
class AlertDisplay:
    """The alert line, showing either a spinner or an error message."""

    width: int
    is_spinner_visible: bool = False
    spinner_frame: int = 0
    spinner_text: str = ""
    error_message: str = ""

    def with_spinner(self, visible: bool, text: str) -> "AlertDisplay":
        """Show or hide the spinner; any error message is cleared."""
        return replace(self, is_spinner_visible=visible, spinner_text=text, error_message="")

    def with_error(self, error_message: str) -> "AlertDisplay":
        """Show an error; the spinner is hidden."""
        return replace(self, is_spinner_visible=False, error_message=error_message)

    def clear(self) -> "AlertDisplay":
        """Hide the spinner and drop any error message."""
        return replace(self, is_spinner_visible=False, error_message="")

    def with_width(self, width: int) -> "AlertDisplay":
        return replace(self, width=width)