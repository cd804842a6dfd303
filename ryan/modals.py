"""Immutable state for the modal dialogs shown over the chat screen."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from ryan.components import InputField, Key, KeyEvent

_BACKSPACE_KEYS = (Key.BACKSPACE, Key.BACKSPACE2)


@dataclass(frozen=True)
class ModalDialog:
    """A dismissible message box, used for errors."""

    visible: bool = False
    title: str = ""
    message: str = ""
    width: int = 50
    height: int = 8

    def with_error(self, title: str, message: str) -> "ModalDialog":
        """Show the dialog with the given title and message."""
        return replace(self, visible=True, title=title, message=message)

    def hide(self) -> "ModalDialog":
        return replace(self, visible=False)

    def with_size(self, width: int, height: int) -> "ModalDialog":
        return replace(self, width=width, height=height)


@dataclass(frozen=True)
class TextInputModal:
    """A dialog asking for one line of text."""

    visible: bool = False
    title: str = ""
    prompt: str = ""
    input: InputField = field(default_factory=lambda: InputField(width=40))
    width: int = 50
    height: int = 8

    def show(self, title: str, prompt: str) -> "TextInputModal":
        """Show the dialog with a fresh, empty input."""
        return replace(self, visible=True, title=title, prompt=prompt, input=InputField(width=40))

    def hide(self) -> "TextInputModal":
        """Hide the dialog and clear its input."""
        return replace(self, visible=False, input=self.input.clear())

    def with_input(self, input_field: InputField) -> "TextInputModal":
        return replace(self, input=input_field)

    def handle_key_event(self, event: KeyEvent) -> tuple["TextInputModal", str, bool]:
        """Apply a key press; returns the new modal, the submitted text and whether it was submitted."""
        if not self.visible:
            return self, "", False

        key = event.key
        if key is Key.ESCAPE:
            return self.hide(), "", False
        if key is Key.ENTER:
            return self.hide(), self.input.content.strip(), True
        if key in _BACKSPACE_KEYS:
            return self.with_input(self.input.delete_backward()), "", False
        if key is Key.LEFT:
            return self.with_input(self.input.with_cursor(self.input.cursor - 1)), "", False
        if key is Key.RIGHT:
            return self.with_input(self.input.with_cursor(self.input.cursor + 1)), "", False
        if key is Key.HOME:
            return self.with_input(self.input.with_cursor(0)), "", False
        if key is Key.END:
            return self.with_input(self.input.with_cursor(len(self.input.content))), "", False
        if event.char:
            return self.with_input(self.input.insert_rune(event.char)), "", False
        return self, "", False


def _yes_no(event: KeyEvent) -> bool | None:
    """Return True for confirm, False for decline, None when the key means neither."""
    if event.key is Key.ESCAPE:
        return False
    if event.key is Key.ENTER:
        return True
    if event.char in ("y", "Y"):
        return True
    if event.char in ("n", "N"):
        return False
    return None


@dataclass(frozen=True)
class ConfirmationModal:
    """A yes/no question."""

    visible: bool = False
    title: str = ""
    message: str = ""
    width: int = 50
    height: int = 8

    def show(self, title: str, message: str) -> "ConfirmationModal":
        return replace(self, visible=True, title=title, message=message)

    def hide(self) -> "ConfirmationModal":
        return replace(self, visible=False)

    def handle_key_event(self, event: KeyEvent) -> tuple["ConfirmationModal", bool]:
        """Apply a key press; returns the new modal and whether the user confirmed."""
        if not self.visible:
            return self, False
        answer = _yes_no(event)
        if answer is None:
            return self, False
        return self.hide(), answer


@dataclass(frozen=True)
class DownloadPromptModal:
    """Asks whether to download a model that is not available locally."""

    visible: bool = False
    model_name: str = ""
    width: int = 60
    height: int = 10

    def show(self, model_name: str) -> "DownloadPromptModal":
        return replace(self, visible=True, model_name=model_name)

    def hide(self) -> "DownloadPromptModal":
        return replace(self, visible=False)

    def handle_key_event(self, event: KeyEvent) -> tuple["DownloadPromptModal", bool]:
        """Apply a key press; returns the new modal and whether the download was confirmed."""
        if not self.visible:
            return self, False
        answer = _yes_no(event)
        if answer is None:
            return self, False
        return self.hide(), answer


@dataclass(frozen=True)
class ProgressModal:
    """Shows the progress of a long operation such as a model download."""

    visible: bool = False
    title: str = ""
    model_name: str = ""
    status: str = ""
    progress: float = 0.0
    spinner_visible: bool = False
    cancellable: bool = True
    width: int = 60
    height: int = 10

    def show(self, title: str, model_name: str, status: str, cancellable: bool) -> "ProgressModal":
        """Show the modal; the current progress value is kept."""
        return replace(
            self,
            visible=True,
            title=title,
            model_name=model_name,
            status=status,
            spinner_visible=True,
            cancellable=cancellable,
        )

    def hide(self) -> "ProgressModal":
        return replace(self, visible=False, spinner_visible=False)

    def with_progress(self, progress: float, status: str) -> "ProgressModal":
        return replace(self, progress=progress, status=status)

    def handle_key_event(self, event: KeyEvent) -> tuple["ProgressModal", bool]:
        """Apply a key press; returns the new modal and whether the operation was cancelled."""
        if not self.visible or not self.cancellable:
            return self, False
        if event.key is Key.ESCAPE or event.char in ("c", "C"):
            return self.hide(), True
        return self, False