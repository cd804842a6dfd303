# ryan

Building blocks for a chat assistant that runs against a local Ollama server.

- **`ryan.ollama_client`**: `Client` is a small HTTP client for an Ollama server, built on the standard library.
  - `tags()` lists the installed models.
  - `ps()` lists the models that are running.
  - `pull()` downloads a model.
  - `pull_with_progress()` also downloads a model. It takes an optional progress callback `(status, completed, total)` and an optional `threading.Event` for cancellation.
  - `delete()` removes a model.

  A failure raises `OllamaError`, for example when the connection fails, the server answers with a status other than 200, the response cannot be decoded, or a pull reports an error. A pull cancelled through the event raises `PullCancelled`, which is a subclass of `OllamaError`.
- **`ryan.ollama_types`**: dataclasses for the server's responses. They are `Model`, `Details`, `TagsResponse`, `PsResponse` and `PullResponse`, and each has a `from_dict()` constructor.
- **`ryan.components`**: frozen dataclasses that hold the state of a chat screen: `MessageDisplay`, `InputField`, `StatusBar` and `AlertDisplay`. The module also defines the `Key` enum and `KeyEvent`. Each `with_*` method and each edit returns a new value.
- **`ryan.modals`**: frozen dataclasses for dialogs: `ModalDialog`, `TextInputModal`, `ConfirmationModal`, `DownloadPromptModal` and `ProgressModal`. Their `handle_key_event()` takes a `KeyEvent` and returns the new modal together with the outcome.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Listing models and pulling one with progress:

```python
import threading

from ryan.ollama_client import Client, OllamaError, PullCancelled

client = Client("http://localhost:11434")
try:
    for model in client.tags().models:
        print(model.name, model.details.parameter_size)

    cancel = threading.Event()
    client.pull_with_progress(
        "llama3.1:8b",
        lambda status, done, total: print(status, done, total),
        cancel,
    )
except PullCancelled:
    print("pull cancelled")
except OllamaError as exc:
    print("Ollama request failed:", exc)
```

The client's timeout defaults to 30 seconds. Pulls use a separate `pull_timeout`, which defaults to 90 seconds.

Editing input with immutable components:

```python
from ryan.components import InputField

field = InputField(width=80).with_content("Hello").with_cursor(2).insert_rune("X")
print(field.content, field.cursor)  # HeXllo 3
```

Answering a modal:

```python
from ryan.components import Key, KeyEvent
from ryan.modals import DownloadPromptModal

prompt = DownloadPromptModal().show("llama3.1:8b")
prompt, confirmed = prompt.handle_key_event(KeyEvent(Key.RUNE, "y"))
print(prompt.visible, confirmed)  # False True
```

## What this package does not do

- It does not draw anything to a terminal and has no event loop. The components and modals hold state and handle keys, and rendering is left to the caller.
- It provides no command-line program and no chat session. It does not send chat messages or stream replies. The client covers only listing, pulling and deleting models.
- It has no tool-calling support. It does not register tools, run shell commands for a model, or read files for a model.