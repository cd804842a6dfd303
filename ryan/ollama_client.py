"""HTTP client for a local Ollama server."""

from __future__ import annotations

import json
import logging
import threading
import urllib.error
import urllib.request
from typing import Any, Callable, Iterable, Iterator

from ryan.ollama_types import PsResponse, PullResponse, TagsResponse

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]

_DECODE_ERRORS = (ValueError, TypeError, KeyError, AttributeError)


class OllamaError(Exception):
    """A request to the Ollama server failed."""


class PullCancelled(OllamaError):
    """A model pull was cancelled by the caller."""


def _iter_json_values(lines: Iterable[bytes]) -> Iterator[Any]:
    """Yield JSON values from a stream of concatenated or newline-separated documents."""
    decoder = json.JSONDecoder()
    buffer = ""
    for raw in lines:
        buffer += raw.decode("utf-8")
        while True:
            stripped = buffer.lstrip()
            if not stripped:
                buffer = ""
                break
            try:
                value, end = decoder.raw_decode(stripped)
            except json.JSONDecodeError:
                buffer = stripped
                break
            buffer = stripped[end:]
            yield value
    if buffer.strip():
        decoder.decode(buffer.strip())


class Client:
    """Talks to the Ollama REST API."""

    def __init__(self, base_url: str, timeout: float = 30.0, pull_timeout: float = 90.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.pull_timeout = pull_timeout
        log.debug("Creating ollama client base_url=%s timeout=%s", self.base_url, timeout)

    def _open(self, request: urllib.request.Request, timeout: float, label: str, action: str):
        try:
            response = urllib.request.urlopen(request, timeout=timeout)
        except urllib.error.HTTPError as exc:
            exc.close()
            raise OllamaError(f"{label} request failed with status: {exc.code}") from exc
        except (urllib.error.URLError, OSError) as exc:
            raise OllamaError(f"failed to {action}: {exc}") from exc
        if response.status != 200:
            status = response.status
            response.close()
            raise OllamaError(f"{label} request failed with status: {status}")
        return response

    def _get_json(self, path: str, label: str) -> Any:
        url = f"{self.base_url}{path}"
        log.debug("GET %s", url)
        with self._open(urllib.request.Request(url), self.timeout, label, f"get {label}") as response:
            try:
                return json.load(response)
            except _DECODE_ERRORS as exc:
                raise OllamaError(f"failed to decode {label} response: {exc}") from exc

    def tags(self) -> TagsResponse:
        """Return the models available locally."""
        data = self._get_json("/api/tags", "tags")
        try:
            return TagsResponse.from_dict(data)
        except _DECODE_ERRORS as exc:
            raise OllamaError(f"failed to decode tags response: {exc}") from exc

    def ps(self) -> PsResponse:
        """Return the models currently running."""
        data = self._get_json("/api/ps", "ps")
        try:
            return PsResponse.from_dict(data)
        except _DECODE_ERRORS as exc:
            raise OllamaError(f"failed to decode ps response: {exc}") from exc

    def _json_request(self, path: str, method: str, payload: dict) -> urllib.request.Request:
        return urllib.request.Request(
            f"{self.base_url}{path}",
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method=method,
        )

    def _pull(
        self,
        model_name: str,
        progress_callback: ProgressCallback | None,
        cancel_event: threading.Event | None,
    ) -> None:
        def cancelled() -> bool:
            return cancel_event is not None and cancel_event.is_set()

        if cancelled():
            raise PullCancelled(f"pull of {model_name} cancelled")
        request = self._json_request("/api/pull", "POST", {"name": model_name})
        log.debug("POST %s model=%s", request.full_url, model_name)
        with self._open(request, self.pull_timeout, "pull", "pull model") as response:
            values = _iter_json_values(response)
            while True:
                if cancelled():
                    log.debug("Pull of %s cancelled", model_name)
                    raise PullCancelled(f"pull of {model_name} cancelled")
                try:
                    value = next(values)
                except StopIteration:
                    raise OllamaError("pull stream ended unexpectedly") from None
                except _DECODE_ERRORS as exc:
                    raise OllamaError(f"failed to decode pull response: {exc}") from exc
                try:
                    progress = PullResponse.from_dict(value)
                except _DECODE_ERRORS as exc:
                    raise OllamaError(f"failed to decode pull response: {exc}") from exc
                log.debug("Pull progress model=%s status=%s", model_name, progress.status)
                if progress_callback is not None:
                    progress_callback(progress.status, progress.completed, progress.total)
                if progress.error:
                    raise OllamaError(f"pull failed: {progress.error}")
                if progress.status == "success":
                    return

    def pull(self, model_name: str) -> None:
        """Download a model, returning once the server reports success."""
        self._pull(model_name, None, None)

    def pull_with_progress(
        self,
        model_name: str,
        progress_callback: ProgressCallback | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Download a model, reporting progress and honouring cancellation."""
        self._pull(model_name, progress_callback, cancel_event)

    def delete(self, model_name: str) -> None:
        """Remove a model from the server."""
        request = self._json_request("/api/delete", "DELETE", {"name": model_name})
        log.debug("DELETE %s model=%s", request.full_url, model_name)
        with self._open(request, self.timeout, "delete", "delete model"):
            pass