"""
Translation of single book chapters through a chat-completion endpoint.

The endpoint speaks the OpenAI chat-completions protocol (Gemini exposes
one at /v1beta/openai/). Each chapter is downloaded once, then the same
request is re-sent until the endpoint returns a usable translation.
"""

import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import requests

from .errors import CompletionError, DownloadError
from .github_client import FileEntry, GitHubClient
from .retry import RetryPolicy


@dataclass(frozen=True)
class TranslationRequest:
    """A system instruction plus one chapter, addressed to one model."""
    model: str
    system_prompt: str
    user_content: str

    def to_payload(self) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": self.user_content},
            ],
        }


class CompletionClient:
    """
    Minimal client for an OpenAI-compatible chat-completions endpoint.
    """

    DEFAULT_URL = "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions"
    DEFAULT_TIMEOUT = 600

    def __init__(
        self,
        api_key: str,
        url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.url = url or self.DEFAULT_URL
        self.timeout = timeout
        self.session = session or requests.Session()

    def complete(self, request: TranslationRequest) -> str:
        """
        Send one request and return the first choice's message content.

        Raises:
            CompletionError: On a non-success status, a malformed body, or
                an empty answer.
            requests.RequestException: On transport failures.
        """
        response = self.session.post(
            self.url,
            json=request.to_payload(),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            timeout=self.timeout,
        )

        if not response.ok:
            raise CompletionError(
                f"API request failed with status {response.status_code}: "
                f"{_error_message(response)}"
            )

        try:
            data = response.json()
            translation = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise CompletionError(f"Unexpected response shape: {e!r}")

        if not translation or not translation.strip():
            raise CompletionError("Response is empty")

        return translation


def _error_message(response: requests.Response) -> str:
    """Pull the embedded error message out of a failed response, else the raw body."""
    try:
        body = response.json()
        # Gemini wraps errors in a one-element array
        if isinstance(body, list):
            body = body[0]
        return body["error"]["message"]
    except (ValueError, KeyError, IndexError, TypeError):
        return response.text


class Translator:
    """
    Downloads a chapter, translates it, and writes the result to disk.
    """

    def __init__(
        self,
        github: GitHubClient,
        completion: CompletionClient,
        system_prompt: str,
        model: str,
        output_dir: Path | str,
        retry_policy: Optional[RetryPolicy] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.github = github
        self.completion = completion
        self.system_prompt = system_prompt
        self.model = model
        self.output_dir = Path(output_dir)
        self.retry_policy = retry_policy or RetryPolicy()
        self.clock = clock

    def translate_file(self, entry: FileEntry) -> bool:
        """
        Translate one file.

        Args:
            entry: The listing entry to translate.

        Returns:
            True if the translation was written, False if the file was
            abandoned (download failure or unexpected error).
        """
        start = self.clock()
        try:
            print(f"[DOWNLOAD] {entry.name}")
            try:
                content = self.github.download(entry)
            except DownloadError as e:
                print(f"[ERROR] {e}", file=sys.stderr)
                return False

            request = TranslationRequest(
                model=self.model,
                system_prompt=self.system_prompt,
                user_content=content,
            )

            print(f"[REQUEST] Translating {entry.name} with {self.model}")
            translation = self.retry_policy.call(lambda: self.completion.complete(request))

            out_path = self.output_dir / entry.name
            out_path.write_text(translation.strip(), encoding="utf-8")
            print(f"[SAVED] {out_path}")

            seconds = self.clock() - start
            print(f"[DONE] Translated: {entry.name} in {seconds:.2f} seconds")
            return True

        except Exception as e:
            print(f"[ERROR] Error translating {entry.name}: {e}", file=sys.stderr)
            return False
