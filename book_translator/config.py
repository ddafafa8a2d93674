"""
Runtime settings for the translation pipeline.

Every ambient value (API key, endpoints, local paths, retry delay) lives
on a single Settings object that is passed into the pipeline, so tests
can substitute their own values without touching the environment.
"""

import os
from dataclasses import dataclass, replace
from importlib import resources
from pathlib import Path
from string import Template
from typing import Mapping, Optional

from .errors import ConfigError


API_KEY_ENV_VAR = "GEMINI_API_KEY"


@dataclass(frozen=True)
class Settings:
    """Configuration for one translation run."""
    api_key: str
    listing_url: str = "https://api.github.com/repos/rust-lang/book/contents/nostarch"
    completion_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions"
    model: str = "gemini-2.5-pro"
    output_dir: Path = Path("book")
    checkpoint_path: Path = Path("github_shas.json")
    prompt_path: Optional[Path] = None  # None = bundled prompt
    language: str = "繁體中文（臺灣）"
    retry_delay: float = 20.0  # seconds
    request_timeout: float = 30.0  # listing and downloads
    completion_timeout: float = 600.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Settings":
        """
        Build settings from the environment.

        Args:
            environ: Mapping to read from (defaults to os.environ).
            **overrides: Field values that replace the defaults. Values
                of None are ignored so CLI flags can be passed through.

        Returns:
            A populated Settings instance.

        Raises:
            ConfigError: If GEMINI_API_KEY is not set or the retry delay
                is negative.
        """
        environ = os.environ if environ is None else environ
        api_key = environ.get(API_KEY_ENV_VAR, "").strip()
        if not api_key:
            raise ConfigError(f"{API_KEY_ENV_VAR} is not set")

        settings = cls(api_key=api_key)
        overrides = {k: v for k, v in overrides.items() if v is not None}
        for key in ("output_dir", "checkpoint_path", "prompt_path"):
            if key in overrides:
                overrides[key] = Path(overrides[key])
        settings = replace(settings, **overrides)

        if settings.retry_delay < 0:
            raise ConfigError(f"Retry delay cannot be negative, got {settings.retry_delay}")
        return settings


def load_system_prompt(settings: Settings) -> str:
    """
    Read the system prompt once and fill in the target language.

    A custom prompt file without a $language placeholder is used as is.
    """
    try:
        if settings.prompt_path is not None:
            text = settings.prompt_path.read_text(encoding="utf-8")
        else:
            text = (
                resources.files("book_translator")
                .joinpath("prompts/system_prompt.md")
                .read_text(encoding="utf-8")
            )
    except OSError as e:
        raise ConfigError(f"Cannot read system prompt: {e}")

    return Template(text).safe_substitute(language=settings.language).strip()
