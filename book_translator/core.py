"""
Book Translator Core Engine

Lists the book's markdown files, skips the ones whose sha matches the
checkpoint, translates the rest one at a time, and saves the updated
checkpoint once at the end of the run.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

import requests

from .checkpoint import CheckpointStore
from .config import Settings, load_system_prompt
from .github_client import FileEntry, GitHubClient
from .retry import RetryPolicy
from .translator import CompletionClient, Translator


@dataclass
class RunSummary:
    """Outcome of one run."""
    translated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    checkpoint: dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.translated) + len(self.skipped) + len(self.failed)


class BookTranslationRun:
    """
    Main translation driver.

    Holds no state between runs: the checkpoint is loaded at the start,
    threaded through the file loop, and written back once.
    """

    def __init__(
        self,
        github: GitHubClient,
        translator: Translator,
        checkpoint_store: CheckpointStore,
    ):
        self.github = github
        self.translator = translator
        self.checkpoint_store = checkpoint_store

    def process(
        self,
        files: Iterable[FileEntry],
        checkpoint: dict[str, str],
        summary: Optional[RunSummary] = None,
    ) -> dict[str, str]:
        """
        Translate every file whose sha differs from the checkpoint.

        Args:
            files: Listing entries, processed in order.
            checkpoint: Mapping loaded at the start of the run. Not mutated.
            summary: Optional summary to record per-file outcomes in.

        Returns:
            The updated mapping. A file's sha is recorded only once its
            translation has been written.
        """
        shas = dict(checkpoint)
        summary = summary if summary is not None else RunSummary()

        for entry in files:
            if entry.sha and shas.get(entry.name) == entry.sha:
                print(f"[SKIP] Already translated: {entry.name}")
                summary.skipped.append(entry.name)
                continue

            if self.translator.translate_file(entry):
                shas[entry.name] = entry.sha
                summary.translated.append(entry.name)
            else:
                summary.failed.append(entry.name)

        return shas

    def run(self) -> RunSummary:
        """
        Run the whole pipeline.

        Raises:
            CheckpointError: If the checkpoint cannot be read.
            GitHubClientError: If the listing request fails.
        """
        self.translator.output_dir.mkdir(parents=True, exist_ok=True)

        checkpoint = self.checkpoint_store.load()
        files = self.github.list_files()
        print(f"[LIST] {len(files)} markdown files in {self.github.listing_url}")

        summary = RunSummary()
        summary.checkpoint = self.process(files, checkpoint, summary)
        self.checkpoint_store.save(summary.checkpoint)
        return summary


def build_run(
    settings: Settings,
    session: Optional[requests.Session] = None,
    retry_policy: Optional[RetryPolicy] = None,
) -> BookTranslationRun:
    """
    Wire up a run from settings.

    Args:
        settings: Run configuration.
        session: HTTP session shared by both clients (a fresh one by default).
        retry_policy: Override the fixed-delay policy built from settings.
    """
    session = session or requests.Session()
    github = GitHubClient(
        listing_url=settings.listing_url,
        timeout=settings.request_timeout,
        session=session,
    )
    completion = CompletionClient(
        api_key=settings.api_key,
        url=settings.completion_url,
        timeout=settings.completion_timeout,
        session=session,
    )
    translator = Translator(
        github=github,
        completion=completion,
        system_prompt=load_system_prompt(settings),
        model=settings.model,
        output_dir=settings.output_dir,
        retry_policy=retry_policy or RetryPolicy(delay=settings.retry_delay),
    )
    return BookTranslationRun(
        github=github,
        translator=translator,
        checkpoint_store=CheckpointStore(settings.checkpoint_path),
    )
