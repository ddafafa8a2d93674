"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from book_translator.checkpoint import CheckpointStore
from book_translator.config import Settings
from book_translator.core import BookTranslationRun
from book_translator.github_client import GitHubClient
from book_translator.retry import RetryPolicy
from book_translator.translator import CompletionClient, Translator
from tests.fixtures import (
    LISTING_URL,
    COMPLETION_URL,
    FakeSession,
    RecordingSleep,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "network: mark as requiring network access")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def session():
    """Create an empty fake HTTP session."""
    return FakeSession()


@pytest.fixture
def sleep():
    """Create a sleep replacement that records delays."""
    return RecordingSleep()


@pytest.fixture
def retry_policy(sleep):
    """Create the default fixed-delay policy without real waiting."""
    return RetryPolicy(delay=20.0, sleep=sleep)


@pytest.fixture
def settings(tmp_path):
    """Create settings pointing at a temporary workspace."""
    return Settings(
        api_key="test-key",
        output_dir=tmp_path / "book",
        checkpoint_path=tmp_path / "github_shas.json",
    )


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def github_client(session):
    """Create a GitHub client backed by the fake session."""
    return GitHubClient(listing_url=LISTING_URL, session=session)


@pytest.fixture
def completion_client(session):
    """Create a completion client backed by the fake session."""
    return CompletionClient(api_key="test-key", url=COMPLETION_URL, session=session)


@pytest.fixture
def translator(github_client, completion_client, retry_policy, settings):
    """Create a translator writing into the temporary output directory."""
    settings.output_dir.mkdir(parents=True, exist_ok=True)
    return Translator(
        github=github_client,
        completion=completion_client,
        system_prompt="Translate into French.",
        model="gemini-2.5-pro",
        output_dir=settings.output_dir,
        retry_policy=retry_policy,
    )


@pytest.fixture
def checkpoint_store(settings):
    """Create a checkpoint store at the temporary checkpoint path."""
    return CheckpointStore(settings.checkpoint_path)


@pytest.fixture
def run(github_client, translator, checkpoint_store):
    """Create a full run wired to fakes."""
    return BookTranslationRun(
        github=github_client,
        translator=translator,
        checkpoint_store=checkpoint_store,
    )
