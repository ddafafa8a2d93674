"""
Client for listing and downloading book chapters from the GitHub contents API.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import requests

from .errors import DownloadError, GitHubClientError


class FileKind(Enum):
    """Kind of a contents API entry."""
    FILE = "file"
    OTHER = "other"  # dir, symlink, submodule


@dataclass(frozen=True)
class FileEntry:
    """
    Represents one entry of a GitHub directory listing.
    """
    name: str  # e.g., "chapter01.md"
    kind: FileKind
    sha: str  # git blob sha, changes whenever the content does
    download_url: str

    @classmethod
    def from_api(cls, data: dict) -> "FileEntry":
        """Build an entry from one element of the contents API response."""
        kind = FileKind.FILE if data.get("type") == "file" else FileKind.OTHER
        return cls(
            name=data["name"],
            kind=kind,
            sha=data.get("sha") or "",
            download_url=data.get("download_url") or "",
        )

    @property
    def is_markdown(self) -> bool:
        """Check if the entry is a regular file with a .md extension."""
        return self.kind is FileKind.FILE and os.path.splitext(self.name)[1] == ".md"


class GitHubClient:
    """
    Client for the GitHub repository contents API.

    Lists a single directory (no pagination: the contents API returns
    the whole listing in one response) and downloads raw file bodies.
    """

    DEFAULT_LISTING_URL = "https://api.github.com/repos/rust-lang/book/contents/nostarch"
    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        listing_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the GitHub client.

        Args:
            listing_url: Override the contents API URL to list.
            timeout: Request timeout in seconds.
            session: HTTP session to use (a fresh one by default).
        """
        self.listing_url = listing_url or self.DEFAULT_LISTING_URL
        self.timeout = timeout
        self.session = session or requests.Session()

    def list_files(self) -> list[FileEntry]:
        """
        Fetch the listing and keep only markdown files.

        Returns:
            Markdown file entries in the order the API returned them.

        Raises:
            GitHubClientError: If the request fails or the body is not a
                JSON array.
        """
        try:
            response = self.session.get(
                self.listing_url,
                headers={"Accept": "application/vnd.github+json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise GitHubClientError(f"Request error fetching listing: {e}")

        if not response.ok:
            raise GitHubClientError(
                f"HTTP error fetching listing: {response.status_code} {response.reason}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GitHubClientError(f"Invalid JSON response: {e}")

        if not isinstance(data, list):
            raise GitHubClientError("Listing response is not a JSON array")

        try:
            entries = [FileEntry.from_api(item) for item in data]
        except (KeyError, TypeError, AttributeError) as e:
            raise GitHubClientError(f"Malformed listing entry: {e!r}")

        return [entry for entry in entries if entry.is_markdown]

    def download(self, entry: FileEntry) -> str:
        """
        Download the raw content of a file.

        Raises:
            DownloadError: If the request fails or returns a non-success status.
        """
        try:
            response = self.session.get(entry.download_url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DownloadError(f"Failed to download {entry.name}: {e}")

        if not response.ok:
            raise DownloadError(
                f"Failed to download {entry.name}: {response.status_code} {response.reason}"
            )

        # raw.githubusercontent.com serves text/plain without a charset
        response.encoding = "utf-8"
        return response.text
