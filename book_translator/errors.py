"""
Exception types raised by the translation pipeline.
"""


class BookTranslatorError(Exception):
    """Base class for all book translator errors."""
    pass


class ConfigError(BookTranslatorError):
    """Raised when required configuration is missing or unreadable."""
    pass


class CheckpointError(BookTranslatorError):
    """Raised when the checkpoint file cannot be read."""
    pass


class GitHubClientError(BookTranslatorError):
    """Raised when GitHub API calls fail."""
    pass


class DownloadError(GitHubClientError):
    """Raised when a single file cannot be downloaded."""
    pass


class CompletionError(BookTranslatorError):
    """Raised when a chat-completion attempt fails or returns nothing usable."""
    pass
