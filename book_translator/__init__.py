"""
Book Translator - GitHub Markdown-to-LLM Translation Pipeline

Fetches the markdown chapters of a book from the GitHub contents API,
sends each chapter through a chat-completion endpoint for translation,
and writes the results to disk. Chapters whose content hash has not
changed since the last run are skipped.
"""

__version__ = "1.0.0"
