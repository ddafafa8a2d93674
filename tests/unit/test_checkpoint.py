"""
Unit tests for the checkpoint store.
"""

import json
import pytest

from book_translator.checkpoint import CheckpointStore
from book_translator.errors import CheckpointError


class TestCheckpointLoad:
    """Tests for CheckpointStore.load."""

    def test_load_mapping(self, tmp_path):
        """Test loading a valid checkpoint."""
        path = tmp_path / "github_shas.json"
        path.write_text(json.dumps({"chapter01.md": "abc", "chapter02.md": "def"}))

        mapping = CheckpointStore(path).load()

        assert mapping == {"chapter01.md": "abc", "chapter02.md": "def"}

    def test_load_empty_object(self, tmp_path):
        """Test that an empty object is a valid checkpoint."""
        path = tmp_path / "github_shas.json"
        path.write_text("{}")

        assert CheckpointStore(path).load() == {}

    def test_load_missing_file(self, tmp_path):
        """Test that a missing checkpoint is fatal."""
        store = CheckpointStore(tmp_path / "missing.json")

        with pytest.raises(CheckpointError, match="not found"):
            store.load()

    def test_load_invalid_json(self, tmp_path):
        """Test that unparsable content is fatal."""
        path = tmp_path / "github_shas.json"
        path.write_text("{not json")

        with pytest.raises(CheckpointError, match="Invalid JSON"):
            CheckpointStore(path).load()

    @pytest.mark.parametrize("content", ["[]", '"abc"', '{"chapter01.md": 5}'])
    def test_load_wrong_shape(self, tmp_path, content):
        """Test that JSON other than an object of strings is rejected."""
        path = tmp_path / "github_shas.json"
        path.write_text(content)

        with pytest.raises(CheckpointError, match="object of strings"):
            CheckpointStore(path).load()


class TestCheckpointSave:
    """Tests for CheckpointStore.save and initialize."""

    def test_save_overwrites(self, tmp_path):
        """Test that save replaces existing content."""
        path = tmp_path / "github_shas.json"
        path.write_text(json.dumps({"old.md": "111"}))
        store = CheckpointStore(path)

        store.save({"chapter01.md": "abc"})

        assert store.load() == {"chapter01.md": "abc"}

    def test_save_is_pretty_printed(self, tmp_path):
        """Test that the file is indented with two spaces."""
        path = tmp_path / "github_shas.json"

        CheckpointStore(path).save({"chapter01.md": "abc"})

        assert path.read_text() == '{\n  "chapter01.md": "abc"\n}'

    def test_initialize_creates_empty(self, tmp_path):
        """Test creating an empty checkpoint when none exists."""
        store = CheckpointStore(tmp_path / "github_shas.json")

        assert store.initialize() is True
        assert store.load() == {}

    def test_initialize_keeps_existing(self, tmp_path):
        """Test that an existing checkpoint is left alone."""
        path = tmp_path / "github_shas.json"
        path.write_text(json.dumps({"chapter01.md": "abc"}))
        store = CheckpointStore(path)

        assert store.initialize() is False
        assert store.load() == {"chapter01.md": "abc"}
