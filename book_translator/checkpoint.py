"""
Checkpoint file mapping each translated file name to its GitHub sha.
"""

import json
from pathlib import Path

from .errors import CheckpointError


class CheckpointStore:
    """Loads and saves the filename -> sha mapping."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> dict[str, str]:
        """
        Read the checkpoint mapping.

        Returns:
            Mapping of file name to the sha it was last translated at.

        Raises:
            CheckpointError: If the file is missing or not a JSON object
                of strings.
        """
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise CheckpointError(f"Checkpoint file not found: {self.path}")
        except json.JSONDecodeError as e:
            raise CheckpointError(f"Invalid JSON in checkpoint {self.path}: {e}")

        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise CheckpointError(f"Checkpoint must be an object of strings: {self.path}")

        return data

    def save(self, mapping: dict[str, str]) -> None:
        """Overwrite the checkpoint file with the given mapping."""
        self.path.write_text(json.dumps(mapping, indent=2, ensure_ascii=False), encoding="utf-8")

    def initialize(self) -> bool:
        """Create an empty checkpoint if none exists. Returns True if created."""
        if self.path.exists():
            return False
        self.save({})
        return True
