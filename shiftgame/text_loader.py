"""
Text Loader - Loads the game's player-facing text from YAML files.

Files live in the text/ directory next to this module:
- game.yaml - welcome message, rules, prompts and statistics labels
- demo.yaml - scripted words and guesses for the demonstration run
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

TEXT_DIR = Path(__file__).parent / "text"


class TextLoader:
    """Loads and caches YAML text files."""

    def __init__(self, text_dir: Optional[Path] = None):
        """
        Initialize the text loader.

        Args:
            text_dir: Directory containing text files. If None, uses the text/
                      directory bundled with the package.
        """
        self.text_dir = Path(text_dir) if text_dir is not None else TEXT_DIR
        self._cache: Dict[Path, Dict[str, Any]] = {}

    def load(self, filename: str, path: Optional[Path] = None) -> Dict[str, Any]:
        """
        Load a YAML text file, using the cache when possible.

        Args:
            filename: File name inside text_dir (e.g. 'game.yaml')
            path: Explicit path overriding text_dir/filename

        Returns:
            Parsed mapping from the file
        """
        path = Path(path) if path is not None else self.text_dir / filename

        if path in self._cache:
            return self._cache[path]

        if not path.exists():
            raise FileNotFoundError(
                f"Text file not found: {path}\n"
                f"Expected location: {self.text_dir}/{filename}"
            )

        logger.debug(f"Loading text: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Text file must contain a mapping: {path}")

        self._cache[path] = data
        return data

    def game_text(self, path: Optional[Path] = None) -> Dict[str, Any]:
        """Player-facing game text."""
        return self.load("game.yaml", path)

    def demo_script(self) -> Dict[str, Any]:
        """Scripted input for the demonstration run."""
        return self.load("demo.yaml")


# Global loader instance
_loader: Optional[TextLoader] = None


def get_loader() -> TextLoader:
    """Get the global text loader instance."""
    global _loader
    if _loader is None:
        _loader = TextLoader()
    return _loader
