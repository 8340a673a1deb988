"""
High score storage.

A small JSON key-value file. The high score lives under HIGHSCORE_KEY as a
decimal integer string; other keys in the file are left alone. Storage is
cosmetic: read problems fall back to 0 and write problems are ignored.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .config import HIGHSCORE_KEY, HIGHSCORE_PATH

logger = logging.getLogger(__name__)


def parse_score(raw) -> Optional[int]:
    """Decimal integer string -> int; anything else -> None."""
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


class HighScoreStore:
    def __init__(self, path: Optional[Union[str, Path]] = None, key: str = HIGHSCORE_KEY):
        self.path = Path(path) if path is not None else HIGHSCORE_PATH
        self.key = key

    def _read(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> int:
        raw = self._read().get(self.key)
        if raw is None:
            return 0
        score = parse_score(raw)
        if score is None:
            logger.warning("Malformed high score %r in %s, using 0", raw, self.path)
            return 0
        return score

    def store(self, score: int):
        data = self._read()
        data[self.key] = str(int(score))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".highscore-")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f)
                os.replace(tmp, self.path)
            except OSError:
                if os.path.exists(tmp):
                    os.remove(tmp)
                raise
        except OSError as e:
            logger.debug("Could not save high score to %s: %s", self.path, e)
