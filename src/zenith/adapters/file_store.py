"""File-based state storage adapter."""

import json
import logging
from pathlib import Path

from zenith.core.state import ApplicationState

logger = logging.getLogger(__name__)

STATE_KEY = "zenith_v2_state"


class StateCorruptError(Exception):
    """Raised when the saved state cannot be parsed."""

    pass


class FileStateStore:
    """
    JSON file state storage.

    Implements StateStore protocol. The whole state lives in one file named
    after the state key; every save overwrites it.
    """

    def __init__(self, data_dir: Path | str, state_key: str = STATE_KEY):
        self.data_dir = Path(data_dir).expanduser()
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.state_key = state_key

    @property
    def path(self) -> Path:
        return self.data_dir / f"{self.state_key}.json"

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> ApplicationState | None:
        """Load saved state. Returns None if nothing was saved yet."""
        if not self.path.exists():
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return ApplicationState.from_dict(data)
        except (
            json.JSONDecodeError,
            AttributeError,
            KeyError,
            RecursionError,
            TypeError,
            ValueError,
        ) as e:
            raise StateCorruptError(f"Cannot read saved state at {self.path}: {e}") from e

    def save(self, state: ApplicationState) -> None:
        """Overwrite saved state."""
        self.path.write_text(
            json.dumps(state.to_dict(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.debug(f"Saved state to {self.path}")
