"""State store interface."""

from typing import Protocol

from zenith.core.state import ApplicationState


class StateStore(Protocol):
    """Interface for persisting the whole application state as one blob."""

    def load(self) -> ApplicationState | None:
        """Load the saved state. Returns None if nothing was saved yet."""
        ...

    def save(self, state: ApplicationState) -> None:
        """Overwrite the saved state."""
        ...
