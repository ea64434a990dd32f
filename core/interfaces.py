"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class Storage(ABC):
    """Abstract base class for a local key-value store plus config."""

    @abstractmethod
    def load_config(self) -> dict:
        """Load configuration. Returns config dict or raises FileNotFoundError."""
        pass

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Get the stored string for key, or None if absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, durably, before returning."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete key. Missing keys are ignored."""
        pass
