"""
Abstract base classes defining contracts between modules.

Loaders produce a Dataset, renderers draw a ChartView. Orchestration wires them.
"""

from abc import ABC, abstractmethod

from early_edge.core.schema import Dataset


class BaseLoader(ABC):
    """Contract: raw file → Dataset."""

    @abstractmethod
    def load(self) -> Dataset:
        """Load and return the validated Dataset."""
        ...

    @abstractmethod
    def validate(self, dataset: Dataset) -> list[str]:
        """Return list of validation warnings (empty = clean)."""
        ...


class BaseRenderer(ABC):
    """Contract: ChartView → drawn chart."""

    @abstractmethod
    def render(self, view):
        """Draw the view and return the backend's figure object."""
        ...

    @abstractmethod
    def save(self, view, path: str) -> str:
        ...
