"""Base formatter interface for buoy-drift output rendering."""

from abc import ABC, abstractmethod

from ..models import DriftReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: DriftReport) -> None:
        """Render the report to stderr/stdout as appropriate."""

    @abstractmethod
    def format(self, report: DriftReport) -> str:
        """Return formatted string representation of the report."""
