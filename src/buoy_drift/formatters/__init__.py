"""Output formatters for buoy-drift."""

from .base import BaseFormatter
from .github_formatter import GithubFormatter, format_annotations, format_pr_comment
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter

FORMATTERS = {
    "rich": RichFormatter,
    "json": JsonFormatter,
    "github": GithubFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json", "github"

    Raises:
        ValueError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "GithubFormatter",
    "format_annotations",
    "format_pr_comment",
    "get_formatter",
]
