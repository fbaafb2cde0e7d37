"""Base class for managed resources and text helpers for resource files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

__all__ = ["Resource", "ResourceLoadError", "split_line", "strip_comment", "trim_line"]


class ResourceLoadError(OSError):
    """Raised when a resource cannot be loaded."""


class Resource(ABC):
    """A resource that a resource manager loads and hands out."""

    def __init__(self) -> None:
        self._resource_id = 0
        self.resource_manager: Any = None

    @abstractmethod
    def load(self, path: str, manager: Any) -> None:
        """Load the resource from path; raise ResourceLoadError on failure."""

    @abstractmethod
    def is_cloneable(self) -> bool:
        """Tell whether the manager should hand out clones of this resource."""

    def clone(self) -> Resource:
        """Return a clone of the resource; stateless resources return themselves."""
        return self

    @property
    def resource_id(self) -> int:
        """The id the resource manager gave this resource."""
        return self._resource_id

    @resource_id.setter
    def resource_id(self, value: int) -> None:
        self._resource_id = value


def split_line(line: str, delimiter: str) -> list[str]:
    """Split line at each delimiter; a trailing delimiter adds no empty element."""
    if not line:
        return []
    parts = line.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def trim_line(line: str) -> str:
    """Remove spaces and tabs at both ends of line."""
    return line.strip(" \t")


def strip_comment(line: str) -> str:
    """Remove a '//' comment and trim what is left; lines without one are unchanged."""
    position = line.find("//")
    if position == -1:
        return line
    return trim_line(line[:position])