"""Type definitions for SETI@home WebStats client."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink embedded in a stats field: display text and optional target."""

    text: str
    href: str | None = None


# A leaf value is either plain text or a link record
Scalar = str
Field = Scalar | Link

# Generic type aliases for the parsed document
StatsNode = Any
StatsTree = dict[str, StatsNode]
