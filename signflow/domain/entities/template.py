"""Domain entity representing a document template."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Template:
    """Reusable document skeleton containing ``{placeholder}`` tokens.

    ``fields`` is derived from ``content`` on every save and never edited
    directly.
    """

    id: str
    name: str
    content: str
    created_at: datetime
    updated_at: datetime
    fields: list[str] = field(default_factory=list)


__all__ = ["Template"]
