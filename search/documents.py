from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Document:
    id: str
    content: str
    tags: tuple[str, ...] = ()
    created_at: datetime = field(default_factory=_now)
    title: str | None = None  # kept for callers; only content is indexed

    def __post_init__(self) -> None:
        tags = self.tags
        if tags is None:
            tags = ()
        elif isinstance(tags, str):
            tags = (tags,)
        if not isinstance(tags, tuple):
            tags = tuple(tags)
        object.__setattr__(self, "tags", tags)
