"""Identifier generation shared by template and document use cases."""

from datetime import datetime

from signflow.infrastructure.repositories import SigningRepository


def next_identifier(repository: SigningRepository, now: datetime) -> str:
    """Return a millisecond timestamp id not yet used in ``repository``."""

    taken = repository.identifiers()
    candidate = int(now.timestamp() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


__all__ = ["next_identifier"]
