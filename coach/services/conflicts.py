import logging
from typing import Callable, Optional, TypeVar

from .errors import ConflictError

logger = logging.getLogger("coach")

T = TypeVar("T")


def reuse_on_conflict(create: Callable[[], T], lookup: Callable[[], Optional[T]]) -> T:
    """
    Run `create`; if it lost a uniqueness race, return the row the winner stored.
    Re-raises the ConflictError when the re-read finds nothing.
    """
    try:
        return create()
    except ConflictError as exc:
        logger.info("Uniqueness race detected (%s); re-reading existing row", exc)
        existing = lookup()
        if existing is None:
            raise
        return existing
