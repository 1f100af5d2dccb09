"""
Default interface selection shared by the route-table platforms.

Candidates are filtered by address family, then by a platform-specific
"usable" predicate, and the survivor with the lowest routing metric wins.
Ties keep the first candidate encountered.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Type, TypeVar

from netgw.core.errors import DefaultInterfaceNotFoundError, GatewayError

logger = logging.getLogger(__name__)

C = TypeVar("C")


def lowest_metric(candidates: Iterable[C], metric: Callable[[C], float]) -> C:
    """Return the candidate with the strictly lowest metric (first one on ties)."""
    best = None
    for candidate in candidates:
        if best is None or metric(candidate) < metric(best):
            best = candidate
    if best is None:
        raise DefaultInterfaceNotFoundError()
    return best


def select_default(
    candidates: Iterable[C],
    in_family: Callable[[C], bool],
    usable: Callable[[C], bool],
    metric: Callable[[C], float],
    unusable_error: Type[GatewayError] = DefaultInterfaceNotFoundError,
) -> C:
    """Pick the default interface out of *candidates*.

    An empty family filter raises :class:`DefaultInterfaceNotFoundError`;
    an empty usable-state filter raises *unusable_error*.
    """
    family_candidates = [c for c in candidates if in_family(c)]
    if not family_candidates:
        logger.debug("no candidate matches the requested address family")
        raise DefaultInterfaceNotFoundError()

    usable_candidates = [c for c in family_candidates if usable(c)]
    if not usable_candidates:
        logger.debug("%d candidate(s) in family, none usable", len(family_candidates))
        raise unusable_error()

    selected = lowest_metric(usable_candidates, metric)
    logger.info("selected default interface %s", selected)
    return selected
