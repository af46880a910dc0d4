"""
Boolean combinators over predicates.

Arguments are validated eagerly, before anything is evaluated: ``None``
anywhere raises :class:`InvalidArgumentError`. Exceptions raised by the
combined predicates during evaluation propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from .base import AndPredicate, NotPredicate, OrPredicate, PredicateLike

logger = logging.getLogger(__name__)


def and_(*predicates: PredicateLike) -> AndPredicate[Any]:
    """
    Return a predicate true when every one of *predicates* is true.

    Evaluation is left to right and stops at the first false result.
    Called with no predicates, the result rejects everything. This is
    the opposite of the usual empty-conjunction identity and is kept on
    purpose: with nothing asserted, nothing is accepted.
    """
    composite: AndPredicate[Any] = AndPredicate(*predicates)
    logger.debug("Built AND of %d predicate(s)", len(composite.predicates))
    return composite


def or_(*predicates: PredicateLike) -> OrPredicate[Any]:
    """
    Return a predicate true when any one of *predicates* is true.

    Evaluation is left to right and stops at the first true result.
    Called with no predicates, the result accepts everything (the dual
    of :func:`and_`).
    """
    composite: OrPredicate[Any] = OrPredicate(*predicates)
    logger.debug("Built OR of %d predicate(s)", len(composite.predicates))
    return composite


def not_(predicate: PredicateLike) -> NotPredicate[Any]:
    """Return a predicate inverting the result of *predicate*."""
    return NotPredicate(predicate)
