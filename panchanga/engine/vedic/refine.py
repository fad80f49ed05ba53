"""Post-processing hook applied to every computed Panchanga."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar, runtime_checkable

LOG = logging.getLogger(__name__)

__all__ = ["NO_OP_NOTES", "NoOpRefiner", "RefinementMeta", "Refiner"]

NO_OP_NOTES = "AI refinement (no-op)"

ResultT = TypeVar("ResultT")


@dataclass(frozen=True, slots=True)
class RefinementMeta:
    """Records whether a refiner altered a result."""

    applied: bool
    notes: str = ""


@runtime_checkable
class Refiner(Protocol):
    """Capability interface for result refiners.

    Implementations receive a finished result and return either the same
    object or a corrected copy carrying a :class:`RefinementMeta`.
    """

    def refine(self, result: ResultT) -> ResultT: ...


class NoOpRefiner:
    """Refiner that returns results unchanged."""

    def refine(self, result: ResultT) -> ResultT:
        LOG.debug("Refinement hook executed (no-op)")
        return result
