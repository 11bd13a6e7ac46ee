from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..core.constants import DEFAULT_PENALTY_TIERS
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class PenaltyTier:
    """Band of cumulative late minutes starting at ``min_minutes`` (inclusive)."""

    min_minutes: int
    amount: int


class PenaltyPolicy:
    """Step function from a month's late minutes to a penalty amount.

    Each tier covers ``[tier.min_minutes, next_tier.min_minutes)``; the last
    tier is open-ended. Minutes below the first bound cost nothing.
    """

    def __init__(self, tiers: Sequence[PenaltyTier]):
        tiers = tuple(tiers)
        if not tiers:
            raise ConfigurationError("Penalty tiers must not be empty")

        for tier in tiers:
            if tier.min_minutes < 0 or tier.amount < 0:
                raise ConfigurationError(f"Penalty tier must be non-negative: {tier}")
        for prev, cur in zip(tiers, tiers[1:]):
            if cur.min_minutes <= prev.min_minutes:
                raise ConfigurationError("Penalty tier bounds must be strictly increasing")
            if cur.amount < prev.amount:
                raise ConfigurationError("Penalty amounts must not decrease with lateness")

        self._tiers = tiers
        self._bounds = [t.min_minutes for t in tiers]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[int]]) -> "PenaltyPolicy":
        try:
            tiers = [PenaltyTier(min_minutes=int(lo), amount=int(amount)) for lo, amount in pairs]
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid penalty tier table: {e}") from e
        return cls(tiers)

    @classmethod
    def default(cls) -> "PenaltyPolicy":
        return cls.from_pairs(DEFAULT_PENALTY_TIERS)

    @property
    def tiers(self) -> tuple[PenaltyTier, ...]:
        return self._tiers

    def tier_for(self, total_late_minutes: int) -> PenaltyTier | None:
        idx = bisect_right(self._bounds, max(int(total_late_minutes), 0)) - 1
        if idx < 0:
            return None
        return self._tiers[idx]

    def penalty(self, total_late_minutes: int) -> int:
        tier = self.tier_for(total_late_minutes)
        return tier.amount if tier else 0
