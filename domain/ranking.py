"""Leaderboard ordering."""
from typing import Iterable, List

from .entities import PlayerStanding


def sort_standings(standings: Iterable[PlayerStanding]) -> List[PlayerStanding]:
    """Order by tier, division, then LP, all descending.

    ``sorted`` is stable even with ``reverse=True``, so equal positions keep
    their roster order.
    """
    return sorted(standings, key=lambda s: s.position, reverse=True)
