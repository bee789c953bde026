"""immutable value types passed into and out of the rating engine"""
from dataclasses import dataclass, field
from typing import Any, Hashable, NamedTuple, Tuple


@dataclass(frozen=True)
class Rating:
    """A Gaussian belief about skill, sigma must be positive"""

    mu: float
    sigma: float


@dataclass(frozen=True)
class PlayerResult(Rating):
    """
    A player's pre-match rating tagged with a caller supplied id.

    Attributes:
        id: opaque identifier, only used to tag the output adjustment
        weight (float): contribution to the match result. Should be greater than 0,
                        1.0 is a neutral contribution and something like 0.1 suits
                        a player who barely influenced the outcome.
    """

    id: Hashable = None
    weight: float = 1.0


@dataclass(frozen=True)
class TeamResult(Rating):
    """
    A team's aggregate rating and its placement in one match.

    Attributes:
        rank (int): 1 for first place, 2 for second and so on, equal ranks are a tie. Required,
                    the caller always assigns it
        players (tuple): the team's players in a fixed order, must be non empty
        weight (float): weight of the overall team result, e.g. victory confidence.
                        Carried for callers, no rating model reads it.
    """

    rank: int
    players: Tuple[PlayerResult, ...] = field(default_factory=tuple)
    weight: float = 1.0

    def __post_init__(self):
        # accept any sequence but store a tuple so the record stays immutable
        if not isinstance(self.players, tuple):
            object.__setattr__(self, 'players', tuple(self.players))


class AdjustmentFactors(NamedTuple):
    """team level mean shift (omega) and variance shrink (delta) produced by a rating model"""

    omega: float
    delta: float


class RatingAdjustment(NamedTuple):
    """a player's post-match rating"""

    player_id: Any
    mu: float
    sigma: float
