"""base classes for rating models and team rating aggregators"""
from abc import ABC, abstractmethod
from typing import Sequence
from bayesrank.core.types import AdjustmentFactors, Rating, TeamResult


class RatingModel(ABC):
    """
    Base class for the Weng-Lin rating models. A rating model turns one team's result and the
    results of every other team in the match into a pair of team level adjustment factors,
    which the Adjudicator then distributes to the team's players.

    Implementations differ only in how they model the probability that one team outperforms
    another (Plackett-Luce, Bradley-Terry or Thurstone-Mosteller). They hold no mutable state
    so a single instance can rate any number of matches.
    """

    name: str

    @abstractmethod
    def calculate_adjustment_factors(self, team: TeamResult, opponents: Sequence[TeamResult]) -> AdjustmentFactors:
        """
        Computes the adjustment factors for one team.

        Parameters:
            team (TeamResult): the team being rated
            opponents (Sequence[TeamResult]): every other team in the match, never including team itself.
                                              The order matters only for floating point accumulation.

        Returns:
            AdjustmentFactors: omega (mean shift) and delta (variance shrink) for the team
        """
        raise NotImplementedError


class TeamRatingAggregator(ABC):
    """Folds the ratings of a team's players into one team rating"""

    @abstractmethod
    def compute_team_rating(self, player_ratings: Sequence[Rating]) -> Rating:
        """
        Computes the aggregated mu and sigma for an entire team.

        Parameters:
            player_ratings (Sequence[Rating]): the players on the team, must be non empty

        Returns:
            Rating: the team's mu and sigma
        """
        raise NotImplementedError
