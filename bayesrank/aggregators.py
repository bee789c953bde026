"""strategies for folding player ratings into a single team rating"""
import logging
import math
from typing import Optional, Sequence
from bayesrank.config import RatingModelConfig
from bayesrank.core.base import TeamRatingAggregator
from bayesrank.core.types import Rating

logger = logging.getLogger(__name__)


def ordinal(rating: Rating, z: float = 3.0, alpha: float = 1.0, target: float = 0.0) -> float:
    """
    conservative skill estimate, mu minus z standard deviations, optionally rescaled
    this is the number to sort a leaderboard by
    """
    return alpha * (rating.mu - z * rating.sigma) + (target / alpha)


class DefaultTeamRatingAggregator(TeamRatingAggregator):
    """
    Team mu is the sum of player mus and team variance the sum of player variances, each widened
    by tau squared. With balance enabled every player is weighted by how far their ordinal falls
    below the best ordinal on the team, so weaker players pull harder on both mu and sigma.
    """

    def __init__(self, config: Optional[RatingModelConfig] = None):
        config = config or RatingModelConfig()
        self.kappa = config.kappa
        self.tau_squared = config.tau_squared
        self.balance = config.balance

    def compute_team_rating(self, player_ratings: Sequence[Rating]) -> Rating:
        if self.balance.enable:
            return self.compute_balanced(player_ratings)
        mu = sum(player.mu for player in player_ratings)
        sigma = math.sqrt(sum(self.adjusted_sigma_squared(player) for player in player_ratings))
        return Rating(mu, sigma)

    def compute_balanced(self, player_ratings: Sequence[Rating]) -> Rating:
        """
        Weighs every player by 1 + (max_ordinal - ordinal) / (max_ordinal + kappa).

        The weights are only meaningful while the best ordinal is positive. Otherwise they can
        turn negative or divide by zero, and the invalid result propagates as nan rather than raising.
        """
        ordinals = [
            ordinal(player, z=self.balance.z, alpha=self.balance.alpha, target=self.balance.target)
            for player in player_ratings
        ]
        max_ordinal = max(ordinals)
        denom = max_ordinal + self.kappa
        if denom == 0.0:
            logger.debug('balance weights undefined for best ordinal %.6g', max_ordinal)
            return Rating(math.nan, math.nan)
        balance_weights = [1.0 + ((max_ordinal - player_ordinal) / denom) for player_ordinal in ordinals]
        mu = sum(player.mu * weight for player, weight in zip(player_ratings, balance_weights))
        sigma_squared = sum(
            self.adjusted_sigma_squared(player) * weight for player, weight in zip(player_ratings, balance_weights)
        )
        if sigma_squared < 0.0:
            logger.debug('negative balanced team variance %.6g', sigma_squared)
            return Rating(mu, math.nan)
        return Rating(mu, math.sqrt(sigma_squared))

    def adjusted_sigma_squared(self, player: Rating) -> float:
        return (player.sigma * player.sigma) + self.tau_squared


class WeightedTeamRatingAggregator(TeamRatingAggregator):
    """
    Inverse variance weighted mean for mu and a harmonic combination for sigma, so the players
    the system is most certain about dominate the team rating. Ignores tau and balance.
    """

    def __init__(self, config: Optional[RatingModelConfig] = None):
        # accepts a config for a uniform constructor, nothing in it applies
        pass

    def compute_team_rating(self, player_ratings: Sequence[Rating]) -> Rating:
        weighted_mu_sum = 0.0
        weight_sum = 0.0
        for player in player_ratings:
            weight = 1.0 / (player.sigma * player.sigma)
            weighted_mu_sum += player.mu * weight
            weight_sum += weight
        return Rating(weighted_mu_sum / weight_sum, math.sqrt(1.0 / weight_sum))


TEAM_RATING_AGGREGATORS = {
    'default': DefaultTeamRatingAggregator,
    'weighted': WeightedTeamRatingAggregator,
}


def get_team_rating_aggregator(name: str, config: Optional[RatingModelConfig] = None) -> TeamRatingAggregator:
    """instantiate a team rating aggregator by name"""
    try:
        aggregator_class = TEAM_RATING_AGGREGATORS[name.lower()]
    except KeyError:
        raise ValueError(
            f'unknown team rating aggregator {name!r}, expected one of {sorted(TEAM_RATING_AGGREGATORS)}'
        ) from None
    return aggregator_class(config)
