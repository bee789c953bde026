"""applies a rating model's team factors to every player of a match"""
import logging
import math
from typing import List, Optional, Sequence
from bayesrank.config import RatingModelConfig
from bayesrank.core.base import RatingModel
from bayesrank.core.types import AdjustmentFactors, PlayerResult, RatingAdjustment, TeamResult

logger = logging.getLogger(__name__)


class Adjudicator:
    """
    Runs one rating pass: asks the rating model for each team's adjustment factors and applies
    the closed form Weng-Lin update to each of that team's players.

    Parameters:
        config (RatingModelConfig): supplies tau, kappa and limit_sigma
        rating_model (RatingModel): any of the models in bayesrank.models
    """

    def __init__(self, config: Optional[RatingModelConfig], rating_model: RatingModel):
        config = config or RatingModelConfig()
        self.rating_model = rating_model
        self.tau_squared = config.tau_squared
        self.kappa = config.kappa
        self.limit_sigma = config.limit_sigma

    def rate(self, team: TeamResult, opponents: Sequence[TeamResult]) -> List[RatingAdjustment]:
        """
        Rates a single team against explicit opponents.

        Parameters:
            team (TeamResult): the team whose players get rated
            opponents (Sequence[TeamResult]): every other team in the match, not including team

        Returns:
            List[RatingAdjustment]: one adjustment per player, in the team's player order
        """
        factors = self.rating_model.calculate_adjustment_factors(team, opponents)
        logger.debug('rank %d team factors omega=%.6g delta=%.6g', team.rank, factors.omega, factors.delta)
        return [self.adjust_player(team, factors, player) for player in team.players]

    def rate_all(self, teams: Sequence[TeamResult]) -> List[RatingAdjustment]:
        """
        Rates every team of a match against all of the others.
        Opponents are picked by position so value-identical teams are still rated against each other.

        Returns:
            List[RatingAdjustment]: adjustments for all players, team by team in input order
        """
        adjustments = []
        for team_idx, team in enumerate(teams):
            opponents = [opponent for opponent_idx, opponent in enumerate(teams) if opponent_idx != team_idx]
            adjustments.extend(self.rate(team, opponents))
        logger.debug('rated %d players across %d teams', len(adjustments), len(teams))
        return adjustments

    def adjust_player(self, team: TeamResult, factors: AdjustmentFactors, player: PlayerResult) -> RatingAdjustment:
        """the per-player update, redistributing the team factors in proportion to the player's share of team variance"""
        team_sigma_squared = team.sigma * team.sigma
        # widen the prior by tau to model skill drift since the last match
        adjusted_sigma_squared = (player.sigma * player.sigma) + self.tau_squared
        adjusted_sigma = math.sqrt(adjusted_sigma_squared)

        omega, delta = factors
        # winners' gains scale with weight, losers' losses shrink with it
        weight = player.weight if omega > 0 else 1.0 / player.weight
        mu = player.mu + (adjusted_sigma_squared / team_sigma_squared) * omega * weight
        sigma = adjusted_sigma * math.sqrt(
            max(1.0 - (adjusted_sigma_squared / team_sigma_squared) * delta * weight, self.kappa)
        )
        if self.limit_sigma:
            sigma = min(sigma, player.sigma)
        return RatingAdjustment(player.id, mu, sigma)
