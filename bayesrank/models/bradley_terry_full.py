"""Weng/Lin Bayesian rating, Bradley Terry Edition with full pairing"""
import math
from typing import Optional, Sequence
from bayesrank.config import RatingModelConfig
from bayesrank.core.base import RatingModel
from bayesrank.core.types import AdjustmentFactors, TeamResult
from bayesrank.utils.math_utils import sigmoid


class BradleyTerryFull(RatingModel):
    """
    Every team is compared with every opponent using a logistic model of the skill difference.
    https://real-statistics.com/reliability/bradley-terry-model/
    """

    name = 'bradley_terry_full'

    def __init__(self, config: Optional[RatingModelConfig] = None):
        config = config or RatingModelConfig()
        self.two_beta_squared = 2.0 * config.beta_squared

    @classmethod
    def from_beta(cls, beta: float) -> 'BradleyTerryFull':
        return cls(RatingModelConfig(beta=beta))

    def calculate_adjustment_factors(self, team: TeamResult, opponents: Sequence[TeamResult]) -> AdjustmentFactors:
        omega = 0.0
        delta = 0.0
        team_sigma_squared = team.sigma * team.sigma

        for opponent in opponents:
            # combined standard deviation of the pair
            combined_dev = math.sqrt(team_sigma_squared + opponent.sigma * opponent.sigma + self.two_beta_squared)
            # probability that team beats opponent
            prob = float(sigmoid((team.mu - opponent.mu) / combined_dev))
            sigma_squared_to_dev = team_sigma_squared / combined_dev

            if opponent.rank > team.rank:
                outcome = 1.0
            elif opponent.rank == team.rank:
                outcome = 0.5
            else:
                outcome = 0.0

            omega += sigma_squared_to_dev * (outcome - prob)
            gamma = team.sigma / combined_dev
            delta += ((gamma * sigma_squared_to_dev) / combined_dev) * prob * (1.0 - prob)

        return AdjustmentFactors(omega, delta)
