"""Weng/Lin Bayesian rating, Thurstone-Mosteller Edition with full pairing"""
import math
from typing import Optional, Sequence
from bayesrank.config import RatingModelConfig
from bayesrank.core.base import RatingModel
from bayesrank.core.types import AdjustmentFactors, TeamResult
from bayesrank.utils.math_utils import v_win, w_win, v_draw, w_draw


class ThurstoneMostellerFull(RatingModel):
    """
    Every team is compared with every opponent assuming gaussian performances, so the chance of
    winning a pairing is the normal cdf of the scaled skill difference. kappa doubles as the
    draw margin fed into the truncated gaussian corrections v and w.
    """

    name = 'thurstone_mosteller_full'

    def __init__(self, config: Optional[RatingModelConfig] = None):
        config = config or RatingModelConfig()
        self.two_beta_squared = 2.0 * config.beta_squared
        self.kappa = config.kappa

    @classmethod
    def from_beta(cls, beta: float) -> 'ThurstoneMostellerFull':
        return cls(RatingModelConfig(beta=beta))

    def calculate_adjustment_factors(self, team: TeamResult, opponents: Sequence[TeamResult]) -> AdjustmentFactors:
        omega = 0.0
        delta = 0.0
        team_sigma_squared = team.sigma * team.sigma

        for opponent in opponents:
            combined_dev = math.sqrt(team_sigma_squared + opponent.sigma * opponent.sigma + self.two_beta_squared)
            norm_diff = (team.mu - opponent.mu) / combined_dev
            sigma_squared_to_dev = team_sigma_squared / combined_dev
            gamma = team.sigma / combined_dev
            eta = (gamma * sigma_squared_to_dev) / combined_dev
            margin = self.kappa / combined_dev

            if opponent.rank > team.rank:
                omega += sigma_squared_to_dev * v_win(norm_diff, margin)
                delta += eta * w_win(norm_diff, margin)
            elif opponent.rank < team.rank:
                omega += -sigma_squared_to_dev * v_win(-norm_diff, margin)
                delta += eta * w_win(-norm_diff, margin)
            else:
                omega += sigma_squared_to_dev * v_draw(norm_diff, margin)
                delta += eta * w_draw(norm_diff, margin)

        return AdjustmentFactors(omega, delta)
