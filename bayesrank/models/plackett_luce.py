"""Weng/Lin Bayesian rating with the Plackett-Luce model of multi-team rankings"""
import math
from collections import Counter
from typing import Dict, List, Optional, Sequence
import numpy as np
from scipy.special import logsumexp
from bayesrank.config import RatingModelConfig
from bayesrank.core.base import RatingModel
from bayesrank.core.types import AdjustmentFactors, TeamResult


class PlackettLuce(RatingModel):
    """
    Plackett-Luce generalizes Bradley-Terry to full rankings: a team's chance of finishing ahead
    of every team ranked at or below it is its exponentiated skill divided by the sum over those
    teams. Unlike the full pairing models it looks at the whole ranking at once, with tied teams
    splitting their share through the A counts.

    The sums are kept in log space so lopsided skill gaps give probabilities of 0 and 1 rather
    than overflowing.
    """

    name = 'plackett_luce'

    def __init__(self, config: Optional[RatingModelConfig] = None):
        config = config or RatingModelConfig()
        self.beta_squared = config.beta_squared

    @classmethod
    def from_beta(cls, beta: float) -> 'PlackettLuce':
        return cls(RatingModelConfig(beta=beta))

    def calculate_adjustment_factors(self, team: TeamResult, opponents: Sequence[TeamResult]) -> AdjustmentFactors:
        # the rated team goes last, it is identified by position rather than by equality
        all_teams = list(opponents) + [team]
        team_idx = len(all_teams) - 1
        team_sigma_squared = team.sigma * team.sigma

        c = self.calculate_c(all_teams)
        log_sum_q = self.calculate_log_sum_q(all_teams, c)
        a = self.calculate_a(all_teams)
        team_mu_over_c = team.mu / c

        omega = 0.0
        delta = 0.0
        for q_idx, q_team in enumerate(all_teams):
            if team.rank < q_team.rank:
                continue
            # the team is one of the summed terms so the exponent is never above 0
            prob = math.exp(min(team_mu_over_c - log_sum_q[q_idx], 0.0))
            count = a[q_team.rank]
            delta += prob * (1.0 - prob) / count
            if q_idx == team_idx:
                omega += (1.0 - prob) / count
            else:
                omega -= prob / count

        omega *= team_sigma_squared / c
        delta *= team_sigma_squared / (c * c)
        gamma = team.sigma / c
        delta *= gamma
        return AdjustmentFactors(omega, delta)

    def calculate_c(self, teams: Sequence[TeamResult]) -> float:
        """collective standard deviation of every team in the match, normalizes skill differences"""
        return math.sqrt(sum(t.sigma * t.sigma + self.beta_squared for t in teams))

    @staticmethod
    def calculate_log_sum_q(teams: Sequence[TeamResult], c: float) -> List[float]:
        """for each team q, the log of the sum of exp(mu / c) over teams ranked at or below q"""
        mus_over_c = np.array([t.mu / c for t in teams])
        ranks = np.array([t.rank for t in teams])
        return [float(logsumexp(mus_over_c[ranks >= team_q.rank])) for team_q in teams]

    @staticmethod
    def calculate_a(teams: Sequence[TeamResult]) -> Dict[int, int]:
        """number of teams sharing each rank"""
        return Counter(t.rank for t in teams)
