"""pre-match competitiveness of two teams"""
import logging
import math
from typing import Optional
import numpy as np
from bayesrank.config import RatingModelConfig
from bayesrank.core.types import Rating
from bayesrank.utils.constants import QUALITY_SIGMA_RANGE, QUALITY_EVEN_MATCH_THRESHOLD
from bayesrank.utils.math_utils import norm_cdf, norm_cdf_vector

logger = logging.getLogger(__name__)


class QualityEvaluator:
    """
    Scores how competitive a match between two team ratings would be, from 0 (one side is a
    near certain winner) to 1 (a coin flip). The score is 1 - 2 * |P(a beats b) - 0.5| under a
    gaussian performance model, symmetric in the two teams.
    """

    def __init__(self, config: Optional[RatingModelConfig] = None):
        config = config or RatingModelConfig()
        self.beta_squared = config.beta_squared

    @classmethod
    def from_beta(cls, beta: float) -> 'QualityEvaluator':
        return cls(RatingModelConfig(beta=beta))

    def evaluate_quality(self, team_a: Rating, team_b: Rating) -> float:
        """
        Parameters:
            team_a (Rating): aggregate rating of the first team
            team_b (Rating): aggregate rating of the second team

        Returns:
            float: match quality in [0, 1]
        """
        rating_diff = team_a.mu - team_b.mu
        abs_diff = math.fabs(rating_diff)
        if abs_diff > QUALITY_SIGMA_RANGE * max(team_a.sigma, team_b.sigma):
            logger.debug('rejected matchup with mu difference %.4g', rating_diff)
            return 0.0
        if abs_diff < QUALITY_EVEN_MATCH_THRESHOLD:
            return 1.0
        combined_dev = math.sqrt(team_a.sigma * team_a.sigma + team_b.sigma * team_b.sigma + self.beta_squared)
        prob = norm_cdf(rating_diff / combined_dev)
        return 1.0 - math.fabs(prob - 0.5) * 2.0

    def evaluate_quality_batch(
        self,
        mus_a: np.ndarray,
        sigmas_a: np.ndarray,
        mus_b: np.ndarray,
        sigmas_b: np.ndarray,
    ) -> np.ndarray:
        """
        Scores many candidate matchups at once, element-wise equivalent to evaluate_quality

        Parameters:
            mus_a, sigmas_a (np.ndarray): aggregate ratings of the first teams
            mus_b, sigmas_b (np.ndarray): aggregate ratings of the second teams, same shape

        Returns:
            np.ndarray: match qualities in [0, 1]
        """
        mus_a = np.asarray(mus_a, dtype=np.float64)
        sigmas_a = np.asarray(sigmas_a, dtype=np.float64)
        mus_b = np.asarray(mus_b, dtype=np.float64)
        sigmas_b = np.asarray(sigmas_b, dtype=np.float64)

        rating_diffs = mus_a - mus_b
        abs_diffs = np.abs(rating_diffs)
        combined_devs = np.sqrt(sigmas_a * sigmas_a + sigmas_b * sigmas_b + self.beta_squared)
        probs = norm_cdf_vector(rating_diffs / combined_devs)
        qualities = 1.0 - np.abs(probs - 0.5) * 2.0

        qualities = np.where(abs_diffs < QUALITY_EVEN_MATCH_THRESHOLD, 1.0, qualities)
        out_of_range_mask = abs_diffs > QUALITY_SIGMA_RANGE * np.maximum(sigmas_a, sigmas_b)
        qualities = np.where(out_of_range_mask, 0.0, qualities)
        return qualities
