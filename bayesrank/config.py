"""configuration shared by the rating models, aggregators and the adjudicator"""
from dataclasses import dataclass, field, replace
from bayesrank.utils.constants import DEFAULT_BETA, DEFAULT_KAPPA, DEFAULT_TAU


@dataclass(frozen=True)
class Balance:
    """
    Settings that make the default team aggregator weigh players on the tails of the skill
    distribution differently. With balance enabled a lower rated player contributes more to
    the team rating than a higher rated teammate.

    Attributes:
        enable (bool): turn balance weighting on
        z (float): number of standard deviations subtracted from mu in the ordinal
        alpha (float): scale of the ordinal
        target (float): shift of the ordinal, applied as target / alpha
    """

    enable: bool = False
    z: float = 3.0
    alpha: float = 1.0
    target: float = 0.0


@dataclass(frozen=True)
class RatingModelConfig:
    """
    Parameters that control the rating models and the per-player update.

    Attributes:
        beta (float): spread of performance outcomes. A higher beta means results are less
                      predictable from skill differences.
        limit_sigma (bool): never let a player's sigma grow over a rating pass
        kappa (float): small positive floor that keeps the posterior variance from becoming
                       too small or negative, must be > 0
        tau (float): uncertainty added to every player before each update, models skill drift
        balance (Balance): balance weighting for the default team aggregator
    """

    beta: float = DEFAULT_BETA
    limit_sigma: bool = False
    kappa: float = DEFAULT_KAPPA
    tau: float = DEFAULT_TAU
    balance: Balance = field(default_factory=Balance)

    def __post_init__(self):
        if not self.kappa > 0.0:
            raise ValueError(f'kappa must be strictly positive, got {self.kappa}')
        if not self.beta > 0.0:
            raise ValueError(f'beta must be strictly positive, got {self.beta}')
        if not self.tau >= 0.0:
            raise ValueError(f'tau must be non-negative, got {self.tau}')

    @property
    def beta_squared(self) -> float:
        return self.beta * self.beta

    @property
    def tau_squared(self) -> float:
        return self.tau * self.tau

    def with_options(self, **changes) -> 'RatingModelConfig':
        """return a copy with some fields changed, re-running validation"""
        return replace(self, **changes)
