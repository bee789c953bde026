"""
team rating aggregation
"""
import math
import pytest
from bayesrank.aggregators import (
    DefaultTeamRatingAggregator,
    WeightedTeamRatingAggregator,
    get_team_rating_aggregator,
    ordinal,
)
from bayesrank.config import Balance, RatingModelConfig
from bayesrank.core.types import Rating

TEAM_A = [Rating(19.04, 7.53), Rating(22.01, 6.18)]
TEAM_B = [Rating(24.03, 8.901), Rating(19.7, 5.07)]


def test_default_aggregation():
    team = DefaultTeamRatingAggregator().compute_team_rating(TEAM_A)
    assert team.mu == pytest.approx(41.05, rel=1e-12)
    assert team.sigma == pytest.approx(9.7420320718466584, rel=1e-12)


def test_default_aggregation_single_player():
    config = RatingModelConfig()
    team = DefaultTeamRatingAggregator(config).compute_team_rating([Rating(25.0, 8.0)])
    assert team.mu == 25.0
    assert team.sigma == pytest.approx(math.sqrt(64.0 + config.tau_squared))


def test_balanced_aggregation():
    aggregator = DefaultTeamRatingAggregator(RatingModelConfig(balance=Balance(enable=True)))
    team_a = aggregator.compute_team_rating(TEAM_A)
    team_b = aggregator.compute_team_rating(TEAM_B)
    assert team_a.mu == pytest.approx(79.567852511454987, rel=1e-12)
    assert team_a.sigma == pytest.approx(14.478499825440402, rel=1e-12)
    assert team_b.mu == pytest.approx(82.06475646422129, rel=1e-12)
    assert team_b.sigma == pytest.approx(15.210153902485704, rel=1e-12)


def test_balanced_best_player_has_unit_weight():
    aggregator = DefaultTeamRatingAggregator(RatingModelConfig(balance=Balance(enable=True)))
    # a single player is always the best on their team
    team = aggregator.compute_team_rating([Rating(30.0, 4.0)])
    assert team.mu == 30.0
    assert team == DefaultTeamRatingAggregator().compute_team_rating([Rating(30.0, 4.0)])


def test_weighted_aggregation():
    team = WeightedTeamRatingAggregator().compute_team_rating(TEAM_A)
    assert team.mu == pytest.approx(20.814642393087812, rel=1e-12)
    assert team.sigma == pytest.approx(4.7771147813575725, rel=1e-12)


def test_weighted_aggregation_ignores_tau():
    config = RatingModelConfig(tau=5.0, balance=Balance(enable=True))
    assert WeightedTeamRatingAggregator(config).compute_team_rating(TEAM_A) == (
        WeightedTeamRatingAggregator().compute_team_rating(TEAM_A)
    )


def test_ordinal():
    rating = Rating(25.0, 25.0 / 3.0)
    assert ordinal(rating) == pytest.approx(0.0, abs=1e-12)
    assert ordinal(rating, z=2.0) == pytest.approx(25.0 / 3.0)
    assert ordinal(rating, z=0.0, alpha=2.0, target=10.0) == pytest.approx(55.0)


def test_get_team_rating_aggregator():
    config = RatingModelConfig(tau=1.0)
    aggregator = get_team_rating_aggregator('Default', config)
    assert isinstance(aggregator, DefaultTeamRatingAggregator)
    assert aggregator.tau_squared == 1.0
    assert isinstance(get_team_rating_aggregator('weighted'), WeightedTeamRatingAggregator)
    with pytest.raises(ValueError):
        get_team_rating_aggregator('median')


def test_balanced_negative_ordinals_give_nan_sigma():
    config = RatingModelConfig(balance=Balance(enable=True))
    aggregator = DefaultTeamRatingAggregator(config)
    # ordinals are -1 and -14, so the weaker player's weight is strongly negative
    team = aggregator.compute_team_rating([Rating(20.0, 7.0), Rating(10.0, 8.0)])
    weight = 1.0 + (-1.0 + 14.0) / (-1.0 + config.kappa)
    assert team.mu == pytest.approx(20.0 + 10.0 * weight, rel=1e-12)
    assert math.isnan(team.sigma)


def test_balanced_negative_ordinals_with_positive_variance():
    config = RatingModelConfig(balance=Balance(enable=True))
    aggregator = DefaultTeamRatingAggregator(config)
    # ordinals are -1 and -2, the weaker weight is barely negative
    team = aggregator.compute_team_rating([Rating(20.0, 7.0), Rating(19.0, 7.0)])
    weight = 1.0 + (-1.0 + 2.0) / (-1.0 + config.kappa)
    assert team.mu == pytest.approx(20.0 + 19.0 * weight, rel=1e-12)
    assert team.sigma == pytest.approx(math.sqrt((49.0 + config.tau_squared) * (1.0 + weight)), rel=1e-12)


def test_balanced_zero_denominator_gives_nan():
    config = RatingModelConfig(balance=Balance(enable=True, z=0.0, target=-1e-4))
    aggregator = DefaultTeamRatingAggregator(config)
    # the best ordinal is exactly -kappa
    team = aggregator.compute_team_rating([Rating(0.0, 5.0), Rating(-3.0, 4.0)])
    assert math.isnan(team.mu)
    assert math.isnan(team.sigma)
