"""Classes and functions for assembling match data for the rating engine"""

import itertools
from typing import Iterator, List, Optional, Sequence, Tuple
import numpy as np
from scipy.stats import rankdata
from bayesrank.core.base import TeamRatingAggregator
from bayesrank.core.types import PlayerResult, Rating, TeamResult
from bayesrank.utils.constants import DEFAULT_MU, DEFAULT_SIGMA, DEFAULT_BETA


def team_result(
    player_ratings: Sequence[Rating],
    rank: int,
    aggregator: TeamRatingAggregator,
    weights: Optional[Sequence[float]] = None,
    ids: Optional[Iterator] = None,
    team_weight: float = 1.0,
) -> TeamResult:
    """
    Builds a TeamResult from raw player ratings, aggregating them into the team rating.

    Parameters:
        player_ratings (Sequence[Rating]): the team's players in order
        rank (int): the team's placement, 1 is best
        aggregator (TeamRatingAggregator): strategy used to compute the team mu and sigma
        weights (Sequence[float], optional): per player contribution, defaults to 1.0 each
        ids (Iterator, optional): source of player ids, e.g. a shared itertools.count so ids stay
                                  unique across the teams of a match. Defaults to 0, 1, 2...
        team_weight (float): weight of the overall team result

    Returns:
        TeamResult
    """
    if weights is None:
        weights = [1.0] * len(player_ratings)
    assert len(weights) == len(player_ratings), 'one weight per player is required'
    if ids is None:
        ids = itertools.count()

    team_rating = aggregator.compute_team_rating(player_ratings)
    players = tuple(
        PlayerResult(rating.mu, rating.sigma, id=next(ids), weight=weight)
        for rating, weight in zip(player_ratings, weights)
    )
    return TeamResult(team_rating.mu, team_rating.sigma, rank=rank, players=players, weight=team_weight)


def generate_team_matches(
    num_matches: int = 100,
    team_sizes: Sequence[int] = (1, 2),
    mu_mean: float = DEFAULT_MU,
    mu_std: float = 5.0,
    sigma_low: float = 1.0,
    sigma_high: float = DEFAULT_SIGMA,
    performance_std: float = DEFAULT_BETA,
    performance_resolution: float = 0.0,
    seed: int = 0,
) -> List[List[Tuple[List[Rating], int]]]:
    """
    Generates random multi-team matches for exercising the rating engine.

    Every player gets a random mu and sigma, each team performs at the sum of its players' mus
    plus gaussian noise, and teams are ranked by performance. With a positive
    performance_resolution, performances are bucketed to that resolution first so nearby teams tie.

    Returns:
        list of matches, each a list of (player_ratings, rank) per team in team_sizes order
    """
    rng = np.random.default_rng(seed=seed)
    num_players = sum(team_sizes)
    team_bounds = np.cumsum((0,) + tuple(team_sizes))

    matches = []
    for _ in range(num_matches):
        mus = rng.normal(loc=mu_mean, scale=mu_std, size=num_players)
        sigmas = rng.uniform(low=sigma_low, high=sigma_high, size=num_players)
        team_mus = np.add.reduceat(mus, team_bounds[:-1])
        performances = rng.normal(loc=team_mus, scale=performance_std * np.sqrt(team_sizes))
        if performance_resolution > 0.0:
            performances = np.floor(performances / performance_resolution)
        # competition ranking: 1 is best and tied teams share the lower rank
        ranks = rankdata(-performances, method='min').astype(np.int64)

        match = []
        for team_idx in range(len(team_sizes)):
            start, end = team_bounds[team_idx], team_bounds[team_idx + 1]
            player_ratings = [Rating(float(mu), float(sigma)) for mu, sigma in zip(mus[start:end], sigmas[start:end])]
            match.append((player_ratings, int(ranks[team_idx])))
        matches.append(match)
    return matches

