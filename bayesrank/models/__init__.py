"""
Models Module
=============

This module contains the rating models of the Weng-Lin Bayesian approximation for ranked team matches.
Each model gives a closed form for the probability that one team outperforms another and turns it into
team level adjustment factors (omega for the mean, delta for the variance).

Included Rating Models:
- Plackett-Luce: Ranks all teams at once, each team competing against the teams placed at or below it.
- Bradley-Terry Full: Compares every pair of teams with a logistic model.
- Thurstone-Mosteller Full: Compares every pair of teams with a gaussian model, using truncated gaussian corrections.

Models are picked by name with get_rating_model so callers can keep the choice in configuration.

"""
from bayesrank.config import RatingModelConfig
from bayesrank.core.base import RatingModel
from bayesrank.models.plackett_luce import PlackettLuce
from bayesrank.models.bradley_terry_full import BradleyTerryFull
from bayesrank.models.thurstone_mosteller_full import ThurstoneMostellerFull


RATING_MODELS = {
    'plackett_luce': PlackettLuce,
    'pl': PlackettLuce,
    'bradley_terry_full': BradleyTerryFull,
    'bt': BradleyTerryFull,
    'thurstone_mosteller_full': ThurstoneMostellerFull,
    'tm': ThurstoneMostellerFull,
}


def get_rating_model(name: str, config: RatingModelConfig = None) -> RatingModel:
    """instantiate a rating model by name or short alias"""
    try:
        model_class = RATING_MODELS[name.lower()]
    except KeyError:
        raise ValueError(f'unknown rating model {name!r}, expected one of {sorted(RATING_MODELS)}') from None
    return model_class(config)
