"""
Total Daily Energy Expenditure via Mifflin-St Jeor.

No bounds checking: zero or negative profile values flow straight into the
formula.
"""

import logging
import math
from enum import Enum
from typing import Union

from optima.config import DEFAULT_CONFIG, OptimaConfig
from optima.inputs import Profile, Sex, normalize_key


_logger = logging.getLogger(__name__)


def calculate_bmr(profile: Profile, cfg: OptimaConfig = DEFAULT_CONFIG) -> float:
    """BMR = 10·kg + 6.25·cm − 5·age + s, with s = +5 (male) or −161 (female)."""
    t = cfg.tdee
    sex = profile.sex if isinstance(profile.sex, Sex) else Sex(normalize_key(profile.sex))
    constant = t.male_constant if sex is Sex.MALE else t.female_constant
    return (
        t.weight_coef * profile.weight_kg
        + t.height_coef * profile.height_cm
        - t.age_coef * profile.age
        + constant
    )


def activity_multiplier(
    level: Union[Enum, str, None],
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> float:
    """Look up the activity multiplier; unknown keys fall back to moderate (1.55)."""
    t = cfg.tdee
    if level is None:
        return t.default_multiplier

    key = normalize_key(level)
    if key not in t.activity_multipliers:
        _logger.debug("Unknown activity level %r, using %.3f", level, t.default_multiplier)
        return t.default_multiplier
    return t.activity_multipliers[key]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_tdee(
    profile: Profile,
    activity_level: Union[Enum, str, None] = None,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> int:
    """
    TDEE = round(BMR × activity multiplier).

    `activity_level` overrides the profile's own level when given.
    """
    level = activity_level if activity_level is not None else profile.activity_level
    return _round_half_up(calculate_bmr(profile, cfg) * activity_multiplier(level, cfg))
