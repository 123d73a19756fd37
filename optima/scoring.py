"""
Overall score aggregation: five impact records → three headline scores.

Productivity and happiness blend 0-100 scores with ~1.0 multipliers without
renormalizing. The weights are kept exactly so outputs stay comparable with
the dashboard's reference numbers.
"""

from dataclasses import dataclass

import numpy as np

from optima.config import DEFAULT_CONFIG, OptimaConfig
from optima.impacts import DomainImpacts


@dataclass(frozen=True)
class OverallScores:
    health: float
    productivity: float
    happiness: float


def _clamp(value: float, cfg: OptimaConfig) -> float:
    return float(np.clip(value, cfg.bounds.floor, cfg.bounds.ceiling))


def compute_health(impacts: DomainImpacts, cfg: OptimaConfig = DEFAULT_CONFIG) -> float:
    w = cfg.health_weights
    raw = (
        impacts.sleep.health_score * w.sleep
        + impacts.exercise.health_score * w.exercise
        + impacts.nutrition.health_score * w.nutrition
        + impacts.social.mental_health * w.social_mental
    )
    return _clamp(raw, cfg)


def compute_productivity(impacts: DomainImpacts, cfg: OptimaConfig = DEFAULT_CONFIG) -> float:
    w = cfg.productivity_weights
    raw = (
        impacts.deep_work.productivity_score * w.deep_work
        + impacts.sleep.productivity_boost * w.sleep_boost
        + impacts.exercise.mental_clarity * w.mental_clarity
        + impacts.nutrition.energy_level * w.energy_level
    )
    return _clamp(raw, cfg)


def compute_happiness(impacts: DomainImpacts, cfg: OptimaConfig = DEFAULT_CONFIG) -> float:
    w = cfg.happiness_weights
    stress_term = w.stress_base - impacts.social.stress_reduction * w.stress_scale
    raw = (
        impacts.social.happiness_score * w.social
        + impacts.sleep.mood_impact * w.mood
        + impacts.exercise.mental_clarity * w.mental_clarity
        + stress_term * w.stress_weight
    )
    return _clamp(raw, cfg)


def compute_overall_scores(
    impacts: DomainImpacts,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> OverallScores:
    """Compute all three headline scores in one pass."""
    return OverallScores(
        health=compute_health(impacts, cfg),
        productivity=compute_productivity(impacts, cfg),
        happiness=compute_happiness(impacts, cfg),
    )
