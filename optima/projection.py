"""
Projection generator: a fixed 5-point horizon series plus milestone summaries.

Closed-form over the horizon table. Each point is computed independently
from the current scores; nothing is carried from one point to the next.
"""

from dataclasses import asdict, dataclass
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from optima.config import DEFAULT_CONFIG, OptimaConfig
from optima.impacts import DomainImpacts
from optima.scoring import OverallScores


@dataclass(frozen=True)
class ProjectionPoint:
    label: str
    weight: float
    health: float
    productivity: float
    income: float
    happiness: float


@dataclass(frozen=True)
class Milestone:
    title: str
    horizon_days: int
    weight_loss: float | None = None
    health: float | None = None
    skill_growth: float | None = None
    earnings: float | None = None


# ---------------------------------------------------------------------------
# Horizon series
# ---------------------------------------------------------------------------

def generate_projection(
    impacts: DomainImpacts,
    scores: OverallScores,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> Tuple[ProjectionPoint, ...]:
    """
    Project weight, scores, and cumulative income over Now/1mo/3mo/6mo/1yr.

        weight       = max(floor, base − weekly_loss · weeks)
        health       = min(100, health · (1 + growth · weeks))
        productivity = min(100, productivity + skill_growth · weeks)
        happiness    = min(100, happiness + (resilience − 1) · scale · weeks)
        income       = daily_income · days_per_month · months
    """
    p = cfg.projection
    ceiling = cfg.bounds.ceiling
    weeks = np.asarray(p.week_multipliers, dtype=np.float64)
    months = np.asarray(p.month_multipliers, dtype=np.float64)

    weight = np.maximum(
        p.weight_floor,
        p.base_weight - impacts.exercise.weekly_weight_loss * weeks,
    )
    health = np.minimum(
        ceiling,
        scores.health + scores.health * p.health_growth_per_week * weeks,
    )
    productivity = np.minimum(
        ceiling,
        scores.productivity + impacts.deep_work.skill_growth * weeks,
    )
    happiness = np.minimum(
        ceiling,
        scores.happiness
        + (impacts.social.emotional_resilience - 1) * p.resilience_growth_scale * weeks,
    )
    income = impacts.deep_work.income_projection * p.days_per_month * months

    return tuple(
        ProjectionPoint(
            label=label,
            weight=float(weight[i]),
            health=float(health[i]),
            productivity=float(productivity[i]),
            income=float(income[i]),
            happiness=float(happiness[i]),
        )
        for i, label in enumerate(p.labels)
    )


def projection_frame(points: Sequence[ProjectionPoint]) -> pd.DataFrame:
    """Tabular view of the series, indexed by horizon label, for chart consumers."""
    df = pd.DataFrame([asdict(pt) for pt in points])
    return df.set_index("label")


# ---------------------------------------------------------------------------
# Milestones
# ---------------------------------------------------------------------------

def compute_milestones(
    impacts: DomainImpacts,
    scores: OverallScores,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> List[Milestone]:
    """30-day, 90-day, and 1-year summaries shown beside the projection charts."""
    m = cfg.milestones
    loss = impacts.exercise.weekly_weight_loss
    daily_income = impacts.deep_work.income_projection

    return [
        Milestone(
            title="30-Day Milestone",
            horizon_days=m.month_days,
            weight_loss=loss * m.month_weeks,
            health=min(cfg.bounds.ceiling, scores.health * (1 + m.month_health_gain)),
        ),
        Milestone(
            title="90-Day Transformation",
            horizon_days=m.quarter_days,
            skill_growth=impacts.deep_work.skill_growth * m.quarter_skill_months,
            earnings=daily_income * m.quarter_days,
        ),
        Milestone(
            title="1-Year Vision",
            horizon_days=m.year_days,
            weight_loss=loss * m.year_weeks,
            earnings=daily_income * m.year_days,
        ),
    ]
