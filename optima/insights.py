"""
Dashboard insights: radar series, key metric cards, highlights, streaks,
and the finance snapshot.

Each function is a pure read of the impact records (and, where noted, the
raw input snapshot). No side effects.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from optima.config import DEFAULT_CONFIG, OptimaConfig
from optima.impacts import DomainImpacts
from optima.inputs import LifestyleInputs


@dataclass(frozen=True)
class RadarPoint:
    category: str
    value: float
    full_mark: float = 100.0


@dataclass(frozen=True)
class MetricCard:
    title: str
    value: float
    unit: str
    subtitle: str
    trend: int


@dataclass(frozen=True)
class FinanceSnapshot:
    monthly_surplus: float
    monthly_savings: float
    annual_savings: float
    deep_work_monthly_income: float


# ---------------------------------------------------------------------------
# Radar + highlights
# ---------------------------------------------------------------------------

def radar_series(impacts: DomainImpacts) -> List[RadarPoint]:
    """One 0-100 value per domain, in display order."""
    return [
        RadarPoint("Sleep", impacts.sleep.health_score),
        RadarPoint("Exercise", impacts.exercise.health_score),
        RadarPoint("Nutrition", impacts.nutrition.health_score),
        RadarPoint("Deep Work", impacts.deep_work.productivity_score),
        RadarPoint("Social", impacts.social.happiness_score),
    ]


def top_performer(radar: Sequence[RadarPoint]) -> RadarPoint:
    """Highest-valued category; the earliest wins ties."""
    if not radar:
        raise ValueError("Radar series cannot be empty")
    best = radar[0]
    for point in radar[1:]:
        if point.value > best.value:
            best = point
    return best


def focus_area(radar: Sequence[RadarPoint]) -> RadarPoint:
    """Lowest-valued category; the earliest wins ties."""
    if not radar:
        raise ValueError("Radar series cannot be empty")
    worst = radar[0]
    for point in radar[1:]:
        if point.value < worst.value:
            worst = point
    return worst


def build_insights(
    impacts: DomainImpacts,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> Dict[str, object]:
    """Today's insights: top performer, focus area, and the 30-day outlook."""
    radar = radar_series(impacts)
    best = top_performer(radar)
    worst = focus_area(radar)
    weeks = cfg.metric_trends.outlook_weeks

    return {
        "top_performer": {"category": best.category, "value": best.value},
        "focus_area": {"category": worst.category, "value": worst.value},
        "outlook_30d": {
            "weight_loss": impacts.exercise.weekly_weight_loss * weeks,
            "productivity_gain": impacts.deep_work.skill_growth * weeks,
        },
    }


# ---------------------------------------------------------------------------
# Metric cards
# ---------------------------------------------------------------------------

def key_metrics(
    impacts: DomainImpacts,
    inputs: LifestyleInputs,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> List[MetricCard]:
    """
    The four dashboard cards.

    Trend badges depend on the raw exercise minutes and deep work hours,
    so the input snapshot is needed alongside the impacts.
    """
    t = cfg.metric_trends
    days = cfg.projection.days_per_month

    return [
        MetricCard(
            title="Weight Loss Rate",
            value=impacts.exercise.weekly_weight_loss,
            unit="lbs/wk",
            subtitle="Based on exercise",
            trend=t.weight_up if inputs.exercise_minutes > t.weight_minutes else t.weight_down,
        ),
        MetricCard(
            title="Energy Level",
            value=impacts.exercise.energy_boost * impacts.nutrition.energy_level * 100,
            unit="%",
            subtitle="Physical + Mental",
            trend=t.energy,
        ),
        MetricCard(
            title="Focus Power",
            value=impacts.deep_work.cognitive_reserve * 100,
            unit="%",
            subtitle="Cognitive capacity",
            trend=t.focus_up if inputs.deep_work_hours > t.focus_hours else t.focus_flat,
        ),
        MetricCard(
            title="Income Potential",
            value=impacts.deep_work.income_projection * days,
            unit="$/mo",
            subtitle="From deep work",
            trend=t.income_up if inputs.deep_work_hours > t.income_hours else t.income_base,
        ),
    ]


def realtime_impact(impacts: DomainImpacts) -> Dict[str, float]:
    """Figures shown next to the input sliders."""
    return {
        "productivity_boost_pct": impacts.sleep.productivity_boost * 100,
        "weekly_weight_loss": impacts.exercise.weekly_weight_loss,
        "daily_income": impacts.deep_work.income_projection,
        "stress_level_pct": impacts.social.stress_reduction * 100,
    }


# ---------------------------------------------------------------------------
# Streak
# ---------------------------------------------------------------------------

def streak_message(streak: int, cfg: OptimaConfig = DEFAULT_CONFIG) -> str:
    """Streak is a whole number of days; anything else raises ValueError."""
    if isinstance(streak, bool) or not isinstance(streak, int):
        raise ValueError(f"Streak must be a whole number of days, got {streak!r}")
    if streak < 0:
        raise ValueError(f"Streak cannot be negative, got {streak}")
    for tier in cfg.streak_tiers:
        if streak < tier.below:
            return tier.message
    return cfg.streak_tiers[-1].message


# ---------------------------------------------------------------------------
# Finance
# ---------------------------------------------------------------------------

def finance_snapshot(
    inputs: LifestyleInputs,
    impacts: DomainImpacts,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> FinanceSnapshot:
    monthly_savings = inputs.income * inputs.savings_rate / 100
    return FinanceSnapshot(
        monthly_surplus=inputs.income - inputs.expenses,
        monthly_savings=monthly_savings,
        annual_savings=monthly_savings * 12,
        deep_work_monthly_income=(
            impacts.deep_work.income_projection * cfg.projection.days_per_month
        ),
    )


def calorie_balance(inputs: LifestyleInputs, tdee: int) -> float:
    """Positive → surplus, negative → deficit."""
    return inputs.calories - tdee
