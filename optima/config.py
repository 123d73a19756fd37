"""
Centralized configuration for every constant, weight, and lookup table.

Each calculator reads its thresholds from here, so the heuristics can be
tuned (or swapped wholesale) without touching formula code.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


# ---------------------------------------------------------------------------
# Domain impact parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SleepParams:
    """Sleep score: penalty for deviating from optimal hours, scaled by quality."""

    optimal_hours: float = 7.5
    penalty_per_hour: float = 15.0
    max_score: float = 100.0

    # productivity_boost: quality > high → high_boost, > mid → mid_boost, else low
    high_quality: int = 7
    mid_quality: int = 5
    high_boost: float = 1.15
    mid_boost: float = 1.0
    low_boost: float = 0.85

    good_mood: float = 1.2
    base_mood: float = 1.0

    # recovery_rate: hours >= threshold → full recovery
    recovery_hours: float = 7.0
    full_recovery: float = 1.0
    partial_recovery: float = 0.7


@dataclass(frozen=True)
class ExerciseParams:
    """Exercise effects on weight, health, energy, and longevity."""

    days_per_week: int = 7
    session_minutes: float = 30.0
    weight_loss_per_session: float = 0.11   # lbs per 30 min at full intensity
    health_per_session: float = 25.0
    energy_minutes: float = 60.0
    energy_gain: float = 0.3
    clarity_minutes: float = 45.0
    clarity_gain: float = 0.2
    longevity_minutes: float = 30.0
    longevity_bonus: float = 1.15


@dataclass(frozen=True)
class DeepWorkParams:
    """Deep work: productivity, skill growth, and the optimal-duration window."""

    productivity_per_hour: float = 20.0
    skill_per_hour: float = 0.5             # % monthly improvement
    optimal_min_hours: float = 2.0
    optimal_max_hours: float = 4.0
    optimal_advancement: float = 1.3
    reserve_hours: float = 8.0
    reserve_gain: float = 0.4
    income_per_hour: float = 15.0           # $ per day


@dataclass(frozen=True)
class NutritionParams:
    quality_weight: float = 80.0
    hydration_weight: float = 20.0
    hydration_target: float = 8.0

    energy_quality: int = 7
    energy_boost: float = 1.2
    immunity_quality: int = 8
    immunity_boost: float = 1.25

    skin_hydration: int = 6
    skin_good: float = 1.15
    skin_poor: float = 0.9

    digestive_per_point: float = 10.0


@dataclass(frozen=True)
class SocialParams:
    happiness_per_hour: float = 15.0
    stress_hours: float = 2.0
    stress_relieved: float = 0.8
    stress_baseline: float = 1.0
    resilience_hours: float = 5.0
    resilience_gain: float = 0.3
    network_per_hour: float = 2.0
    mental_health_per_hour: float = 20.0


# ---------------------------------------------------------------------------
# Overall score weights
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HealthWeights:
    """Weights for the health headline score (all terms on a 0-100 scale)."""

    sleep: float = 0.30
    exercise: float = 0.30
    nutrition: float = 0.25
    social_mental: float = 0.15

    def __post_init__(self):
        total = self.sleep + self.exercise + self.nutrition + self.social_mental
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"Health weights must sum to 1.0, got {total}")


@dataclass(frozen=True)
class ProductivityWeights:
    """
    Weights for the productivity headline score.

    deep_work applies to a 0-100 score; the others apply to multipliers
    around 1.0, so they read as point contributions.
    """

    deep_work: float = 0.40
    sleep_boost: float = 30.0
    mental_clarity: float = 20.0
    energy_level: float = 10.0


@dataclass(frozen=True)
class HappinessWeights:
    """
    Weights for the happiness headline score.

    stress term = stress_weight * (stress_base - stress_scale * stress_reduction)
    """

    social: float = 0.35
    mood: float = 20.0
    mental_clarity: float = 20.0
    stress_weight: float = 0.25
    stress_base: float = 100.0
    stress_scale: float = 50.0


@dataclass(frozen=True)
class ScoreBounds:
    floor: float = 0.0
    ceiling: float = 100.0


# ---------------------------------------------------------------------------
# Projection horizons
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectionParams:
    """Fixed horizon table: labels, weeks elapsed, and months elapsed."""

    labels: Tuple[str, ...] = ("Now", "1mo", "3mo", "6mo", "1yr")
    week_multipliers: Tuple[int, ...] = (0, 4, 12, 26, 52)
    month_multipliers: Tuple[int, ...] = (0, 1, 3, 6, 12)

    base_weight: float = 160.0              # lbs
    weight_floor: float = 120.0
    health_growth_per_week: float = 0.02    # fraction of current score
    resilience_growth_scale: float = 10.0
    days_per_month: int = 30

    def __post_init__(self):
        n = len(self.labels)
        if len(self.week_multipliers) != n or len(self.month_multipliers) != n:
            raise ValueError(
                "Projection labels and multiplier tables must have equal length, "
                f"got {n}/{len(self.week_multipliers)}/{len(self.month_multipliers)}"
            )


@dataclass(frozen=True)
class MilestoneParams:
    """Horizons for the 30-day / 90-day / 1-year milestone summaries."""

    month_days: int = 30
    month_weeks: int = 4
    month_health_gain: float = 0.08
    quarter_skill_months: int = 12          # skill growth reported over 12 units
    quarter_days: int = 90
    year_weeks: int = 52
    year_days: int = 365


# ---------------------------------------------------------------------------
# TDEE
# ---------------------------------------------------------------------------

ACTIVITY_MULTIPLIERS: Dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS["moderate"]


@dataclass(frozen=True)
class TdeeParams:
    """Mifflin-St Jeor coefficients."""

    weight_coef: float = 10.0
    height_coef: float = 6.25
    age_coef: float = 5.0
    male_constant: float = 5.0
    female_constant: float = -161.0
    activity_multipliers: Dict[str, float] = field(
        default_factory=lambda: dict(ACTIVITY_MULTIPLIERS)
    )
    default_multiplier: float = DEFAULT_ACTIVITY_MULTIPLIER


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StreakTier:
    """Message shown while the streak is below `below` days."""

    below: float
    message: str


DEFAULT_STREAK_TIERS: tuple = (
    StreakTier(below=1, message="Start your journey today!"),
    StreakTier(below=7, message="Building momentum! Keep going!"),
    StreakTier(below=30, message="You're on fire! Don't break the chain!"),
    StreakTier(below=float("inf"), message="Incredible consistency! You're unstoppable!"),
)


@dataclass(frozen=True)
class MetricTrendParams:
    """Trend badges shown on the key metric cards."""

    weight_minutes: float = 30.0
    weight_up: int = 12
    weight_down: int = -5
    energy: int = 8
    focus_hours: float = 2.0
    focus_up: int = 15
    focus_flat: int = 0
    income_hours: float = 3.0
    income_up: int = 20
    income_base: int = 5
    outlook_weeks: int = 4


# ---------------------------------------------------------------------------
# Top-level config aggregate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OptimaConfig:
    """Complete engine configuration. Pass to any stage to override defaults."""

    sleep: SleepParams = field(default_factory=SleepParams)
    exercise: ExerciseParams = field(default_factory=ExerciseParams)
    deep_work: DeepWorkParams = field(default_factory=DeepWorkParams)
    nutrition: NutritionParams = field(default_factory=NutritionParams)
    social: SocialParams = field(default_factory=SocialParams)
    health_weights: HealthWeights = field(default_factory=HealthWeights)
    productivity_weights: ProductivityWeights = field(default_factory=ProductivityWeights)
    happiness_weights: HappinessWeights = field(default_factory=HappinessWeights)
    bounds: ScoreBounds = field(default_factory=ScoreBounds)
    projection: ProjectionParams = field(default_factory=ProjectionParams)
    milestones: MilestoneParams = field(default_factory=MilestoneParams)
    tdee: TdeeParams = field(default_factory=TdeeParams)
    metric_trends: MetricTrendParams = field(default_factory=MetricTrendParams)
    streak_tiers: tuple = DEFAULT_STREAK_TIERS


DEFAULT_CONFIG = OptimaConfig()
