"""
Domain impact calculators: one pure function per lifestyle domain.

Each takes the domain's two slider values and returns a fixed-shape record
of derived metrics. No cross-domain coupling happens here; that is the
aggregator's job.
"""

from dataclasses import dataclass

from optima.config import DEFAULT_CONFIG, OptimaConfig
from optima.inputs import LifestyleInputs


# ---------------------------------------------------------------------------
# Impact records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SleepImpact:
    health_score: float
    productivity_boost: float
    mood_impact: float
    recovery_rate: float


@dataclass(frozen=True)
class ExerciseImpact:
    weekly_weight_loss: float       # lbs per week
    health_score: float
    energy_boost: float
    mental_clarity: float
    longevity_bonus: float


@dataclass(frozen=True)
class DeepWorkImpact:
    productivity_score: float
    skill_growth: float             # % monthly improvement
    career_advancement: float
    cognitive_reserve: float
    income_projection: float        # $ per day


@dataclass(frozen=True)
class NutritionImpact:
    health_score: float
    energy_level: float
    immunity_boost: float
    skin_health: float
    digestive_health: float


@dataclass(frozen=True)
class SocialImpact:
    happiness_score: float
    stress_reduction: float
    emotional_resilience: float
    network_growth: float
    mental_health: float


@dataclass(frozen=True)
class DomainImpacts:
    """All five impact records for one input snapshot."""

    sleep: SleepImpact
    exercise: ExerciseImpact
    deep_work: DeepWorkImpact
    nutrition: NutritionImpact
    social: SocialImpact


# ---------------------------------------------------------------------------
# Calculators
# ---------------------------------------------------------------------------

def calculate_sleep_impact(
    hours: float,
    quality: int,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> SleepImpact:
    """Peak score at optimal hours, linear penalty either side, scaled by quality."""
    p = cfg.sleep
    sleep_score = max(0.0, p.max_score - abs(hours - p.optimal_hours) * p.penalty_per_hour)
    quality_multiplier = quality / 10

    if quality > p.high_quality:
        boost = p.high_boost
    elif quality > p.mid_quality:
        boost = p.mid_boost
    else:
        boost = p.low_boost

    return SleepImpact(
        health_score=sleep_score * quality_multiplier,
        productivity_boost=boost,
        mood_impact=p.good_mood if quality > p.high_quality else p.base_mood,
        recovery_rate=p.full_recovery if hours >= p.recovery_hours else p.partial_recovery,
    )


def calculate_exercise_impact(
    minutes: int,
    intensity: int,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> ExerciseImpact:
    p = cfg.exercise
    weekly_minutes = minutes * p.days_per_week
    intensity_multiplier = intensity / 10
    sessions = minutes / p.session_minutes

    return ExerciseImpact(
        weekly_weight_loss=(
            (weekly_minutes / p.session_minutes)
            * p.weight_loss_per_session
            * intensity_multiplier
        ),
        health_score=min(100.0, sessions * p.health_per_session * intensity_multiplier),
        energy_boost=1 + (minutes / p.energy_minutes) * p.energy_gain * intensity_multiplier,
        mental_clarity=1 + (minutes / p.clarity_minutes) * p.clarity_gain,
        longevity_bonus=p.longevity_bonus if minutes >= p.longevity_minutes else 1.0,
    )


def calculate_deep_work_impact(
    hours: float,
    focus_quality: int,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> DeepWorkImpact:
    """
    Deep work output.

    career_advancement rewards the optimal-duration window, inclusive on
    both ends (2h and 4h both qualify).
    """
    p = cfg.deep_work
    focus_multiplier = focus_quality / 10
    optimal = p.optimal_min_hours <= hours <= p.optimal_max_hours

    return DeepWorkImpact(
        productivity_score=min(100.0, hours * p.productivity_per_hour * focus_multiplier),
        skill_growth=hours * p.skill_per_hour * focus_multiplier,
        career_advancement=p.optimal_advancement if optimal else 1.0,
        cognitive_reserve=1 + (hours / p.reserve_hours) * p.reserve_gain,
        income_projection=hours * p.income_per_hour * focus_multiplier,
    )


def calculate_nutrition_impact(
    quality: int,
    hydration: int,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> NutritionImpact:
    p = cfg.nutrition
    return NutritionImpact(
        health_score=(
            (quality / 10) * p.quality_weight
            + (hydration / p.hydration_target) * p.hydration_weight
        ),
        energy_level=p.energy_boost if quality > p.energy_quality else 1.0,
        immunity_boost=p.immunity_boost if quality > p.immunity_quality else 1.0,
        skin_health=p.skin_good if hydration >= p.skin_hydration else p.skin_poor,
        digestive_health=quality * p.digestive_per_point,
    )


def calculate_social_impact(
    hours: float,
    quality: int,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> SocialImpact:
    p = cfg.social
    quality_multiplier = quality / 10
    relieved = hours >= p.stress_hours

    return SocialImpact(
        happiness_score=min(100.0, hours * p.happiness_per_hour * quality_multiplier),
        stress_reduction=p.stress_relieved if relieved else p.stress_baseline,
        emotional_resilience=(
            1 + (hours / p.resilience_hours) * p.resilience_gain * quality_multiplier
        ),
        network_growth=hours * p.network_per_hour * quality_multiplier,
        mental_health=min(100.0, hours * p.mental_health_per_hour * quality_multiplier),
    )


def calculate_domain_impacts(
    inputs: LifestyleInputs,
    cfg: OptimaConfig = DEFAULT_CONFIG,
) -> DomainImpacts:
    """Run all five calculators against one snapshot."""
    return DomainImpacts(
        sleep=calculate_sleep_impact(inputs.sleep_hours, inputs.sleep_quality, cfg),
        exercise=calculate_exercise_impact(
            inputs.exercise_minutes, inputs.exercise_intensity, cfg
        ),
        deep_work=calculate_deep_work_impact(
            inputs.deep_work_hours, inputs.focus_quality, cfg
        ),
        nutrition=calculate_nutrition_impact(
            inputs.nutrition_quality, inputs.hydration, cfg
        ),
        social=calculate_social_impact(inputs.social_hours, inputs.social_quality, cfg),
    )
