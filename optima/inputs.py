"""
Input snapshot and profile records.

A LifestyleInputs instance is one immutable snapshot of every slider. The
host layer builds a fresh snapshot on each change and hands it to the
pipeline; nothing here is mutated in place.

Out-of-range values are clamped at the boundary by clamp_inputs(). The
calculators themselves never validate.
"""

import logging
import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Dict, Mapping, Tuple, Union

import numpy as np


_logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifestyle snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LifestyleInputs:
    """Every daily slider value. Defaults match the dashboard's initial state."""

    sleep_hours: float = 7.5
    sleep_quality: int = 7
    exercise_minutes: int = 30
    exercise_intensity: int = 6
    deep_work_hours: float = 3.0
    focus_quality: int = 7
    nutrition_quality: int = 7
    hydration: int = 6
    social_hours: float = 2.0
    social_quality: int = 7
    steps: int = 8000
    screen_time: float = 4.0
    protein: float = 120.0
    calories: float = 2200.0
    income: float = 5000.0
    expenses: float = 3500.0
    savings_rate: float = 20.0


# Inclusive [low, high] range per field
INPUT_BOUNDS: Dict[str, Tuple[float, float]] = {
    "sleep_hours": (4, 12),
    "sleep_quality": (1, 10),
    "exercise_minutes": (0, 120),
    "exercise_intensity": (1, 10),
    "deep_work_hours": (0, 8),
    "focus_quality": (1, 10),
    "nutrition_quality": (1, 10),
    "hydration": (0, 12),
    "social_hours": (0, 8),
    "social_quality": (1, 10),
    "steps": (0, 30000),
    "screen_time": (0, 16),
    "protein": (0, 300),
    "calories": (1000, 5000),
    "income": (0, 50000),
    "expenses": (0, 50000),
    "savings_rate": (0, 100),
}

INPUT_FIELDS = tuple(f.name for f in fields(LifestyleInputs))


def clamp_inputs(inputs: LifestyleInputs) -> LifestyleInputs:
    """
    Return a copy of `inputs` with every field clamped to INPUT_BOUNDS.

    Each clamped field is logged at WARNING. Non-numeric values raise
    ValueError.
    """
    changes = {}
    for name in INPUT_FIELDS:
        value = getattr(inputs, name)
        if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
            raise ValueError(f"Input '{name}' must be numeric, got {value!r}")
        if isinstance(value, np.generic):
            value = value.item()
        if isinstance(value, float) and math.isnan(value):
            raise ValueError(f"Input '{name}' must not be NaN")

        # Plain min/max: Python ints beyond int64 must clamp too
        low, high = INPUT_BOUNDS[name]
        clamped = min(max(value, low), high)
        if clamped != value:
            _logger.warning(
                "Clamped input %s=%s to range [%s, %s]", name, value, low, high
            )
            changes[name] = clamped

    if not changes:
        return inputs
    return replace(inputs, **changes)


def _snake_case(key: str) -> str:
    """sleepHours → sleep_hours; already-snake keys pass through."""
    out = []
    for ch in key:
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out).lstrip("_")


def inputs_from_dict(data: Mapping[str, object]) -> LifestyleInputs:
    """
    Build a snapshot from a plain mapping.

    Keys may be snake_case or camelCase (e.g. "sleepHours"). Missing keys
    take their defaults. Unknown keys, or two keys naming the same field
    (e.g. "sleepHours" and "sleep_hours"), raise ValueError.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Inputs must be a mapping, got {type(data).__name__}")

    values = {}
    seen = {}
    unknown = []
    for key, value in data.items():
        name = _snake_case(key)
        if name not in INPUT_FIELDS:
            unknown.append(key)
            continue
        if name in seen:
            raise ValueError(f"Duplicate input field: {seen[name]!r} and {key!r}")
        seen[name] = key
        values[name] = value

    if unknown:
        raise ValueError(f"Unknown input fields: {sorted(unknown)}")

    return LifestyleInputs(**values)


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


@dataclass(frozen=True)
class Profile:
    """Body profile used only by the TDEE calculation. Values are not range-checked."""

    sex: Sex = Sex.MALE
    age: int = 28
    height_cm: float = 175.0
    weight_kg: float = 75.0
    activity_level: Union[ActivityLevel, str] = ActivityLevel.MODERATE


def normalize_key(value: Union[Enum, str]) -> str:
    """'Very Active' / 'VeryActive' / 'very-active' / ActivityLevel.VERY_ACTIVE → 'very_active'."""
    if isinstance(value, Enum):
        value = value.value
    text = str(value).strip()
    text = _snake_case(text) if not text.isupper() else text.lower()
    return text.replace("-", "_").replace(" ", "_").replace("__", "_").lower()


def profile_from_dict(data: Mapping[str, object]) -> Profile:
    """Build a Profile from a plain mapping (camelCase or snake_case keys)."""
    if not isinstance(data, Mapping):
        raise ValueError(f"Profile must be a mapping, got {type(data).__name__}")

    values = {_snake_case(k): v for k, v in data.items()}
    allowed = {f.name for f in fields(Profile)}
    unknown = set(values) - allowed
    if unknown:
        raise ValueError(f"Unknown profile fields: {sorted(unknown)}")

    if "sex" in values:
        try:
            values["sex"] = Sex(normalize_key(values["sex"]))
        except ValueError:
            raise ValueError(f"Unknown sex: {values['sex']!r}") from None

    # Unrecognized activity levels are kept as-is; TDEE falls back to moderate.
    if "activity_level" in values:
        key = normalize_key(values["activity_level"])
        if key in {level.value for level in ActivityLevel}:
            values["activity_level"] = ActivityLevel(key)

    return Profile(**values)
