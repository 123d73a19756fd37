"""
OPTIMA v1.0 — Deterministic Lifestyle Optimizer Engine

Turns one snapshot of daily habit sliders (sleep, exercise, deep work,
nutrition, social time, finances) into per-domain impact metrics, three
headline scores, and a fixed multi-horizon projection.

Architecture:
    config      — All constants, weights, and lookup tables (single source of truth)
    inputs      — Immutable input snapshot, profile, boundary clamping
    impacts     — Per-domain impact calculators (sleep, exercise, deep work, nutrition, social)
    tdee        — BMR / TDEE (Mifflin-St Jeor)
    scoring     — Health / Productivity / Happiness aggregation
    projection  — Now/1mo/3mo/6mo/1yr projection and milestones
    insights    — Radar series, metric cards, highlights, streak, finances
    pipeline    — Orchestration: clamp → impacts → scores → projection → insights → report

Public API:
    evaluate(inputs)         → engine mode
    evaluate_data(data)      → UI / backend mode
    analyze(filepath)        → CLI mode
    compare_scenarios(list)  → scenario comparison DataFrame
    generate_report(result)  → formatted report
"""

from optima.inputs import ActivityLevel, LifestyleInputs, Profile, Sex
from optima.pipeline import (
    analyze,
    compare_scenarios,
    evaluate,
    evaluate_data,
    generate_report,
)
from optima.tdee import calculate_tdee

__version__ = "1.0.0"

__all__ = [
    "ActivityLevel",
    "LifestyleInputs",
    "Profile",
    "Sex",
    "analyze",
    "calculate_tdee",
    "compare_scenarios",
    "evaluate",
    "evaluate_data",
    "generate_report",
]
