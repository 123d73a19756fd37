"""
Pipeline orchestration: clamp → impacts → scores → projection → insights → report.

This is the only module with I/O (JSON loading, report formatting).
All scoring logic is delegated to impacts, scoring, projection, insights, tdee.

Entry points:
    evaluate(inputs)         → engine mode (immutable snapshot in, plain dict out)
    evaluate_data(data)      → UI / backend mode (plain mapping in)
    analyze(filepath)        → CLI mode
    compare_scenarios(list)  → side-by-side DataFrame of several snapshots
"""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Iterable, Mapping, Union

import pandas as pd

from optima.config import OptimaConfig
from optima.impacts import calculate_domain_impacts
from optima.inputs import (
    LifestyleInputs,
    Profile,
    clamp_inputs,
    inputs_from_dict,
    profile_from_dict,
)
from optima.insights import (
    build_insights,
    calorie_balance,
    finance_snapshot,
    key_metrics,
    radar_series,
    realtime_impact,
    streak_message,
)
from optima.projection import compute_milestones, generate_projection
from optima.scoring import compute_overall_scores
from optima.tdee import calculate_tdee


_logger = logging.getLogger(__name__)

PRECISION = 3


def _round(value):
    """Round floats (recursively through dicts/lists) for output."""
    if isinstance(value, float):
        return round(value, PRECISION)
    if isinstance(value, dict):
        return {k: _round(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_round(v) for v in value]
    return value


def _record(obj) -> Dict:
    return _round(asdict(obj))


# ---------------------------------------------------------------------------
# Data loading (CLI mode only)
# ---------------------------------------------------------------------------

def load_inputs(filepath: Union[str, Path]) -> Dict:
    """Load an input document (a JSON object) from disk."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if not data:
        raise ValueError("Input file is empty")
    if not isinstance(data, dict):
        raise ValueError(f"Input file must contain a JSON object, got {type(data).__name__}")

    return data


def _split_document(data: Mapping[str, object]):
    """Separate the slider values from the optional profile/streak keys."""
    values = dict(data)
    profile_data = values.pop("profile", None)
    streak = values.pop("streak", 0)
    values.pop("name", None)

    if isinstance(streak, bool) or not isinstance(streak, int):
        raise ValueError(f"Streak must be a whole number of days, got {streak!r}")

    profile = profile_from_dict(profile_data) if profile_data is not None else None
    return inputs_from_dict(values), profile, streak


# ---------------------------------------------------------------------------
# Core evaluation (PURE FUNCTION — NO FILE I/O)
# ---------------------------------------------------------------------------

def _evaluate(
    inputs: LifestyleInputs,
    profile: Profile | None,
    streak: int,
    cfg: OptimaConfig,
) -> Dict:
    # Stage 1: Boundary
    inputs = clamp_inputs(inputs)

    # Stage 2: Domain impacts
    impacts = calculate_domain_impacts(inputs, cfg)

    # Stage 3: Headline scores
    scores = compute_overall_scores(impacts, cfg)

    # Stage 4: Projection + milestones
    projection = generate_projection(impacts, scores, cfg)
    milestones = compute_milestones(impacts, scores, cfg)

    # Stage 5: Insights
    radar = radar_series(impacts)
    metrics = key_metrics(impacts, inputs, cfg)
    finance = finance_snapshot(inputs, impacts, cfg)

    # Stage 6: Energy balance (profile only)
    tdee = None
    balance = None
    if profile is not None:
        tdee = calculate_tdee(profile, cfg=cfg)
        balance = calorie_balance(inputs, tdee)

    _logger.debug(
        "Evaluated snapshot: health=%.1f productivity=%.1f happiness=%.1f",
        scores.health, scores.productivity, scores.happiness,
    )

    return {
        "inputs": asdict(inputs),
        "impacts": _record(impacts),
        "scores": _record(scores),
        "projection": [_record(pt) for pt in projection],
        "milestones": [_record(m) for m in milestones],
        "radar": [_record(pt) for pt in radar],
        "metrics": [_record(card) for card in metrics],
        "realtime": _round(realtime_impact(impacts)),
        "insights": _round(build_insights(impacts, cfg)),
        "finance": _record(finance),
        "streak": {"days": streak, "message": streak_message(streak, cfg)},
        "tdee": tdee,
        "calorie_balance": _round(balance),
    }


# ---------------------------------------------------------------------------
# Public Entry Points
# ---------------------------------------------------------------------------

def evaluate(
    inputs: LifestyleInputs,
    profile: Profile | None = None,
    cfg: OptimaConfig | None = None,
    streak: int = 0,
) -> Dict:
    """
    Engine entry point.

    Clamps the snapshot to its documented ranges, then runs every stage.
    """
    if cfg is None:
        cfg = OptimaConfig()
    return _evaluate(inputs, profile, streak, cfg)


def evaluate_data(
    data: Mapping[str, object],
    cfg: OptimaConfig | None = None,
) -> Dict:
    """
    Backend / UI integration entry point.

    Accepts a plain mapping of slider values (snake_case or camelCase),
    plus optional "profile" and "streak" keys.
    """
    if cfg is None:
        cfg = OptimaConfig()

    if data is None:
        raise ValueError("Input data cannot be empty")
    if not isinstance(data, Mapping):
        raise ValueError(f"Input data must be a mapping, got {type(data).__name__}")

    inputs, profile, streak = _split_document(data)
    return _evaluate(inputs, profile, streak, cfg)


def analyze(
    filepath: Union[str, Path],
    cfg: OptimaConfig | None = None,
) -> Dict:
    """
    CLI-compatible entry point.
    Reads a JSON file and runs the evaluation.
    """
    return evaluate_data(load_inputs(filepath), cfg)


def compare_scenarios(
    snapshots: Iterable[Union[LifestyleInputs, Mapping[str, object]]],
    cfg: OptimaConfig | None = None,
) -> pd.DataFrame:
    """
    Evaluate several snapshots side by side.

    One row per snapshot with the headline scores and the one-year point of
    the projection. Mappings may carry a "name" key; unnamed rows are
    labelled "scenario_<n>".
    """
    if cfg is None:
        cfg = OptimaConfig()

    rows = []
    for i, snap in enumerate(snapshots):
        if isinstance(snap, LifestyleInputs):
            name = f"scenario_{i + 1}"
            result = _evaluate(snap, None, 0, cfg)
        else:
            name = snap.get("name") or f"scenario_{i + 1}"
            result = evaluate_data(snap, cfg)

        horizon = result["projection"][-1]
        rows.append({
            "scenario": name,
            "health": result["scores"]["health"],
            "productivity": result["scores"]["productivity"],
            "happiness": result["scores"]["happiness"],
            f"weight_{horizon['label']}": horizon["weight"],
            f"income_{horizon['label']}": horizon["income"],
        })

    if not rows:
        raise ValueError("At least one scenario is required")

    df = pd.DataFrame(rows).set_index("scenario")
    df["overall"] = df[["health", "productivity", "happiness"]].mean(axis=1).round(PRECISION)
    return df


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------

def generate_report(result: Dict) -> str:
    """Format the evaluation result as a human-readable text report."""
    scores = result["scores"]
    insights = result["insights"]

    lines = [
        "OPTIMA LIFESTYLE REPORT",
        "=" * 58,
        "",
        f"  Health              : {scores['health']:.1f}",
        f"  Productivity        : {scores['productivity']:.1f}",
        f"  Happiness           : {scores['happiness']:.1f}",
        f"  Streak              : {result['streak']['days']}d ({result['streak']['message']})",
    ]

    if result["tdee"] is not None:
        lines.append(f"  TDEE                : {result['tdee']} kcal")
        lines.append(f"  Calorie Balance     : {result['calorie_balance']:+.0f} kcal")

    lines.append("")
    lines.append("  Domain Radar:")
    for point in result["radar"]:
        lines.append(f"    {point['category']:15s} : {point['value']:6.1f} / {point['full_mark']:.0f}")

    lines.append("")
    lines.append("  Key Metrics:")
    for card in result["metrics"]:
        lines.append(
            f"    {card['title']:17s} : {card['value']:9.1f} {card['unit']:7s} (trend {card['trend']:+d}%)"
        )

    lines.append("")
    lines.append("  Projection:")
    lines.append(
        f"    {'Horizon':7s} {'Weight':>8s} {'Health':>8s} {'Prod.':>8s} {'Happy':>8s} {'Income':>10s}"
    )
    for pt in result["projection"]:
        lines.append(
            f"    {pt['label']:7s} {pt['weight']:8.1f} {pt['health']:8.1f} "
            f"{pt['productivity']:8.1f} {pt['happiness']:8.1f} {pt['income']:10.0f}"
        )

    lines.append("")
    lines.append("  Insights:")
    top = insights["top_performer"]
    low = insights["focus_area"]
    outlook = insights["outlook_30d"]
    lines.append(f"    - Top performer: {top['category']} at {top['value']:.0f}%")
    lines.append(f"    - Focus area: {low['category']} at {low['value']:.0f}%")
    lines.append(
        f"    - 30-day outlook: -{outlook['weight_loss']:.1f} lbs, "
        f"+{outlook['productivity_gain']:.0f}% productivity"
    )

    lines.append("")
    lines.append("  Milestones:")
    for m in result["milestones"]:
        parts = []
        if m["weight_loss"] is not None:
            parts.append(f"-{m['weight_loss']:.1f} lbs")
        if m["health"] is not None:
            parts.append(f"health {m['health']:.0f}%")
        if m["skill_growth"] is not None:
            parts.append(f"+{m['skill_growth']:.0f}% skill")
        if m["earnings"] is not None:
            parts.append(f"+${m['earnings']:.0f}")
        lines.append(f"    {m['title']:22s} : {', '.join(parts)}")

    finance = result["finance"]
    lines.append("")
    lines.append("  Finances:")
    lines.append(f"    Monthly Surplus     : ${finance['monthly_surplus']:.0f}")
    lines.append(f"    Monthly Savings     : ${finance['monthly_savings']:.0f}")
    lines.append(f"    Annual Savings      : ${finance['annual_savings']:.0f}")

    lines.append("")
    lines.append("=" * 58)
    return "\n".join(lines)
