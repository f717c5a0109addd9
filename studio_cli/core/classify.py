"""Workout modality classification."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence, Tuple

from studio_cli.core.constants import DESCRIPTION_ONLY_MODALITIES, MODALITY_RULES
from studio_cli.core.models import ClassSession, WorkoutModality

Rules = Sequence[Tuple[str, Sequence[str]]]


def _matches(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def classify(
    name: str,
    description: str = "",
    rules: Rules = MODALITY_RULES,
) -> WorkoutModality:
    """Infer how a workout is scored from its name and description.

    Rules are checked in order and the first match wins, so an AMRAP that
    also mentions a 1RM still scores by rounds. Anything unmatched is a
    for-time workout.
    """
    name_text = (name or "").lower()
    description_text = (description or "").lower()

    for modality, keywords in rules:
        if _matches(description_text, keywords):
            return WorkoutModality(modality)
        if modality not in DESCRIPTION_ONLY_MODALITIES and _matches(name_text, keywords):
            return WorkoutModality(modality)
    return WorkoutModality.TIME


def classify_session(session: ClassSession, rules: Rules = MODALITY_RULES) -> WorkoutModality:
    return classify(session.name, session.description, rules=rules)


def classification_rules_from_config(config: Dict[str, Any]) -> List[Tuple[str, List[str]]]:
    """Apply per-modality keyword overrides from config; rule order is fixed."""
    configured = config.get("classification", {}).get("rules", {})
    if not isinstance(configured, dict):
        configured = {}

    rules: List[Tuple[str, List[str]]] = []
    for modality, defaults in MODALITY_RULES:
        override = configured.get(modality)
        if isinstance(override, list) and override:
            rules.append((modality, [str(item).lower() for item in override]))
        else:
            rules.append((modality, list(defaults)))
    return rules
