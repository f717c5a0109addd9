"""Static constants and mappings for the studio CLI."""

from __future__ import annotations

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

LOW_AVAILABILITY_THRESHOLD = 3

# Evaluated in order; the first modality with a matching keyword wins.
MODALITY_RULES = [
    ("rounds-based", ["amrap"]),
    ("load-based", ["strength", "1rm"]),
    ("completion-based", ["emom"]),
]

# Modalities whose keywords only count when found in the description.
DESCRIPTION_ONLY_MODALITIES = {"completion-based"}

RESULT_LABELS = {
    "time-based": "Time",
    "rounds-based": "Rounds + Reps",
    "load-based": "Weight",
    "completion-based": "Completed",
}

SCALE_ALIASES = {
    "scaled": "scaled",
    "standard": "standard",
    "rx": "standard",
    "elevated": "elevated",
    "rxplus": "elevated",
    "rx+": "elevated",
}

SESSION_KIND_LABELS = {
    "crossfit": "CrossFit",
    "opengym": "Open Gym",
}

PLACEHOLDER_WORKOUT = {
    "name": 'CrossFit WOD - "Fran"',
    "details": "21-15-9 reps for time of: Thrusters (95/65 lbs), Pull-ups",
}

PLACEHOLDER_RESULTS = [
    ("Alex Johnson", "8:32", True),
    ("Sarah Miller", "9:15", True),
    ("Mike Davis", "9:48", True),
    ("Emily Chen", "10:22", False),
    ("Chris Wilson", "11:05", True),
]

DEFAULT_ATHLETE = "You"
