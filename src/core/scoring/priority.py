"""
Incident score and priority calculation.

The score is a weighted sum of the incident's gravity and type, with a
penalty for severe incidents that have not yet been transmitted to the
Justice de Paix. Priorities are banded from the score.
"""

from collections.abc import Mapping
from typing import Literal

from core.utils.constants import (
    DEFAULT_GRAVITE_WEIGHT,
    DEFAULT_TYPE_WEIGHT,
    POIDS_GRAVITE,
    POIDS_TYPE,
    PRIORITY_THRESHOLD_ELEVE,
    PRIORITY_THRESHOLD_FAIBLE,
    PRIORITY_THRESHOLD_MOYEN,
    SEVERE_GRAVITES,
    UNTRANSMITTED_SEVERE_PENALTY,
)

Priority = Literal["faible", "moyen", "eleve", "critique"]


def calculate_score(
    gravite: str,
    incident_type: str,
    transmis_jp: bool,
    poids_gravite: Mapping[str, int] = POIDS_GRAVITE,
    poids_type: Mapping[str, int] = POIDS_TYPE,
) -> int:
    """Compute the incident score.

    Unknown gravities weigh 1 and unknown types weigh 3. A zero weight in
    a custom table also falls back to the default.

    Example:
        calculate_score("Haute", "Délais", transmis_jp=False)
        → 6 * 2 + 5 + 3 = 20
    """
    gravite_weight = poids_gravite.get(gravite) or DEFAULT_GRAVITE_WEIGHT
    type_weight = poids_type.get(incident_type) or DEFAULT_TYPE_WEIGHT

    score = gravite_weight * 2 + type_weight

    if not transmis_jp and gravite in SEVERE_GRAVITES:
        score += UNTRANSMITTED_SEVERE_PENALTY

    return score


def priority_from_score(score: int) -> Priority:
    """Map a score onto its priority band."""
    if score <= PRIORITY_THRESHOLD_FAIBLE:
        return "faible"
    if score <= PRIORITY_THRESHOLD_MOYEN:
        return "moyen"
    if score <= PRIORITY_THRESHOLD_ELEVE:
        return "eleve"
    return "critique"


def calculate_incident_metrics(
    *,
    gravite: str,
    incident_type: str,
    transmis_jp: bool,
) -> tuple[int, Priority]:
    """Return ``(score, priority)`` for an incident."""
    score = calculate_score(gravite, incident_type, transmis_jp)
    return score, priority_from_score(score)
