import pytest

from core.scoring.priority import (
    calculate_incident_metrics,
    calculate_score,
    priority_from_score,
)


class TestCalculateScore:
    @pytest.mark.parametrize(
        "gravite,incident_type,transmis_jp,expected",
        [
            ("Faible", "Autre", False, 5),
            ("Moyenne", "Communication", False, 11),
            ("Haute", "Délais", False, 20),
            ("Haute", "Délais", True, 17),
            ("Critique", "Représentation", False, 31),
            ("Critique", "Représentation", True, 28),
        ],
    )
    def test_weighted_sum(self, gravite, incident_type, transmis_jp, expected) -> None:
        assert calculate_score(gravite, incident_type, transmis_jp) == expected

    def test_unknown_labels_use_default_weights(self) -> None:
        assert calculate_score("Modéré", "Inconnu", False) == 1 * 2 + 3

    def test_custom_weight_tables(self) -> None:
        score = calculate_score(
            "Haute",
            "Délais",
            True,
            poids_gravite={"Haute": 2},
            poids_type={"Délais": 1},
        )

        assert score == 5


class TestPriorityFromScore:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, "faible"),
            (8, "faible"),
            (9, "moyen"),
            (15, "moyen"),
            (16, "eleve"),
            (22, "eleve"),
            (23, "critique"),
        ],
    )
    def test_bands(self, score, expected) -> None:
        assert priority_from_score(score) == expected

    def test_metrics_pair(self) -> None:
        assert calculate_incident_metrics(
            gravite="Haute",
            incident_type="Délais",
            transmis_jp=False,
        ) == (20, "eleve")
