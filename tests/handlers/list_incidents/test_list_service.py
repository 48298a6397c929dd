from decimal import Decimal

import pytest

from core.models.errors import FilterError
from handlers.list_incidents.service import ListService


def list_kwargs(**overrides):
    kwargs = {
        "user_id": "john",
        "statut": None,
        "institution": None,
        "search": None,
        "offset": 0,
        "limit": 20,
        "sort_by": None,
        "sort_order": None,
    }
    kwargs.update(overrides)
    return kwargs


class TestListService:
    def test_passes_bounds_and_status_to_repository(self, in_memory_incidents) -> None:
        service = ListService(in_memory_incidents, batch_size=50, max_rows=300)

        service.list_incidents(**list_kwargs(statut="Résolu"))

        assert in_memory_incidents.list_calls == [
            {"user_id": "john", "batch_size": 50, "max_rows": 301, "statut": "Résolu"}
        ]

    def test_bounds_default_from_environment(self, monkeypatch, in_memory_incidents) -> None:
        monkeypatch.setenv("INCIDENT_FETCH_BATCH_SIZE", "25")
        monkeypatch.setenv("INCIDENT_FETCH_MAX_ROWS", "75")

        service = ListService(in_memory_incidents)

        assert service.batch_size == 25
        assert service.max_rows == 75

    def test_default_sort_is_newest_first(self, in_memory_incidents) -> None:
        listing = ListService(in_memory_incidents, batch_size=10, max_rows=10).list_incidents(
            **list_kwargs()
        )

        assert [item["incident_id"] for item in listing.items] == ["inc_0003", "inc_0002", "inc_0001"]
        assert listing.total_count == 3
        assert listing.has_more is False

    def test_sort_by_incident_date(self, in_memory_incidents) -> None:
        listing = ListService(in_memory_incidents, batch_size=10, max_rows=10).list_incidents(
            **list_kwargs(sort_by="date_incident", sort_order="asc")
        )

        assert [item["date_incident"] for item in listing.items] == [
            "2024-01-02",
            "2024-01-03",
            "2024-01-05",
        ]

    def test_score_sorts_numerically(self, incident_factory, incident_repository_factory) -> None:
        repository = incident_repository_factory(
            [
                incident_factory(1, score=Decimal("9")),
                incident_factory(2, score=Decimal("28")),
                incident_factory(3, score=Decimal("11")),
            ]
        )

        listing = ListService(repository, batch_size=10, max_rows=10).list_incidents(
            **list_kwargs(sort_by="score", sort_order="desc")
        )

        assert [int(item["score"]) for item in listing.items] == [28, 11, 9]

    def test_filters_combine(self, in_memory_incidents) -> None:
        listing = ListService(in_memory_incidents, batch_size=10, max_rows=10).list_incidents(
            **list_kwargs(statut="Ouvert", institution="SCTP", search="délai")
        )

        assert [item["incident_id"] for item in listing.items] == ["inc_0003"]

    def test_capped_listing(self, in_memory_incidents) -> None:
        listing = ListService(in_memory_incidents, batch_size=1, max_rows=2).list_incidents(
            **list_kwargs()
        )

        assert listing.loaded_count == 2
        assert listing.capped is True

    def test_invalid_bounds_load_nothing(self, in_memory_incidents) -> None:
        listing = ListService(in_memory_incidents, batch_size=10, max_rows=0).list_incidents(
            **list_kwargs()
        )

        assert listing.items == []
        assert listing.capped is False

    def test_invalid_sort_field(self, in_memory_incidents) -> None:
        with pytest.raises(FilterError):
            ListService(in_memory_incidents, batch_size=10, max_rows=10).list_incidents(
                **list_kwargs(sort_by="titre")
            )

    def test_invalid_pagination(self, in_memory_incidents) -> None:
        with pytest.raises(ValueError):
            ListService(in_memory_incidents, batch_size=10, max_rows=10).list_incidents(
                **list_kwargs(limit=0)
            )

    def test_exactly_max_rows_is_not_capped(self, in_memory_incidents) -> None:
        listing = ListService(in_memory_incidents, batch_size=2, max_rows=3).list_incidents(
            **list_kwargs()
        )

        assert listing.loaded_count == 3
        assert listing.capped is False
        assert in_memory_incidents.list_calls[0]["max_rows"] == 4

    def test_overflowing_load_is_trimmed_to_max_rows(self, in_memory_incidents) -> None:
        listing = ListService(in_memory_incidents, batch_size=2, max_rows=2).list_incidents(
            **list_kwargs(sort_by="created_at", sort_order="asc")
        )

        # The two newest incidents survive the cap
        assert [item["incident_id"] for item in listing.items] == ["inc_0002", "inc_0003"]
        assert listing.total_count == 2

    def test_type_gravity_and_date_filters(self, in_memory_incidents) -> None:
        service = ListService(in_memory_incidents, batch_size=10, max_rows=10)

        by_type = service.list_incidents(**list_kwargs(incident_type="Communication"))
        by_gravity = service.list_incidents(**list_kwargs(gravite="Haute"))
        by_dates = service.list_incidents(
            **list_kwargs(date_debut="2024-01-03", date_fin="2024-01-05")
        )

        assert [item["incident_id"] for item in by_type.items] == ["inc_0002"]
        assert [item["incident_id"] for item in by_gravity.items] == ["inc_0001"]
        assert [item["incident_id"] for item in by_dates.items] == ["inc_0003", "inc_0001"]

    def test_inverted_date_range(self, in_memory_incidents) -> None:
        with pytest.raises(FilterError, match="Invalid date range"):
            ListService(in_memory_incidents, batch_size=10, max_rows=10).list_incidents(
                **list_kwargs(date_debut="2024-02-01", date_fin="2024-01-01")
            )

        assert in_memory_incidents.list_calls == []
