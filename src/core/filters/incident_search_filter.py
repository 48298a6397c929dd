"""Free-text search over incidents."""

from typing import Any

SEARCH_FIELDS: tuple[str, ...] = ("titre", "faits", "dysfonctionnement")


class IncidentSearchFilter:
    """Case-insensitive substring search across incident text fields.

    An incident matches when any of the searched fields contains the term.
    """

    @staticmethod
    def apply(
        items: list[dict[str, Any]],
        search_term: str,
        fields: tuple[str, ...] = SEARCH_FIELDS,
    ) -> list[dict[str, Any]]:
        if not search_term or not search_term.strip():
            return items

        needle = search_term.strip().lower()
        return [
            item
            for item in items
            if any(needle in str(item.get(field) or "").lower() for field in fields)
        ]
