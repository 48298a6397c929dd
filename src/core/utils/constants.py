"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

import os
from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_FILTER = "INVALID_FILTER"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_INCIDENT_NOT_FOUND = "INCIDENT_NOT_FOUND"

# Incident / DynamoDB Errors
ERROR_CODE_DYNAMODB = "DYNAMODB_ERROR"
ERROR_CODE_INCIDENT_DUPLICATE = "DUPLICATE_INCIDENT_ERROR"
ERROR_CODE_INCIDENT_OPERATION_FAILED = "INCIDENT_OPERATION_FAILED"
ERROR_CODE_INCIDENT_CREATE_FAILED = "INCIDENT_CREATE_FAILED"
ERROR_CODE_INCIDENT_FETCH_FAILED = "INCIDENT_FETCH_FAILED"
ERROR_CODE_INCIDENT_LIST_FAILED = "INCIDENT_LIST_FAILED"
ERROR_CODE_INCIDENT_UPDATE_FAILED = "INCIDENT_UPDATE_FAILED"
ERROR_CODE_INCIDENT_DELETE_FAILED = "INCIDENT_DELETE_FAILED"
ERROR_CODE_INCIDENT_INVALID = "INCIDENT_INVALID"


# ============================================================================
# Incident Vocabulary
# ============================================================================

DEFAULT_INSTITUTIONS: Final[tuple[str, ...]] = (
    "SCTP",
    "CSR",
    "Curatelle",
    "Justice de paix",
    "ARAS",
    "AI",
    "TCA",
    "Autre",
)

DEFAULT_TYPES: Final[tuple[str, ...]] = (
    "Transparence",
    "Traçabilité",
    "Communication",
    "Représentation",
    "Neutralité",
    "Délais",
    "Accès aux pièces",
    "Autre",
)

DEFAULT_STATUTS: Final[tuple[str, ...]] = (
    "Ouvert",
    "En cours",
    "Résolu",
    "Classé",
    "Transmis",
)

DEFAULT_GRAVITES: Final[tuple[str, ...]] = (
    "Faible",
    "Moyenne",
    "Haute",
    "Critique",
)

DEFAULT_STATUT = "Ouvert"
INCIDENT_ID_PREFIX = "inc_"
USER_ID_PATTERN = r"^[a-zA-Z0-9_-]+$"
TITLE_MAX_LENGTH = 200

# ============================================================================
# Scoring
# ============================================================================

POIDS_GRAVITE: Final[dict[str, int]] = {
    "Faible": 1,
    "Moyenne": 3,
    "Haute": 6,
    "Critique": 10,
}

POIDS_TYPE: Final[dict[str, int]] = {
    "Représentation": 8,
    "Traçabilité": 7,
    "Accès aux pièces": 7,
    "Transparence": 6,
    "Communication": 5,
    "Délais": 5,
    "Neutralité": 4,
    "Autre": 3,
}

DEFAULT_GRAVITE_WEIGHT = 1
DEFAULT_TYPE_WEIGHT = 3
UNTRANSMITTED_SEVERE_PENALTY = 3
SEVERE_GRAVITES: Final[frozenset[str]] = frozenset({"Haute", "Critique"})

PRIORITY_THRESHOLD_FAIBLE = 8
PRIORITY_THRESHOLD_MOYEN = 15
PRIORITY_THRESHOLD_ELEVE = 22

# Changing any of these fields re-scores the incident
RESCORING_FIELDS: Final[frozenset[str]] = frozenset({"gravite", "type", "transmis_jp"})

# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 100
DEFAULT_OFFSET = 0

# Bulk reads through the bounded paginator
DEFAULT_FETCH_BATCH_SIZE = 500
DEFAULT_FETCH_MAX_ROWS = 2000

# ============================================================================
# Filter Constraints
# ============================================================================

ALLOWED_SORT_FIELDS = {"created_at", "score", "date_incident"}
ALLOWED_SORT_ORDERS = {"asc", "desc"}

# ============================================================================
# Date / Time Formats
# ============================================================================

DATE_FORMAT = "%Y-%m-%d"
API_DATE_FORMAT = "YYYY-MM-DD"

# ============================================================================
# DynamoDB Indexes
# ============================================================================

INDEX_USER_CREATED = "user-created-index"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,PATCH,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_INCIDENT_TABLE_NAME = "INCIDENT_TABLE_NAME"
ENV_FETCH_BATCH_SIZE = "INCIDENT_FETCH_BATCH_SIZE"
ENV_FETCH_MAX_ROWS = "INCIDENT_FETCH_MAX_ROWS"

# ============================================================================
# Helper Functions
# ============================================================================


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    try:
        return int(raw)
    except ValueError:
        return default


def get_fetch_batch_size() -> int:
    """Page size used when bulk-reading incidents from DynamoDB."""
    return _int_from_env(ENV_FETCH_BATCH_SIZE, DEFAULT_FETCH_BATCH_SIZE)


def get_fetch_max_rows() -> int:
    """Hard cap on incidents loaded by a single bulk read."""
    return _int_from_env(ENV_FETCH_MAX_ROWS, DEFAULT_FETCH_MAX_ROWS)
