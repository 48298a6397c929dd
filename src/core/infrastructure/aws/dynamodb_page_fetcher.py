"""Offset-addressable page fetcher over a cursor-based DynamoDB query."""

from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapterProtocol
from core.models.errors import DynamoDBError
from core.pagination.bounded_paginator import PageRequest
from core.utils.constants import ERROR_CODE_INCIDENT_LIST_FAILED

Item = dict[str, Any]
Cursor = dict[str, Any]

logger = Logger(UTC=True)


class DynamoDBPageFetcher:
    """Serve ``(offset, limit)`` pages from a DynamoDB query.

    DynamoDB paginates with ``LastEvaluatedKey`` cursors, not offsets. This
    fetcher remembers the cursor that starts every offset it has reached, so
    sequential calls cost one round trip per page. An offset that was never
    reached is served by walking forward from the nearest known cursor and
    discarding the skipped items.

    A page is filled with repeated queries until ``limit`` items are
    collected or the query is exhausted. DynamoDB may return fewer items
    than ``Limit`` (filter expressions, 1MB response cap) while more data
    remains, and a short page must only ever mean "end of data".

    One instance belongs to one bulk read; build a new fetcher per read.
    """

    def __init__(
        self,
        adapter: DynamoDBAdapterProtocol,
        *,
        query_kwargs: dict[str, Any],
        log_context: dict[str, Any] | None = None,
    ) -> None:
        self._db = adapter
        self._query_kwargs: dict[str, Any] = dict(query_kwargs)
        self._log_context: dict[str, Any] = dict(log_context or {})
        self._cursors: dict[int, Cursor | None] = {0: None}
        self._end: int | None = None

    def __call__(self, offset: int, limit: int) -> list[Item]:
        """Return up to ``limit`` items starting at ``offset``.

        Raises:
            ValueError: If offset is negative or limit is not positive
            DynamoDBError: If the query fails or returns malformed data
        """
        try:
            request = PageRequest(offset=offset, limit=limit)
        except PydanticValidationError as exc:
            raise ValueError(f"Invalid page request: offset={offset!r}, limit={limit!r}") from exc

        try:
            items = self._read(request)

        except DynamoDBError:
            raise

        except ClientError as exc:
            logger.error(
                "DynamoDB query failed",
                extra={**self._log_context, "offset": offset, "limit": limit},
            )
            raise DynamoDBError(
                message="Unable to list incidents at this time",
                error_code=ERROR_CODE_INCIDENT_LIST_FAILED,
                details={**self._log_context, "offset": offset},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error fetching incident page")
            raise DynamoDBError(
                message="Unable to list incidents at this time",
                error_code=ERROR_CODE_INCIDENT_LIST_FAILED,
                details={**self._log_context, "offset": offset},
            ) from exc

        logger.debug(
            "Incident page fetched",
            extra={
                **self._log_context,
                "offset": offset,
                "limit": limit,
                "count": len(items),
            },
        )
        return items

    def _read(self, request: PageRequest) -> list[Item]:
        offset, limit = request.offset, request.limit

        if self._end is not None and offset >= self._end:
            return []

        position = max(known for known in self._cursors if known <= offset)
        cursor = self._cursors[position]

        if position < offset:
            skipped, cursor, exhausted = self._collect(cursor, offset - position)
            position += len(skipped)

            if exhausted:
                self._end = position
                return []

            self._cursors[position] = cursor

        items, cursor, exhausted = self._collect(cursor, limit)
        end = position + len(items)

        if exhausted:
            self._end = end
        else:
            self._cursors[end] = cursor

        return items

    def _collect(
        self,
        cursor: Cursor | None,
        count: int,
    ) -> tuple[list[Item], Cursor | None, bool]:
        """Query until ``count`` items are read or the cursor runs out.

        Returns:
            (items, next_cursor, exhausted)
        """
        items: list[Item] = []

        while len(items) < count:
            kwargs = dict(self._query_kwargs)
            kwargs["Limit"] = count - len(items)

            if cursor:
                kwargs["ExclusiveStartKey"] = cursor

            response = self._db.query(**kwargs)
            page_items = response.get("Items", [])

            if not isinstance(page_items, list):
                raise DynamoDBError(
                    message="Invalid query response from DynamoDB",
                    error_code=ERROR_CODE_INCIDENT_LIST_FAILED,
                    details=dict(self._log_context),
                )

            items.extend(page_items)

            cursor = response.get("LastEvaluatedKey")
            if not cursor:
                return items, None, True

        return items, cursor, False
