"""
Bounded offset pagination over a caller-supplied page fetcher.

The paginator repeatedly asks a fetcher for fixed-size pages at increasing
offsets and concatenates the results. It knows nothing about the store
behind the fetcher: the fetcher receives ``(offset, limit)`` and returns a
page of items, or reports an error.

Termination rules, in the order they are checked:

1. ``batch_size`` or ``max_rows`` not strictly positive -> ``[]`` without
   calling the fetcher.
2. An empty page ends the loop (end of data).
3. A short page (``len(page) < batch_size``) ends the loop after being
   appended, so no extra round trip is spent on a known-empty page.
4. Reaching ``max_rows`` accumulated items ends the loop; the result is
   then sliced to ``max_rows``.

A page of exactly ``batch_size`` items never terminates the loop by itself,
so a dataset whose size is an exact multiple of ``batch_size`` costs one
extra fetch that returns an empty page.

Fetch errors propagate unchanged and discard anything accumulated so far.
There is no retry, backoff or logging here; that policy belongs to the
fetcher.
"""

from collections.abc import Awaitable, Sequence
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PageRequest(BaseModel):
    """The slice of the logical dataset a single fetch should return."""

    model_config = ConfigDict(frozen=True)

    offset: StrictInt = Field(..., ge=0, description="Zero-based start position")
    limit: StrictInt = Field(..., gt=0, description="Requested page size")


class PageResult(Generic[T]):
    """
    Result envelope a fetcher may return instead of a bare sequence.

    Mirrors the ``{data, error}`` shape of BaaS query clients. When ``error``
    is set the paginator raises that exact object; a ``data`` that is
    ``None`` (or not a sequence) is read as an empty page.
    """

    __slots__ = ("data", "error")

    def __init__(
        self,
        data: Sequence[T] | None = None,
        error: BaseException | None = None,
    ) -> None:
        self.data = data
        self.error = error

    def __repr__(self) -> str:
        return f"PageResult(data={self.data!r}, error={self.error!r})"


class PageFetcher(Protocol[T_co]):
    """Blocking page source: ``(offset, limit) -> page``."""

    def __call__(
        self, offset: int, limit: int
    ) -> "Sequence[T_co] | PageResult[Any]": ...


class AsyncPageFetcher(Protocol[T_co]):
    """Awaitable page source: ``(offset, limit) -> awaitable page``."""

    def __call__(
        self, offset: int, limit: int
    ) -> "Awaitable[Sequence[T_co] | PageResult[Any]]": ...


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_valid_config(batch_size: Any, max_rows: Any) -> bool:
    """Return True when both bounds are strictly positive integers."""
    return _is_positive_int(batch_size) and _is_positive_int(max_rows)


def unwrap_page(result: Any) -> list[Any]:
    """
    Normalize a fetcher result into a list of items.

    Raises:
        BaseException: The error carried by a ``PageResult``, unchanged.
    """
    if isinstance(result, PageResult):
        if result.error is not None:
            raise result.error
        result = result.data

    if result is None or isinstance(result, (str, bytes, bytearray)):
        return []

    if not isinstance(result, Sequence):
        return []

    return list(result)


def _should_continue(page: list[Any], batch_size: int) -> bool:
    # Short page: this was the last one.
    return len(page) >= batch_size


async def fetch_all(
    page_fetcher: AsyncPageFetcher[T],
    batch_size: int,
    max_rows: int,
) -> list[T]:
    """
    Retrieve up to ``max_rows`` items from an async paged source.

    Pages are requested strictly sequentially at offsets
    ``0, batch_size, 2 * batch_size, ...`` with ``limit=batch_size``.

    Args:
        page_fetcher: Coroutine function called as ``fetcher(offset, limit)``
        batch_size: Page size requested on every call
        max_rows: Hard cap on the number of items returned

    Returns:
        The pages concatenated in fetch order, truncated to ``max_rows``.
        ``[]`` when either bound is not strictly positive.

    Raises:
        Whatever the fetcher raises or reports, unchanged.
    """
    if not is_valid_config(batch_size, max_rows):
        return []

    rows: list[T] = []
    offset = 0

    while len(rows) < max_rows:
        page = unwrap_page(await page_fetcher(offset, batch_size))
        if not page:
            break

        rows.extend(page)
        offset += batch_size

        if not _should_continue(page, batch_size):
            break

    return rows[:max_rows]


def fetch_all_sync(
    page_fetcher: PageFetcher[T],
    batch_size: int,
    max_rows: int,
) -> list[T]:
    """
    Blocking counterpart of :func:`fetch_all` with identical semantics.

    Intended for synchronous clients such as boto3 inside Lambda handlers.
    """
    if not is_valid_config(batch_size, max_rows):
        return []

    rows: list[T] = []
    offset = 0

    while len(rows) < max_rows:
        page = unwrap_page(page_fetcher(offset, batch_size))
        if not page:
            break

        rows.extend(page)
        offset += batch_size

        if not _should_continue(page, batch_size):
            break

    return rows[:max_rows]
