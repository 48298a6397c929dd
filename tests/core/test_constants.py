import pytest

from core.utils.constants import (
    DEFAULT_FETCH_BATCH_SIZE,
    DEFAULT_FETCH_MAX_ROWS,
    ENV_FETCH_BATCH_SIZE,
    ENV_FETCH_MAX_ROWS,
    get_fetch_batch_size,
    get_fetch_max_rows,
)


def test_fetch_bounds_default(monkeypatch) -> None:
    monkeypatch.delenv(ENV_FETCH_BATCH_SIZE, raising=False)
    monkeypatch.delenv(ENV_FETCH_MAX_ROWS, raising=False)

    assert get_fetch_batch_size() == DEFAULT_FETCH_BATCH_SIZE == 500
    assert get_fetch_max_rows() == DEFAULT_FETCH_MAX_ROWS == 2000


def test_fetch_bounds_from_env(monkeypatch) -> None:
    monkeypatch.setenv(ENV_FETCH_BATCH_SIZE, "50")
    monkeypatch.setenv(ENV_FETCH_MAX_ROWS, "0")

    assert get_fetch_batch_size() == 50
    assert get_fetch_max_rows() == 0


@pytest.mark.parametrize("raw", ["", "  ", "lots"])
def test_unparsable_env_falls_back(monkeypatch, raw) -> None:
    monkeypatch.setenv(ENV_FETCH_BATCH_SIZE, raw)

    assert get_fetch_batch_size() == DEFAULT_FETCH_BATCH_SIZE
