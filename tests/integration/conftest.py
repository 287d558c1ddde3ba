import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from pan_validation.config.settings import Settings
from pan_validation.database.connection import (
    build_conninfo,
    close_pool,
    get_connection,
    init_pool,
)
from pan_validation.database.repositories.pan_repository import (
    RAW_TABLE,
    RESULTS_TABLE,
    PanRepository,
)


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "pan_validation_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        with psycopg.connect(build_conninfo(test_settings), connect_timeout=3):
            pass
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    init_pool(test_settings)
    try:
        PanRepository().ensure_tables()
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def clean_tables(db_conn: psycopg.Connection[Any]) -> Generator[None, None, None]:
    """Empty both tables before and after each test."""

    def _truncate() -> None:
        with db_conn.cursor() as cur:
            cur.execute(f"DELETE FROM {RAW_TABLE}")
            cur.execute(f"DELETE FROM {RESULTS_TABLE}")
        db_conn.commit()

    _truncate()
    yield
    _truncate()


@pytest.fixture
def seed_raw_values(
    db_conn: psycopg.Connection[Any],
    clean_tables: None,
    sample_raw_values: list[str | None],
) -> list[str | None]:
    with db_conn.cursor() as cur:
        cur.executemany(
            f"INSERT INTO {RAW_TABLE} (pan_number) VALUES (%s)",
            [(value,) for value in sample_raw_values],
        )
    db_conn.commit()
    return sample_raw_values
