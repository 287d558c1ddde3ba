from pan_validation.classification.models import ClassificationResult
from pan_validation.database.connection import get_connection
from pan_validation.reporting.report_builder import result_to_row

RAW_TABLE = "pan_numbers_dataset"
RESULTS_TABLE = "pan_validation_results"


class PanRepository:
    """Database operations for the raw dataset and validation results tables."""

    def ensure_tables(self) -> None:
        """Create both tables if they do not exist yet."""
        with get_connection() as conn:
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {RAW_TABLE} (
                    pan_number TEXT
                )
                """
            )
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {RESULTS_TABLE} (
                    pan_number TEXT PRIMARY KEY,
                    status TEXT NOT NULL,
                    reasons TEXT NOT NULL DEFAULT '',
                    validated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                )
                """
            )
            conn.commit()

    def fetch_raw_values(self) -> list[str | None]:
        """Return every raw value, nulls included, in storage order."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(f"SELECT pan_number FROM {RAW_TABLE}")
                rows = cur.fetchall()
        return [row[0] for row in rows]

    def replace_results(self, results: list[ClassificationResult]) -> None:
        """Replace the results table contents in a single transaction."""
        rows = [result_to_row(result) for result in results]
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(f"DELETE FROM {RESULTS_TABLE}")
                if rows:
                    cur.executemany(
                        f"""
                        INSERT INTO {RESULTS_TABLE} (pan_number, status, reasons)
                        VALUES (%(pan_number)s, %(status)s, %(reasons)s)
                        """,
                        rows,
                    )
            conn.commit()

    def count_results_by_status(self) -> dict[str, int]:
        """Return stored result counts keyed by status string."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"SELECT status, COUNT(*) FROM {RESULTS_TABLE} GROUP BY status"
                )
                rows = cur.fetchall()
        return {row[0]: int(row[1]) for row in rows}
