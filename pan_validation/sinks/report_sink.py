import json
from pathlib import Path

from pan_validation.logging.logger import Log
from pan_validation.sinks.exceptions import SinkWriteError


class JsonReportSink:
    """Writes the run report (summary, data-quality profile, results) as JSON."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def write(self, report: dict[str, object]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(report, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise SinkWriteError(f"Failed to write report {self._path}: {exc}") from exc
        Log.info(f"Wrote report to {self._path}")
