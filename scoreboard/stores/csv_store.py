import csv
import logging
import os
from threading import Lock
from typing import Optional

from scoreboard.helpers.errors import StorageError
from scoreboard.models import Result, result_columns

logger = logging.getLogger(__name__)

# Either terminology may be found in an existing file
KNOWN_LABELS = ("Bonus", "Zone")


def _parse_bool(raw) -> bool:
    return (raw or "").strip().lower() == "true"


def _parse_optional_int(raw) -> Optional[int]:
    raw = (raw or "").strip()
    if not raw:
        return None
    return int(raw)


def _format_optional_int(value) -> str:
    return "" if value is None else str(value)


def _pick(row: dict, preferred: str, suffix_template: str):
    if preferred in row:
        return row.get(preferred)
    for label in KNOWN_LABELS:
        key = suffix_template.format(label=label)
        if key in row:
            return row.get(key)
    return None


class CsvResultStore:
    """
    Results kept as rows of a flat CSV file with one header row.

    Header: Timestamp,Climber,Route,TotalAttempts,<Label>Achieved,TopAchieved,
            First<Label>Attempt,FirstTopAttempt
    """

    def __init__(self, path: str, label: str = "Bonus"):
        self.path = path
        self.label = label
        self.columns = result_columns(label)
        self._lock = Lock()

    # -------------------------------------------------
    # reading
    # -------------------------------------------------

    def _row_to_result(self, row: dict) -> Result:
        return Result(
            timestamp=(row.get("Timestamp") or "").strip(),
            climber=(row.get("Climber") or "").strip(),
            route=(row.get("Route") or "").strip(),
            total_attempts=int((row.get("TotalAttempts") or "0").strip() or 0),
            milestone_achieved=_parse_bool(
                _pick(row, f"{self.label}Achieved", "{label}Achieved")
            ),
            top_achieved=_parse_bool(row.get("TopAchieved")),
            first_milestone_attempt=_parse_optional_int(
                _pick(row, f"First{self.label}Attempt", "First{label}Attempt")
            ),
            first_top_attempt=_parse_optional_int(row.get("FirstTopAttempt")),
        )

    def list_all(self) -> list[Result]:
        if not os.path.exists(self.path):
            return []

        with self._lock:
            try:
                with open(self.path, "r", encoding="utf-8", newline="") as f:
                    reader = csv.DictReader(f)
                    return [self._row_to_result(row) for row in reader]
            except (OSError, csv.Error, ValueError) as e:
                logger.exception("Error reading %s", self.path)
                raise StorageError(f"Error reading {os.path.basename(self.path)}") from e

    def find_by_key(self, climber: str, route: str) -> Optional[Result]:
        for r in self.list_all():
            if r.climber == climber and r.route == route:
                return r
        return None

    # -------------------------------------------------
    # writing
    # -------------------------------------------------

    def _result_to_row(self, result: Result) -> list[str]:
        return [
            result.timestamp,
            result.climber,
            result.route,
            str(result.total_attempts),
            "true" if result.milestone_achieved else "false",
            "true" if result.top_achieved else "false",
            _format_optional_int(result.first_milestone_attempt),
            _format_optional_int(result.first_top_attempt),
        ]

    def append_record(self, result: Result) -> None:
        with self._lock:
            try:
                needs_header = (
                    not os.path.exists(self.path) or os.path.getsize(self.path) == 0
                )
                parent = os.path.dirname(self.path)
                if parent:
                    os.makedirs(parent, exist_ok=True)

                with open(self.path, "a", encoding="utf-8", newline="") as f:
                    writer = csv.writer(f, lineterminator="\n")
                    if needs_header:
                        writer.writerow(self.columns)
                    writer.writerow(self._result_to_row(result))
            except OSError as e:
                logger.exception("Error writing %s", self.path)
                raise StorageError(f"Error writing {os.path.basename(self.path)}") from e
