import csv
import io
import logging
import os
import tempfile
from threading import Lock

from scoreboard.helpers.errors import MissingFieldsError, StorageError

logger = logging.getLogger(__name__)


def parse_roster(text: str) -> list[str]:
    """First column of every non-empty row, trimmed."""
    names = []
    for row in csv.reader(io.StringIO(text)):
        if not row:
            continue
        name = row[0].strip()
        if name:
            names.append(name)
    return names


class CsvRoster:
    """
    Climber list backed by climbers.csv.

    replace() swaps the whole file under the same lock that guards reads,
    writing to a temp file first and renaming it into place.
    """

    def __init__(self, path: str):
        self.path = path
        self._lock = Lock()

    def names(self) -> list[str]:
        with self._lock:
            try:
                with open(self.path, "r", encoding="utf-8-sig", newline="") as f:
                    return parse_roster(f.read())
            except (OSError, UnicodeDecodeError, csv.Error) as e:
                logger.exception("Error reading %s", self.path)
                raise StorageError(f"Error reading {os.path.basename(self.path)}") from e

    def replace(self, data: bytes) -> int:
        """Replace the roster wholesale. Returns the number of climbers in the new file."""
        try:
            count = len(parse_roster(data.decode("utf-8-sig")))
        except (UnicodeDecodeError, csv.Error) as e:
            raise MissingFieldsError("Uploaded climbers file is not valid UTF-8 CSV") from e

        directory = os.path.dirname(os.path.abspath(self.path))
        with self._lock:
            tmp_path = None
            try:
                fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".climbers-", suffix=".csv")
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp_path, self.path)
            except OSError as e:
                if tmp_path and os.path.exists(tmp_path):
                    os.remove(tmp_path)
                logger.exception("Error replacing %s", self.path)
                raise StorageError(f"Error writing {os.path.basename(self.path)}") from e

        logger.info("Roster replaced: %s climbers in %s", count, self.path)
        return count
