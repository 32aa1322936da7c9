from threading import Lock
from typing import Optional

from scoreboard.models import Result


class InMemoryResultStore:
    """Process-local store for tests and demos. Nothing survives a restart."""

    def __init__(self, results=None):
        self._lock = Lock()
        self._results: list[Result] = list(results or [])

    def find_by_key(self, climber: str, route: str) -> Optional[Result]:
        with self._lock:
            for r in self._results:
                if r.climber == climber and r.route == route:
                    return r
        return None

    def append_record(self, result: Result) -> None:
        with self._lock:
            self._results.append(result)

    def list_all(self) -> list[Result]:
        with self._lock:
            return list(self._results)
