from .base import ResultStore
from .csv_store import CsvResultStore
from .memory_store import InMemoryResultStore
from .sql_store import SqlResultStore


def build_store(config) -> ResultStore:
    """Pick a backend from config["RESULT_STORE"]."""
    kind = (config.get("RESULT_STORE") or "csv").strip().lower()

    if kind == "csv":
        return CsvResultStore(config["RESULTS_PATH"], config.get("MILESTONE_LABEL", "Bonus"))
    if kind == "sql":
        return SqlResultStore()
    if kind == "memory":
        return InMemoryResultStore()

    raise ValueError(f"Unknown RESULT_STORE {kind!r} (expected csv, sql or memory)")


__all__ = [
    "CsvResultStore",
    "InMemoryResultStore",
    "ResultStore",
    "SqlResultStore",
    "build_store",
]
