from typing import Optional, Protocol

from scoreboard.models import Result


class ResultStore(Protocol):
    """
    Append-only record of submitted results.

    Uniqueness of (climber, route) is checked by the submission service,
    not by the store. Backends that can enforce it (SQL) raise
    DuplicateSubmissionError from append_record as a second line.
    """

    def find_by_key(self, climber: str, route: str) -> Optional[Result]:
        ...

    def append_record(self, result: Result) -> None:
        ...

    def list_all(self) -> list[Result]:
        ...
