from typing import Sequence

from scoreboard.helpers.errors import InvalidSequenceError, MissingFieldsError
from scoreboard.models import Attempt


def _coerce_number(raw, position):
    """
    Attempt number as sent by the client. Missing -> position in the list.
    bool is rejected explicitly since it is an int subclass.
    """
    if raw is None:
        return position
    if isinstance(raw, bool):
        raise MissingFieldsError()
    try:
        number = int(raw)
    except (TypeError, ValueError, OverflowError):
        raise MissingFieldsError()
    if number < 1 or (isinstance(raw, float) and raw != number):
        raise MissingFieldsError()
    return number


def parse_attempts(raw, milestone_key="bonus") -> list[Attempt]:
    """
    Turn the JSON `attempts` list into Attempt objects.

    Each entry is an object like {"number": 2, "bonus": true, "top": false}.
    The milestone flag is read from `milestone_key` ("bonus" / "zone"),
    with the generic "milestone" key accepted as well.
    """
    if not isinstance(raw, list):
        raise MissingFieldsError()

    attempts = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            raise MissingFieldsError()

        milestone = item.get(milestone_key)
        if milestone is None:
            milestone = item.get("milestone", False)

        attempts.append(
            Attempt(
                number=_coerce_number(item.get("number"), idx + 1),
                milestone=bool(milestone),
                top=bool(item.get("top", False)),
            )
        )
    return attempts


def check_attempt_sequence(
    attempts: Sequence[Attempt],
    milestone_label: str = "bonus",
    same_attempt_counts: bool = False,
) -> None:
    """
    Reject a sequence where a top comes before any milestone.

    Scans front to back. The top check on an attempt runs before that
    attempt's own milestone is recorded, so "milestone and top on attempt 1"
    fails unless `same_attempt_counts` is set.

    Raises InvalidSequenceError carrying the offending attempt's number.
    """
    milestone_seen = False
    for attempt in attempts:
        if attempt.top and not milestone_seen:
            if not (same_attempt_counts and attempt.milestone):
                raise InvalidSequenceError(attempt.number, milestone_label)
        if attempt.milestone:
            milestone_seen = True
