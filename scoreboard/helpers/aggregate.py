from typing import Optional, Sequence

from scoreboard.models import Attempt, ResultFields


def _first_position(attempts, predicate) -> Optional[int]:
    # position in the submitted list (index + 1), not the client's `number`
    for idx, attempt in enumerate(attempts):
        if predicate(attempt):
            return idx + 1
    return None


def aggregate_attempts(attempts: Sequence[Attempt]) -> ResultFields:
    """Reduce a raw attempt list into the stored summary fields."""
    return ResultFields(
        total_attempts=len(attempts),
        milestone_achieved=any(a.milestone for a in attempts),
        top_achieved=any(a.top for a in attempts),
        first_milestone_attempt=_first_position(attempts, lambda a: a.milestone),
        first_top_attempt=_first_position(attempts, lambda a: a.top),
    )
