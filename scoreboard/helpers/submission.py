import logging
import weakref
from threading import Lock

from scoreboard.helpers.aggregate import aggregate_attempts
from scoreboard.helpers.broadcast import NEW_RESULT_EVENT, NullBroadcaster
from scoreboard.helpers.errors import DuplicateSubmissionError, MissingFieldsError
from scoreboard.helpers.time import to_iso_timestamp
from scoreboard.helpers.validation import check_attempt_sequence, parse_attempts
from scoreboard.models import Result

logger = logging.getLogger(__name__)


class KeyedLock:
    """One lock per key, created on first use and freed once nobody holds it."""

    def __init__(self):
        self._guard = Lock()
        self._locks = weakref.WeakValueDictionary()

    def for_key(self, key) -> Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = Lock()
                self._locks[key] = lock
            return lock


def _clean_name(raw):
    if not isinstance(raw, str):
        return ""
    return raw.strip()


class SubmissionService:
    """
    Validate, de-duplicate, aggregate, persist and broadcast one result.

    The only writer to the result store. Steps short-circuit on the first
    failure; a StorageError from the store propagates unchanged and no
    event is published in that case.
    """

    def __init__(self, store, broadcaster=None, milestone_label="Bonus", same_attempt_counts=False):
        self.store = store
        self.broadcaster = broadcaster or NullBroadcaster()
        self.milestone_label = milestone_label
        self.same_attempt_counts = same_attempt_counts
        self._pair_locks = KeyedLock()

    @property
    def milestone_key(self) -> str:
        return self.milestone_label.lower()

    def submit(self, climber, route, attempts) -> Result:
        climber = _clean_name(climber)
        route = _clean_name(route)
        if not climber or not route:
            raise MissingFieldsError()

        parsed = parse_attempts(attempts, self.milestone_key)

        check_attempt_sequence(
            parsed,
            milestone_label=self.milestone_key,
            same_attempt_counts=self.same_attempt_counts,
        )

        # check-then-append must not interleave for the same pair
        with self._pair_locks.for_key((climber, route)):
            if self.store.find_by_key(climber, route) is not None:
                raise DuplicateSubmissionError(climber, route)

            fields = aggregate_attempts(parsed)
            result = Result.from_fields(to_iso_timestamp(), climber, route, fields)

            self.store.append_record(result)

        logger.info(
            "Saved result climber=%r route=%r attempts=%s top=%s",
            climber, route, result.total_attempts, result.top_achieved,
        )

        self.broadcaster.publish(NEW_RESULT_EVENT, self.event_payload(result, attempts))
        return result

    def event_payload(self, result: Result, attempts) -> dict:
        key = self.milestone_key
        label = self.milestone_label
        return {
            "climber": result.climber,
            "route": result.route,
            "totalAttempts": result.total_attempts,
            f"{key}Achieved": result.milestone_achieved,
            "topAchieved": result.top_achieved,
            f"first{label}Attempt": result.first_milestone_attempt,
            "firstTopAttempt": result.first_top_attempt,
            "attempts": attempts,
        }
