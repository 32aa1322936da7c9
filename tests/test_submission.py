import re
import threading

import pytest

from conftest import RecordingBroadcaster, attempts
from scoreboard.helpers.broadcast import SocketIOBroadcaster
from scoreboard.helpers.errors import (
    DuplicateSubmissionError,
    InvalidSequenceError,
    MissingFieldsError,
    StorageError,
)
from scoreboard.helpers.submission import KeyedLock, SubmissionService
from scoreboard.stores import CsvResultStore, InMemoryResultStore


class FailingStore(InMemoryResultStore):
    def append_record(self, result):
        raise StorageError("disk full")


class ExplodingBroadcaster:
    def publish(self, event, payload):
        raise AssertionError("must not publish")


def test_accepted_submission_is_stored_and_broadcast(service, store, broadcaster):
    result = service.submit("Alex", "Route 1", attempts((False, False), (True, False), (False, True)))

    assert result.climber == "Alex"
    assert result.route == "Route 1"
    assert result.total_attempts == 3
    assert result.milestone_achieved is True
    assert result.top_achieved is True
    assert result.first_milestone_attempt == 2
    assert result.first_top_attempt == 3
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", result.timestamp)

    assert store.list_all() == [result]

    assert len(broadcaster.events) == 1
    event, payload = broadcaster.events[0]
    assert event == "newResult"
    assert payload == {
        "climber": "Alex",
        "route": "Route 1",
        "totalAttempts": 3,
        "bonusAchieved": True,
        "topAchieved": True,
        "firstBonusAttempt": 2,
        "firstTopAttempt": 3,
        "attempts": attempts((False, False), (True, False), (False, True)),
    }


def test_empty_attempt_list_is_accepted(service, store):
    result = service.submit("Alex", "Route 2", [])
    assert result.total_attempts == 0
    assert result.first_milestone_attempt is None
    assert result.first_top_attempt is None
    assert len(store.list_all()) == 1


def test_names_are_trimmed(service, store):
    service.submit("  Alex ", " Route 1", [])
    assert store.find_by_key("Alex", "Route 1") is not None


@pytest.mark.parametrize(
    "climber, route, raw",
    [
        ("", "Route 1", []),
        ("Alex", "", []),
        ("   ", "Route 1", []),
        (None, "Route 1", []),
        ("Alex", "Route 1", None),
        ("Alex", "Route 1", "nope"),
        (42, "Route 1", []),
    ],
)
def test_missing_fields_rejected_before_anything_else(store, climber, route, raw):
    service = SubmissionService(store, ExplodingBroadcaster())
    with pytest.raises(MissingFieldsError):
        service.submit(climber, route, raw)
    assert store.list_all() == []


def test_top_before_milestone_is_rejected_and_nothing_written(service, store, broadcaster):
    with pytest.raises(InvalidSequenceError) as exc:
        service.submit("A", "R1", [{"number": 1, "bonus": False, "top": True}])

    assert exc.value.attempt_number == 1
    assert "attempt 1" in str(exc.value)
    assert store.list_all() == []
    assert broadcaster.events == []


def test_duplicate_pair_is_rejected(service, store, broadcaster):
    service.submit("Alex", "Route 1", attempts((True, False)))

    with pytest.raises(DuplicateSubmissionError):
        service.submit("Alex", "Route 1", attempts((True, False), (False, True)))

    stored = store.list_all()
    assert len(stored) == 1
    assert stored[0].total_attempts == 1
    assert len(broadcaster.events) == 1


def test_same_climber_other_route_is_not_a_duplicate(service, store):
    service.submit("Alex", "Route 1", [])
    service.submit("Alex", "Route 2", [])
    service.submit("Bea", "Route 1", [])
    assert len(store.list_all()) == 3


def test_invalid_sequence_checked_before_duplicate(service):
    service.submit("Alex", "Route 1", [])
    with pytest.raises(InvalidSequenceError):
        service.submit("Alex", "Route 1", attempts((False, True)))


def test_storage_failure_publishes_nothing():
    broadcaster = RecordingBroadcaster()
    service = SubmissionService(FailingStore(), broadcaster)

    with pytest.raises(StorageError):
        service.submit("Alex", "Route 1", [])

    assert broadcaster.events == []


def test_zone_label_changes_wire_keys(store, broadcaster):
    service = SubmissionService(store, broadcaster, milestone_label="Zone")
    service.submit("Alex", "Route 1", attempts((True, False), (False, True), key="zone"))

    _, payload = broadcaster.events[0]
    assert payload["zoneAchieved"] is True
    assert payload["firstZoneAttempt"] == 1
    assert payload["firstTopAttempt"] == 2
    assert "bonusAchieved" not in payload


def test_same_attempt_setting_allows_combined_attempt(store, broadcaster):
    service = SubmissionService(store, broadcaster, same_attempt_counts=True)
    result = service.submit("Alex", "Route 1", attempts((True, True)))
    assert result.first_milestone_attempt == 1
    assert result.first_top_attempt == 1


class _DeadSocket:
    def emit(self, event, payload):
        raise ConnectionError("transport gone")


def test_broadcast_failure_does_not_affect_submission(store):
    service = SubmissionService(store, SocketIOBroadcaster(_DeadSocket()))

    result = service.submit("A", "R1", [])

    assert result.climber == "A"
    assert store.list_all() == [result]


def test_concurrent_submissions_for_one_pair_store_a_single_row(tmp_path):
    store = CsvResultStore(str(tmp_path / "result.csv"))
    service = SubmissionService(store, RecordingBroadcaster())

    start = threading.Barrier(20)
    outcomes = []
    outcomes_lock = threading.Lock()

    def submit():
        start.wait()
        try:
            service.submit("A", "R1", attempts((True, False)))
            outcome = "saved"
        except DuplicateSubmissionError:
            outcome = "duplicate"
        with outcomes_lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=submit) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("saved") == 1
    assert outcomes.count("duplicate") == 19
    assert len(store.list_all()) == 1


def test_keyed_lock_shares_lock_per_key_and_frees_unused():
    locks = KeyedLock()

    held = locks.for_key(("A", "R1"))
    assert locks.for_key(("A", "R1")) is held
    assert locks.for_key(("A", "R2")) is not held

    del held
    assert len(locks._locks) == 0
