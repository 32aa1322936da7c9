import pytest

from scoreboard import create_app
from scoreboard.config import TestConfig
from scoreboard.extensions import socketio
from scoreboard.helpers.submission import SubmissionService
from scoreboard.stores import InMemoryResultStore


class RecordingBroadcaster:
    def __init__(self):
        self.events = []

    def publish(self, event, payload):
        self.events.append((event, payload))


@pytest.fixture
def climbers_csv(tmp_path):
    path = tmp_path / "climbers.csv"
    path.write_text("Alex\nBea\n\nCai, Youth\n", encoding="utf-8")
    return path


@pytest.fixture
def app(tmp_path, climbers_csv):
    return create_app(
        TestConfig,
        {
            "CLIMBERS_PATH": str(climbers_csv),
            "RESULTS_PATH": str(tmp_path / "result.csv"),
        },
    )


@pytest.fixture
def csv_app(tmp_path, climbers_csv):
    return create_app(
        TestConfig,
        {
            "RESULT_STORE": "csv",
            "CLIMBERS_PATH": str(climbers_csv),
            "RESULTS_PATH": str(tmp_path / "result.csv"),
        },
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def viewer(app):
    sio = socketio.test_client(app)
    yield sio
    if sio.is_connected():
        sio.disconnect()


@pytest.fixture
def store():
    return InMemoryResultStore()


@pytest.fixture
def broadcaster():
    return RecordingBroadcaster()


@pytest.fixture
def service(store, broadcaster):
    return SubmissionService(store, broadcaster)


def attempts(*flags, key="bonus"):
    """attempts((False, False), (True, False), (False, True)) -> numbered attempt dicts."""
    return [
        {"number": i + 1, key: milestone, "top": top}
        for i, (milestone, top) in enumerate(flags)
    ]
