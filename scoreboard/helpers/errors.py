class ScoreboardError(Exception):
    """Base class for failures surfaced to HTTP callers."""

    status_code = 400


class MissingFieldsError(ScoreboardError):
    def __init__(self, message="Missing or invalid fields"):
        super().__init__(message)


class InvalidSequenceError(ScoreboardError):
    """A top was logged before any milestone on an earlier attempt."""

    def __init__(self, attempt_number, milestone_label="bonus"):
        self.attempt_number = attempt_number
        super().__init__(
            f"Invalid attempt sequence: Top achieved on attempt {attempt_number} "
            f"before any {milestone_label.lower()} was recorded."
        )


class DuplicateSubmissionError(ScoreboardError):
    def __init__(self, climber=None, route=None):
        self.climber = climber
        self.route = route
        super().__init__("Result already submitted for this climber and route.")


class StorageError(ScoreboardError):
    """Reading or writing the backing store failed."""

    status_code = 500
