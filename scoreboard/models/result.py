from dataclasses import dataclass
from typing import Optional


def result_columns(label: str) -> list[str]:
    """
    Persisted column order. `label` is the milestone terminology in use
    ("Bonus" or "Zone") and must match between header and rows.
    """
    return [
        "Timestamp",
        "Climber",
        "Route",
        "TotalAttempts",
        f"{label}Achieved",
        "TopAchieved",
        f"First{label}Attempt",
        "FirstTopAttempt",
    ]


@dataclass(frozen=True)
class ResultFields:
    total_attempts: int
    milestone_achieved: bool
    top_achieved: bool
    first_milestone_attempt: Optional[int]
    first_top_attempt: Optional[int]


@dataclass(frozen=True)
class Result:
    timestamp: str
    climber: str
    route: str
    total_attempts: int
    milestone_achieved: bool
    top_achieved: bool
    first_milestone_attempt: Optional[int] = None
    first_top_attempt: Optional[int] = None

    @classmethod
    def from_fields(cls, timestamp: str, climber: str, route: str, fields: ResultFields) -> "Result":
        return cls(
            timestamp=timestamp,
            climber=climber,
            route=route,
            total_attempts=fields.total_attempts,
            milestone_achieved=fields.milestone_achieved,
            top_achieved=fields.top_achieved,
            first_milestone_attempt=fields.first_milestone_attempt,
            first_top_attempt=fields.first_top_attempt,
        )

    def to_record(self, label: str) -> dict:
        """JSON-safe dict keyed by the persisted column names."""
        values = [
            self.timestamp,
            self.climber,
            self.route,
            self.total_attempts,
            self.milestone_achieved,
            self.top_achieved,
            self.first_milestone_attempt,
            self.first_top_attempt,
        ]
        return dict(zip(result_columns(label), values))
