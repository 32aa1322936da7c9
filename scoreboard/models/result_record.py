from sqlalchemy import UniqueConstraint
from scoreboard.extensions import db
from scoreboard.models.result import Result


class ResultRecord(db.Model):
    __tablename__ = "results"

    id = db.Column(db.Integer, primary_key=True)

    # ISO-8601 string, kept as text so every backend round-trips it verbatim
    timestamp = db.Column(db.String(40), nullable=False)

    climber = db.Column(db.String(200), nullable=False, index=True)
    route = db.Column(db.String(200), nullable=False, index=True)

    total_attempts = db.Column(db.Integer, nullable=False, default=0)
    milestone_achieved = db.Column(db.Boolean, nullable=False, default=False)
    top_achieved = db.Column(db.Boolean, nullable=False, default=False)

    first_milestone_attempt = db.Column(db.Integer, nullable=True)
    first_top_attempt = db.Column(db.Integer, nullable=True)

    __table_args__ = (
        # one result per climber per route, ever
        UniqueConstraint("climber", "route", name="uq_result_climber_route"),
    )

    @classmethod
    def from_result(cls, result: Result) -> "ResultRecord":
        return cls(
            timestamp=result.timestamp,
            climber=result.climber,
            route=result.route,
            total_attempts=result.total_attempts,
            milestone_achieved=result.milestone_achieved,
            top_achieved=result.top_achieved,
            first_milestone_attempt=result.first_milestone_attempt,
            first_top_attempt=result.first_top_attempt,
        )

    def to_result(self) -> Result:
        return Result(
            timestamp=self.timestamp,
            climber=self.climber,
            route=self.route,
            total_attempts=self.total_attempts,
            milestone_achieved=bool(self.milestone_achieved),
            top_achieved=bool(self.top_achieved),
            first_milestone_attempt=self.first_milestone_attempt,
            first_top_attempt=self.first_top_attempt,
        )
