import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from scoreboard.extensions import db
from scoreboard.helpers.errors import DuplicateSubmissionError, StorageError
from scoreboard.models import Result, ResultRecord

logger = logging.getLogger(__name__)


class SqlResultStore:
    """
    Results in the `results` table via Flask-SQLAlchemy.
    Must be used inside an application context.

    The (climber, route) unique constraint makes append_record an
    append-if-absent, so two racing submissions cannot both land.
    """

    def find_by_key(self, climber: str, route: str) -> Optional[Result]:
        try:
            row = (
                ResultRecord.query
                .filter_by(climber=climber, route=route)
                .first()
            )
        except SQLAlchemyError as e:
            logger.exception("Error querying results table")
            raise StorageError("Error reading results") from e
        return row.to_result() if row else None

    def append_record(self, result: Result) -> None:
        db.session.add(ResultRecord.from_result(result))
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise DuplicateSubmissionError(result.climber, result.route) from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception("Error writing results table")
            raise StorageError("Error writing results") from e

    def list_all(self) -> list[Result]:
        try:
            rows = ResultRecord.query.order_by(ResultRecord.id.asc()).all()
        except SQLAlchemyError as e:
            logger.exception("Error reading results table")
            raise StorageError("Error reading results") from e
        return [r.to_result() for r in rows]
