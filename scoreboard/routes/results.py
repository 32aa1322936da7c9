from flask import Blueprint, request, jsonify, current_app, make_response

from scoreboard.helpers.errors import (
    DuplicateSubmissionError,
    InvalidSequenceError,
    MissingFieldsError,
    StorageError,
)
from scoreboard.helpers.services import get_store, get_submission_service, milestone_label
from scoreboard.helpers.summary import climber_summary, leaderboard_rows, submitted_pairs

results_bp = Blueprint("results", __name__)


def _no_store(payload):
    resp = make_response(jsonify(payload))
    resp.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
    resp.headers["Pragma"] = "no-cache"
    return resp


@results_bp.route("/submit", methods=["POST"])
def submit_result():
    """
    Record one climber's attempts on one route.

    Payload:
      {
        "climber": "Alex",
        "route": "Route 3",
        "attempts": [
          {"number": 1, "bonus": false, "top": false},
          {"number": 2, "bonus": true, "top": false},
          {"number": 3, "bonus": false, "top": true}
        ]
      }

    A climber gets exactly one result per route; resubmitting is refused.
    """
    data = request.get_json(force=True, silent=True) or {}
    if not isinstance(data, dict):
        return "Missing or invalid fields", 400

    service = get_submission_service()

    try:
        service.submit(data.get("climber"), data.get("route"), data.get("attempts"))
    except MissingFieldsError as e:
        return str(e), 400
    except InvalidSequenceError as e:
        current_app.logger.info(
            "Rejected sequence climber=%r route=%r attempt=%s",
            data.get("climber"), data.get("route"), e.attempt_number,
        )
        return str(e), 400
    except DuplicateSubmissionError as e:
        current_app.logger.info("Duplicate submission climber=%r route=%r", e.climber, e.route)
        return jsonify({"error": str(e)}), 400
    except StorageError:
        # already logged with traceback by the store
        return "Server error", 500

    return "Saved", 200


@results_bp.route("/results.json")
def results_json():
    try:
        rows = leaderboard_rows(get_store(), milestone_label())
    except StorageError:
        return jsonify({"error": "Error reading result.csv"}), 500
    return _no_store(rows)


@results_bp.route("/summary.json")
def summary_json():
    try:
        rows = climber_summary(get_store())
    except StorageError:
        return jsonify({"error": "Error generating summary"}), 500
    return _no_store(rows)


@results_bp.route("/submitted.json")
def submitted_json():
    try:
        rows = submitted_pairs(get_store())
    except StorageError:
        return jsonify({"error": "Error reading submitted results"}), 500
    return _no_store(rows)
