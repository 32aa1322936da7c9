from flask import Blueprint, current_app, jsonify

from scoreboard.helpers.errors import StorageError
from scoreboard.helpers.services import get_roster

index_bp = Blueprint("index", __name__)


@index_bp.route("/data")
def data():
    """
    Everything the scoring form needs to render:
      {"climbers": [...], "routes": [...]}

    Climbers come from the uploaded roster; routes are fixed config.
    """
    try:
        climbers = get_roster().names()
    except StorageError:
        return jsonify({"error": "Error reading climbers.csv"}), 500

    return jsonify({
        "climbers": climbers,
        "routes": list(current_app.config["ROUTES"]),
    })
