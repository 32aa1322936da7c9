from flask import Blueprint, request, current_app

from scoreboard.helpers.errors import MissingFieldsError, StorageError
from scoreboard.helpers.services import get_roster

climbers_bp = Blueprint("climbers", __name__)


@climbers_bp.route("/upload-climbers", methods=["POST"])
def upload_climbers():
    """
    Replace climbers.csv with the uploaded file (multipart field "file").
    One climber per row, name in the first column.
    """
    upload = request.files.get("file") or request.files.get("climbers")
    if upload is None or not upload.filename:
        return "No file uploaded", 400

    try:
        count = get_roster().replace(upload.read())
    except MissingFieldsError as e:
        return str(e), 400
    except StorageError:
        return "Server error", 500

    current_app.logger.info("Climbers list replaced from upload %r (%s climbers)", upload.filename, count)
    return "Climbers list updated.", 200
