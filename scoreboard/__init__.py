import logging

from flask import Flask

from .config import Config
from .extensions import db, socketio
from .helpers.broadcast import SocketIOBroadcaster
from .helpers.roster import CsvRoster
from .helpers.services import ROSTER_KEY, STORE_KEY, SUBMISSIONS_KEY
from .helpers.submission import SubmissionService
from .routes import register_blueprints
from .stores import build_store


def _configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(level)


def create_app(config_object=Config, overrides=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)

    _configure_logging(app)

    db.init_app(app)
    socketio.init_app(app, cors_allowed_origins=app.config.get("CORS_ALLOWED_ORIGINS", "*"))

    store = build_store(app.config)
    if str(app.config["RESULT_STORE"]).strip().lower() == "sql":
        with app.app_context():
            db.create_all()

    app.extensions[STORE_KEY] = store
    app.extensions[ROSTER_KEY] = CsvRoster(app.config["CLIMBERS_PATH"])
    app.extensions[SUBMISSIONS_KEY] = SubmissionService(
        store,
        SocketIOBroadcaster(socketio),
        milestone_label=app.config["MILESTONE_LABEL"],
        same_attempt_counts=app.config["SAME_ATTEMPT_MILESTONE_COUNTS"],
    )

    register_blueprints(app)

    app.logger.info(
        "Scoreboard ready: store=%s routes=%s label=%s",
        app.config["RESULT_STORE"], len(app.config["ROUTES"]), app.config["MILESTONE_LABEL"],
    )
    return app
