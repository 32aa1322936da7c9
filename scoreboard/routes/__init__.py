from .index import index_bp
from .results import results_bp
from .climbers import climbers_bp
from . import live  # noqa: F401  (registers Socket.IO handlers)


def register_blueprints(app):
    app.register_blueprint(index_bp)
    app.register_blueprint(results_bp)
    app.register_blueprint(climbers_bp)
