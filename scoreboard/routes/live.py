import logging

from flask import request

from scoreboard.extensions import socketio

logger = logging.getLogger(__name__)

# Viewers only listen; the server pushes "newResult" after each saved submission.


@socketio.on("connect")
def handle_connect(auth=None):
    logger.info("Viewer connected sid=%s", getattr(request, "sid", None))


@socketio.on("disconnect")
def handle_disconnect(*args):
    logger.info("Viewer disconnected sid=%s", getattr(request, "sid", None))
