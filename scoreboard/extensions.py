from flask_socketio import SocketIO
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# async_mode="threading" works with the plain Flask/Werkzeug server
socketio = SocketIO(async_mode="threading")
