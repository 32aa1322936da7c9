from dotenv import load_dotenv

# .env must be loaded before Config reads the environment
load_dotenv()

from scoreboard import create_app  # noqa: E402
from scoreboard.extensions import socketio  # noqa: E402

api = create_app()


def main():
    port = api.config["PORT"]
    api.logger.info("Server running at http://localhost:%s", port)
    socketio.run(api, host="0.0.0.0", port=port, allow_unsafe_werkzeug=True)


if __name__ == "__main__":
    main()
