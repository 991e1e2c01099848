import os

from commentboard import create_app
from commentboard.extensions.extensions import socketio


app = create_app()


if __name__ == "__main__":
    socketio.run(
        app,
        host="0.0.0.0",
        port=int(os.getenv("PORT", "3000")),
        allow_unsafe_werkzeug=True,
    )
