import logging

from flask import request
from flask_jwt_extended import decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from commentboard.extensions.extensions import socketio
from commentboard.services.broadcast_service import viewers


logger = logging.getLogger(__name__)

_registered = False


def _extract_access_token(auth):
    if isinstance(auth, dict):
        token = auth.get("token") or auth.get("access_token")
        if token:
            return token

    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1].strip()

    return request.args.get("token")


def register_socket_events():
    global _registered
    if _registered:
        return

    @socketio.on("connect")
    def handle_connect(auth=None):
        user_id = None
        token = _extract_access_token(auth)
        if token:
            try:
                claims = decode_token(token)
            except (JWTExtendedException, PyJWTError):
                logger.debug("Rejected viewer %s with invalid token", request.sid)
                return False
            user_id = claims.get("sub")

        viewers.join(request.sid, user_id)
        logger.debug("Viewer %s joined (user=%s)", request.sid, user_id)

    @socketio.on("disconnect")
    def handle_disconnect(reason=None):
        viewers.leave(request.sid)
        logger.debug("Viewer %s left", request.sid)

    _registered = True
