import logging
from datetime import datetime, timezone
from threading import Lock

from marshmallow.exceptions import ValidationError as MarshmallowValidationError

from commentboard.extensions.extensions import socketio
from commentboard.schemas.comment_schema import dump_tree


logger = logging.getLogger(__name__)

COMMENTS_UPDATE_EVENT = "comments:update"


class ViewerRegistry:
    """Connected Socket.IO clients that receive tree updates."""

    def __init__(self):
        self._viewers = {}
        self._lock = Lock()

    def join(self, sid, user_id=None):
        with self._lock:
            self._viewers[sid] = {
                "user_id": user_id,
                "connected_at": datetime.now(timezone.utc).isoformat(),
            }

    def leave(self, sid):
        with self._lock:
            self._viewers.pop(sid, None)

    def snapshot(self):
        with self._lock:
            return list(self._viewers)

    def clear(self):
        with self._lock:
            self._viewers.clear()

    def __len__(self):
        with self._lock:
            return len(self._viewers)


viewers = ViewerRegistry()


def publish_comments(tree):
    """Push ``{comments: tree}`` to every viewer, requester included.

    Best effort: a failed delivery is logged and skipped, never retried.
    """
    try:
        payload = {"comments": dump_tree(tree)}
    except (MarshmallowValidationError, TypeError, ValueError):
        logger.error("Failed to serialize comment tree for broadcast", exc_info=True)
        return 0

    delivered = 0

    for sid in viewers.snapshot():
        try:
            socketio.emit(COMMENTS_UPDATE_EVENT, payload, to=sid)
        except Exception:
            logger.warning("Failed to deliver %s to %s", COMMENTS_UPDATE_EVENT, sid, exc_info=True)
            continue
        delivered += 1

    logger.debug("Published comment tree to %d viewer(s)", delivered)
    return delivered
