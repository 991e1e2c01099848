import logging
from contextlib import contextmanager
from datetime import datetime, timezone

from commentboard.errors import AuthError, ForbiddenError, NotFoundError, ValidationError
from commentboard.extensions.json_store import get_store
from commentboard.repositories import comment_repository, user_repository
from commentboard.services import broadcast_service


logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def _created_at_key(node):
    raw = node.get("created_at")
    if isinstance(raw, str) and raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        created_at = datetime.fromisoformat(raw)
    except (TypeError, ValueError):
        return _OLDEST, node.get("id") or 0
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at, node.get("id") or 0


def build_comment_tree(comments):
    """Nest a flat comment list into threads.

    Roots are ordered newest first; replies keep list order (oldest first).
    Comments whose parent is missing are dropped. The input is not modified.
    """
    comment_map = {c["id"]: {**c, "replies": []} for c in comments}
    roots = []

    for comment in comments:
        node = comment_map[comment["id"]]
        pid = comment.get("parent_id")
        if pid is None:
            roots.append(node)
            continue
        parent = comment_map.get(pid)
        if parent is not None:
            parent["replies"].append(node)

    roots.sort(key=_created_at_key, reverse=True)
    return roots


def list_comments():
    dataset = get_store().load()
    return build_comment_tree(dataset["comments"])


def parse_comment_id(value, field="commentId"):
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        try:
            return int(value.strip())
        except ValueError:
            raise ValidationError(f"Invalid {field}")
    raise ValidationError(f"Invalid {field}")


def _clean_content(content):
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("Empty content")
    return content.strip()


@contextmanager
def mutation():
    """Critical section for one load-mutate-save cycle.

    The rebuilt tree is published before the lock is released so broadcasts
    go out in the same order as the writes.
    """
    store = get_store()
    with store.lock:
        with store.transaction() as dataset:
            yield dataset
        broadcast_service.publish_comments(build_comment_tree(dataset["comments"]))


def _get_owned_comment(dataset, identity, comment_id):
    comment = comment_repository.get_by_id(dataset, comment_id)
    if not comment:
        raise NotFoundError("Comment not found")
    if comment.get("user_id") != identity["user_id"]:
        raise ForbiddenError("Not allowed")
    return comment


def add_comment(identity, content, parent_id=None):
    content = _clean_content(content)
    if parent_id is not None:
        parent_id = parse_comment_id(parent_id, field="parentId")

    with mutation() as dataset:
        user = user_repository.get_by_id(dataset, identity["user_id"])
        if not user:
            raise AuthError("User not found")

        if parent_id is not None and not comment_repository.get_by_id(dataset, parent_id):
            raise ValidationError("Invalid parent comment")

        comment = comment_repository.create_comment(
            dataset,
            author=user,
            content=content,
            created_at=_utcnow(),
            parent_id=parent_id,
        )

    logger.info("User %s created comment %s", user["id"], comment["id"])
    return comment


def edit_comment(identity, comment_id, content):
    content = _clean_content(content)

    with mutation() as dataset:
        comment = _get_owned_comment(dataset, identity, comment_id)
        comment["content"] = content
        comment["updated_at"] = _utcnow()

    logger.info("User %s edited comment %s", identity["user_id"], comment_id)
    return comment


def delete_comment(identity, comment_id):
    with mutation() as dataset:
        _get_owned_comment(dataset, identity, comment_id)
        removed = comment_repository.collect_thread_ids(dataset["comments"], comment_id)
        comment_repository.delete_comments(dataset, removed)

    logger.info(
        "User %s deleted comment %s (%d removed)",
        identity["user_id"],
        comment_id,
        len(removed),
    )
    return removed
