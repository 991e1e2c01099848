from collections import deque

from commentboard.models.comment_model import new_comment


def get_by_id(dataset, comment_id):
    for comment in dataset["comments"]:
        if comment.get("id") == comment_id:
            return comment
    return None


def create_comment(dataset, author, content, created_at, parent_id=None):
    comment = new_comment(
        comment_id=dataset["next_comment_id"],
        author=author,
        content=content,
        created_at=created_at,
        parent_id=parent_id,
    )
    dataset["next_comment_id"] += 1
    dataset["comments"].append(comment)
    return comment


def collect_thread_ids(comments, root_id):
    """Return ``root_id`` plus the ids of every transitive reply.

    Walks a parent -> children map with a visited set, so cyclic
    ``parent_id`` chains terminate.
    """
    children = {}
    for comment in comments:
        pid = comment.get("parent_id")
        if pid is not None:
            children.setdefault(pid, []).append(comment.get("id"))

    visited = set()
    queue = deque([root_id])
    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        queue.extend(children.get(current, ()))

    return visited


def delete_comments(dataset, comment_ids):
    dataset["comments"] = [
        c for c in dataset["comments"] if c.get("id") not in comment_ids
    ]
