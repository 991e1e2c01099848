def empty_dataset():
    return {
        "users": [],
        "comments": [],
        "next_comment_id": 1,
        "next_user_id": 1,
    }


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _next_id(records, stored):
    ids = [r.get("id") for r in records if isinstance(r, dict)]
    highest = max((i for i in ids if _is_int(i)), default=0)
    if _is_int(stored) and stored > highest:
        return stored
    return highest + 1


def normalize_dataset(raw: dict) -> dict:
    users = raw.get("users")
    comments = raw.get("comments")
    users = users if isinstance(users, list) else []
    comments = comments if isinstance(comments, list) else []

    return {
        "users": users,
        "comments": comments,
        "next_comment_id": _next_id(comments, raw.get("next_comment_id")),
        "next_user_id": _next_id(users, raw.get("next_user_id")),
    }
