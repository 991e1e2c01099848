REACTION_KINDS = ("like", "love", "haha", "wow", "sad", "angry")


def empty_reactions():
    return {kind: [] for kind in REACTION_KINDS}


def new_comment(comment_id, author, content, created_at, parent_id=None):
    # author name and avatar are a snapshot; later profile changes do not apply
    return {
        "id": comment_id,
        "user_id": author["id"],
        "user_name": author["name"],
        "avatar": author.get("avatar_url"),
        "content": content,
        "created_at": created_at,
        "updated_at": None,
        "parent_id": parent_id,
        "reactions": empty_reactions(),
    }
