import logging

from commentboard.errors import NotFoundError, ValidationError
from commentboard.models.comment_model import REACTION_KINDS
from commentboard.repositories import comment_repository
from commentboard.services.comment_service import mutation, parse_comment_id


logger = logging.getLogger(__name__)


def toggle_reaction(identity, comment_id, reaction):
    """Add the caller to ``reaction`` on a comment, or remove them if present.

    Kinds are independent: holding ``like`` does not affect ``love``.
    """
    if reaction not in REACTION_KINDS:
        raise ValidationError("Invalid reaction")
    comment_id = parse_comment_id(comment_id)
    user_id = identity["user_id"]

    with mutation() as dataset:
        comment = comment_repository.get_by_id(dataset, comment_id)
        if not comment:
            raise NotFoundError("Comment not found")

        reactions = comment.setdefault("reactions", {})
        members = reactions.setdefault(reaction, [])
        if user_id in members:
            members.remove(user_id)
            added = False
        else:
            members.append(user_id)
            added = True

    logger.info(
        "User %s %s %s on comment %s",
        user_id,
        "added" if added else "removed",
        reaction,
        comment_id,
    )
    return reactions
