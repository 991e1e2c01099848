import logging
from urllib.parse import quote

from flask import current_app
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt,
    get_jwt_identity,
)
from werkzeug.security import check_password_hash, generate_password_hash

from commentboard.errors import AuthError, ValidationError
from commentboard.extensions.json_store import get_store
from commentboard.repositories import user_repository
from commentboard.schemas.user_schema import UserResponseSchema


logger = logging.getLogger(__name__)


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


def _build_avatar_url(email: str) -> str:
    template = current_app.config["AVATAR_URL_TEMPLATE"]
    return template.format(email=quote(email, safe=""))


def _issue_tokens(user):
    identity = str(user["id"])
    claims = {"name": user["name"], "email": user["email"]}
    return {
        "user": UserResponseSchema().dump(user),
        "token": create_access_token(identity=identity, additional_claims=claims),
        "refreshToken": create_refresh_token(identity=identity, additional_claims=claims),
    }


def register(name, email, password):
    if (
        not _require_non_empty_string(name)
        or not _require_non_empty_string(email)
        or not _require_non_empty_string(password)
    ):
        raise ValidationError("name, email, password required")

    name = name.strip()
    email = email.strip()

    with get_store().transaction() as dataset:
        if user_repository.get_by_email(dataset, email):
            raise ValidationError("Email already registered")

        user = user_repository.create_user(
            dataset,
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            avatar_url=_build_avatar_url(email),
        )

    logger.info("Registered user %s", user["id"])
    return _issue_tokens(user)


def login(email, password):
    if not _require_non_empty_string(email) or not _require_non_empty_string(password):
        raise ValidationError("email and password required")

    dataset = get_store().load()
    user = user_repository.get_by_email(dataset, email.strip())
    if not user or not check_password_hash(user.get("password_hash", ""), password):
        raise AuthError("Invalid credentials")

    return _issue_tokens(user)


def refresh_access_token():
    claims = get_jwt()
    return {
        "token": create_access_token(
            identity=get_jwt_identity(),
            additional_claims={"name": claims.get("name"), "email": claims.get("email")},
        )
    }


def get_current_identity():
    """Identity of the caller of a ``@jwt_required`` view as ``{user_id, name}``."""
    try:
        user_id = int(get_jwt_identity())
    except (TypeError, ValueError):
        raise AuthError("Invalid token")

    return {"user_id": user_id, "name": get_jwt().get("name")}
