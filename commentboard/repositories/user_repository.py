from commentboard.models.user_model import new_user


def get_by_id(dataset, user_id):
    for user in dataset["users"]:
        if user.get("id") == user_id:
            return user
    return None


def get_by_email(dataset, email: str):
    wanted = email.lower()
    for user in dataset["users"]:
        if str(user.get("email", "")).lower() == wanted:
            return user
    return None


def create_user(dataset, name, email, password_hash, avatar_url):
    user = new_user(
        user_id=dataset["next_user_id"],
        name=name,
        email=email,
        password_hash=password_hash,
        avatar_url=avatar_url,
    )
    dataset["next_user_id"] += 1
    dataset["users"].append(user)
    return user
