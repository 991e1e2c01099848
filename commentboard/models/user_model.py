def new_user(user_id, name, email, password_hash, avatar_url):
    return {
        "id": user_id,
        "name": name,
        "email": email,
        "password_hash": password_hash,
        "avatar_url": avatar_url,
    }
