import datetime
from flask import current_app
import jwt


def get_jwt_token(user_data):
    """Generate JWT token with user payload"""
    if not user_data:
        raise ValueError("User data must be provided to generate JWT token")

    expiration = datetime.datetime.now(datetime.timezone.utc) + current_app.config["ACCESS_TOKEN_LIFETIME"]
    payload = {"exp": expiration, **user_data}

    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")

def decode_jwt(token):
    """Decode and validate JWT token. Returns None when it cannot be trusted."""
    try:
        return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])
    except jwt.ExpiredSignatureError:
        print("Token Expired")
        return None
    except jwt.InvalidTokenError:
        print("Invalid Token Provided")
        return None
