from flask import Blueprint, request, jsonify, make_response, g, current_app
from models.users import User
from models import db
from utils.tokens import get_jwt_token
from utils.utils import login_required

auth_bp = Blueprint('auth_bp', __name__)

# Login
@auth_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        return jsonify({"error": "Email and password are required"}), 400

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        return jsonify({"error": "Invalid credentials"}), 401
    if not user.is_active:
        return jsonify({"error": "Account is inactive"}), 403

    token = get_jwt_token({
        "user_id": user.id,
        "email": user.email,
        "role": user.role
    })

    response = make_response(jsonify({
        "message": "Login successful",
        "user": {
            "id": user.id,
            "role": user.role,
            "name": user.full_name,
            "email": user.email
        }
    }))

    response.set_cookie(
        "access_token", token,
        httponly=True,
        secure=current_app.config["SESSION_COOKIE_SECURE"],
        samesite=current_app.config["SESSION_COOKIE_SAMESITE"],
        path="/",
        max_age=int(current_app.config["ACCESS_TOKEN_LIFETIME"].total_seconds())
    )

    return response

# Logout
@auth_bp.route('/logout', methods=['POST'])
def logout():
    response = make_response(jsonify({"message": "Logout successful"}))

    response.set_cookie(
        "access_token", "",
        httponly=True,
        secure=current_app.config["SESSION_COOKIE_SECURE"],
        samesite=current_app.config["SESSION_COOKIE_SAMESITE"],
        path="/",
        max_age=0
    )

    return response

# Current user
@auth_bp.route('/me', methods=['GET'])
@login_required
def me():
    user = db.session.get(User, g.user.get("user_id"))
    if not user:
        return jsonify({"error": "User not found"}), 404

    return jsonify({"user": user.to_dict()}), 200
