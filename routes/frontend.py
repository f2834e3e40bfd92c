from flask import Blueprint, jsonify
from config import FRONTEND_CONFIG

frontend_bp = Blueprint("frontend", __name__)

# Public: the frontend reads its API/socket URLs from here at runtime
@frontend_bp.route("/frontend-config", methods=["GET"])
def get_frontend_config():
    return jsonify(FRONTEND_CONFIG), 200
