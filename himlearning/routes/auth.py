# himlearning/routes/auth.py
from flask import Blueprint, request, jsonify, g, current_app
from werkzeug.exceptions import RequestEntityTooLarge

from himlearning.auth.decorators import jwt_required_local
from himlearning.auth.tokens import issue_token, set_auth_cookie, clear_auth_cookie
from himlearning.services import accounts
from himlearning.utils.uploads import upload_avatar, AVATAR_ERROR
from himlearning.utils.body import json_body
from himlearning.errors import ValidationError

auth_bp = Blueprint("auth", __name__)


def _session_response(user, message, status=200):
    response = jsonify({"message": message, "user": user.to_dict(profile=False)})
    response.status_code = status
    return set_auth_cookie(response, issue_token(user))


@auth_bp.route("/signup", methods=["POST"])
def signup():
    data = json_body()
    user = accounts.signup(data.get("name"), data.get("email"), data.get("password"))
    return _session_response(user, "User created successfully", 201)


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    user = accounts.authenticate(data.get("email"), data.get("password"))
    current_app.logger.info("✅ Login exitoso: %s", user.id)
    return _session_response(user, "Login successful")


@auth_bp.route("/admin-login", methods=["POST"])
def admin_login():
    data = json_body()
    admin = accounts.admin_login(data.get("email"), data.get("password"))
    return _session_response(admin, "Admin login successful")


@auth_bp.route("/logout", methods=["POST"])
def logout():
    return clear_auth_cookie(jsonify({"message": "Logged out successfully"}))


@auth_bp.route("/me", methods=["GET"])
@jwt_required_local
def me():
    return jsonify({"user": g.current_user.to_dict()})


@auth_bp.route("/me", methods=["PUT"])
@jwt_required_local
def update_me():
    data = json_body()
    user = accounts.update_profile(g.current_user, data)
    return jsonify({"message": "Profile updated successfully", "user": user.to_dict()})


@auth_bp.route("/me/password", methods=["PUT"])
@jwt_required_local
def change_password():
    data = json_body()
    accounts.change_password(g.current_user, data.get("currentPassword"), data.get("newPassword"))
    return jsonify({"message": "Password updated successfully"})


@auth_bp.route("/me/avatar", methods=["POST"])
@jwt_required_local
def avatar():
    try:
        file = request.files.get("avatar")
    except RequestEntityTooLarge:
        # El límite global del body es el de imágenes de blog; para avatares es 20 KB
        raise ValidationError(AVATAR_ERROR)
    url = upload_avatar(file)
    return jsonify({"avatar": url})
