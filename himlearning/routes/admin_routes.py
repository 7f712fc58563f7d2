# himlearning/routes/admin_routes.py
from flask import Blueprint, request, jsonify

from himlearning.auth.decorators import admin_required
from himlearning.services import accounts, blogs
from himlearning.utils.body import json_body

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/blogs", methods=["GET"])
@admin_required
def get_all_blogs():
    return jsonify([b.to_dict(include_email=True) for b in blogs.list_blogs()])


@admin_bp.route("/blogs/<int:id>", methods=["PUT"])
@admin_required
def update_blog(id):
    data = json_body()
    blog = blogs.update_blog(blogs.get_blog_or_404(id), data.get("title"), data.get("description"))
    return jsonify(blog.to_dict())


@admin_bp.route("/blogs/<int:id>", methods=["DELETE"])
@admin_required
def delete_blog(id):
    blogs.remove_blog(blogs.get_blog_or_404(id))
    return jsonify({"message": "Blog deleted successfully"})


# 👥 Usuarios, con búsqueda opcional por nombre o email
@admin_bp.route("/users", methods=["GET"])
@admin_required
def get_users():
    users = accounts.search_users(request.args.get("search", type=str))
    return jsonify([u.to_dict() for u in users])


@admin_bp.route("/users/<int:id>", methods=["PUT"])
@admin_required
def update_user(id):
    data = json_body()
    user = accounts.admin_update_user(id, data)
    return jsonify({"message": "User updated successfully", "user": user.to_dict(profile=False)})


@admin_bp.route("/users/<int:id>/password", methods=["PUT"])
@admin_required
def reset_password(id):
    data = json_body()
    accounts.reset_password(id, data.get("newPassword"))
    return jsonify({"message": "Password reset successfully"})


@admin_bp.route("/users/<int:id>", methods=["DELETE"])
@admin_required
def delete_user(id):
    accounts.delete_user(id)
    return jsonify({"message": "User and their blogs deleted successfully"})


@admin_bp.route("/users/<int:id>/blogs", methods=["GET"])
@admin_required
def get_user_blogs(id):
    return jsonify([b.to_dict() for b in blogs.list_blogs(author_id=id)])


@admin_bp.route("/stats", methods=["GET"])
@admin_required
def stats():
    return jsonify(accounts.dashboard_stats())
