# himlearning/routes/blog_routes.py
from flask import Blueprint, request, jsonify, g

from himlearning.auth.decorators import jwt_required_local
from himlearning.services import blogs
from himlearning.utils.uploads import upload_blog_image
from himlearning.utils.body import json_body

blog_bp = Blueprint("blogs", __name__)


# 🟣 Listar blogs (más recientes primero)
@blog_bp.route("", methods=["GET"])
def get_blogs():
    return jsonify([b.to_dict() for b in blogs.list_blogs()])


# 🔵 Ver un solo blog
@blog_bp.route("/<int:id>", methods=["GET"])
def get_blog(id):
    return jsonify(blogs.get_blog_or_404(id).to_dict())


# 🟢 Crear un nuevo blog (multipart con imagen opcional, o JSON)
@blog_bp.route("", methods=["POST"])
@jwt_required_local
def create_blog():
    data = request.form if request.form else json_body()

    image_url = None
    file = request.files.get("image")
    if file is not None and file.filename:
        image_url = upload_blog_image(file)

    blog = blogs.create_blog(g.current_user, data.get("title"), data.get("description"), image_url)
    return jsonify(blog.to_dict()), 201


# 🟡 Editar blog (solo dueño o admin)
@blog_bp.route("/<int:id>", methods=["PUT"])
@jwt_required_local
def edit_blog(id):
    data = json_body()
    blog = blogs.edit_blog(g.current_user, id, data.get("title"), data.get("description"))
    return jsonify(blog.to_dict())


# 🔴 Borrar blog (dueño o admin)
@blog_bp.route("/<int:id>", methods=["DELETE"])
@jwt_required_local
def delete_blog(id):
    blogs.delete_blog(g.current_user, id)
    return jsonify({"message": "Blog deleted successfully"})


@blog_bp.route("/<int:id>/like", methods=["POST"])
@jwt_required_local
def like_blog(id):
    blog = blogs.toggle_like(g.current_user, id)
    return jsonify({"likes": blog.likes, "likesCount": blog.likes_count})


@blog_bp.route("/<int:id>/comment", methods=["POST"])
@jwt_required_local
def add_comment(id):
    data = json_body()
    blog = blogs.add_comment(g.current_user, id, data.get("content"))
    return jsonify(blog.comments)


@blog_bp.route("/<int:blog_id>/comment/<string:comment_id>", methods=["DELETE"])
@jwt_required_local
def delete_comment(blog_id, comment_id):
    blogs.delete_comment(g.current_user, blog_id, comment_id)
    return jsonify({"message": "Comment deleted successfully"})
