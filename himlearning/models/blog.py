import uuid
from datetime import datetime
from himlearning.extensions import db

PLACEHOLDER_IMAGE = "https://via.placeholder.com/600x400?text=Blog+Image"


class Blog(db.Model):
    __tablename__ = "blogs"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    image = db.Column(db.String, nullable=False, default=PLACEHOLDER_IMAGE)

    # 👤 Autor; el nombre es una copia tomada al crear el blog
    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    author_name = db.Column(db.String(150), nullable=False)
    author = db.relationship("User", lazy="joined")

    # ❤️ ids de usuarios que dieron like, sin repetidos
    likes = db.Column(db.JSON, nullable=False, default=list)

    # 💬 Comentarios embebidos en el documento del blog
    comments = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def likes_count(self):
        return len(self.likes or [])

    @property
    def comments_count(self):
        return len(self.comments or [])

    def find_comment(self, comment_id):
        for comment in self.comments or []:
            if comment.get("id") == comment_id:
                return comment
        return None

    def to_dict(self, include_email=False):
        author = {"id": self.author_id, "name": self.author.name if self.author else self.author_name}
        if include_email and self.author:
            author["email"] = self.author.email
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "author": author,
            "authorName": self.author_name,
            "likes": list(self.likes or []),
            "likesCount": self.likes_count,
            "comments": list(self.comments or []),
            "commentsCount": self.comments_count,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Blog {self.title}>"


def new_comment(user, content):
    """Comentario embebido con el nombre del usuario congelado."""
    now = datetime.utcnow().isoformat()
    return {
        "id": uuid.uuid4().hex,
        "user": user.id,
        "userName": user.name,
        "content": content,
        "createdAt": now,
        "updatedAt": now,
    }
