from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from himlearning.extensions import db

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


class User(db.Model):
    __tablename__ = "users"
    # SQLite no reutiliza ids de usuarios borrados
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(120), nullable=False, unique=True)
    password_hash = db.Column(db.String(256), nullable=False)

    role = db.Column(db.String(20), nullable=False, default=ROLE_USER)  # 'user' o 'admin'
    bio = db.Column(db.Text, nullable=True)
    avatar = db.Column(db.String, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not password or not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def to_dict(self, profile=True):
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
        }
        if profile:
            data["bio"] = self.bio
            data["avatar"] = self.avatar
            data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data

    def __repr__(self):
        return f"<User {self.email}>"
