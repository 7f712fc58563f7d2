from himlearning.extensions import db
from himlearning.models import User, ROLE_ADMIN


def signup(client, name="Ana", email="ana@example.com", password="secret1"):
    return client.post("/auth/signup", json={"name": name, "email": email, "password": password})


def login(client, email, password):
    return client.post("/auth/login", json={"email": email, "password": password})


def create_admin(name="Root", email="root@example.com", password="rootpass"):
    admin = User(name=name, email=email, role=ROLE_ADMIN)
    admin.set_password(password)
    db.session.add(admin)
    db.session.commit()
    return admin


def create_blog(client, title="Primer post", description="Contenido"):
    response = client.post("/blogs", json={"title": title, "description": description})
    assert response.status_code == 201
    return response.get_json()
