"""Tests del panel de administración."""
from unittest import mock

import pytest
from sqlalchemy.exc import OperationalError

from himlearning.extensions import db
from himlearning.models import Blog, User
from tests.helpers import signup, create_admin, login, create_blog


@pytest.fixture()
def admin_client(make_client):
    create_admin()
    admin = make_client()
    login(admin, "root@example.com", "rootpass")
    return admin


def test_admin_routes_reject_regular_users(client):
    signup(client)
    response = client.get("/admin/stats")
    assert response.status_code == 403
    assert client.get("/admin/users").status_code == 403


def test_admin_routes_require_auth(client):
    assert client.get("/admin/stats").status_code == 401


def test_stats_on_empty_store(admin_client):
    stats = admin_client.get("/admin/stats").get_json()
    assert stats == {"totalUsers": 0, "totalBlogs": 0, "totalComments": 0}


def test_stats_counts(admin_client, client, make_client):
    signup(client)
    first = create_blog(client)
    create_blog(client, title="Otro")
    other = make_client()
    signup(other, name="Beto", email="beto@example.com")
    other.post(f"/blogs/{first['id']}/comment", json={"content": "uno"})
    client.post(f"/blogs/{first['id']}/comment", json={"content": "dos"})

    stats = admin_client.get("/admin/stats").get_json()
    assert stats == {"totalUsers": 2, "totalBlogs": 2, "totalComments": 2}


def test_delete_user_cascades_blogs_and_comments(admin_client, client, make_client):
    target = signup(client).get_json()["user"]
    first = create_blog(client)
    second = create_blog(client, title="Segundo")

    other = make_client()
    signup(other, name="Beto", email="beto@example.com")
    own = create_blog(other, title="De Beto")
    other.post(f"/blogs/{first['id']}/comment", json={"content": "a"})
    other.post(f"/blogs/{second['id']}/comment", json={"content": "b"})
    client.post(f"/blogs/{own['id']}/comment", json={"content": "c"})

    before = admin_client.get("/admin/stats").get_json()
    response = admin_client.delete(f"/admin/users/{target['id']}")
    assert response.status_code == 200

    after = admin_client.get("/admin/stats").get_json()
    assert after["totalComments"] == before["totalComments"] - 2
    assert Blog.query.filter_by(author_id=target["id"]).count() == 0
    assert db.session.get(User, target["id"]) is None
    # los comentarios del usuario borrado en blogs ajenos se conservan
    assert db.session.get(Blog, own["id"]).comments_count == 1


def test_delete_admin_is_forbidden_without_mutations(admin_client):
    other_admin = create_admin(name="Otra", email="otra@example.com")
    with mock.patch("himlearning.services.accounts.commit") as mock_commit:
        response = admin_client.delete(f"/admin/users/{other_admin.id}")
    assert response.status_code == 403
    assert response.get_json()["message"] == "Cannot delete admin user"
    mock_commit.assert_not_called()
    assert db.session.get(User, other_admin.id) is not None


def test_delete_self_admin_is_forbidden(admin_client):
    me = admin_client.get("/auth/me").get_json()["user"]
    assert admin_client.delete(f"/admin/users/{me['id']}").status_code == 403


def test_delete_missing_user(admin_client):
    response = admin_client.delete("/admin/users/999")
    assert response.status_code == 404
    assert response.get_json()["message"] == "User not found"


def test_delete_user_store_failure(admin_client, client):
    target = signup(client).get_json()["user"]
    with mock.patch(
        "sqlalchemy.orm.Session.commit",
        side_effect=OperationalError("DELETE", {}, Exception("db down")),
    ):
        response = admin_client.delete(f"/admin/users/{target['id']}")
    assert response.status_code == 500
    assert response.get_json()["message"] == "Server error"
    assert "db down" in response.get_json()["error"]


def test_search_users(admin_client, client, make_client):
    signup(client)
    signup(make_client(), name="Beto", email="BETO@example.com")

    names = [u["name"] for u in admin_client.get("/admin/users?search=beto").get_json()]
    assert names == ["Beto"]

    everyone = admin_client.get("/admin/users").get_json()
    assert len(everyone) == 3
    assert all("password_hash" not in u for u in everyone)


def test_update_user_role_filter(admin_client, client):
    target = signup(client).get_json()["user"]

    ignored = admin_client.put(f"/admin/users/{target['id']}", json={"role": "superuser"})
    assert ignored.status_code == 200
    assert ignored.get_json()["user"]["role"] == "user"

    promoted = admin_client.put(f"/admin/users/{target['id']}", json={"role": "admin", "name": "Ana Admin"})
    assert promoted.get_json()["user"]["role"] == "admin"
    assert promoted.get_json()["user"]["name"] == "Ana Admin"


def test_reset_password(admin_client, client, make_client):
    target = signup(client).get_json()["user"]
    short = admin_client.put(f"/admin/users/{target['id']}/password", json={"newPassword": "123"})
    assert short.status_code == 400

    ok = admin_client.put(f"/admin/users/{target['id']}/password", json={"newPassword": "brandnew"})
    assert ok.status_code == 200
    assert login(make_client(), "ana@example.com", "brandnew").status_code == 200


def test_admin_blog_moderation(admin_client, client):
    signup(client)
    blog = create_blog(client)

    listed = admin_client.get("/admin/blogs").get_json()
    assert listed[0]["author"]["email"] == "ana@example.com"

    edited = admin_client.put(f"/admin/blogs/{blog['id']}", json={"title": "Moderado"})
    assert edited.get_json()["title"] == "Moderado"

    assert admin_client.delete(f"/admin/blogs/{blog['id']}").status_code == 200
    assert admin_client.delete(f"/admin/blogs/{blog['id']}").status_code == 404


def test_user_blogs(admin_client, client):
    target = signup(client).get_json()["user"]
    create_blog(client)
    blogs = admin_client.get(f"/admin/users/{target['id']}/blogs").get_json()
    assert len(blogs) == 1


def test_search_treats_wildcards_literally(admin_client, client, make_client):
    signup(client)
    signup(make_client(), name="Ana_Maria", email="ana_maria@example.com")

    underscored = admin_client.get("/admin/users?search=_").get_json()
    assert [u["name"] for u in underscored] == ["Ana_Maria"]
    assert admin_client.get("/admin/users?search=%25").get_json() == []


def test_update_user_rejects_non_string_fields(admin_client, client):
    target = signup(client).get_json()["user"]
    assert admin_client.put(f"/admin/users/{target['id']}", json={"email": ["x@example.com"]}).status_code == 400
    assert admin_client.put(f"/admin/users/{target['id']}", json={"name": 42}).status_code == 400
    assert db.session.get(User, target["id"]).name == "Ana"
