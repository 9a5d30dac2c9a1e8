"""Full-stack flow: real handlers, SQLite, local disk storage.

Only the password hasher (speed) and the message bus client are replaced.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from snapix.application.auth.ports import PasswordHasher
from snapix.bootstrap import build_container
from snapix.config.settings import Settings
from snapix.main import create_app

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class PlainHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"plain:{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"plain:{password}"


@pytest.fixture
def notification_client():
    return AsyncMock()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        node_env="test",
        database_url="sqlite+aiosqlite:///:memory:",
        storage_root=str(tmp_path),
        storage_public_url="http://testserver/static",
    )


@pytest.fixture
def client(settings, notification_client):
    def container_factory(s):
        engine = create_async_engine(s.database_url, poolclass=StaticPool)
        return build_container(
            s,
            engine=engine,
            notification_client=notification_client,
            hasher=PlainHasher(),
        )

    app = create_app(settings, container_factory=container_factory)
    with TestClient(app) as client:
        yield client


def emitted_code(notification_client, routing_name):
    for call in reversed(notification_client.emit.await_args_list):
        routing_key, payload = call.args
        if routing_key.name == routing_name:
            return payload["code"]
    raise AssertionError(f"{routing_name} was not emitted")


def register_and_login(client, notification_client, username="neo_1999", email="neo@zion.io"):
    response = client.post(
        "/auth/registration",
        json={"username": username, "email": email, "password": "secret1"},
    )
    assert response.status_code == 204

    code = emitted_code(notification_client, "email-notification.confirmation")
    assert client.post("/auth/registration-confirmation", json={"code": code}).status_code == 204

    response = client.post("/auth/login", json={"email": email, "password": "secret1"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


class TestFullFlow:
    """Registration through posting against real adapters."""

    def test_unconfirmed_user_cannot_log_in(self, client, notification_client):
        client.post(
            "/auth/registration",
            json={"username": "neo_1999", "email": "neo@zion.io", "password": "secret1"},
        )

        response = client.post("/auth/login", json={"email": "neo@zion.io", "password": "secret1"})

        assert response.status_code == 401
        assert response.json()["message"] == "Email is not confirmed"

    def test_duplicate_registration(self, client, notification_client):
        payload = {"username": "neo_1999", "email": "neo@zion.io", "password": "secret1"}
        client.post("/auth/registration", json=payload)

        response = client.post("/auth/registration", json=payload)

        assert response.status_code == 400
        assert notification_client.emit.await_count == 1

    def test_post_lifecycle(self, client, notification_client, tmp_path):
        """Test: Upload image, create, read, delete; the file goes with the post."""
        # Arrange
        headers = register_and_login(client, notification_client)

        # Act: upload and create
        image = client.post(
            "/posts/image", headers=headers, files={"file": ("cat.png", PNG, "image/png")}
        ).json()
        created = client.post(
            "/posts", headers=headers, json={"content": "hello", "image_id": image["id"]}
        )

        # Assert
        assert created.status_code == 201
        post = created.json()
        assert (tmp_path / image["key"]).read_bytes() == PNG
        assert client.get(f"/static/{image['key']}").content == PNG
        assert client.get(f"/posts/{post['id']}").json()["content"] == "hello"

        # Act: delete
        assert client.delete(f"/posts/{post['id']}", headers=headers).status_code == 204

        # Assert
        assert client.get(f"/posts/{post['id']}").status_code == 404
        assert not (tmp_path / image["key"]).exists()

    def test_create_post_with_unknown_image(self, client, notification_client):
        headers = register_and_login(client, notification_client)

        response = client.post("/posts", headers=headers, json={"image_id": "0" * 32})

        assert response.status_code == 404

    def test_image_backs_a_single_post(self, client, notification_client, tmp_path):
        """Test: A second post on the same image is rejected; the first stays deletable."""
        # Arrange
        headers = register_and_login(client, notification_client)
        image = client.post(
            "/posts/image", headers=headers, files={"file": ("cat.png", PNG, "image/png")}
        ).json()
        first = client.post("/posts", headers=headers, json={"image_id": image["id"]})

        # Act
        second = client.post("/posts", headers=headers, json={"image_id": image["id"]})

        # Assert
        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json()["error"] == "BadRequestError"
        assert client.delete(f"/posts/{first.json()['id']}", headers=headers).status_code == 204
        assert not (tmp_path / image["key"]).exists()

    def test_post_on_another_users_image(self, client, notification_client):
        """Test: Only the uploader can attach an image; their post stays deletable."""
        # Arrange
        owner = register_and_login(client, notification_client)
        other = register_and_login(client, notification_client, "trinity", "trinity@zion.io")
        image = client.post(
            "/posts/image", headers=owner, files={"file": ("cat.png", PNG, "image/png")}
        ).json()

        # Act
        response = client.post("/posts", headers=other, json={"image_id": image["id"]})

        # Assert
        assert response.status_code == 403
        assert response.json()["error"] == "ForbiddenError"
        post = client.post("/posts", headers=owner, json={"image_id": image["id"]}).json()
        assert client.delete(f"/posts/{post['id']}", headers=owner).status_code == 204

    def test_avatar_replace_and_delete(self, client, notification_client, tmp_path):
        """Test: A second upload removes the first object; delete leaves nothing."""
        # Arrange
        headers = register_and_login(client, notification_client)

        # Act
        first = client.post(
            "/users/profile/avatar", headers=headers, files={"file": ("a.png", PNG, "image/png")}
        ).json()
        second = client.post(
            "/users/profile/avatar", headers=headers, files={"file": ("b.png", PNG, "image/png")}
        ).json()
        current = client.get("/users/profile/avatar", headers=headers).json()

        # Assert
        assert current["id"] == second["id"] != first["id"]
        assert len(list(tmp_path.rglob("*.png"))) == 1

        assert client.delete("/users/profile/avatar", headers=headers).status_code == 204
        assert client.get("/users/profile/avatar", headers=headers).status_code == 404
        assert client.delete("/users/profile/avatar", headers=headers).status_code == 400
        assert list(tmp_path.rglob("*.png")) == []

    def test_profile_and_count(self, client, notification_client):
        headers = register_and_login(client, notification_client)

        response = client.put(
            "/users/profile", headers=headers, json={"first_name": "Thomas", "city": "Capital City"}
        )

        assert response.status_code == 200
        assert client.get("/users/profile", headers=headers).json()["city"] == "Capital City"
        assert client.get("/users/count-register-users").json() == 1

    def test_password_recovery(self, client, notification_client):
        register_and_login(client, notification_client)

        assert client.post("/auth/password-recovery", json={"email": "neo@zion.io"}).status_code == 204
        code = emitted_code(notification_client, "email-notification.recovery")
        response = client.post(
            "/auth/new-password", json={"recovery_code": code, "new_password": "better1"}
        )

        assert response.status_code == 204
        old = client.post("/auth/login", json={"email": "neo@zion.io", "password": "secret1"})
        new = client.post("/auth/login", json={"email": "neo@zion.io", "password": "better1"})
        assert old.status_code == 401
        assert new.status_code == 200

    def test_refresh_token(self, client, notification_client):
        register_and_login(client, notification_client)
        pair = client.post("/auth/login", json={"email": "neo@zion.io", "password": "secret1"}).json()

        response = client.post("/auth/refresh-token", json={"refresh_token": pair["refresh_token"]})
        rejected = client.post("/auth/refresh-token", json={"refresh_token": pair["access_token"]})

        assert response.status_code == 200
        assert rejected.status_code == 401
