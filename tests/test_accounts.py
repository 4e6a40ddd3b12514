"""
Tests for account endpoints: listing, lookup, login and image updates.
"""
import pytest

from muro.core.db.tables.account import Account


class TestAccountRetrieval:
    """Tests for reading accounts."""

    def test_list_accounts(self, client, test_account, hashed_account):
        response = client.get("/usuarios")

        assert response.status_code == 200
        data = response.json()
        assert [a["id"] for a in data] == [test_account["id"], hashed_account["id"]]
        assert data[0]["correo"] == test_account["correo"]

    def test_credentials_never_exposed(self, client, test_account):
        for response in (client.get("/usuarios"), client.get(f"/usuario?id={test_account['id']}")):
            assert response.status_code == 200
            assert all("clave" not in account for account in response.json())

    def test_get_account(self, client, test_account):
        response = client.get("/usuario", params={"id": test_account["id"]})

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["id"] == test_account["id"]
        assert data[0]["nombre"] == "Ana"

    def test_get_missing_account(self, client):
        response = client.get("/usuario", params={"id": 404})

        assert response.status_code == 200
        assert response.json() == []

    def test_get_account_invalid_id(self, client):
        response = client.get("/usuario", params={"id": "abc"})

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestLogin:
    """Tests for the credential check."""

    def test_login_plaintext_credential(self, client, test_account):
        response = client.post(
            "/login",
            json={"correo": test_account["correo"], "clave": test_account["clave"]},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "user": {"id": test_account["id"], "correo": test_account["correo"]},
        }

    def test_login_hashed_credential(self, client, hashed_account):
        response = client.post(
            "/login",
            json={"correo": hashed_account["correo"], "clave": hashed_account["clave"]},
        )

        assert response.status_code == 200
        assert response.json()["user"]["id"] == hashed_account["id"]

    def test_login_wrong_credential(self, client, test_account):
        response = client.post(
            "/login",
            json={"correo": test_account["correo"], "clave": "incorrecta"},
        )

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Credenciales incorrectas"}

    def test_login_numeric_credential(self, client, db_session):
        db_session.add(Account(nombre="Pin", correo="pin@example.com", clave="1234"))
        db_session.commit()

        response = client.post("/login", json={"correo": "pin@example.com", "clave": 1234})

        assert response.status_code == 200
        assert response.json()["user"]["correo"] == "pin@example.com"

    def test_login_unknown_email(self, client):
        response = client.post("/login", json={"correo": "nadie@example.com", "clave": "x"})

        assert response.status_code == 401

    @pytest.mark.parametrize(
        "payload",
        [
            {"correo": "ana@example.com"},
            {"clave": "secreta"},
            {"correo": "", "clave": "secreta"},
            {"correo": "ana@example.com", "clave": ""},
        ],
    )
    def test_login_missing_fields(self, client, test_account, payload):
        response = client.post("/login", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Correo y clave son requeridos"


class TestAccountImages:
    """Tests for profile and cover image uploads."""

    @pytest.mark.parametrize(
        "path, field, message",
        [
            ("/cambiarPerfil", "foto_perfil", "Foto perfil subida correctamente"),
            ("/cambiarPortada", "img_portada", "Foto portada subida correctamente"),
        ],
    )
    def test_update_image(self, client, image_file, test_account, stored_files, path, field, message):
        response = client.post(
            path,
            files=image_file("retrato.JPG", b"\xff\xd8\xff\xe0" + b"\x00" * 32, "image/jpeg"),
            data={"idUser": str(test_account["id"])},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == message
        assert body["data"]["id"] == test_account["id"]
        assert body["data"][field].startswith("/uploads/")
        assert body["data"][field].endswith(".jpg")
        assert len(stored_files()) == 1

        # The new reference is persisted
        account = client.get("/usuario", params={"id": test_account["id"]}).json()[0]
        assert account[field] == body["data"][field]

    @pytest.mark.parametrize("path", ["/cambiarPerfil", "/cambiarPortada"])
    def test_update_image_unknown_account(self, client, image_file, stored_files, path):
        response = client.post(path, files=image_file(), data={"idUser": "999"})

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Usuario no encontrado"}
        assert stored_files() == []

    @pytest.mark.parametrize("path", ["/cambiarPerfil", "/cambiarPortada"])
    def test_update_image_without_file(self, client, test_account, path):
        response = client.post(path, data={"idUser": str(test_account["id"])})

        assert response.status_code == 400

    @pytest.mark.parametrize("path", ["/cambiarPerfil", "/cambiarPortada"])
    def test_update_image_without_owner(self, client, image_file, stored_files, path):
        response = client.post(path, files=image_file())

        assert response.status_code == 400
        assert response.json()["message"] == "Se requiere el id_usuario"
        assert stored_files() == []
