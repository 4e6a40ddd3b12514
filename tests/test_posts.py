"""
Tests for post creation and listing.
"""


class TestPostCreation:
    """Tests for creating posts."""

    def test_create_text_post(self, client, test_account, stored_files):
        response = client.post(
            "/insertarPost",
            data={"txt": "Mi primer post", "id": str(test_account["id"]), "nombreUser": "Ana"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Post creado exitosamente"
        assert body["data"]["contenido"] == "Mi primer post"
        assert body["data"]["autor_id"] == test_account["id"]
        assert body["data"]["nombre"] == "Ana"
        assert body["data"]["imagen_url"] is None
        assert body["data"]["likes_count"] == 0
        assert stored_files() == []

    def test_create_post_with_image(self, client, image_file, test_account, stored_files):
        response = client.post(
            "/insertarPost",
            files=image_file("paisaje.webp", b"RIFF\x00\x00\x00\x00WEBPVP8 " + b"\x00" * 16, "image/webp"),
            data={"txt": "Con foto", "id": str(test_account["id"]), "nombreUser": "Ana"},
        )

        assert response.status_code == 200
        image_url = response.json()["data"]["imagen_url"]
        assert image_url.startswith("/uploads/")
        assert image_url.endswith(".webp")
        assert stored_files() == [image_url.rsplit("/", 1)[1]]

    def test_create_post_unknown_author(self, client):
        """Posts are inserted without checking the author."""
        response = client.post(
            "/insertarPost",
            data={"txt": "Sin cuenta", "id": "12345", "nombreUser": "Nadie"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["autor_id"] == 12345

    def test_create_post_rejects_bad_image(self, client, image_file, stored_files):
        response = client.post(
            "/insertarPost",
            files=image_file("doc.pdf", b"%PDF-1.4\n", "application/pdf"),
            data={"txt": "Adjunto", "id": "1", "nombreUser": "Ana"},
        )

        assert response.status_code == 415
        assert stored_files() == []

        # Nothing was inserted either
        assert client.get("/optenerPost").json() == []


class TestPostListing:
    """Tests for listing posts."""

    def test_list_posts_newest_first(self, client, post_factory):
        older = post_factory(contenido="primero")
        newer = post_factory(contenido="segundo")

        response = client.get("/optenerPost")

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data] == [newer, older]
        assert data[0]["contenido"] == "segundo"
