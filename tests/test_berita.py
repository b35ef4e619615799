"""Berita CRUD, image storage, projection, and premium preview."""

from pathlib import Path

from tests.conftest import PNG_BYTES, auth_headers, create_account, create_berita, login_user, register_user


def test_create_berita_without_image(client, penulis, kategori_id):
    body = create_berita(client, penulis["headers"], kategori_id, judul="Tanpa Gambar")

    assert body["judul"] == "Tanpa Gambar"
    assert body["id_user"] == penulis["id"]
    assert body["gambar"] is None
    assert body["tgl_terbit"] == "2025-01-01"
    assert body["kategori"]["kategori"] == "Teknologi"
    assert body["penulis"]["username"] == "penulis"
    assert body["is_locked"] is False


def test_create_berita_stores_image(client, penulis, kategori_id, storage):
    body = create_berita(
        client,
        penulis["headers"],
        kategori_id,
        files={"gambar": ("foto saya.png", PNG_BYTES, "image/png")},
    )

    assert body["gambar"].startswith("berita/")
    assert body["gambar"].endswith("_foto_saya.png")
    assert (Path(storage.root) / body["gambar"]).is_file()


def test_create_berita_rejects_non_image(client, penulis, kategori_id):
    response = client.post(
        "/berita",
        data={"id_kategori": str(kategori_id), "judul": "X", "isi": "Y", "tgl_terbit": "2025-01-01"},
        files={"gambar": ("script.png", b"#!/bin/sh\necho hi", "image/png")},
        headers=penulis["headers"],
    )

    assert response.status_code == 422
    assert "gambar" in response.json()["errors"]


def test_create_berita_rejects_disallowed_extension(client, penulis, kategori_id):
    response = client.post(
        "/berita",
        data={"id_kategori": str(kategori_id), "judul": "X", "isi": "Y", "tgl_terbit": "2025-01-01"},
        files={"gambar": ("doc.pdf", b"%PDF-1.4", "application/pdf")},
        headers=penulis["headers"],
    )

    assert response.status_code == 422


def test_create_berita_validates_form(client, penulis, kategori_id):
    response = client.post(
        "/berita",
        data={"id_kategori": str(kategori_id), "judul": "X" * 256, "isi": "Y", "tgl_terbit": "bukan-tanggal"},
        headers=penulis["headers"],
    )

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert "judul" in errors
    assert "tgl_terbit" in errors


def test_create_berita_unknown_kategori_is_422(client, penulis):
    response = client.post(
        "/berita",
        data={"id_kategori": "999", "judul": "X", "isi": "Y", "tgl_terbit": "2025-01-01"},
        headers=penulis["headers"],
    )

    assert response.status_code == 422
    assert "id_kategori" in response.json()["errors"]


def test_pembaca_cannot_create_berita(client, pembaca, kategori_id):
    response = client.post(
        "/berita",
        data={"id_kategori": str(kategori_id), "judul": "X", "isi": "Y", "tgl_terbit": "2025-01-01"},
        headers=pembaca["headers"],
    )

    assert response.status_code == 403


def test_penulis_cannot_post_for_another_user(client, penulis, pembaca, kategori_id):
    response = client.post(
        "/berita",
        data={
            "id_user": str(pembaca["id"]),
            "id_kategori": str(kategori_id),
            "judul": "X",
            "isi": "Y",
            "tgl_terbit": "2025-01-01",
        },
        headers=penulis["headers"],
    )

    assert response.status_code == 403


def test_admin_can_post_for_another_user(client, admin, penulis, kategori_id):
    body = create_berita(client, admin["headers"], kategori_id, id_user=penulis["id"])

    assert body["id_user"] == penulis["id"]


def test_list_and_get_berita(client, berita):
    listed = client.get("/berita")
    assert listed.status_code == 200
    assert [b["id_berita"] for b in listed.json()] == [berita["id_berita"]]

    single = client.get(f"/berita/{berita['id_berita']}")
    assert single.status_code == 200
    assert single.json()["penulis"]["role"] == "penulis"


def test_get_missing_berita_is_404(client):
    response = client.get("/berita/999")

    assert response.status_code == 404
    assert response.json()["message"] == "Berita tidak ditemukan"


def test_list_by_author(client, penulis, pembaca, berita):
    own = client.get(f"/berita/user/{penulis['id']}")
    assert own.status_code == 200
    assert len(own.json()) == 1

    # Existing user without berita: empty list, not 404
    empty = client.get(f"/berita/user/{pembaca['id']}")
    assert empty.status_code == 200
    assert empty.json() == []


def test_list_by_missing_author_is_404(client):
    response = client.get("/berita/user/999")

    assert response.status_code == 404
    assert response.json()["message"] == "User tidak ditemukan"


def test_list_by_kategori(client, penulis, kategori_id, berita):
    assert len(client.get(f"/berita/category/{kategori_id}").json()) == 1
    assert client.get("/berita/category/999").json() == []


def test_search_within_berita_router(client, penulis, kategori_id):
    create_berita(client, penulis["headers"], kategori_id, judul="Pemilu 2024")
    create_berita(client, penulis["headers"], kategori_id, judul="Sepak Bola", isi="Hasil pertandingan")

    response = client.get("/berita/search", params={"q": "pemilu"})

    assert response.status_code == 200
    assert [b["judul"] for b in response.json()] == ["Pemilu 2024"]


def test_update_berita_partial(client, penulis, berita):
    for method in ("put", "patch", "post"):
        response = getattr(client, method)(
            f"/berita/{berita['id_berita']}",
            data={"judul": f"Judul via {method}"},
            headers=penulis["headers"],
        )
        assert response.status_code == 200, method
        assert response.json()["judul"] == f"Judul via {method}"
        assert response.json()["isi"] == berita["isi"]


def test_update_berita_replaces_image(client, penulis, kategori_id, storage):
    created = create_berita(
        client,
        penulis["headers"],
        kategori_id,
        files={"gambar": ("lama.png", PNG_BYTES, "image/png")},
    )
    old_path = Path(storage.root) / created["gambar"]
    assert old_path.is_file()

    response = client.put(
        f"/berita/{created['id_berita']}",
        data={"judul": "Gambar Baru"},
        files={"gambar": ("baru.png", PNG_BYTES, "image/png")},
        headers=penulis["headers"],
    )

    assert response.status_code == 200
    new_path = Path(storage.root) / response.json()["gambar"]
    assert new_path.is_file()
    assert not old_path.exists()


def test_update_by_other_penulis_is_forbidden(client, berita):
    other = create_account(client, "penulislain", role="penulis")

    response = client.put(f"/berita/{berita['id_berita']}", data={"judul": "Bukan punyaku"}, headers=other["headers"])

    assert response.status_code == 403


def test_update_missing_berita_is_404(client, penulis):
    response = client.put("/berita/999", data={"judul": "X"}, headers=penulis["headers"])

    assert response.status_code == 404


def test_admin_can_update_any_berita(client, admin, berita):
    response = client.patch(f"/berita/{berita['id_berita']}", data={"is_premium": "true"}, headers=admin["headers"])

    assert response.status_code == 200
    assert response.json()["is_premium"] is True


def test_delete_berita_removes_image(client, penulis, kategori_id, storage):
    created = create_berita(
        client,
        penulis["headers"],
        kategori_id,
        files={"gambar": ("hapus.png", PNG_BYTES, "image/png")},
    )
    image_path = Path(storage.root) / created["gambar"]
    assert image_path.is_file()

    response = client.delete(f"/berita/{created['id_berita']}", headers=penulis["headers"])

    assert response.status_code == 200
    assert response.json()["message"] == "Berita berhasil dihapus"
    assert not image_path.exists()
    assert client.get(f"/berita/{created['id_berita']}").status_code == 404


def test_delete_berita_without_image(client, admin, berita):
    response = client.delete(f"/berita/{berita['id_berita']}", headers=admin["headers"])

    assert response.status_code == 200


def test_delete_requires_owner_or_admin(client, pembaca, berita):
    assert client.delete(f"/berita/{berita['id_berita']}").status_code == 401
    assert client.delete(f"/berita/{berita['id_berita']}", headers=pembaca["headers"]).status_code == 403


def test_delete_berita_cascades_engagement(client, penulis, pembaca, berita):
    client.post("/likes", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])
    client.post("/history", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])
    client.post("/bookmarks", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])

    response = client.delete(f"/berita/{berita['id_berita']}", headers=penulis["headers"])

    assert response.status_code == 200
    assert client.get("/likes").json() == []
    assert client.get("/history").json() == []
    assert client.get("/bookmarks", headers=pembaca["headers"]).json() == []


# ----- Premium preview -----
def _premium_berita(client, penulis, kategori_id):
    return create_berita(client, penulis["headers"], kategori_id, judul="Eksklusif", isi="A" * 300, is_premium="true")


def test_premium_berita_is_locked_for_anonymous_and_free(client, penulis, pembaca, kategori_id):
    created = _premium_berita(client, penulis, kategori_id)

    for headers in ({}, pembaca["headers"]):
        body = client.get(f"/berita/{created['id_berita']}", headers=headers).json()
        assert body["is_locked"] is True
        assert body["isi"] == "A" * 200 + "..."


def test_premium_berita_is_open_for_author_admin_and_premium(client, admin, penulis, kategori_id):
    created = _premium_berita(client, penulis, kategori_id)
    premium_reader = create_account(client, "sultan", role="pembaca", membership="premium")

    for headers in (penulis["headers"], admin["headers"], premium_reader["headers"]):
        body = client.get(f"/berita/{created['id_berita']}", headers=headers).json()
        assert body["is_locked"] is False
        assert body["isi"] == "A" * 300


def test_register_publish_like_and_list_flow(client, kategori_id, pembaca):
    registered = register_user(client, "wartawan", "wartawan@mail.com", role="penulis", name="Wartawan Senior")
    assert registered.status_code == 201
    id_user = registered.json()["data"]["id_user"]
    token = login_user(client, "wartawan@mail.com", "penulis").json()["access_token"]
    headers = auth_headers(token)

    created = create_berita(client, headers, kategori_id, judul="Liputan Khusus")
    liked = client.post("/likes", json={"id_berita": created["id_berita"]}, headers=pembaca["headers"])
    assert liked.status_code == 201

    listed = client.get("/berita")

    assert listed.status_code == 200
    matches = [b for b in listed.json() if b["id_berita"] == created["id_berita"]]
    assert len(matches) == 1
    assert matches[0]["judul"] == "Liputan Khusus"
    assert matches[0]["penulis"] == {
        "id_user": id_user,
        "username": "wartawan",
        "name": "Wartawan Senior",
        "email": "wartawan@mail.com",
        "role": "penulis",
    }
    assert [like["id_berita"] for like in client.get("/likes/true").json()] == [created["id_berita"]]
