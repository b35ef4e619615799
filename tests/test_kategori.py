"""Kategori CRUD and permissions."""

from tests.conftest import create_berita, create_kategori


def test_create_and_list_kategori(client, penulis):
    id_kategori = create_kategori(client, penulis["headers"], "Olahraga")

    listed = client.get("/kategori")
    assert listed.status_code == 200
    assert [k["kategori"] for k in listed.json()] == ["Olahraga"]

    single = client.get(f"/kategori/{id_kategori}")
    assert single.status_code == 200
    assert single.json()["kategori"] == "Olahraga"


def test_get_missing_kategori_is_404(client):
    response = client.get("/kategori/42")

    assert response.status_code == 404
    assert response.json()["message"] == "Kategori tidak ditemukan"


def test_create_requires_token(client):
    assert client.post("/kategori", json={"kategori": "Politik"}).status_code == 401


def test_pembaca_cannot_create_kategori(client, pembaca):
    response = client.post("/kategori", json={"kategori": "Politik"}, headers=pembaca["headers"])

    assert response.status_code == 403


def test_duplicate_kategori_is_422(client, penulis):
    create_kategori(client, penulis["headers"], "Politik")
    response = client.post("/kategori", json={"kategori": "Politik"}, headers=penulis["headers"])

    assert response.status_code == 422
    assert "kategori" in response.json()["errors"]


def test_blank_kategori_is_422(client, penulis):
    response = client.post("/kategori", json={"kategori": "   "}, headers=penulis["headers"])

    assert response.status_code == 422


def test_rename_kategori(client, penulis, kategori_id):
    response = client.put(
        f"/kategori/{kategori_id}", json={"kategori": "Sains"}, headers=penulis["headers"]
    )

    assert response.status_code == 200
    assert response.json()["kategori"] == "Sains"


def test_rename_to_existing_name_is_422(client, penulis, kategori_id):
    create_kategori(client, penulis["headers"], "Sains")
    response = client.put(
        f"/kategori/{kategori_id}", json={"kategori": "Sains"}, headers=penulis["headers"]
    )

    assert response.status_code == 422


def test_only_admin_can_delete_kategori(client, admin, penulis, kategori_id):
    forbidden = client.delete(f"/kategori/{kategori_id}", headers=penulis["headers"])
    assert forbidden.status_code == 403

    deleted = client.delete(f"/kategori/{kategori_id}", headers=admin["headers"])
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Kategori berhasil dihapus"
    assert client.get(f"/kategori/{kategori_id}").status_code == 404


def test_kategori_in_use_cannot_be_deleted(client, admin, penulis, kategori_id):
    create_berita(client, penulis["headers"], kategori_id)

    response = client.delete(f"/kategori/{kategori_id}", headers=admin["headers"])

    assert response.status_code == 400
    assert response.json()["success"] is False
