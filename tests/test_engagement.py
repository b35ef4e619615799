"""Likes, dislikes, reading history, and bookmarks."""

from portal_berita.models.disukai import Disukai
from tests.conftest import create_account


# ----- Likes -----
def test_like_defaults_to_caller_and_true(client, pembaca, berita):
    response = client.post("/likes", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])

    assert response.status_code == 201
    body = response.json()
    assert body["id_user"] == pembaca["id"]
    assert body["suka"] is True


def test_like_with_explicit_user_and_no_token(client, pembaca, berita):
    response = client.post("/likes", json={"id_user": pembaca["id"], "id_berita": berita["id_berita"], "suka": False})

    assert response.status_code == 201
    assert response.json()["suka"] is False


def test_like_without_any_user_is_422(client, berita):
    response = client.post("/likes", json={"id_berita": berita["id_berita"]})

    assert response.status_code == 422
    assert "id_user" in response.json()["errors"]


def test_like_unknown_berita_or_user_is_422(client, pembaca):
    response = client.post("/likes", json={"id_user": 999, "id_berita": 999})

    assert response.status_code == 422
    assert set(response.json()["errors"]) == {"id_user", "id_berita"}


def test_liking_twice_keeps_one_row(client, db, pembaca, berita):
    first = client.post("/likes", json={"id_berita": berita["id_berita"], "suka": True}, headers=pembaca["headers"])
    second = client.post("/likes", json={"id_berita": berita["id_berita"], "suka": False}, headers=pembaca["headers"])

    assert first.json()["id_disukai"] == second.json()["id_disukai"]
    assert second.json()["suka"] is False
    assert db.query(Disukai).count() == 1


def test_like_filters_by_value(client, pembaca, penulis, berita):
    client.post("/likes", json={"id_berita": berita["id_berita"], "suka": True}, headers=pembaca["headers"])
    client.post("/likes", json={"id_berita": berita["id_berita"], "suka": False}, headers=penulis["headers"])

    assert [like["id_user"] for like in client.get("/likes/true").json()] == [pembaca["id"]]
    assert [like["id_user"] for like in client.get("/likes/false").json()] == [penulis["id"]]
    assert len(client.get("/likes").json()) == 2


def test_update_get_and_delete_like(client, pembaca, berita):
    created = client.post("/likes", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"]).json()
    id_disukai = created["id_disukai"]

    updated = client.put(f"/likes/{id_disukai}", json={"suka": False})
    assert updated.status_code == 200
    assert updated.json()["suka"] is False

    assert client.get(f"/likes/{id_disukai}").json()["suka"] is False

    deleted = client.delete(f"/likes/{id_disukai}")
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Like berhasil dihapus"
    assert client.get(f"/likes/{id_disukai}").status_code == 404


def test_missing_like_is_404(client):
    response = client.put("/likes/999", json={"suka": True})

    assert response.status_code == 404
    assert response.json()["message"] == "Like tidak ditemukan"


def test_new_like_notifies_author_once(client, penulis, pembaca, berita):
    client.post("/likes", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])
    client.post("/likes", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])

    notifications = client.get("/notifications", headers=penulis["headers"]).json()
    assert notifications["total"] == 1
    assert notifications["data"][0]["type"] == "like"


def test_self_like_does_not_notify(client, penulis, berita):
    client.post("/likes", json={"id_berita": berita["id_berita"]}, headers=penulis["headers"])

    assert client.get("/notifications", headers=penulis["headers"]).json()["total"] == 0


# ----- Dislikes -----
def test_dislike_is_independent_of_like(client, pembaca, berita):
    like = client.post("/likes", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])
    dislike = client.post("/dislikes", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])

    assert like.status_code == 201
    assert dislike.status_code == 201
    assert dislike.json()["tidak_suka"] is True
    assert len(client.get("/likes").json()) == 1
    assert len(client.get("/dislikes").json()) == 1


def test_dislike_upsert_update_and_delete(client, pembaca, berita):
    first = client.post("/dislikes", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"]).json()
    second = client.post(
        "/dislikes", json={"id_berita": berita["id_berita"], "tidak_suka": False}, headers=pembaca["headers"]
    ).json()
    assert first["id_tidaksuka"] == second["id_tidaksuka"]

    id_tidaksuka = first["id_tidaksuka"]
    assert client.get(f"/dislikes/{id_tidaksuka}").json()["tidak_suka"] is False
    assert client.put(f"/dislikes/{id_tidaksuka}", json={"tidak_suka": True}).json()["tidak_suka"] is True
    assert [d["id_tidaksuka"] for d in client.get("/dislikes/true").json()] == [id_tidaksuka]

    assert client.delete(f"/dislikes/{id_tidaksuka}").json()["message"] == "Dislike berhasil dihapus"
    assert client.get(f"/dislikes/{id_tidaksuka}").status_code == 404


# ----- History -----
def test_history_is_append_only(client, pembaca, berita):
    for _ in range(2):
        response = client.post("/history", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])
        assert response.status_code == 201

    listed = client.get("/history").json()
    assert len(listed) == 2
    assert listed[0]["user"]["email"] == pembaca["email"]
    assert listed[0]["berita"]["judul"] == berita["judul"]


def test_history_by_user(client, pembaca, berita):
    client.post("/history", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])

    response = client.get(f"/history/user/{pembaca['id']}")

    assert response.status_code == 200
    assert len(response.json()) == 1


def test_history_by_user_without_rows_is_404(client, pembaca):
    response = client.get(f"/history/user/{pembaca['id']}")

    assert response.status_code == 404
    assert response.json()["message"] == "History tidak ditemukan untuk user ini"


def test_history_get_and_delete(client, pembaca, berita):
    created = client.post(
        "/history", json={"id_user": pembaca["id"], "id_berita": berita["id_berita"]}
    ).json()

    assert client.get(f"/history/{created['id_history']}").status_code == 200
    assert client.delete(f"/history/{created['id_history']}").json()["message"] == "History berhasil dihapus"
    assert client.get(f"/history/{created['id_history']}").status_code == 404


def test_history_unknown_berita_is_422(client, pembaca):
    response = client.post("/history", json={"id_berita": 999}, headers=pembaca["headers"])

    assert response.status_code == 422


# ----- Bookmarks -----
def test_bookmark_lifecycle(client, pembaca, berita):
    created = client.post("/bookmarks", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])
    assert created.status_code == 201
    id_bookmark = created.json()["id_bookmark"]
    assert created.json()["berita"]["judul"] == berita["judul"]

    listed = client.get("/bookmarks", headers=pembaca["headers"]).json()
    assert [b["id_bookmark"] for b in listed] == [id_bookmark]

    assert client.get(f"/bookmarks/{id_bookmark}", headers=pembaca["headers"]).status_code == 200
    assert client.delete(f"/bookmarks/{id_bookmark}", headers=pembaca["headers"]).status_code == 200
    assert client.get("/bookmarks", headers=pembaca["headers"]).json() == []


def test_duplicate_bookmark_is_400(client, pembaca, berita):
    client.post("/bookmarks", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])
    response = client.post("/bookmarks", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"])

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_bookmark_unknown_berita_is_422(client, pembaca):
    response = client.post("/bookmarks", json={"id_berita": 999}, headers=pembaca["headers"])

    assert response.status_code == 422


def test_foreign_bookmark_looks_missing(client, pembaca, berita):
    created = client.post("/bookmarks", json={"id_berita": berita["id_berita"]}, headers=pembaca["headers"]).json()
    stranger = create_account(client, "orangasing")

    assert client.get(f"/bookmarks/{created['id_bookmark']}", headers=stranger["headers"]).status_code == 404
    assert client.delete(f"/bookmarks/{created['id_bookmark']}", headers=stranger["headers"]).status_code == 404
    assert client.get("/bookmarks", headers=stranger["headers"]).json() == []
