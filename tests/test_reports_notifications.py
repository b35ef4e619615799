"""Reports filed by readers and the notifications they trigger."""

from tests.conftest import create_account


def _report(client, headers, id_berita, reason="hoax", description="Sumber tidak jelas"):
    return client.post(
        "/reports",
        json={"id_berita": id_berita, "reason": reason, "description": description},
        headers=headers,
    )


# ----- Reports -----
def test_create_report(client, pembaca, berita):
    response = _report(client, pembaca["headers"], berita["id_berita"])

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Laporan berhasil dikirim. Terima kasih atas partisipasi Anda."
    assert body["data"]["status"] == "pending"
    assert body["data"]["id_user"] == pembaca["id"]


def test_report_requires_token(client, berita):
    assert _report(client, {}, berita["id_berita"]).status_code == 401


def test_reporting_twice_is_400(client, pembaca, berita):
    _report(client, pembaca["headers"], berita["id_berita"])
    response = _report(client, pembaca["headers"], berita["id_berita"], reason="spam")

    assert response.status_code == 400
    assert response.json()["message"] == "Anda sudah pernah melaporkan berita ini"


def test_report_unknown_berita_is_422(client, pembaca):
    response = _report(client, pembaca["headers"], 999)

    assert response.status_code == 422
    assert "id_berita" in response.json()["errors"]


def test_report_invalid_reason_is_422(client, pembaca, berita):
    response = _report(client, pembaca["headers"], berita["id_berita"], reason="bosan")

    assert response.status_code == 422
    assert "reason" in response.json()["errors"]


def test_only_admin_reviews_reports(client, pembaca, berita):
    created = _report(client, pembaca["headers"], berita["id_berita"]).json()["data"]

    assert client.get("/reports", headers=pembaca["headers"]).status_code == 403
    assert client.get(f"/reports/{created['id_report']}", headers=pembaca["headers"]).status_code == 403
    assert client.put(
        f"/reports/{created['id_report']}", json={"status": "resolved"}, headers=pembaca["headers"]
    ).status_code == 403


def test_admin_lists_reports_with_details(client, admin, penulis, pembaca, berita):
    _report(client, pembaca["headers"], berita["id_berita"])

    response = client.get("/reports", headers=admin["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    detail = body["data"][0]
    assert detail["user"]["email"] == pembaca["email"]
    assert detail["berita"]["judul"] == berita["judul"]
    assert detail["berita"]["penulis"] == "Penulis"
    assert detail["reason"] == "hoax"


def test_admin_filters_reports_by_status(client, admin, pembaca, berita):
    created = _report(client, pembaca["headers"], berita["id_berita"]).json()["data"]
    other = create_account(client, "pelapor")
    _report(client, other["headers"], berita["id_berita"], reason="spam")
    client.put(f"/reports/{created['id_report']}", json={"status": "reviewed"}, headers=admin["headers"])

    pending = client.get("/reports", params={"status": "pending"}, headers=admin["headers"]).json()
    reviewed = client.get("/reports", params={"status": "reviewed"}, headers=admin["headers"]).json()

    assert pending["total"] == 1
    assert pending["data"][0]["reason"] == "spam"
    assert [r["id_report"] for r in reviewed["data"]] == [created["id_report"]]


def test_admin_gets_single_report(client, admin, pembaca, berita):
    created = _report(client, pembaca["headers"], berita["id_berita"]).json()["data"]

    response = client.get(f"/reports/{created['id_report']}", headers=admin["headers"])

    assert response.status_code == 200
    assert response.json()["id_report"] == created["id_report"]
    assert client.get("/reports/999", headers=admin["headers"]).status_code == 404


def test_status_change_notifies_reporter(client, admin, pembaca, berita):
    created = _report(client, pembaca["headers"], berita["id_berita"]).json()["data"]

    response = client.put(f"/reports/{created['id_report']}", json={"status": "resolved"}, headers=admin["headers"])

    assert response.status_code == 200
    assert response.json()["message"] == "Status laporan berhasil diupdate"
    assert response.json()["data"]["status"] == "resolved"

    notifications = client.get("/notifications", headers=pembaca["headers"]).json()
    assert notifications["total"] == 1
    assert notifications["data"][0]["type"] == "report"
    assert notifications["unread_count"] == 1


def test_unchanged_status_does_not_notify(client, admin, pembaca, berita):
    created = _report(client, pembaca["headers"], berita["id_berita"]).json()["data"]

    client.put(f"/reports/{created['id_report']}", json={"status": "pending"}, headers=admin["headers"])

    assert client.get("/notifications", headers=pembaca["headers"]).json()["total"] == 0


def test_invalid_status_is_422(client, admin, pembaca, berita):
    created = _report(client, pembaca["headers"], berita["id_berita"]).json()["data"]

    response = client.put(f"/reports/{created['id_report']}", json={"status": "ditolak"}, headers=admin["headers"])

    assert response.status_code == 422


# ----- Notifications -----
def _notified_reader(client, admin, pembaca, berita, count=2):
    """Give the reader ``count`` notifications by toggling one report's status."""
    created = _report(client, pembaca["headers"], berita["id_berita"]).json()["data"]
    statuses = ["reviewed", "resolved", "pending"]
    for status in statuses[:count]:
        client.put(f"/reports/{created['id_report']}", json={"status": status}, headers=admin["headers"])
    return client.get("/notifications", headers=pembaca["headers"]).json()["data"]


def test_notifications_require_token(client):
    assert client.get("/notifications").status_code == 401


def test_mark_single_notification_read(client, admin, pembaca, berita):
    notifications = _notified_reader(client, admin, pembaca, berita)
    target = notifications[0]["id_notification"]

    response = client.put(f"/notifications/{target}/read", headers=pembaca["headers"])
    assert response.status_code == 200
    assert response.json()["message"] == "Notifikasi berhasil ditandai sebagai sudah dibaca"

    unread = client.get("/notifications", params={"read": "false"}, headers=pembaca["headers"]).json()
    read = client.get("/notifications", params={"read": "true"}, headers=pembaca["headers"]).json()
    assert unread["total"] == 1
    assert unread["unread_count"] == 1
    assert [n["id_notification"] for n in read["data"]] == [target]
    assert read["unread_count"] == 0


def test_mark_all_notifications_read(client, admin, pembaca, berita):
    _notified_reader(client, admin, pembaca, berita)

    response = client.put("/notifications/read-all", headers=pembaca["headers"])

    assert response.status_code == 200
    listed = client.get("/notifications", headers=pembaca["headers"]).json()
    assert listed["total"] == 2
    assert listed["unread_count"] == 0


def test_delete_notification(client, admin, pembaca, berita):
    notifications = _notified_reader(client, admin, pembaca, berita, count=1)
    target = notifications[0]["id_notification"]

    response = client.delete(f"/notifications/{target}", headers=pembaca["headers"])

    assert response.status_code == 200
    assert response.json()["message"] == "Notifikasi berhasil dihapus"
    assert client.get("/notifications", headers=pembaca["headers"]).json()["total"] == 0


def test_other_users_notification_looks_missing(client, admin, pembaca, berita):
    notifications = _notified_reader(client, admin, pembaca, berita, count=1)
    target = notifications[0]["id_notification"]

    assert client.put(f"/notifications/{target}/read", headers=admin["headers"]).status_code == 404
    assert client.delete(f"/notifications/{target}", headers=admin["headers"]).status_code == 404
    assert client.put("/notifications/999/read", headers=pembaca["headers"]).status_code == 404
