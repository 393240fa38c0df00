from conftest import auth


def test_health_needs_no_token(client):
    r = client.get("/")

    assert r.status_code == 200
    assert r.json() == {"status": "ok", "name": "LTRegistrator API", "version": "1.0.0"}


def test_list_projects(client, seeded):
    r = client.get("/api/project/", headers=auth(seeded["alice"]))

    assert r.status_code == 200
    assert r.json() == [
        {"id": seeded["portal"], "name": "Timesheet Portal"},
        {"id": seeded["payroll"], "name": "Payroll Integration"},
    ]


def test_get_project(client, seeded):
    r = client.get(f"/api/project/{seeded['payroll']}", headers=auth(seeded["alice"]))

    assert r.status_code == 200
    assert r.json()["name"] == "Payroll Integration"


def test_get_unknown_project_is_404(client, seeded):
    r = client.get("/api/project/999", headers=auth(seeded["alice"]))

    assert r.status_code == 404
    assert r.json()["detail"] == "Project not found"


def test_projects_require_token(client, seeded):
    assert client.get("/api/project/").status_code == 401


def test_get_project_with_huge_id_is_404(client, seeded):
    r = client.get("/api/project/99999999999999999999", headers=auth(seeded["alice"]))

    assert r.status_code == 404
