import uuid

import pytest

from tracker.models import Project


@pytest.mark.django_db
def test_project_endpoints_require_token(api_client, project):
    resp = api_client.get("/api/projects/")
    assert resp.status_code == 401
    assert resp.json()["code"] == "unauthenticated"

    resp = api_client.get(f"/api/projects/{project.id}/", HTTP_AUTHORIZATION="Bearer garbage")
    assert resp.status_code == 401


@pytest.mark.django_db
def test_create_and_list_projects(client_for, host):
    client = client_for(host)

    resp = client.post("/api/projects/", {"title": " Foo ", "description": None}, format="json")
    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["title"] == "Foo"
    assert body["description"] == ""
    assert body["members"] == []
    assert body["host"]["id"] == str(host.id)
    assert "password" not in body["host"]

    resp = client.get("/api/projects/")
    assert resp.status_code == 200
    assert [p["title"] for p in resp.json()] == ["Foo"]


@pytest.mark.django_db
def test_create_project_blank_title(client_for, host):
    resp = client_for(host).post("/api/projects/", {"title": "   "}, format="json")
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid"


@pytest.mark.django_db
def test_get_project_errors(client_for, project, outsider):
    client = client_for(outsider)

    assert client.get(f"/api/projects/{project.id}/").status_code == 403
    assert client.get(f"/api/projects/{uuid.uuid4()}/").status_code == 404

    resp = client.get("/api/projects/not-a-uuid/")
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_id"


@pytest.mark.django_db
def test_search_projects(client_for, project, member):
    resp = client_for(member).get("/api/projects/search/", {"keyword": "MOON"})
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == [str(project.id)]

    resp = client_for(member).get("/api/projects/search/", {"keyword": "mars"})
    assert resp.json() == []


@pytest.mark.django_db
def test_search_keyword_whitespace_is_not_trimmed(client_for, project, member):
    resp = client_for(member).get("/api/projects/search/", {"keyword": " Apollo"})
    assert resp.status_code == 200
    assert resp.json() == []

    resp = client_for(member).get("/api/projects/search/", {"keyword": " landing"})
    assert [p["id"] for p in resp.json()] == [str(project.id)]


@pytest.mark.django_db
def test_update_project(client_for, project, host, member):
    resp = client_for(member).patch(f"/api/projects/{project.id}/", {"title": "Hijack"}, format="json")
    assert resp.status_code == 403

    resp = client_for(host).patch(f"/api/projects/{project.id}/", {"description": ""}, format="json")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Apollo"
    assert resp.json()["description"] == ""


@pytest.mark.django_db
def test_delete_project(client_for, project, host, outsider):
    resp = client_for(outsider).delete(f"/api/projects/{project.id}/")
    assert resp.status_code == 403
    assert Project.objects.filter(id=project.id).exists()

    resp = client_for(host).delete(f"/api/projects/{project.id}/")
    assert resp.status_code == 200
    assert resp.json() == {"deleted": True}


@pytest.mark.django_db
def test_member_management(client_for, project, host, outsider):
    client = client_for(host)
    url = f"/api/projects/{project.id}/members/"

    resp = client.post(url, {"user_id": str(outsider.id)}, format="json")
    assert resp.status_code == 200
    assert str(outsider.id) in [m["id"] for m in resp.json()["members"]]

    resp = client.post(url, {"user_id": str(outsider.id)}, format="json")
    assert resp.status_code == 409
    assert resp.json()["code"] == "conflict"

    resp = client.delete(f"{url}{outsider.id}/")
    assert resp.status_code == 200
    assert str(outsider.id) not in [m["id"] for m in resp.json()["members"]]

    resp = client.delete(f"{url}{outsider.id}/")
    assert resp.status_code == 409
