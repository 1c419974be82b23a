import pytest

from tracker.models import Issue


@pytest.mark.django_db
def test_member_creates_and_lists_issues(client_for, project, member):
    client = client_for(member)
    url = f"/api/projects/{project.id}/issues/"

    resp = client.post(url, {"title": "Bug", "priority": "HIGH"}, format="json")
    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["status"] == "OPEN"
    assert body["reporter"]["id"] == str(member.id)
    assert body["project"]["id"] == str(project.id)
    assert body["project"]["members"][0]["id"] == str(member.id)

    resp = client.get(url)
    assert resp.status_code == 200
    assert [i["title"] for i in resp.json()] == ["Bug"]


@pytest.mark.django_db
def test_create_issue_requires_priority(client_for, project, host):
    resp = client_for(host).post(f"/api/projects/{project.id}/issues/", {"title": "Bug"}, format="json")
    assert resp.status_code == 400
    assert Issue.objects.count() == 0


@pytest.mark.django_db
def test_issue_detail(client_for, issue, member, outsider):
    assert client_for(outsider).get(f"/api/issues/{issue.id}/").status_code == 403

    resp = client_for(member).get(f"/api/issues/{issue.id}/")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Fuel leak"


@pytest.mark.django_db
def test_patch_issue(client_for, issue, member):
    client = client_for(member)

    resp = client.patch(f"/api/issues/{issue.id}/", {}, format="json")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "No fields to update"

    resp = client.patch(f"/api/issues/{issue.id}/", {"status": "RESOLVED"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["status"] == "RESOLVED"
    assert resp.json()["priority"] == "HIGH"


@pytest.mark.django_db
def test_assign_and_unassign(client_for, issue, host, member, outsider):
    client = client_for(host)

    resp = client.post(
        f"/api/issues/{issue.id}/assignees/",
        {"user_ids": [str(member.id), str(outsider.id)]},
        format="json",
    )
    assert resp.status_code == 200
    assert [a["id"] for a in resp.json()["assignees"]] == [str(member.id)]

    resp = client.delete(f"/api/issues/{issue.id}/assignees/{outsider.id}/")
    assert resp.status_code == 404

    resp = client.delete(f"/api/issues/{issue.id}/assignees/{member.id}/")
    assert resp.status_code == 200
    assert resp.json()["assignees"] == []


@pytest.mark.django_db
def test_delete_issue(client_for, issue, member):
    resp = client_for(member).delete(f"/api/issues/{issue.id}/")
    assert resp.status_code == 200
    assert resp.json() == {"deleted": True}
    assert not Issue.objects.filter(id=issue.id).exists()
