from __future__ import annotations

from fastapi.testclient import TestClient

from conftest import ProjectFactory


def test_list_projects_when_empty(client: TestClient) -> None:
    response = client.get("/projects")
    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["data"]["items"] == []


def test_lists_only_published_public_views(
    client: TestClient, write_project: ProjectFactory
) -> None:
    write_project(
        "portfolio-site",
        markdown="# Portfolio\n\nHow this site was built.\n",
        heroImage="/img/site.png",
        internalNotes="do not show",
        aliases=["old-site"],
    )
    write_project("secret-draft", status="draft")
    write_project("legacy-app", status="archived")

    response = client.get("/projects")
    assert response.status_code == 200
    items = response.json()["data"]["items"]
    assert [item["slug"] for item in items] == ["portfolio-site"]

    project = items[0]
    assert project["heroImage"] == {"url": "/img/site.png"}
    assert project["body"].startswith("# Portfolio")
    for internal_field in ("id", "status", "internalNotes", "aliases", "contentUri"):
        assert internal_field not in project

    archived = client.get("/projects/archived").json()["data"]["items"]
    assert [item["slug"] for item in archived] == ["legacy-app"]


def test_project_detail_and_alias_redirect(
    client: TestClient, write_project: ProjectFactory
) -> None:
    write_project("a", aliases=["b"])

    detail = client.get("/projects/a")
    assert detail.status_code == 200
    assert detail.json()["data"]["slug"] == "a"

    redirect = client.get("/projects/b", follow_redirects=False)
    assert redirect.status_code == 301
    assert redirect.headers["location"].endswith("/projects/a")

    followed = client.get("/projects/b")
    assert followed.status_code == 200
    assert followed.json()["data"]["slug"] == "a"


def test_drafts_and_unknown_slugs_are_not_found(
    client: TestClient, write_project: ProjectFactory
) -> None:
    write_project("work-in-progress", status="draft")

    for slug in ("work-in-progress", "never-existed"):
        response = client.get(f"/projects/{slug}")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "project_not_found"


def test_invalid_content_fails_the_request(
    client: TestClient, write_project: ProjectFactory
) -> None:
    write_project("good")
    write_project("bad", unexpectedField=True)

    response = client.get("/projects")
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "content.unknown_field"
    assert "unexpectedField" in body["error"]["message"]
    assert body["error"]["details"] == {"source": "bad", "field": "unexpectedField"}


def test_health_reports_cache_state(client: TestClient, write_project: ProjectFactory) -> None:
    write_project("alpha")

    before = client.get("/health").json()["data"]
    assert before["status"] == "ok"
    assert before["cache_state"] == "uninitialized"

    client.get("/projects")
    after = client.get("/health").json()["data"]
    assert after["cache_state"] == "populated"
