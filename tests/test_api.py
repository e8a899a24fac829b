import re

from db.nodes import save_tree


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_demo_page(client):
    resp = client.get("/demo")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert 'id="category-outer"' in resp.text
    assert 'document.forms["demo"].elements["category"]' in resp.text


def test_stored_tree_widget(client, session, sample_data):
    root_id = save_tree(session, sample_data)

    resp = client.get(f"/trees/{root_id}/widget", params={"name": "picker", "title": "Pick one"})
    assert resp.status_code == 200
    assert "Pick one" in resp.text
    assert len(re.findall(r'id="picker-line-\d+"', resp.text)) == 4


def test_stored_tree_missing(client):
    assert client.get("/trees/12345/widget").status_code == 404


def test_bad_widget_name(client, session, sample_data):
    root_id = save_tree(session, sample_data)
    resp = client.get(f"/trees/{root_id}/widget", params={"name": "bad-name"})
    assert resp.status_code == 422


def test_auth_required_when_enabled(client, monkeypatch):
    monkeypatch.setenv("AUTH_ENABLED", "1")
    monkeypatch.setenv("AUTH_TOKEN", "secret")

    assert client.get("/demo").status_code == 401
    assert client.get("/demo", headers={"Authorization": "Bearer wrong"}).status_code == 401
    assert client.get("/demo", headers={"Authorization": "Bearer secret"}).status_code == 200
