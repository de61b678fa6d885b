from fastapi.testclient import TestClient

from postboard.main import app

client = TestClient(app)


def test_index_serves_landing_page():
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Postboard API" in response.text


def test_unknown_route_serves_404_page():
    response = client.get("/does/not/exist")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "404" in response.text


def test_unmatched_method_serves_404_page():
    response = client.patch("/posts")

    assert response.status_code == 404
    assert "404" in response.text
