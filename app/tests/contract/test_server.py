"""
Contract tests for the application shell: docs, CORS, health
"""
import json
import logging


def test_openapi_document(client):
    """Test the OpenAPI document title, schemas and paths"""
    response = client.get("/api-docs/openapi.json")

    assert response.status_code == 200
    document = response.json()
    assert document["info"]["title"] == "Real Estate Manager API Documentation"
    assert document["info"]["version"] == "1.0.0"
    assert document["info"]["description"] == "API documentation Real Estate Manager application."

    schemas = document["components"]["schemas"]
    assert "Property" in schemas
    assert "ViewPropertiesToggleState" in schemas

    assert "/api/properties/{id}" in document["paths"]
    assert "/api/pages" in document["paths"]
    assert {tag["name"] for tag in document["tags"]} >= {"Properties", "Support", "AppState"}


def test_swagger_ui_served(client):
    """Test the Swagger UI is served at /api-docs"""
    response = client.get("/api-docs")

    assert response.status_code == 200
    assert "swagger" in response.text.lower()


def test_cors_allows_any_origin(client):
    """Test CORS answers any origin"""
    response = client.get("/api/properties", headers={"Origin": "http://frontend.example"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client):
    """Test CORS preflight allows PUT"""
    response = client.options(
        "/api/properties",
        headers={
            "Origin": "http://frontend.example",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "content-type",
        }
    )

    assert response.status_code == 200
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_health_endpoint(client):
    """Test GET /api/health"""
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "1.0.0"
    assert "timestamp" in data


def test_unknown_route_uses_message_shape(client):
    """Test unknown routes answer with the message shape"""
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_api_calls_are_logged(client, caplog):
    """Test each API call leaves one log line with method, path and status"""
    with caplog.at_level(logging.INFO, logger="http"):
        client.get("/api/properties/missing")

    lines = [record.getMessage() for record in caplog.records if record.name == "http"]
    assert len(lines) == 1
    entry = json.loads(lines[0].split(": ", 1)[1])
    assert entry["method"] == "GET"
    assert entry["path"] == "/api/properties/missing"
    assert entry["status_code"] == 404
