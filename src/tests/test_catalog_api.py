def test_health_needs_no_token(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_category_tree_reports_parent_and_children(client, auth_headers):
    root = client.post("/api/v1/categories", json={"code": "HOME", "name": "Home"}, headers=auth_headers)
    assert root.status_code == 201
    assert root.json()["childCodes"] == []

    child = client.post(
        "/api/v1/categories",
        json={"code": "KITCHEN", "name": "Kitchen", "parentCode": "HOME"},
        headers=auth_headers,
    )
    assert child.json()["parentCode"] == "HOME"

    orphan = client.post(
        "/api/v1/categories",
        json={"code": "GARDEN", "name": "Garden", "parentCode": "NOWHERE"},
        headers=auth_headers,
    )
    assert orphan.status_code == 201
    assert orphan.json()["parentCode"] is None

    home = client.get("/api/v1/categories/HOME", headers=auth_headers).json()
    assert home["childCodes"] == ["KITCHEN"]

    listed = client.get("/api/v1/categories", headers=auth_headers).json()
    assert [c["code"] for c in listed] == ["GARDEN", "HOME", "KITCHEN"]

    duplicate = client.post("/api/v1/categories", json={"code": "HOME", "name": "Again"}, headers=auth_headers)
    assert duplicate.status_code == 409
    assert client.get("/api/v1/categories/NOPE", headers=auth_headers).status_code == 404


def test_catalog_crud_and_cascading_delete(client, auth_headers):
    created = client.post("/api/v1/catalogs", json={"code": "SPRING", "name": "Spring"}, headers=auth_headers)
    assert created.status_code == 201
    assert created.json() == {"code": "SPRING", "name": "Spring", "catalogVersion": "STAGED"}

    online = client.post(
        "/api/v1/catalogs",
        json={"code": "LIVE", "name": "Live", "catalogVersion": "ONLINE"},
        headers=auth_headers,
    )
    assert online.json()["catalogVersion"] == "ONLINE"

    bad_version = client.post(
        "/api/v1/catalogs",
        json={"code": "X", "name": "X", "catalogVersion": "DRAFT"},
        headers=auth_headers,
    )
    assert bad_version.status_code == 400

    for code, catalog in (("S1", "SPRING"), ("S2", "SPRING"), ("L1", "LIVE")):
        response = client.post(
            "/api/v1/products",
            json={
                "code": code,
                "name": code,
                "basePrice": {"value": 1, "currency": "USD"},
                "catalogCode": catalog,
            },
            headers=auth_headers,
        )
        assert response.json()["catalogCode"] == catalog

    assert client.delete("/api/v1/catalogs/SPRING", headers=auth_headers).status_code == 204
    assert client.get("/api/v1/catalogs/SPRING", headers=auth_headers).status_code == 404
    assert client.get("/api/v1/products/S1", headers=auth_headers).status_code == 404
    assert client.get("/api/v1/products/L1", headers=auth_headers).status_code == 200

    remaining = client.get("/api/v1/catalogs", headers=auth_headers).json()
    assert [c["code"] for c in remaining] == ["LIVE"]
    assert client.delete("/api/v1/catalogs/SPRING", headers=auth_headers).status_code == 404
