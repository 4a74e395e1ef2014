import pytest


def test_create_centro_costo(client):
    response = client.post("/api/v1/centros-costo", json={"nombre": "  Metroadornos "})
    assert response.status_code == 201
    data = response.json()
    assert data["nombre"] == "Metroadornos"
    assert data["activo"] is True
    assert data["productos"] == 0


def test_create_centro_costo_duplicate(client):
    client.post("/api/v1/centros-costo", json={"nombre": "Metroherrajes"})
    response = client.post("/api/v1/centros-costo", json={"nombre": "Metroherrajes"})
    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]


def test_create_centro_costo_blank_name(client):
    response = client.post("/api/v1/centros-costo", json={"nombre": "   "})
    assert response.status_code == 409
    assert client.post("/api/v1/centros-costo", json={"nombre": ""}).status_code == 422


def test_list_centros_costo_sorted_with_counts(client, producto_payload):
    zeta = client.post("/api/v1/centros-costo", json={"nombre": "Zeta"}).json()
    client.post("/api/v1/centros-costo", json={"nombre": "Alfa"})
    client.post("/api/v1/productos", json=dict(producto_payload, centro_costo_id=zeta["id"]))
    client.post("/api/v1/productos", json=dict(producto_payload, centro_costo_id=zeta["id"]))

    response = client.get("/api/v1/centros-costo")
    assert response.status_code == 200
    data = response.json()
    assert [c["nombre"] for c in data] == ["Alfa", "Zeta"]
    assert [c["productos"] for c in data] == [0, 2]


def test_update_centro_costo(client):
    centro = client.post("/api/v1/centros-costo", json={"nombre": "Viejo"}).json()

    response = client.put(f"/api/v1/centros-costo/{centro['id']}", json={"activo": False})
    assert response.status_code == 200
    assert response.json()["activo"] is False
    assert response.json()["nombre"] == "Viejo"

    response = client.put(f"/api/v1/centros-costo/{centro['id']}", json={"nombre": "Nuevo"})
    assert response.json()["nombre"] == "Nuevo"
    assert response.json()["activo"] is False


def test_update_centro_costo_name_collision(client):
    client.post("/api/v1/centros-costo", json={"nombre": "Uno"})
    dos = client.post("/api/v1/centros-costo", json={"nombre": "Dos"}).json()
    response = client.put(f"/api/v1/centros-costo/{dos['id']}", json={"nombre": "Uno"})
    assert response.status_code == 409


def test_update_centro_costo_not_found(client):
    response = client.put("/api/v1/centros-costo/999", json={"activo": True})
    assert response.status_code == 404


def test_delete_centro_costo(client):
    centro = client.post("/api/v1/centros-costo", json={"nombre": "Temporal"}).json()
    assert client.delete(f"/api/v1/centros-costo/{centro['id']}").status_code == 200
    assert client.delete(f"/api/v1/centros-costo/{centro['id']}").status_code == 404


def test_delete_centro_costo_with_productos(client, producto_payload):
    centro = client.post("/api/v1/centros-costo", json={"nombre": "Ocupado"}).json()
    client.post("/api/v1/productos", json=dict(producto_payload, centro_costo_id=centro["id"]))

    response = client.delete(f"/api/v1/centros-costo/{centro['id']}")
    assert response.status_code == 409
    assert "1 producto(s)" in response.json()["detail"]


def test_update_centro_costo_blank_name(client):
    centro = client.post("/api/v1/centros-costo", json={"nombre": "Conservado"}).json()
    response = client.put(f"/api/v1/centros-costo/{centro['id']}", json={"nombre": "   "})
    assert response.status_code == 409
    assert "nombre is required" in response.json()["detail"]

    listed = client.get("/api/v1/centros-costo").json()
    assert [c["nombre"] for c in listed] == ["Conservado"]
