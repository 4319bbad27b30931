"""
Test suite for the generic CRUD endpoints.

Tests cover:
- Create / retrieve / list / update / delete on personnel
- 404 and validation error bodies
- Filters and pagination
- The same surface on the other entities
"""

import pytest

from app.models.personal import Personal


class TestPersonalCrud:
    """Tests for /api/personal"""

    def test_create_personal(self, client, sample_personal_data):
        response = client.post("/api/personal/", json=sample_personal_data)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["nombres"] == "María"
        assert data["fecha_nacimiento"] == "1990-05-14"
        assert data["url_foto_persona"] is None
        assert data["cesado"] is False

    def test_create_personal_missing_fields(self, client):
        """Test creation with missing required fields"""
        response = client.post("/api/personal/", json={"nombres": "Solo nombre"})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Datos de entrada inválidos."
        assert any(detail["campo"].endswith("apellidos") for detail in data["details"])

    def test_get_personal(self, client, personal_42):
        response = client.get("/api/personal/42")

        assert response.status_code == 200
        assert response.json()["apellidos"] == "Pérez Quispe"

    def test_get_personal_not_found(self, client):
        response = client.get("/api/personal/12345")

        assert response.status_code == 404
        assert response.json() == {"error": "Personal no encontrado"}

    def test_get_personal_invalid_id(self, client):
        response = client.get("/api/personal/abc")
        assert response.status_code == 400

    def test_list_personal(self, client, db_session):
        db_session.add_all([
            Personal(nombres="Ana", apellidos="Rojas", empresa_id=1, es_vendedor=True),
            Personal(nombres="Luis", apellidos="Vega", empresa_id=1),
            Personal(nombres="Rosa", apellidos="Díaz", empresa_id=2, es_vendedor=True),
        ])
        db_session.commit()

        response = client.get("/api/personal/")

        assert response.status_code == 200
        assert [p["nombres"] for p in response.json()] == ["Ana", "Luis", "Rosa"]

    def test_list_personal_filters(self, client, db_session):
        db_session.add_all([
            Personal(nombres="Ana", apellidos="Rojas", empresa_id=1, es_vendedor=True),
            Personal(nombres="Luis", apellidos="Vega", empresa_id=1),
            Personal(nombres="Rosa", apellidos="Díaz", empresa_id=2, es_vendedor=True),
        ])
        db_session.commit()

        by_company = client.get("/api/personal/", params={"empresa_id": 1}).json()
        sellers = client.get("/api/personal/", params={"es_vendedor": "true"}).json()
        both = client.get("/api/personal/", params={"empresa_id": 2, "es_vendedor": "true"}).json()

        assert [p["nombres"] for p in by_company] == ["Ana", "Luis"]
        assert [p["nombres"] for p in sellers] == ["Ana", "Rosa"]
        assert [p["nombres"] for p in both] == ["Rosa"]

    def test_list_personal_pagination(self, client, db_session):
        db_session.add_all([Personal(nombres=f"P{i}", apellidos="Test") for i in range(5)])
        db_session.commit()

        response = client.get("/api/personal/", params={"skip": 1, "limit": 2})

        assert [p["nombres"] for p in response.json()] == ["P1", "P2"]

    def test_update_personal_partial(self, client, personal_42):
        response = client.put("/api/personal/42", json={"telefono": "999888777"})

        assert response.status_code == 200
        data = response.json()
        assert data["telefono"] == "999888777"
        # Fields not sent are preserved
        assert data["nombres"] == "Juan"
        assert data["numero_documento"] == "45871236"

    def test_update_personal_does_not_touch_photo(self, client, db_session, personal_42):
        personal_42.url_foto_persona = "foto-42.jpg"
        db_session.commit()

        response = client.put("/api/personal/42", json={"url_foto_persona": "otra.jpg", "cesado": True})

        assert response.status_code == 200
        assert response.json()["url_foto_persona"] == "foto-42.jpg"
        assert response.json()["cesado"] is True

    def test_update_personal_not_found(self, client):
        response = client.put("/api/personal/777", json={"telefono": "1"})

        assert response.status_code == 404
        assert response.json()["error"] == "Personal no encontrado"

    def test_delete_personal(self, client, db_session, personal_42):
        response = client.delete("/api/personal/42")

        assert response.status_code == 204
        assert db_session.query(Personal).filter(Personal.id == 42).first() is None
        assert client.get("/api/personal/42").status_code == 404

    def test_delete_personal_not_found(self, client):
        response = client.delete("/api/personal/42")

        assert response.status_code == 404
        assert response.json() == {"error": "Personal no encontrado"}


ENTITY_CASES = [
    ("/api/cargos-personal", {"descripcion": "PATRON DE PESCA"}, {"activo": False}, "Cargo de personal no encontrado"),
    ("/api/empresa", {"razon_social": "Pesquera Megui S.A.C.", "ruc": "20123456789"}, {"telefono": "014445566"}, "Empresa no encontrada"),
    ("/api/producto", {"codigo": "HAR-002", "descripcion_base": "Harina prime"}, {"cesado": True}, "Producto no encontrado"),
    ("/api/almacen", {"nombre": "Almacén Central"}, {"permite_stock_negativo": True}, "Almacén no encontrado"),
    ("/api/embarcacion", {"matricula": "CO-21455-PM", "nombre": "Santa Rosa", "capacidad_bodega_ton": 350.5}, {"activo": False}, "Embarcación no encontrada"),
    ("/api/puerto-pesca", {"nombre": "Chimbote", "latitud": -9.07, "longitud": -78.59}, {"zona": "Norte"}, "Puerto de pesca no encontrado"),
    ("/api/motivo-acceso", {"nombre": "Visita comercial"}, {"descripcion": "Reunión con proveedores"}, "MotivoAcceso no encontrado"),
    ("/api/incoterm", {"codigo": "FOB", "nombre": "Free On Board"}, {"descripcion": "Libre a bordo"}, "Incoterm no encontrado"),
]


@pytest.mark.parametrize("base_path,create_data,update_data,not_found", ENTITY_CASES)
class TestEntityCrudSurface:
    """Every entity exposes the same five operations"""

    def test_full_lifecycle(self, client, base_path, create_data, update_data, not_found):
        created = client.post(f"{base_path}/", json=create_data)
        assert created.status_code == 201
        entity_id = created.json()["id"]

        listed = client.get(f"{base_path}/")
        assert listed.status_code == 200
        assert [item["id"] for item in listed.json()] == [entity_id]

        fetched = client.get(f"{base_path}/{entity_id}")
        assert fetched.status_code == 200
        for key, value in create_data.items():
            assert fetched.json()[key] == value

        updated = client.put(f"{base_path}/{entity_id}", json=update_data)
        assert updated.status_code == 200
        for key, value in update_data.items():
            assert updated.json()[key] == value

        deleted = client.delete(f"{base_path}/{entity_id}")
        assert deleted.status_code == 204

        missing = client.get(f"{base_path}/{entity_id}")
        assert missing.status_code == 404
        assert missing.json() == {"error": not_found}

    def test_missing_entity_operations(self, client, base_path, create_data, update_data, not_found):
        assert client.put(f"{base_path}/999", json=update_data).status_code == 404
        assert client.delete(f"{base_path}/999").status_code == 404


class TestValidationAndConflicts:
    def test_invalid_ruc_rejected(self, client):
        response = client.post("/api/empresa/", json={"razon_social": "X", "ruc": "123"})
        assert response.status_code == 400

    def test_invalid_incoterm_code_rejected(self, client):
        response = client.post("/api/incoterm/", json={"codigo": "fob", "nombre": "Free On Board"})
        assert response.status_code == 400

    def test_duplicate_unique_value_is_conflict(self, client):
        payload = {"codigo": "CIF", "nombre": "Cost, Insurance and Freight"}
        assert client.post("/api/incoterm/", json=payload).status_code == 201

        response = client.post("/api/incoterm/", json=payload)

        assert response.status_code == 409
        assert "error" in response.json()
        # The session is usable again after the failed insert
        assert len(client.get("/api/incoterm/").json()) == 1

    def test_list_limit_is_capped(self, client, db_session):
        from app.models.motivo_acceso import MotivoAcceso
        db_session.add_all([MotivoAcceso(nombre=f"Motivo {i}") for i in range(105)])
        db_session.commit()

        response = client.get("/api/motivo-acceso/", params={"limit": 500})

        assert len(response.json()) == 100
