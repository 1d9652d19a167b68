from fastapi.testclient import TestClient

from app.core.schema_service import SchemaService
from tests.helpers import schema_payload


def _create(client: TestClient, name: str = "survey", **extra) -> dict:
    r = client.post("/api/schemas", json=schema_payload(name, **extra))
    assert r.status_code == 201
    return r.json()


def test_create_schema_defaults(client: TestClient):
    """Test creating a schema fills id, version, creator and status"""
    body = _create(client, "survey", tags=["feedback"])
    assert len(body["schemaId"]) == 36
    assert body["schemaName"] == "survey"
    assert body["schemaVersion"] == "1.0"
    assert body["createdBy"] == "system"
    assert body["status"] == "active"
    assert body["tags"] == ["feedback"]
    assert body["formConfig"]["formId"] == "survey"
    assert body["createdAt"] == body["updatedAt"]


def test_create_schema_rejects_malformed_rules(client: TestClient):
    """Test rule operand types are checked when the schema is authored"""
    payload = schema_payload("broken")
    payload["formConfig"]["fields"][0]["validations"].append(
        {"name": "min", "value": "eighteen", "errorMessage": "too small"}
    )
    r = client.post("/api/schemas", json=payload)
    assert r.status_code == 422


def test_create_schema_rejects_cyclic_conditions(client: TestClient):
    payload = schema_payload("cyclic")
    payload["formConfig"]["fields"] = [
        {"name": "a", "conditions": [{"dependsOn": "b", "operator": "equals", "value": "1"}]},
        {"name": "b", "conditions": [{"dependsOn": "a", "operator": "equals", "value": "1"}]},
    ]
    r = client.post("/api/schemas", json=payload)
    assert r.status_code == 422


def test_create_schema_requires_name(client: TestClient):
    payload = schema_payload("nameless")
    payload["schemaName"] = ""
    r = client.post("/api/schemas", json=payload)
    assert r.status_code == 422


def test_get_schema_by_id(client: TestClient):
    created = _create(client)
    r = client.get(f"/api/schemas/{created['schemaId']}")
    assert r.status_code == 200
    assert r.json() == created


def test_get_schema_not_found(client: TestClient):
    r = client.get("/api/schemas/00000000-0000-0000-0000-000000000000")
    assert r.status_code == 404


def test_list_schemas_with_filters(client: TestClient):
    """Test status, tag and name filters; status wins over the others"""
    a = _create(client, "alpha", tags=["hr"])
    b = _create(client, "beta", tags=["hr", "it"])
    _create(client, "gamma")
    client.patch(f"/api/schemas/{b['schemaId']}/status", json={"status": "inactive"})

    r = client.get("/api/schemas")
    assert len(r.json()) == 3

    r = client.get("/api/schemas?tag=hr")
    assert sorted(s["schemaName"] for s in r.json()) == ["alpha", "beta"]

    r = client.get("/api/schemas?name=alpha")
    assert [s["schemaId"] for s in r.json()] == [a["schemaId"]]

    r = client.get("/api/schemas?status=inactive&tag=nothing")
    assert [s["schemaName"] for s in r.json()] == ["beta"]


def test_list_schema_metadata(client: TestClient):
    """Test metadata listing omits the form config"""
    _create(client, "alpha")
    r = client.get("/api/schemas/metadata")
    assert r.status_code == 200
    rows = r.json()
    assert len(rows) == 1
    assert rows[0]["schemaName"] == "alpha"
    assert "formConfig" not in rows[0]


def test_update_schema(client: TestClient):
    created = _create(client, "survey", tags=["old"])
    payload = schema_payload("survey-v2", schemaVersion="2.0", tags=["new"])
    r = client.put(f"/api/schemas/{created['schemaId']}", json=payload)
    assert r.status_code == 200
    body = r.json()
    assert body["schemaId"] == created["schemaId"]
    assert body["schemaName"] == "survey-v2"
    assert body["schemaVersion"] == "2.0"
    assert body["tags"] == ["new"]
    assert body["createdAt"] == created["createdAt"]
    assert body["formConfig"]["formId"] == "survey-v2"


def test_update_schema_not_found(client: TestClient):
    r = client.put("/api/schemas/missing", json=schema_payload("x"))
    assert r.status_code == 404


def test_update_schema_status(client: TestClient):
    created = _create(client)
    r = client.patch(f"/api/schemas/{created['schemaId']}/status", json={"status": "archived"})
    assert r.status_code == 200
    assert r.json()["status"] == "archived"


def test_update_schema_status_requires_status(client: TestClient):
    created = _create(client)
    r = client.patch(f"/api/schemas/{created['schemaId']}/status", json={})
    assert r.status_code == 400

    r = client.patch("/api/schemas/missing/status", json={"status": "active"})
    assert r.status_code == 404


def test_delete_schema(client: TestClient):
    created = _create(client)
    r = client.delete(f"/api/schemas/{created['schemaId']}")
    assert r.status_code == 204

    r = client.get(f"/api/schemas/{created['schemaId']}")
    assert r.status_code == 404

    r = client.delete(f"/api/schemas/{created['schemaId']}")
    assert r.status_code == 404


def test_get_schema_form_config(client: TestClient):
    created = _create(client, "survey")
    r = client.get(f"/api/schemas/{created['schemaId']}/form-config")
    assert r.status_code == 200
    assert r.json() == created["formConfig"]

    r = client.get("/api/schemas/missing/form-config")
    assert r.status_code == 404


def test_default_schemas_are_served(client: TestClient, store):
    """Test the seeded registration and contact schemas"""
    SchemaService(store).initialize_default_schemas()

    r = client.get("/api/schemas?tag=onboarding")
    rows = r.json()
    assert [s["schemaName"] for s in rows] == ["user-registration"]
    assert rows[0]["formConfig"]["formId"] == "user-registration"

    r = client.get("/api/schemas?name=contact-form")
    assert r.json()[0]["tags"] == ["contact", "support", "inquiry"]


def test_create_schema_accepts_null_lists(client: TestClient):
    """Test null validations, conditions and crossFieldValidations read as empty"""
    payload = schema_payload("nullable")
    payload["formConfig"]["crossFieldValidations"] = None
    payload["formConfig"]["fields"][0]["conditions"] = None
    payload["formConfig"]["fields"].append({"name": "note", "label": "Note", "validations": None})
    r = client.post("/api/schemas", json=payload)
    assert r.status_code == 201
    form = r.json()["formConfig"]
    assert form["crossFieldValidations"] == []
    assert form["fields"][0]["conditions"] == []
    assert form["fields"][1]["validations"] == []

    r = client.post("/api/validate", json={"formId": r.json()["schemaId"], "data": {"answer": "ok"}})
    assert r.json()["valid"] is True


def test_cross_field_rule_with_null_fields_is_a_no_op(client: TestClient):
    payload = schema_payload("nullfields")
    payload["formConfig"]["crossFieldValidations"] = [
        {"validationType": "fieldMatch", "fields": None, "operator": "equals", "errorMessage": "never"}
    ]
    r = client.post("/api/schemas", json=payload)
    assert r.status_code == 201
    assert r.json()["formConfig"]["crossFieldValidations"][0]["fields"] == []

    r = client.post("/api/validate", json={"formId": r.json()["schemaId"], "data": {"answer": "ok"}})
    assert r.json()["valid"] is True
