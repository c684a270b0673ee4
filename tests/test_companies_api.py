from __future__ import annotations


def test_list_companies_sorted_by_name(client):
    response = client.get("/companies")
    assert response.status_code == 200
    assert response.json() == {
        "companies": [
            {"code": "apple", "name": "Apple"},
            {"code": "ibm", "name": "IBM"},
        ]
    }


def test_get_company_includes_invoice_ids(client):
    response = client.get("/companies/apple")
    assert response.status_code == 200
    assert response.json() == {
        "company": {
            "code": "apple",
            "name": "Apple",
            "description": "Maker of OSX.",
            "invoices": [1, 2, 3],
        }
    }


def test_get_company_without_invoices_has_empty_list(client):
    client.post("/companies", json={"name": "Dollar Tree", "description": "Cheap"})
    response = client.get("/companies/dollar-tree")
    assert response.status_code == 200
    assert response.json()["company"]["invoices"] == []


def test_get_missing_company_returns_404(client):
    response = client.get("/companies/nonexistent")
    assert response.status_code == 404
    assert response.json() == {
        "error": {"message": "Can't find company with code of nonexistent", "status": 404}
    }


def test_create_company_slugifies_name(client):
    response = client.post("/companies", json={"name": "DollarTree", "description": "Cheap"})
    assert response.status_code == 201
    assert response.json() == {
        "company": {"code": "dollartree", "name": "DollarTree", "description": "Cheap"}
    }

    listing = client.get("/companies/").json()["companies"]
    assert {"code": "dollartree", "name": "DollarTree"} in listing


def test_create_company_with_taken_code_conflicts(client):
    response = client.post(
        "/companies", json={"name": "APPLE!", "description": "Duplicate"}
    )
    assert response.status_code == 500
    assert response.json()["error"]["status"] == 500

    # existing row untouched
    company = client.get("/companies/apple").json()["company"]
    assert company["description"] == "Maker of OSX."


def test_create_company_without_usable_name_is_rejected(client):
    assert client.post("/companies", json={"name": "!!!"}).status_code == 500
    assert client.post("/companies", json={"description": "no name"}).status_code == 500


def test_update_company(client):
    response = client.put(
        "/companies/apple", json={"name": "AppleUpdate", "description": "NewDescription"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "company": {"code": "apple", "name": "AppleUpdate", "description": "NewDescription"}
    }


def test_update_missing_company_returns_404_before_field_checks(client):
    response = client.put("/companies/nonexistent", json={"name": "Somename"})
    assert response.status_code == 404


def test_update_company_with_missing_fields_is_rejected(client):
    response = client.put("/companies/apple", json={})
    assert response.status_code == 500
    assert "name" in response.json()["error"]["message"]


def test_delete_company_removes_its_invoices(client):
    response = client.delete("/companies/apple")
    assert response.status_code == 200
    assert response.json() == {"status": "deleted"}

    assert client.get("/companies/apple").status_code == 404
    assert client.get("/invoices").json() == {"invoices": [{"id": 4, "comp_code": "ibm"}]}


def test_delete_missing_company_returns_404(client):
    response = client.delete("/companies/nonexistent")
    assert response.status_code == 404
