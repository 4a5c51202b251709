"""Contract tests for the lookup API endpoints."""


def error_of(response) -> dict:
    return response.json()["error"]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestListLookups:
    """GET /api/lookups/{kind} and /children."""

    def test_list_all(self, client, sample_lookups):
        response = client.get("/api/lookups/location")

        assert response.status_code == 200
        assert response.json() == [
            {"id": sample_lookups["london"], "name": "London"},
            {"id": sample_lookups["manchester"], "name": "Manchester"},
        ]

    def test_list_all_by_table_name(self, client, sample_lookups):
        response = client.get("/api/lookups/house_models")

        assert response.status_code == 200
        assert [item["name"] for item in response.json()] == ["The Gosford", "The Rose"]

    def test_unknown_kind(self, client):
        response = client.get("/api/lookups/plots")

        assert response.status_code == 400
        assert error_of(response) == {
            "code": "validation_error",
            "message": "Invalid lookup kind: plots",
        }

    def test_children(self, client, sample_lookups):
        response = client.get(
            "/api/lookups/houseModel/children", params={"parent_id": sample_lookups["taylor"]}
        )

        assert response.status_code == 200
        assert response.json() == [{"id": sample_lookups["gosford"], "name": "The Gosford"}]

    def test_children_without_parent(self, client, sample_lookups):
        response = client.get("/api/lookups/development/children")

        assert response.status_code == 200
        assert response.json() == []

    def test_children_malformed_parent(self, client):
        response = client.get("/api/lookups/development/children", params={"parent_id": "x"})

        assert response.status_code == 400
        assert error_of(response)["message"] == "Invalid Location ID."


class TestAddLookup:
    """POST /api/lookups/{kind}."""

    def test_add_location(self, client):
        response = client.post("/api/lookups/location", json={"name": " Leeds "})

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Leeds added successfully."
        assert client.get("/api/lookups/location").json() == [{"id": body["id"], "name": "Leeds"}]

    def test_add_duplicate(self, client, sample_lookups):
        response = client.post("/api/lookups/location", json={"name": "london"})

        assert response.status_code == 409
        assert error_of(response) == {
            "code": "conflict",
            "message": "Location 'london' already exists.",
        }

    def test_add_empty_name(self, client):
        response = client.post("/api/lookups/builder", json={"name": "  "})

        assert response.status_code == 400
        assert error_of(response)["message"] == "Builder name is required."

    def test_add_development_without_parent(self, client):
        response = client.post("/api/lookups/development", json={"name": "City Views"})

        assert response.status_code == 400
        assert error_of(response)["message"] == "Development requires a parent Location ID."

    def test_add_house_model_with_details(self, client, sample_lookups):
        response = client.post(
            "/api/lookups/houseModel",
            json={
                "name": "The Cherry",
                "parent_id": str(sample_lookups["barratt"]),
                "rooms": [{"name": "Lounge", "has_room": True, "size": "12x15ft"}],
                "features": [{"name": "Solar Panels", "has_feature": False}],
            },
        )

        assert response.status_code == 201
        details = client.get(f"/api/house-models/{response.json()['id']}/details").json()
        assert details["builder_id"] == sample_lookups["barratt"]
        assert details["rooms"] == [{"name": "Lounge", "has_room": True, "size": "12x15ft"}]
        assert details["features"] == [{"name": "Solar Panels", "has_feature": False}]


class TestUpdateAndDeleteLookup:
    """PATCH and DELETE /api/lookups/{kind}/{id}."""

    def test_rename(self, client, sample_lookups):
        response = client.patch(
            f"/api/lookups/builder/{sample_lookups['taylor']}", json={"name": "Taylor Wimpey plc"}
        )

        assert response.status_code == 200
        assert response.json()["success"] is True
        names = [item["name"] for item in client.get("/api/lookups/builder").json()]
        assert names == ["Barratt Homes", "Taylor Wimpey plc"]

    def test_rename_conflict(self, client, sample_lookups):
        response = client.patch(
            f"/api/lookups/builder/{sample_lookups['taylor']}", json={"name": "BARRATT HOMES"}
        )

        assert response.status_code == 409

    def test_rename_missing(self, client):
        response = client.patch("/api/lookups/location/999", json={"name": "York"})

        assert response.status_code == 404
        assert error_of(response) == {"code": "not_found", "message": "Location 999 not found."}

    def test_rename_malformed_id(self, client):
        response = client.patch("/api/lookups/location/abc", json={"name": "York"})

        assert response.status_code == 400
        assert error_of(response)["message"] == "Invalid Location ID."

    def test_delete_cascades_to_children(self, client, sample_lookups):
        response = client.delete(f"/api/lookups/location/{sample_lookups['london']}")

        assert response.status_code == 200
        assert response.json()["message"] == "Item deleted successfully."
        names = [item["name"] for item in client.get("/api/lookups/development").json()]
        assert names == ["Riverside Heights"]

    def test_delete_missing(self, client):
        response = client.delete("/api/lookups/builder/999")

        assert response.status_code == 200
        assert response.json()["message"] == "Nothing to delete."


class TestDevelopmentBuilders:
    """GET/POST /api/developments/{id}/builders."""

    def test_link_and_list(self, client, sample_lookups):
        url = f"/api/developments/{sample_lookups['green_meadows']}/builders"

        response = client.post(url, json={"builder_id": sample_lookups["barratt"]})
        assert response.status_code == 201

        assert client.get(url).json() == [{"id": sample_lookups["barratt"], "name": "Barratt Homes"}]

    def test_duplicate_link(self, client, sample_lookups):
        url = f"/api/developments/{sample_lookups['green_meadows']}/builders"
        client.post(url, json={"builder_id": sample_lookups["barratt"]})

        response = client.post(url, json={"builder_id": str(sample_lookups["barratt"])})

        assert response.status_code == 409
        assert error_of(response)["message"] == "This builder is already linked to this development."

    def test_link_unknown_builder(self, client, sample_lookups):
        response = client.post(
            f"/api/developments/{sample_lookups['green_meadows']}/builders",
            json={"builder_id": 999},
        )

        assert response.status_code == 400
        assert error_of(response)["message"] == "Builder 999 does not exist."


class TestHouseModelDetailsEndpoints:
    """GET/PUT /api/house-models/{id}/details."""

    def test_get(self, client, sample_lookups):
        response = client.get(f"/api/house-models/{sample_lookups['rose']}/details")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "The Rose"
        assert body["rooms"] == [{"name": "Kitchen", "has_room": True, "size": "10x12ft"}]

    def test_get_missing(self, client):
        response = client.get("/api/house-models/999/details")

        assert response.status_code == 404

    def test_put_replaces(self, client, sample_lookups):
        url = f"/api/house-models/{sample_lookups['gosford']}/details"

        response = client.put(
            url,
            json={"rooms": [{"name": "Bathroom", "has_room": True}], "features": []},
        )

        assert response.status_code == 200
        body = client.get(url).json()
        assert body["rooms"] == [{"name": "Bathroom", "has_room": True, "size": None}]
        assert body["features"] == []

    def test_put_missing(self, client):
        response = client.put("/api/house-models/999/details", json={"rooms": [], "features": []})

        assert response.status_code == 404
        assert error_of(response)["message"] == "House Model 999 not found."
