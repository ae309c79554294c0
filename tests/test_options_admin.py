"""
Option tables API tests
=======================
Activities and servings that bars can be tagged with.
"""


class TestOptionsAdmin:

    def test_all_options(self, client, seeded_options):
        response = client.get("/admin/options")
        assert response.status_code == 200
        assert response.json() == seeded_options

    def test_list_kind_in_display_order(self, client, seeded_options):
        body = client.get("/admin/options/servings").json()
        assert [item["name"] for item in body] == ["Beer", "Wine", "Cocktails"]
        assert [item["display_order"] for item in body] == [1, 2, 3]

    def test_create(self, client):
        response = client.post("/admin/options/activities", json={"name": "  Board   games ", "display_order": 4})
        assert response.status_code == 201
        assert response.json()["name"] == "Board games"
        assert client.get("/admin/options").json()["activities"] == ["Board games"]

    def test_create_duplicate(self, client, seeded_options):
        response = client.post("/admin/options/activities", json={"name": "Quiz"})
        assert response.status_code == 409

    def test_create_blank(self, client):
        assert client.post("/admin/options/servings", json={"name": "  "}).status_code == 400

    def test_unknown_kind(self, client):
        assert client.get("/admin/options/drinks").status_code == 422
        assert client.post("/admin/options/drinks", json={"name": "Beer"}).status_code == 422

    def test_delete(self, client, seeded_options):
        assert client.delete("/admin/options/servings/Wine").status_code == 204
        assert client.get("/admin/options").json()["servings"] == ["Beer", "Cocktails"]
        assert client.delete("/admin/options/servings/Wine").status_code == 404

    def test_new_option_is_selectable(self, client):
        client.post("/admin/options/activities", json={"name": "Bingo"})
        response = client.post("/admin/bars", json={"name": "Bingo Bar", "activities": ["Bingo"]})
        assert response.status_code == 201
        assert response.json()["activities"] == ["Bingo"]
