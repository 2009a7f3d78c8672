"""CRUD de clientes."""

URL = "/api/v1/clients"


class TestListClients:

    def test_list_is_ordered_by_name(self, client, reception_headers, make_client):
        make_client("Zoe Díaz")
        make_client("Ana Gómez")

        resp = client.get(URL, headers=reception_headers)

        assert resp.status_code == 200
        assert [c["name"] for c in resp.json()] == ["Ana Gómez", "Zoe Díaz"]

    def test_search_matches_name_dni_or_phone_case_insensitive(self, client, reception_headers, make_client):
        make_client("María López", dni="30111222", phone="555-0101")
        make_client("Pedro Ruiz", dni="28999000", phone="555-0202")

        by_name = client.get(URL, params={"search": "maría"}, headers=reception_headers).json()
        by_dni = client.get(URL, params={"search": "28999"}, headers=reception_headers).json()
        by_phone = client.get(URL, params={"search": "0101"}, headers=reception_headers).json()

        assert [c["name"] for c in by_name] == ["María López"]
        assert [c["name"] for c in by_dni] == ["Pedro Ruiz"]
        assert [c["name"] for c in by_phone] == ["María López"]

    def test_search_without_match_returns_empty_list(self, client, reception_headers, make_client):
        make_client("María López", dni="30111222", phone="555-0101")

        resp = client.get(URL, params={"search": "inexistente"}, headers=reception_headers)

        assert resp.status_code == 200
        assert resp.json() == []


class TestClientCrud:

    def test_create_and_fetch(self, client, reception_headers):
        payload = {
            "dni": "30111222",
            "name": "María López",
            "phone": "555-0101",
            "address": "Av. Siempre Viva 742",
            "business_name": "López SRL",
        }
        resp = client.post(URL, json=payload, headers=reception_headers)

        assert resp.status_code == 201
        created = resp.json()
        for key, value in payload.items():
            assert created[key] == value

        fetched = client.get(f"{URL}/{created['id']}", headers=reception_headers)
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "María López"

    def test_create_requires_name(self, client, reception_headers):
        missing = client.post(URL, json={"dni": "1"}, headers=reception_headers)
        blank = client.post(URL, json={"name": "   "}, headers=reception_headers)

        assert missing.status_code == 400
        assert missing.json()["detail"] == "El campo 'name' es requerido."
        assert blank.status_code == 400
        assert blank.json()["detail"] == "El nombre es requerido."

    def test_get_unknown_returns_404(self, client, reception_headers):
        resp = client.get(f"{URL}/999", headers=reception_headers)
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Cliente no encontrado."

    def test_update_replaces_fields(self, client, reception_headers, make_client):
        row = make_client("Juan Pérez", phone="111")

        resp = client.put(f"{URL}/{row.id}", json={"name": "Juan A. Pérez"}, headers=reception_headers)

        assert resp.status_code == 200
        assert resp.json()["name"] == "Juan A. Pérez"
        assert resp.json()["phone"] is None

    def test_update_validation_and_not_found(self, client, reception_headers, make_client):
        row = make_client()

        assert client.put(f"{URL}/{row.id}", json={"name": ""}, headers=reception_headers).status_code == 400
        assert client.put(f"{URL}/999", json={"name": "X"}, headers=reception_headers).status_code == 404

    def test_delete_unreferenced_client(self, client, reception_headers, make_client):
        row = make_client()

        resp = client.delete(f"{URL}/{row.id}", headers=reception_headers)

        assert resp.status_code == 200
        assert resp.json()["message"] == "Cliente eliminado"
        assert resp.json()["client"]["id"] == row.id
        assert client.get(f"{URL}/{row.id}", headers=reception_headers).status_code == 404

    def test_delete_unknown_returns_404(self, client, reception_headers):
        assert client.delete(f"{URL}/999", headers=reception_headers).status_code == 404

    def test_delete_client_with_sales_is_conflict_and_row_survives(
        self, client, reception_headers, admin_user, make_client, make_product, make_sale
    ):
        row = make_client()
        make_sale(row, admin_user, [(make_product(), 1, "100.00")])

        resp = client.delete(f"{URL}/{row.id}", headers=reception_headers)

        assert resp.status_code == 409
        assert resp.json()["detail"] == "No se puede eliminar el cliente porque tiene ventas asociadas."
        assert client.get(f"{URL}/{row.id}", headers=reception_headers).status_code == 200
