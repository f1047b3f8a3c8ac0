"""Integration tests for the customer API."""

from unittest.mock import patch

import pytest

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository

pytestmark = pytest.mark.integration

URL = "/api/v1/customers/"


class TestCustomerList:
    def test_paginated_list_newest_id_first(self, api_client, customer, company):
        response = api_client.get(URL)

        assert response.status_code == 200
        assert response.data["count"] == 2
        assert [c["id"] for c in response.data["results"]] == ["0002", "0001"]

    def test_filter_by_column(self, api_client, customer, company):
        response = api_client.get(URL, {"name": "KOWAL"})

        assert [c["id"] for c in response.data["results"]] == ["0001"]

    def test_filters_combine(self, api_client, customer, company):
        response = api_client.get(URL, {"name": "kowal", "type": "company"})

        assert response.data["count"] == 0

    def test_sort_by_name(self, api_client, customer, company):
        response = api_client.get(URL, {"ordering": "name"})

        assert [c["name"] for c in response.data["results"]] == [
            "Bud-Max Sp. z o.o.",
            "Jan Kowalski",
        ]

    def test_unknown_sort_key_uses_default(self, api_client, customer, company):
        response = api_client.get(URL, {"ordering": "-nope"})

        assert [c["id"] for c in response.data["results"]] == ["0002", "0001"]


class TestCustomerCreate:
    def test_create_assigns_next_id(self, api_client, customer, company):
        response = api_client.post(
            URL,
            {
                "name": "Rem-Pol Sp. z o.o.",
                "phone": "603 111 222",
                "type": "COMPANY",
                "tax_id": "525-000-11-22",
            },
            format="json",
        )

        assert response.status_code == 201
        assert response.data["id"] == "0003"
        assert response.data["tax_id"] == "5250001122"
        assert response.data["email"] == ""
        assert response.data["type_label"] == "Firma"
        assert Customer.objects.count() == 3

    def test_first_customer(self, api_client):
        response = api_client.post(
            URL, {"name": "Anna Nowak", "phone": "501000000"}, format="json"
        )

        assert response.status_code == 201
        assert response.data["id"] == "0001"
        assert response.data["type"] == "INDIVIDUAL"

    def test_missing_phone(self, api_client):
        response = api_client.post(URL, {"name": "Anna Nowak"}, format="json")

        assert response.status_code == 400
        assert "phone" in response.data["detail"]

    def test_invalid_email(self, api_client):
        response = api_client.post(
            URL,
            {"name": "Anna Nowak", "phone": "501000000", "email": "nie-email"},
            format="json",
        )

        assert response.status_code == 400

    def test_taken_id_is_not_overwritten(self, api_client, customer):
        with patch.object(CustomerDjangoRepository, "next_id", return_value="0001"):
            response = api_client.post(
                URL, {"name": "Anna Nowak", "phone": "501000000"}, format="json"
            )

        assert response.status_code == 409
        assert Customer.objects.get(id="0001").name == "Jan Kowalski"


class TestCustomerRetrieveUpdate:
    def test_retrieve(self, api_client, customer):
        response = api_client.get(f"{URL}0001/")

        assert response.status_code == 200
        assert response.data["name"] == "Jan Kowalski"

    def test_retrieve_missing(self, api_client):
        response = api_client.get(f"{URL}0404/")

        assert response.status_code == 404
        assert response.data["detail"] == "Nie znaleziono klienta."

    def test_patch_keeps_other_fields(self, api_client, customer):
        response = api_client.patch(
            f"{URL}0001/", {"notes": "Stały klient"}, format="json"
        )

        assert response.status_code == 200
        customer.refresh_from_db()
        assert customer.notes == "Stały klient"
        assert customer.phone == "+48 501 234 567"

    def test_clear_email(self, api_client, customer):
        api_client.patch(f"{URL}0001/", {"email": ""}, format="json")

        customer.refresh_from_db()
        assert customer.email == ""

    def test_blank_name_rejected(self, api_client, customer):
        response = api_client.patch(f"{URL}0001/", {"name": "  "}, format="json")

        assert response.status_code == 400

    def test_update_missing(self, api_client):
        response = api_client.patch(f"{URL}0404/", {"notes": "x"}, format="json")

        assert response.status_code == 404

    def test_customers_cannot_be_deleted(self, api_client, customer):
        response = api_client.delete(f"{URL}0001/")

        assert response.status_code == 405
        assert Customer.objects.filter(id="0001").exists()
