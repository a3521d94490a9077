"""Tests for services/: route templates and list_all against a mock client."""
from unittest.mock import MagicMock

import pytest

from retail_express.services.base import dump_payload, resource_path
from retail_express.services.customers import CustomerService
from retail_express.services.orders import OrderService
from retail_express.services.products import ProductService


@pytest.fixture
def mock_client():
    """MagicMock standing in for RetailExpressClient."""
    client = MagicMock()
    client.get.return_value = {"data": []}
    return client


def test_collections():
    assert CustomerService.collection == "customers"
    assert ProductService.collection == "products"
    assert OrderService.collection == "orders"


def test_resource_path():
    assert resource_path("orders", 7) == "orders/7"


def test_dump_payload_passes_dict_through():
    payload = {"a": 1}
    assert dump_payload(payload) is payload


def test_list_passes_cursor_params(mock_client):
    ProductService(mock_client).list(3, 20)
    mock_client.get.assert_called_once_with(
        "products", params={"page_number": 3, "page_size": 20},
    )


def test_get_by_id(mock_client):
    OrderService(mock_client).get(11)
    mock_client.get.assert_called_once_with("orders/11")


def test_create_and_update(mock_client):
    service = CustomerService(mock_client)
    service.create({"first_name": "Ada"})
    service.update(5, {"first_name": "Grace"})

    mock_client.post.assert_called_once_with("customers", body={"first_name": "Ada"})
    mock_client.put.assert_called_once_with("customers/5", body={"first_name": "Grace"})


def test_list_all_stops_on_short_page(mock_client):
    mock_client.get.side_effect = [
        {"data": [{"id": 1}, {"id": 2}]},
        {"data": [{"id": 3}]},
    ]
    items = OrderService(mock_client).list_all(page_size=2)

    assert [i["id"] for i in items] == [1, 2, 3]
    assert mock_client.get.call_args_list[1][1]["params"] == {"page_number": 2, "page_size": 2}


def test_iter_all_is_lazy(mock_client):
    OrderService(mock_client).iter_all()
    mock_client.get.assert_not_called()


def test_list_all_follows_total_records(mock_client):
    mock_client.get.side_effect = [
        {"data": [{"id": 1}], "total_records": 2},
        {"data": [{"id": 2}], "total_records": 2},
    ]
    items = CustomerService(mock_client).list_all(page_size=500)

    assert [i["id"] for i in items] == [1, 2]
    assert mock_client.get.call_count == 2
