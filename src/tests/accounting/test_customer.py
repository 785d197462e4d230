from __future__ import annotations

import json
from urllib.parse import unquote

from accounting_integration.accounting.quickbooks import Customer, QuickBooksConnection


def test_url_builder_for_resource_and_query(connection) -> None:
    assert Customer.url_builder(connection) == "/v3/company/123456789/customer/"

    query_path = Customer.url_builder(connection, query="select * from Customer")
    assert query_path.startswith("/v3/company/123456789/query?query=")
    assert " " not in query_path
    assert unquote(query_path.split("query=", 1)[1]) == "select * from Customer"


def test_fetch_by_id_decodes_and_attaches(connection, fake_http, load_quickbooks_fixture) -> None:
    fake_http.queue(text=load_quickbooks_fixture("customer"))

    customer = Customer.fetch_by_id("123", connection)

    assert fake_http.calls[0].method == "GET"
    assert fake_http.calls[0].url.endswith("/v3/company/123456789/customer/123")
    assert customer.display_name == "John Doe"
    assert customer.primary_email_address.address == "john@example.com"
    assert customer.sync_token == 0
    assert customer.persisted
    assert customer.connection is connection
    assert customer.external_id == "123"


def test_fetch_by_id_returns_none_for_empty_body_or_fault(connection, fake_http, load_quickbooks_fixture) -> None:
    fake_http.queue(text="")
    fake_http.queue(404, text=load_quickbooks_fixture("fault"))

    assert Customer.fetch_by_id("999", connection) is None
    assert Customer.fetch_by_id("999", connection) is None


def test_fetch_by_id_short_circuits_without_id_or_quickbooks_connection(connection, fake_http) -> None:
    assert Customer.fetch_by_id(None, connection) is None
    assert Customer.fetch_by_id("", connection) is None
    assert Customer.fetch_by_id("123", object()) is None
    assert fake_http.calls == []


def test_fetch_all_returns_every_record(connection, fake_http, load_quickbooks_fixture) -> None:
    fake_http.queue(text=load_quickbooks_fixture("customers"))

    customers = Customer.fetch_all(connection)

    assert [c.display_name for c in customers] == ["John Doe", "Jane Smith"]
    assert customers[1].sync_token == 3
    assert all(c.persisted and c.connection is connection for c in customers)
    assert "/v3/company/123456789/query?query=" in fake_http.calls[0].url


def test_fetch_all_returns_empty_list_when_nothing_matches(connection, fake_http, load_quickbooks_fixture) -> None:
    fake_http.queue(text=load_quickbooks_fixture("empty_customers"))
    fake_http.queue(text="")

    assert Customer.fetch_all(connection) == []
    assert Customer.fetch_all(connection) == []
    assert Customer.fetch_all("not a connection") == []


def test_save_without_connection_is_invalid_and_sends_nothing(fake_http) -> None:
    customer = Customer(display_name="John")

    assert customer.save() is False
    assert "connection is required" in customer.errors
    assert not customer.persisted
    assert fake_http.calls == []


def test_save_requires_a_name(connection, fake_http) -> None:
    customer = Customer(connection=connection, notes="no name")

    assert customer.save() is False
    assert "display_name or a name part is required" in customer.errors
    assert fake_http.calls == []


def test_save_posts_record_and_reads_back_sync_token(connection, fake_http) -> None:
    fake_http.queue(200, {"Customer": {"Id": "77", "SyncToken": 10, "DisplayName": "John"}})
    customer = Customer(connection=connection, display_name="John")

    assert customer.save() is True

    call = fake_http.calls[0]
    assert call.method == "POST"
    assert call.url.endswith("/v3/company/123456789/customer/")
    assert json.loads(call.data) == {"DisplayName": "John"}
    assert customer.persisted
    assert customer.sync_token == 10
    assert customer.id == "77"


def test_save_rejected_by_quickbooks_leaves_state_alone(connection, fake_http, load_quickbooks_fixture) -> None:
    fake_http.queue(400, text=load_quickbooks_fixture("fault"))
    customer = Customer(connection=connection, display_name="John")

    assert customer.save() is False
    assert not customer.persisted
    assert customer.sync_token is None
    assert customer.id is None


def test_save_tolerates_non_json_success_body(connection, fake_http) -> None:
    fake_http.queue(200, text="")
    customer = Customer(connection=connection, display_name="John")

    assert customer.save() is True
    assert customer.persisted
    assert customer.sync_token is None


def test_update_assigns_then_saves(connection, fake_http) -> None:
    fake_http.queue(200, {"Customer": {"Id": "123", "SyncToken": "4"}})
    customer = Customer(connection=connection, persisted=True, id="123", sync_token=3, display_name="Old")

    assert customer.update({"display_name": "New"}, notes="vip") is True

    sent = json.loads(fake_http.calls[0].data)
    assert sent["Id"] == "123"
    assert sent["SyncToken"] == 3
    assert sent["DisplayName"] == "New"
    assert sent["Notes"] == "vip"
    assert customer.sync_token == 4


def test_create_saves_valid_record(connection, fake_http) -> None:
    fake_http.queue(200, {"Customer": {"Id": "5", "SyncToken": "0"}})

    customer = Customer.create({"display_name": "Jane", "connection": connection})

    assert customer.persisted
    assert customer.id == "5"
    assert len(fake_http.calls) == 1


def test_create_returns_unsaved_instance_when_invalid(fake_http) -> None:
    customer = Customer.create({"display_name": "Jane"})

    assert isinstance(customer, Customer)
    assert not customer.persisted
    assert not customer.is_valid()
    assert fake_http.calls == []


def test_contact_summary(load_quickbooks_fixture) -> None:
    customer = Customer.from_dict(json.loads(load_quickbooks_fixture("customer"))["Customer"])

    assert customer.contact_summary() == {
        "id": "123",
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "+1-555-123-4567",
        "address": "123 Main Street, Mountain View, CA, 94042, USA",
        "billing_address": "123 Main Street, Mountain View, CA, 94042, USA",
        "shipping_address": None,
    }


def test_customer_is_a_quickbooks_model() -> None:
    assert Customer.resource_name == "Customer"
    assert QuickBooksConnection.fetch_contact_by_id is QuickBooksConnection.fetch_customer_by_id


def test_fetch_by_id_returns_none_for_non_json_error_page(connection, fake_http) -> None:
    fake_http.queue(404, text="<html>Not Found</html>")

    assert Customer.fetch_by_id("999", connection) is None


def test_fetch_all_returns_empty_list_for_failed_query(connection, fake_http) -> None:
    fake_http.queue(502, text="<html>Bad Gateway</html>")

    assert Customer.fetch_all(connection) == []


def test_fetch_by_id_treats_zero_as_an_id(connection, fake_http) -> None:
    fake_http.queue(text="")

    assert Customer.fetch_by_id(0, connection) is None
    assert fake_http.calls[0].url.endswith("/v3/company/123456789/customer/0")


def test_save_with_unreadable_sync_token_leaves_record_unsaved(connection, fake_http) -> None:
    fake_http.queue(200, {"Customer": {"Id": "9", "SyncToken": "abc"}})
    customer = Customer(connection=connection, display_name="John")

    assert customer.save() is False
    assert not customer.persisted
    assert customer.id is None
    assert customer.sync_token is None


def test_title_or_suffix_alone_is_not_a_name(connection) -> None:
    assert not Customer(connection=connection, title="Mr").is_valid()
    assert not Customer(connection=connection, suffix="Jr", middle_name="Q").is_valid()
    assert Customer(connection=connection, family_name="Doe").is_valid()
    assert Customer(connection=connection, company_name="Doe Hardware").is_valid()
