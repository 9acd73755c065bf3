"""GET /api/products — filtering and pagination through the HTTP layer."""
from __future__ import annotations

import pytest


def _list(client, **params) -> dict:
    response = client.get("/api/products", params=params)
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["success"] is True
    return body


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

def test_empty_store(client) -> None:
    body = _list(client, page="3", limit="5")
    assert body["data"] == []
    assert body["pagination"] == {
        "total": 0,
        "page": 3,
        "limit": 5,
        "totalPages": 0,
        "hasNextPage": False,
        "hasPrevPage": False,
    }


def test_empty_store_first_page_has_no_flags(client) -> None:
    body = _list(client)
    assert body["data"] == []
    assert body["pagination"]["totalPages"] == 0
    assert body["pagination"]["hasNextPage"] is False
    assert body["pagination"]["hasPrevPage"] is False
    assert body["message"] == "Found 0 product(s) on page 1 of 0"


def test_first_page_of_twenty_five(client, make_products) -> None:
    make_products(25)
    body = _list(client, page="1", limit="10")
    assert len(body["data"]) == 10
    assert body["pagination"] == {
        "total": 25,
        "page": 1,
        "limit": 10,
        "totalPages": 3,
        "hasNextPage": True,
        "hasPrevPage": False,
    }
    assert body["message"] == "Found 10 product(s) on page 1 of 3"


def test_last_page_of_twenty_five(client, make_products) -> None:
    make_products(25)
    body = _list(client, page="3", limit="10")
    assert len(body["data"]) == 5
    assert body["pagination"]["hasNextPage"] is False
    assert body["pagination"]["hasPrevPage"] is True


def test_page_beyond_the_data(client, make_products) -> None:
    make_products(25)
    body = _list(client, page="100", limit="10")
    assert body["data"] == []
    assert body["pagination"]["total"] == 25
    assert body["pagination"]["page"] == 100
    assert body["pagination"]["hasNextPage"] is False


@pytest.mark.parametrize(
    "page,limit",
    [("99999999999999999999", "10"), ("9223372036854775807", "100")],
)
def test_page_far_beyond_the_data(client, make_products, page, limit) -> None:
    make_products(25)
    body = _list(client, page=page, limit=limit)
    assert body["data"] == []
    assert body["pagination"]["total"] == 25
    assert body["pagination"]["page"] == int(page)
    assert body["pagination"]["limit"] == int(limit)
    assert body["pagination"]["hasNextPage"] is False
    assert body["pagination"]["hasPrevPage"] is True


def test_default_limit_is_ten(client, make_products) -> None:
    make_products(12)
    body = _list(client)
    assert len(body["data"]) == 10
    assert body["pagination"]["limit"] == 10


def test_malformed_pagination_is_normalized(client, make_products) -> None:
    make_products(3)
    body = _list(client, page="abc", limit="xyz")
    assert body["pagination"]["page"] == 1
    assert body["pagination"]["limit"] == 10

    assert _list(client, page="-5")["pagination"]["page"] == 1
    assert _list(client, page="0")["pagination"]["page"] == 1
    assert _list(client, limit="200")["pagination"]["limit"] == 100


def test_pages_do_not_overlap(client, make_products) -> None:
    make_products(7)
    seen: list[int] = []
    for page in ("1", "2", "3"):
        seen += [p["id"] for p in _list(client, page=page, limit="3")["data"]]
    assert len(seen) == 7
    assert len(set(seen)) == 7


def test_newest_first(client, make_product) -> None:
    make_product(name="First")
    make_product(name="Second")
    make_product(name="Third")
    names = [p["name"] for p in _list(client)["data"]]
    assert names == ["Third", "Second", "First"]


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

def test_no_filters_returns_every_record(client, make_products) -> None:
    make_products(5)
    body = _list(client)
    assert body["pagination"]["total"] == 5


def test_category_is_exact_match(client, make_products, make_product) -> None:
    make_products(10)
    make_product(name="Other", category="Electronics Plus")
    body = _list(client, category="Electronics")
    assert body["pagination"]["total"] == 5
    assert all(p["category"] == "Electronics" for p in body["data"])


def test_price_bounds_are_inclusive_and_zero_is_a_bound(client, make_product) -> None:
    make_product(name="Free", price=0)
    make_product(name="One", price=1)
    make_product(name="Just over", price=1.01)
    body = _list(client, minPrice="0", maxPrice="1")
    assert sorted(p["name"] for p in body["data"]) == ["Free", "One"]
    assert body["pagination"]["total"] == 2


def test_min_price_only(client, make_products) -> None:
    make_products(10)
    body = _list(client, minPrice="50")
    assert body["pagination"]["total"] == 6
    assert all(p["price"] >= 50 for p in body["data"])


def test_max_price_zero_only_matches_free_items(client, make_product) -> None:
    make_product(name="Free", price=0)
    make_product(name="Paid", price=5)
    body = _list(client, maxPrice="0")
    assert [p["name"] for p in body["data"]] == ["Free"]


def test_malformed_price_is_ignored(client, make_products) -> None:
    make_products(4)
    assert _list(client, minPrice="abc")["pagination"]["total"] == 4


def test_inverted_price_range_matches_nothing(client, make_products) -> None:
    make_products(4)
    body = _list(client, minPrice="100", maxPrice="10")
    assert body["data"] == []
    assert body["pagination"]["total"] == 0


def test_in_stock_filters(client, make_product) -> None:
    make_product(name="Stocked", quantity=5)
    make_product(name="Empty", quantity=0)

    in_stock = _list(client, inStock="true")
    assert [p["name"] for p in in_stock["data"]] == ["Stocked"]

    out_of_stock = _list(client, inStock="false")
    assert [p["name"] for p in out_of_stock["data"]] == ["Empty"]

    assert _list(client, inStock="yes")["pagination"]["total"] == 2


def test_search_matches_name_or_description_case_insensitively(client, make_product) -> None:
    make_product(name="Gaming Laptop", description="Fast machine")
    make_product(name="Mouse", description="Works with any laptop")
    make_product(name="Desk", description="Solid oak")
    make_product(name="Lamp", description=None)

    body = _list(client, search="laptop")
    assert sorted(p["name"] for p in body["data"]) == ["Gaming Laptop", "Mouse"]
    assert body["pagination"]["total"] == 2


def test_search_treats_wildcards_literally(client, make_product) -> None:
    make_product(name="100% Cotton Shirt")
    make_product(name="Plain Shirt")
    body = _list(client, search="100%")
    assert [p["name"] for p in body["data"]] == ["100% Cotton Shirt"]


def test_empty_search_applies_no_filter(client, make_products) -> None:
    make_products(3)
    assert _list(client, search="")["pagination"]["total"] == 3


def test_filters_combine_with_and(client, make_products) -> None:
    make_products(20)
    body = _list(client, category="Electronics", minPrice="50", maxPrice="150", inStock="true")
    # Electronics are the even-numbered products; prices 60, 80, ..., 140
    assert body["pagination"]["total"] == 5
    for product in body["data"]:
        assert product["category"] == "Electronics"
        assert 50 <= product["price"] <= 150
        assert product["quantity"] > 0


def test_filtered_results_paginate(client, make_products) -> None:
    make_products(30)
    body = _list(client, category="Electronics", page="2", limit="10")
    assert len(body["data"]) == 5
    assert body["pagination"]["total"] == 15
    assert body["pagination"]["totalPages"] == 2
    assert body["pagination"]["hasNextPage"] is False
    assert body["pagination"]["hasPrevPage"] is True
