from storefront.core.catalog_filters import filter_products

PRODUCTS = [
    {"id": "1", "name": "Red Lamp", "description": "desk lighting", "categoryId": "home"},
    {"id": "2", "name": "Blue Mug", "description": "ceramic", "categoryId": "kitchen"},
    {"id": "3", "name": "Lamp Shade", "description": None, "categoryId": "home"},
    {"id": "4", "name": "Kettle", "description": "Boils water, LAMP not included"},
]


def test_no_filters_returns_copy_in_order():
    result = filter_products(PRODUCTS)
    assert result == PRODUCTS
    assert result is not PRODUCTS


def test_category_filter():
    assert [p["id"] for p in filter_products(PRODUCTS, category_id="home")] == ["1", "3"]


def test_search_is_case_insensitive_on_name_and_description():
    assert [p["id"] for p in filter_products(PRODUCTS, search="lamp")] == ["1", "3", "4"]


def test_filters_combine():
    result = filter_products(PRODUCTS, category_id="home", search="shade")
    assert [p["id"] for p in result] == ["3"]


def test_unknown_category_is_empty():
    assert filter_products(PRODUCTS, category_id="garden") == []
