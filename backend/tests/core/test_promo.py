"""Promo Codes — tests for discount rates and the cart summary."""

import pytest

from storefront.core.promo import promo_discount_rate, summarize_cart


@pytest.mark.parametrize("code,rate", [
    ("save10", 0.10),
    ("SAVE10", 0.10),
    ("Welcome20", 0.20),
    (" save10 ", 0.0),
    ("bogus", 0.0),
    ("", 0.0),
    (None, 0.0),
])
def test_discount_rates(code, rate):
    assert promo_discount_rate(code) == rate


def test_summary_without_promo():
    items = [{"id": "a", "price": 10.0, "quantity": 2}]
    assert summarize_cart(items) == {
        "items": items,
        "totalItems": 2,
        "subtotal": 20.0,
        "promoCode": None,
        "discountRate": 0.0,
        "discount": 0.0,
        "total": 20.0,
    }


def test_summary_with_promo():
    items = [{"id": "a", "price": 50.0, "quantity": 2}]
    summary = summarize_cart(items, "welcome20")
    assert summary["promoCode"] == "welcome20"
    assert summary["discount"] == pytest.approx(20.0)
    assert summary["total"] == pytest.approx(80.0)


def test_unknown_promo_not_echoed():
    assert summarize_cart([], "nope")["promoCode"] is None


def test_empty_cart_totals_zero():
    summary = summarize_cart([], "save10")
    assert summary["totalItems"] == 0
    assert summary["total"] == 0


def test_summary_echoes_lowercased_code():
    summary = summarize_cart([{"id": "a", "price": 10.0, "quantity": 1}], "SAVE10")
    assert summary["promoCode"] == "save10"
    assert summary["discountRate"] == 0.10


def test_padded_code_gives_no_discount():
    summary = summarize_cart([{"id": "a", "price": 10.0, "quantity": 1}], " save10 ")
    assert summary["promoCode"] is None
    assert summary["total"] == 10.0
