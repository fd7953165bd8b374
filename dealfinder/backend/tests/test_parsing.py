from app.domain.parsing import format_price, parse_max_price, parse_price, to_condition, to_int
from app.domain.types import Condition


def test_parse_price_strips_currency_formatting():
    assert parse_price("$123") == 123
    assert parse_price("$1,200") == 1200
    assert parse_price(" 75 ") == 75
    assert parse_price(300) == 300


def test_parse_price_fails_closed():
    assert parse_price("ask") is None
    assert parse_price("$12.50") is None
    assert parse_price(None) is None
    assert parse_price(-5) is None
    assert parse_price(True) is None


def test_max_price_empty_or_malformed_means_no_ceiling():
    assert parse_max_price(None) is None
    assert parse_max_price("") is None
    assert parse_max_price("   ") is None
    assert parse_max_price("cheap") is None
    assert parse_max_price("300") == 300


def test_to_int_is_strict():
    assert to_int("12") == 12
    assert to_int(12.0) == 12
    assert to_int(12.5) is None
    assert to_int("12abc") is None


def test_condition_lookup():
    assert to_condition("Like New") is Condition.like_new
    assert to_condition("like new") is Condition.like_new
    assert to_condition("very_good") is Condition.very_good
    assert to_condition("Mint") is None
    assert to_condition(None) is None


def test_format_price():
    assert format_price(420) == "$420"


def test_max_price_keeps_negative_and_zero_ceilings():
    assert parse_max_price("-5") == -5
    assert parse_max_price("0") == 0
    assert parse_max_price("$1,000") == 1000
    assert parse_max_price(-5) == -5
