import pytest

from relaydesk.db.models.pricing import Pricing
from relaydesk.services.pricing import (
    InvalidPricingError,
    credits_for_amount,
    get_pricing,
    init_pricing_table,
    set_pricing,
    validate_pricing_values,
)


def test_validate_accepts_numbers_and_numeric_strings() -> None:
    assert validate_pricing_values(2, 25) == (2.0, 25.0)
    assert validate_pricing_values("1.5", "10") == (1.5, 10.0)


@pytest.mark.parametrize(
    "rupees,credits",
    [
        (None, 10),
        (1, None),
        (0, 10),
        (1, 0),
        (-1, 10),
        (1, -5),
        ("abc", 10),
        (1, "nan"),
        (True, 10),
        (1, "inf"),
        ([1], 10),
        (10**400, 10),
        (1, 10**400),
    ],
)
def test_validate_rejects(rupees, credits) -> None:
    with pytest.raises(InvalidPricingError):
        validate_pricing_values(rupees, credits)


def test_init_seeds_default_once(db) -> None:
    assert init_pricing_table(db) is True
    assert init_pricing_table(db) is False

    assert db.query(Pricing).count() == 1
    p = get_pricing(db)
    assert (p.rupees, p.credits) == (1, 10)


def test_get_pricing_empty(db) -> None:
    assert get_pricing(db) is None


def test_set_pricing_keeps_history_and_latest_wins(db) -> None:
    init_pricing_table(db)
    set_pricing(db, 2, 30)
    newest = set_pricing(db, 5, 80)

    assert db.query(Pricing).count() == 3
    current = get_pricing(db)
    assert current.id == newest.id
    assert (current.rupees, current.credits) == (5, 80)


def test_pricing_is_cached_and_invalidated(db, fake_redis) -> None:
    set_pricing(db, 1, 10)
    first = get_pricing(db)
    first_id, first_created = first.id, first.created_at
    key = "pricing:active:1"
    assert key in fake_redis.store
    assert fake_redis.ttls[key] == 30

    # A cached hit does not touch the database
    db.query(Pricing).delete()
    db.commit()
    cached = get_pricing(db)
    assert cached.id == first_id
    assert cached.created_at == first_created

    set_pricing(db, 3, 45)
    assert fake_redis.store["pricing:gen"] == "2"
    assert get_pricing(db).credits == 45


def test_row_read_before_a_price_change_is_not_served_after_it(db, fake_redis) -> None:
    set_pricing(db, 1, 10)
    # A reader looked up the generation and fetched the old row ...
    stale_key = "pricing:active:" + fake_redis.store["pricing:gen"]
    old = get_pricing(db)
    # ... then an admin changes the price before that reader writes the cache.
    set_pricing(db, 2, 50)
    fake_redis.setex(stale_key, 30, fake_redis.store[stale_key])

    current = get_pricing(db)
    assert current.id != old.id
    assert (current.rupees, current.credits) == (2, 50)


def test_credits_for_amount_floors() -> None:
    p = Pricing(rupees=3, credits=10)
    assert credits_for_amount(10, p) == 33
    assert credits_for_amount(0.2, p) == 0


def test_credits_for_amount_out_of_range() -> None:
    p = Pricing(rupees=1e-300, credits=1e10)
    with pytest.raises(InvalidPricingError):
        credits_for_amount(1e300, p)
