def test_quote_uses_active_pricing(client) -> None:
    client.post("/api/admin/pricing", json={"rupees": 1, "credits": 10})
    resp = client.post("/api/payment/quote", json={"amount": 12.5})
    assert resp.status_code == 200
    assert resp.json() == {"amount": 12.5, "credits": 125, "amount_in_paise": 1250}


def test_quote_invalid_amount(client) -> None:
    client.post("/api/admin/pricing", json={"rupees": 1, "credits": 10})
    bodies = (
        {},
        {"amount": 0},
        {"amount": -5},
        {"amount": "abc"},
        {"amount": True},
        {"amount": 10**400},
        {"amount": 1e308},
    )
    for body in bodies:
        resp = client.post("/api/payment/quote", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid amount"}


def test_quote_without_pricing(client) -> None:
    resp = client.post("/api/payment/quote", json={"amount": 100})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Pricing not configured"}


def test_quote_too_low(client) -> None:
    client.post("/api/admin/pricing", json={"rupees": 100, "credits": 1})
    resp = client.post("/api/payment/quote", json={"amount": 50})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Amount is too low to purchase any credits"}


def test_quote_credits_out_of_range(client) -> None:
    client.post("/api/admin/pricing", json={"rupees": 1e-300, "credits": 1e10})
    resp = client.post("/api/payment/quote", json={"amount": 1e300})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid amount"}
