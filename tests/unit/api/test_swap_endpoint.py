"""Unit tests for the swap endpoint."""

import pytest

from swapcalc.amm import SwapEngine
from swapcalc.api.endpoints import get_engine
from swapcalc.api.main import app
from tests.helpers import make_swap_body, reference_amount_out


class TestSwapSuccess:
    """Successful swaps."""

    @pytest.mark.parametrize("path", ["/swap", "/api/handler"])
    def test_sell_token_a(self, client, path):
        response = client.post(path, json=make_swap_body())

        assert response.status_code == 200
        data = response.json()
        expected_out = reference_amount_out(1000.0, 1000.0, 100.0)
        assert data["amount_out"] == expected_out
        assert data["new_reserve_a"] == 1100.0
        assert data["new_reserve_b"] == 1000.0 - expected_out
        assert data["reserves"] == {"ETH": 1100.0, "USDC": 1000.0 - expected_out}
        assert data["price_impact"] > 0

    def test_sell_token_b(self, client):
        body = make_swap_body(reserve_a=500, reserve_b=2000, input_token="USDC", amount_in=100)
        response = client.post("/swap", json=body)

        assert response.status_code == 200
        data = response.json()
        expected_out = reference_amount_out(2000.0, 500.0, 100.0)
        assert data["amount_out"] == expected_out
        assert data["new_reserve_a"] == 500.0 - expected_out
        assert data["new_reserve_b"] == 2100.0

    def test_zero_amount(self, client):
        response = client.post("/swap", json=make_swap_body(amount_in=0))

        assert response.status_code == 200
        data = response.json()
        assert data["amount_out"] == 0.0
        assert data["new_reserve_a"] == 1000.0
        assert data["new_reserve_b"] == 1000.0

    def test_engine_override(self, client):
        """Injected engine's fee is used."""
        app.dependency_overrides[get_engine] = lambda: SwapEngine(fee_rate=0.0)

        response = client.post("/swap", json=make_swap_body())

        assert response.status_code == 200
        assert response.json()["amount_out"] == 1000.0 - (1000.0 * 1000.0) / 1100.0


class TestSwapRejections:
    """Engine errors become 400 responses with a kind."""

    @pytest.mark.parametrize(
        "overrides,kind",
        [
            ({"input_token": "BTC"}, "unknown_token"),
            ({"amount_in": -1}, "invalid_amount"),
            ({"reserve_a": 0}, "no_liquidity"),
            ({"reserve_b": 0}, "no_liquidity"),
            ({"reserve_a": -10}, "no_liquidity"),
        ],
    )
    def test_error_kinds(self, client, overrides, kind):
        response = client.post("/swap", json=make_swap_body(**overrides))

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == kind
        assert data["detail"]

    def test_unknown_token_message(self, client):
        response = client.post("/swap", json=make_swap_body(input_token="BTC"))
        assert response.json()["detail"] == "Invalid input token"

    def test_input_overflow_is_invalid_amount(self, client):
        """Overflowing the input reserve is a 400, not a server error."""
        body = make_swap_body(reserve_a=1.5e308, reserve_b=1.0, amount_in=1.5e308)

        response = client.post("/swap", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_amount"


class TestSwapFloatRange:
    """Pools at the edges of the float range."""

    def test_huge_reserves(self, client):
        body = make_swap_body(reserve_a=1e200, reserve_b=1e200, amount_in=1e200)

        response = client.post("/swap", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["amount_out"] > 0
        assert data["new_reserve_a"] == 2e200

    def test_spot_price_below_float_range(self, client):
        body = make_swap_body(reserve_a=1e200, reserve_b=1e-200, amount_in=1e200)

        response = client.post("/swap", json=body)

        assert response.status_code == 200
        assert 0 < response.json()["price_impact"] < 1


class TestInvalidBody:
    """Schema errors are reported as 400, not 422."""

    def test_missing_field(self, client):
        body = make_swap_body()
        del body["reserve_b"]

        response = client.post("/swap", json=body)

        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Invalid request body"
        assert any("reserve_b" in err["loc"] for err in data["errors"])

    def test_wrong_type(self, client):
        response = client.post("/swap", json=make_swap_body(amount_in="a lot"))
        assert response.status_code == 400

    def test_identical_tokens(self, client):
        response = client.post("/swap", json=make_swap_body(token_b="ETH"))
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request body"

    def test_not_json(self, client):
        response = client.post(
            "/swap", content=b"not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400


class TestEngineFailure:
    """Unexpected engine exceptions."""

    def test_exception_returns_500(self, client):
        class ExplodingEngine:
            """Mock engine that always raises."""

            def swap(self, *args, **kwargs):
                raise RuntimeError("Boom! This should be caught.")

        app.dependency_overrides[get_engine] = lambda: ExplodingEngine()

        response = client.post("/swap", json=make_swap_body())

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal error"


class TestCors:
    """Browser clients can call the API cross-origin."""

    def test_preflight(self, client):
        response = client.options(
            "/swap",
            headers={
                "Origin": "https://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_simple_request(self, client):
        response = client.post(
            "/swap", json=make_swap_body(), headers={"Origin": "https://example.com"}
        )
        assert response.headers["access-control-allow-origin"] == "*"


class TestHelloWorld:
    def test_hello_world(self, client):
        response = client.get("/api/hello_world")
        assert response.status_code == 200
        assert response.json() == {"message": "Hello, World"}
