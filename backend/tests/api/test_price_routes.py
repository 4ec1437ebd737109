"""Tests for GET /prices endpoint."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from application.pricing_service import PricingUnavailableError
from domain.constants import ERROR_PRICING_UNAVAILABLE, GENERIC_PRICING_ERROR
from tests.conftest import MOCK_PRICING


class TestGetPrices:
    """Tests for the pricing passthrough endpoint."""

    def test_should_return_provider_body_unchanged(self, client: TestClient):
        # Act
        response = client.get("/prices")

        # Assert
        assert response.status_code == 200
        assert response.json() == MOCK_PRICING

    @patch("api.routes.price_routes.get_prices")
    def test_should_use_default_instruments_when_none_given(
        self, mock_get_prices, client: TestClient
    ):
        # Arrange
        mock_get_prices.return_value = {"prices": []}

        # Act
        response = client.get("/prices")

        # Assert
        assert response.status_code == 200
        mock_get_prices.assert_called_once_with(None)

    @patch("api.routes.price_routes.get_prices")
    def test_should_split_and_uppercase_instruments(
        self, mock_get_prices, client: TestClient
    ):
        # Arrange
        mock_get_prices.return_value = {"prices": []}

        # Act
        response = client.get("/prices?instruments=eur_usd, usd_jpy,")

        # Assert
        assert response.status_code == 200
        mock_get_prices.assert_called_once_with(["EUR_USD", "USD_JPY"])

    @patch("api.routes.price_routes.get_prices")
    def test_should_return_502_when_provider_fails(
        self, mock_get_prices, client: TestClient
    ):
        # Arrange
        mock_get_prices.side_effect = PricingUnavailableError(
            "401 Client Error: Unauthorized for url: https://api-fxpractice.oanda.com"
        )

        # Act
        response = client.get("/prices")

        # Assert
        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["error_code"] == ERROR_PRICING_UNAVAILABLE
        assert detail["detail"] == GENERIC_PRICING_ERROR
        # upstream message must not leak
        assert "oanda.com" not in response.text
