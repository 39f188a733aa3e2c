"""Market data HTTP client for valuing stock holdings"""

from typing import Optional

import httpx

from loan_gateway.config import settings
from loan_gateway.domain.exceptions import PriceLookupError
from loan_gateway.domain.models import StockPosition
from loan_gateway.infrastructure.observability.metrics import price_lookup_failures_counter


class MarketPriceOracle:
    """Values stock positions at the latest quoted price (Alpha Vantage GLOBAL_QUOTE)"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url or settings.market_api_base
        self.api_key = api_key if api_key is not None else settings.market_api_key
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client(timeout=self.timeout)

    def close(self) -> None:
        """Release the connection pool if this oracle created it"""
        if self._owns_client:
            self.client.close()

    def get_price(self, symbol: str) -> float:
        """
        Fetch the latest price for a symbol.

        Raises:
            PriceLookupError: On timeout, HTTP errors, or a malformed quote
        """
        params = {"function": "GLOBAL_QUOTE", "symbol": symbol, "apikey": self.api_key}
        try:
            response = self.client.get(f"{self.base_url}/query", params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
            return float(data["Global Quote"]["05. price"])

        except httpx.TimeoutException as e:
            price_lookup_failures_counter.inc()
            raise PriceLookupError(f"Market API timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            price_lookup_failures_counter.inc()
            raise PriceLookupError(f"Market API error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            price_lookup_failures_counter.inc()
            raise PriceLookupError(f"Market API unreachable: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            price_lookup_failures_counter.inc()
            raise PriceLookupError(f"Invalid quote for {symbol}: {e}") from e

    def value(self, position: StockPosition) -> float:
        return position.quantity * self.get_price(position.name)
