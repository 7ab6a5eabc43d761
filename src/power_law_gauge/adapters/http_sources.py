"""
HTTP Quote Sources.

Spot-price sources backed by public REST APIs:
    - CoinGeckoQuoteSource: simple/price, includes the 24h change
    - CoinbaseQuoteSource: v2 spot price, no 24h change

Both translate transport errors and malformed payloads into
QuoteSourceError so the QuoteChain can move on to the next source.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests

from power_law_gauge.domain.value_objects import PriceQuote
from power_law_gauge.interfaces.quote_source import QuoteSourceError

logger = logging.getLogger(__name__)

USER_AGENT = "power-law-gauge/0.2"


class _HttpQuoteSource:
    """Shared request/response handling."""

    name = "http"

    def __init__(
        self,
        symbol: str,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.symbol = symbol
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", USER_AGENT)

    def _get_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        try:
            response = self._session.get(url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise QuoteSourceError(self.name, f"request failed: {e}") from e
        except ValueError as e:
            raise QuoteSourceError(self.name, f"invalid JSON: {e}") from e

    def _build_quote(self, price: Any, change_24h: Any = None) -> PriceQuote:
        try:
            return PriceQuote(
                symbol=self.symbol,
                price=float(price),
                change_24h=float(change_24h) if change_24h is not None else None,
                source=self.name,
                fetched_at=datetime.now(timezone.utc),
            )
        except (TypeError, ValueError) as e:
            raise QuoteSourceError(self.name, f"unusable price {price!r}: {e}") from e


class CoinGeckoQuoteSource(_HttpQuoteSource):
    """Quote from the CoinGecko simple price endpoint."""

    name = "coingecko"
    API_URL = "https://api.coingecko.com/api/v3/simple/price"

    def __init__(
        self,
        symbol: str,
        coin_id: str,
        vs_currency: str = "usd",
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(symbol, timeout_seconds, session)
        self.coin_id = coin_id
        self.vs_currency = vs_currency.lower()

    def fetch(self) -> PriceQuote:
        data = self._get_json(
            self.API_URL,
            params={
                "ids": self.coin_id,
                "vs_currencies": self.vs_currency,
                "include_24hr_change": "true",
            },
        )
        try:
            entry = data[self.coin_id]
            price = entry[self.vs_currency]
        except (KeyError, TypeError) as e:
            raise QuoteSourceError(self.name, f"missing field {e} in response") from e

        quote = self._build_quote(price, entry.get(f"{self.vs_currency}_24h_change"))
        logger.debug(f"CoinGecko {self.coin_id}: {quote.price}")
        return quote


class CoinbaseQuoteSource(_HttpQuoteSource):
    """Quote from the Coinbase spot price endpoint."""

    name = "coinbase"
    API_URL = "https://api.coinbase.com/v2/prices/{pair}/spot"

    def __init__(
        self,
        symbol: str,
        pair: str,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(symbol, timeout_seconds, session)
        self.pair = pair.upper()

    def fetch(self) -> PriceQuote:
        data = self._get_json(self.API_URL.format(pair=self.pair))
        try:
            amount = data["data"]["amount"]
        except (KeyError, TypeError) as e:
            raise QuoteSourceError(self.name, f"missing field {e} in response") from e

        quote = self._build_quote(amount)
        logger.debug(f"Coinbase {self.pair}: {quote.price}")
        return quote
