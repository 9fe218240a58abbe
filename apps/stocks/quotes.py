"""
Stock quote service.

Answers "what could I have bought instead?" by pricing the configured
symbols. Quotes come from the Yahoo Finance chart endpoint and are
memoized in Django's cache for ``STOCK_CACHE_SECONDS``.
"""

import logging
from decimal import Decimal, InvalidOperation, ROUND_DOWN

import requests
from django.conf import settings
from django.core.cache import cache

from .exceptions import QuoteUnavailableError

logger = logging.getLogger(__name__)

CACHE_KEY = 'stocks:quotes'
HEADERS = {'User-Agent': 'Mozilla/5.0 (compatible; PatienceLion/1.0)'}


def configured_symbols():
    """
    Parse ``STOCK_SYMBOLS`` into (symbol, name) pairs.

    Entries without a name use the symbol itself.
    """
    pairs = []
    for entry in settings.STOCK_SYMBOLS:
        symbol, _, name = entry.partition(':')
        symbol = symbol.strip()
        if symbol:
            pairs.append((symbol, name.strip() or symbol))
    return pairs


def fetch_quote(symbol, name=None):
    """
    Fetch the latest price of one symbol.

    Returns:
        dict with symbol, name, price, currency

    Raises:
        QuoteUnavailableError: On HTTP failure or an unexpected payload
    """
    url = settings.STOCK_QUOTE_URL.format(symbol=symbol)
    try:
        response = requests.get(
            url,
            params={'interval': '1d', 'range': '1d'},
            headers=HEADERS,
            timeout=settings.STOCK_REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        meta = response.json()['chart']['result'][0]['meta']
        raw_price = meta['regularMarketPrice']
        price = None if raw_price is None else Decimal(str(raw_price))
    except requests.RequestException as e:
        raise QuoteUnavailableError(f"{symbol}: {e}")
    except (ValueError, KeyError, IndexError, TypeError, InvalidOperation):
        raise QuoteUnavailableError(f"{symbol}: unexpected response")

    if price is None or not price.is_finite():
        raise QuoteUnavailableError(f"{symbol}: no market price")

    return {
        'symbol': symbol,
        'name': name or symbol,
        'price': price,
        'currency': meta.get('currency') or 'USD',
    }


def get_stock_quotes():
    """
    Quotes for every configured symbol, served from cache when fresh.

    Symbols that fail are logged and left out. Nothing is cached when
    every symbol fails, so the next request tries again.
    """
    quotes = cache.get(CACHE_KEY)
    if quotes is not None:
        return quotes

    quotes = []
    for symbol, name in configured_symbols():
        try:
            quotes.append(fetch_quote(symbol, name))
        except QuoteUnavailableError as e:
            logger.warning("Stock quote unavailable: %s", e)

    if quotes:
        cache.set(CACHE_KEY, quotes, settings.STOCK_CACHE_SECONDS)
    return quotes


def price_in_krw(quote):
    if quote['currency'] == 'KRW':
        return quote['price']
    # Only KRW and USD listings are configured
    return quote['price'] * Decimal(str(settings.KRW_PER_USD))


def shares_affordable(amount, quote):
    """
    Shares that ``amount`` KRW buys at the quoted price, to two decimals.

    >>> from decimal import Decimal
    >>> shares_affordable(100000, {'price': Decimal('50000'), 'currency': 'KRW'})
    Decimal('2.00')
    """
    price = price_in_krw(quote)
    if price <= 0:
        return Decimal('0.00')
    return (Decimal(amount) / price).quantize(Decimal('0.01'), rounding=ROUND_DOWN)
