import pytest
from unittest.mock import MagicMock
from django.core.cache import cache
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def clear_quote_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def stock_settings(settings):
    settings.STOCK_SYMBOLS = ['005930.KS:삼성전자', 'AAPL:Apple']
    settings.STOCK_QUOTE_URL = 'https://quotes.example.com/chart/{symbol}'
    settings.STOCK_CACHE_SECONDS = 600
    settings.KRW_PER_USD = 1450
    return settings


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


def chart_response(price, currency):
    """Fake requests.Response carrying a chart payload."""
    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = {
        'chart': {
            'result': [{'meta': {'regularMarketPrice': price, 'currency': currency}}],
            'error': None,
        }
    }
    return response


@pytest.fixture
def market():
    """Map of URL to fake response for the configured symbols."""
    return {
        'https://quotes.example.com/chart/005930.KS': chart_response(55000, 'KRW'),
        'https://quotes.example.com/chart/AAPL': chart_response(200.0, 'USD'),
    }
