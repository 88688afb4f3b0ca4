"""Pytest fixtures for Zakat Calculator tests."""
import pytest

from quickzakat import create_app


@pytest.fixture
def app():
    """Create application for testing.

    Yields:
        Flask application configured for testing, offering every currency
        and without a default timezone.
    """
    app = create_app({
        'TESTING': True,
        'ENABLED_CURRENCIES': ['USD', 'EUR', 'GBP', 'PKR'],
        'DEFAULT_TIMEZONE': None,
    })
    yield app


@pytest.fixture
def client(app):
    """Create test client.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making requests.
    """
    with app.test_client() as client:
        yield client


@pytest.fixture
def runner(app):
    """Click runner bound to the app, for Flask CLI commands."""
    return app.test_cli_runner()


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove locale and timezone variables so detection starts from nothing."""
    for name in ('LANGUAGE', 'LC_ALL', 'LC_MESSAGES', 'LANG', 'TZ'):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
