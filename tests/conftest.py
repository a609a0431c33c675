import pytest
from scrapview.core import config
from scrapview.services.session import session

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment with real-mode settings and an empty session"""
    # Store original values
    original_use_mock = config.settings.USE_MOCK
    original_rules = config.settings.CLASSIFIER_RULES
    original_endpoint = config.settings.SCRAPE_ENDPOINT

    # Tests patch or mock the upstream call themselves
    config.settings.USE_MOCK = False
    config.settings.CLASSIFIER_RULES = "full"
    config.settings.SCRAPE_ENDPOINT = "https://scrape.test/scrap/go"
    session.reset()

    yield

    # Restore original values
    config.settings.USE_MOCK = original_use_mock
    config.settings.CLASSIFIER_RULES = original_rules
    config.settings.SCRAPE_ENDPOINT = original_endpoint
    session.reset()
