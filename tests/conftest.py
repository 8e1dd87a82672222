import pytest
import os

# Set environment variables for testing
os.environ['TESTING'] = 'True'
os.environ['ERROR_REPORTING'] = 'false'
os.environ.pop('RENDER_API_KEY', None)
os.environ.pop('SENTRY_DSN', None)

# Now import the app
from app import create_app

TEST_API_KEY = 'test-render-key'

@pytest.fixture
def app():
    """Create and configure a test app with an API key."""
    app = create_app({
        'TESTING': True,
        'RENDER_API_KEY': TEST_API_KEY
    })
    yield app

@pytest.fixture
def open_app():
    """Create a test app with no API key configured."""
    app = create_app({
        'TESTING': True,
        'RENDER_API_KEY': ''
    })
    yield app

@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()

@pytest.fixture
def open_client(open_app):
    """Create a test client for the unauthenticated app."""
    return open_app.test_client()

@pytest.fixture
def auth_headers():
    return {'Authorization': f'Bearer {TEST_API_KEY}'}

@pytest.fixture
def sample_request_data():
    """Sample countdown request with default styling."""
    return {
        "config": {},
        "diffMs": 2 * 86400000 + 3 * 3600000 + 4 * 60000 + 5000
    }

@pytest.fixture
def styled_request_data():
    """Sample countdown request exercising every config field."""
    return {
        "config": {
            "display_days": False,
            "display_hours": True,
            "label_hours": "Std",
            "label_minutes": "Min",
            "label_seconds": "Sek",
            "template": "rounded-md-border-inside",
            "font": "Roboto",
            "background_color": "#101010",
            "box_color": "#00AAFF",
            "text_color": "#FFFFFF",
            "label_color": "#00AAFF"
        },
        "diffMs": 3723000
    }
