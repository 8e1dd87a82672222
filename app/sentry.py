import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
import os
import logging
from dotenv import load_dotenv
from .config import is_feature_enabled

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

def init_sentry(dsn=None):
    """Initialize Sentry with Flask integration"""
    dsn = dsn or os.environ.get('SENTRY_DSN')
    if not dsn or not is_feature_enabled("ERROR_REPORTING"):
        logger.info("Sentry error reporting disabled")
        return False

    # Get release from environment if available
    release = os.environ.get('SENTRY_RELEASE', None)

    sentry_sdk.init(
        dsn=dsn,
        integrations=[FlaskIntegration()],
        # Request bodies carry nothing sensitive, headers carry the API key
        send_default_pii=False,
        # Set the environment
        environment=os.environ.get('ENVIRONMENT', 'production'),
        # Include release version if available
        release=release,
    )

    logger.info("Sentry error reporting enabled")
    return True
