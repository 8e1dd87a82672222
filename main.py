import os
import sys
import platform
import traceback
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from app.config import is_feature_enabled

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if is_feature_enabled("DEBUG_LOGGING") else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)

from app import create_app
from app.sentry import init_sentry

# Sentry must be initialized before the app handles requests
init_sentry()

# Create the Flask application
app = create_app()

if __name__ == '__main__':
    try:
        port = int(os.environ.get('PORT', 8080))
        logger.info(f"Starting countdown service on port {port}")
        logger.info(f"Python version: {sys.version}")
        logger.info(f"Platform: {platform.platform()}")

        app.run(
            host='0.0.0.0',
            port=port,
            debug=os.getenv('ENVIRONMENT') == 'development'
        )
    except Exception as e:
        logger.error(f"Failed to start server: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)
