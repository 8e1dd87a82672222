from flask import Blueprint, request, make_response
from http import HTTPStatus
from typing import Any
from pydantic import ValidationError
from ..models import GenerateGifRequest
from ..services.countdown import CountdownRenderer, RequestValidationError, RenderError
from ..utils.auth import require_api_key
import logging
import sentry_sdk
import traceback

# Configure logging
logger = logging.getLogger(__name__)

# Create Blueprint
bp = Blueprint('countdown', __name__)

GIF_HEADERS = {
    "Content-Type": "image/gif",
    "Cache-Control": "no-cache, no-store, must-revalidate",
}


def text_response(message: str, status: int):
    response = make_response(message, status)
    response.headers["Content-Type"] = "text/plain; charset=utf-8"
    return response


def parse_generate_request(data: Any) -> GenerateGifRequest:
    """
    Validate a /generate-gif body.

    Args:
        data: Decoded JSON body

    Returns:
        The validated request

    Raises:
        RequestValidationError: If a field is missing or invalid
    """
    if not isinstance(data, dict):
        raise RequestValidationError("Request body must be a JSON object")
    if data.get("config") is None:
        raise RequestValidationError("Missing config")
    if data.get("diffMs") is None:
        raise RequestValidationError("Missing diffMs")

    try:
        return GenerateGifRequest(**data)
    except ValidationError as e:
        logger.error(f"Validation error: {e.errors()}")
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        raise RequestValidationError(f"Invalid request data: {fields}") from e


@bp.route('/generate-gif', methods=['POST'])
@require_api_key
def generate_gif():
    """
    Render a countdown timer as an animated GIF.

    Expected request body:
    {
        "config": {
            "template": "rounded-md-border-inside",
            "box_color": "#FE8A22",
            "display_days": false
        },
        "diffMs": 3723000
    }
    """
    try:
        data = request.get_json(silent=True)
        logger.info(f"Received countdown request: {data}")

        gif_request = parse_generate_request(data)
        config = gif_request.config

        sentry_sdk.set_context("countdown", {
            "template": config.template,
            "font": config.font,
            "diff_ms": gif_request.diffMs,
        })
        sentry_sdk.add_breadcrumb(
            category="countdown",
            message="Rendering countdown GIF",
            level="info"
        )

        try:
            gif_bytes = CountdownRenderer(config).render_gif(gif_request.diffMs)
        except RenderError:
            raise
        except Exception as e:
            # Renderer setup failures (fonts, layout) are render failures too
            raise RenderError(str(e)) from e

        return make_response(gif_bytes, HTTPStatus.OK, GIF_HEADERS)

    except RequestValidationError as e:
        logger.warning(f"Invalid countdown request: {e.message}")
        return text_response(e.message, e.status_code)

    except RenderError as e:
        logger.error(f"GIF generation error: {e.message}")
        logger.error(traceback.format_exc())
        sentry_sdk.capture_exception(e)
        return text_response(f"Error: {e.message}", e.status_code)

    except Exception as e:
        logger.error(f"Unexpected error generating GIF: {str(e)}")
        logger.error(traceback.format_exc())
        sentry_sdk.capture_exception(e)
        return text_response(f"Error: {str(e)}", HTTPStatus.INTERNAL_SERVER_ERROR)
