# app.py

# --- Flask Application ---
# GET /                 HTML page with a random identity
# GET /api/identity     the same identity as JSON
# GET /health           service health

import logging
import time

from flask import Flask, request, jsonify

from realaddress import config
from realaddress.countries import normalize_country_code
from realaddress.exceptions import UnsupportedCountryError
from realaddress.identity import IdentityGenerator
from realaddress.logging_setup import setup_logging
from realaddress.page import render_error_page, render_identity_page

setup_logging()
logger = logging.getLogger(__name__)
logger.info(f"{config.APP_NAME} service initializing...")

app = Flask(__name__)

identity_generator = IdentityGenerator()

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


def create_json_response(data, status_code=200, message="Success", error_code=None):
    """
    Creates a standardized JSON response for API endpoints.

    Args:
        data (dict): Payload for a successful response. Can be None for errors.
        status_code (int): HTTP status code to return.
        message (str): Human-readable message about the response.
        error_code (str, optional): Application error code; marks the response as an error.

    Returns:
        tuple: The Flask `jsonify` object and the HTTP status code.
    """
    response_payload = {
        "status": "success" if error_code is None else "error",
        "code": status_code,
        "message": message,
        "timestamp": int(time.time()),
    }
    if error_code:
        response_payload["error_code"] = error_code
    if data:
        response_payload["data"] = data

    return jsonify(response_payload), status_code


def error_page(message, status_code):
    return render_error_page(message), status_code, {"Content-Type": HTML_CONTENT_TYPE}


def requested_country():
    return normalize_country_code(request.args.get("country"), config.DEFAULT_COUNTRY)


@app.errorhandler(404)
def not_found_error(error):
    logger.warning(f"Not Found (404): {request.method} {request.path} - Client IP: {request.remote_addr}")
    return error_page("The requested URL was not found on the server.", 404)


@app.errorhandler(405)
def method_not_allowed_error(error):
    logger.warning(f"Method Not Allowed (405): {request.method} on {request.path} - Client IP: {request.remote_addr}")
    return error_page("The method is not allowed for the requested URL.", 405)


@app.route("/", methods=["GET"])
def index():
    """
    Renders a random identity for the ?country= parameter.

    Unsupported countries get a 400 error page. Anything unexpected is
    logged and answered with a 500 error page.
    """
    country = requested_country()
    try:
        identity = identity_generator.generate(country)
        return render_identity_page(identity), 200, {"Content-Type": HTML_CONTENT_TYPE}
    except UnsupportedCountryError as e:
        logger.warning(f"Rejected request for unsupported country {e.code!r} from {request.remote_addr}.")
        return error_page(str(e), 400)
    except Exception as e:
        logger.exception(f"Identity page failed for country {country!r}.")
        return error_page(str(e), 500)


@app.route("/api/identity", methods=["GET"])
def identity_api():
    country = requested_country()
    try:
        identity = identity_generator.generate(country)
        return create_json_response(identity.to_dict(), 200, "Identity generated.")
    except UnsupportedCountryError as e:
        logger.warning(f"Rejected API request for unsupported country {e.code!r} from {request.remote_addr}.")
        return create_json_response(None, 400, str(e), "UNSUPPORTED_COUNTRY")
    except Exception as e:
        logger.exception(f"Identity API failed for country {country!r}.")
        return create_json_response(None, 500, f"An unexpected error occurred: {e}", "UNEXPECTED_ERROR")


@app.route("/health", methods=["GET"])
def health_check():
    logger.debug("Health check requested.")
    return create_json_response(
        {"status": "healthy", "service_name": config.APP_NAME, "version": config.APP_VERSION},
        200,
        "Service is up and running.",
    )
