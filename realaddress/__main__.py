import argparse
import logging
import sys

from realaddress import config
from realaddress.app import app

logger = logging.getLogger("realaddress")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the real address generator web service.")
    parser.add_argument("--host", default=config.FLASK_HOST, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=config.FLASK_PORT, help="Port to listen on (default: %(default)s)")
    parser.add_argument("--debug", action=argparse.BooleanOptionalAction, default=config.FLASK_DEBUG,
                        help="Enable or disable Flask debug mode (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logger.info(f"Starting {config.APP_NAME} web service on {args.host}:{args.port}")
    logger.info(f"Flask debug mode is {'enabled' if args.debug else 'disabled'}.")
    try:
        app.run(host=args.host, port=args.port, debug=args.debug)
    except Exception as e:
        logger.critical(f"Failed to start Flask application: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
