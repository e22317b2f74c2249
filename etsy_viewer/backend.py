"""
Backend stub

Greets on ``/`` and nothing else. The listing-details route the viewer
calls is not served here. Cross-origin requests are allowed from anywhere.
"""

import logging

from flask import Flask, request

from .config import Settings, setup_logging

app = Flask(__name__)
settings = Settings.from_env()
logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"


@app.after_request
def allow_cross_origin(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    if request.method == "OPTIONS":
        response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
        requested = request.headers.get("Access-Control-Request-Headers")
        if requested:
            response.headers["Access-Control-Allow-Headers"] = requested
            response.vary.add("Access-Control-Request-Headers")
    return response


@app.route("/")
def index():
    return "Hello from the backend!", 200, {"Content-Type": "text/plain; charset=utf-8"}


def main() -> None:
    setup_logging(settings.log_level)
    logger.info("Server is running on port %d", settings.backend_port)
    app.run(host=settings.host, port=settings.backend_port)


if __name__ == "__main__":
    main()
