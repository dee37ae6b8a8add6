import logging
import typing

from flask import Flask, jsonify, request

logger = logging.getLogger(__name__)

SERVER_NAME = "battlesnake/github/bloomsnake"


def create_app(handlers: typing.Dict) -> Flask:
    app = Flask("Battlesnake")

    @app.get("/")
    def on_info():
        return jsonify(handlers["info"]())

    @app.post("/start")
    def on_start():
        game_state = request.get_json(silent=True) or {}
        handlers["start"](game_state)
        return "ok"

    @app.post("/move")
    def on_move():
        game_state = request.get_json(silent=True)
        try:
            return jsonify(handlers["move"](game_state))
        except ValueError as e:
            logger.warning("Rejected move request: %s", e)
            return jsonify({"error": str(e)}), 400

    @app.post("/end")
    def on_end():
        game_state = request.get_json(silent=True) or {}
        handlers["end"](game_state)
        return "ok"

    @app.after_request
    def identify_server(response):
        response.headers.set("server", SERVER_NAME)
        return response

    return app


def run_server(handlers: typing.Dict, host: str = "0.0.0.0", port: int = 8000):
    app = create_app(handlers)
    logger.info("Running Battlesnake at http://%s:%d", host, port)
    app.run(host=host, port=port, threaded=True)
