"""Flask application factory for the mediafrag web API."""

from flask import Flask, jsonify

from mediafrag.config import PlayerConfig


def create_app(config: PlayerConfig | None = None) -> Flask:
    app = Flask(__name__)
    app.config["PLAYER_CONFIG"] = config or PlayerConfig()
    app.config["MAX_CONTENT_LENGTH"] = 64 * 1024  # JSON bodies only

    from mediafrag.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(413)
    def request_entity_too_large(error):
        return jsonify({"error": "Request too large"}), 413

    return app
