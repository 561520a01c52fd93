import os

from config import config
from flask import Flask, jsonify
from flask_cors import CORS


def create_app(config_name=None):
    """Application factory pattern"""
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "development")

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    # Initialize CORS for the browser frontend
    allowed_origins = app.config["ALLOWED_ORIGINS"].split(",")

    CORS(app, resources={r"/api/*": {"origins": allowed_origins}})

    # Register API blueprints
    from routes.api import bp as api_bp
    from routes.translation import bp as translation_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(translation_bp)

    # Home route
    @app.route("/")
    def home():
        return jsonify({"message": "Welcome to the translation assistant!", "version": "1.0.0"})

    # Health check route
    @app.route("/health")
    def health_check():
        return jsonify({
            "status": "healthy",
            "groq_configured": bool(app.config.get("GROQ_API_KEY")),
            "gemini_configured": bool(app.config.get("GEMINI_API_KEY")),
        }), 200

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, port=5001)
