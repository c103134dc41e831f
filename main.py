"""
Main Flask Application
Doomscrolling Assessment Scoring & Predictive Analytics API
"""
from flask import Flask, jsonify
from flask_cors import CORS

from config.settings import settings
from utils.helpers import setup_logging

# Import blueprints
from api.assessment import assessment_bp
from api.result import result_bp
from api.journal import journal_bp
from api.sessions import sessions_bp
from api.dashboard import dashboard_bp

logger = setup_logging(settings.LOG_LEVEL)


# ============== APP INITIALIZATION ==============
def create_app() -> Flask:
    app = Flask(__name__)
    app.secret_key = settings.SECRET_KEY or 'secret_key'

    # CORS configuration
    CORS(app, origins=settings.CORS_ORIGINS, supports_credentials=True)

    # ============== REGISTER BLUEPRINTS ==============
    app.register_blueprint(assessment_bp, url_prefix='/api/v1/assessment')
    app.register_blueprint(result_bp, url_prefix='/api/v1/result')
    app.register_blueprint(journal_bp, url_prefix='/api/v1/journal')
    app.register_blueprint(sessions_bp, url_prefix='/api/v1/sessions')
    app.register_blueprint(dashboard_bp, url_prefix='/api/v1/dashboard')

    # ============== ROUTES ==============
    @app.route('/', methods=['GET'])
    def home():
        """API information"""
        return jsonify({
            "message": settings.APP_NAME,
            "version": settings.VERSION,
            "features": [
                "Likert Scale Assessment",
                "Percentile Scoring against Research Sample (n=401)",
                "Predictive Risk Profile",
                "AI Coaching Suggestions",
                "Journal Analysis",
                "Scroll Session Logging"
            ]
        })

    # ============== ERROR HANDLERS ==============
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"status": "error", "message": "Endpoint not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            "status": "error",
            "message": "Method not allowed",
            "errors": "Please check the HTTP method (GET/POST) for this endpoint"
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Unhandled server error: {error}")
        return jsonify({"status": "error", "message": "Internal server error"}), 500

    return app


app = create_app()


# ============== APPLICATION STARTUP ==============
if __name__ == '__main__':
    settings.validate()

    print("=" * 50)
    print(f"Starting {settings.APP_NAME}")
    print("=" * 50)

    if settings.is_development():
        settings.print_config_summary()

    print("=" * 50)
    print(f"Server starting on http://{settings.HOST}:{settings.PORT}")
    print("=" * 50)

    app.run(debug=settings.DEBUG, host=settings.HOST, port=settings.PORT)
