from flask import Flask
from flask_cors import CORS
from .config.settings import Config

def create_app(config_class=Config, analysis_client=None):
    """Application factory pattern"""
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    # Initialize extensions
    CORS(app)
    
    # Initialize the app (this will configure logging)
    config_class.init_app(app)
    
    # Wire the analysis client into the per-session controllers
    from .services.groq.groq_analysis import GroqAnalysisClient
    from .services.session.session_registry import SessionRegistry
    
    if analysis_client is None:
        analysis_client = GroqAnalysisClient.from_config(app.config)
    app.extensions["eatalyzer_sessions"] = SessionRegistry(
        analysis_client, max_sessions=app.config.get("MAX_SESSIONS", 200)
    )
    
    # Register blueprints
    from .routes.analysis import analysis_bp
    from .routes.health import health_bp
    
    app.register_blueprint(analysis_bp)
    app.register_blueprint(health_bp)
    
    return app
