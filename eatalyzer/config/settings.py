import logging
import os
from dotenv import load_dotenv

from ..errors import ConfigurationError

# Load environment variables
load_dotenv()

class Config:
    """Base configuration class"""
    
    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    MAX_CONTENT_LENGTH = 25 * 1024 * 1024  # 25MB per request
    
    # Groq settings (OpenAI-compatible endpoint)
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")
    GROQ_BASE_URL = "https://api.groq.com/openai/v1"
    
    # Model settings
    DEFAULT_MODEL = os.getenv("GROQ_MODEL", "meta-llama/llama-4-scout-17b-16e-instruct")
    ANALYSIS_TEMPERATURE = 0.2
    
    # Session settings
    MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "200"))
    
    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    
    @staticmethod
    def init_app(app):
        """Initialize app with configuration"""
        logging.basicConfig(
            level=app.config.get("LOG_LEVEL", "INFO"),
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True

class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = "testing"
    GROQ_API_KEY = "test-key"

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config_class(name=None):
    """Look up a configuration class by name; None selects the default"""
    key = name or 'default'
    if key not in config:
        raise ConfigurationError(f"Unknown FLASK_CONFIG {key!r}; expected one of {sorted(config)}")
    return config[key]
