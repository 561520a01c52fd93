import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration class"""

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    FLASK_ENV = os.getenv("FLASK_ENV", "development")
    DEBUG = os.getenv("DEBUG", "True") == "True"

    # Provider credentials
    # GROQ_API_KEY is required, GEMINI_API_KEY only enables the sentence-mode provider
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

    # Request limits
    MAX_TEXT_CHARS = int(os.getenv("MAX_TEXT_CHARS", "5000"))
    PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", "30"))

    # Comma separated list of frontend origins
    ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")


class DevelopmentConfig(Config):
    """Development environment configuration"""

    DEBUG = True


class ProductionConfig(Config):
    """Production environment configuration"""

    DEBUG = False
    PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", "20"))


class TestingConfig(Config):
    """Testing environment configuration"""

    TESTING = True
    DEBUG = True

    # Never hit real providers from the test suite
    GROQ_API_KEY = None
    GEMINI_API_KEY = None


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
