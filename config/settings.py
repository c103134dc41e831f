import os
import logging
from dotenv import load_dotenv

from shared.exceptions import ConfigurationError

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _mask(secret: str) -> str:
    if not secret:
        return "NOT SET"
    return "***" + secret[-4:] if len(secret) > 4 else "***"


class Settings:
    # Application Info
    APP_NAME: str = "Doomscrolling Assessment API"
    VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "True").lower() == "true"

    # Server Configuration
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", 5001))

    # CORS and Security
    CORS_ORIGINS: list = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    SECRET_KEY: str = os.getenv("SECRET_KEY", "secret_key")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # LLM Configuration (tried in this order)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    # OpenAI-compatible chat completions endpoint
    LLM_URL: str = os.getenv("LLM_URL", "")
    LLM_TOKEN: str = os.getenv("LLM_TOKEN", "")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "")

    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    LLM_TIMEOUT: float = float(os.getenv("LLM_TIMEOUT", 60))

    # Journal Configuration
    JOURNAL_MIN_LENGTH: int = 20
    JOURNAL_MAX_LENGTH: int = 10000
    MIN_TREND_ENTRIES: int = 2

    # Session Configuration
    SESSION_TIMEOUT_HOURS: int = int(os.getenv("SESSION_TIMEOUT_HOURS", 24))
    ACTIVITY_RETENTION_HOURS: int = int(os.getenv("ACTIVITY_RETENTION_HOURS", 168))

    def has_llm_provider(self) -> bool:
        return bool(self.GEMINI_API_KEY or (self.LLM_URL and self.LLM_TOKEN) or self.OPENAI_API_KEY)

    def validate(self):
        """Validate settings that must be real outside development"""
        if self.is_production():
            if self.SECRET_KEY == "secret_key":
                raise ConfigurationError("Please set a secure SECRET_KEY for production!")

            if not self.has_llm_provider():
                raise ConfigurationError("LLM configuration is required for production!")

        if not self.has_llm_provider():
            logger.warning(
                "LLM configuration not complete; AI features will return 500. "
                "Set GEMINI_API_KEY, LLM_URL + LLM_TOKEN or OPENAI_API_KEY"
            )

    def get_llm_config(self) -> dict:
        """Get LLM configuration as dictionary"""
        return {
            "gemini": {"api_key": self.GEMINI_API_KEY, "model": self.GEMINI_MODEL},
            "custom": {"url": self.LLM_URL, "token": self.LLM_TOKEN, "model": self.LLM_MODEL},
            "openai": {"api_key": self.OPENAI_API_KEY, "model": self.OPENAI_MODEL},
            "timeout": self.LLM_TIMEOUT,
        }

    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.ENVIRONMENT.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.ENVIRONMENT.lower() == "production"

    def print_config_summary(self):
        """Print configuration summary (safe for logging)"""
        llm = self.get_llm_config()
        print(f"""
🔧 Configuration Summary:
   App: {self.APP_NAME} v{self.VERSION}
   Environment: {self.ENVIRONMENT}
   Host: {self.HOST}:{self.PORT}
   Debug: {self.DEBUG}

   LLM:
   - Gemini: {llm['gemini']['model']} (key {_mask(llm['gemini']['api_key'])})
   - Custom: {llm['custom']['url'] or 'NOT SET'} (token {_mask(llm['custom']['token'])})
   - OpenAI: {llm['openai']['model']} (key {_mask(llm['openai']['api_key'])})
   - Timeout: {llm['timeout']}s

   Journal: {self.JOURNAL_MIN_LENGTH}-{self.JOURNAL_MAX_LENGTH} chars, trends need {self.MIN_TREND_ENTRIES}+ entries
""")


# Create global settings instance
settings = Settings()
