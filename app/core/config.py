from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
import logging

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Application
    app_name: str = "Real Estate Manager API"
    debug: bool = False
    version: str = "1.0.0"
    api_prefix: str = "/api"
    docs_url: str = "/api-docs"

    # Server
    host: str = "0.0.0.0"
    port: int = 9999

    # Database
    mongo_uri: str = Field("mongodb://localhost:27017", validation_alias="MONGO_URI")
    database_name: str = "PROD"
    server_selection_timeout_ms: int = 5000

    # CORS
    allowed_origins: list[str] = ["*"]

    # Logging
    log_dir: str = "logs"
    log_to_file: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    def validate_on_startup(self):
        """Validate configuration on application startup"""
        validation_errors = []

        if not self.mongo_uri or not self.mongo_uri.startswith(('mongodb://', 'mongodb+srv://')):
            validation_errors.append("Invalid MongoDB URI format")

        if not self.database_name:
            validation_errors.append("Database name must not be empty")

        if self.port <= 0 or self.port > 65535:
            validation_errors.append("Port must be between 1 and 65535")

        if self.server_selection_timeout_ms <= 0:
            validation_errors.append("Server selection timeout must be positive")

        for origin in self.allowed_origins:
            if origin != "*" and not origin.startswith(('http://', 'https://')):
                validation_errors.append(f"Invalid CORS origin format: {origin}")

        if not self.api_prefix.startswith('/'):
            validation_errors.append("API prefix must start with '/'")
        if not self.docs_url.startswith('/'):
            validation_errors.append("Docs URL must start with '/'")

        if validation_errors:
            logger.error("Configuration validation failed:")
            for error in validation_errors:
                logger.error(f"  - {error}")
            raise ValueError("Configuration validation failed. Please check your environment variables.")

        logger.info("Configuration validation passed")

        if self.debug:
            logger.warning("Running in DEBUG mode - not suitable for production")

    def get_config_warnings(self) -> list:
        """Get list of deployment-related configuration warnings"""
        warnings = []

        if self.debug:
            warnings.append("Debug mode is enabled")

        if "*" in self.allowed_origins:
            warnings.append("CORS allows every origin")

        if "localhost" in self.mongo_uri or "127.0.0.1" in self.mongo_uri:
            warnings.append("Using localhost MongoDB - ensure it's secured in production")

        return warnings

    @field_validator('allowed_origins', mode='before')
    @classmethod
    def parse_allowed_origins(cls, v):
        """Parse JSON array for ALLOWED_ORIGINS env var"""
        if isinstance(v, str):
            import json
            try:
                parsed = json.loads(v)
                if not isinstance(parsed, list):
                    raise ValueError("ALLOWED_ORIGINS must be a JSON array")
                return parsed
            except json.JSONDecodeError:
                raise ValueError("ALLOWED_ORIGINS must be valid JSON")
        return v


# Create settings instance and validate
settings = Settings()

# Validate configuration on import
try:
    settings.validate_on_startup()
except Exception as e:
    logger.error(f"Failed to validate configuration: {e}")
    raise
