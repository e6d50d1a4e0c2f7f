import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./workspace.db")
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    SITE_URL = data.get("SITE_URL", "http://localhost:8000")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Auth provider
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ACCESS_TOKEN_TTL_MINUTES = data.get("ACCESS_TOKEN_TTL_MINUTES", 15)
    SESSION_TTL_DAYS = data.get("SESSION_TTL_DAYS", 30)
    CONFIRMATION_TTL_HOURS = data.get("CONFIRMATION_TTL_HOURS", 24)
    REQUIRE_EMAIL_CONFIRMATION = bool(data.get("REQUIRE_EMAIL_CONFIRMATION", True))
    AUTO_CREATE_PROFILE = bool(data.get("AUTO_CREATE_PROFILE", True))
    ACCESS_COOKIE_NAME = data.get("ACCESS_COOKIE_NAME", "ws-access-token")
    REFRESH_COOKIE_NAME = data.get("REFRESH_COOKIE_NAME", "ws-refresh-token")
    COOKIE_SECURE = bool(data.get("COOKIE_SECURE", False))

    # Invites
    INVITE_TTL_DAYS = data.get("INVITE_TTL_DAYS", 7)
    INVITE_CODE_MAX_ATTEMPTS = data.get("INVITE_CODE_MAX_ATTEMPTS", 5)
