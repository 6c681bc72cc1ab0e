"""
Application settings, read once from the environment at startup.

The run mode (APP_ENV) selects an environment specific dotenv file,
`.env.<APP_ENV>`, loaded before the generic `.env`. Values already present in
the process environment always win.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

PRODUCTION = "production"
STORES = ("dynamodb", "mongo")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


@dataclass(frozen=True, slots=True)
class Settings:
    app_env: str = "dev"

    # ── Store ─────────────────────────────────────────────────────────────
    task_store: str = "dynamodb"
    aws_region: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    dynamodb_table: str = "tasks"
    dynamodb_endpoint_url: str | None = None
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "tasks_api"

    # ── HTTP ──────────────────────────────────────────────────────────────
    host: str = "127.0.0.1"
    port: int = 5500
    reload: bool = True
    log_level: str = "info"
    # "*" is fine for local development only; list real origins in production.
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    # ── Behaviour ─────────────────────────────────────────────────────────
    require_description: bool = False
    expose_errors: bool = True

    @property
    def is_production(self) -> bool:
        return self.app_env == PRODUCTION


def load_settings(load_env_files: bool = True) -> Settings:
    """
    Builds the Settings object from environment variables.

    Args:
        load_env_files: Load `.env.<APP_ENV>` and `.env` first.

    Raises:
        ValueError: If PORT is not an integer or TASK_STORE is unknown.
    """
    app_env = os.getenv("APP_ENV", "dev").strip().lower() or "dev"
    if load_env_files:
        load_dotenv(f".env.{app_env}")
        load_dotenv()

    task_store = os.getenv("TASK_STORE", "dynamodb").strip().lower()
    if task_store not in STORES:
        raise ValueError(
            f"TASK_STORE must be one of {', '.join(STORES)}, got {task_store!r}"
        )

    port_str = os.getenv("PORT", "5500")
    try:
        port = int(port_str)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {port_str!r}") from None

    cors_origins = os.getenv("CORS_ORIGINS", "*")
    if cors_origins.strip() == "*":
        origins = ["*"]
    else:
        origins = [origin.strip() for origin in cors_origins.split(",") if origin.strip()]

    expose_errors = os.getenv("EXPOSE_ERRORS")

    return Settings(
        app_env=app_env,
        task_store=task_store,
        aws_region=_optional("AWS_REGION"),
        aws_access_key_id=_optional("AWS_ACCESS_KEY_ID"),
        aws_secret_access_key=_optional("AWS_SECRET_ACCESS_KEY"),
        dynamodb_table=os.getenv("DYNAMODB_TABLE", "tasks"),
        dynamodb_endpoint_url=_optional("DYNAMODB_ENDPOINT_URL"),
        mongo_uri=os.getenv("MONGO_URI", "mongodb://localhost:27017"),
        mongo_db_name=os.getenv("MONGO_DB_NAME", "tasks_api"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=port,
        reload=_as_bool(os.getenv("RELOAD", "true")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
        cors_origins=origins,
        require_description=_as_bool(os.getenv("REQUIRE_DESCRIPTION", "false")),
        expose_errors=(
            _as_bool(expose_errors)
            if expose_errors is not None
            else app_env != PRODUCTION
        ),
    )
