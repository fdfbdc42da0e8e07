
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Vendor Hub API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Database (any async SQLAlchemy URL; SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./vendorhub_dev.db",
        alias="DATABASE_URL",
    )
    create_tables_on_startup: bool = Field(default=True, alias="CREATE_TABLES_ON_STARTUP")

    # Auth
    token_header_key: str = Field(default="x-access-token", alias="TOKEN_HEADER_KEY")

    # Vendor images
    file_upload_path: str = Field(default="uploads", alias="FILE_UPLOAD_PATH")
    self_url: str = Field(
        default="http://localhost:8000", alias="SELF_URL",
    )  # prefixed to stored image paths in list output

    # Vendor listing
    vendor_list_default_limit: int = Field(default=20, alias="VENDOR_LIST_DEFAULT_LIMIT")
    vendor_list_max_limit: int = Field(default=20, alias="VENDOR_LIST_MAX_LIMIT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def upload_dir(self) -> str:
        """Upload directory without a trailing separator."""
        return self.file_upload_path.rstrip("/") or "."

settings = Settings()
