# server/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """HTTP server configuration"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # App settings
    app_name: str = "Resume Builder ATS API"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Uploads
    max_upload_bytes: int = 1_000_000
    allowed_upload_suffixes: tuple = (".txt",)


settings = Settings()
