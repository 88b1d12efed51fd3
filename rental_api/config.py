from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/rental.sqlite3"
    db_pool_size: int = 10
    db_connect_timeout: int = 10  # seconds
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
