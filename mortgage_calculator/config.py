from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MORTGAGE_"}

    # App
    app_name: str = "Mortgage Calculator"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    host: str = "127.0.0.1"
    port: int = 8000

    # Optional upper bound on the loan term; unset means no limit
    max_term_years: int | None = None


settings = Settings()
