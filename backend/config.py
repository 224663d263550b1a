from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    default_top_n: int = 3
    max_history_items: int = 500  # most recent Takeout entries kept per analysis
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
