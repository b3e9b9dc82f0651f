from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import Weekday


class Settings(BaseSettings):
    timezone: str = "America/Phoenix"
    start_of_week: Weekday = Weekday.sunday
    date_order: str = "MDY"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="QUICKADD_", case_sensitive=False)


settings = Settings()
