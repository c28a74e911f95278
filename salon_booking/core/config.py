from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SALON_NAME: str = "Your Salon"
    BUSINESS_TIMEZONE: str = "America/Los_Angeles"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str | None = None  # "memory" | "json"; defaults by ENV
    DATA_DIR: str = "./data"

    SLOT_STEP_MINUTES: int = 30
    BOOKING_WINDOW_DAYS: int = 90


settings = Settings()
