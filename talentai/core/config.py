from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    APP_NAME: str = "TalentAI"
    APP_ENV: str = "dev"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    # SQLite connection string (read from .env)
    DATABASE_URL: str = "sqlite:///./talentai.db"
    CREATE_TABLES_ON_STARTUP: bool = True
    SEED_DEMO_DATA: bool = False

    BACKEND_CORS_ORIGINS: str = "http://localhost:5173"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    # "mock" returns a canned profile, "extract" reads the stored file
    CV_PARSER: str = "mock"
    CV_STORAGE_DIR: str = "."
    AI_PROCESSING_DELAY_MS: int = 100

    # Off reproduces the permissive behaviour: any status may follow any status
    ENFORCE_STATUS_TRANSITIONS: bool = False

    EMAIL_SENDER_ADDRESS: str = "no-reply@talentai.com"

settings = Settings()
