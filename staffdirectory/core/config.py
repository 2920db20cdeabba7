from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./staffdirectory.db"

    # prepended to sys_file.identifier when resolving a member image
    FILEADMIN_PREFIX: str = "fileadmin"
    FILE_REFERENCE_TABLE: str = "fe_users"
    FILE_REFERENCE_FIELD: str = "image"

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

settings = Settings()
