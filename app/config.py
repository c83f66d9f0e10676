from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List

class Settings(BaseSettings):
    # App
    APP_NAME: str = "BADGER PADEL API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str

    # JWT
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # AWS S3
    AWS_ACCESS_KEY_ID:     str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    AWS_BUCKET_NAME:       str = "membership-images"
    AWS_REGION:            str = "af-south-1"
    STORAGE_PUBLIC_URL:    str = ""   # CDN in front of the bucket, if any

    # Resend
    RESEND_API_KEY: str = ""
    MAIL_FROM:      str = "Badger Padel <partners@badgerpadel.co.za>"

    # Membership cards
    MEMBERSHIP_PREFIX: str = "BP"

    # Scheduler
    RECONCILE_INTERVAL_MINUTES: int = 60

    # CORS
    FRONTEND_URLS: List[str] = [
        "https://badgerpadel.co.za",
        "http://localhost:5173",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True

@lru_cache()
def get_settings():
    return Settings()

settings = get_settings()
