import os
from pathlib import Path
from dotenv import load_dotenv

# Load biến môi trường trong .env
BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

class Settings:
    FAL_KEY: str | None = os.getenv("FAL_KEY")
    FAL_RUN_URL: str = os.getenv("FAL_RUN_URL", "https://fal.run")
    FAL_QUEUE_URL: str = os.getenv("FAL_QUEUE_URL", "https://queue.fal.run")
    FAL_TIMEOUT: float = float(os.getenv("FAL_TIMEOUT", "300"))  # giây

    REDIS_URL: str = os.getenv("REDIS_URL", "redis://127.0.0.1:6379/0")

    # S3 / R2 bucket lưu asset sau khi generate
    STORAGE_BUCKET: str | None = os.getenv("STORAGE_BUCKET")
    STORAGE_ENDPOINT: str | None = os.getenv("STORAGE_ENDPOINT")
    STORAGE_ACCESS_KEY_ID: str | None = os.getenv("STORAGE_ACCESS_KEY_ID")
    STORAGE_SECRET_ACCESS_KEY: str | None = os.getenv("STORAGE_SECRET_ACCESS_KEY")
    STORAGE_PUBLIC_URL: str | None = os.getenv("STORAGE_PUBLIC_URL")

    DEFAULT_BRAND: str = os.getenv("DEFAULT_BRAND", "default")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    NUM_WORKERS: int = int(os.getenv("NUM_WORKERS", "4"))

settings = Settings()
