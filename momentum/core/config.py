"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables"""

    # Database
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")

    # Time
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "America/Los_Angeles")
    DAY_CUTOFF_HOUR: int = int(os.getenv("DAY_CUTOFF_HOUR", "4"))

    # Cache
    CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", str(8 * 60 * 60)))
    CACHE_SWEEP_INTERVAL_SECONDS: int = int(os.getenv("CACHE_SWEEP_INTERVAL_SECONDS", "600"))

    # CLI
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")


# Create a global settings instance
settings = Settings()
