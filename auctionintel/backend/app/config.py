from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    API_VERSION: str = "1.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # --- CORS (front end origins) ---
    CORS_ORIGINS: list[str] = [
        "https://auction-intel.vercel.app",
        "http://localhost:5173",  # Vite dev server
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    # --- Federal economic data (FRED) ---
    # Unset => /api/rates serves fallback defaults
    FRED_API_KEY: str | None = None

    # --- Statistics bureau (Census ACS) ---
    CENSUS_API_KEY: str | None = None

    # --- Cache freshness ---
    CENSUS_CACHE_TTL_S: int = 86400  # 24h
    MARKET_CACHE_TTL_S: int = 900  # 15 min


settings = Settings()
