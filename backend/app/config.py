"""Application configuration via environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_prefix: str = "/api"
    project_name: str = "Chess Trainer API"
    allow_origins: list[str] = ["*"]
    static_dir: Path = APP_DIR / "public"
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    vercel: str | None = None
    log_level: str = "INFO"
    upstream_timeout_seconds: float = 20.0
    gemini_api_key: str = ""
    coach_api_base: str = "https://generativelanguage.googleapis.com/v1beta/models"
    coach_model: str = "gemini-2.5-flash-preview-09-2025"
    chess_com_game_url: str = "https://www.chess.com/callback/live/game/{game_id}"
    lichess_export_url: str = "https://lichess.org/game/export/{game_id}"
    browser_user_agent: str = "Mozilla/5.0"

    @property
    def should_listen(self) -> bool:
        # Serverless hosts import ``app.main:app`` and never need a listener.
        return self.environment != "production" or not self.vercel


settings = Settings()
