from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKTALLY_")

    log_level: str = "INFO"

    game_log_path: Path = Path("data3.csv")

    # Deck texts are parsed like log entries, so "White" means White Midrange.
    # List values from the environment are JSON, e.g. DECKTALLY_REPORT_DECKS='["Rb"]'
    report_decks: list[str] = ["White", "Rb", "Grixis", "5c Atraxa"]

    report_players: list[str] = ["Grant", "Noah", "Eamonn", "Isaac"]


settings = Settings()
