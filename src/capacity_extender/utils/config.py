# src/capacity_extender/utils/config.py
"""
Settings for the capacity extender, loaded from the environment or .env.

Every value has a safe default so the CLI runs without any .env present.
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from project root
BASE_DIR = Path(__file__).resolve().parents[3]
load_dotenv(BASE_DIR / ".env")


class ExtenderSettings(BaseSettings):
    """
    Configuration model for roster projection runs.

    Field names map to upper-case environment variables
    (OUTPUT_DIR, FILE_ENCODING, STRICT_DATES, ...).
    """
    model_config = SettingsConfigDict(env_ignore_empty=True, extra='ignore')

    output_dir: Path = Path("output")
    output_prefix: str = "modified_"
    file_encoding: str = "utf-8-sig"  # drops a leading BOM like a browser reader does

    # Row handling
    strict_dates: bool = True
    skip_existing: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Path = Path("logs") / "capacity_extender.log"

    def __repr__(self):
        return f"<ExtenderSettings output_dir={self.output_dir} strict_dates={self.strict_dates}>"


# Singleton
settings = ExtenderSettings()
