"""Configuration utilities.

Central place to load environment driven settings (route names, time zones, report labels).
Avoids scattering os.getenv calls around the codebase.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env once on module import
load_dotenv()


@dataclass(slots=True)
class Settings:
    origin_name: str = os.getenv("ORIGIN_NAME", "Владивосток")
    destination_name: str = os.getenv("DESTINATION_NAME", "Тель-Авив")
    origin_tz: str = os.getenv("ORIGIN_TZ", "Asia/Vladivostok")
    destination_tz: str = os.getenv("DESTINATION_TZ", "Asia/Jerusalem")
    currency_label: str = os.getenv("CURRENCY_LABEL", "руб.")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    def route_label(self) -> str:
        return f"{self.origin_name} → {self.destination_name}"


settings = Settings()
