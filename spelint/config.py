import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    max_edit_distance: int = int(os.getenv("SPELINT_MAX_EDIT_DISTANCE", "2"))
    suggestion_limit: int = int(os.getenv("SPELINT_SUGGESTION_LIMIT", "5"))
    log_level: str = os.getenv("SPELINT_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    def __post_init__(self) -> None:
        level = (self.log_level or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL
        object.__setattr__(self, "log_level", level)


settings = Settings()
