import logging
from pydantic_settings import BaseSettings

from .constants.constants import *

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Pipeline
    max_workers: int = 1

    # Input and Report Settings
    fasta_format: str = DEFAULT_FASTA_FORMAT
    weight_decimal_places: int = 2

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"SEQMETRICS_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {self.log_level!r}."
            )

        if self.max_workers < 1:
            raise ValueError("SEQMETRICS_MAX_WORKERS must be at least 1.")

        if self.weight_decimal_places < 0:
            raise ValueError("SEQMETRICS_WEIGHT_DECIMAL_PLACES cannot be negative.")

    model_config = {
        "env_prefix": "SEQMETRICS_",
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
