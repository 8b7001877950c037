import os
from typing import Optional

from pydantic import BaseModel, field_validator

ENV_PREFIX = 'FLASHDECK_'
DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class AppSettings(BaseModel):
    """Runtime configuration for the flashdeck CLI.

    Attributes:
        log_level: Threshold for diagnostic logging (default: "WARNING")
        log_format: Format string passed to logging.basicConfig
        seed: Seed for choosing quiz questions; None means unseeded (default: None)
    """

    log_level: str = 'WARNING'
    log_format: str = DEFAULT_LOG_FORMAT
    seed: Optional[int] = None

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f'Unknown log level: {value}')
        return level

    @classmethod
    def from_env(cls, **overrides) -> 'AppSettings':
        """Build settings from FLASHDECK_* environment variables.

        Keyword overrides win over the environment; None values are ignored.
        """
        values = {}
        for field in ('log_level', 'log_format', 'seed'):
            env_value = os.getenv(f'{ENV_PREFIX}{field.upper()}')
            if env_value:
                values[field] = env_value
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
