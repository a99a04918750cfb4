import os
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ENV_PREFIX = "FNKIT_"


class Settings(BaseModel):
    LOG_LEVEL: LogLevel = "INFO"
    CHECK_LOG_LEVEL: LogLevel = "INFO"
    PRETTY_INDENT: int = Field(default=2, ge=0)
    PATH_DELIMITER: str = Field(default=".", min_length=1)

    @classmethod
    def load(cls) -> "Settings":
        overrides = {}
        for name in cls.model_fields:
            value = os.getenv(f"{ENV_PREFIX}{name}")
            if value is None:
                continue
            overrides[name] = value.upper() if name.endswith("LEVEL") else value

        return cls(**overrides)


settings = Settings.load()
