import os
from dataclasses import dataclass


@dataclass
class Settings:
    HOST: str | None = os.getenv("APIDOC_HOST")
    BASE_URL: str = os.getenv("APIDOC_BASE_URL", "http://localhost:8080")
    TEST_TARGET: str = os.getenv("APIDOC_TEST_TARGET", "mocha")  # mocha | pytest
    LOG_LEVEL: str = os.getenv("APIDOC_LOG_LEVEL", "WARNING")


settings = Settings()
