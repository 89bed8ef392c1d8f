"""Monitoring configuration: the API groups stamped with app, host and polling interval."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from apidoc_gen.model.base import ApiDoc


class MonitorConfig(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    app_id: int
    version: Literal[1] = 1
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    time_interval: int
    host: str
    apis: list[ApiDoc]

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


def build_monitor_config(app_id: int, host: str, time_interval: int, docs: list[ApiDoc]) -> MonitorConfig:
    return MonitorConfig(app_id=app_id, host=host, time_interval=time_interval, apis=docs)


def write_monitor_config(config: MonitorConfig, output: Path) -> None:
    """Write the config as JSON, e.g. to ``api-v4.json``."""
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(config.to_json(), encoding="utf-8")
