"""Configuration management for GRASP."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class MiningConfig(BaseModel):
    """Parameters of a mining run."""

    min_support: int = Field(default=2, description="Minimum absolute support, clamped to >= 1")
    max_gap: int = Field(default=1, description="Maximum unmatched items between transitions, clamped to >= 1")
    missing_token_skip: int = Field(
        default=1,
        ge=0,
        description="Extra tokens skipped after a token that is not a node of the graph",
    )
    workers: int = Field(default=1, ge=1, description="Graphs mined concurrently")


class OutputConfig(BaseModel):
    """Pattern file output configuration."""

    include_cover: bool = Field(default=False, description="Append #COVER: to SPMF pattern lines")


class GraspConfig(BaseSettings):
    """Root configuration for GRASP."""

    mining: MiningConfig = Field(default_factory=MiningConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    model_config = {"env_prefix": "GRASP_", "env_nested_delimiter": "__"}

    @classmethod
    def from_yaml(cls, path: Path) -> GraspConfig:
        import yaml
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)
