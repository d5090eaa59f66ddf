# ============================================================================
# REPLICA CONFIGURATION LOADER
# ============================================================================
# STATUS: Core - YAML replica configuration
# PURPOSE: Parse and validate replicas.yml into immutable ReplicaSettings
# CREATED: 19 OCT 2026
# ============================================================================
"""
Replica Configuration Loader

Reads the replicas file: a YAML mapping from replica name to replica block.

    replica1:
      host: 127.0.0.1
      port: 3306
      user: healthcheck
      password: secret
      max_seconds_behind_source: 10
      fail_replica_not_running: true
      healthcheck_config:
        port: 8080
        path: /

Each block is validated with pydantic and converted into a frozen
ReplicaSettings. Every failure surfaces as ConfigError. Whether each replica
has a listen port is checked later by the fleet manager, before any bind.
"""

import logging
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.errors import ConfigError
from core.models import ReplicaSettings, DEFAULT_HEALTHCHECK_PATH, DEFAULT_MYSQL_PORT

logger = logging.getLogger(__name__)


# ============================================================================
# FILE SCHEMA
# ============================================================================

class HealthcheckConfigModel(BaseModel):
    """healthcheck_config block of one replica."""
    model_config = ConfigDict(extra="ignore")

    path: str = Field(default=DEFAULT_HEALTHCHECK_PATH, description="HTTP path served")
    port: int = Field(default=0, ge=0, le=65535, description="HTTP listen port")

    @field_validator("path", mode="before")
    @classmethod
    def default_empty_path(cls, v):
        """Empty or missing path means '/'."""
        if v is None or v == "":
            return DEFAULT_HEALTHCHECK_PATH
        return v

    @field_validator("path")
    @classmethod
    def require_absolute_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("path must start with '/'")
        return v

    @field_validator("port", mode="before")
    @classmethod
    def default_null_port(cls, v):
        return 0 if v is None else v


class ReplicaConfigModel(BaseModel):
    """One replica block of the replicas file."""
    model_config = ConfigDict(extra="ignore")

    host: str = Field(default="127.0.0.1", description="MySQL host")
    port: int = Field(default=DEFAULT_MYSQL_PORT, ge=1, le=65535, description="MySQL port")
    user: str = Field(default="", description="MySQL user")
    password: str = Field(default="", description="MySQL password")
    max_seconds_behind_source: int = Field(
        default=0,
        ge=0,
        description="Maximum tolerated replication lag, 0 = unlimited"
    )
    fail_replica_not_running: bool = Field(
        default=False,
        description="Fail when the replica reports no lag value"
    )
    healthcheck_config: HealthcheckConfigModel = Field(default_factory=HealthcheckConfigModel)

    @field_validator("host", "user", "password", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        """YAML 'key:' with no value loads as None."""
        return "" if v is None else v

    @field_validator("healthcheck_config", mode="before")
    @classmethod
    def null_healthcheck_config(cls, v):
        return {} if v is None else v

    def to_settings(self, name: str) -> ReplicaSettings:
        """Convert to immutable ReplicaSettings."""
        return ReplicaSettings(
            name=name,
            host=self.host or "127.0.0.1",
            port=self.port,
            user=self.user,
            password=self.password,
            max_allowed_lag_seconds=self.max_seconds_behind_source,
            fail_if_not_replicating=self.fail_replica_not_running,
            healthcheck_port=self.healthcheck_config.port,
            healthcheck_path=self.healthcheck_config.path,
        )


# ============================================================================
# LOADING
# ============================================================================

def _describe_errors(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    return "; ".join(parts)


def parse_config(data: Any) -> List[ReplicaSettings]:
    """
    Convert a loaded YAML document into replica settings.

    Args:
        data: Result of yaml.safe_load (None for an empty file)

    Returns:
        ReplicaSettings in file order

    Raises:
        ConfigError: If the document or any replica block is invalid
    """
    if data is None:
        return []

    if not isinstance(data, dict):
        raise ConfigError(
            f"replicas file must be a mapping of replica name to settings, "
            f"got {type(data).__name__}"
        )

    settings = []
    for raw_name, block in data.items():
        name = str(raw_name)
        if block is None:
            block = {}
        if not isinstance(block, dict):
            raise ConfigError(f"replica {name}: settings must be a mapping", replica=name)

        try:
            model = ReplicaConfigModel.model_validate(block)
        except ValidationError as e:
            raise ConfigError(f"replica {name}: {_describe_errors(e)}", replica=name) from e

        settings.append(model.to_settings(name))

    return settings


def load_config(path: Union[str, Path]) -> List[ReplicaSettings]:
    """
    Load replica settings from a YAML file.

    Args:
        path: Path to replicas file

    Returns:
        ReplicaSettings in file order

    Raises:
        ConfigError: If the file cannot be read or is invalid
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"failed to read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config {path}: {e}") from e

    settings = parse_config(data)
    logger.info(f"Loaded {len(settings)} replica(s) from {path}")
    return settings


__all__ = [
    "HealthcheckConfigModel",
    "ReplicaConfigModel",
    "parse_config",
    "load_config",
]
