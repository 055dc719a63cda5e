"""Configuration schema, loading and seeding for the campus service.

Public API:
    - CampusConfiguration: Root configuration model
    - CampusSeedConfig: Buildings, floors and passages to seed
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - seed_campus: Load the seed section into a ServiceFactory

Example:
    >>> from pathlib import Path
    >>> from campus.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("campus.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from campus.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from campus.application.config.schema import (
    SUPPORTED_VERSIONS,
    BuildingRulesConfig,
    BuildingSeedConfig,
    CampusConfiguration,
    CampusSeedConfig,
    CoordinatesConfig,
    FloorSeedConfig,
    LoggingConfig,
    PassagePointSeedConfig,
    PassageSeedConfig,
    ServerConfig,
)
from campus.application.config.seeding import seed_campus

__all__ = [
    "SUPPORTED_VERSIONS",
    "BuildingRulesConfig",
    "BuildingSeedConfig",
    "CampusConfiguration",
    "CampusSeedConfig",
    "ConfigError",
    "CoordinatesConfig",
    "FloorSeedConfig",
    "LoggingConfig",
    "PassagePointSeedConfig",
    "PassageSeedConfig",
    "ServerConfig",
    "load_config",
    "load_config_from_dict",
    "seed_campus",
]
