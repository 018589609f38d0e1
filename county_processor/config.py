"""
Configuration schema for the county lookup service.

This module defines the configuration structure: where region geometry
lives, which GeoJSON property holds the region name, how holes are treated,
the batch worker pool size and the log level.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import yaml


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class LookupConfig:
    """
    Main configuration for LookupService.

    This configuration is loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    # Region geometry (GeoJSON FeatureCollection)
    counties_path: Path

    # GeoJSON property holding the region name
    name_property: str = "navn"

    # Treat rings after the first as holes
    include_holes: bool = False

    # Batch worker pool size (None -> os.cpu_count())
    max_workers: Optional[int] = None

    log_level: str = "INFO"

    def __post_init__(self):
        """Validate lookup configuration."""
        object.__setattr__(self, 'counties_path', Path(self.counties_path))

        if not self.name_property:
            raise ValueError("name_property cannot be empty")

        if not isinstance(self.name_property, str):
            raise ValueError(
                f"name_property must be a string, got {type(self.name_property).__name__}"
            )

        if self.max_workers is not None and (
            isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int)
        ):
            raise ValueError(
                f"max_workers must be an integer or null, got {self.max_workers!r}"
            )

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(
                f"max_workers must be >= 1 or null, got {self.max_workers}"
            )

        if not isinstance(self.log_level, str):
            raise ValueError(
                f"log_level must be a string, got {self.log_level!r}"
            )

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )
        object.__setattr__(self, 'log_level', self.log_level.upper())

        # Validate counties_path exists
        if not self.counties_path.exists():
            raise FileNotFoundError(
                f"Counties file not found: {self.counties_path}\n"
                f"Create it or update 'counties_path' in config"
            )

        if not self.counties_path.is_file():
            raise ValueError(
                f"counties_path must be a file, got directory: {self.counties_path}"
            )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "LookupConfig":
        """
        Load configuration from YAML file.

        Relative counties_path values are resolved against the YAML file's
        directory.

        Example YAML:
            counties_path: "./data/kommuner.geojson"
            name_property: "navn"
            include_holes: false

            batch:
              max_workers: null   # null -> os.cpu_count()

            logging:
              level: "INFO"
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid config in {yaml_path}: expected a mapping, got {type(data).__name__}"
            )

        if "counties_path" not in data:
            raise ValueError(f"Missing required key 'counties_path' in {yaml_path}")

        if not isinstance(data["counties_path"], str):
            raise ValueError(f"counties_path must be a string in {yaml_path}")

        counties_path = Path(data["counties_path"])
        if not counties_path.is_absolute():
            counties_path = yaml_path.parent / counties_path

        batch_data = data.get("batch") or {}
        logging_data = data.get("logging") or {}
        for section, value in (("batch", batch_data), ("logging", logging_data)):
            if not isinstance(value, dict):
                raise ValueError(f"'{section}' must be a mapping in {yaml_path}")

        return cls(
            counties_path=counties_path,
            name_property=data.get("name_property", "navn"),
            include_holes=bool(data.get("include_holes", False)),
            max_workers=batch_data.get("max_workers"),
            log_level=logging_data.get("level", "INFO"),
        )
