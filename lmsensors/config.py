import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class SensorsConfig:
    """lmsensors configuration with defaults"""
    log_level: str = "INFO"
    timeout: Optional[float] = None  # seconds; None waits for sensors forever

    @classmethod
    def from_file(cls, config_path: Path) -> "SensorsConfig":
        """Load configuration from YAML file"""
        config_path = Path(config_path)
        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}: {data}")
            return cls(**data)
        except (OSError, yaml.YAMLError, TypeError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}, using defaults")
            return cls()

    def configure_logging(self) -> None:
        """Configure root logging at the configured level"""
        logging.basicConfig(level=getattr(logging, self.log_level.upper(), logging.INFO))
