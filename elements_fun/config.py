"""
elements-fun Configuration
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

from elements_fun.constants import (
    CONTRACT_MAX_DEPTH,
    CONTRACT_MAX_PRECISION,
    CONTRACT_REQUIRED_FIELDS,
    JSON_TYPES,
    SLIP77_LABEL,
)
from elements_fun.errors import ConfigError

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "WARNING"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size_mb: int = 100
    backup_count: int = 5


@dataclass
class ContractConfig:
    """Contract hashing configuration."""
    validate_fields: bool = True
    required_fields: Dict[str, str] = field(
        default_factory=lambda: dict(CONTRACT_REQUIRED_FIELDS)
    )
    max_precision: int = CONTRACT_MAX_PRECISION
    max_depth: int = CONTRACT_MAX_DEPTH


@dataclass
class DerivationConfig:
    """Key derivation configuration."""
    blinding_label: str = SLIP77_LABEL.decode("ascii")


@dataclass
class Config:
    """
    Complete configuration.

    Only the CLI reads a file; library calls take the pieces they need and
    fall back to defaults.
    """
    log: LogConfig = field(default_factory=LogConfig)
    contract: ContractConfig = field(default_factory=ContractConfig)
    derivation: DerivationConfig = field(default_factory=DerivationConfig)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        # Log validation
        level = self.log.level
        if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
            errors.append(f"Invalid log level: {self.log.level}")

        if self.log.file is not None and not isinstance(self.log.file, str):
            errors.append("log file must be a path string")

        if not isinstance(self.log.format, str):
            errors.append("log format must be a string")

        if not _is_int(self.log.max_size_mb):
            errors.append("max_size_mb must be an integer")
        elif self.log.max_size_mb < 1:
            errors.append("max_size_mb must be at least 1")

        if not _is_int(self.log.backup_count):
            errors.append("backup_count must be an integer")
        elif self.log.backup_count < 0:
            errors.append("backup_count cannot be negative")

        # Contract validation
        if not isinstance(self.contract.validate_fields, bool):
            errors.append("validate_fields must be true or false")

        if not isinstance(self.contract.required_fields, dict):
            errors.append("required_fields must be an object of field name to JSON type")
        else:
            for name, json_type in self.contract.required_fields.items():
                if json_type not in JSON_TYPES:
                    errors.append(f"Unknown JSON type for field {name!r}: {json_type}")

        if not _is_int(self.contract.max_precision):
            errors.append("max_precision must be an integer")
        elif self.contract.max_precision < 0:
            errors.append("max_precision cannot be negative")

        if not _is_int(self.contract.max_depth):
            errors.append("max_depth must be an integer")
        elif self.contract.max_depth < 1:
            errors.append("max_depth must be at least 1")

        # Derivation validation
        if not isinstance(self.derivation.blinding_label, str):
            errors.append("blinding_label must be a string")
        elif not self.derivation.blinding_label:
            errors.append("blinding_label cannot be empty")

        return errors

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "log": asdict(self.log),
            "contract": asdict(self.contract),
            "derivation": asdict(self.derivation),
        }

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "Config":
        """Load configuration from file."""
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read configuration {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration {path} must be a JSON object")

        config = cls()

        try:
            if "log" in data:
                config.log = LogConfig(**data["log"])

            if "contract" in data:
                config.contract = ContractConfig(**data["contract"])

            if "derivation" in data:
                config.derivation = DerivationConfig(**data["derivation"])
        except TypeError as e:
            raise ConfigError(f"Invalid configuration section in {path}: {e}") from e

        logger.info(f"Configuration loaded from {path}")
        return config

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls()


def load_config(path: str) -> Config:
    """
    Load and validate a configuration file.

    Raises:
        ConfigError: if the file cannot be read or fails validation
    """
    config = Config.load(path)
    errors = config.validate()
    if errors:
        raise ConfigError("; ".join(errors))
    return config


def setup_logging(config: LogConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.level.upper(), logging.WARNING)

    handlers = [logging.StreamHandler()]

    if config.file:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
    )
