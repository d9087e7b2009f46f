"""
Configuration management for shopping-ticket.

Handles loading, saving, and validating configuration settings.
"""

import os
import shutil
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field, asdict

from dotenv import load_dotenv

from ..utils.logger_setup import get_logger

logger = get_logger(__name__)

# Load environment variables from .env file in the tool's root directory
TOOL_ROOT = Path(__file__).parent.parent.parent
ENV_FILE = TOOL_ROOT / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    file: Optional[str] = None
    console: bool = False

    def __post_init__(self):
        """Apply environment overrides."""
        self.level = str(os.getenv("SHOPPING_TICKET_LOG_LEVEL") or self.level or "WARNING")
        if not self.file:
            log_file_env = os.getenv("SHOPPING_TICKET_LOG_FILE")
            if log_file_env:  # Only set if env var is not empty
                self.file = log_file_env


@dataclass
class CartConfig:
    """Cart input configuration."""
    default_file: Optional[str] = None  # used by 'ticket' when no file is given


@dataclass
class Config:
    """Main configuration class."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    cart: CartConfig = field(default_factory=CartConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary."""
        return cls(
            logging=LoggingConfig(**(data.get('logging') or {})),
            cart=CartConfig(**(data.get('cart') or {}))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            'logging': asdict(self.logging),
            'cart': asdict(self.cart)
        }


class ConfigManager:
    """Manages configuration loading, saving, and resolution."""

    DEFAULT_CONFIG_DIR = ".shopping-ticket"
    DEFAULT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_root: Optional[str] = None):
        """
        Initialize ConfigManager.

        Args:
            project_root: Root directory of the project. If None, uses current directory.
        """
        self.project_root = Path(project_root or os.getcwd())
        self.config_dir = self.project_root / self.DEFAULT_CONFIG_DIR
        self.config_file = self.config_dir / self.DEFAULT_CONFIG_FILE

    def load(self) -> Config:
        """
        Load configuration from file or create default.

        Returns:
            Loaded or default configuration
        """
        if self.config_file.exists():
            return self._load_from_file()
        return Config()

    def _load_from_file(self) -> Config:
        """Load configuration from YAML file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            data = self._resolve_env_vars(data)

            return Config.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError, AttributeError) as e:
            logger.warning(f"Error loading config file: {e}")
            logger.info("Using default configuration.")
            return Config()

    def save(self, config: Config):
        """
        Save configuration to file.

        Args:
            config: Configuration to save
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    def init_config(self, overwrite: bool = False) -> bool:
        """
        Initialize configuration file with defaults.

        Args:
            overwrite: Whether to overwrite existing config

        Returns:
            True if config was created/updated, False otherwise
        """
        if self.config_file.exists() and not overwrite:
            logger.info(f"Configuration already exists at: {self.config_file}")
            return False

        if overwrite and self.config_dir.exists():
            shutil.rmtree(self.config_dir)
            logger.info(f"Removed existing configuration directory: {self.config_dir}")

        self.save(Config())
        logger.info(f"Configuration initialized at: {self.config_file}")
        return True

    def _resolve_env_vars(self, data: Any) -> Any:
        """
        Recursively resolve environment variables in configuration.

        Supports ${VAR_NAME} syntax.
        """
        if isinstance(data, dict):
            return {k: self._resolve_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):
            if data.startswith('${') and data.endswith('}'):
                var_name = data[2:-1]
                return os.environ.get(var_name, data)
        return data

    def validate(self, config: Config) -> List[str]:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if str(config.logging.level).upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {config.logging.level}")

        cart_path = self.resolve_cart_file(config)
        if cart_path is not None and not cart_path.exists():
            errors.append(f"Default cart file not found: {cart_path}")

        return errors

    def resolve_cart_file(self, config: Config) -> Optional[Path]:
        """
        Path of the configured default cart file, if any.

        Relative paths are resolved against the project root.
        """
        if not config.cart.default_file:
            return None
        path = Path(config.cart.default_file)
        if not path.is_absolute():
            path = self.project_root / path
        return path
