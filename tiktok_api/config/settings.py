"""Configuration management for tiktok-api."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class EndpointConfig(BaseModel):
    """Upstream hosts and endpoint paths."""
    base_url: str = "https://m.tiktok.com"
    share_url: str = "https://www.tiktok.com"

    item_list: str = "/api/item_list/"
    user_info: str = "/api/user/detail/"
    video_info: str = "/api/item/detail/"
    audio_info: str = "/api/music/detail/"
    tag_info: str = "/api/challenge/detail/"
    share_item_list: str = "/share/item/list"

    app_id: int = 1233
    language: str = "en"


class StatusCodeConfig(BaseModel):
    """Status codes embedded in the JSON body of upstream responses."""
    success: int = 0
    illegal_identifier: int = 10201
    resource_not_found: int = 10202
    video_not_found: int = 10204


class APIConfig(BaseModel):
    """HTTP transport configuration."""
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    referer: str = "https://www.tiktok.com/"
    timeout: float = 30.0
    page_size: int = Field(default=30, ge=1, le=30)


class TikTokConfig(BaseModel):
    """Main tiktok-api configuration."""
    api: APIConfig = Field(default_factory=APIConfig)
    endpoints: EndpointConfig = Field(default_factory=EndpointConfig)
    status_codes: StatusCodeConfig = Field(default_factory=StatusCodeConfig)


class ConfigManager:
    """Manages configuration loading and saving."""

    DEFAULT_CONFIG_NAME = "tiktok_api.yaml"

    def __init__(self, config_path: Path | None = None):
        """Initialize config manager."""
        self.config_path = config_path or self._get_default_config_path()
        self._config: TikTokConfig | None = None

    def load(self) -> TikTokConfig:
        """Load configuration from file, falling back to defaults."""
        if self.config_path.exists():
            try:
                with open(self.config_path, encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
                    self._config = TikTokConfig(**data)
            except Exception as e:
                logger.warning(f"Error loading config from {self.config_path}: {e}")
                logger.warning("Using default configuration")
                self._config = TikTokConfig()
        else:
            logger.debug(f"Config file not found at {self.config_path}, using defaults")
            self._config = TikTokConfig()

        return self._config

    def save(self, config: TikTokConfig | None = None) -> None:
        """Save configuration to file."""
        config_to_save = config or self._config
        if config_to_save is None:
            raise ValueError("No configuration to save")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        data = config_to_save.model_dump()
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, indent=2)

        logger.info(f"Configuration saved to {self.config_path}")

    def get_config(self) -> TikTokConfig:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            self.load()
        return self._config

    def _get_default_config_path(self) -> Path:
        """Get default configuration file path."""
        # Current directory first, then the user config dir
        current_dir = Path.cwd() / self.DEFAULT_CONFIG_NAME
        if current_dir.exists():
            return current_dir

        config_dir = Path.home() / ".config" / "tiktok-api"
        return config_dir / self.DEFAULT_CONFIG_NAME


# Global config instance
config_manager = ConfigManager()


def get_config() -> TikTokConfig:
    """Get the global configuration instance."""
    return config_manager.get_config()


def load_config(config_path: Path | None = None) -> TikTokConfig:
    """Load configuration from specific path."""
    if config_path:
        manager = ConfigManager(config_path)
        return manager.load()
    return config_manager.load()
