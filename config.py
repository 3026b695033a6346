"""Configuration management for Rolka.

Reads configuration from ~/.config/rolka.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w

DEFAULT_BASE_URL = "https://rol.raiffeisenbank.rs"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:132.0) Gecko/20100101 Firefox/132.0"
)
DEFAULT_TIMEOUT = 30.0


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    base_url: str
    user_agent: str
    timeout: float
    username: str
    log_level: str
    log_dir: Path
    output_dir: Path

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "rolka"
        return cls(
            base_dir=base_dir,
            base_url=DEFAULT_BASE_URL,
            user_agent=DEFAULT_USER_AGENT,
            timeout=DEFAULT_TIMEOUT,
            username="",
            log_level="INFO",
            log_dir=base_dir / "logs",
            output_dir=base_dir / "exports",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "rolka.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return config_from_dict(data)


def config_from_dict(data: dict) -> Config:
    """Build a Config from parsed TOML, using defaults for missing values."""
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "rolka"))

    portal_config = data.get("portal", {})
    base_url = portal_config.get("base_url", DEFAULT_BASE_URL).rstrip("/")
    user_agent = portal_config.get("user_agent", DEFAULT_USER_AGENT)
    timeout = float(portal_config.get("timeout", DEFAULT_TIMEOUT))
    username = portal_config.get("username", "")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    export_config = data.get("export", {})
    output_dir = Path(export_config.get("output_dir", base_dir / "exports"))

    return Config(
        base_dir=base_dir,
        base_url=base_url,
        user_agent=user_agent,
        timeout=timeout,
        username=username,
        log_level=log_level,
        log_dir=log_dir,
        output_dir=output_dir,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # The password is never written; it comes from ROLKA_PASSWORD or a prompt
    data = {
        "base_dir": str(config.base_dir),
        "portal": {
            "base_url": config.base_url,
            "user_agent": config.user_agent,
            "timeout": config.timeout,
            "username": config.username,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "export": {
            "output_dir": str(config.output_dir),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
