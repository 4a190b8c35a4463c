"""
Configuration constants for the Typed Post Client.

This module centralizes all configurable parameters to make the client
easy to point at a different service or tune for a different environment.
"""

from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """Remote API configuration settings."""
    base_url: str = "https://jsonplaceholder.typicode.com"
    posts_endpoint: str = "/posts"
    users_endpoint: str = "/users"
    timeout_seconds: float = 10.0

    # Sent with every write request
    content_type: str = "application/json; charset=UTF-8"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "post_client.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
