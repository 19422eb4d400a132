"""
Configuration settings for slackkit
"""

import logging
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings with environment variable support"""

    # Slack API
    slack_api_url: str = "https://slack.com/api"
    request_timeout: float = 30.0

    # Tokens (Optional - can be passed to clients directly)
    slack_bot_token: Optional[str] = None
    slack_app_token: Optional[str] = None

    # Bot
    typing_interval: float = 3.0  # seconds between typing indicators

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Create a singleton instance
settings = Settings()


def configure_logging(level: Optional[str] = None):
    """Configure root logging using the configured log level"""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
