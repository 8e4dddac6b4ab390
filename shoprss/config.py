"""
Configuration management for the shop RSS feed.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""
    
    shop_api_url: str = Field(default="https://fortnite-api.com/v2/shop")
    user_agent: str = Field(default="FortniteShopRSS/1.0")
    request_timeout: float = Field(default=30.0)
    
    # Channel metadata
    feed_title: str = Field(default="Fortnite Item Shop")
    feed_link: str = Field(default="https://fortnite-api.com")
    feed_description_prefix: str = Field(default="Fortnite Battle Royale Item Shop")
    feed_language: str = Field(default="en-us")
    default_vbuck_icon: str = Field(default="https://fortnite-api.com/images/vbuck.png")
    image_width: int = Field(default=256)
    
    # Server
    host: str = Field(default="0.0.0.0")
    log_level: str = Field(default="INFO")
    
    class Config:
        env_prefix = "SHOP_RSS_"
        env_file = ".env"
        case_sensitive = False


_settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return _settings
