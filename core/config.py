"""
配置文件 - 项目配置管理
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field, field_validator


class APIClientSettings(BaseModel):
    """Defaults shared by every API client built on BaseAPIClient."""

    timeout: float = 30.0
    verify_ssl: bool = True
    follow_redirects: bool = True
    user_agent: str = "api-client-base/1.0"
    # Return error-shaped bodies as-is instead of ResponseError
    debug_mode: bool = False
    # Log every request/response even outside debug mode
    log_requests: bool = False

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("api_client.timeout must be positive")
        return v


class Settings(BaseSettings):
    """项目配置"""

    # 基础配置
    PROJECT_NAME: str = Field(default="API Client Base")
    VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)

    api_client: APIClientSettings = Field(default_factory=APIClientSettings)

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )


settings = Settings()
