"""
API客户端模块

提供与外部REST API集成的客户端基类
"""
from .base import (
    BaseAPIClient,
    HTTPMethod,
    ResponseError,
    APIClientError,
    RequestNotBuiltError,
    is_response_error,
)
from .codec import JSONCodec
from .transport import HttpxTransport

__all__ = [
    "BaseAPIClient",
    "HTTPMethod",
    "ResponseError",
    "APIClientError",
    "RequestNotBuiltError",
    "is_response_error",
    "JSONCodec",
    "HttpxTransport",
]
