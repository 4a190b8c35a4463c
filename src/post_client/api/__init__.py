"""
API Client Module

Provides a Result-returning HTTP client for the posts and users API.
"""

from .client import APIClient
from .errors import (
    APIError,
    CreatePostError,
    FetchError,
    JsonError,
    NetworkError,
    ParseError,
    StatusError,
    UserDoesNotExistError,
    ValidationError,
)
from .schemas import Post, PostDTO, UserDTO

__all__ = [
    "APIClient",
    "APIError",
    "CreatePostError",
    "FetchError",
    "JsonError",
    "NetworkError",
    "ParseError",
    "StatusError",
    "UserDoesNotExistError",
    "ValidationError",
    "Post",
    "PostDTO",
    "UserDTO",
]
