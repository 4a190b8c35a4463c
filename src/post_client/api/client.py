"""
API Client Module

Async HTTP client for the posts and users resources of a JSONPlaceholder
style API. Every operation returns a Result; network, status, JSON and
schema failures come back as typed errors instead of being raised.
"""

import logging
from typing import Any, Optional

import httpx

from ..config import config
from ..result import Failure, Result, Success
from .errors import (
    CreatePostError,
    FetchError,
    JsonError,
    NetworkError,
    ParseError,
    StatusError,
    UserDoesNotExistError,
    ValidationError,
)
from .schemas import (
    NullableUserDTO,
    PydanticValidator,
    Post,
    PostDTO,
    SchemaValidator,
    UserDTO,
)


logger = logging.getLogger(__name__)


class APIClient:
    """
    HTTP client for the posts API.

    Features:
    - One short-lived ``httpx.AsyncClient`` per request
    - Schema validation of every response body
    - Transport failures reported as ``NetworkError`` results
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        validator: Optional[SchemaValidator] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Service root (uses config default if None).
            timeout: Request timeout in seconds (uses config default if None).
            validator: Schema validator (pydantic-backed if None).
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        """
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.api.timeout_seconds
        self.validator = validator or PydanticValidator()
        self._transport = transport
        logger.info(f"APIClient initialized (base_url: {self.base_url})")

    async def fetch_post(self, user_id: int) -> Result[PostDTO, FetchError]:
        """
        Fetch a post.

        The request goes to ``/posts/{user_id}``, which the service treats
        as a post id rather than an author filter.

        Args:
            user_id: Id placed in the request path.

        Returns:
            Success with the PostDTO, or Failure with a FetchError.
        """
        url = f"{self.base_url}{config.api.posts_endpoint}/{user_id}"
        logger.info(f"Fetching post from {url}")

        sent = await self._send("GET", url)
        if not sent.is_ok:
            return sent

        return self._read(
            sent.value,
            PostDTO,
            status_message="Failed to fetch Posts",
            json_message="Failed to parse Posts JSON",
            parse_message="Failed to validate Posts JSON",
        )

    async def fetch_user_by_id(
        self,
        user_id: int
    ) -> Result[Optional[UserDTO], FetchError]:
        """
        Look up a user.

        Args:
            user_id: The user id.

        Returns:
            Success with the UserDTO, Success(None) if the service has no
            such user, or Failure with a FetchError.
        """
        url = f"{self.base_url}{config.api.users_endpoint}/{user_id}"
        logger.info(f"Fetching user from {url}")

        sent = await self._send("GET", url)
        if not sent.is_ok:
            return sent

        return self._read(
            sent.value,
            NullableUserDTO,
            status_message="Failed to fetch User",
            json_message="Failed to parse User JSON",
            parse_message="Failed to validate User JSON",
        )

    async def create_post(self, post: Any) -> Result[None, CreatePostError]:
        """
        Validate and create a post.

        Steps run strictly in order and stop at the first failure:
        input validation, author lookup, POST, response validation.

        Args:
            post: A Post, or a mapping with ``userId``, ``title`` and ``body``.

        Returns:
            Success(None) once the service acknowledges the post, or
            Failure with a CreatePostError.
        """
        validation = self.validator.validate(post, Post)
        if not validation.success:
            logger.warning("Post input failed validation")
            return Failure(ValidationError(
                "Failed to validate Post input",
                cause=validation.diagnostics
            ))

        new_post: Post = validation.data

        user = await self.fetch_user_by_id(new_post.user_id)
        if not user.is_ok:
            # FetchError is a subset of CreatePostError, pass it through as is
            return user

        if user.value is None:
            logger.warning(f"User {new_post.user_id} does not exist")
            return Failure(UserDoesNotExistError(new_post.user_id))

        url = f"{self.base_url}{config.api.posts_endpoint}"
        logger.info(f"Creating post at {url} for user {new_post.user_id}")

        sent = await self._send(
            "POST",
            url,
            content=new_post.model_dump_json(by_alias=True),
            headers={"Content-Type": config.api.content_type},
        )
        if not sent.is_ok:
            return sent

        created = self._read(
            sent.value,
            PostDTO,
            status_message="Failed to create Post",
            json_message="Failed to parse Post JSON",
            parse_message="Failed to validate Post response schema",
        )
        if not created.is_ok:
            return created

        logger.info(f"Post created (id: {created.value.id})")
        return Success(None)

    async def _send(
        self,
        method: str,
        url: str,
        **kwargs: Any
    ) -> Result[httpx.Response, NetworkError]:
        """
        Issue a single request.

        Args:
            method: HTTP method.
            url: Absolute URL.
            **kwargs: Passed through to ``httpx.AsyncClient.request``.

        Returns:
            Success with the response (any status), or Failure(NetworkError).
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport
            ) as client:
                response = await client.request(method, url, **kwargs)

        except httpx.TimeoutException as e:
            logger.warning(f"Timeout on {method} {url}: {e}")
            return Failure(NetworkError(f"{method} {url} timed out", cause=e))

        except httpx.RequestError as e:
            logger.warning(f"Network error on {method} {url}: {e}")
            return Failure(NetworkError(f"{method} {url} failed", cause=e))

        logger.debug(f"{method} {url} -> {response.status_code}")
        return Success(response)

    def _read(
        self,
        response: httpx.Response,
        schema: Any,
        status_message: str,
        json_message: str,
        parse_message: str
    ) -> Result[Any, FetchError]:
        """Classify a response: status first, then JSON, then schema."""
        if not response.is_success:
            logger.warning(f"{status_message} (HTTP {response.status_code})")
            return Failure(StatusError(
                status_message,
                status_code=response.status_code
            ))

        try:
            data = response.json()
        except (ValueError, RecursionError) as e:
            logger.warning(f"{json_message}: {e}")
            return Failure(JsonError(json_message, cause=e))

        validation = self.validator.validate(data, schema)
        if not validation.success:
            logger.warning(parse_message)
            return Failure(ParseError(parse_message, cause=validation.diagnostics))

        return Success(validation.data)
