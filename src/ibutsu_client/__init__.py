"""
Ibutsu Client Library.

An async HTTP client for the Ibutsu test results API.

Example usage:
    ```python
    from ibutsu_client import Configuration, IbutsuClient
    from ibutsu_client.models import Run

    config = Configuration(base_path="https://ibutsu.example.com/api", access_token="my-token")
    async with IbutsuClient(config) as client:
        # Get a single resource
        project = await client.projects.get_project("my-project")

        # List resources, filtered and paged
        runs = await client.runs.get_run_list(filter=["env=ci"], page=1, page_size=25)

        # Create a resource
        run = await client.runs.add_run(Run(component="frontend", env="ci"))
    ```

Configuration can also be read from ``IBUTSU_API`` and ``IBUTSU_TOKEN`` with
``Configuration.from_env()``.
"""

__version__ = "0.1.0"

# Main client
from ibutsu_client.client import IbutsuClient

# Configuration
from ibutsu_client.configuration import Configuration, DEFAULT_BASE_PATH

# Authentication and middleware (for advanced usage)
from ibutsu_client.auth import (
    AuthProvider,
    CallableTokenProvider,
    NoAuthProvider,
    StaticTokenProvider,
)
from ibutsu_client.middleware import Middleware

# Request execution
from ibutsu_client.http import AsyncHTTPClient
from ibutsu_client.base import BaseAPI
from ibutsu_client.request import RequestContext
from ibutsu_client.response import (
    ApiResponse,
    BlobApiResponse,
    JSONApiResponse,
    TextApiResponse,
    VoidApiResponse,
)

# Resource APIs
from ibutsu_client.apis import (
    ArtifactApi,
    DashboardApi,
    GroupApi,
    HealthApi,
    ImportApi,
    LoginApi,
    ProjectApi,
    ResultApi,
    RunApi,
    TaskApi,
    UserApi,
    WidgetApi,
    WidgetConfigApi,
)

# Exceptions
from ibutsu_client.exceptions import (
    # Base exception
    IbutsuClientError,
    # Request validation
    ValidationError,
    MissingParameterError,
    # HTTP status errors
    ResponseError,
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    PayloadTooLargeError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    # Network errors
    TransportError,
    RequestTimeoutError,
    ConnectionFailedError,
    RequestCancelledError,
    # Body decoding
    DecodeError,
    # Utility
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "IbutsuClient",
    # Configuration
    "Configuration",
    "DEFAULT_BASE_PATH",
    # Auth and middleware
    "AuthProvider",
    "CallableTokenProvider",
    "NoAuthProvider",
    "StaticTokenProvider",
    "Middleware",
    # Request execution
    "AsyncHTTPClient",
    "BaseAPI",
    "RequestContext",
    "ApiResponse",
    "BlobApiResponse",
    "JSONApiResponse",
    "TextApiResponse",
    "VoidApiResponse",
    # Resource APIs
    "ArtifactApi",
    "DashboardApi",
    "GroupApi",
    "HealthApi",
    "ImportApi",
    "LoginApi",
    "ProjectApi",
    "ResultApi",
    "RunApi",
    "TaskApi",
    "UserApi",
    "WidgetApi",
    "WidgetConfigApi",
    # Exceptions
    "IbutsuClientError",
    "ValidationError",
    "MissingParameterError",
    "ResponseError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "PayloadTooLargeError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "TransportError",
    "RequestTimeoutError",
    "ConnectionFailedError",
    "RequestCancelledError",
    "DecodeError",
    "exception_from_response",
]
