"""
Main Ibutsu API client.

``IbutsuClient`` is the entry point that ties a ``Configuration`` to one
shared HTTP executor and hands out the resource API clients.
"""

from typing import Any, Dict, Optional, Type, TypeVar
import logging

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
from ibutsu_client.base import BaseAPI
from ibutsu_client.configuration import Configuration
from ibutsu_client.exceptions import IbutsuClientError
from ibutsu_client.http import AsyncHTTPClient
from ibutsu_client.models import Credentials

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=BaseAPI)


class IbutsuClient:
    """
    Main client for the Ibutsu API.

    Example usage:
        ```python
        config = Configuration(base_path="https://ibutsu.example.com/api", access_token=token)
        async with IbutsuClient(config) as client:
            project = await client.projects.get_project("my-project")
            runs = await client.runs.get_run_list(
                filter=["metadata.project=my-project", "summary.failures>0"],
                page_size=10,
            )
        ```

    The configuration is fixed for the life of the client. To switch
    credentials build a new client, e.g. with ``with_token``.
    """

    def __init__(
        self,
        configuration: Optional[Configuration] = None,
        *,
        http_client: Optional[AsyncHTTPClient] = None,
        **options: Any,
    ):
        """
        Initialize the Ibutsu client.

        Args:
            configuration: Client configuration. When omitted, one is built
                from ``options`` (e.g. ``base_path=..., access_token=...``).
            http_client: Executor to share with other clients
            **options: Configuration values, used without ``configuration``
        """
        if configuration is not None and options:
            raise TypeError("Pass either a configuration or configuration options, not both")
        if http_client is not None:
            configuration = http_client.configuration
        elif configuration is None:
            configuration = Configuration(**options)

        self._configuration = configuration
        self._http = http_client or AsyncHTTPClient(configuration)
        self._endpoint_clients: Dict[str, BaseAPI] = {}

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def base_path(self) -> str:
        return self._configuration.base_path

    @property
    def is_authenticated(self) -> bool:
        return self._configuration.auth_provider.is_authenticated()

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying HTTP executor for custom requests."""
        return self._http

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def _get_endpoint_client(self, client_class: Type[A]) -> A:
        """Get or create an endpoint client instance."""
        class_name = client_class.__name__
        if class_name not in self._endpoint_clients:
            self._endpoint_clients[class_name] = client_class(http_client=self._http)
        return self._endpoint_clients[class_name]

    @property
    def artifacts(self) -> ArtifactApi:
        return self._get_endpoint_client(ArtifactApi)

    @property
    def dashboards(self) -> DashboardApi:
        return self._get_endpoint_client(DashboardApi)

    @property
    def groups(self) -> GroupApi:
        return self._get_endpoint_client(GroupApi)

    @property
    def health(self) -> HealthApi:
        return self._get_endpoint_client(HealthApi)

    @property
    def imports(self) -> ImportApi:
        return self._get_endpoint_client(ImportApi)

    @property
    def login_api(self) -> LoginApi:
        return self._get_endpoint_client(LoginApi)

    @property
    def projects(self) -> ProjectApi:
        return self._get_endpoint_client(ProjectApi)

    @property
    def results(self) -> ResultApi:
        return self._get_endpoint_client(ResultApi)

    @property
    def runs(self) -> RunApi:
        return self._get_endpoint_client(RunApi)

    @property
    def tasks(self) -> TaskApi:
        return self._get_endpoint_client(TaskApi)

    @property
    def users(self) -> UserApi:
        return self._get_endpoint_client(UserApi)

    @property
    def widgets(self) -> WidgetApi:
        return self._get_endpoint_client(WidgetApi)

    @property
    def widget_configs(self) -> WidgetConfigApi:
        return self._get_endpoint_client(WidgetConfigApi)

    # =========================================================================
    # Authentication
    # =========================================================================

    def with_token(self, access_token: Any) -> "IbutsuClient":
        """
        Create a new client that sends ``access_token`` (a string or a token
        function). This client is left unchanged.

        A caller-provided httpx client is shared with the new client and stays
        owned by the caller; otherwise the new client opens its own.
        """
        configuration = self._configuration.with_overrides(access_token=access_token)
        http = AsyncHTTPClient(configuration, client=self._http.borrowed_client)
        return IbutsuClient(http_client=http)

    async def login(self, email: str, password: str) -> "IbutsuClient":
        """
        Log in with email and password.

        Returns:
            A new client authenticated with the returned JWT

        Raises:
            AuthenticationError: If the credentials are rejected
            IbutsuClientError: If the server returned no token
        """
        token = await self.login_api.login(Credentials(email=email, password=password))
        if token is None or not token.token:
            raise IbutsuClientError("Login response did not contain a token")
        logger.info(f"Successfully logged in as {token.email or email}")
        return self.with_token(token.token)

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "IbutsuClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return f"IbutsuClient(base_path={self.base_path!r}, {auth_status})"
