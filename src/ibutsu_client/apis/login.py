"""Client for the /login endpoints."""

from typing import Any

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import (
    AccountRecovery,
    AccountRegistration,
    AccountReset,
    Credentials,
    LoginConfig,
    LoginSupport,
    LoginToken,
)
from ibutsu_client.request import json_body
from ibutsu_client.response import JSONApiResponse, VoidApiResponse


class LoginApi(BaseAPI):
    """Login, registration and account recovery. These calls need no token."""

    async def login_raw(self, credentials: Credentials, **options: Any) -> JSONApiResponse[LoginToken]:
        self._require("login", credentials=credentials)
        return await self._json(
            "POST",
            "/login",
            LoginToken.from_json,
            operation="login",
            body=json_body(credentials),
            **options,
        )

    async def login(self, credentials: Credentials, **options: Any) -> LoginToken:
        """Log in with email and password and get a JWT."""
        response = await self.login_raw(credentials, **options)
        return response.value()

    async def support_raw(self, **options: Any) -> JSONApiResponse[LoginSupport]:
        return await self._json(
            "GET", "/login/support", LoginSupport.from_json, operation="support", **options
        )

    async def support(self, **options: Any) -> LoginSupport:
        """Get the login mechanisms the server supports."""
        response = await self.support_raw(**options)
        return response.value()

    async def config_raw(self, provider: str, **options: Any) -> JSONApiResponse[LoginConfig]:
        return await self._json(
            "GET",
            "/login/config/{provider}",
            LoginConfig.from_json,
            operation="config",
            path_params={"provider": provider},
            **options,
        )

    async def config(self, provider: str, **options: Any) -> LoginConfig:
        """Get the client configuration of an OAuth/OIDC login provider."""
        response = await self.config_raw(provider, **options)
        return response.value()

    async def auth_raw(self, provider: str, **options: Any) -> VoidApiResponse:
        return await self._void(
            "GET",
            "/login/auth/{provider}",
            operation="auth",
            path_params={"provider": provider},
            **options,
        )

    async def auth(self, provider: str, **options: Any) -> None:
        response = await self.auth_raw(provider, **options)
        return response.value()

    async def activate_raw(self, activation_code: str, **options: Any) -> VoidApiResponse:
        return await self._void(
            "GET",
            "/login/activate/{activation_code}",
            operation="activate",
            path_params={"activation_code": activation_code},
            **options,
        )

    async def activate(self, activation_code: str, **options: Any) -> None:
        response = await self.activate_raw(activation_code, **options)
        return response.value()

    async def register_raw(self, account_registration: AccountRegistration, **options: Any) -> VoidApiResponse:
        self._require("register", account_registration=account_registration)
        return await self._void(
            "POST",
            "/login/register",
            operation="register",
            body=json_body(account_registration),
            **options,
        )

    async def register(self, account_registration: AccountRegistration, **options: Any) -> None:
        response = await self.register_raw(account_registration, **options)
        return response.value()

    async def recover_raw(self, account_recovery: AccountRecovery, **options: Any) -> VoidApiResponse:
        self._require("recover", account_recovery=account_recovery)
        return await self._void(
            "POST",
            "/login/recover",
            operation="recover",
            body=json_body(account_recovery),
            **options,
        )

    async def recover(self, account_recovery: AccountRecovery, **options: Any) -> None:
        response = await self.recover_raw(account_recovery, **options)
        return response.value()

    async def reset_password_raw(self, account_reset: AccountReset, **options: Any) -> VoidApiResponse:
        self._require("reset_password", account_reset=account_reset)
        return await self._void(
            "POST",
            "/login/reset-password",
            operation="reset_password",
            body=json_body(account_reset),
            **options,
        )

    async def reset_password(self, account_reset: AccountReset, **options: Any) -> None:
        response = await self.reset_password_raw(account_reset, **options)
        return response.value()
