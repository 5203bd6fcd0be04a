"""Client for the /user endpoints (the current user and their API tokens)."""

from typing import Any, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import CreateToken, Token, TokenList, User
from ibutsu_client.request import json_body
from ibutsu_client.response import JSONApiResponse, VoidApiResponse


class UserApi(BaseAPI):

    async def get_current_user_raw(self, **options: Any) -> JSONApiResponse[User]:
        return await self._json("GET", "/user", User.from_json, operation="get_current_user", **options)

    async def get_current_user(self, **options: Any) -> User:
        response = await self.get_current_user_raw(**options)
        return response.value()

    async def update_current_user_raw(self, user: Optional[User] = None, **options: Any) -> JSONApiResponse[User]:
        return await self._json(
            "PUT",
            "/user",
            User.from_json,
            operation="update_current_user",
            body=json_body(user) if user is not None else None,
            **options,
        )

    async def update_current_user(self, user: Optional[User] = None, **options: Any) -> User:
        response = await self.update_current_user_raw(user, **options)
        return response.value()

    async def add_token_raw(self, create_token: CreateToken, **options: Any) -> JSONApiResponse[Token]:
        self._require("add_token", create_token=create_token)
        return await self._json(
            "POST",
            "/user/token",
            Token.from_json,
            operation="add_token",
            body=json_body(create_token),
            **options,
        )

    async def add_token(self, create_token: CreateToken, **options: Any) -> Token:
        """Create an API token for the current user."""
        response = await self.add_token_raw(create_token, **options)
        return response.value()

    async def get_token_raw(self, id: str, **options: Any) -> JSONApiResponse[Token]:
        return await self._json(
            "GET",
            "/user/token/{id}",
            Token.from_json,
            operation="get_token",
            path_params={"id": id},
            **options,
        )

    async def get_token(self, id: str, **options: Any) -> Token:
        response = await self.get_token_raw(id, **options)
        return response.value()

    async def get_token_list_raw(
        self,
        *,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        **options: Any,
    ) -> JSONApiResponse[TokenList]:
        return await self._json(
            "GET",
            "/user/token",
            TokenList.from_json,
            operation="get_token_list",
            query={"page": page, "pageSize": page_size},
            **options,
        )

    async def get_token_list(self, **kwargs: Any) -> TokenList:
        response = await self.get_token_list_raw(**kwargs)
        return response.value()

    async def delete_token_raw(self, id: str, **options: Any) -> VoidApiResponse:
        return await self._void(
            "DELETE",
            "/user/token/{id}",
            operation="delete_token",
            path_params={"id": id},
            **options,
        )

    async def delete_token(self, id: str, **options: Any) -> None:
        response = await self.delete_token_raw(id, **options)
        return response.value()
