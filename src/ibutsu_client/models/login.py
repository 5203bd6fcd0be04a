from typing import Optional

from ibutsu_client.models.base import WireModel


class Credentials(WireModel):
    email: str
    password: str


class LoginToken(WireModel):
    name: Optional[str] = None
    email: Optional[str] = None
    token: Optional[str] = None
    refresh_token: Optional[str] = None


class LoginError(WireModel):
    code: Optional[str] = None
    message: Optional[str] = None


class LoginSupport(WireModel):
    """Which login mechanisms the server has enabled."""
    user: Optional[bool] = None
    keycloak: Optional[bool] = None
    google: Optional[bool] = None
    github: Optional[bool] = None
    facebook: Optional[bool] = None
    gitlab: Optional[bool] = None


class LoginConfig(WireModel):
    client_id: Optional[str] = None
    redirect_uri: Optional[str] = None
    scope: Optional[str] = None
    authorization_url: Optional[str] = None
    realm: Optional[str] = None
    server_url: Optional[str] = None


class AccountRegistration(WireModel):
    email: str
    password: str


class AccountRecovery(WireModel):
    email: str


class AccountReset(WireModel):
    activation_code: str
    password: str
