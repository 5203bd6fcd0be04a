"""Models exchanged with the Ibutsu API."""

from ibutsu_client.models.base import (
    PaginatedList,
    Pagination,
    WireModel,
    to_json,
)
from ibutsu_client.models.artifact import Artifact, ArtifactList
from ibutsu_client.models.dashboard import Dashboard, DashboardList
from ibutsu_client.models.group import Group, GroupList
from ibutsu_client.models.health import Health, HealthInfo
from ibutsu_client.models.imports import Import
from ibutsu_client.models.login import (
    AccountRecovery,
    AccountRegistration,
    AccountReset,
    Credentials,
    LoginConfig,
    LoginError,
    LoginSupport,
    LoginToken,
)
from ibutsu_client.models.project import Project, ProjectList
from ibutsu_client.models.result import Result, ResultList, ResultStatus
from ibutsu_client.models.run import Run, RunList, UpdateRun
from ibutsu_client.models.user import CreateToken, Token, TokenList, User
from ibutsu_client.models.widget import (
    WidgetConfig,
    WidgetConfigList,
    WidgetParam,
    WidgetType,
    WidgetTypeList,
)

__all__ = [
    "WireModel",
    "PaginatedList",
    "Pagination",
    "to_json",
    "AccountRecovery",
    "AccountRegistration",
    "AccountReset",
    "Artifact",
    "ArtifactList",
    "CreateToken",
    "Credentials",
    "Dashboard",
    "DashboardList",
    "Group",
    "GroupList",
    "Health",
    "HealthInfo",
    "Import",
    "LoginConfig",
    "LoginError",
    "LoginSupport",
    "LoginToken",
    "Project",
    "ProjectList",
    "Result",
    "ResultList",
    "ResultStatus",
    "Run",
    "RunList",
    "Token",
    "TokenList",
    "UpdateRun",
    "User",
    "WidgetConfig",
    "WidgetConfigList",
    "WidgetParam",
    "WidgetType",
    "WidgetTypeList",
]
