"""Resource API clients."""

from ibutsu_client.apis.artifact import ArtifactApi
from ibutsu_client.apis.dashboard import DashboardApi
from ibutsu_client.apis.group import GroupApi
from ibutsu_client.apis.health import HealthApi
from ibutsu_client.apis.imports import ImportApi
from ibutsu_client.apis.login import LoginApi
from ibutsu_client.apis.project import ProjectApi
from ibutsu_client.apis.result import ResultApi
from ibutsu_client.apis.run import RunApi
from ibutsu_client.apis.task import TaskApi
from ibutsu_client.apis.user import UserApi
from ibutsu_client.apis.widget import WidgetApi
from ibutsu_client.apis.widget_config import WidgetConfigApi

__all__ = [
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
]
