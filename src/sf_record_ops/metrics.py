"""
Parsing of the API usage header Salesforce attaches to REST responses
"""

import re
from typing import NamedTuple

_API_USAGE = re.compile(r"(?:^|[;\s])api-usage=(?P<used>\d+)/(?P<total>\d+)")
_PER_APP_USAGE = re.compile(
    r"per-app-api-usage=(?P<used>\d+)/(?P<total>\d+)\(appName=(?P<name>[^)]+)\)"
)


class Usage(NamedTuple):
    used: int
    total: int

    @property
    def remaining(self) -> int:
        return self.total - self.used


class PerAppUsage(NamedTuple):
    used: int
    total: int
    name: str


class ApiUsage(NamedTuple):
    api_usage: Usage | None = None
    per_app_api_usage: PerAppUsage | None = None


def parse_api_usage(sforce_limit_info: str) -> ApiUsage:
    """
    Parse API usage and limits out of the Sforce-Limit-Info header

    Arguments:
    * sforce_limit_info: The value of response header 'Sforce-Limit-Info'
        Example 1: 'api-usage=18/5000'
        Example 2: 'api-usage=25/5000;
            per-app-api-usage=17/250(appName=sample-connected-app)'
    """
    usage = None
    per_app = None
    if match := _API_USAGE.search(sforce_limit_info):
        usage = Usage(int(match["used"]), int(match["total"]))
    if match := _PER_APP_USAGE.search(sforce_limit_info):
        per_app = PerAppUsage(int(match["used"]), int(match["total"]), match["name"])
    return ApiUsage(usage, per_app)
