"""pbi-refresh Package

Command-line utility that acquires an Azure AD token with resource-owner-password
credentials and queues a Power BI dataset refresh.
"""

from .auth import acquire_token
from .config import Config, get_config
from .consts import PACKAGE_VERSION
from .exceptions import (
    AuthenticationError,
    ConfigError,
    NetworkError,
    PbiRefreshError,
    RefreshError,
    UpstreamError,
)
from .loader import load_credentials, load_dataset_target
from .models import AccessToken, Credentials, DatasetTarget, RefreshResult
from .refresh import request_refresh
from .workflow import run_refresh

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "get_config",
    "acquire_token",
    "request_refresh",
    "run_refresh",
    "load_credentials",
    "load_dataset_target",
    "Config",
    "Credentials",
    "DatasetTarget",
    "AccessToken",
    "RefreshResult",
    "PbiRefreshError",
    "ConfigError",
    "NetworkError",
    "UpstreamError",
    "AuthenticationError",
    "RefreshError",
]
