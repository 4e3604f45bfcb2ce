"""High-value constants for the pbi-refresh package."""

# Package metadata
PACKAGE_VERSION = "0.3.0"
APP_NAME = "pbi-refresh"
USER_AGENT = f"{APP_NAME}/{PACKAGE_VERSION}"

# External API contract consts
TOKEN_URL = "https://login.windows.net/common/oauth2/token"
API_BASE_URL = "https://api.powerbi.com/v1.0/myorg"
POWERBI_RESOURCE = "https://analysis.windows.net/powerbi/api"
PASSWORD_GRANT = "password"
BEARER_SCHEME = "Bearer"

# Local files, resolved against the working directory
SECRETS_FILENAME = "secrets.toml"
DATASET_FILENAME = "dataset.json"

# Business logic consts
DEFAULT_TOKEN_EXPIRY_SECONDS = 3600
