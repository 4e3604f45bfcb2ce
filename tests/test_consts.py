from pbi_refresh.consts import (
    API_BASE_URL,
    APP_NAME,
    BEARER_SCHEME,
    PACKAGE_VERSION,
    PASSWORD_GRANT,
    TOKEN_URL,
    USER_AGENT,
)


class TestPackageConstants:
    """Test package constants are properly defined"""

    def test_package_version_defined(self):
        """Test that package version is defined"""
        assert isinstance(PACKAGE_VERSION, str)
        assert "." in PACKAGE_VERSION  # Should be semantic version

    def test_user_agent_format(self):
        """Test that user agent follows expected format"""
        assert USER_AGENT == f"{APP_NAME}/{PACKAGE_VERSION}"

    def test_endpoint_constants(self):
        """Test that endpoint constants point at the expected services"""
        assert TOKEN_URL.startswith("https://")
        assert TOKEN_URL.endswith("/oauth2/token")
        assert API_BASE_URL.startswith("https://api.powerbi.com/")
        assert not API_BASE_URL.endswith("/")

    def test_protocol_constants(self):
        assert PASSWORD_GRANT == "password"
        assert BEARER_SCHEME == "Bearer"
