"""Simple tests (verify pytest working)"""

from unittest import TestCase


class TestPackage(TestCase):

    def test_imports(self):
        """Test that all main imports work"""
        try:
            from pbi_refresh import (  # noqa: F401
                AuthenticationError,
                Config,
                Credentials,
                DatasetTarget,
                RefreshResult,
                acquire_token,
                request_refresh,
                run_refresh,
            )
        except ImportError as e:
            self.fail(e)

    def test_version(self):
        import pbi_refresh
        from pbi_refresh.consts import PACKAGE_VERSION

        self.assertEqual(pbi_refresh.__version__, PACKAGE_VERSION)
