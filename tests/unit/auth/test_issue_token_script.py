"""
Issue Token Script Tests
개발용 토큰 발급 CLI 테스트
"""

import pytest

from catalog.core.auth.jwt_manager import JWTManager
from scripts.issue_token import main


class TestIssueToken:
    """issue_token CLI 테스트"""

    def test_prints_role_token(self, capsys):
        exit_code = main(["--sub", "curator", "--role", "admin", "--role", "user"])

        token = capsys.readouterr().out.strip()
        payload = JWTManager.verify_token(token)

        assert exit_code == 0
        assert payload["sub"] == "curator"
        assert payload["roles"] == ["admin", "user"]

    def test_without_roles(self, capsys):
        main(["--sub", "nobody"])

        payload = JWTManager.verify_token(capsys.readouterr().out.strip())

        assert payload["roles"] == []

    def test_unknown_role_rejected(self):
        with pytest.raises(SystemExit):
            main(["--sub", "x", "--role", "editor"])
