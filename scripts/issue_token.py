"""
Issue Access Token
지정한 역할(user/admin)을 가진 개발용 Access Token 발급

Usage:
    python scripts/issue_token.py --sub alice --role user
    python scripts/issue_token.py --sub admin --role user --role admin --minutes 120
"""

import argparse
import sys
from datetime import timedelta

from catalog.core.auth.jwt_manager import JWTManager
from catalog.core.auth.roles import Role, parse_roles


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Issue a catalog access token")
    parser.add_argument("--sub", required=True, help="호출자 식별자 (sub 클레임)")
    parser.add_argument(
        "--role",
        action="append",
        default=[],
        choices=[role.value for role in Role],
        help="부여할 역할 (여러 번 지정 가능)",
    )
    parser.add_argument(
        "--minutes", type=int, default=None, help="만료 시간(분), 기본값은 설정값"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    roles = sorted(role.value for role in parse_roles(args.role))
    expires = timedelta(minutes=args.minutes) if args.minutes else None
    token = JWTManager.create_role_token(args.sub, roles, expires_delta=expires)

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
