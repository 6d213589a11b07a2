"""개발용 access token 발급 스크립트

사용법:
    python scripts/issue_token.py <username> [--admin]
"""
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.auth import create_access_token


def main(argv: list[str]) -> None:
    args = [arg for arg in argv if not arg.startswith("--")]
    if not args:
        print(__doc__)
        sys.exit(1)

    token = create_access_token(data={"sub": args[0], "is_admin": "--admin" in argv})
    print(token)


if __name__ == "__main__":
    main(sys.argv[1:])
