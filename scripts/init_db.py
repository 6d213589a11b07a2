"""테이블 생성 스크립트

사용법:
    python scripts/init_db.py          # 없는 테이블만 생성
    python scripts/init_db.py --reset  # 전체 삭제 후 재생성
"""
import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from db.base import Base
from db.models.company import Company  # noqa: F401  (metadata 등록)
from db.models.job import Job  # noqa: F401
from db.session import engine


async def init_db(reset: bool = False) -> None:
    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()

    print(f"✅ 테이블 생성 완료: {', '.join(Base.metadata.tables)}")


if __name__ == "__main__":
    asyncio.run(init_db(reset="--reset" in sys.argv[1:]))
