"""테스트 데이터 생성 스크립트

사용법:
    python scripts/init_db.py --reset
    python scripts/seed.py
"""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from db.models.company import Company
from db.models.job import Job
from db.session import AsyncSessionLocal, engine

TEST_COMPANIES = [
    {
        "handle": "watson-davis",
        "name": "Watson-Davis",
        "num_employees": 819,
        "description": "Year family here reality.",
        "logo_url": None,
    },
    {
        "handle": "hall-mills",
        "name": "Hall-Mills",
        "num_employees": 266,
        "description": "Change economy other wear.",
        "logo_url": "https://example.com/logos/hall-mills.png",
    },
    {
        "handle": "sellers-bryant",
        "name": "Sellers-Bryant",
        "num_employees": 369,
        "description": "Language ball ever.",
        "logo_url": None,
    },
]

TEST_JOBS = [
    {"title": "Conservator", "salary": 110000, "equity": Decimal("0"), "company_handle": "watson-davis"},
    {"title": "Information officer", "salary": 200000, "equity": Decimal("0"), "company_handle": "hall-mills"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": Decimal("0.05"),
     "company_handle": "sellers-bryant"},
]


async def seed() -> None:
    """모든 테스트 데이터 생성"""
    async with AsyncSessionLocal() as db:
        db.add_all(Company(**company) for company in TEST_COMPANIES)
        await db.flush()
        db.add_all(Job(**job) for job in TEST_JOBS)
        await db.commit()
    await engine.dispose()

    print("✅ 테스트 데이터 생성 완료!")
    print(f"   - companies: {len(TEST_COMPANIES)}")
    print(f"   - jobs: {len(TEST_JOBS)}")


if __name__ == "__main__":
    asyncio.run(seed())
