"""회사(companies) 테이블 데이터 접근 함수"""
import logging
from typing import Any, Mapping

from aiomysql import Cursor, IntegrityError

from utils.errors import BadRequestError, NotFoundError
from utils.query import sql_for_partial_update

logger = logging.getLogger(__name__)

# wire 필드명 -> DB 컬럼 매핑 (나머지는 동일)
COMPANY_COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_COLUMNS = """
    handle,
    name,
    description,
    num_employees AS numEmployees,
    logo_url AS logoUrl
"""


async def create_company(cur: Cursor, data: Mapping[str, Any]) -> dict:
    """
    회사 생성

    data: {handle, name, description, num_employees, logo_url}
    이미 존재하는 handle이면 BadRequestError
    """
    handle = data["handle"]
    await cur.execute("SELECT handle FROM companies WHERE handle = %s", (handle,))
    if await cur.fetchone():
        raise BadRequestError(f"Duplicate company: {handle}")

    # name은 UNIQUE라 동시 요청/중복 이름은 IntegrityError
    try:
        await cur.execute(
            """
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES (%(handle)s, %(name)s, %(description)s, %(num_employees)s, %(logo_url)s)
            """,
            {
                "handle": handle,
                "name": data["name"],
                "description": data["description"],
                "num_employees": data.get("num_employees"),
                "logo_url": data.get("logo_url"),
            }
        )
    except IntegrityError:
        raise BadRequestError(f"Duplicate company: {handle}")
    logger.info("Company created: %s", handle)

    return await _fetch_company(cur, handle)


async def find_all_companies(cur: Cursor) -> list[dict]:
    """회사 전체 목록 (이름순)"""
    await cur.execute(f"SELECT {COMPANY_COLUMNS} FROM companies ORDER BY name")
    return list(await cur.fetchall())


async def get_company(cur: Cursor, handle: str) -> dict:
    """회사 상세 조회 (소속 채용공고 포함)"""
    company = await _fetch_company(cur, handle)

    await cur.execute(
        """
        SELECT id, title, salary, equity
        FROM jobs
        WHERE company_handle = %s
        ORDER BY id
        """,
        (handle,)
    )
    company["jobs"] = list(await cur.fetchall())
    return company


async def update_company(cur: Cursor, handle: str, data: Mapping[str, Any]) -> dict:
    """
    회사 부분 수정 (보낸 필드만 변경)

    data: {name, description, numEmployees, logoUrl} 중 일부
    수정할 데이터가 없으면 BadRequestError, 회사가 없으면 NotFoundError
    """
    set_cols, values = sql_for_partial_update(data, COMPANY_COLUMN_MAP)

    try:
        await cur.execute(
            "UPDATE companies SET " + set_cols + " WHERE handle = %s",
            (*values, handle)
        )
    except IntegrityError:
        raise BadRequestError(f"Duplicate company name: {data.get('name')}")

    # MySQL은 값이 같으면 rowcount가 0이므로 다시 조회해서 존재 여부 판단
    return await _fetch_company(cur, handle)


async def remove_company(cur: Cursor, handle: str) -> None:
    """회사 삭제 (채용공고는 FK cascade)"""
    await cur.execute("DELETE FROM companies WHERE handle = %s", (handle,))

    if cur.rowcount == 0:
        raise NotFoundError(f"No company: {handle}")
    logger.info("Company deleted: %s", handle)


async def _fetch_company(cur: Cursor, handle: str) -> dict:
    await cur.execute(
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = %s",
        (handle,)
    )
    company = await cur.fetchone()

    if company is None:
        raise NotFoundError(f"No company: {handle}")
    return company
