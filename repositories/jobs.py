"""채용공고(jobs) 테이블 데이터 접근 함수"""
import logging
from typing import Any, Mapping

from aiomysql import Cursor, IntegrityError

from utils.errors import BadRequestError, NotFoundError
from utils.query import sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMN_MAP = {
    "companyHandle": "company_handle",
}

JOB_COLUMNS = """
    id,
    title,
    salary,
    equity,
    company_handle AS companyHandle
"""


async def create_job(cur: Cursor, data: Mapping[str, Any]) -> dict:
    """
    채용공고 생성 (id는 DB에서 발급)

    data: {title, salary, equity, company_handle}
    존재하지 않는 회사면 BadRequestError
    """
    company_handle = data["company_handle"]
    try:
        await cur.execute(
            """
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES (%(title)s, %(salary)s, %(equity)s, %(company_handle)s)
            """,
            {
                "title": data["title"],
                "salary": data.get("salary"),
                "equity": data.get("equity"),
                "company_handle": company_handle,
            }
        )
    except IntegrityError:
        # FK 위반
        raise BadRequestError(f"No company: {company_handle}")

    job_id = cur.lastrowid
    logger.info("Job created: %s (%s)", job_id, company_handle)

    return await get_job(cur, job_id)


async def find_all_jobs(cur: Cursor) -> list[dict]:
    """채용공고 전체 목록 (제목순)"""
    await cur.execute(f"SELECT {JOB_COLUMNS} FROM jobs ORDER BY title, id")
    return list(await cur.fetchall())


async def get_job(cur: Cursor, job_id: int) -> dict:
    await cur.execute(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = %s", (job_id,))
    job = await cur.fetchone()

    if job is None:
        raise NotFoundError(f"No job: {job_id}")
    return job


async def update_job(cur: Cursor, job_id: int, data: Mapping[str, Any]) -> dict:
    """
    채용공고 부분 수정

    data: {title, salary, equity, companyHandle} 중 일부
    """
    set_cols, values = sql_for_partial_update(data, JOB_COLUMN_MAP)

    try:
        await cur.execute(
            "UPDATE jobs SET " + set_cols + " WHERE id = %s",
            (*values, job_id)
        )
    except IntegrityError:
        raise BadRequestError(f"No company: {data.get('companyHandle')}")

    return await get_job(cur, job_id)


async def remove_job(cur: Cursor, job_id: int) -> None:
    await cur.execute("DELETE FROM jobs WHERE id = %s", (job_id,))

    if cur.rowcount == 0:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("Job deleted: %s", job_id)
