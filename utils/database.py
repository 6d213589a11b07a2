# utils/database.py

import logging
from typing import AsyncGenerator

import aiomysql
from aiomysql import Cursor

from config import settings

pool: aiomysql.Pool | None = None

logger = logging.getLogger(__name__)


def get_pool() -> aiomysql.Pool:
    if pool is None:
        raise RuntimeError("Database pool is not initialized")
    return pool


async def get_cursor() -> AsyncGenerator[Cursor, None]:
    pool = get_pool()
    async with pool.acquire() as conn:
        async with conn.cursor() as cur:
            yield cur


async def init_db_pool() -> None:
    global pool
    pool = await aiomysql.create_pool(
        host=settings.db_host,
        port=settings.db_port,
        user=settings.db_user,
        password=settings.db_password,
        db=settings.db_name,
        charset='utf8mb4',
        autocommit=True,
        cursorclass=aiomysql.DictCursor,
        minsize=settings.db_pool_minsize,
        maxsize=settings.db_pool_maxsize,
    )
    logger.info("DB pool 생성: %s:%s/%s", settings.db_host, settings.db_port, settings.db_name)


async def close_db_pool() -> None:
    global pool
    if pool:
        pool.close()
        await pool.wait_closed()
        pool = None
        logger.info("DB pool 종료")
