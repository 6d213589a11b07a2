from typing import Any, Mapping

from sqlalchemy.dialects import mysql

from utils.errors import BadRequestError

# aiomysql은 DB-API format paramstyle: i번째 %s가 i번째 값에 바인딩됨
PLACEHOLDER = "%s"

_preparer = mysql.dialect().identifier_preparer


def quote_column(column_name: str) -> str:
    """컬럼명을 항상 백틱으로 감싼다 (내부 백틱은 이중화)"""
    return _preparer.quote_identifier(column_name)


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
) -> tuple[str, list[Any]]:
    """
    부분 수정(PATCH)용 UPDATE SET 절 생성.

    Args:
        data_to_update: 수정할 필드와 값 {"numEmployees": 10, ...}
        js_to_sql: 필드 -> DB 컬럼 매핑 {"numEmployees": "num_employees"}
            매핑에 없는 필드는 필드명을 그대로 컬럼명으로 사용

    Returns:
        (set_cols, values) 튜플
        - set_cols: "`num_employees`=%s, `name`=%s"
        - values: [10, "New name"]  (placeholder 순서와 동일)

    Raises:
        BadRequestError: 수정할 데이터가 없을 때

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        ('`first_name`=%s, `age`=%s', ['Aliya', 32])
    """
    if not data_to_update:
        raise BadRequestError("No data")

    set_parts = []
    values = []

    # 한 번의 순회에서 컬럼과 값을 같이 쌓아야 순서가 어긋나지 않음
    for field_name, value in data_to_update.items():
        column_name = js_to_sql.get(field_name, field_name)
        set_parts.append(f"{quote_column(column_name)}={PLACEHOLDER}")
        values.append(value)

    return ", ".join(set_parts), values
