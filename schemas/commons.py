from typing import Annotated, Any, ClassVar

from pydantic import (
    AfterValidator, AnyHttpUrl, Field, BaseModel, ConfigDict, StringConstraints, TypeAdapter,
    ValidationError, model_validator,
)
from pydantic.alias_generators import to_camel

_http_url_adapter = TypeAdapter(AnyHttpUrl)


def validate_http_url(url: str) -> str:
    """URL 형식만 검사하고 보낸 문자열은 그대로 반환 (정규화된 값으로 바꾸지 않음)"""
    try:
        _http_url_adapter.validate_python(url)
    except ValidationError:
        raise ValueError("올바른 http(s) URL이 아닙니다.") from None
    return url


HttpUrlStr = Annotated[str, StringConstraints(max_length=500), AfterValidator(validate_http_url)]

CompanyHandle = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        to_lower=True,
        min_length=1,
        max_length=25,
        pattern=r"^[a-z0-9-]+$",
    ),
]

Name = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=255),
]

Count = Annotated[int, Field(ge=0)]


class CamelModel(BaseModel):
    """wire 상의 필드명은 camelCase (numEmployees, logoUrl, companyHandle)"""
    model_config = ConfigDict(alias_generator=to_camel)


class UpdateRequest(CamelModel):
    """PATCH 요청 공통 베이스"""
    model_config = ConfigDict(extra='forbid')

    # null로 설정할 수 없는 필드 (python 필드명)
    NON_NULLABLE: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode='after')
    def check_non_nullable_fields(self):
        """
        PATCH 요청에서 "미전송" vs "명시적 null 전송"을 구분하기 위해
        사용자가 실제로 보낸 필드 집합(model_fields_set)을 기준으로 검사
        """
        for field_name in self.model_fields_set & self.NON_NULLABLE:
            if getattr(self, field_name) is None:
                raise ValueError(f"{to_camel(field_name)}은(는) null로 설정할 수 없습니다.")
        return self

    def to_update_data(self) -> dict[str, Any]:
        """실제로 전송된 필드만 wire 필드명(alias) 기준으로 반환"""
        return self.model_dump(exclude_unset=True, by_alias=True)
