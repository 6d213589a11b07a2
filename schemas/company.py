from decimal import Decimal
from typing import ClassVar

from pydantic import ConfigDict, Field

from schemas.commons import CamelModel, CompanyHandle, Count, HttpUrlStr, Name, UpdateRequest


class CompanyBase(CamelModel):
    """회사 생성/조회에서 공통으로 쓰는 필드"""
    handle: CompanyHandle
    name: Name
    description: str
    num_employees: Count | None = None
    logo_url: str | None = None


class CompanyCreateRequest(CompanyBase):
    model_config = ConfigDict(extra='forbid')

    logo_url: HttpUrlStr | None = None


class CompanyUpdateRequest(UpdateRequest):
    NON_NULLABLE: ClassVar[frozenset[str]] = frozenset(["name", "description"])

    name: Name | None = None
    description: str | None = None
    num_employees: Count | None = None
    logo_url: HttpUrlStr | None = None


class CompanyJob(CamelModel):
    """회사 상세에 포함되는 채용공고 요약"""
    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None


class CompanyDetail(CompanyBase):
    jobs: list[CompanyJob] = Field(default_factory=list)


class CompanyResponse(CamelModel):
    company: CompanyBase


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[CompanyBase]


class CompanyDeleteResponse(CamelModel):
    deleted: str
