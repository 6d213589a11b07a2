from decimal import Decimal
from typing import Annotated, ClassVar

from pydantic import ConfigDict, Field

from schemas.commons import CamelModel, CompanyHandle, Count, Name, UpdateRequest

Equity = Annotated[Decimal, Field(ge=0, le=1, max_digits=4, decimal_places=3)]


class JobBase(CamelModel):
    title: Name
    salary: Count | None = None
    equity: Equity | None = None
    company_handle: CompanyHandle


class JobCreateRequest(JobBase):
    model_config = ConfigDict(extra='forbid')


class JobUpdateRequest(UpdateRequest):
    NON_NULLABLE: ClassVar[frozenset[str]] = frozenset(["title", "company_handle"])

    title: Name | None = None
    salary: Count | None = None
    equity: Equity | None = None
    company_handle: CompanyHandle | None = None


class JobDetail(JobBase):
    id: int


class JobResponse(CamelModel):
    job: JobDetail


class JobListResponse(CamelModel):
    jobs: list[JobDetail]


class JobDeleteResponse(CamelModel):
    deleted: int
