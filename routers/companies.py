from typing import Annotated, Any

from aiomysql import Cursor
from fastapi import APIRouter, Depends, Path, status

from repositories import companies as company_repo
from schemas.company import (
    CompanyCreateRequest,
    CompanyDeleteResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdateRequest,
)
from utils.auth import require_admin
from utils.database import get_cursor

router = APIRouter(
    prefix="/companies",
    tags=["COMPANIES"],
)

CurrentCursor = Annotated[Cursor, Depends(get_cursor)]
AdminUser = Annotated[dict[str, Any], Depends(require_admin)]
CompanyHandlePath = Annotated[
    str,
    Path(max_length=25, description="회사 handle", examples=["anderson-arias-morrow"]),
]


@router.post("", response_model=CompanyResponse,
             status_code=status.HTTP_201_CREATED)
async def create_company(
        _admin: AdminUser, company: CompanyCreateRequest, cur: CurrentCursor) -> CompanyResponse:
    """회사 등록 (관리자)"""
    new_company = await company_repo.create_company(cur, company.model_dump())
    return CompanyResponse(company=new_company)


@router.get("", response_model=CompanyListResponse)
async def get_companies(cur: CurrentCursor) -> CompanyListResponse:
    """회사 전체 목록"""
    companies = await company_repo.find_all_companies(cur)
    return CompanyListResponse(companies=companies)


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: CompanyHandlePath, cur: CurrentCursor) -> CompanyDetailResponse:
    """회사 상세 조회 (채용공고 목록 포함)"""
    company = await company_repo.get_company(cur, handle)
    return CompanyDetailResponse(company=company)


@router.patch("/{handle}", response_model=CompanyResponse)
async def update_company(
        _admin: AdminUser,
        handle: CompanyHandlePath,
        update_data: CompanyUpdateRequest,
        cur: CurrentCursor,
) -> CompanyResponse:
    """회사 정보 수정 (관리자, 보낸 필드만 변경)"""
    company = await company_repo.update_company(cur, handle, update_data.to_update_data())
    return CompanyResponse(company=company)


@router.delete("/{handle}", response_model=CompanyDeleteResponse)
async def delete_company(_admin: AdminUser, handle: CompanyHandlePath, cur: CurrentCursor) -> CompanyDeleteResponse:
    """회사 삭제 (관리자)"""
    await company_repo.remove_company(cur, handle)
    return CompanyDeleteResponse(deleted=handle)
