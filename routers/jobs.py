from typing import Annotated

from fastapi import APIRouter, Path, status

from repositories import jobs as job_repo
from routers.companies import AdminUser, CurrentCursor
from schemas.job import (
    JobCreateRequest,
    JobDeleteResponse,
    JobListResponse,
    JobResponse,
    JobUpdateRequest,
)

router = APIRouter(
    prefix="/jobs",
    tags=["JOBS"],
)

JobIdPath = Annotated[int, Path(ge=1, description="채용공고 ID", examples=[1])]


@router.post("", response_model=JobResponse,
             status_code=status.HTTP_201_CREATED)
async def create_job(_admin: AdminUser, job: JobCreateRequest, cur: CurrentCursor) -> JobResponse:
    """채용공고 등록 (관리자)"""
    new_job = await job_repo.create_job(cur, job.model_dump())
    return JobResponse(job=new_job)


@router.get("", response_model=JobListResponse)
async def get_jobs(cur: CurrentCursor) -> JobListResponse:
    """채용공고 전체 목록"""
    jobs = await job_repo.find_all_jobs(cur)
    return JobListResponse(jobs=jobs)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: JobIdPath, cur: CurrentCursor) -> JobResponse:
    job = await job_repo.get_job(cur, job_id)
    return JobResponse(job=job)


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
        _admin: AdminUser, job_id: JobIdPath, update_data: JobUpdateRequest, cur: CurrentCursor) -> JobResponse:
    """채용공고 수정 (관리자)"""
    job = await job_repo.update_job(cur, job_id, update_data.to_update_data())
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=JobDeleteResponse)
async def delete_job(_admin: AdminUser, job_id: JobIdPath, cur: CurrentCursor) -> JobDeleteResponse:
    """채용공고 삭제 (관리자)"""
    await job_repo.remove_job(cur, job_id)
    return JobDeleteResponse(deleted=job_id)
