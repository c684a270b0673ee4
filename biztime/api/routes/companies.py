from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.api.core.db import get_db
from biztime.api.schemas.common_schema import StatusResponse
from biztime.api.schemas.company_schema import (
    CompanyCreate,
    CompanyDetail,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyOut,
    CompanyResponse,
    CompanySummary,
    CompanyUpdate,
)
from biztime.api.services.company_service import CompanyDirectory

router = APIRouter()


def get_directory(db: Session = Depends(get_db)) -> CompanyDirectory:
    return CompanyDirectory(db)


@router.get("", response_model=CompanyListResponse, include_in_schema=False)
@router.get("/", response_model=CompanyListResponse)
def list_companies_route(directory: CompanyDirectory = Depends(get_directory)):
    companies = directory.list()
    return CompanyListResponse(
        companies=[CompanySummary.model_validate(c) for c in companies]
    )


@router.get("/{code}", response_model=CompanyDetailResponse)
def get_company_route(code: str, directory: CompanyDirectory = Depends(get_directory)):
    company = directory.get(code)
    return CompanyDetailResponse(company=CompanyDetail.model_validate(company))


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post("/", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company_route(
    payload: CompanyCreate,
    directory: CompanyDirectory = Depends(get_directory),
):
    company = directory.create(payload.name, payload.description)
    return CompanyResponse(company=CompanyOut.model_validate(company))


@router.put("/{code}", response_model=CompanyResponse)
def update_company_route(
    code: str,
    payload: CompanyUpdate,
    directory: CompanyDirectory = Depends(get_directory),
):
    company = directory.update(code, payload.name, payload.description)
    return CompanyResponse(company=CompanyOut.model_validate(company))


@router.delete("/{code}", response_model=StatusResponse)
def delete_company_route(code: str, directory: CompanyDirectory = Depends(get_directory)):
    return directory.delete(code)
