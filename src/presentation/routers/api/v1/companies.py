"""Companies resource router.

Endpoints:
    GET    /api/v1/companies               - List companies
    POST   /api/v1/companies               - Create company
    GET    /api/v1/companies/{company_id}  - Get company
    PUT    /api/v1/companies/{company_id}  - Rename company
    DELETE /api/v1/companies/{company_id}  - Delete company
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import CreateCompany, DeleteCompany, UpdateCompany
from src.application.commands.handlers import (
    CreateCompanyHandler,
    DeleteCompanyHandler,
    UpdateCompanyHandler,
)
from src.application.queries import GetCompany, ListCompanies
from src.application.queries.handlers import GetCompanyHandler, ListCompaniesHandler
from src.core.container import (
    get_create_company_handler,
    get_delete_company_handler,
    get_get_company_handler,
    get_list_companies_handler,
    get_update_company_handler,
)
from src.core.result import Failure, Success
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.company_schemas import (
    CompanyCreateRequest,
    CompanyResponse,
    CompanyUpdateRequest,
)

companies_router = APIRouter(prefix="/companies", tags=["Companies"])


@companies_router.get(
    "",
    response_model=list[CompanyResponse],
    summary="List companies",
)
async def list_companies(
    request: Request,
    handler: ListCompaniesHandler = Depends(get_list_companies_handler),
) -> list[CompanyResponse] | JSONResponse:
    """List companies ordered by name.

    GET /api/v1/companies → 200 OK
    """
    result = await handler.handle(ListCompanies())
    match result:
        case Success(value=views):
            return [CompanyResponse.from_dto(view) for view in views]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@companies_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CompanyResponse,
    responses={409: {"description": "Name taken", "model": ProblemDetails}},
    summary="Create company",
)
async def create_company(
    request: Request,
    data: CompanyCreateRequest,
    handler: CreateCompanyHandler = Depends(get_create_company_handler),
) -> CompanyResponse | JSONResponse:
    """Create a company.

    POST /api/v1/companies → 201 Created
    """
    result = await handler.handle(CreateCompany(name=data.name))

    match result:
        case Success(value=view):
            return CompanyResponse.from_dto(view)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@companies_router.get(
    "/{company_id}",
    response_model=CompanyResponse,
    responses={404: {"description": "Company not found", "model": ProblemDetails}},
    summary="Get company",
)
async def get_company(
    request: Request,
    company_id: UUID,
    handler: GetCompanyHandler = Depends(get_get_company_handler),
) -> CompanyResponse | JSONResponse:
    """Get a company.

    GET /api/v1/companies/{company_id} → 200 OK
    """
    result = await handler.handle(GetCompany(company_id=company_id))

    match result:
        case Success(value=view):
            return CompanyResponse.from_dto(view)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@companies_router.put(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        404: {"description": "Company not found", "model": ProblemDetails},
        409: {"description": "Name taken", "model": ProblemDetails},
    },
    summary="Rename company",
)
async def update_company(
    request: Request,
    company_id: UUID,
    data: CompanyUpdateRequest,
    handler: UpdateCompanyHandler = Depends(get_update_company_handler),
) -> Response:
    """Rename a company.

    PUT /api/v1/companies/{company_id} → 204 No Content
    """
    result = await handler.handle(
        UpdateCompany(company_id=company_id, name=data.name)
    )

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@companies_router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={404: {"description": "Company not found", "model": ProblemDetails}},
    summary="Delete company",
    description="Users of the company are kept and detached from it.",
)
async def delete_company(
    request: Request,
    company_id: UUID,
    handler: DeleteCompanyHandler = Depends(get_delete_company_handler),
) -> Response:
    """Delete a company.

    DELETE /api/v1/companies/{company_id} → 204 No Content
    """
    result = await handler.handle(DeleteCompany(company_id=company_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
