from fastapi import APIRouter, Depends, Response, status
from redirect_app.schemas.redirect import (
    RedirectCreate,
    RedirectList,
    RedirectResponse,
    UpdateUrl,
    ValidationErrorResponse,
)
from redirect_app.services.redirect_service import RedirectService
from redirect_app.dependencies import get_redirect_service

router = APIRouter(prefix="/redirects", tags=["redirects"])

_VALIDATION_ERROR = {400: {"model": ValidationErrorResponse}}


@router.get("", response_model=RedirectList)
async def list_redirects(
    redirect_service: RedirectService = Depends(get_redirect_service)
):
    """List every registered redirect"""
    return {"redirects": await redirect_service.read_all()}


@router.post(
    "",
    response_model=RedirectResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_VALIDATION_ERROR,
)
async def create_redirect(
    payload: RedirectCreate,
    redirect_service: RedirectService = Depends(get_redirect_service)
):
    """Register a new alias"""
    return await redirect_service.create(payload.alias, payload.url)


@router.patch(
    "/{alias}",
    response_model=RedirectResponse,
    responses=_VALIDATION_ERROR,
)
async def update_redirect(
    alias: str,
    payload: UpdateUrl,
    redirect_service: RedirectService = Depends(get_redirect_service)
):
    """Point an existing alias at a new URL"""
    return await redirect_service.update_url(alias, payload.url)


@router.delete("/{alias}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_redirect(
    alias: str,
    redirect_service: RedirectService = Depends(get_redirect_service)
):
    """Delete a redirect permanently"""
    await redirect_service.delete(alias)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
