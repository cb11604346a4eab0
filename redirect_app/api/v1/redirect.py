from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from redirect_app.services.redirect_service import RedirectService
from redirect_app.dependencies import get_redirect_service

router = APIRouter(tags=["redirect"])


@router.get("/{alias}")
async def redirect_to_url(
    alias: str,
    redirect_service: RedirectService = Depends(get_redirect_service)
):
    """
    Redirect to the URL registered for alias.
    
    Uses 307 (temporary) so clients keep asking the registry and
    pick up later updates. Unknown aliases become 404 via the
    NotFound exception handler.
    """
    redirect = await redirect_service.read_by_alias(alias)
    return RedirectResponse(
        url=redirect.url,
        status_code=status.HTTP_307_TEMPORARY_REDIRECT
    )
