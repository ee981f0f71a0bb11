from fastapi import HTTPException, Request, status

from services.site import PortfolioSite


def get_site(request: Request) -> PortfolioSite:
    site = getattr(request.app.state, "site", None)
    if site is None or not site.initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Site is not initialized",
        )
    return site
