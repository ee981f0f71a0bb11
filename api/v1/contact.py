from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_site
from schemas.contact import ContactMessage, ContactSubmissionResult
from schemas.response_schema import APIResponse
from services.site import PortfolioSite

router = APIRouter(prefix="/contact", tags=["Contact"])


def _status_for(result: ContactSubmissionResult) -> int:
    if result.success:
        return status.HTTP_200_OK
    if result.errors:
        return status.HTTP_400_BAD_REQUEST
    if result.timedOut:
        return status.HTTP_504_GATEWAY_TIMEOUT
    return status.HTTP_502_BAD_GATEWAY


# ------------------------------
# Submit the contact form
# ------------------------------
@router.post("", response_model=APIResponse[ContactSubmissionResult])
async def submit_contact_form(
    payload: ContactMessage,
    site: PortfolioSite = Depends(get_site),
):
    """
    Validates the form and relays it to the configured notification sender.
    Failures carry a prefilled mailto fallback and echo the submitted fields.
    """
    result = await site.contact.submit(payload)
    status_code = _status_for(result)
    body = APIResponse(status_code=status_code, data=result, detail=result.message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
