from typing import Any, Dict, List

from fastapi import APIRouter

from repositories.content import get_raw_records
from schemas.content import CARD_VARIANTS, CardVariant
from schemas.imports import Section

router = APIRouter(prefix="/api", tags=["Content"])


# ------------------------------
# Mock data endpoints
# ------------------------------
@router.get("/certifications", response_model=List[Dict[str, Any]])
async def get_certifications():
    return get_raw_records(Section.CERTIFICATIONS)


@router.get("/experience", response_model=List[Dict[str, Any]])
async def get_experience():
    return get_raw_records(Section.EXPERIENCE)


@router.get("/projects", response_model=List[Dict[str, Any]])
async def get_projects():
    return get_raw_records(Section.PROJECTS)


@router.get("/skills", response_model=List[Dict[str, Any]])
async def get_skills():
    return get_raw_records(Section.SKILLS)


@router.get("/card-variants", response_model=Dict[str, CardVariant])
async def get_card_variants():
    """
    Card styling keyed by skill category.
    """
    return {category.value: variant for category, variant in CARD_VARIANTS.items()}
