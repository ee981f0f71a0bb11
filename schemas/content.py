# ============================================================================
# CONTENT SCHEMA
# ============================================================================
# Pydantic classes for the gallery items served by the content endpoints
# and navigated by the section navigators.
#
# ============================================================================

from schemas.imports import *
from pydantic import AliasChoices


class SkillEntry(BaseModel):
    name: str
    level: int = Field(default=0, ge=0, le=100)


class ContentItem(BaseModel):
    id: str
    kind: ItemKind
    title: str
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    subtitle: Optional[str] = None
    date: Optional[str] = None
    link: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("link", "credentialUrl", "credential_url"),
    )
    category: Optional[SkillCategory] = None
    skills: List[SkillEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_category(self):
        if self.category is not None and self.kind != ItemKind.SKILL_GROUP:
            raise ValueError("category is only valid on skill groups")
        return self


class CardVariant(BaseModel):
    accent: str
    icon: str
    label: str


# One card variant per skill category; keep exhaustive over SkillCategory.
CARD_VARIANTS: Dict[SkillCategory, CardVariant] = {
    SkillCategory.FRONTEND: CardVariant(accent="#38BDF8", icon="layout", label="Frontend Galaxy"),
    SkillCategory.BACKEND: CardVariant(accent="#A78BFA", icon="server", label="Backend Galaxy"),
    SkillCategory.FRAMEWORK: CardVariant(accent="#F472B6", icon="layers", label="Framework Nebula"),
    SkillCategory.DATA: CardVariant(accent="#34D399", icon="bar-chart-3", label="Data Constellation"),
}


def card_variant_for(category: SkillCategory) -> CardVariant:
    return CARD_VARIANTS[SkillCategory(category)]
