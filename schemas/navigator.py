from schemas.imports import *
from schemas.content import ContentItem
from pydantic import AliasChoices


class NavigatorState(BaseModel):
    id: Optional[str] = None
    section: Optional[Section] = None
    activeIndex: int = Field(default=0, validation_alias=AliasChoices("activeIndex", "active_index"))
    isTransitioning: bool = Field(
        default=False,
        validation_alias=AliasChoices("isTransitioning", "is_transitioning"),
    )
    size: int = 0
    isEmpty: bool = Field(default=True, validation_alias=AliasChoices("isEmpty", "is_empty"))
    activeItem: Optional[ContentItem] = Field(
        default=None,
        validation_alias=AliasChoices("activeItem", "active_item"),
    )
    items: List[ContentItem] = Field(default_factory=list)


class KeyPress(BaseModel):
    key: str


class SwipeGesture(BaseModel):
    startX: float = Field(validation_alias=AliasChoices("startX", "start_x"))
    endX: float = Field(validation_alias=AliasChoices("endX", "end_x"))


class NavigationResult(BaseModel):
    accepted: bool
    state: NavigatorState


class SettleResult(BaseModel):
    completed: bool
    state: NavigatorState
