# ============================================================================
# NAVIGATOR SERVICE
# ============================================================================
# Mount/unmount lifecycle for section navigators. One navigator per mounted
# section; the collection is fetched once at mount.
#
# ============================================================================

import logging
import uuid
from typing import Callable, Dict, List, Optional

from fastapi import HTTPException

from schemas.imports import Section
from services.content_provider import ContentProvider
from services.navigator import AnimationDriver, DeferredAnimationDriver, SectionNavigator


logger = logging.getLogger(__name__)

DEFAULT_MAX_NAVIGATORS = 1000


def parse_section(section: str) -> Section:
    try:
        return Section(section)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown section: {section}")


class NavigatorRegistry:
    def __init__(
        self,
        provider: ContentProvider,
        transition_timeout: Optional[float] = None,
        driver_factory: Callable[[], AnimationDriver] = DeferredAnimationDriver,
        max_navigators: int = DEFAULT_MAX_NAVIGATORS,
    ):
        self.provider = provider
        self.transition_timeout = transition_timeout
        self.driver_factory = driver_factory
        self.max_navigators = max_navigators
        self._navigators: Dict[str, SectionNavigator] = {}

    def __len__(self) -> int:
        return len(self._navigators)

    def __contains__(self, navigator_id: str) -> bool:
        return navigator_id in self._navigators

    async def mount(self, section: str) -> SectionNavigator:
        """Registers a navigator for the section and loads its collection.

        If the navigator is unmounted while the fetch is in flight, the
        fetched collection is discarded. Clients unmount when a section goes
        away; past max_navigators the oldest mounted navigators are evicted.

        Raises:
            HTTPException 404: unknown section
        """
        section = parse_section(section)
        navigator_id = uuid.uuid4().hex
        navigator = SectionNavigator(
            driver=self.driver_factory(),
            transition_timeout=self.transition_timeout,
            navigator_id=navigator_id,
            section=section,
        )
        self._navigators[navigator_id] = navigator
        self._evict_oldest()

        try:
            items = await self.provider.fetch(section)
        except Exception:
            logger.exception("Content provider failed for section %s", section.value)
            items = []

        if self._navigators.get(navigator_id) is not navigator:
            logger.info("Navigator %s unmounted before its content arrived", navigator_id)
            return navigator

        navigator.load(items)
        return navigator

    def get(self, navigator_id: str) -> SectionNavigator:
        navigator = self._navigators.get(navigator_id)
        if navigator is None:
            raise HTTPException(status_code=404, detail="Navigator not found")
        return navigator

    def unmount(self, navigator_id: str) -> bool:
        navigator = self._navigators.pop(navigator_id, None)
        if navigator is None:
            raise HTTPException(status_code=404, detail="Navigator not found")
        return True

    def list_ids(self, section: Optional[Section] = None) -> List[str]:
        return [
            navigator_id
            for navigator_id, navigator in self._navigators.items()
            if section is None or navigator.section == section
        ]

    def clear(self) -> None:
        self._navigators.clear()

    def _evict_oldest(self) -> None:
        while len(self._navigators) > self.max_navigators:
            evicted_id = next(iter(self._navigators))
            del self._navigators[evicted_id]
            logger.warning("Navigator limit %s reached; evicted %s", self.max_navigators, evicted_id)
