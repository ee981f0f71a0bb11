import logging
import os
from typing import Optional

from schemas.imports import Section
from services.contact_service import ContactService, get_contact_timeout
from services.content_provider import ContentProvider, get_content_provider
from services.navigator import DeferredAnimationDriver, ImmediateAnimationDriver
from services.navigator_service import NavigatorRegistry
from services.notification_service import NotificationSender, get_notification_sender


logger = logging.getLogger(__name__)

DEFAULT_CONTACT_RECIPIENT = "hello@example.com"


def get_navigator_settings():
    raw_timeout = os.getenv("NAVIGATOR_TRANSITION_TIMEOUT")
    timeout: Optional[float] = None
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"Invalid NAVIGATOR_TRANSITION_TIMEOUT: {raw_timeout}")
    reduced_motion = (os.getenv("NAVIGATOR_REDUCED_MOTION") or "").strip().lower() in {"1", "true", "yes"}
    return timeout, reduced_motion


class PortfolioSite:
    """Composition root for one running site: sections, navigators, contact form."""

    def __init__(
        self,
        provider: ContentProvider,
        sender: NotificationSender,
        recipient: str = DEFAULT_CONTACT_RECIPIENT,
        transition_timeout: Optional[float] = None,
        reduced_motion: bool = False,
        contact_timeout: Optional[float] = 5.0,
    ):
        self.provider = provider
        self.sender = sender
        self.recipient = recipient
        self.transition_timeout = transition_timeout
        self.reduced_motion = reduced_motion
        self.contact_timeout = contact_timeout
        self.sections = list(Section)
        self.navigators: Optional[NavigatorRegistry] = None
        self.contact: Optional[ContactService] = None
        self._initialized = False

    @classmethod
    def from_env(cls) -> "PortfolioSite":
        transition_timeout, reduced_motion = get_navigator_settings()
        return cls(
            provider=get_content_provider(),
            sender=get_notification_sender(),
            recipient=os.getenv("CONTACT_RECIPIENT") or DEFAULT_CONTACT_RECIPIENT,
            transition_timeout=transition_timeout,
            reduced_motion=reduced_motion,
            contact_timeout=get_contact_timeout(),
        )

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        if self._initialized:
            logger.info("Portfolio site already initialized")
            return False

        driver_factory = ImmediateAnimationDriver if self.reduced_motion else DeferredAnimationDriver
        self.navigators = NavigatorRegistry(
            self.provider,
            transition_timeout=self.transition_timeout,
            driver_factory=driver_factory,
        )
        self.contact = ContactService(self.sender, self.recipient, timeout=self.contact_timeout)
        self._initialized = True
        logger.info("Portfolio site initialized with sections: %s", ", ".join(s.value for s in self.sections))
        return True

    def shutdown(self) -> None:
        if self.navigators is not None:
            self.navigators.clear()
        self._initialized = False
