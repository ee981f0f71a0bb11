from schemas.imports import *
from pydantic import field_validator


class ContactMessage(BaseModel):
    # Missing or null fields arrive as empty strings so validation can report them per field.
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""

    @field_validator("name", "email", "subject", "message", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    def stripped(self) -> "ContactMessage":
        return ContactMessage(
            name=self.name.strip(),
            email=self.email.strip(),
            subject=self.subject.strip(),
            message=self.message.strip(),
        )


class NotificationResult(BaseModel):
    success: bool
    message: str = ""


class ContactSubmissionResult(BaseModel):
    success: bool
    message: str
    errors: Dict[str, str] = Field(default_factory=dict)
    fallbackMailto: Optional[str] = None
    submission: Optional[ContactMessage] = None
    timedOut: bool = False
