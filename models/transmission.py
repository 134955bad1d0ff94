from pydantic import BaseModel, ConfigDict, Discriminator, Field, StrictBool, Tag
from typing import Annotated, Any, Dict, List, Optional, Union


class _RequestModel(BaseModel):
    # Outgoing shapes are closed: unknown keys are a schema violation
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class Address(_RequestModel):
    email: str
    name: Optional[str] = None


class InlineRecipient(_RequestModel):
    address: Address
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    substitution_data: Optional[Dict[str, Any]] = None


def _field(value: Any, name: str) -> Any:
    if isinstance(value, dict):
        return value.get(name)
    return getattr(value, name, None)


def recipient_kind(value: Any) -> str:
    """Inline when a non-null `address` is present, otherwise a stored list id."""
    return "inline" if _field(value, "address") is not None else "list_id"


def content_kind(value: Any) -> str:
    """Inline when a non-null `subject` is present, otherwise a stored template."""
    return "inline" if _field(value, "subject") is not None else "template"


Recipient = Annotated[
    Union[
        Annotated[InlineRecipient, Tag("inline")],
        Annotated[str, Tag("list_id")],
    ],
    Discriminator(recipient_kind),
]


class Sender(_RequestModel):
    name: str
    email: str


class InlineContent(_RequestModel):
    subject: str
    from_: Sender = Field(alias="from")
    html: Optional[str] = None
    text: Optional[str] = None
    reply_to: Optional[str] = None
    headers: Optional[Dict[str, Any]] = None


class TemplateContent(_RequestModel):
    template_id: str
    use_draft_template: Optional[StrictBool] = None


Content = Annotated[
    Union[
        Annotated[InlineContent, Tag("inline")],
        Annotated[TemplateContent, Tag("template")],
    ],
    Discriminator(content_kind),
]


class Options(_RequestModel):
    start_time: Optional[str] = None  # YYYY-MM-DDTHH:MM:SS±HH:MM
    open_tracking: Optional[StrictBool] = None
    click_tracking: Optional[StrictBool] = None
    transactional: Optional[StrictBool] = None
    sandbox: Optional[StrictBool] = None
    skip_suppression: Optional[StrictBool] = None
    ip_pool: Optional[str] = None
    inline_css: Optional[StrictBool] = None


class Transmission(_RequestModel):
    recipients: List[Recipient] = Field(min_length=1)
    content: Content
    options: Optional[Options] = None
    campaign_id: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    substitution_data: Optional[Dict[str, Any]] = None
    return_path: Optional[str] = None

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict using API field names, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
