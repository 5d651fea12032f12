"""
Request and Response Schemas

Pydantic models for every write path plus the public shape of each entity.
Clients send and receive camelCase keys; snake_case input is accepted too.
"""

from datetime import datetime
from typing import Annotated, ClassVar, List, Optional, Tuple

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StrictBool,
    StrictInt,
    ValidationError as PydanticValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from eventforge.errors import ValidationError


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
    )


class ContentModel(ApiModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        str_strip_whitespace=True,
    )


class PartialUpdate(ContentModel):
    """Base for PUT bodies: any subset of fields, but no nulls where the
    column is required."""

    nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode='after')
    def _reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f'{to_camel(name)} cannot be null')
        return self


def split_tags(value):
    """'a, b,,c' -> ['a', 'b', 'c']; lists are trimmed the same way."""
    if isinstance(value, str):
        value = value.split(',')
    if isinstance(value, (list, tuple)):
        return [item.strip() if isinstance(item, str) else item for item in value
                if not (isinstance(item, str) and not item.strip())]
    return value


def split_lines(value):
    """Newline-delimited text -> ordered list of non-empty lines."""
    if isinstance(value, str):
        value = value.splitlines()
    if isinstance(value, (list, tuple)):
        return [item.strip() if isinstance(item, str) else item for item in value
                if not (isinstance(item, str) and not item.strip())]
    return value


TagList = Annotated[List[str], BeforeValidator(split_tags)]
RoleList = Annotated[List[str], BeforeValidator(split_lines)]


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

class LoginRequest(ApiModel):
    username: str = Field(min_length=1, max_length=80)
    password: str = Field(min_length=1)

    @field_validator('username', mode='before')
    @classmethod
    def _strip_username(cls, value):
        return value.strip() if isinstance(value, str) else value


class NewUserRequest(LoginRequest):
    """Registration and admin-created accounts."""
    username: str = Field(min_length=3, max_length=80)
    password: str = Field(min_length=6, max_length=256)


# ---------------------------------------------------------------------------
# Portfolio
# ---------------------------------------------------------------------------

class PortfolioItemCreate(ContentModel):
    title: str = Field(min_length=1)
    category: str = Field(min_length=1)
    venue: Optional[str] = None
    image_url: str = Field(min_length=1)
    description: str = Field(min_length=1)
    overview: str = Field(min_length=1)
    role: RoleList = Field(default_factory=list)
    results: str = Field(min_length=1)
    tags: TagList = Field(min_length=1)
    featured: StrictBool = False


class PortfolioItemUpdate(PartialUpdate):
    nullable_fields: ClassVar[Tuple[str, ...]] = ('venue',)

    title: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    venue: Optional[str] = None
    image_url: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    overview: Optional[str] = Field(default=None, min_length=1)
    role: Optional[RoleList] = None
    results: Optional[str] = Field(default=None, min_length=1)
    tags: Optional[TagList] = Field(default=None, min_length=1)
    featured: Optional[StrictBool] = None


class PortfolioItemOut(ApiModel):
    id: int
    title: str
    category: str
    venue: Optional[str] = None
    image_url: str
    description: str
    overview: str
    role: List[str]
    results: str
    tags: List[str]
    featured: bool


# ---------------------------------------------------------------------------
# Testimonials
# ---------------------------------------------------------------------------

class TestimonialCreate(ContentModel):
    rating: StrictInt = Field(ge=1, le=5)
    content: str = Field(min_length=1)
    author: str = Field(min_length=1)
    position: str = Field(min_length=1)
    avatar_initials: str = Field(min_length=1, max_length=4)


class TestimonialUpdate(PartialUpdate):
    rating: Optional[StrictInt] = Field(default=None, ge=1, le=5)
    content: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = Field(default=None, min_length=1)
    position: Optional[str] = Field(default=None, min_length=1)
    avatar_initials: Optional[str] = Field(default=None, min_length=1, max_length=4)


class TestimonialOut(ApiModel):
    id: int
    rating: int
    content: str
    author: str
    position: str
    avatar_initials: str


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------

class ContactSubmissionCreate(ContentModel):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    event_type: Optional[str] = None
    message: str = Field(min_length=1)


class ContactSubmissionOut(ApiModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    event_type: Optional[str] = None
    message: str
    created_at: datetime
    read: bool


class UserOut(ApiModel):
    id: int
    username: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def format_errors(exc):
    """Flatten a pydantic error into ``[{field, message, type}]``."""
    errors = []
    for error in exc.errors(include_url=False, include_context=False, include_input=False):
        errors.append({
            'field': '.'.join(str(part) for part in error['loc']) or None,
            'message': error['msg'],
            'type': error['type'],
        })
    return errors


def parse_body(schema, payload, message='Invalid request data', partial=False):
    """Validate a decoded JSON body against ``schema``.

    Returns a snake_case dict ready for a repository. With ``partial`` only
    the keys the client actually sent are returned.
    """
    if not isinstance(payload, dict):
        raise ValidationError(message, errors=[{
            'field': None,
            'message': 'Request body must be a JSON object',
            'type': 'body_type',
        }])
    try:
        model = schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(message, errors=format_errors(exc))
    return model.model_dump(exclude_unset=partial)


def dump(schema, row):
    """Serialize a repository row into its public JSON shape."""
    return schema.model_validate(row).model_dump(by_alias=True, mode='json')


def dump_many(schema, rows):
    return [dump(schema, row) for row in rows]
