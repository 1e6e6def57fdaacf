"""Marketing content DTOs."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from app.application.dtos.base import DTO, InputDTO


class ContentCollection(str, Enum):
    """Collections managed through the content repository."""

    HERO_SECTION = "hero_section"
    STATS = "stats"
    SERVICES = "services"
    PARTNERS = "partners"
    FAQS = "faqs"
    CONTACTS = "contacts"
    ADMINS = "admins"
    MATERIALS = "materials"
    CATEGORIES = "categories"
    BLOGS = "blogs"


class ContentItem(DTO):
    """One stored record of a content collection."""

    pk: str
    collection: ContentCollection
    data: dict[str, Any]
    created_at: datetime

    def to_response(self) -> dict[str, Any]:
        """Flatten into the shape the frontend reads."""
        return {"pk": self.pk, **self.data}


class HeroSectionCreate(InputDTO):
    title: str = Field(min_length=1)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    primary_button: Optional[str] = None
    secondary_button: Optional[str] = None


class StatsCreate(InputDTO):
    successfully_departed: int = Field(default=0, ge=0)
    files_opened: int = Field(default=0, ge=0)
    interested_students: int = Field(default=0, ge=0)


class ServiceCreate(InputDTO):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None


class ServiceUpdate(InputDTO):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None


class PartnerCreate(InputDTO):
    name: str = Field(min_length=1)
    country: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None


class PartnerUpdate(InputDTO):
    name: Optional[str] = Field(default=None, min_length=1)
    country: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None


class FaqCreate(InputDTO):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)


class FaqUpdate(InputDTO):
    question: Optional[str] = Field(default=None, min_length=1)
    answer: Optional[str] = Field(default=None, min_length=1)


class ContactInfoCreate(InputDTO):
    address: Optional[str] = None
    email1: Optional[str] = None
    email2: Optional[str] = None
    office_hours: Optional[str] = None
    phone1: Optional[str] = None
    phone2: Optional[str] = None
    whatsapp: Optional[str] = None


class AdminCreate(InputDTO):
    email: str = Field(min_length=1)
    name: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None


class AdminUpdate(InputDTO):
    email: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None


class MaterialCreate(InputDTO):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    file_url: Optional[str] = None
    thumbnail: Optional[str] = None


class MaterialUpdate(InputDTO):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    file_url: Optional[str] = None
    thumbnail: Optional[str] = None


class CategoryCreate(InputDTO):
    name: str = Field(min_length=1)
    description: Optional[str] = None


class BlogCreate(InputDTO):
    title: str = Field(min_length=1)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class BlogUpdate(InputDTO):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[list[str]] = None
