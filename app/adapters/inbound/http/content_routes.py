"""HTTP routes for the marketing site content."""

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.dtos.base import InputDTO
from app.application.dtos.content import (
    AdminCreate,
    AdminUpdate,
    BlogCreate,
    BlogUpdate,
    CategoryCreate,
    ContactInfoCreate,
    ContentCollection,
    FaqCreate,
    FaqUpdate,
    HeroSectionCreate,
    MaterialCreate,
    MaterialUpdate,
    PartnerCreate,
    PartnerUpdate,
    ServiceCreate,
    ServiceUpdate,
    StatsCreate,
)
from app.domain.errors import NotFoundError, ValidationError
from app.infrastructure.wiring.container import Container, get_container

# Same shape as JavaScript's Date.prototype.toDateString, which the site renders as is
PUBLISH_DATE_FORMAT = "%a %b %d %Y"

router = APIRouter(tags=["content"])


async def _list(container: Container, collection: ContentCollection) -> list[dict[str, Any]]:
    items = await container.content_repository.list(collection)
    return [item.to_response() for item in items]


async def _create(
    container: Container,
    collection: ContentCollection,
    body: InputDTO,
    extra: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    data = body.model_dump(mode="json", by_alias=True)
    data.update(extra or {})
    item = await container.content_repository.add(collection, data)
    return item.to_response()


async def _update(
    container: Container,
    collection: ContentCollection,
    pk: str,
    body: InputDTO,
) -> dict[str, Any]:
    data = body.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if not data:
        raise ValidationError("No fields to update")
    item = await container.content_repository.update(collection, pk, data)
    if item is None:
        raise NotFoundError(f"No {collection.value} item with id {pk}")
    return item.to_response()


async def _delete(container: Container, collection: ContentCollection, pk: str) -> dict[str, Any]:
    if not await container.content_repository.delete(collection, pk):
        raise NotFoundError(f"No {collection.value} item with id {pk}")
    return {"message": "Deleted", "deletedCount": 1}


async def _increment(
    container: Container,
    collection: ContentCollection,
    pk: str,
    field: str,
    message: str,
) -> JSONResponse:
    if not await container.content_repository.increment(collection, pk, field):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": f"No {collection.value} item with id {pk}"},
        )
    return JSONResponse(content={"success": True, "message": message})


# Hero section


@router.get("/hero_section_data")
async def hero_section_data(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return await _list(container, ContentCollection.HERO_SECTION)


@router.post("/update_hero_section_data", status_code=status.HTTP_201_CREATED)
async def update_hero_section_data(
    body: HeroSectionCreate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    """Publish a new hero section; the newest one is shown."""
    return await _create(container, ContentCollection.HERO_SECTION, body)


# Statistics


@router.get("/stats_collection")
async def stats_collection(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return await _list(container, ContentCollection.STATS)


@router.post("/add_stats", status_code=status.HTTP_201_CREATED)
async def add_stats(
    body: StatsCreate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _create(container, ContentCollection.STATS, body)


# Services


@router.get("/our_services")
async def our_services(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return await _list(container, ContentCollection.SERVICES)


@router.post("/post_new_service", status_code=status.HTTP_201_CREATED)
async def post_new_service(
    body: ServiceCreate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _create(container, ContentCollection.SERVICES, body)


@router.patch("/update_service_data/{pk}")
async def update_service_data(
    pk: str, body: ServiceUpdate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _update(container, ContentCollection.SERVICES, pk, body)


@router.delete("/delete_service_data/{pk}")
async def delete_service_data(pk: str, container: Container = Depends(get_container)) -> dict[str, Any]:
    return await _delete(container, ContentCollection.SERVICES, pk)


# University partners


@router.get("/all_university_partners")
async def all_university_partners(
    container: Container = Depends(get_container),
) -> list[dict[str, Any]]:
    return await _list(container, ContentCollection.PARTNERS)


@router.post("/add_new_university", status_code=status.HTTP_201_CREATED)
async def add_new_university(
    body: PartnerCreate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _create(container, ContentCollection.PARTNERS, body)


@router.patch("/update_university/{pk}")
async def update_university(
    pk: str, body: PartnerUpdate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _update(container, ContentCollection.PARTNERS, pk, body)


@router.delete("/delete_university_data/{pk}")
async def delete_university_data(
    pk: str, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _delete(container, ContentCollection.PARTNERS, pk)


# FAQs


@router.get("/all_faqs")
async def all_faqs(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return await _list(container, ContentCollection.FAQS)


@router.post("/add_new_faq", status_code=status.HTTP_201_CREATED)
async def add_new_faq(body: FaqCreate, container: Container = Depends(get_container)) -> dict[str, Any]:
    return await _create(container, ContentCollection.FAQS, body)


@router.patch("/update_faq/{pk}")
async def update_faq(
    pk: str, body: FaqUpdate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _update(container, ContentCollection.FAQS, pk, body)


@router.delete("/delete_faq_data/{pk}")
async def delete_faq_data(pk: str, container: Container = Depends(get_container)) -> dict[str, Any]:
    return await _delete(container, ContentCollection.FAQS, pk)


# Contact information


@router.get("/contact_informations")
async def contact_informations(
    container: Container = Depends(get_container),
) -> Optional[dict[str, Any]]:
    """
    Get the contact block shown in the site footer.

    Returns:
        The most recently saved contact information, or None
    """
    items = await _list(container, ContentCollection.CONTACTS)
    return items[0] if items else None


@router.post("/add_contact_informations", status_code=status.HTTP_201_CREATED)
async def add_contact_informations(
    body: ContactInfoCreate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _create(container, ContentCollection.CONTACTS, body)


# Admins


@router.get("/admin_data")
async def admin_data(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return await _list(container, ContentCollection.ADMINS)


@router.post("/admin_data", status_code=status.HTTP_201_CREATED)
async def add_admin_data(
    body: AdminCreate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _create(container, ContentCollection.ADMINS, body)


@router.patch("/admin_data/{pk}")
async def update_admin_data(
    pk: str, body: AdminUpdate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _update(container, ContentCollection.ADMINS, pk, body)


# Study materials


@router.get("/all_metarial_data")
async def all_material_data(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return await _list(container, ContentCollection.MATERIALS)


@router.post("/post_a_new_metarila", status_code=status.HTTP_201_CREATED)
async def post_new_material(
    body: MaterialCreate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _create(container, ContentCollection.MATERIALS, body)


@router.patch("/update_metarila_data/{pk}")
async def update_material_data(
    pk: str, body: MaterialUpdate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _update(container, ContentCollection.MATERIALS, pk, body)


@router.api_route("/delete_metarila_data/{pk}", methods=["PATCH", "DELETE"])
async def delete_material_data(pk: str, container: Container = Depends(get_container)) -> dict[str, Any]:
    return await _delete(container, ContentCollection.MATERIALS, pk)


@router.patch("/increment_download/{pk}")
async def increment_download(pk: str, container: Container = Depends(get_container)) -> JSONResponse:
    """Count one download of a study material."""
    return await _increment(
        container, ContentCollection.MATERIALS, pk, "downloads", "Download count updated"
    )


# Categories


@router.get("/all_category_data")
async def all_category_data(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return await _list(container, ContentCollection.CATEGORIES)


@router.post("/post_a_new_category", status_code=status.HTTP_201_CREATED)
async def post_new_category(
    body: CategoryCreate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _create(container, ContentCollection.CATEGORIES, body)


@router.api_route("/delete_category_data/{pk}", methods=["PATCH", "DELETE"])
async def delete_category_data(pk: str, container: Container = Depends(get_container)) -> dict[str, Any]:
    return await _delete(container, ContentCollection.CATEGORIES, pk)


# Blogs


@router.get("/all_blogs_data")
async def all_blogs_data(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return await _list(container, ContentCollection.BLOGS)


@router.get("/blog/{pk}")
async def get_blog(pk: str, container: Container = Depends(get_container)) -> dict[str, Any]:
    item = await container.content_repository.get(ContentCollection.BLOGS, pk)
    if item is None:
        raise NotFoundError(f"No blogs item with id {pk}")
    return item.to_response()


@router.post("/post_a_new_blog", status_code=status.HTTP_201_CREATED)
async def post_new_blog(
    body: BlogCreate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    """
    Publish a blog post.

    Args:
        body: Blog fields

    Returns:
        Stored post with its ``publishDate``
    """
    publish_date = datetime.now(timezone.utc).strftime(PUBLISH_DATE_FORMAT)
    return await _create(
        container, ContentCollection.BLOGS, body, extra={"publishDate": publish_date}
    )


@router.patch("/update_blog_data/{pk}")
async def update_blog_data(
    pk: str, body: BlogUpdate, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return await _update(container, ContentCollection.BLOGS, pk, body)


@router.api_route("/delete_blog_data/{pk}", methods=["PATCH", "DELETE"])
async def delete_blog_data(pk: str, container: Container = Depends(get_container)) -> dict[str, Any]:
    return await _delete(container, ContentCollection.BLOGS, pk)


@router.patch("/add_views/{pk}")
async def add_views(pk: str, container: Container = Depends(get_container)) -> JSONResponse:
    """Count one view of a blog post."""
    return await _increment(container, ContentCollection.BLOGS, pk, "views", "View count updated")
