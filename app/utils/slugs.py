"""
Slug helpers for URL-addressable content
"""
import re


def slugify(value: str) -> str:
    """
    Lower-case, hyphen-separated slug

    >>> slugify("E-commerce Platform Redesign!")
    'e-commerce-platform-redesign'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug or "item"


def unique_slug(db, model, base: str, exclude_id=None) -> str:
    """Append -2, -3, ... until no other row of model uses the slug"""
    candidate = base
    suffix = 2
    while True:
        query = db.query(model).filter(model.slug == candidate)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)
        if query.first() is None:
            return candidate
        candidate = f"{base}-{suffix}"
        suffix += 1
