"""Product domain exceptions.

Raised by the Service Layer and repositories when business rules are
violated.  The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class ProductAlreadyExists(Exception):
    """A product with the same name and brand already exists.

    Covers RN-PRO-001 (unique name/brand pair).
    """


class ProductNotFound(Exception):
    """The requested product does not exist, or the catalog is empty."""
