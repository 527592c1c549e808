"""
Page Builder Errors
===================

Exceptions raised by the document model, layout store and post store.
Routes translate these into HTTP responses.
"""


class PageBuilderError(Exception):
    """Base class for page builder errors."""


class UnknownElementKindError(PageBuilderError, LookupError):
    """Catalog lookup for a kind that is not registered.

    Only reachable through programming errors, the palette never offers
    kinds outside the catalog.
    """

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unknown element kind: {kind}")


class UnknownPropertyError(PageBuilderError, KeyError):
    """Edit of a property key the element kind does not declare."""

    def __init__(self, kind, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"Element kind '{kind}' has no editable property '{key}'")

    def __str__(self) -> str:
        return self.args[0]


class InvalidPropertyValueError(PageBuilderError, ValueError):
    """Value that cannot be coerced to the field's semantic type."""


class DocumentFormatError(PageBuilderError, ValueError):
    """Structured form input that cannot be turned back into a document."""


class LayoutNotFoundError(PageBuilderError, KeyError):
    """Saved layout reference that is not in the store."""

    def __init__(self, layout_id: str):
        self.layout_id = layout_id
        super().__init__(f"Layout not found: {layout_id}")

    def __str__(self) -> str:
        return self.args[0]


class PostNotFoundError(PageBuilderError, KeyError):
    """Blog post lookup by id or slug that matched nothing."""

    def __init__(self, ref):
        self.ref = ref
        super().__init__(f"Post not found: {ref}")

    def __str__(self) -> str:
        return self.args[0]


class PostValidationError(PageBuilderError, ValueError):
    """Post payload rejected by the store (e.g. duplicate slug)."""
