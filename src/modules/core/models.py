"""Base abstract models for the catalog service.

Provides:
- ``BaseModel``: store-assigned integer PK + created_at / updated_at timestamps.
- ``AvailabilityModel``: extends BaseModel with soft delete via an
  ``available`` flag.

Design decisions:
- ``objects`` manager returns ALL records (unfiltered).  Use ``.available()``
  explicitly to exclude soft-deleted rows; several catalog operations
  (update, remove, bulk validation) deliberately look past the flag.
- Rows are never physically removed by the application.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

from django.db import models

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with auto-increment PK and timestamp bookkeeping."""

    id = models.BigAutoField(primary_key=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Soft delete via availability flag
# ---------------------------------------------------------------------------


class AvailabilityQuerySet(models.QuerySet):
    """QuerySet with availability helpers."""

    def available(self) -> AvailabilityQuerySet:
        """Return only records still present in the catalog."""
        return self.filter(available=True)

    def unavailable(self) -> AvailabilityQuerySet:
        """Return only soft-deleted records."""
        return self.filter(available=False)


class AvailabilityManager(models.Manager.from_queryset(AvailabilityQuerySet)):
    """Manager that exposes ``.available()`` / ``.unavailable()``."""


class AvailabilityModel(BaseModel):
    """Abstract model soft-deleted by flipping ``available`` to ``False``.

    - ``objects`` is **unfiltered** (returns all rows).
    - Use ``Model.objects.available()`` to exclude soft-deleted rows.
    """

    available = models.BooleanField(default=True, db_index=True)

    objects = AvailabilityManager()

    class Meta:
        abstract = True
