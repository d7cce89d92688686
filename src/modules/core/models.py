"""Base abstract models shared by the domain modules.

Provides ``TimeStampedModel``: ``created_at`` / ``updated_at`` bookkeeping on
top of Django's auto-incrementing integer primary key.
"""

from __future__ import annotations

from django.db import models


class TimeStampedModel(models.Model):
    """Abstract base with timestamp bookkeeping."""

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
