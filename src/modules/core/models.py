"""Base abstract model shared by the domain modules.

Provides ``BaseModel``: UUIDv7 primary key plus a ``created_at`` timestamp.
Both are assigned when the instance is constructed (not when it is first
saved) and are never editable afterwards.
"""

from __future__ import annotations

import uuid6
from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and creation timestamp."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        abstract = True
