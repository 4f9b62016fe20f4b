"""Shared model mixins and column helpers"""

import enum
from datetime import datetime, timezone
from typing import Type

from sqlalchemy import Column, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def enum_type(enum_cls: Type[enum.Enum], name: str) -> SQLEnum:
    """Enum column type that stores member values (``"Beginner"``) rather than names"""
    return SQLEnum(
        enum_cls,
        name=name,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )


class TimestampMixin:
    """Adds created/updated timestamps to a model"""

    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )
