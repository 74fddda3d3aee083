from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from commerce_api.core.constants import RESOURCE_ID_LENGTH


def utcnow() -> datetime:
    return datetime.now(UTC)


class ResourceModel(SQLModel):
    """Columns shared by every table: prefixed id and audit timestamps."""

    id: str = Field(primary_key=True, min_length=RESOURCE_ID_LENGTH, max_length=RESOURCE_ID_LENGTH)
    created_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": utcnow},
    )
