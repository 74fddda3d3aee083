from sqlmodel import Field

from commerce_api.core.constants import (
    ADDRESS_LINE_MAX_LENGTH,
    ADDRESS_POSTCODE_MAX_LENGTH,
    ADDRESS_REGION_MAX_LENGTH,
    TableNames,
)

from .base import ResourceModel


class Address(ResourceModel, table=True):
    """Postal address owned by exactly one company or customer."""

    __tablename__ = TableNames.ADDRESSES.value

    line1: str = Field(max_length=ADDRESS_LINE_MAX_LENGTH)
    postcode: str = Field(max_length=ADDRESS_POSTCODE_MAX_LENGTH)
    city: str = Field(max_length=ADDRESS_REGION_MAX_LENGTH)
    province: str = Field(max_length=ADDRESS_REGION_MAX_LENGTH)
    country: str = Field(max_length=ADDRESS_REGION_MAX_LENGTH)
