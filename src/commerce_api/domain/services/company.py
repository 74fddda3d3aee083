from commerce_api.core.constants import ResourcePrefix
from commerce_api.data_access.models import Company

from .address import AddressOwnerService


class CompanyService(AddressOwnerService[Company]):
    model = Company
    prefix = ResourcePrefix.COMPANY
    entity_name = "Company"


company_service = CompanyService()
