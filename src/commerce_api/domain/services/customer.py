from commerce_api.core.constants import ResourcePrefix
from commerce_api.data_access.models import Customer

from .address import AddressOwnerService


class CustomerService(AddressOwnerService[Customer]):
    model = Customer
    prefix = ResourcePrefix.CUSTOMER
    entity_name = "Customer"


customer_service = CustomerService()
