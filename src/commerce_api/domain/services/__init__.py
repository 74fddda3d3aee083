from .address import AddressOwnerService, AddressService, address_service
from .base import CrudService
from .company import CompanyService, company_service
from .company_user import CompanyUserService, company_user_service
from .customer import CustomerService, customer_service
from .product import ProductService, product_service
from .sale import SaleService, sale_service
from .sale_item import SaleItemService, sale_item_service
from .user import UserService, user_service

__all__ = [
    "AddressOwnerService",
    "AddressService",
    "CompanyService",
    "CompanyUserService",
    "CrudService",
    "CustomerService",
    "ProductService",
    "SaleItemService",
    "SaleService",
    "UserService",
    "address_service",
    "company_service",
    "company_user_service",
    "customer_service",
    "product_service",
    "sale_item_service",
    "sale_service",
    "user_service",
]
