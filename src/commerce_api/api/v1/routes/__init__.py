from . import companies, company_users, customers, health, products, sales

resource_routers = [
    companies.router,
    customers.router,
    products.router,
    sales.router,
    company_users.router,
]

__all__ = ["health", "resource_routers"]
