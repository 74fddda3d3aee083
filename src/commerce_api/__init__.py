"""Commerce API: companies, customers, products, sales and users over a relational store."""

__version__ = "1.0.0"
