from .associations import companies_industries
from .companies.models import Company
from .invoices.models import Invoice
from .industries.models import Industry

__all__ = ("companies_industries", "Company", "Invoice", "Industry")
