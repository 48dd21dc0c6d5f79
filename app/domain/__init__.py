"""Domain-level values and business rules.

This package contains logic that defines *what* the business rules are
(pricing, quotation validity, policy issuance), independent from *where*
they are applied (services, repositories, HTTP routes).
"""
