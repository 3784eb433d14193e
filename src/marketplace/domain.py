"""Marketplace bounded context: users, shops, orders and payments.

Orders and payments are independent aggregates. They coordinate only through
commands and the domain events raised by the order lifecycle.
"""

from protean.domain import Domain

marketplace = Domain(name="marketplace")
