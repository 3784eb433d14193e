"""Marketplace API package."""

from marketplace.api.routes import order_router, payment_router, shop_router, user_router

__all__ = ["user_router", "shop_router", "order_router", "payment_router"]
