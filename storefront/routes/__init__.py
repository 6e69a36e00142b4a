# storefront/routes/__init__.py

from .storefront_routes import register_storefront_routes


def register_routes(app):
    register_storefront_routes(app)
