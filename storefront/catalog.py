# storefront/catalog.py
# Read paths never raise on a database failure: they log and return nothing.

import logging

from sqlalchemy.exc import SQLAlchemyError

from . import db
from .models import Product
from .seed import store_status

logger = logging.getLogger(__name__)


def list_products():
    status = store_status()
    if not status.seeded:
        return []
    try:
        products = Product.query.order_by(Product.id).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.warning("Catalog unavailable: %s", e)
        status.went_offline(e)
        return []
    status.came_online()
    return products


def products_by_id():
    return {p.id: p for p in list_products()}
