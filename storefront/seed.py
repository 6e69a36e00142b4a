# storefront/seed.py

import logging
import threading
from decimal import Decimal

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from . import db
from .models import Account, Product, ROLE_ADMIN

logger = logging.getLogger(__name__)

# Serializes the check-then-insert of concurrent first requests
_bootstrap_lock = threading.Lock()

DEMO_PRODUCTS = [
    ('Neon Chrono Watch', Decimal('299.00'), 'Accessories',
     'https://images.unsplash.com/photo-1523275335684-37898b6baf30?q=80&w=800&auto=format&fit=crop'),
    ('Aero Kicks V2', Decimal('189.00'), 'Footwear',
     'https://images.unsplash.com/photo-1552346154-21d32810baa3?q=80&w=800&auto=format&fit=crop'),
    ('Cyberpunk Jacket', Decimal('349.00'), 'Apparel',
     'https://images.unsplash.com/photo-1551028719-0141bb623ce1?q=80&w=800&auto=format&fit=crop'),
    ('Holo Glasses', Decimal('129.00'), 'Eyewear',
     'https://images.unsplash.com/photo-1511499767150-a48a237f0083?q=80&w=800&auto=format&fit=crop'),
    ('Quantum Earbuds', Decimal('159.00'), 'Audio',
     'https://images.unsplash.com/photo-1590658268037-6f1115ea9081?q=80&w=800&auto=format&fit=crop'),
]


class StoreStatus:
    """
    Reachability of the store, one per application.
    Set by the bootstrap, then by every read that hits the database.
    """

    def __init__(self):
        self.online = False
        self.seeded = False
        self.error = None

    def went_offline(self, error):
        if self.online:
            logger.error("Store went offline: %s", error)
        self.online = False
        self.error = str(getattr(error, 'orig', None) or error)

    def came_online(self):
        if not self.online and self.seeded:
            logger.info("Store reachable again")
        self.online = True
        self.error = None


def store_status(app=None):
    app = app or current_app
    return app.extensions.setdefault('storefront_store', StoreStatus())


def bootstrap():
    """
    Creates the tables and seeds default data into empty tables:
    one admin account and the demo catalog.
    Returns (accounts_created, products_created).

    Requires an active app context.
    """
    db.create_all()

    accounts_created = 0
    if db.session.query(Account.id).first() is None:
        admin = Account(username=current_app.config['ADMIN_USERNAME'], role=ROLE_ADMIN)
        admin.set_password(current_app.config['ADMIN_PASSWORD'])
        db.session.add(admin)
        accounts_created = 1

    products_created = 0
    if db.session.query(Product.id).first() is None:
        db.session.add_all([
            Product(name=name, price=price, category=category, image=image)
            for name, price, category, image in DEMO_PRODUCTS
        ])
        products_created = len(DEMO_PRODUCTS)

    db.session.commit()
    return accounts_created, products_created


def ensure_bootstrapped(app):
    """
    Runs bootstrap() until it succeeds once for this app.
    A failure leaves the store offline; the next request tries again.
    """
    status = store_status(app)
    if status.seeded:
        return status

    with _bootstrap_lock:
        if status.seeded:
            return status
        try:
            accounts, products = bootstrap()
        except SQLAlchemyError as e:
            db.session.rollback()
            status.went_offline(e)
            logger.error("Bootstrap failed: %s", status.error)
            return status

        status.came_online()
        status.seeded = True
        if accounts or products:
            logger.info("Seeded %d account(s) and %d product(s)", accounts, products)
    return status
