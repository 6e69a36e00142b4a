# storefront/cart.py

from collections import namedtuple
from decimal import Decimal

from .errors import ProductNotFound

CART_KEY = 'cart'

CartItem = namedtuple('CartItem', ['product', 'quantity', 'subtotal'])
CartSnapshot = namedtuple('CartSnapshot', ['items', 'total', 'count'])


class SessionCart:
    """
    Cart kept in a session mapping as {product_id: quantity}.

    The session serializes to JSON, so ids are stored as strings
    and handed out as ints. Every stored quantity is >= 1.
    """

    def __init__(self, session):
        self.session = session

    def _load(self):
        return dict(self.session.get(CART_KEY, {}))  # {str(product_id): quantity}

    def _save(self, cart):
        # Reassigning marks a Flask session as modified
        self.session[CART_KEY] = cart

    def quantities(self):
        return {int(pid): qty for pid, qty in self._load().items()}

    @property
    def count(self):
        return sum(self._load().values())

    def add(self, product_id, catalog):
        """Adds one unit. `catalog` maps product ids to products."""
        if product_id not in catalog:
            raise ProductNotFound(product_id)
        cart = self._load()
        key = str(product_id)
        cart[key] = cart.get(key, 0) + 1
        self._save(cart)
        return self.count

    def remove(self, product_id):
        cart = self._load()
        if cart.pop(str(product_id), None) is not None:
            self._save(cart)
        return self.count

    def set_quantity(self, product_id, qty):
        # Only existing entries are updated; qty <= 0 removes
        cart = self._load()
        key = str(product_id)
        if qty <= 0:
            cart.pop(key, None)
        elif key in cart:
            cart[key] = qty
        self._save(cart)
        return self.count

    def snapshot(self, catalog):
        items = []
        total = Decimal('0.00')
        for product_id, qty in self.quantities().items():
            product = catalog.get(product_id)
            if product is None:
                continue
            subtotal = Decimal(product.price) * qty
            items.append(CartItem(product, qty, subtotal))
            total += subtotal
        return CartSnapshot(items, total, self.count)
