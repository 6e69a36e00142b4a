import logging

from flask import request, jsonify, session

from .. import money
from ..cart import SessionCart
from ..catalog import products_by_id
from ..errors import InvalidField, ProductNotFound

logger = logging.getLogger(__name__)

CART_ACTIONS = ('add', 'remove', 'update_qty', 'get_cart')


def _int_field(name):
    raw = request.form.get(name)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidField(name, raw)


def _as_float(value):
    return float(money(value))


def _item_json(item):
    data = item.product.to_dict()
    data['price'] = _as_float(data['price'])
    data['quantity'] = item.quantity
    data['subtotal'] = _as_float(item.subtotal)
    return data


def handle_cart_action(action):
    """Runs one cart action against the caller's session and answers JSON."""
    cart = SessionCart(session)

    try:
        if action == 'add':
            product_id = _int_field('id')
            try:
                count = cart.add(product_id, products_by_id())
            except ProductNotFound as e:
                logger.info("Rejected add to cart: %s", e.message)
                return jsonify(success=False, cart_count=cart.count), 404
            return jsonify(success=True, cart_count=count)

        if action == 'remove':
            count = cart.remove(_int_field('id'))
            return jsonify(success=True, cart_count=count)

        if action == 'update_qty':
            product_id = _int_field('id')
            count = cart.set_quantity(product_id, _int_field('qty'))
            return jsonify(success=True, cart_count=count)

    except InvalidField as e:
        return jsonify(success=False, error=e.message), 400

    # get_cart
    snapshot = cart.snapshot(products_by_id())
    return jsonify(
        items={str(item.product.id): _item_json(item) for item in snapshot.items},
        total=_as_float(snapshot.total),
        cart_count=snapshot.count,
    )
