from flask import render_template, session

from ..cart import SessionCart
from ..catalog import list_products
from ..seed import store_status


def render_home():
    return render_template(
        'home.html',
        products=list_products(),
        cart_count=SessionCart(session).count,
        store=store_status(),
    )


def render_login(error=None):
    return render_template('login.html', error=error, store=store_status())
