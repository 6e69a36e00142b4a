from flask import render_template, redirect, url_for

from ..auth import current_identity, is_admin
from ..catalog import list_products
from ..seed import store_status


def render_admin():
    """
    Admin dashboard: store status, current account and the catalog.
    Anyone but a logged-in admin is sent to the login page.
    """
    identity = current_identity()
    if not is_admin(identity):
        return redirect(url_for('index', page='login'))

    return render_template(
        'admin.html',
        products=list_products(),
        store=store_status(),
        user=identity,
    )
