# storefront/routes/storefront_routes.py
# Every request enters through '/' and is dispatched on method, 'action' and 'page'.

from flask import request, jsonify

from .auth_routes import handle_login, handle_logout
from .cart_routes import CART_ACTIONS, handle_cart_action
from .general_routes import render_home, render_login
from .admin_routes import render_admin


def register_storefront_routes(app):

    @app.route('/', methods=['GET', 'POST'])
    def index():
        action = request.form.get('action') if request.method == 'POST' else None

        if action == 'login':
            return handle_login()

        if 'logout' in request.args:
            return handle_logout()

        if action in CART_ACTIONS:
            return handle_cart_action(action)
        if action:
            return jsonify(success=False, error=f"Unknown action '{action}'"), 400

        page = request.args.get('page', 'home')
        if page == 'login':
            return render_login()
        if page == 'admin':
            return render_admin()
        return render_home()
