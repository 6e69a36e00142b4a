from flask import request, redirect, url_for

from .. import auth
from ..errors import InvalidCredentials, StoreUnavailable
from .general_routes import render_login


def handle_login():
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    try:
        landing = auth.login(username, password)
    except (InvalidCredentials, StoreUnavailable) as e:
        return render_login(error=e.message)

    return redirect(url_for('index', page=landing))


def handle_logout():
    auth.logout()
    return redirect(url_for('index', page='home'))
