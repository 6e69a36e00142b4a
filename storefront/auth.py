# storefront/auth.py

import logging
from collections import namedtuple

from flask import session
from flask_login import current_user, login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError

from . import db
from .errors import InvalidCredentials, StoreUnavailable
from .models import Account, ROLE_ADMIN
from .seed import store_status

logger = logging.getLogger(__name__)

Identity = namedtuple('Identity', ['username', 'role'])


def authenticate(username, password):
    """
    Returns the Account matching username and password.
    Unknown users and wrong passwords raise the same InvalidCredentials.
    """
    status = store_status()
    if not status.seeded:
        raise StoreUnavailable()
    try:
        account = Account.query.filter_by(username=username).first()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.warning("Account lookup failed: %s", e)
        status.went_offline(e)
        raise StoreUnavailable() from e
    status.came_online()

    if not account or not account.check_password(password):
        raise InvalidCredentials()
    return account


def login(username, password):
    """Logs the account in and returns the landing page name."""
    try:
        account = authenticate(username, password)
    except InvalidCredentials:
        logger.info("Failed login for %r", username)
        raise

    login_user(account)
    # Kept in the session so the identity survives a store outage
    session['username'] = account.username
    session['role'] = account.role
    logger.info("User %r logged in as %s", account.username, account.role)
    return 'admin' if account.is_admin else 'home'


def logout():
    if current_user.is_authenticated:
        logger.info("User %r logged out", current_user.username)
    elif session.get('username'):
        logger.info("User %r logged out", session['username'])

    # Drops the whole session, the cart with it
    logout_user()
    session.clear()


def current_identity():
    """
    The logged-in visitor, or None.
    Falls back to the session copy when the account can't be loaded
    because the store is offline.
    """
    if current_user.is_authenticated:
        return Identity(current_user.username, current_user.role)
    if session.get('_user_id') and session.get('role') and not store_status().online:
        return Identity(session.get('username'), session['role'])
    return None


def is_admin(identity=None):
    identity = identity or current_identity()
    return identity is not None and identity.role == ROLE_ADMIN
