# storefront/__init__.py

from decimal import Decimal, ROUND_HALF_UP

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from sqlalchemy.exc import SQLAlchemyError

from .config import Config

# Extensions are created unbound and attached in create_app()
db = SQLAlchemy()
login_manager = LoginManager()


def money(value):
    """Round a price for display (two decimal places)."""
    if value is None:
        value = Decimal('0')
    return Decimal(value).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if isinstance(config_object, dict):
        app.config.update(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    db.init_app(app)
    login_manager.init_app(app)

    app.jinja_env.filters['money'] = money

    # The user loader needs the Account model
    from .models import Account
    from .seed import ensure_bootstrapped, store_status

    @login_manager.user_loader
    def load_user(user_id):
        status = store_status()
        try:
            account = db.session.get(Account, int(user_id))
        except SQLAlchemyError as e:
            # Store offline: auth.current_identity() falls back to the session
            db.session.rollback()
            app.logger.warning("Could not load account %s, store offline", user_id)
            status.went_offline(e)
            return None
        status.came_online()
        return account

    @app.context_processor
    def inject_identity():
        from .auth import current_identity
        return {'identity': current_identity()}

    with app.app_context():
        ensure_bootstrapped(app)

    @app.before_request
    def retry_bootstrap():
        ensure_bootstrapped(app)

    # Routes are registered last, after extensions and models exist
    from .routes import register_routes
    register_routes(app)

    return app
