from storefront import create_app, db
from storefront.models import Account, Product
from storefront.seed import bootstrap

app = create_app()
with app.app_context():
    accounts, products = bootstrap()
    print(f"Seeded {accounts} account(s) and {products} product(s).")
    print(f"Store holds {db.session.query(Account).count()} account(s) "
          f"and {db.session.query(Product).count()} product(s).")
