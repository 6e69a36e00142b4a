# run.py

from storefront import create_app

app = create_app()

if __name__ == '__main__':
    # Tables and default data are created by create_app()
    app.run(debug=app.config['DEBUG'])
