# storefront/errors.py


class StorefrontError(Exception):
    """Base class for errors handled at the request boundary."""

    message = 'Storefront error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message


class StoreUnavailable(StorefrontError):
    message = 'Database offline. Login unavailable.'


class InvalidCredentials(StorefrontError):
    # One message for unknown user and wrong password
    message = 'Invalid credentials!'


class ProductNotFound(StorefrontError):
    message = 'Product not found'

    def __init__(self, product_id):
        super().__init__(f'Product {product_id} not found')
        self.product_id = product_id


class InvalidField(StorefrontError):
    """A request field is missing or not in the expected format."""

    def __init__(self, field, raw=None):
        super().__init__(f"Invalid value for '{field}': {raw!r}")
        self.field = field
        self.raw = raw
