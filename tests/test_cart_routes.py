from .conftest import cart_post


def test_add_returns_running_count(client):
    for expected in range(1, 4):
        body = cart_post(client, 'add', id='1').get_json()
        assert body == {'success': True, 'cart_count': expected}


def test_add_remove_then_get_cart_is_empty(client):
    cart_post(client, 'add', id='2')
    assert cart_post(client, 'remove', id='2').get_json() == {'success': True, 'cart_count': 0}

    body = cart_post(client, 'get_cart').get_json()
    assert body == {'items': {}, 'total': 0.0, 'cart_count': 0}


def test_remove_id_never_added_succeeds(client):
    cart_post(client, 'add', id='1')
    body = cart_post(client, 'remove', id='4').get_json()
    assert body == {'success': True, 'cart_count': 1}


def test_update_qty_sets_existing_entry(client):
    cart_post(client, 'add', id='1')
    body = cart_post(client, 'update_qty', id='1', qty='4').get_json()
    assert body == {'success': True, 'cart_count': 4}


def test_update_qty_zero_removes_entry(client):
    cart_post(client, 'add', id='1')
    cart_post(client, 'add', id='3')
    body = cart_post(client, 'update_qty', id='1', qty='0').get_json()
    assert body == {'success': True, 'cart_count': 1}
    assert list(cart_post(client, 'get_cart').get_json()['items']) == ['3']


def test_update_qty_on_absent_id_is_noop(client):
    body = cart_post(client, 'update_qty', id='2', qty='5').get_json()
    assert body == {'success': True, 'cart_count': 0}
    assert cart_post(client, 'get_cart').get_json()['items'] == {}


def test_get_cart_returns_product_fields_and_exact_total(client):
    for _ in range(3):
        cart_post(client, 'add', id='1')
    cart_post(client, 'add', id='4')

    body = cart_post(client, 'get_cart').get_json()
    watch = body['items']['1']
    assert watch['name'] == 'Neon Chrono Watch'
    assert watch['category'] == 'Accessories'
    assert watch['image'].startswith('https://')
    assert watch['price'] == 299.0
    assert watch['quantity'] == 3
    assert watch['subtotal'] == 897.0
    assert body['items']['4']['subtotal'] == 129.0
    assert body['total'] == 1026.0
    assert body['cart_count'] == 4


def test_add_unknown_product_fails(client):
    cart_post(client, 'add', id='1')
    resp = cart_post(client, 'add', id='999')
    assert resp.status_code == 404
    assert resp.get_json() == {'success': False, 'cart_count': 1}


def test_malformed_id_is_rejected(client):
    resp = cart_post(client, 'add', id='abc')
    assert resp.status_code == 400
    assert resp.get_json()['success'] is False
    assert cart_post(client, 'get_cart').get_json()['cart_count'] == 0


def test_missing_qty_is_rejected(client):
    cart_post(client, 'add', id='1')
    resp = cart_post(client, 'update_qty', id='1')
    assert resp.status_code == 400
    assert cart_post(client, 'get_cart').get_json()['cart_count'] == 1


def test_unknown_action_is_rejected(client):
    resp = cart_post(client, 'checkout')
    assert resp.status_code == 400
    assert resp.get_json()['success'] is False


def test_carts_are_per_session(app):
    first = app.test_client()
    second = app.test_client()
    cart_post(first, 'add', id='1')
    cart_post(first, 'add', id='1')
    assert cart_post(second, 'get_cart').get_json()['cart_count'] == 0
    assert cart_post(first, 'get_cart').get_json()['cart_count'] == 2
