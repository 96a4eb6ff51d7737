from expenses.models.expense import Expense


def test_index_redirects_to_list(client):
    response = client.get('/')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/expenses')


def test_new_expense_requires_lookups(client):
    response = client.get('/expenses/new')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/types')


def test_new_expense_form_lists_lookups(client, lookups):
    response = client.get('/expenses/new')
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert 'name="typeid"' in body
    assert 'Groceries' in body
    assert 'Tesco' in body


def test_post_new_expense(client, store, lookups):
    response = client.post('/expenses/new', data={
        'date': '', 'typeid': '1', 'locationid': '2', 'amount': '12.50', 'comment': 'Milk & eggs',
    })
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/expenses/1')

    expense = Expense(store, 1).load()
    assert expense.amount == '12.50'
    assert expense.comment == 'Milk & eggs'

    detail = client.get('/expenses/1').get_data(as_text=True)
    assert 'Groceries' in detail
    assert 'Online' in detail
    assert 'Milk &amp; eggs' in detail


def test_post_invalid_amount_shows_field_error(client, store, lookups):
    response = client.post('/expenses/new', data={
        'typeid': '1', 'locationid': '1', 'amount': '-5',
    })
    assert response.status_code == 200
    assert 'Invalid amount specified.' in response.get_data(as_text=True)
    assert Expense.all(store) == []


def test_post_blank_amount_is_missing(client, lookups):
    response = client.post('/expenses/new', data={
        'typeid': '1', 'locationid': '1', 'amount': '',
    })
    assert 'Field amount is required.' in response.get_data(as_text=True)


def test_post_bad_date_shows_field_error(client, lookups):
    response = client.post('/expenses/new', data={
        'typeid': '1', 'locationid': '1', 'amount': '1', 'date': '31/12/2024',
    })
    assert 'Invalid date specified.' in response.get_data(as_text=True)


def test_expense_list_shows_records(client, store, lookups):
    Expense.create(store, {'typeid': 2, 'locationid': 1, 'amount': '900'}).unwrap()
    store.commit()
    body = client.get('/expenses').get_data(as_text=True)
    assert 'Rent' in body
    assert '900.00' in body
    assert 'just now' in body


def test_unknown_expense_is_404(client):
    assert client.get('/expenses/999').status_code == 404
    assert client.get('/nowhere').status_code == 404


def test_dangling_reference_shows_unknown(client, store):
    Expense.create(store, {'typeid': 7, 'locationid': 8, 'amount': '1'}).unwrap()
    store.commit()
    response = client.get('/expenses/1')
    assert response.status_code == 200
    assert 'Unknown' in response.get_data(as_text=True)


def test_create_type_and_location(client):
    response = client.post('/types', data={'description': 'Fuel'})
    assert response.status_code == 302
    assert 'Fuel' in client.get('/types').get_data(as_text=True)

    response = client.post('/locations', data={'description': 'Garage'}, follow_redirects=True)
    assert response.status_code == 200
    assert 'Garage' in response.get_data(as_text=True)


def test_blank_lookup_is_rejected(client):
    response = client.post('/types', data={'description': ''})
    assert response.status_code == 200
    assert 'Nothing here yet.' in response.get_data(as_text=True)
