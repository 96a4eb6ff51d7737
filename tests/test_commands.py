from expenses.models.expense_type import Type
from expenses.models.location import Location


def test_init_db(app):
    result = app.test_cli_runner().invoke(args=['init-db'])
    assert 'Database tables created.' in result.output


def test_add_type_and_location(app, store):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['add-type', 'Fuel'])
    assert 'Type "Fuel" created with id 1.' in result.output
    result = runner.invoke(args=['add-location', 'Garage'])
    assert 'Location "Garage" created with id 1.' in result.output

    assert [t.description for t in Type.all(store)] == ['Fuel']
    assert [loc.description for loc in Location.all(store)] == ['Garage']


def test_add_type_rejects_blank_description(app, store):
    result = app.test_cli_runner().invoke(args=['add-type', '   '])
    assert 'Could not create type: Invalid description specified.' in result.output
    assert Type.all(store) == []
