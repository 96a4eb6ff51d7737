from flask import render_template, redirect, url_for, flash, current_app

from expenses.main import bp
from expenses.main.forms import ExpenseForm, LookupForm
from expenses.errors import NotFound, ValidationError
from expenses.models.expense import Expense
from expenses.models.expense_type import Type
from expenses.models.location import Location
from expenses.store import get_store
from expenses.utils.dates import get_formatter


def _describe(resolve, label, expense):
    try:
        return resolve().description
    except NotFound:
        current_app.logger.warning('Expense %s points to a missing %s', expense.id, label)
        return 'Unknown'


@bp.route('/')
def index():
    return redirect(url_for('main.list_expenses'))


# -----------------------------------------------------------------------------
# --- EXPENSES ---
# -----------------------------------------------------------------------------
@bp.route('/expenses')
def list_expenses():
    store = get_store()
    types = {t.id: t.description for t in Type.all(store)}
    locations = {loc.id: loc.description for loc in Location.all(store)}
    rows = [
        (e, types.get(e.typeid, 'Unknown'), locations.get(e.locationid, 'Unknown'))
        for e in Expense.all(store)
    ]
    return render_template('main/expenses.html', rows=rows, formatter=get_formatter(),
                           descriptive=current_app.config['DESCRIPTIVE_DATES'], title='Expenses')


@bp.route('/expenses/new', methods=['GET', 'POST'])
def new_expense():
    store = get_store()
    types = Type.all(store)
    locations = Location.all(store)
    if not types:
        flash('Add at least one type before recording expenses.', 'warning')
        return redirect(url_for('main.list_types'))
    if not locations:
        flash('Add at least one location before recording expenses.', 'warning')
        return redirect(url_for('main.list_locations'))

    form = ExpenseForm()
    form.typeid.choices = [(t.id, t.description) for t in types]
    form.locationid.choices = [(loc.id, loc.description) for loc in locations]

    if form.validate_on_submit():
        result = Expense.create(store, form.field_data())
        if result.ok:
            store.commit()
            flash('Expense recorded.', 'success')
            return redirect(url_for('main.view_expense', expense_id=result.value.id))

        store.rollback()
        error = result.error
        if isinstance(error, ValidationError) and error.field in form:
            form[error.field].errors.append(error.message)
        else:
            current_app.logger.error('Could not record expense: %s', error)
            flash('The expense could not be saved. Please try again.', 'danger')
    elif not form.is_submitted():
        form.date.data = get_formatter().current_date()

    selected_type = form.typeid.data or types[0].id
    selected_location = form.locationid.data or locations[0].id
    return render_template('main/new_expense.html', form=form, types=types, locations=locations,
                           selected_type=selected_type, selected_location=selected_location,
                           title='New expense')


@bp.route('/expenses/<int:expense_id>')
def view_expense(expense_id):
    expense = Expense(get_store(), expense_id).load()
    type_description = _describe(expense.get_type, 'type', expense)
    location_description = _describe(expense.get_location, 'location', expense)
    return render_template('main/expense.html', expense=expense,
                           type_description=type_description,
                           location_description=location_description,
                           formatter=get_formatter(),
                           descriptive=current_app.config['DESCRIPTIVE_DATES'],
                           title=f'Expense #{expense.id}')


# -----------------------------------------------------------------------------
# --- TYPES AND LOCATIONS ---
# -----------------------------------------------------------------------------
def _lookup_page(entity, title, endpoint):
    store = get_store()
    form = LookupForm()
    if form.validate_on_submit():
        result = entity.create(store, {'description': form.description.data})
        if result.ok:
            store.commit()
            flash(f'"{result.value.description}" added.', 'success')
            return redirect(url_for(endpoint))
        store.rollback()
        form.description.errors.append(result.error.message)
    return render_template('main/lookups.html', items=entity.all(store), form=form,
                           title=title, endpoint=endpoint)


@bp.route('/types', methods=['GET', 'POST'])
def list_types():
    return _lookup_page(Type, 'Types', 'main.list_types')


@bp.route('/locations', methods=['GET', 'POST'])
def list_locations():
    return _lookup_page(Location, 'Locations', 'main.list_locations')


# -----------------------------------------------------------------------------
# --- ERRORS ---
# -----------------------------------------------------------------------------
@bp.app_errorhandler(NotFound)
def record_not_found(error):
    current_app.logger.info('%s', error)
    return render_template('main/404.html', title='Not found'), 404


@bp.app_errorhandler(404)
def page_not_found(error):
    return render_template('main/404.html', title='Not found'), 404
