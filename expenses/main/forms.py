from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SelectField, SubmitField
from wtforms.validators import DataRequired, Length


class ExpenseForm(FlaskForm):
    # Amount, comment and date are checked by Expense.create so the errors
    # come back attached to the field that caused them
    date = StringField('Date', render_kw={'placeholder': 'YYYY-MM-DD HH:MM:SS'})
    typeid = SelectField('Type', coerce=int, validators=[DataRequired()])
    amount = StringField('Amount', render_kw={'placeholder': '00.00'})
    locationid = SelectField('Location', coerce=int, validators=[DataRequired()])
    comment = TextAreaField('Comment', render_kw={'placeholder': 'Comment', 'rows': 3})
    submit = SubmitField('Insert')

    FIELD_NAMES = ('date', 'typeid', 'locationid', 'amount', 'comment')

    def field_data(self):
        """Mapping of the submitted values, without blank entries."""
        data = {name: self[name].data for name in self.FIELD_NAMES}
        return {name: value for name, value in data.items() if value not in (None, '')}


class LookupForm(FlaskForm):
    description = StringField('Description', validators=[DataRequired(), Length(max=255)])
    submit = SubmitField('Save')
