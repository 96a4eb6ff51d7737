from datetime import datetime

from flask import current_app, g


def _plural(count, unit):
    return f'{count} {unit}' + ('' if count == 1 else 's')


class DateFormatter:
    """Turns raw store timestamps into display strings."""

    def __init__(self, store_format, display_format, now=datetime.now):
        self.store_format = store_format
        self.display_format = display_format
        self.now = now

    def current_date(self):
        return self.now().strftime(self.store_format)

    def format_date(self, raw, descriptive=True):
        if not raw:
            return ''
        try:
            moment = datetime.strptime(raw, self.store_format)
        except ValueError:
            return raw

        if descriptive:
            phrase = self._describe(self.now() - moment)
            if phrase:
                return phrase
        return moment.strftime(self.display_format)

    @staticmethod
    def _describe(delta):
        # Future dates and anything older than a week use the literal format
        if delta.total_seconds() < 0 or delta.days >= 7:
            return None
        seconds = int(delta.total_seconds())
        if seconds < 60:
            return 'just now'
        if seconds < 3600:
            return _plural(seconds // 60, 'minute') + ' ago'
        if delta.days == 0:
            return _plural(seconds // 3600, 'hour') + ' ago'
        if delta.days == 1:
            return 'yesterday'
        return _plural(delta.days, 'day') + ' ago'


def get_formatter():
    if 'formatter' not in g:
        g.formatter = DateFormatter(
            current_app.config['DB_DATE_FORMAT'],
            current_app.config['DISPLAY_DATE_FORMAT'],
        )
    return g.formatter
