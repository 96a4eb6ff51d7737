from flask import current_app


def inject_config():
    return {
        'app_name': current_app.config.get('APP_NAME', 'Expenses'),
        'currency_symbol': current_app.config.get('CURRENCY_SYMBOL', '£'),
    }
