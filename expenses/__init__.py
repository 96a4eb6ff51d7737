from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_wtf.csrf import CSRFProtect
from config import Config

# -----------------------------------------------------------
# Global extensions
# -----------------------------------------------------------

db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()


# -----------------------------------------------------------
# Application factory
# -----------------------------------------------------------

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Models must be registered on the metadata before any table is used
    from expenses.models import expense, expense_type, location  # noqa: F401

    from expenses.main import bp as main_bp
    app.register_blueprint(main_bp)

    from expenses import commands
    commands.init_app(app)

    from . import context_processors
    app.context_processor(context_processors.inject_config)

    app.logger.debug('Application created with database %s', app.config['SQLALCHEMY_DATABASE_URI'])
    return app
