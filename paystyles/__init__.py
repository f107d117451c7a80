from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_wtf.csrf import CSRFProtect
from config import Config, config_dict
import os
from logging.config import dictConfig
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration


db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()


def create_app(config_name=None):
    env = config_name or os.getenv('FLASK_ENV', 'development')
    config_class = config_dict.get(env, config_dict['development'])

    dictConfig(Config.LOGGING_CONFIG)

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Sentry in production only
    if env == 'production' and app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            traces_sample_rate=1.0,
        )

    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    from paystyles.admin import admin_bp
    app.register_blueprint(admin_bp)

    from paystyles.api import init_api
    init_api(app)

    from paystyles.commands import init_commands
    init_commands(app)

    app.logger.info(f"Payment form styles app created ({env})")
    return app
