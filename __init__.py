# member_registration/__init__.py
from flask import Flask
from .extensions import db, migrate
from .config import get_config
from .blueprints import register_blueprints

def create_app(config: str | None = None):
    app = Flask(__name__)
    app.config.from_object(get_config(config))
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)
    migrate.init_app(app, db)

    register_blueprints(app)
    return app
