from flask import Flask
from .config import Config
from .extensions import cors, init_store
from .errors import register_error_handlers
from .middleware import MethodOverrideMiddleware


def create_app(config_class: type[Config] = Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # Forms tunnel PUT/DELETE through POST ?_method=
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # Extensions
    cors.init_app(app)
    init_store(app)

    # Errors
    register_error_handlers(app)

    # Blueprints
    from .routes.pages import bp as pages_bp
    from .routes.records_api import bp as records_api
    from .routes.singletons_api import bp as singletons_api

    app.register_blueprint(pages_bp)
    app.register_blueprint(records_api)
    app.register_blueprint(singletons_api)

    return app
