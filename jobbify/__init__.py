from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from jobbify.config import Config
from jobbify.errors import ErrorKind, error_response, register_error_handlers
from jobbify.extensions import db, jwt
from jobbify.celery_app import init_celery

migrate = Migrate()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    CORS(app)

    # Health check endpoint - register early so it's always available
    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({"status": "ok"}), 200

    # Import models so metadata and migrations see every table
    from jobbify import models  # noqa: F401

    # Register blueprints
    from jobbify.api import auth, users, clients, staffs, roles
    app.register_blueprint(auth.bp, url_prefix='/auth')
    app.register_blueprint(users.bp)
    app.register_blueprint(clients.bp, url_prefix='/clients')
    app.register_blueprint(staffs.bp, url_prefix='/staffs')
    app.register_blueprint(roles.bp)

    register_error_handlers(app)

    # JWT error handlers for clearer responses
    @jwt.unauthorized_loader
    def jwt_missing_token(err):
        return error_response(ErrorKind.UNAUTHENTICATED, "Unauthenticated.")

    @jwt.invalid_token_loader
    def jwt_invalid_token(err):
        return error_response(ErrorKind.UNAUTHENTICATED, "Invalid token.")

    @jwt.expired_token_loader
    def jwt_expired_token(header, payload):
        return error_response(ErrorKind.UNAUTHENTICATED, "Token expired.")

    from jobbify.seed import seed_data_command
    app.cli.add_command(seed_data_command)

    init_celery(app)

    return app
