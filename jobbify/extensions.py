from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager

"""
Flask Extensions - Initialized here, configured in jobbify/__init__.py

Extensions are created before the app and bound in create_app() so models,
services and tests can import them without circular imports.
"""
# Database ORM
# Usage: from jobbify.extensions import db

db = SQLAlchemy()

# Bearer tokens for the API
# Usage: from jobbify.extensions import jwt

jwt = JWTManager()
