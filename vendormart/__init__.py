"""Initialize the Flask app and its extensions."""

import os

import firebase_admin
from firebase_admin import credentials
from flask import Flask, g, session
from werkzeug.middleware.proxy_fix import ProxyFix

from .extensions import csrf


def _env_flag(name, default):
    return (os.environ.get(name) or default).lower() in ["true", "1", "t"]


def _init_firebase(app):
    """Initialize the Firebase Admin SDK from the best available credentials."""
    cred = None
    project_id = None
    cred_info = {}

    # First, try to load from environment variable (for production)
    cred_json = os.environ.get("FIREBASE_CREDENTIALS_JSON")
    if cred_json:
        import json

        try:
            cred_info = json.loads(cred_json)
            project_id = cred_info.get("project_id")
            cred = credentials.Certificate(cred_info)
        except (json.JSONDecodeError, ValueError) as e:
            app.logger.error(f"Error parsing FIREBASE_CREDENTIALS_JSON: {e}")

    # If env var fails or is not present, try loading from file (for local dev)
    if not cred:
        cred_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)), "firebase_credentials.json"
        )
        if os.path.exists(cred_path):
            import json

            try:
                with open(cred_path, "r") as f:
                    cred_info = json.load(f)
                project_id = cred_info.get("project_id")
                cred = credentials.Certificate(cred_path)
            except (json.JSONDecodeError, ValueError) as e:
                app.logger.error(f"Error loading credentials from file: {e}")

    # If both methods fail, fallback to default credentials
    if not cred:
        try:
            cred = credentials.ApplicationDefault()
            project_id = os.environ.get("FIREBASE_PROJECT_ID")
        except Exception as e:
            app.logger.error(
                f"Could not find any valid credentials (env, file, or default): {e}"
            )

    if cred and not firebase_admin._apps:
        try:
            firebase_options = {}
            if project_id:
                firebase_options["projectId"] = project_id
            firebase_admin.initialize_app(cred, firebase_options)
        except ValueError:
            # This can happen if the app is already initialized, which is fine.
            app.logger.info("Firebase app already initialized.")


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        SNAPSHOT_BACKEND=os.environ.get("SNAPSHOT_BACKEND") or "file",
        SNAPSHOT_FOLDER=os.environ.get("SNAPSHOT_FOLDER")
        or os.path.join(app.instance_path, "snapshots"),
        SEED_DEMO_DATA=_env_flag("SEED_DEMO_DATA", "true"),
    )

    if test_config:
        app.config.update(test_config)

    # Initialize Firebase Admin SDK only if not in testing mode
    if not app.config.get("TESTING"):
        _init_firebase(app)

    # Ensure the instance folder exists
    try:
        os.makedirs(app.instance_path)
    except OSError:
        pass

    # Initialize extensions
    csrf.init_app(app)

    # Register blueprints
    from . import auth as auth_bp

    app.register_blueprint(auth_bp.bp)

    from . import groups as groups_bp

    app.register_blueprint(groups_bp.bp)

    from . import notifications as notifications_bp

    app.register_blueprint(notifications_bp.bp)

    from . import products as products_bp

    app.register_blueprint(products_bp.bp)

    from . import orders as orders_bp

    app.register_blueprint(orders_bp.bp)

    from . import dashboard as dashboard_bp

    app.register_blueprint(dashboard_bp.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    # Restore the marketplace stores from their snapshots
    from .state import init_state

    init_state(app)

    @app.before_request
    def load_logged_in_user():
        """If a user_id is in the session, expose the user on g."""
        user_id = session.get("user_id")
        g.user = None
        if user_id is not None:
            g.user = {"uid": user_id, "name": session.get("name", "")}

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    return app
