# app/__init__.py

# =====================================================================================
# 1. Environment variables (loaded first)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. Module imports
# =====================================================================================
import os
import time
import logging
from flask import Flask, jsonify, request, g
from marshmallow import ValidationError
from flask_jwt_extended import JWTManager
from werkzeug.exceptions import HTTPException

# - Configuration / errors
from app.core.config import config_by_name
from app.core.exceptions import AppError, flatten_validation_messages

# - API blueprints
from app.api.auth.routes import auth_bp
from app.api.users.routes import users_bp
from app.api.pets.routes import pets_bp
from app.api.shelters.routes import shelters_bp
from app.api.adoption_requests.routes import adoption_requests_bp
from app.api.lost_found.routes import lost_found_bp
from app.api.donations.routes import donations_bp

# - Services
from app.services.store import create_store
from app.services.seed import seed_demo_data
from app.api.auth.services import AuthService
from app.api.users.services import UserService
from app.api.pets.services import PetService
from app.api.shelters.services import ShelterService
from app.api.adoption_requests.services import AdoptionRequestService
from app.api.lost_found.services import LostFoundService
from app.api.donations.services import DonationService


def _error(error_code: str, message: str, status_code: int):
    return jsonify({"error_code": error_code, "message": message}), status_code


def _init_firebase(app: Flask) -> None:
    """Initializes firebase_admin once per process; only needed for the Firestore store."""
    import firebase_admin
    from firebase_admin import credentials

    if firebase_admin._apps:
        return
    cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
    if cred_path:
        if not os.path.exists(cred_path):
            raise FileNotFoundError(f"Firebase credentials file not found: {cred_path}")
        firebase_admin.initialize_app(credentials.Certificate(cred_path))
    else:
        # Application default credentials (GOOGLE_APPLICATION_CREDENTIALS, emulator, GCP runtime)
        firebase_admin.initialize_app()


def _register_jwt_callbacks(jwt: JWTManager, app: Flask) -> None:
    @jwt.user_lookup_loader
    def load_user(_jwt_header, jwt_data):
        return app.services['auth'].get_user(int(jwt_data['sub']))

    @jwt.token_in_blocklist_loader
    def check_if_token_revoked(_jwt_header, jwt_payload):
        return app.services['auth'].is_token_revoked(jwt_payload)

    @jwt.unauthorized_loader
    def missing_token(reason):
        return _error("UNAUTHORIZED", "Authentication required", 401)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _error("UNAUTHORIZED", f"Invalid token: {reason}", 401)

    @jwt.expired_token_loader
    def expired_token(_jwt_header, _jwt_payload):
        return _error("UNAUTHORIZED", "Token has expired", 401)

    @jwt.revoked_token_loader
    def revoked_token(_jwt_header, _jwt_payload):
        return _error("UNAUTHORIZED", "Token has been revoked", 401)

    @jwt.needs_fresh_token_loader
    def stale_token(_jwt_header, _jwt_payload):
        return _error("UNAUTHORIZED", "Fresh token required", 401)

    @jwt.user_lookup_error_loader
    def unknown_user(_jwt_header, _jwt_payload):
        return _error("UNAUTHORIZED", "User no longer exists", 401)


def create_app(config_name=None):
    """
    Flask application factory.

    config_name: 'development' | 'testing' | 'production'; defaults to FLASK_ENV.
    """
    # =====================================================================================
    # 3. Flask app and base configuration
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    if config_name not in config_by_name:
        raise ValueError(f"Unknown configuration: {config_name}")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # Required environment variables
    if config_name == 'production' and not app.config.get('JWT_SECRET_KEY'):
        raise ValueError("JWT_SECRET_KEY must be set in production")

    if not app.debug and not app.testing:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    # =====================================================================================
    # 4. Extensions and external services
    # =====================================================================================
    jwt = JWTManager(app)

    if app.config['STORAGE_BACKEND'] == 'firestore':
        _init_firebase(app)

    # =====================================================================================
    # 5. Service instances stored on 'app.services' (dependency injection)
    # =====================================================================================
    store = create_store(app.config['STORAGE_BACKEND'])
    app.services = {'store': store}
    logging.info(f"Store initialized ({app.config['STORAGE_BACKEND']})")

    app.services['auth'] = AuthService(store)
    app.services['users'] = UserService(store)
    app.services['shelters'] = ShelterService(store)
    app.services['pets'] = PetService(store)
    app.services['adoption_requests'] = AdoptionRequestService(store)
    app.services['lost_found'] = LostFoundService(store)
    app.services['donations'] = DonationService(store)

    _register_jwt_callbacks(jwt, app)

    # =====================================================================================
    # 6. Blueprints
    # =====================================================================================
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(pets_bp, url_prefix='/api/pets')
    app.register_blueprint(shelters_bp, url_prefix='/api/shelters')
    app.register_blueprint(adoption_requests_bp, url_prefix='/api/adoption-requests')
    app.register_blueprint(lost_found_bp, url_prefix='/api/lost-found-pets')
    app.register_blueprint(donations_bp, url_prefix='/api/donations')

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({"status": "ok"}), 200

    # =====================================================================================
    # 7. Global error handlers
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {
            "error_code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "errors": flatten_validation_messages(err.messages),
        }
        return jsonify(response), 400

    @app.errorhandler(AppError)
    def handle_app_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        error_code = (err.name or "HTTP_ERROR").upper().replace(' ', '_')
        return _error(error_code, err.description or err.name, err.code or 500)

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # Anything not handled above
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return _error("INTERNAL_SERVER_ERROR", "An unexpected server error occurred", 500)

    # =====================================================================================
    # 8. Request logging
    # =====================================================================================
    @app.before_request
    def start_timer():
        g.request_started_at = time.perf_counter()

    @app.after_request
    def log_request(response):
        if request.path.startswith('/api'):
            started_at = g.get('request_started_at')
            elapsed_ms = (time.perf_counter() - started_at) * 1000 if started_at else 0.0
            logging.info(f"{request.method} {request.path} {response.status_code} in {elapsed_ms:.0f}ms")
        return response

    # =====================================================================================
    # 9. Demo data and return
    # =====================================================================================
    if app.config.get('SEED_DEMO_DATA'):
        seed_demo_data(app.services)

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
