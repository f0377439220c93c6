import logging
import time

from flask import Flask, jsonify, redirect, render_template, request, url_for
from flask_migrate import Migrate
from sqlalchemy.exc import OperationalError

from .extensions import db, login_manager, rq

migrate = Migrate(directory='alembic')


def create_app(config_object='config.Config'):
    """Application factory.

    ``config_object`` is anything ``app.config.from_object`` accepts; tests
    pass ``config.TestConfig``.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.setdefault('STARTED_AT', time.time())
    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    rq.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        from .models.user import User
        return User.query.get(int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        # browsers get the login page, API clients a JSON 401
        if request.accept_mimetypes.accept_html and not request.is_json:
            return redirect(url_for('auth.login', next=request.path))
        return jsonify({"error": "authentication required"}), 401

    @app.errorhandler(OperationalError)
    def database_unavailable(e):
        app.logger.exception('Database error while handling %s %s', request.method, request.path)
        db.session.rollback()
        return jsonify({"error": True, "message": "Database not connected"}), 503

    from .blueprints.auth import bp as auth_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")

    from .blueprints.vendors import bp as vendors_bp
    app.register_blueprint(vendors_bp, url_prefix="/vendors")

    from .blueprints.evaluations import bp as evaluations_bp
    app.register_blueprint(evaluations_bp, url_prefix="/evaluations")

    from .blueprints.evaluators import bp as evaluators_bp
    app.register_blueprint(evaluators_bp, url_prefix="/evaluators")

    from .blueprints.documents import bp as documents_bp
    app.register_blueprint(documents_bp, url_prefix="/documents")

    from .blueprints.chat import bp as chat_bp
    app.register_blueprint(chat_bp, url_prefix="/chat")

    from .blueprints.admin import bp as admin_bp
    app.register_blueprint(admin_bp, url_prefix="/admin")

    from .api.health import bp as health_bp
    app.register_blueprint(health_bp)

    from .api.deployment import bp as deployment_bp
    app.register_blueprint(deployment_bp)

    @app.get('/')
    def index():
        from flask_login import current_user
        if not current_user.is_authenticated:
            return redirect(url_for('auth.login'))

        from .models.vendor import Vendor
        from .models.evaluator import Evaluator
        from .blueprints.vendors.routes import evaluation_summary
        from .services.scoring import format_score

        vendors = Vendor.query.order_by(Vendor.name.asc()).all()
        summaries = {v.id: evaluation_summary(v) for v in vendors}
        evaluator = Evaluator.query.filter_by(user_id=current_user.id).first()
        return render_template('home.html', vendors=vendors, summaries=summaries,
                               evaluator=evaluator, format_score=format_score)

    return app
