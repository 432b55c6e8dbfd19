import os
from flask import Flask
from app.config import config


def create_app(config_class=None):
    if config_class is None:
        config_class = config[os.getenv('FLASK_CONFIG', 'default')]

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    from app.extensions import db, init_app
    init_app(app)

    # Register blueprints
    from journal import journal_bp
    from moods import moods_bp
    from tags import tags_bp
    from stats import stats_bp

    app.register_blueprint(journal_bp, url_prefix='/api/journal')
    app.register_blueprint(moods_bp, url_prefix='/api/moods')
    app.register_blueprint(tags_bp, url_prefix='/api/tags')
    app.register_blueprint(stats_bp, url_prefix='/api/stats')

    # CLI commands
    from moods.commands import register_commands
    register_commands(app)

    # Initialize Swagger
    from docs.swagger_config import init_swagger
    init_swagger(app)

    # Create tables
    with app.app_context():
        db.create_all()

    # Simple root endpoint for quick check
    @app.route('/')
    def index():
        return {'message': 'Daybook Journal API is running', 'docs': '/apidocs/'}

    return app
