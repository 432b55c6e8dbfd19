from flask_sqlalchemy import SQLAlchemy

# Initialize extensions
db = SQLAlchemy()

def init_app(app):
    """Initialize all extensions with the app."""
    db.init_app(app)
