from flask import Blueprint

# Create blueprint
moods_bp = Blueprint('moods', __name__)

# Import routes after creating the blueprint to avoid circular imports
from . import routes  # noqa
