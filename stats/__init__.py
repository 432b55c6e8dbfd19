from flask import Blueprint

# Create blueprint
stats_bp = Blueprint('stats', __name__)

# Import routes after creating the blueprint to avoid circular imports
from . import routes  # noqa
