from flask import Blueprint

# Create blueprint
tags_bp = Blueprint('tags', __name__)

# Import routes after creating the blueprint to avoid circular imports
from . import routes  # noqa
