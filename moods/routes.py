from flask import request, jsonify, current_app
from flasgger import swag_from
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from journal.models import Mood
from . import moods_bp


class MoodInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=50)
    emoji: str = Field(min_length=1, max_length=16)
    color: str = Field(min_length=1, max_length=20)


@moods_bp.route('', methods=['GET'])
@swag_from({
    'tags': ['Moods'],
    'description': 'List all moods',
    'responses': {
        '200': {
            'description': 'List of moods',
            'schema': {'type': 'array', 'items': {'$ref': '#/definitions/Mood'}}
        },
        '500': {'description': 'Failed to fetch moods', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def get_moods():
    """List every mood an entry can be given."""
    try:
        moods = Mood.query.order_by(Mood.id).all()
    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching moods: {str(e)}')
        return jsonify({'error': 'Failed to fetch moods'}), 500

    return jsonify([mood.to_dict() for mood in moods])

@moods_bp.route('', methods=['POST'])
@swag_from({
    'tags': ['Moods'],
    'description': 'Create a mood',
    'parameters': [{
        'name': 'body',
        'in': 'body',
        'required': True,
        'schema': {
            'type': 'object',
            'properties': {
                'name': {'type': 'string', 'example': 'Happy'},
                'emoji': {'type': 'string', 'example': '😊'},
                'color': {'type': 'string', 'example': '#4CAF50'}
            },
            'required': ['name', 'emoji', 'color']
        }
    }],
    'responses': {
        '201': {
            'description': 'Mood created successfully',
            'schema': {'$ref': '#/definitions/Mood'}
        },
        '400': {'description': 'Invalid input'},
        '500': {'description': 'Failed to create mood', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def create_mood():
    """Create a mood."""
    try:
        data = MoodInput.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return jsonify({'error': 'Invalid input',
                        'details': exc.errors(include_url=False, include_context=False)}), 400

    try:
        mood = Mood(name=data.name, emoji=data.emoji, color=data.color)
        db.session.add(mood)
        db.session.commit()
        return jsonify(mood.to_dict()), 201
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error creating mood: {str(e)}')
        return jsonify({'error': 'Failed to create mood'}), 500
