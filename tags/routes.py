from flask import jsonify, current_app
from flasgger import swag_from
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from journal.models import Tag, entry_tags
from . import tags_bp

@tags_bp.route('', methods=['GET'])
@swag_from({
    'tags': ['Tags'],
    'description': 'List all tags with the number of entries using each',
    'responses': {
        '200': {
            'description': 'List of tags ordered by name',
            'schema': {'type': 'array', 'items': {'$ref': '#/definitions/TagUsage'}}
        },
        '500': {'description': 'Failed to fetch tags', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def get_tags():
    """List tags with their usage counts."""
    try:
        rows = db.session.execute(
            db.select(Tag, func.count(entry_tags.c.entry_id))
            .outerjoin(entry_tags, entry_tags.c.tag_id == Tag.id)
            .group_by(Tag.id)
            .order_by(Tag.name)
        ).all()
    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching tags: {str(e)}')
        return jsonify({'error': 'Failed to fetch tags'}), 500

    return jsonify([dict(tag.to_dict(), count=count) for tag, count in rows])
