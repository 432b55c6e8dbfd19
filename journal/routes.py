from flask import request, jsonify, current_app
from flasgger import swag_from
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from .models import JournalEntry, Mood, Tag
from .schemas import MAX_ID, EntryFilter, JournalEntryInput, MarkdownPreview
from .filters import filter_entries
from .calendar_grid import build_month_grid
from .markdown import render_markdown
from .utils import get_timezone, local_date, local_today

# Create blueprint
from . import journal_bp

ENTRY_BODY = {
    'name': 'body',
    'in': 'body',
    'required': True,
    'schema': {'$ref': '#/definitions/JournalEntryInput'}
}

def validation_error(exc):
    return jsonify({'error': 'Invalid input', 'details': exc.errors(include_url=False, include_context=False)}), 400

def resolve_tags(tags):
    """Return Tag rows for *tags*, creating the ones not seen before."""
    resolved = []
    for tag in tags:
        existing = Tag.query.filter_by(name=tag.name).first()
        if existing is None:
            existing = Tag(name=tag.name, color=tag.color)
            db.session.add(existing)
        resolved.append(existing)
    return resolved

def apply_input(entry, data):
    if data.mood_id is not None and db.session.get(Mood, data.mood_id) is None:
        return False
    entry.title = data.title
    entry.content = data.content
    entry.mood_id = data.mood_id
    entry.tags = resolve_tags(data.unique_tags())
    return True

@journal_bp.route('', methods=['GET'])
@swag_from({
    'tags': ['Journal'],
    'description': 'List journal entries, newest first, optionally filtered',
    'parameters': [
        {'name': 'q', 'in': 'query', 'type': 'string', 'required': False,
         'description': 'Case-insensitive text to look for in title or content'},
        {'name': 'tag', 'in': 'query', 'type': 'array', 'items': {'type': 'integer'},
         'collectionFormat': 'multi', 'required': False,
         'description': 'Tag ids; an entry matches if it has any of them'},
        {'name': 'mood', 'in': 'query', 'type': 'array', 'items': {'type': 'integer'},
         'collectionFormat': 'multi', 'required': False, 'description': 'Mood ids'},
        {'name': 'start', 'in': 'query', 'type': 'string', 'format': 'date', 'required': False},
        {'name': 'end', 'in': 'query', 'type': 'string', 'format': 'date', 'required': False},
        {'name': 'date', 'in': 'query', 'type': 'string', 'format': 'date', 'required': False,
         'description': 'Shortcut for start and end on the same day'}
    ],
    'responses': {
        '200': {
            'description': 'List of journal entries',
            'schema': {'type': 'array', 'items': {'$ref': '#/definitions/JournalEntry'}}
        },
        '400': {'description': 'Invalid filter'},
        '500': {'description': 'Failed to fetch journal entries', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def get_entries():
    """List journal entries with their mood and tags."""
    try:
        criteria = EntryFilter.from_args(request.args)
    except ValidationError as exc:
        return validation_error(exc)

    try:
        entries = JournalEntry.query\
            .order_by(JournalEntry.created_at.desc(), JournalEntry.id.desc())\
            .all()
    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching journal entries: {str(e)}')
        return jsonify({'error': 'Failed to fetch journal entries'}), 500

    if not criteria.is_empty():
        entries = filter_entries(entries, criteria, get_timezone())

    return jsonify([entry.to_dict() for entry in entries])

@journal_bp.route('', methods=['POST'])
@swag_from({
    'tags': ['Journal'],
    'description': 'Create a new journal entry',
    'parameters': [ENTRY_BODY],
    'responses': {
        '201': {
            'description': 'Journal entry created successfully',
            'schema': {'$ref': '#/definitions/JournalEntry'}
        },
        '400': {'description': 'Invalid input'},
        '500': {'description': 'Failed to create journal entry', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def create_entry():
    """Create a journal entry, creating any tags that do not exist yet."""
    try:
        data = JournalEntryInput.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return validation_error(exc)

    try:
        entry = JournalEntry()
        if not apply_input(entry, data):
            return jsonify({'error': 'Mood not found'}), 400

        db.session.add(entry)
        db.session.commit()

        current_app.logger.info('Created journal entry %s', entry.id)
        return jsonify(entry.to_dict()), 201

    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error creating journal entry: {str(e)}')
        return jsonify({'error': 'Failed to create journal entry'}), 500

@journal_bp.route(f'/<int(max={MAX_ID}):entry_id>', methods=['GET'])
@swag_from({
    'tags': ['Journal'],
    'description': 'Get a specific journal entry',
    'parameters': [
        {
            'name': 'entry_id',
            'in': 'path',
            'type': 'integer',
            'required': True,
            'description': 'ID of the journal entry to retrieve'
        }
    ],
    'responses': {
        '200': {
            'description': 'Journal entry details with rendered content',
            'schema': {'$ref': '#/definitions/JournalEntry'}
        },
        '404': {'description': 'Journal entry not found', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def get_entry(entry_id):
    """Get a specific journal entry by ID."""
    entry = db.session.get(JournalEntry, entry_id)

    if not entry:
        return jsonify({'error': 'Journal entry not found'}), 404

    data = entry.to_dict()
    data['content_html'] = render_markdown(entry.content)
    return jsonify(data)

@journal_bp.route(f'/<int(max={MAX_ID}):entry_id>', methods=['PUT'])
@swag_from({
    'tags': ['Journal'],
    'description': 'Replace the title, content, mood and tags of an entry',
    'parameters': [
        {
            'name': 'entry_id',
            'in': 'path',
            'type': 'integer',
            'required': True,
            'description': 'ID of the journal entry to update'
        },
        ENTRY_BODY
    ],
    'responses': {
        '200': {
            'description': 'Journal entry updated successfully',
            'schema': {'$ref': '#/definitions/JournalEntry'}
        },
        '400': {'description': 'Invalid input'},
        '404': {'description': 'Journal entry not found', 'schema': {'$ref': '#/definitions/Error'}},
        '500': {'description': 'Failed to update journal entry', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def update_entry(entry_id):
    """Update a journal entry. The creation time never changes."""
    entry = db.session.get(JournalEntry, entry_id)

    if not entry:
        return jsonify({'error': 'Journal entry not found'}), 404

    try:
        data = JournalEntryInput.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return validation_error(exc)

    try:
        if not apply_input(entry, data):
            db.session.rollback()
            return jsonify({'error': 'Mood not found'}), 400

        db.session.commit()
        return jsonify(entry.to_dict())
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error updating journal entry: {str(e)}')
        return jsonify({'error': 'Failed to update journal entry'}), 500

@journal_bp.route(f'/<int(max={MAX_ID}):entry_id>', methods=['DELETE'])
@swag_from({
    'tags': ['Journal'],
    'description': 'Delete a journal entry',
    'parameters': [
        {
            'name': 'entry_id',
            'in': 'path',
            'type': 'integer',
            'required': True,
            'description': 'ID of the journal entry to delete'
        }
    ],
    'responses': {
        '200': {'description': 'Journal entry deleted successfully'},
        '404': {'description': 'Journal entry not found', 'schema': {'$ref': '#/definitions/Error'}},
        '500': {'description': 'Failed to delete journal entry', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def delete_entry(entry_id):
    """Delete a journal entry. Its tags stay available to other entries."""
    entry = db.session.get(JournalEntry, entry_id)

    if not entry:
        return jsonify({'error': 'Journal entry not found'}), 404

    try:
        db.session.delete(entry)
        db.session.commit()

        return jsonify({'message': 'Journal entry deleted successfully'})
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Error deleting journal entry: {str(e)}')
        return jsonify({'error': 'Failed to delete journal entry'}), 500

@journal_bp.route('/preview', methods=['POST'])
@swag_from({
    'tags': ['Journal'],
    'description': 'Render markdown content to HTML without saving it',
    'parameters': [{
        'name': 'body',
        'in': 'body',
        'required': True,
        'schema': {
            'type': 'object',
            'properties': {'content': {'type': 'string', 'example': '# Today\n**Good** day'}}
        }
    }],
    'responses': {
        '200': {
            'description': 'Rendered HTML',
            'schema': {'type': 'object', 'properties': {'html': {'type': 'string'}}}
        },
        '400': {'description': 'Invalid input'}
    }
})
def preview_markdown():
    """Render a markdown draft."""
    try:
        data = MarkdownPreview.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return validation_error(exc)

    return jsonify({'html': render_markdown(data.content)})

@journal_bp.route('/calendar', methods=['GET'])
@swag_from({
    'tags': ['Journal'],
    'description': 'Month grid (Sunday first) with the number of entries per day',
    'parameters': [
        {'name': 'year', 'in': 'query', 'type': 'integer', 'required': False},
        {'name': 'month', 'in': 'query', 'type': 'integer', 'required': False,
         'description': '1-12, defaults to the current month'}
    ],
    'responses': {
        '200': {'description': 'Calendar grid', 'schema': {'$ref': '#/definitions/CalendarMonth'}},
        '400': {'description': 'Invalid month'},
        '500': {'description': 'Failed to fetch calendar', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def get_calendar():
    """Return the calendar grid for one month."""
    tz = get_timezone()
    today = local_today(tz)
    year = request.args.get('year', today.year, type=int)
    month = request.args.get('month', today.month, type=int)

    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        return jsonify({'error': 'Invalid month'}), 400

    try:
        timestamps = db.session.execute(db.select(JournalEntry.created_at)).scalars().all()
    except SQLAlchemyError as e:
        current_app.logger.error(f'Error fetching calendar: {str(e)}')
        return jsonify({'error': 'Failed to fetch calendar'}), 500

    dates = [local_date(ts, tz) for ts in timestamps]
    return jsonify(build_month_grid(year, month, dates))
