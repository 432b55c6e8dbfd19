from flask import jsonify, current_app
from flasgger import swag_from
from journal.utils import get_timezone
from .engine import compute_snapshot
from .store import get_store
from . import stats_bp

@stats_bp.route('', methods=['GET'])
@swag_from({
    'tags': ['Stats'],
    'description': 'Entry totals, entries per month, mood distribution, top tags and writing streaks',
    'responses': {
        '200': {
            'description': 'Statistics snapshot',
            'schema': {'$ref': '#/definitions/StatsSnapshot'}
        },
        '500': {'description': 'Failed to fetch stats', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def get_stats():
    """Compute a fresh statistics snapshot."""
    store = get_store()
    try:
        entries = store.list_entries()
        moods = store.list_moods()
        tags = store.list_tags()
    except Exception as e:
        current_app.logger.error(f'Error fetching stats: {str(e)}')
        return jsonify({'error': 'Failed to fetch stats'}), 500

    snapshot = compute_snapshot(
        entries,
        moods,
        tags,
        tz=get_timezone(),
        top_tags_limit=current_app.config.get('TOP_TAGS_LIMIT', 10),
        grace_days=current_app.config.get('STREAK_GRACE_DAYS', 1),
    )
    return jsonify(snapshot.to_dict())
