from flasgger import Swagger

TAG_PROPERTIES = {
    'id': {'type': 'integer', 'format': 'int64'},
    'name': {'type': 'string'},
    'color': {'type': 'string'}
}

DEFINITIONS = {
    'Mood': {
        'type': 'object',
        'properties': {
            'id': {'type': 'integer', 'format': 'int64'},
            'name': {'type': 'string'},
            'emoji': {'type': 'string'},
            'color': {'type': 'string'}
        }
    },
    'Tag': {
        'type': 'object',
        'properties': TAG_PROPERTIES
    },
    'TagUsage': {
        'type': 'object',
        'properties': dict(TAG_PROPERTIES, count={'type': 'integer'})
    },
    'JournalEntry': {
        'type': 'object',
        'properties': {
            'id': {'type': 'integer', 'format': 'int64'},
            'title': {'type': 'string'},
            'content': {'type': 'string', 'description': 'Markdown source'},
            'content_html': {'type': 'string', 'description': 'Only on single entry responses'},
            'created_at': {'type': 'string', 'format': 'date-time'},
            'updated_at': {'type': 'string', 'format': 'date-time'},
            'mood_id': {'type': 'integer', 'format': 'int64'},
            'mood': {'$ref': '#/definitions/Mood'},
            'tags': {'type': 'array', 'items': {'$ref': '#/definitions/Tag'}}
        }
    },
    'JournalEntryInput': {
        'type': 'object',
        'properties': {
            'title': {'type': 'string', 'example': 'A quiet Sunday'},
            'content': {'type': 'string', 'example': '# Morning\nWent for a **long** walk.'},
            'mood_id': {'type': 'integer', 'example': 1},
            'tags': {
                'type': 'array',
                'items': {
                    'type': 'object',
                    'properties': {
                        'name': {'type': 'string', 'example': 'walks'},
                        'color': {'type': 'string', 'example': '#8BC34A'}
                    },
                    'required': ['name']
                }
            }
        },
        'required': ['title', 'content']
    },
    'CalendarMonth': {
        'type': 'object',
        'properties': {
            'year': {'type': 'integer'},
            'month': {'type': 'integer'},
            'weekdays': {'type': 'array', 'items': {'type': 'string'}},
            'total': {'type': 'integer'},
            'days': {
                'type': 'array',
                'description': 'Leading nulls pad the first week',
                'items': {
                    'type': 'object',
                    'properties': {
                        'date': {'type': 'string', 'format': 'date'},
                        'count': {'type': 'integer'}
                    }
                }
            }
        }
    },
    'StatsSnapshot': {
        'type': 'object',
        'properties': {
            'total_entries': {'type': 'integer'},
            'entries_by_month': {
                'type': 'array',
                'items': {
                    'type': 'object',
                    'properties': {
                        'month': {'type': 'string', 'example': '2024-01'},
                        'count': {'type': 'integer'}
                    }
                }
            },
            'mood_distribution': {
                'type': 'array',
                'items': {
                    'type': 'object',
                    'properties': {
                        'mood': {'type': 'string'},
                        'emoji': {'type': 'string'},
                        'color': {'type': 'string'},
                        'count': {'type': 'integer'}
                    }
                }
            },
            'top_tags': {
                'type': 'array',
                'items': {
                    'type': 'object',
                    'properties': {
                        'tag': {'type': 'string'},
                        'color': {'type': 'string'},
                        'count': {'type': 'integer'}
                    }
                }
            },
            'current_streak': {'type': 'integer'},
            'longest_streak': {'type': 'integer'}
        }
    },
    'Error': {
        'type': 'object',
        'properties': {
            'error': {'type': 'string', 'description': 'Error message'}
        }
    }
}

def init_swagger(app):
    """Initialize Swagger documentation."""
    swagger_config = {
        "headers": [],
        "specs": [
            {
                "endpoint": 'apispec',
                "route": '/apispec.json',
                "rule_filter": lambda rule: True,  # all in
                "model_filter": lambda tag: True,  # all in
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/apidocs/"
    }

    swagger_template = {
        "swagger": "2.0",
        "info": {
            "title": "Daybook API",
            "description": "API for Daybook - a personal markdown journal",
            "version": "1.0.0"
        },
        "consumes": ["application/json"],
        "produces": ["application/json"],
        "tags": [
            {"name": "Journal", "description": "Journal entries, search, preview and calendar"},
            {"name": "Moods", "description": "Moods that can be attached to entries"},
            {"name": "Tags", "description": "Tags and their usage"},
            {"name": "Stats", "description": "Writing statistics and streaks"}
        ],
        "definitions": DEFINITIONS
    }

    return Swagger(app, config=swagger_config, template=swagger_template)
