"""Lightweight payload validation for HTTP bodies and Socket.IO events.

Not a general JSON Schema implementation: a small dict mini-language with
clear, consistent error results. Returns (ok, value_or_error) tuples and the
caller decides whether to raise, emit an error event, or respond 400.

Schema mini-language:
{
  'field_name': ('type', required: bool, extras: dict)
}
Supported types: 'str', 'int', 'bool', 'list', 'dict'
Extras:
  str:  min_len, max_len, allow_empty, choices
  int:  min, max
  list: item_type

If invalid: (False, {'field': 'mode', 'error': 'must be one of practice, challenge', 'code': 'choices'})
If valid: (True, normalized_data)
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

PRIMITIVES = {
    'str': str,
    'int': int,
    'bool': bool,
    'list': list,
    'dict': dict,
}


def _fail(field: str, message: str, code: str) -> Tuple[bool, Dict[str, Any]]:
    return False, {'field': field, 'error': message, 'code': code}


def validate(payload: Any, schema: Dict[str, tuple]) -> Tuple[bool, Dict[str, Any]]:
    if not isinstance(payload, dict):
        return _fail('__root__', 'payload must be an object', 'type')
    out = {}
    for name, entry in schema.items():
        if not isinstance(entry, tuple) or len(entry) < 2:
            return _fail('__schema__', f'invalid schema entry for {name}', 'schema')
        type_name, required = entry[0], entry[1]
        extras = entry[2] if len(entry) > 2 else {}
        if type_name not in PRIMITIVES:
            return _fail('__schema__', f'unsupported type {type_name}', 'schema')
        if name not in payload or payload[name] is None:
            if required:
                return _fail(name, 'missing required field', 'required')
            if 'default' in extras:
                out[name] = extras['default']
            continue
        value = payload[name]
        py_type = PRIMITIVES[type_name]
        # bool is an int subclass; keep them apart
        if not isinstance(value, py_type) or (type_name == 'int' and isinstance(value, bool)):
            return _fail(name, f'expected {type_name}', 'type')
        if type_name == 'str':
            s = value if extras.get('allow_empty') else value.strip()
            if not extras.get('allow_empty') and len(s) == 0:
                return _fail(name, 'must not be empty', 'empty')
            if 'max_len' in extras and len(s) > extras['max_len']:
                return _fail(name, 'too long', 'max_len')
            if 'min_len' in extras and len(s) < extras['min_len']:
                return _fail(name, 'too short', 'min_len')
            if 'choices' in extras and s not in extras['choices']:
                return _fail(name, 'must be one of ' + ', '.join(extras['choices']), 'choices')
            out[name] = s
        elif type_name == 'int':
            if 'min' in extras and value < extras['min']:
                return _fail(name, f"must be >= {extras['min']}", 'min')
            if 'max' in extras and value > extras['max']:
                return _fail(name, f"must be <= {extras['max']}", 'max')
            out[name] = value
        elif type_name == 'list':
            item_type = extras.get('item_type')
            if item_type:
                it = PRIMITIVES.get(item_type)
                if not it:
                    return _fail('__schema__', f'unsupported item_type {item_type}', 'schema')
                for idx, elem in enumerate(value):
                    if not isinstance(elem, it):
                        return _fail(name, f'element {idx} not {item_type}', 'item_type')
            out[name] = value
        else:
            out[name] = value
    return True, out


GAMES = ('maze', 'path', 'bubble')

# HTTP bodies
MAZE_START = {
    'level': ('int', False, {'min': 0, 'default': 0}),
    'mode': ('str', False, {'choices': ('practice', 'challenge'), 'default': 'practice'}),
}
MAZE_MOVE = {
    'dir': ('str', True, {'max_len': 16}),
}
PATH_START = {
    'mode': ('str', False, {'choices': ('practice', 'assessment'), 'default': 'practice'}),
}
PATH_SELECT = {
    'tile_id': ('str', True, {'max_len': 16}),
}
BUBBLE_SELECT = {
    'bubble_id': ('int', True, {'min': 0}),
}

# Socket.IO events
JOIN_SESSION = {
    'game': ('str', True, {'choices': GAMES}),
}
LEAVE_SESSION = JOIN_SESSION
GAME_ACTION = {
    'game': ('str', True, {'choices': GAMES}),
    'action': ('str', True, {'min_len': 1, 'max_len': 32}),
}
