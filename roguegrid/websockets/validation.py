"""Lightweight websocket payload validation utilities.

Minimal schema-like checking with consistent error responses; handlers emit
the error dict back to the client unchanged.

Schema Mini-Language (Python dict):
{
  'field_name': ('type', required: bool, extras: dict)
}
Supported types: 'str', 'int'
Extras (str only): max_len, min_len, allow_empty, preserve_whitespace

If invalid: (False, {'field': 'key', 'error': 'too long', 'code': 'max_len'})
If valid: (True, normalized_data)
"""
from __future__ import annotations
from typing import Any, Dict, Tuple

PRIMITIVES = {
    'str': str,
    'int': int,
}


def _fail(field: str, message: str, code: str) -> Tuple[bool, Dict[str, Any]]:
    return False, {'field': field, 'error': message, 'code': code}


def validate(payload: Any, schema: Dict[str, tuple]) -> Tuple[bool, Dict[str, Any]]:
    if not isinstance(payload, dict):
        return _fail('__root__', 'payload must be an object', 'type')
    out = {}
    for name, spec in schema.items():
        if not isinstance(spec, tuple) or len(spec) < 2:
            return _fail('__schema__', f'invalid spec for {name}', 'schema')
        type_name, required = spec[0], spec[1]
        extras = spec[2] if len(spec) > 2 else {}
        if type_name not in PRIMITIVES:
            return _fail('__schema__', f'unsupported type {type_name}', 'schema')
        if name not in payload or payload[name] is None:
            if required:
                return _fail(name, 'missing required field', 'required')
            continue
        value = payload[name]
        py_type = PRIMITIVES[type_name]
        # bool is an int subclass; never accept it as a number
        if not isinstance(value, py_type) or (type_name == 'int' and isinstance(value, bool)):
            return _fail(name, f'expected {type_name}', 'type')
        if type_name == 'str':
            s = value.strip() if not extras.get('allow_empty') else value
            if not extras.get('allow_empty') and len(s) == 0:
                return _fail(name, 'must not be empty', 'empty')
            if 'max_len' in extras and len(value) > extras['max_len']:
                return _fail(name, 'too long', 'max_len')
            if 'min_len' in extras and len(value) < extras['min_len']:
                return _fail(name, 'too short', 'min_len')
            out[name] = value if extras.get('preserve_whitespace') else s
        else:
            out[name] = value
    return True, out

# Predefined schemas used by handlers
NEW_GAME = {
    'seed': ('int', False, {})
}
# The attack key is a single space, so whitespace must survive normalisation
KEY_INPUT = {
    'key': ('str', True, {'min_len': 1, 'max_len': 16, 'allow_empty': True, 'preserve_whitespace': True})
}
