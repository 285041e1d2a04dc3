from .helpers import deep_update, lower_keys, parse_float

__all__ = ['deep_update', 'lower_keys', 'parse_float']
