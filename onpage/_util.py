import re

from onpage.errors import SchemaError

# Decimal notation only: no hex, no "inf"/"nan", no digit separators.
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)
_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)


def is_numeric(value):
  """
  True for numbers and for strings written as decimal numbers.
  e.g. :samp:`42`, :samp:`"42"`, :samp:`" -4.2e1 "`; but not :samp:`True` or :samp:`"4x"`.
  """
  if isinstance(value, bool):
    return False
  if isinstance(value, (int, float)):
    return True
  if isinstance(value, str):
    return _NUMERIC_RE.match(value) is not None
  return False


def to_number(value):
  """Converts a value accepted by :any:`is_numeric` to an int when it is integral, else a float."""
  if isinstance(value, (int, float)):
    return value
  if _INTEGER_RE.match(value):
    return int(value)
  return float(value)


def get_or_raise(dct, key, what):
  """Reads a required key out of a schema payload."""
  if isinstance(dct, dict) and key in dct:
    return dct[key]
  raise SchemaError("%s payload does not contain required key %r" % (what, key))


def get_id_or_raise(dct, key, what):
  """
  Reads a required id out of a schema payload.
  Numeric strings are converted, so :samp:`"10"` and :samp:`10` are the same id.
  """
  return _as_id(get_or_raise(dct, key, what), key, what)


def get_id_or_none(dct, key, what):
  """Like :any:`get_id_or_raise`, but the key may be missing or null."""
  value = dct.get(key)
  return None if value is None else _as_id(value, key, what)


def _as_id(value, key, what):
  if not is_numeric(value):
    raise SchemaError("%s payload has non-numeric %s %r" % (what, key, value))
  return to_number(value)
