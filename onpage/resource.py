from onpage._util import get_id_or_raise, get_or_raise, is_numeric, to_number
from onpage.errors import (DuplicateField, FieldNotFound, InvalidPathSyntax,
                           NotARelation, PathTooLong)
from onpage.field import Field

#: Separator between the segments of a field path, e.g. ``"company.owner.email"``.
PATH_SEPARATOR = "."

#: Default limit on relation hops for :any:`Resource.resolve_field_path`.
DEFAULT_MAX_PATH_HOPS = 16


class Resource(object):
  """
  A record type of the schema: an ordered list of :any:`Field`, indexed by id and by name.

  The basic format of the payload is::

    {"id": 1, "name": "products", "label": "Products", "labels": {"en": "Products"},
     "fields": [{"id": 10, "name": "title", ...}, ...]}

  Both indexes are built in the constructor; a Resource is never modified afterwards.
  """

  def __init__(self, lookup, json, max_path_hops=DEFAULT_MAX_PATH_HOPS):
    """
    :param lookup:
      Schema registry the fields use to reach related resources.
    :param json: Resource payload of the schema.
    :param max_path_hops:
      Maximum number of relation hops in :any:`resolve_field_path`. None for no limit.
    """
    self.id = get_id_or_raise(json, "id", "Resource")
    self.name = get_or_raise(json, "name", "Resource")
    self.label = get_or_raise(json, "label", "Resource")
    self.labels = dict(json.get("labels") or {})
    self.max_path_hops = max_path_hops

    fields = []
    id_to_field = {}
    name_to_field = {}
    for field_json in get_or_raise(json, "fields", "Resource"):
      field = Field(lookup, field_json)
      field_id, field_name = field.identity()
      if field_id in id_to_field:
        raise DuplicateField(self.id, "id", field_id)
      if field_name in name_to_field:
        raise DuplicateField(self.id, "name", field_name)
      fields.append(field)
      id_to_field[field_id] = field
      name_to_field[field_name] = field

    self._fields = fields
    self._id_to_field = id_to_field
    self._name_to_field = name_to_field

  def fields(self):
    """All fields, in schema order."""
    return list(self._fields)

  def field_by_id(self, field_id):
    return self._id_to_field.get(field_id)

  def field_by_name(self, name):
    return self._name_to_field.get(name)

  def field(self, identifier):
    """
    Looks up a field by id or by name.

    Numbers, and strings that read as numbers (:samp:`"42"`), are looked up as ids;
    anything else as a name. A field *named* :samp:`"42"` is therefore only
    reachable through :any:`field_by_name`.

    :return: The :any:`Field`, or None if there is no match.
    """
    if is_numeric(identifier):
      return self.field_by_id(to_number(identifier))
    return self.field_by_name(identifier)

  def resolve_field_path(self, path):
    """
    Resolves a dotted field path, starting from this resource.

    Every segment but the last must name a relation field; the walk continues on
    that field's related resource. e.g. on ``products``,
    :samp:`resolve_field_path("company.owner.email")` returns the ``company`` field of
    products, the ``owner`` field of companies and the ``email`` field of people.

    Segments are matched with :any:`field`, so ids work as well as names.

    :param path: Non-empty segments joined by ``"."``.
    :return: List of :any:`Field`, one per segment, in path order.
    :raises InvalidPathSyntax: Empty path or empty segment.
    :raises PathTooLong: More hops than :samp:`max_path_hops`.
    :raises FieldNotFound: A segment matches no field of the current resource.
    :raises NotARelation: The path continues past a scalar field.
    :raises RelationNotResolvable: A relation points to a resource missing from the schema.
    """
    segments = _split_path(path)
    hops = len(segments) - 1
    if self.max_path_hops is not None and hops > self.max_path_hops:
      raise PathTooLong(path, hops, self.max_path_hops)

    current = self
    resolved = []
    for i, segment in enumerate(segments):
      field = current.field(segment)
      if field is None:
        raise FieldNotFound(segment, current.id)
      resolved.append(field)
      if i < hops:
        related = field.related_resource()
        if related is None:
          raise NotARelation(field.name, current.id)
        current = related
    return resolved

  def __repr__(self):
    return "Resource(id=%s, name=%r, fields=%s)" % (self.id, self.name, len(self._fields))


def _split_path(path):
  if not isinstance(path, str) or not path:
    raise InvalidPathSyntax(path)
  segments = path.split(PATH_SEPARATOR)
  if not all(segments):
    raise InvalidPathSyntax(path)
  return segments
