from onpage._util import get_id_or_none, get_id_or_raise, get_or_raise
from onpage.errors import RelationNotResolvable, UnknownResource


class Field(object):
  """
  Stores information about one field of a :any:`Resource`.

  A Field is either scalar or a relation. A relation field stores only the id of
  the resource it points to (:samp:`rel_res_id`); the resource itself is looked up
  in the schema registry on demand, so resources may relate to each other cyclically.

  Fields are created by their :any:`Resource` and should be treated as immutable.
  """
  # pylint: disable=too-many-instance-attributes

  def __init__(self, lookup, json):
    """
    :param lookup:
      Schema registry with a :samp:`resource_by_id(id)` method, usually the :any:`Schema`.
    :param json: Field payload of the schema.
    """
    self._lookup = lookup
    self.id = get_id_or_raise(json, "id", "Field")
    self.name = get_or_raise(json, "name", "Field")
    self.label = json.get("label")
    self.labels = dict(json.get("labels") or {})
    self.type = json.get("type")
    self.is_multiple = bool(json.get("is_multiple", False))
    self.is_translatable = bool(json.get("is_translatable", False))
    self.rel_res_id = get_id_or_none(json, "rel_res_id", "Field")
    """Id of the related resource. None for scalar fields."""
    self.rel_field_id = get_id_or_none(json, "rel_field_id", "Field")
    """Id of the field on the related resource that points back here, if any."""

  def identity(self):
    return self.id, self.name

  def is_relation(self):
    return self.rel_res_id is not None

  def related_resource(self):
    """
    The :any:`Resource` this field relates to, or None for a scalar field.
    Raises :any:`RelationNotResolvable` if the schema has no such resource.
    """
    if not self.is_relation():
      return None
    try:
      return self._lookup.resource_by_id(self.rel_res_id)
    except UnknownResource:
      raise RelationNotResolvable(self.id, self.rel_res_id) from None

  def related_field(self):
    """The inverse field on the related resource, or None."""
    resource = self.related_resource()
    if resource is None or self.rel_field_id is None:
      return None
    return resource.field_by_id(self.rel_field_id)

  def __repr__(self):
    rel = ", rel_res_id=%s" % self.rel_res_id if self.is_relation() else ""
    return "Field(id=%s, name=%r, type=%s%s)" % (self.id, self.name, self.type, rel)
