from onpage._util import get_or_raise, is_numeric, to_number
from onpage.errors import DuplicateResource, UnknownResource
from onpage.resource import DEFAULT_MAX_PATH_HOPS, Resource


class Schema(object):
  """
  The schema registry: every :any:`Resource` of a view, by id and by name.

  Resources are owned here. Relation fields hold only resource ids and call
  back into :any:`resource_by_id`, so relations may form cycles.
  """

  def __init__(self, json, max_path_hops=DEFAULT_MAX_PATH_HOPS):
    """
    :param json: Schema payload, as returned by the ``schema`` endpoint.
    :param max_path_hops: Passed on to every :any:`Resource`.
    """
    resources_json = get_or_raise(json, "resources", "Schema")
    self.id = json.get("id")
    self.label = json.get("label")
    self.langs = list(json.get("langs") or [])

    resources = []
    id_to_resource = {}
    name_to_resource = {}
    for resource_json in resources_json:
      resource = Resource(self, resource_json, max_path_hops=max_path_hops)
      if resource.id in id_to_resource:
        raise DuplicateResource("id", resource.id)
      if resource.name in name_to_resource:
        raise DuplicateResource("name", resource.name)
      resources.append(resource)
      id_to_resource[resource.id] = resource
      name_to_resource[resource.name] = resource

    self._resources = resources
    self._id_to_resource = id_to_resource
    self._name_to_resource = name_to_resource

  def resources(self):
    """All resources, in schema order."""
    return list(self._resources)

  def resource_by_id(self, resource_id):
    """Raises :any:`UnknownResource` if there is no resource with this id."""
    try:
      return self._id_to_resource[resource_id]
    except KeyError:
      raise UnknownResource(resource_id) from None

  def resource(self, identifier):
    """
    Looks up a resource by id or by name, with the same rules as :any:`Resource.field`.

    :return: The :any:`Resource`, or None.
    """
    if is_numeric(identifier):
      return self._id_to_resource.get(to_number(identifier))
    return self._name_to_resource.get(identifier)

  def __repr__(self):
    return "Schema(id=%s, resources=%s)" % (self.id, [r.name for r in self._resources])
