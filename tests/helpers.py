from collections import namedtuple
from copy import deepcopy
from logging import getLogger, WARNING
from unittest import TestCase

from requests import codes
from requests.structures import CaseInsensitiveDict

from onpage._json import to_json
from onpage.client import OnPageClient
from onpage.schema import Schema

# products -> companies -> people, companies <-> products, and one dangling relation.
SCHEMA_JSON = {
  "id": 7,
  "label": "Catalogue",
  "langs": ["it", "en"],
  "resources": [
    {
      "id": 1,
      "name": "products",
      "label": "Products",
      "labels": {"it": "Prodotti", "en": "Products"},
      "fields": [
        {"id": 10, "name": "title", "label": "Title", "type": "string", "is_translatable": True},
        {"id": 11, "name": "company", "label": "Company", "type": "relation",
         "rel_res_id": 2, "rel_field_id": 21},
        {"id": 12, "name": "42", "label": "Forty-two", "type": "int"},
        {"id": 42, "name": "price", "label": "Price", "type": "price"},
        {"id": 13, "name": "supplier", "label": "Supplier", "type": "relation", "rel_res_id": 99},
      ],
    },
    {
      "id": 2,
      "name": "companies",
      "label": "Companies",
      "labels": {"it": "Aziende"},
      "fields": [
        {"id": 20, "name": "owner", "label": "Owner", "type": "relation", "rel_res_id": 3},
        {"id": 21, "name": "products", "label": "Products", "type": "relation",
         "is_multiple": True, "rel_res_id": 1, "rel_field_id": 11},
        {"id": 22, "name": "vat", "label": "VAT", "type": "string"},
      ],
    },
    {
      "id": 3,
      "name": "people",
      "label": "People",
      "fields": [
        {"id": 30, "name": "email", "label": "Email", "type": "string"},
        {"id": 31, "name": "employer", "label": "Employer", "type": "relation", "rel_res_id": 2},
      ],
    },
  ],
}


def schema_json():
  """Fresh copy of :samp:`SCHEMA_JSON`, safe to modify."""
  return deepcopy(SCHEMA_JSON)


def build_schema(json=None, **kwargs):
  return Schema(schema_json() if json is None else json, **kwargs)


class OnPageTestCase(TestCase):
  @classmethod
  def setUpClass(cls):
    super(OnPageTestCase, cls).setUpClass()

    # Turn off annoying logging about reset connections.
    getLogger("requests").setLevel(WARNING)

  def setUp(self):
    super(OnPageTestCase, self).setUp()
    self.schema = build_schema()
    self.products = self.schema.resource("products")
    self.companies = self.schema.resource("companies")
    self.people = self.schema.resource("people")

  def assert_raises(self, exception_class, action):
    """Like self.assertRaises and returns the exception too."""
    with self.assertRaises(exception_class) as cm:
      action()
    return cm.exception


def mock_client(response_text, status_code=codes.ok, **kwargs):
  c = OnPageClient("acme", "token", **kwargs)
  c.session = _MockSession(response_text, status_code)
  return c


def mock_schema_client(**kwargs):
  return mock_client(to_json(SCHEMA_JSON), **kwargs)


class _MockSession(object):
  def __init__(self, response_text, status_code):
    self.response_text = response_text
    self.status_code = status_code
    self.sent = []

  def close(self):
    pass

  def prepare_request(self, request):
    return request

  def send(self, request, **kwargs):
    # pylint: disable=unused-argument
    self.sent.append(request)
    return _MockResponse(self.status_code, self.response_text,
                         CaseInsensitiveDict({"Content-Type": "application/json"}))


_MockResponse = namedtuple('MockResponse', ['status_code', 'text', 'headers'])
