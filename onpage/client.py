import threading
from time import time

from requests import Request, Session
from requests.adapters import HTTPAdapter

from onpage import __version__ as pkg_version
from onpage._json import parse_json_or_none, to_json
from onpage.errors import OnPageError, UnexpectedError
from onpage.request_result import RequestResult
from onpage.schema import DEFAULT_MAX_PATH_HOPS, Schema


class OnPageClient(object):
    """
    Communicates with the OnPage view API via JSON.

    All request methods return the parsed JSON response: dicts containing
    lists, ints, floats, strings, and other dicts.
    The schema is fetched once and then served from memory; see :any:`schema`.
    """

    # pylint: disable=too-many-arguments, too-many-instance-attributes
    def __init__(
            self,
            company,
            token,
            domain="onpage.it",
            scheme="https",
            port=None,
            timeout=60,
            observer=None,
            pool_connections=10,
            pool_maxsize=10,
            endpoint=None,
            max_path_hops=DEFAULT_MAX_PATH_HOPS):
        """
        :param company:
          Company subdomain, e.g. ``"acme"`` for ``acme.onpage.it``.
        :param token:
          Snapshot token of the view API.
        :param domain:
          Base domain of the OnPage server.
        :param scheme:
          ``"http"`` or ``"https"``.
        :param port:
          Port of the OnPage server. Omitted from the url when None.
        :param timeout:
          Read timeout in seconds.
        :param observer:
          Callback that will be passed a :any:`RequestResult` after every completed request.
        :param pool_connections:
          The number of connection pools to cache.
        :param pool_maxsize:
          The maximum number of connections to save in the pool.
        :param endpoint:
          Full URL of the view API, used instead of company, domain, scheme and port.
        :param max_path_hops:
          Maximum number of relation hops a field path may take. None for no limit.
        """
        self.company = company
        self.domain = domain
        self.scheme = scheme
        self.port = port
        self.timeout = timeout
        self.observer = observer
        self.max_path_hops = max_path_hops

        if endpoint:
            self.base_url = self._normalize_endpoint(endpoint)
        else:
            host = "%s.%s" % (company, domain)
            if port is not None:
                host = "%s:%s" % (host, port)
            self.base_url = "%s://%s/api/view/%s" % (scheme, host, token)

        self.session = Session()
        self.session.mount('https://', HTTPAdapter(pool_connections=pool_connections,
                                                   pool_maxsize=pool_maxsize))
        self.session.mount('http://', HTTPAdapter(pool_connections=pool_connections,
                                                  pool_maxsize=pool_maxsize))
        self.session.headers.update({
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "Content-Type": "application/json;charset=utf-8",
            "User-Agent": "onpage-python/%s" % pkg_version,
        })

        self._schema = None
        self._schema_lock = threading.Lock()

    def _normalize_endpoint(self, endpoint):
        return endpoint.rstrip("/\\")

    def close(self):
        """Releases the pooled connections."""
        self.session.close()

    def get(self, path, query=None):
        """
        GET a path of the view API.

        :param path: Path relative to the base url, e.g. ``"schema"``.
        :param query: Dict of url query parameters. None values are dropped.
        :return: Converted JSON response.
        """
        return self._execute("GET", path, query=query)

    def post(self, path, data=None):
        """
        POST JSON data to a path of the view API.

        :return: Converted JSON response.
        """
        return self._execute("POST", path, data=data)

    def schema(self):
        """
        The :any:`Schema` of this view, fetched on first use.
        Concurrent first calls fetch it only once.
        """
        with self._schema_lock:
            if self._schema is None:
                self._schema = self._fetch_schema()
            return self._schema

    def load_schema(self):
        """Fetches the :any:`Schema` again, replacing the one in memory."""
        schema = self._fetch_schema()
        with self._schema_lock:
            self._schema = schema
        return schema

    def _fetch_schema(self):
        return Schema(self.get("schema"), max_path_hops=self.max_path_hops)

    def _execute(self, action, path, data=None, query=None):
        """Performs an HTTP action, logs it, and looks for errors."""
        if query is not None:
            query = {k: v for k, v in query.items() if v is not None}

        start_time = time()
        response = self._perform_request(action, path, data, query)
        end_time = time()

        response_raw = response.text
        response_content = parse_json_or_none(response_raw)

        request_result = RequestResult(
            action, path, query, data,
            response_raw, response_content, response.status_code, response.headers,
            start_time, end_time)

        if self.observer is not None:
            self.observer(request_result)

        OnPageError.raise_for_status_code(request_result)

        if response_content is None:
            raise UnexpectedError("Invalid JSON.", request_result)

        return response_content

    def _perform_request(self, action, path, data, query):
        """Performs an HTTP action."""
        url = self.base_url + "/" + path
        body = to_json(data) if data is not None else None
        req = Request(action, url, params=query, data=body)
        return self.session.send(self.session.prepare_request(req), timeout=self.timeout)
