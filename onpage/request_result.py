class RequestResult(object):
  """
  One call to the view API, as seen by an ``observer`` and carried by transport errors.
  Rendered for logs by :any:`show_request_result`.
  """
  # pylint: disable=too-many-instance-attributes

  def __init__(
      self, method, path, query, request_content,
      response_raw, response_content, status_code, response_headers,
      start_time, end_time):
    self.method = method
    self.path = path
    """e.g. ``"schema"``. The token part of the base url is never included."""
    self.query = query
    """Url parameters actually sent (None values dropped), or None."""
    self.request_content = request_content
    """Python value sent as the JSON body of a POST."""
    self.response_raw = response_raw
    self.response_content = response_content
    """Decoded JSON body; None when the body is not JSON (e.g. an HTML error page)."""
    self.status_code = status_code
    self.response_headers = response_headers
    self.start_time = start_time
    self.end_time = end_time

  @property
  def time_taken(self):
    """Seconds between sending the request and reading the response."""
    return self.end_time - self.start_time
