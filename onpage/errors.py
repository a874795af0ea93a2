"""Error types that the OnPage client and its schema objects throw."""
from requests import codes


# region OnPageError


class OnPageError(Exception):
    """
    Base class for every error raised by this package.
    Transport errors carry the :any:`RequestResult` that caused them.
    """

    @staticmethod
    def raise_for_status_code(request_result):
        code = request_result.status_code
        # pylint: disable=no-member, too-many-return-statements
        if 200 <= code <= 299:
            pass
        elif code == codes.bad_request:
            raise BadRequest(request_result)
        elif code == codes.unauthorized:
            raise Unauthorized(request_result)
        elif code == codes.forbidden:
            raise PermissionDenied(request_result)
        elif code == codes.not_found:
            raise NotFound(request_result)
        elif code == codes.internal_server_error:
            raise InternalError(request_result)
        elif code == codes.unavailable:
            raise UnavailableError(request_result)
        else:
            raise UnexpectedError("Unexpected status code %s." % code, request_result)

    def __init__(self, description, request_result=None):
        super(OnPageError, self).__init__(description)
        self.description = description
        self.request_result = request_result
        """:any:`RequestResult` for the request that caused this error, if any."""


class UnexpectedError(OnPageError):
    """Error for when the server returns an unexpected kind of response."""
    pass


class HttpError(OnPageError):
    def __init__(self, request_result, description=None):
        super(HttpError, self).__init__(
            description or HttpError._get_description(request_result), request_result)

    @staticmethod
    def _get_description(request_result):
        content = request_result.response_content
        if isinstance(content, dict):
            for key in ("message", "error"):
                if content.get(key):
                    return str(content[key])
        return "(no error message, status %s)" % request_result.status_code


class BadRequest(HttpError):
    """HTTP 400 error."""
    pass


class Unauthorized(HttpError):
    def __init__(self, request_result):
        super(Unauthorized, self).__init__(
            request_result,
            "Unauthorized. Check that company, domain and token are correct during client's instantiation")


class PermissionDenied(HttpError):
    """HTTP 403 error."""
    pass


class NotFound(HttpError):
    """HTTP 404 error."""
    pass


class InternalError(HttpError):
    """HTTP 500 error."""
    pass


class UnavailableError(HttpError):
    """HTTP 503 error."""
    pass


# endregion

# region Schema errors


class SchemaError(OnPageError):
    """The schema payload is malformed."""
    pass


class DuplicateField(SchemaError):
    def __init__(self, resource_id, key, value):
        super(DuplicateField, self).__init__(
            "Resource %s declares more than one field with %s %r" % (resource_id, key, value))
        self.resource_id = resource_id
        self.key = key
        """``"id"`` or ``"name"``."""
        self.value = value


class DuplicateResource(SchemaError):
    def __init__(self, key, value):
        super(DuplicateResource, self).__init__(
            "Schema declares more than one resource with %s %r" % (key, value))
        self.key = key
        self.value = value


class UnknownResource(OnPageError):
    """The schema has no resource with the requested id."""

    def __init__(self, resource_id):
        super(UnknownResource, self).__init__("No resource with id %r" % (resource_id,))
        self.resource_id = resource_id


# endregion

# region Field path errors


class FieldPathError(OnPageError):
    """A dotted field path could not be resolved. The whole path is rejected."""
    pass


class InvalidPathSyntax(FieldPathError):
    def __init__(self, path, description=None):
        super(InvalidPathSyntax, self).__init__(
            description or "Invalid field path %r: expected non-empty segments separated by '.'" % (path,))
        self.path = path


class PathTooLong(InvalidPathSyntax):
    def __init__(self, path, hops, max_hops):
        super(PathTooLong, self).__init__(
            path, "Field path %r takes %s hops, the limit is %s" % (path, hops, max_hops))
        self.hops = hops
        self.max_hops = max_hops


class FieldNotFound(FieldPathError):
    def __init__(self, segment, resource_id):
        super(FieldNotFound, self).__init__(
            "Field %r not found in resource %s" % (segment, resource_id))
        self.segment = segment
        self.resource_id = resource_id


class NotARelation(FieldPathError):
    """The path continues past a field that does not relate to another resource."""

    def __init__(self, field_name, resource_id):
        super(NotARelation, self).__init__(
            "Cannot traverse through non-relation field %r of resource %s" % (field_name, resource_id))
        self.field_name = field_name
        self.resource_id = resource_id


class RelationNotResolvable(FieldPathError):
    def __init__(self, field_id, resource_id):
        super(RelationNotResolvable, self).__init__(
            "Field %s relates to resource %r, which is not in the schema" % (field_id, resource_id))
        self.field_id = field_id
        self.resource_id = resource_id
        """Id of the missing related resource."""


# endregion
