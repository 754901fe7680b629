"""\
Flask integration: HAL responses from application objects, and
resources from request bodies.

The representation is negotiated using the **Accept** header of the
request.  When the client expresses no preference, the
``'KT_HAL_CONTENT_TYPE'`` setting from ``flask.current_app.config`` is
used; without that setting, plain JSON is produced.

"""

import json

import flask
import werkzeug.datastructures
import werkzeug.exceptions

import kt.hal.interfaces
import kt.hal.model
import kt.hal.resource


CONTENT_TYPES = kt.hal.model.CONTENT_TYPE_HAL, kt.hal.model.CONTENT_TYPE_JSON
"""Media types which can be generated."""


def default_content_type():
    """Return the configured default representation."""
    config = flask.current_app.config
    return config.get('KT_HAL_CONTENT_TYPE') or kt.hal.model.CONTENT_TYPE_JSON


def negotiate():
    """Select the representation for the current request.

    The configured default wins whenever the client accepts it at least
    as well as the alternatives, including when there is no **Accept**
    header at all.

    """
    default = default_content_type()
    candidates = [default]
    candidates += [ctype for ctype in CONTENT_TYPES if ctype != default]
    return flask.request.accept_mimetypes.best_match(candidates,
                                                     default=default)


def response(ob, status=200, headers=None):
    """Generate response containing the representation of *ob*.

    *ob* must provide or be adaptable to
    :class:`~kt.hal.interfaces.IJSONSerializable`.

    If *headers* is given and non-``None``, it must be be mapping of
    additional headers that should be returned in the request.  If a
    **Content-Type** header is provided, it will be used instead of
    the negotiated media type.

    """
    ob = kt.hal.interfaces.IJSONSerializable(ob)
    ctype = negotiate()
    body = ob.to_json(dict(content_type=ctype))
    data = json.dumps(body).encode('utf-8')
    hdrs = werkzeug.datastructures.Headers()
    if headers is not None:
        hdrs.extend(headers)
    if 'Content-Type' not in hdrs:
        hdrs['Content-Type'] = ctype
    return flask.make_response(data, status, hdrs)


def load(request=None):
    """Build a resource from the JSON body of *request*.

    The current Flask request is used if *request* is not provided.  A
    body containing a list produces a
    :class:`~kt.hal.resource.ResourceCollection`.

    """
    if request is None:
        request = flask.request
    data = request.get_json()
    try:
        if isinstance(data, list):
            return kt.hal.resource.ResourceCollection(data)
        if isinstance(data, dict):
            return kt.hal.resource.Resource(data)
    except (TypeError, kt.hal.interfaces.InvalidMember) as e:
        raise werkzeug.exceptions.BadRequest(str(e))
    raise werkzeug.exceptions.BadRequest(
        'request body must contain a resource or a list of resources')
