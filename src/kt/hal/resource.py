"""\
Implementations of HAL resources and resource collections.

A resource keeps its ``_links`` and ``_embedded`` sections apart from
its other attributes; setting either key updates the corresponding
section instead of storing the raw value.  Only the HAL representation
(``application/hal+json``) carries the sections; the plain JSON
representation contains the other attributes alone.

"""

import collections.abc
import copy

import zope.interface

import kt.hal.embedded
import kt.hal.interfaces
import kt.hal.link
import kt.hal.model


LINKS = '_links'
EMBEDDED = '_embedded'


def _require_mapping(value, what):
    if not isinstance(value, collections.abc.Mapping):
        raise TypeError(f'{what} must be a mapping,'
                        f' not {type(value).__name__}')


@zope.interface.implementer(kt.hal.interfaces.IResource)
class Resource(kt.hal.model.AttributeStore):
    """A HAL resource built from a decoded HAL or JSON document."""

    def __init__(self, attributes=None):
        if attributes is not None:
            _require_mapping(attributes, 'resource attributes')
        self.links = kt.hal.link.Links()
        self.embedded = kt.hal.embedded.Embedded()
        super(Resource, self).__init__(attributes)

    def __repr__(self):
        return f'<Resource {self.url()!r}>'

    def _set_member(self, name, value, options, call):
        if name == LINKS:
            if kt.hal.interfaces.ILinks.providedBy(value):
                self.links = value
            elif value is not None:
                _require_mapping(value, LINKS)
                self.links.set_many(value, options)
        elif name == EMBEDDED:
            if kt.hal.interfaces.IEmbedded.providedBy(value):
                self.embedded = value
            elif value is not None:
                _require_mapping(value, EMBEDDED)
                self.embedded.set_many(value, options)
        else:
            self._store(name, value, options)

    def get_link(self, rel):
        return self.links.get_link(rel)

    def get_embedded(self, rel):
        return self.embedded.get(rel)

    def url(self):
        """Return the target of the ``self`` link, if there is one."""
        return self.links.get_href('self')

    def to_json(self, options=None, default_content_type=None):
        """Return the resource as a new dictionary.

        Attribute values are copied deeply, so the result can be changed
        without affecting the resource.

        For ``application/hal+json``, non-empty ``_links`` and
        ``_embedded`` sections are included, serialized with the same
        *options*.

        """
        if options is None:
            options = {}
        ctype = kt.hal.model.content_type(options, default_content_type)
        json = copy.deepcopy(self.attributes)
        if ctype == kt.hal.model.CONTENT_TYPE_HAL:
            if len(self.links):
                json[LINKS] = self.links.to_json(
                    options, default_content_type=ctype)
            if len(self.embedded):
                json[EMBEDDED] = self.embedded.to_json(
                    options, default_content_type=ctype)
        return json


@zope.interface.implementer(kt.hal.interfaces.IResourceCollection)
class ResourceCollection:
    """Ordered sequence of resources."""

    def __init__(self, resources=()):
        """Initialize from an iterable of resources or mappings.

        Mappings are converted to :class:`Resource` objects; anything
        else that does not provide
        :class:`~kt.hal.interfaces.IResource` raises :exc:`TypeError`.

        """
        self._resources = [self._resource(res) for res in resources]

    @staticmethod
    def _resource(resource):
        kind = kt.hal.model.classify(resource, kt.hal.interfaces.IResource)
        if kind is kt.hal.model.Kind.TYPED:
            return resource
        if kind is kt.hal.model.Kind.OBJECT:
            return Resource(resource)
        raise TypeError(f'collection entries must be resources or mappings,'
                        f' not {type(resource).__name__}')

    def __getitem__(self, index: int):
        return self._resources[index]

    def __iter__(self):
        yield from self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def append(self, resource):
        self._resources.append(self._resource(resource))

    def to_json(self, options=None, default_content_type=None):
        if options is None:
            options = {}
        ctype = kt.hal.model.content_type(options, default_content_type)
        return [resource.to_json(options, default_content_type=ctype)
                for resource in self._resources]
