"""\
Implementation of HAL link objects and of the ``_links`` section.

"""

import copy

import zope.interface

import kt.hal.interfaces
import kt.hal.model


def _property(name):
    return property(lambda self: self.attributes.get(name))


@zope.interface.implementer(kt.hal.interfaces.ILink)
class Link(kt.hal.model.AttributeStore):
    """Utility object representing a HAL link.

    Link objects hold the properties of the HAL link object as
    attributes.  Properties not defined by HAL are kept and serialized
    as well, so links survive a round trip unchanged.

    """

    def __init__(self, attributes=None, **kwargs):
        """Initialize link from a mapping of link properties.

        :param attributes:
            Mapping of link properties, usually taken from a HAL
            document.  ``href`` is expected, but not checked.
        :param kwargs:
            Additional link properties; these take precedence over
            entries from *attributes*.

        """
        attributes = dict(attributes or (), **kwargs)
        super(Link, self).__init__(attributes)

    href = _property('href')
    templated = _property('templated')
    type = _property('type')
    deprecation = _property('deprecation')
    name = _property('name')
    profile = _property('profile')
    title = _property('title')
    hreflang = _property('hreflang')

    def __repr__(self):
        return f'<Link {self.href!r}>'

    def to_json(self, options=None, default_content_type=None):
        return copy.deepcopy(self.attributes)


@zope.interface.implementer(kt.hal.interfaces.ILinkArray)
class LinkArray:
    """Sequence of links sharing one relation."""

    def __init__(self, links=()):
        """Initialize from an iterable of links or link mappings.

        Mappings are converted to :class:`Link` objects; objects
        providing :class:`~kt.hal.interfaces.ILink` are kept as they
        are.  Anything else raises :exc:`TypeError`.

        """
        self._links = [self._link(link) for link in links]

    @staticmethod
    def _link(link):
        kind = kt.hal.model.classify(link, kt.hal.interfaces.ILink)
        if kind is kt.hal.model.Kind.TYPED:
            return link
        if kind is kt.hal.model.Kind.OBJECT:
            return Link(link)
        raise TypeError(f'link array entries must be links or mappings,'
                        f' not {type(link).__name__}')

    def __getitem__(self, index: int):
        """Retrieve specific link from the sequence."""
        return self._links[index]

    def __iter__(self):
        yield from self._links

    def __len__(self) -> int:
        """Return the number of links."""
        return len(self._links)

    def append(self, link):
        self._links.append(self._link(link))

    def to_json(self, options=None, default_content_type=None):
        ctype = kt.hal.model.content_type(options, default_content_type)
        return [link.to_json(options, default_content_type=ctype)
                for link in self._links]


@zope.interface.implementer(kt.hal.interfaces.ILinks)
class Links(kt.hal.model.MemberMapping):
    """The ``_links`` section: relation names mapped to links.

    Mappings are stored as :class:`Link`, lists as :class:`LinkArray`,
    and ``None`` as it is.  Other values, including lists with entries
    that are neither links nor mappings, are reported to the error
    reporter and skipped, unless *on_invalid* is
    :data:`~kt.hal.model.RAISE`.

    """

    typed = kt.hal.interfaces.ILink, kt.hal.interfaces.ILinkArray
    invalid = kt.hal.interfaces.InvalidLink
    on_invalid = kt.hal.model.REPORT

    def _coerce(self, kind, value):
        if kind is kt.hal.model.Kind.ARRAY:
            return LinkArray(value)
        if kind is kt.hal.model.Kind.OBJECT:
            return Link(value)
        return value

    def get_self(self):
        """Return the ``self`` link, a link array, or ``None``."""
        return self.get('self')

    def has_self(self):
        return self.get_self() is not None

    def get_link(self, rel):
        """Return the link for *rel*.

        If a link array is stored for *rel*, the first link is
        returned.  ``None`` is returned when there is no link.

        """
        link = self.get(rel)
        if kt.hal.interfaces.ILinkArray.providedBy(link):
            link = link[0] if len(link) else None
        return link

    def get_href(self, rel):
        link = self.get_link(rel)
        return None if link is None else link.href
