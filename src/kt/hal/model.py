"""\
Attribute storage and the coercion vocabulary shared by the ``_links``
and ``_embedded`` sections.

Values offered to a section are classified into one of the
:class:`Kind` members by :func:`classify`; each section decides how
every kind is stored.  Members which already provide one of the
section's interfaces are stored by reference, so later changes made to
them by the caller are visible through the section.

"""

import collections.abc
import enum

import zope.event
import zope.interface
import zope.interface.interfaces

import kt.hal.error
import kt.hal.interfaces


CONTENT_TYPE_JSON = 'application/json'
"""Media type of plain JSON representations."""

CONTENT_TYPE_HAL = 'application/hal+json'
"""Media type of HAL representations."""

REPORT = 'report'
"""Invalid members are sent to the error reporter and skipped."""

RAISE = 'raise'
"""Invalid members raise an exception."""

POLICIES = REPORT, RAISE


def content_type(options, default_content_type=None):
    """Determine the representation requested by *options*."""
    if options:
        ctype = options.get('content_type')
        if ctype:
            return ctype
    return default_content_type or CONTENT_TYPE_JSON


def _silent(options):
    return bool(options and options.get('silent'))


class Kind(enum.Enum):
    """Shape of a value offered to a HAL section."""

    TYPED = 'typed'
    ARRAY = 'array'
    OBJECT = 'object'
    ABSENT = 'absent'
    INVALID = 'invalid'


def classify(value, *interfaces):
    """Classify *value*.

    Values providing any of *interfaces* are ``TYPED``.  Strings are not
    considered arrays.

    """
    if value is None:
        return Kind.ABSENT
    for iface in interfaces:
        if iface.providedBy(value):
            return Kind.TYPED
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, collections.abc.Mapping):
        return Kind.OBJECT
    return Kind.INVALID


@zope.interface.implementer(kt.hal.interfaces.IAttributeChangedEvent)
class AttributeChangedEvent(zope.interface.interfaces.ObjectEvent):

    def __init__(self, object, name, old_value, new_value):
        super(AttributeChangedEvent, self).__init__(object)
        self.name = name
        self.old_value = old_value
        self.new_value = new_value


@zope.interface.implementer(kt.hal.interfaces.IAttributeStore)
class AttributeStore:
    """Ordered keyed storage announcing changes through :mod:`zope.event`.

    An :class:`AttributeChangedEvent` is notified whenever a key is
    added, removed, or bound to a different object.  Passing an
    *options* mapping with a true ``silent`` value suppresses the
    events.  Initial attributes are always stored silently.

    """

    def __init__(self, attributes=None):
        self.attributes = {}
        self.set_many(attributes, dict(silent=True))

    def __contains__(self, name):
        return name in self.attributes

    def __iter__(self):
        return iter(self.attributes)

    def __len__(self):
        return len(self.attributes)

    def get(self, name, default=None):
        return self.attributes.get(name, default)

    def has(self, name):
        return self.attributes.get(name) is not None

    def set_one(self, name, value, options=None):
        call = dict(key=name, value=value, options=options)
        self._set_member(name, value, options, call)
        return self

    def set_many(self, mapping, options=None):
        if mapping is None:
            return self
        for name, value in list(mapping.items()):
            call = dict(key=mapping, value=value, options=options)
            self._set_member(name, value, options, call)
        return self

    def unset(self, name, options=None):
        if name in self.attributes:
            old = self.attributes.pop(name)
            if not _silent(options):
                zope.event.notify(AttributeChangedEvent(self, name, old, None))
        return self

    def _set_member(self, name, value, options, call):
        self._store(name, value, options)

    def _store(self, name, value, options):
        attributes = self.attributes
        changed = name not in attributes or attributes[name] is not value
        old = attributes.get(name)
        attributes[name] = value
        if changed and not _silent(options):
            zope.event.notify(AttributeChangedEvent(self, name, old, value))


class MemberMapping(AttributeStore):
    """Relation-keyed section holding typed members.

    Sub-classes define the interfaces of values stored as they are
    (*typed*), the exception describing invalid values (*invalid*),
    and how array and object payloads are converted (:meth:`_coerce`).

    *on_invalid* selects what happens to values that cannot be
    converted: :data:`REPORT` hands a diagnostic to *reporter* (or the
    registered :class:`~kt.hal.interfaces.IErrorReporter`) and
    continues with the remaining relations, while :data:`RAISE` raises
    *invalid* immediately.  Relations stored earlier in the same call
    are kept in either case.

    """

    typed = ()
    invalid = kt.hal.interfaces.InvalidMember
    on_invalid = REPORT

    def __init__(self, attributes=None, on_invalid=None, reporter=None):
        if on_invalid is not None:
            if on_invalid not in POLICIES:
                raise ValueError(
                    f'unknown invalid member policy: {on_invalid!r}')
            self.on_invalid = on_invalid
        self.reporter = reporter
        super(MemberMapping, self).__init__(attributes)

    def _set_member(self, rel, value, options, call):
        kind = classify(value, *self.typed)
        if kind is not Kind.INVALID:
            try:
                member = self._coerce(kind, value)
            except TypeError:
                # Array payload with entries that cannot be converted.
                kind = Kind.INVALID
        if kind is Kind.INVALID:
            self._reject(rel, value, call)
        else:
            self._store(rel, member, options)

    def _coerce(self, kind, value):
        raise NotImplementedError()

    def _reject(self, rel, value, call):
        exc = self.invalid(rel, value)
        if self.on_invalid == RAISE:
            raise exc
        reporter = self.reporter
        if reporter is None:
            reporter = kt.hal.error.get_reporter()
        cls = self.__class__
        reporter.capture(str(exc), f'{cls.__module__}.{cls.__name__}.set',
                         dict(call, rel=rel))

    def to_json(self, options=None, default_content_type=None):
        """Serialize every relation into a new dictionary.

        ``None`` values are kept as they are.  Other members are
        serialized by their own ``to_json`` method, which receives the
        same *options* object.

        """
        if options is None:
            options = {}
        ctype = content_type(options, default_content_type)
        return {rel: self._serialize(member, options, ctype)
                for rel, member in self.attributes.items()}

    def _serialize(self, member, options, ctype):
        if member is None:
            return None
        return member.to_json(options, default_content_type=ctype)
