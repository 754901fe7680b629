"""\
Interfaces for HAL representations of application objects.

"""

import zope.interface
import zope.interface.common.interfaces
import zope.interface.common.sequence
import zope.interface.interfaces
import zope.schema


# --------------------
# Exception interfaces


class IInvalidMemberException(zope.interface.common.interfaces.IValueError):
    """Interface for InvalidMember exceptions."""

    rel = zope.schema.TextLine(
        title='Relation',
        description='Relation name the invalid value was offered for',
        required=True,
    )

    value = zope.interface.Attribute("Value determined to be invalid")


# ----------
# Exceptions


@zope.interface.implementer(IInvalidMemberException)
class InvalidMember(ValueError):
    """Value cannot be stored as a member of a HAL section."""

    kind = 'member'

    def __init__(self, rel, value):
        """Initialize with the relation name and the rejected value."""
        super(InvalidMember, self).__init__(rel)
        self.rel = rel
        self.value = value

    def __str__(self):
        return f"Invalid {self.kind} identified by 'rel'='{self.rel}' !"


class InvalidLink(InvalidMember):
    """Value cannot be stored in the ``_links`` section."""

    kind = 'link'


class InvalidEmbeddedResource(InvalidMember):
    """Value cannot be stored in the ``_embedded`` section."""

    kind = 'embedded resource'


# -----------------
# Field definitions


class URL(zope.schema.TextLine):

    def __init__(self, title=None, description=None, min_length=None,
                 **kwargs):
        kwargs.update(
            title=(title or 'URL'),
            description=(description or 'Absolute or relative URL'),
            min_length=(min_length or 1),
        )
        super(URL, self).__init__(**kwargs)


# ------------------------
# Serialization & storage


class IJSONSerializable(zope.interface.Interface):

    def to_json(options=None, default_content_type=None):
        """Return a JSON-compatible representation of the object.

        *options* is a mapping; the ``content_type`` key selects the
        representation (``application/json`` or
        ``application/hal+json``).  When missing, *default_content_type*
        is used, and ``application/json`` when neither is provided.

        Implementations pass the same *options* object along to the
        objects they contain.

        """


class IAttributeStore(zope.interface.Interface):
    """Keyed storage which announces changes."""

    attributes = zope.interface.Attribute(
        'Mapping of stored values, in insertion order.')

    def get(name, default=None):
        """Return the value stored for *name*."""

    def has(name):
        """Return true if a non-``None`` value is stored for *name*."""

    def set_one(name, value, options=None):
        """Store *value* for *name*, returning the store."""

    def set_many(mapping, options=None):
        """Store every item of *mapping*, returning the store.

        A *mapping* of ``None`` is ignored.

        """

    def unset(name, options=None):
        """Remove *name* from the store, returning the store."""


class IAttributeChangedEvent(zope.interface.interfaces.IObjectEvent):
    """A value held by an attribute store was replaced."""

    name = zope.schema.TextLine(
        title='Name',
        description='Key whose value changed',
        required=True,
    )

    old_value = zope.interface.Attribute('Previous value, or None')

    new_value = zope.interface.Attribute('Value now stored, or None')


# -----
# Links


class ILink(IAttributeStore, IJSONSerializable):
    """A hyperlink from the containing resource to a URI."""

    href = URL(
        description='URI or URI template of the link target.',
        required=False,
        missing_value=None,
    )

    templated = zope.schema.Bool(
        description='Indicates whether *href* is a URI template.',
        required=False,
        missing_value=None,
    )

    type = zope.schema.ASCIILine(
        description='Media type expected when dereferencing the target.',
        min_length=3,
        required=False,
        missing_value=None,
    )

    deprecation = URL(
        description='URL providing information about the deprecation.',
        required=False,
        missing_value=None,
    )

    name = zope.schema.TextLine(
        description='Secondary key selecting between links of one relation.',
        required=False,
        missing_value=None,
    )

    profile = URL(
        description='URI hinting about the profile of the target resource.',
        required=False,
        missing_value=None,
    )

    title = zope.schema.TextLine(
        description='Human-facing label for the link.',
        min_length=1,
        required=False,
        missing_value=None,
    )

    hreflang = zope.schema.ASCIILine(
        description='Language of the target resource.',
        required=False,
        missing_value=None,
    )


class ILinkArray(zope.interface.common.sequence.IFiniteSequence,
                 IJSONSerializable):
    """Ordered sequence of links sharing a single relation."""


class ILinks(IAttributeStore, IJSONSerializable):
    """The ``_links`` section of a resource."""

    def get_self():
        """Return the value stored for the ``self`` relation, if any."""

    def has_self():
        """Return true if a ``self`` link is stored."""


# --------
# Embedded


class IResource(IAttributeStore, IJSONSerializable):
    """A HAL resource."""

    links = zope.schema.Object(
        title='Links',
        description='The ``_links`` section of the resource.',
        schema=ILinks,
        required=True,
        readonly=True,
    )

    embedded = zope.interface.Attribute(
        'The ``_embedded`` section of the resource.')


class IResourceCollection(zope.interface.common.sequence.IFiniteSequence,
                          IJSONSerializable):
    """Ordered sequence of resources."""


class IEmbedded(IAttributeStore, IJSONSerializable):
    """The ``_embedded`` section of a resource."""


# --------------
# Error handling


class IDiagnostic(zope.interface.Interface):
    """A problem recorded without interrupting the caller."""

    message = zope.schema.Text(
        title='Message',
        description='Human-oriented description of the problem',
        required=True,
    )

    origin = zope.schema.TextLine(
        title='Origin',
        description='Name of the operation reporting the problem',
        required=True,
    )

    context = zope.schema.Dict(
        title='Context',
        description='Arguments of the call that triggered the problem',
        required=False,
        missing_value=None,
    )


class IErrorReporter(zope.interface.Interface):
    """Utility recording diagnostics.

    Register an implementation with :mod:`zope.component` to control
    what happens to invalid ``_links`` members.

    """

    def capture(message, origin, context):
        """Record a diagnostic.

        This must never raise.

        """
