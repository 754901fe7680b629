"""\
Implementation of the ``_embedded`` section of a HAL resource.

"""

import zope.interface

import kt.hal.interfaces
import kt.hal.model
import kt.hal.resource


@zope.interface.implementer(kt.hal.interfaces.IEmbedded)
class Embedded(kt.hal.model.MemberMapping):
    """The ``_embedded`` section: relation names mapped to resources.

    Values are stored according to their shape:

    - resources and resource collections are stored as they are;
    - mappings are converted to :class:`~kt.hal.resource.Resource`;
    - lists are stored as new lists, with each entry that is not
      ``None`` or already a resource converted to a
      :class:`~kt.hal.resource.Resource`; a list with
      any other entry is an invalid value as a whole;
    - ``None`` is stored as it is.

    Any other value raises
    :exc:`~kt.hal.interfaces.InvalidEmbeddedResource`, aborting the
    rest of the call; relations stored before the failure remain
    stored.  Pass ``on_invalid=kt.hal.model.REPORT`` to report and skip
    such values instead.

    Lists are never turned into a
    :class:`~kt.hal.resource.ResourceCollection` implicitly; construct
    one when the distinction matters.

    """

    typed = kt.hal.interfaces.IResource, kt.hal.interfaces.IResourceCollection
    invalid = kt.hal.interfaces.InvalidEmbeddedResource
    on_invalid = kt.hal.model.RAISE

    def _coerce(self, kind, value):
        if kind is kt.hal.model.Kind.ARRAY:
            return [self._element(element) for element in value]
        if kind is kt.hal.model.Kind.OBJECT:
            return kt.hal.resource.Resource(value)
        return value

    def _element(self, element):
        kind = kt.hal.model.classify(element, *self.typed)
        if kind in (kt.hal.model.Kind.TYPED, kt.hal.model.Kind.ABSENT):
            return element
        return kt.hal.resource.Resource(element)

    def _serialize(self, member, options, ctype):
        if isinstance(member, list):
            # Entries may be None; those are kept as null values.
            return [None if resource is None
                    else resource.to_json(options, default_content_type=ctype)
                    for resource in member]
        return super(Embedded, self)._serialize(member, options, ctype)
