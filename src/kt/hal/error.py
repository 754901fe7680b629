"""\
Definition of convenient :class:`~kt.hal.interfaces.IDiagnostic` &
:class:`~kt.hal.interfaces.IErrorReporter` implementations.

"""

import collections
import logging
import typing

import zope.component
import zope.interface

import kt.hal.interfaces


logger = logging.getLogger(__name__)


@zope.interface.implementer(kt.hal.interfaces.IDiagnostic)
class Diagnostic:
    """Representation of a single reported problem."""

    def __init__(self,
                 message: str,
                 origin: str,
                 context: typing.Optional[dict] = None):
        """Initialize diagnostic.

        :param message: Human-oriented description of the problem.
        :param origin:
            Dotted name of the operation which detected the problem,
            such as ``kt.hal.link.Links.set``.
        :param context:
            Mapping of the arguments the operation was called with.

        """
        self.message = message
        self.origin = origin
        self.context = context

    def __repr__(self):
        return f'<Diagnostic {self.origin}: {self.message}>'


@zope.interface.implementer(kt.hal.interfaces.IErrorReporter)
class LoggingErrorReporter:
    """Reporter which logs each diagnostic.

    The most recent *history* diagnostics are kept in
    :attr:`diagnostics` for inspection; none are kept by default.  Pass
    ``history=None`` to keep every diagnostic.

    """

    def __init__(self, level=logging.WARNING, history=0):
        self.level = level
        self.diagnostics = collections.deque(maxlen=history)

    def capture(self, message, origin, context):
        self.diagnostics.append(Diagnostic(message, origin, context))
        logger.log(self.level, '%s (%s)', message, origin)

    def clear(self):
        self.diagnostics.clear()


reporter = LoggingErrorReporter()
"""Reporter used when no :class:`~kt.hal.interfaces.IErrorReporter`
utility has been registered."""


def get_reporter():
    """Return the error reporter for the current site."""
    return zope.component.queryUtility(
        kt.hal.interfaces.IErrorReporter, default=reporter)
