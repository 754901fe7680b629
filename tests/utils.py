"""\
Tests support for kt.hal tests.

"""

import unittest

import flask
import zope.component.hooks
import zope.event
import zope.interface.registry


class HALTestCase(unittest.TestCase):

    def setUp(self):
        super(HALTestCase, self).setUp()
        self.app = flask.Flask(__name__)
        self.app.config['PROPAGATE_EXCEPTIONS'] = True
        self.app.config['TESTING'] = True

    def request_context(self, *args, **kwargs):
        return self.app.test_request_context(*args, **kwargs)


class SiteHelper:
    """Provide a private site manager for utility registrations.

    This avoids polluting the global site manager in tests.

    """

    def setUp(self):
        super(SiteHelper, self).setUp()
        self._oldsite = zope.component.hooks.getSite()
        self._registry = zope.interface.registry.Components()
        zope.component.hooks.setHooks()
        zope.component.hooks.setSite(self)

    def tearDown(self):
        zope.component.hooks.setSite(self._oldsite)
        zope.component.hooks.resetHooks()
        super(SiteHelper, self).tearDown()

    def getSiteManager(self):
        return self._registry


class EventsHelper:
    """Collect events notified through zope.event."""

    def setUp(self):
        super(EventsHelper, self).setUp()
        self.events = []
        self._subscriber = self.events.append
        zope.event.subscribers.append(self._subscriber)

    def tearDown(self):
        zope.event.subscribers.remove(self._subscriber)
        super(EventsHelper, self).tearDown()
