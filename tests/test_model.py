"""\
Tests for kt.hal.model.

"""

import unittest

import zope.interface.verify

import kt.hal.interfaces
import kt.hal.link
import kt.hal.model
import kt.hal.resource
import tests.utils


class ClassifyTestCase(unittest.TestCase):

    def classify(self, value):
        return kt.hal.model.classify(value, kt.hal.interfaces.ILink)

    def test_absent(self):
        self.assertIs(self.classify(None), kt.hal.model.Kind.ABSENT)

    def test_typed(self):
        link = kt.hal.link.Link(href='/x')
        self.assertIs(self.classify(link), kt.hal.model.Kind.TYPED)

    def test_typed_requires_matching_interface(self):
        resource = kt.hal.resource.Resource()
        self.assertIs(self.classify(resource), kt.hal.model.Kind.INVALID)

    def test_arrays(self):
        self.assertIs(self.classify([]), kt.hal.model.Kind.ARRAY)
        self.assertIs(self.classify(({},)), kt.hal.model.Kind.ARRAY)

    def test_object(self):
        self.assertIs(self.classify({'href': '/x'}), kt.hal.model.Kind.OBJECT)

    def test_scalars_are_invalid(self):
        for value in ('/x', b'/x', 42, 4.2, True, object(), len):
            self.assertIs(self.classify(value), kt.hal.model.Kind.INVALID,
                          repr(value))


class ContentTypeTestCase(unittest.TestCase):

    def test_fallback(self):
        self.assertEqual(kt.hal.model.content_type(None), 'application/json')
        self.assertEqual(kt.hal.model.content_type({}), 'application/json')

    def test_default(self):
        ctype = kt.hal.model.content_type({}, 'application/hal+json')
        self.assertEqual(ctype, 'application/hal+json')

    def test_options_win(self):
        ctype = kt.hal.model.content_type(
            {'content_type': 'application/json'}, 'application/hal+json')
        self.assertEqual(ctype, 'application/json')


class AttributeStoreTestCase(tests.utils.EventsHelper, unittest.TestCase):

    def test_interface(self):
        store = kt.hal.model.AttributeStore()
        zope.interface.verify.verifyObject(
            kt.hal.interfaces.IAttributeStore, store)

    def test_initial_attributes_are_silent(self):
        store = kt.hal.model.AttributeStore({'a': 1, 'b': 2})
        self.assertEqual(store.attributes, {'a': 1, 'b': 2})
        self.assertEqual(list(store), ['a', 'b'])
        self.assertEqual(len(store), 2)
        self.assertEqual(self.events, [])

    def test_set_one_notifies(self):
        store = kt.hal.model.AttributeStore({'a': 1})
        self.assertIs(store.set_one('a', 2), store)

        event, = self.events
        self.assertTrue(
            kt.hal.interfaces.IAttributeChangedEvent.providedBy(event))
        self.assertIs(event.object, store)
        self.assertEqual(event.name, 'a')
        self.assertEqual(event.old_value, 1)
        self.assertEqual(event.new_value, 2)

    def test_identical_value_does_not_notify(self):
        value = object()
        store = kt.hal.model.AttributeStore({'a': value})
        store.set_one('a', value)
        self.assertEqual(self.events, [])

    def test_new_none_value_notifies(self):
        store = kt.hal.model.AttributeStore()
        store.set_one('a', None)
        self.assertIn('a', store)
        self.assertFalse(store.has('a'))
        self.assertEqual([e.name for e in self.events], ['a'])

    def test_silent(self):
        store = kt.hal.model.AttributeStore()
        store.set_many({'a': 1, 'b': 2}, {'silent': True})
        self.assertEqual(store.get('b'), 2)
        self.assertEqual(self.events, [])

    def test_set_many_none(self):
        store = kt.hal.model.AttributeStore({'a': 1})
        self.assertIs(store.set_many(None), store)
        self.assertEqual(store.attributes, {'a': 1})

    def test_unset(self):
        store = kt.hal.model.AttributeStore({'a': 1})
        self.assertIs(store.unset('a'), store)
        self.assertNotIn('a', store)
        event, = self.events
        self.assertEqual(event.old_value, 1)
        self.assertIsNone(event.new_value)

        # Unknown names are ignored.
        store.unset('a')
        self.assertEqual(len(self.events), 1)


class MemberMappingTestCase(unittest.TestCase):

    def test_unknown_policy(self):
        with self.assertRaises(ValueError) as cm:
            kt.hal.link.Links(on_invalid='ignore')
        self.assertEqual(str(cm.exception),
                         "unknown invalid member policy: 'ignore'")
