from datetime import datetime, timezone

from django.test import SimpleTestCase

from cms import utils
from cms.exceptions import ContentFileError
from cms.records import EntryRecord, resolve_origin_id, timestamp_to_datetime
from cms.tests.support import ContentTreeMixin


class ResolveOriginTests(SimpleTestCase):

    def test_absent_origin(self):
        self.assertIsNone(resolve_origin_id(None))
        self.assertIsNone(resolve_origin_id(''))
        self.assertIsNone(resolve_origin_id('   '))

    def test_raw_ids(self):
        self.assertEqual(resolve_origin_id('abc-123'), 'abc-123')
        self.assertEqual(resolve_origin_id(42), '42')

    def test_resolved_reference(self):
        """Anything with an id attribute is treated as a resolved reference."""
        origin = EntryRecord(id='home', collection='pages', site='default')
        self.assertEqual(resolve_origin_id(origin), 'home')

    def test_reference_without_id(self):
        class Missing:
            id = None

        self.assertIsNone(resolve_origin_id(Missing()))
        self.assertIsNone(resolve_origin_id(object()))

    def test_has_origin(self):
        self.assertFalse(EntryRecord(id='1', collection='c', site='s').has_origin())
        self.assertTrue(EntryRecord(id='2', collection='c', site='s', origin='1').has_origin())

    def test_model_data_uses_resolved_origin(self):
        root = EntryRecord(id='1', collection='pages', site='default')
        child = EntryRecord(id='2', collection='pages', site='fr', origin=root, data={'title': 'Accueil'})
        data = child.to_model_data()
        self.assertEqual(data['origin_id'], '1')
        self.assertEqual(data['site'], 'fr')
        self.assertEqual(data['data'], {'title': 'Accueil'})

    def test_timestamp_to_datetime(self):
        self.assertEqual(timestamp_to_datetime(0), datetime(1970, 1, 1, tzinfo=timezone.utc))
        self.assertIsNone(timestamp_to_datetime(None))


class FrontMatterTests(SimpleTestCase):

    def test_front_matter_and_body(self):
        metadata, body = utils.parse_front_matter('---\nid: abc\ntitle: Home\n---\n\nHello\n')
        self.assertEqual(metadata, {'id': 'abc', 'title': 'Home'})
        self.assertEqual(body, '\nHello\n')

    def test_front_matter_without_body(self):
        metadata, body = utils.parse_front_matter('---\nid: abc\n---')
        self.assertEqual(metadata, {'id': 'abc'})
        self.assertEqual(body, '')

    def test_empty_front_matter(self):
        metadata, body = utils.parse_front_matter('---\n---\nBody')
        self.assertEqual(metadata, {})
        self.assertEqual(body, 'Body')

    def test_no_front_matter(self):
        metadata, body = utils.parse_front_matter('Just text')
        self.assertEqual(metadata, {})
        self.assertEqual(body, 'Just text')

    def test_invalid_yaml_raises(self):
        with self.assertLogs('cms', level='ERROR'):
            with self.assertRaises(ContentFileError):
                utils.parse_front_matter('---\ntitle: [unclosed\n---\n', 'bad.md')

    def test_non_mapping_yaml_raises(self):
        with self.assertRaises(ContentFileError):
            utils.parse_yaml('- a\n- b\n', 'list.yaml')


class FilenameTests(SimpleTestCase):

    def test_plain_slug(self):
        self.assertEqual(utils.split_entry_filename('about.md'), ('about', None, None))

    def test_date_prefix(self):
        slug, date, order = utils.split_entry_filename('2024-03-09.spring-sale.md')
        self.assertEqual(slug, 'spring-sale')
        self.assertEqual(date, datetime(2024, 3, 9, tzinfo=timezone.utc))
        self.assertIsNone(order)

    def test_date_and_time_prefix(self):
        _, date, _ = utils.split_entry_filename('2024-03-09-1530.launch.md')
        self.assertEqual(date, datetime(2024, 3, 9, 15, 30, tzinfo=timezone.utc))

    def test_order_prefix(self):
        self.assertEqual(utils.split_entry_filename('3.contact.md'), ('contact', None, 3))

    def test_unknown_prefix_stays_in_slug(self):
        self.assertEqual(utils.split_entry_filename('v2.notes.md'), ('v2.notes', None, None))


class FlagTests(SimpleTestCase):

    def test_real_booleans_pass_through(self):
        self.assertFalse(utils.parse_flag(False, True))
        self.assertTrue(utils.parse_flag(True, False))

    def test_missing_value_uses_default(self):
        self.assertTrue(utils.parse_flag(None, True))

    def test_quoted_spellings(self):
        """A quoted 'false' must not count as a truthy string."""
        self.assertFalse(utils.parse_flag('false', True))
        self.assertFalse(utils.parse_flag(' No ', True))
        self.assertTrue(utils.parse_flag('yes', False))
        self.assertFalse(utils.parse_flag(0, True))

    def test_unrecognised_value_is_logged_and_ignored(self):
        with self.assertLogs('cms', level='WARNING') as logs:
            self.assertTrue(utils.parse_flag('sometimes', True, 'x.md', 'published'))
        self.assertIn('published', logs.output[0])


class HandleTests(SimpleTestCase):

    def test_namespaced_blueprint(self):
        self.assertEqual(utils.namespace_and_handle('articles/seo.yaml'), ('articles', 'seo'))

    def test_blueprint_without_namespace(self):
        self.assertEqual(utils.namespace_and_handle('seo.yaml'), (None, 'seo'))

    def test_nested_namespace(self):
        self.assertEqual(
            utils.namespace_and_handle('collections/pages/page.yaml'),
            ('collections.pages', 'page'),
        )

    def test_fieldset_handle(self):
        self.assertEqual(utils.path_to_handle('common/address.yaml', 'yaml'), 'common.address')


class SafeJoinPathTests(ContentTreeMixin, SimpleTestCase):

    def test_path_inside_root(self):
        result = utils.safe_join_path(self.root, 'collections', 'pages')
        self.assertTrue(result.startswith(self.root))

    def test_traversal_is_rejected(self):
        with self.assertLogs('cms', level='WARNING'):
            with self.assertRaises(ValueError):
                utils.safe_join_path(self.root, '..', 'etc', 'passwd')
