"""
Tests for the Flask application served by the HTTPS server.

The application has a single route '/' that returns a fixed greeting. Every other
path and method is left to Flask's default error handling.
"""

import unittest

from server_modules.flask_app import create_app, GREETING


class TestFlaskRoutes(unittest.TestCase):

    def setUp(self):
        """Create a fresh app and test client for each test"""
        self.app = create_app()
        self.app.config['TESTING'] = True
        self.client = self.app.test_client()

    def test_root_returns_greeting(self):
        """GET / returns 200 and exactly the greeting"""
        response = self.client.get('/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_data(as_text=True), 'Hello from express server.')

    def test_root_content_type_is_framework_default(self):
        response = self.client.get('/')
        self.assertTrue(response.content_type.startswith('text/html'))

    def test_unknown_path_returns_not_found(self):
        """GET /foo falls through to the default 404"""
        response = self.client.get('/foo')
        self.assertEqual(response.status_code, 404)
        self.assertNotIn(GREETING, response.get_data(as_text=True))

    def test_nested_unknown_path_returns_not_found(self):
        response = self.client.get('/foo/bar')
        self.assertEqual(response.status_code, 404)

    def test_post_root_is_not_the_greeting(self):
        """Only GET is registered on /"""
        response = self.client.post('/')
        self.assertEqual(response.status_code, 405)
        self.assertNotIn(GREETING, response.get_data(as_text=True))

    def test_apps_are_independent(self):
        """create_app builds a new application every call"""
        self.assertIsNot(create_app(), self.app)


if __name__ == '__main__':
    unittest.main()
