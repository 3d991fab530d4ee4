"""
Unit tests for response and URL utilities
"""
import json
from photo_commons.utils import (
    create_error_response,
    create_json_response,
    get_header,
    with_cache_buster,
)

BASE = 'https://test-project.supabase.co/storage/v1/object/public/Pictures'


class TestCacheBuster:

    def test_appends_timestamp(self):
        assert with_cache_buster(f'{BASE}/a.png', 1718000000000) == f'{BASE}/a.png?v=1718000000000'

    def test_keeps_existing_query(self):
        url = with_cache_buster(f'{BASE}/a.png?download=a.png', 5)
        assert url == f'{BASE}/a.png?download=a.png&v=5'

    def test_replaces_previous_cache_buster(self):
        assert with_cache_buster(f'{BASE}/a.png?v=1', 2) == f'{BASE}/a.png?v=2'

    def test_trailing_question_mark(self):
        assert with_cache_buster(f'{BASE}/a.png?', 7) == f'{BASE}/a.png?v=7'

    def test_defaults_to_now(self):
        url = with_cache_buster(f'{BASE}/a.png')
        assert int(url.rsplit('v=', 1)[1]) > 1_600_000_000_000


class TestResponses:

    def test_json_response(self):
        response = create_json_response([{'name': 'a.png', 'url': 'u'}])

        assert response['statusCode'] == 200
        assert response['headers']['Content-Type'] == 'application/json'
        assert json.loads(response['body']) == [{'name': 'a.png', 'url': 'u'}]

    def test_error_response(self):
        response = create_error_response(400, 'Missing file name', details={'field': 'name'})

        body = json.loads(response['body'])
        assert response['statusCode'] == 400
        assert body['success'] is False
        assert body['error'] == 'Missing file name'
        assert body['field'] == 'name'
        assert 'timestamp' in body

    def test_get_header_is_case_insensitive(self):
        event = {'headers': {'content-TYPE': 'application/json'}}

        assert get_header(event, 'Content-Type') == 'application/json'
        assert get_header(event, 'Authorization') is None
