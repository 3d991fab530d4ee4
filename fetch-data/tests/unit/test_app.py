"""
Unit tests for fetch data Lambda function
"""
import pytest
from postgrest.exceptions import APIError


class TestFetchDataLambdaHandler:
    """Test cases for generic table fetch Lambda handler"""

    @pytest.fixture(autouse=True)
    def setup(self, load_handler, mock_supabase):
        self.handler = load_handler('fetch-data').lambda_handler
        self.supabase = mock_supabase
        self.client = mock_supabase['client']
        self.query = mock_supabase['query']

    def test_fetch_rows(self, json_event, lambda_context, read_body):
        rows = [{'id': 1, 'title': 'Sunset'}, {'id': 2, 'title': 'Harbour'}]
        self.query.execute.return_value.data = rows

        response = self.handler(json_event({'table': 'albums'}), lambda_context)

        assert response['statusCode'] == 200
        assert read_body(response) == rows
        self.client.table.assert_called_once_with('albums')
        self.client.table.return_value.select.assert_called_once_with('*')

    def test_fetch_uses_anon_key_and_caller_token(self, json_event, lambda_context):
        event = json_event({'table': 'albums'})
        event['headers']['Authorization'] = 'Bearer user-jwt'

        self.handler(event, lambda_context)

        assert self.supabase['create_client'].call_args.args[:2] == ('https://test-project.supabase.co', 'test-anon-key')
        self.client.postgrest.auth.assert_called_once_with('user-jwt')

    def test_fetch_without_token_runs_anonymous(self, json_event, lambda_context):
        self.handler(json_event({'table': 'albums'}), lambda_context)

        self.client.postgrest.auth.assert_not_called()

    def test_missing_table_is_passed_through(self, json_event, lambda_context, read_body):
        self.query.execute.side_effect = APIError({
            'message': 'relation "public.None" does not exist',
            'code': '42P01'
        })

        response = self.handler(json_event({}), lambda_context)

        self.client.table.assert_called_once_with(None)
        assert response['statusCode'] == 500
        assert read_body(response)['error'] == 'relation "public.None" does not exist'

    def test_backend_error_with_message(self, json_event, lambda_context, read_body):
        self.query.execute.side_effect = APIError({'message': 'permission denied for table secrets', 'code': '42501'})

        response = self.handler(json_event({'table': 'secrets'}), lambda_context)

        assert response['statusCode'] == 500
        assert read_body(response)['error'] == 'permission denied for table secrets'

    def test_backend_error_without_message_returns_empty_rows(self, json_event, lambda_context, read_body):
        self.query.execute.side_effect = APIError({'code': 'PGRST000'})

        response = self.handler(json_event({'table': 'albums'}), lambda_context)

        assert response['statusCode'] == 200
        assert read_body(response) == []

    def test_null_data_returns_empty_rows(self, json_event, lambda_context, read_body):
        self.query.execute.return_value.data = None

        response = self.handler(json_event({'table': 'albums'}), lambda_context)

        assert read_body(response) == []

    def test_allow_list_rejects_unknown_table(self, json_event, lambda_context, read_body, monkeypatch):
        monkeypatch.setenv('PHOTO_SERVICE_ALLOWED_TABLES', 'albums, photos')

        response = self.handler(json_event({'table': 'users'}), lambda_context)

        assert response['statusCode'] == 403
        assert read_body(response)['error'] == 'Table is not available'
        self.supabase['create_client'].assert_not_called()

    def test_allow_list_accepts_listed_table(self, json_event, lambda_context, monkeypatch):
        monkeypatch.setenv('PHOTO_SERVICE_ALLOWED_TABLES', 'albums, photos')

        response = self.handler(json_event({'table': 'photos'}), lambda_context)

        assert response['statusCode'] == 200
        self.client.table.assert_called_once_with('photos')

    def test_invalid_json(self, api_gateway_event, lambda_context, read_body):
        api_gateway_event['body'] = '["albums"]'

        response = self.handler(api_gateway_event, lambda_context)

        assert response['statusCode'] == 400
        assert read_body(response)['error'] == 'Invalid JSON in request body'
