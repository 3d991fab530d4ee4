"""
Pytest configuration and fixtures for the pictures photo-service tests
Provides Supabase client mocking, API Gateway events and handler loading
"""
import base64
import importlib.util
import json
import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


# Set test environment variables before photo_commons is imported
os.environ.update({
    'AWS_DEFAULT_REGION': 'us-east-1',
    'AWS_ACCESS_KEY_ID': 'testing',
    'AWS_SECRET_ACCESS_KEY': 'testing',
    'AWS_SECURITY_TOKEN': 'testing',
    'AWS_SESSION_TOKEN': 'testing',
    'ENVIRONMENT': 'test',
    'SUPABASE_URL': 'https://test-project.supabase.co',
    'SUPABASE_KEY': 'test-anon-key',
    'SUPABASE_SERVICE_ROLE_KEY': 'test-service-role-key',
    'PHOTO_SERVICE_PHOTO_BUCKET_NAME': 'Pictures',
    'PHOTO_SERVICE_PHOTO_LIST_LIMIT': '100',
    'PHOTO_SERVICE_MAX_UPLOAD_SIZE': '1048576',  # 1MB
    'PHOTO_SERVICE_ALLOWED_TABLES': '',
    'PHOTO_SERVICE_ENABLE_DEBUG_LOGGING': 'false',
    'PHOTO_SERVICE_ALLOWED_ORIGINS': '*',
})

ROOT_DIR = Path(__file__).resolve().parent
PUBLIC_BASE = 'https://test-project.supabase.co/storage/v1/object/public/Pictures'
BOUNDARY = 'pictures-test-boundary'


@pytest.fixture(autouse=True)
def clear_service_container():
    """Each test starts with freshly built services"""
    from photo_commons.services.service_container import clear_services
    clear_services()
    yield
    clear_services()


@pytest.fixture
def load_handler():
    """
    Load a function directory's app.py under a unique module name

    Every Lambda function ships its own app.py, so they cannot all be
    imported as `app` in one session.
    """
    def _load(function_dir: str):
        path = ROOT_DIR / function_dir / 'app.py'
        module_name = f"{function_dir.replace('-', '_')}_app"
        spec = importlib.util.spec_from_file_location(module_name, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    return _load


@pytest.fixture
def mock_supabase():
    """
    Patch Supabase client creation

    Yields a dict with the mocked client, bucket and create_client so tests
    can configure return values and inspect calls.
    """
    with patch('photo_commons.services.supabase_client.create_client') as mock_create_client:
        client = MagicMock()
        bucket = client.storage.from_.return_value
        bucket.get_public_url.side_effect = lambda name: f"{PUBLIC_BASE}/{name}"
        bucket.list.return_value = []
        bucket.upload.return_value = MagicMock(path='uploaded')
        bucket.remove.return_value = []

        query = client.table.return_value.select.return_value
        query.execute.return_value = MagicMock(data=[])

        mock_create_client.return_value = client

        yield {
            'create_client': mock_create_client,
            'client': client,
            'bucket': bucket,
            'query': query,
        }


@pytest.fixture
def lambda_context():
    """Mock Lambda context"""
    context = MagicMock()
    context.function_name = 'test-function'
    context.function_version = '$LATEST'
    context.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:test-function'
    context.memory_limit_in_mb = 128
    context.remaining_time_in_millis = lambda: 30000
    context.aws_request_id = 'test-request-id'
    return context


@pytest.fixture
def api_gateway_event():
    """Mock API Gateway proxy event"""
    return {
        'httpMethod': 'POST',
        'path': '/api/test',
        'resource': '/api/test',
        'requestContext': {
            'accountId': '123456789012',
            'apiId': 'test-api',
            'stage': 'test',
            'requestId': 'test-request-id',
            'identity': {
                'sourceIp': '127.0.0.1'
            }
        },
        'headers': {
            'Content-Type': 'application/json'
        },
        'queryStringParameters': None,
        'body': None,
        'isBase64Encoded': False
    }


@pytest.fixture
def json_event(api_gateway_event):
    """Build an API Gateway event with a JSON body"""
    def _build(body):
        api_gateway_event['body'] = json.dumps(body)
        return api_gateway_event
    return _build


def build_multipart_body(fields=None, files=None, boundary=BOUNDARY) -> bytes:
    """
    Encode multipart/form-data

    Args:
        fields: {name: text value}
        files: [(field name, filename, content bytes, content type or None)]
    """
    chunks = []
    for name, value in (fields or {}).items():
        chunks.append(
            f'--{boundary}\r\n'
            f'Content-Disposition: form-data; name="{name}"\r\n\r\n'.encode('utf-8')
            + value.encode('utf-8') + b'\r\n'
        )
    for name, filename, content, content_type in (files or []):
        header = f'--{boundary}\r\nContent-Disposition: form-data; name="{name}"'
        if filename is not None:
            header += f'; filename="{filename}"'
        header += '\r\n'
        if content_type:
            header += f'Content-Type: {content_type}\r\n'
        header += '\r\n'
        chunks.append(header.encode('utf-8') + content + b'\r\n')
    chunks.append(f'--{boundary}--\r\n'.encode('utf-8'))
    return b''.join(chunks)


@pytest.fixture
def multipart_event(api_gateway_event):
    """Build an API Gateway event with a base64 multipart body, as API Gateway delivers binary media"""
    def _build(fields=None, files=None):
        body = build_multipart_body(fields, files)
        api_gateway_event['headers'] = {
            'content-type': f'multipart/form-data; boundary={BOUNDARY}'
        }
        api_gateway_event['body'] = base64.b64encode(body).decode('ascii')
        api_gateway_event['isBase64Encoded'] = True
        return api_gateway_event
    return _build


def response_body(response: dict):
    """Decode the JSON body of a Lambda proxy response"""
    return json.loads(response['body'])


@pytest.fixture
def read_body():
    return response_body
