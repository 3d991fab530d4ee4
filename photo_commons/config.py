"""
Configuration management for the pictures photo-service
Supports environment variables, local .env files and SSM Parameter Store
"""
import os
from typing import Optional, Any
from functools import lru_cache
import boto3
from botocore.exceptions import ClientError, NoCredentialsError
from dotenv import load_dotenv

from .constants import StorageConstants

# Local development: pick up SUPABASE_* from a .env file next to the caller
load_dotenv()


class Config:
    """
    Configuration manager with hybrid approach:
    1. Environment Variables (highest priority)
    2. AWS Parameter Store (environment-specific)
    3. Local defaults (development fallback)
    """

    def __init__(self):
        self.environment = os.environ.get('ENVIRONMENT', 'dev')
        self.parameter_store_prefix = os.environ.get(
            'PARAMETER_STORE_PREFIX',
            f'/pictures/{self.environment}/photo-service'
        )
        self._ssm_client = None

    @property
    def ssm_client(self):
        """Lazy initialization of SSM client"""
        if self._ssm_client is None:
            try:
                self._ssm_client = boto3.client('ssm')
            except (NoCredentialsError, Exception):
                # Local development without AWS credentials
                self._ssm_client = None
        return self._ssm_client

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """
        Get configuration parameter with fallback hierarchy:
        1. PHOTO_SERVICE_ prefixed environment variable
        2. Plain environment variable
        3. SSM Parameter Store
        4. Default value
        """
        env_name = key.upper().replace('-', '_')

        env_value = os.environ.get(f"PHOTO_SERVICE_{env_name}")
        if env_value is not None:
            return env_value

        env_value = os.environ.get(env_name)
        if env_value is not None:
            return env_value

        ssm_value = self.get_ssm_parameter(key)
        if ssm_value is not None:
            return ssm_value

        return default

    @lru_cache(maxsize=128)
    def get_ssm_parameter(self, key: str) -> Optional[str]:
        """
        Get parameter from AWS SSM Parameter Store with caching.
        SecureString values (service keys) are decrypted.
        """
        if not self.ssm_client:
            return None

        parameter_name = f"{self.parameter_store_prefix}/{key}"

        try:
            response = self.ssm_client.get_parameter(Name=parameter_name, WithDecryption=True)
            return response['Parameter']['Value']
        except ClientError as e:
            if e.response['Error']['Code'] != 'ParameterNotFound':
                print(f"Error getting SSM parameter {parameter_name}: {e}")
            return None
        except Exception as e:
            print(f"Unexpected error getting SSM parameter {parameter_name}: {e}")
            return None

    def get_int_parameter(self, key: str, default: int = 0) -> int:
        """Get integer parameter"""
        value = self.get_parameter(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def get_bool_parameter(self, key: str, default: bool = False) -> bool:
        """Get boolean parameter"""
        value = self.get_parameter(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return default

    def get_list_parameter(self, key: str, default: list = None, separator: str = ',') -> list:
        """Get list parameter (comma-separated string)"""
        value = self.get_parameter(key)
        if value is None:
            return default or []

        if isinstance(value, list):
            return value

        if isinstance(value, str):
            return [item.strip() for item in value.split(separator) if item.strip()]

        return default or []

    # Supabase credentials
    @property
    def supabase_url(self) -> Optional[str]:
        """Supabase project base URL"""
        return self.get_parameter('supabase-url')

    @property
    def supabase_key(self) -> Optional[str]:
        """Public anon key, used for request-scoped clients"""
        return self.get_parameter('supabase-key')

    @property
    def supabase_service_role_key(self) -> Optional[str]:
        """Elevated service-role key, bypasses row-level policy"""
        return self.get_parameter('supabase-service-role-key')

    # Storage settings
    @property
    def photo_bucket_name(self) -> str:
        """Get photo bucket name"""
        return self.get_parameter('photo-bucket-name', StorageConstants.DEFAULT_BUCKET)

    @property
    def photo_list_limit(self) -> int:
        """Page size for bucket listings"""
        return self.get_int_parameter('photo-list-limit', StorageConstants.LIST_LIMIT)

    @property
    def max_upload_size(self) -> int:
        """Get maximum upload size in bytes"""
        return self.get_int_parameter('max-upload-size', StorageConstants.MAX_UPLOAD_SIZE)

    @property
    def allowed_tables(self) -> list:
        """Tables the generic fetch may read; empty means unrestricted"""
        return self.get_list_parameter('allowed-tables', [])

    @property
    def enable_debug_logging(self) -> bool:
        """Get debug logging flag"""
        return self.get_bool_parameter('enable-debug-logging', False)

    @property
    def cors_allowed_origins(self) -> list:
        """Get CORS allowed origins"""
        if self.environment in ('dev', 'test'):
            return ['*']
        return self.get_list_parameter('allowed-origins', ['*'])


# Global configuration instance
config = Config()
