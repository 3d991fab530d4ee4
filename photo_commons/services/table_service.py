"""
Table service: generic select-all passthrough
"""
from typing import Any, List, Optional
from postgrest.exceptions import APIError
from ..config import config
from ..error_handler import error_handler
from ..exceptions import AuthorizationError
from ..constants import ErrorConstants
from ..logger import table_logger as logger
from .supabase_client import get_request_client


class TableService:
    """
    Reads rows with the caller's own credential, so the backend's
    row-level policy decides what comes back
    """

    def check_table_allowed(self, table: Optional[str]) -> None:
        """Enforce the optional allow-list; an empty list allows every table"""
        allowed = config.allowed_tables
        if allowed and table not in allowed:
            logger.warning("Table rejected by allow-list", table_name=table)
            raise AuthorizationError(ErrorConstants.TABLE_NOT_ALLOWED, resource=table, action='select')

    def fetch_all(self, table: Optional[str], event: dict) -> List[Any]:
        """
        Select all rows from a table

        Args:
            table: Table name, passed through unchecked unless an allow-list is set
            event: API Gateway event carrying the caller's credential

        Returns:
            Raw rows as returned by the backend
        """
        self.check_table_allowed(table)
        logger.log_service_operation("table_fetch", table_name=table)

        client = get_request_client(event)
        try:
            response = client.table(table).select("*").execute()
        except Exception as e:
            if isinstance(e, APIError) and error_handler.extract_message(e) is None:
                # Message-less backend errors are treated as an empty result
                logger.warning("Backend error without message treated as empty result",
                               table_name=table, error_type=type(e).__name__)
                return []
            raise error_handler.handle_table_error(e, 'select', table)

        rows = response.data if response.data is not None else []
        logger.log_table_operation(table, 'select', row_count=len(rows))
        return rows
