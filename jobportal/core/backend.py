"""HTTP client for the hosted database, auth and storage service.

The hosted service exposes a REST interface per table, an object storage API,
callable functions and an auth API. This module wraps all four behind one
``BackendClient`` so feature code never builds URLs or headers itself.

Every request carries the public ``apikey`` header. The ``Authorization``
header carries the signed-in user's access token when one is given, and the
anon key otherwise.

Example:
    ```python
    from jobportal.core.backend import BackendClient

    backend = BackendClient.from_settings()
    jobs = backend.select('jobs', order='created_at.desc')
    backend.insert('applications', {...}, access_token=session.access_token)
    ```
"""
from typing import Any, Dict, List, Optional, Union

import requests

from jobportal.core.config import Settings, get_settings
from jobportal.core.exceptions import AuthError, BackendError
from jobportal.core.logging import setup_logging

logger = setup_logging('backend')


class BackendClient:
    """Thin wrapper around the hosted service's REST endpoints.

    Attributes:
        base_url: Service root, without trailing slash
        anon_key: Public API key
        timeout: Per-request timeout in seconds
        session: Shared ``requests.Session`` used for connection reuse
    """

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.anon_key = anon_key
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "BackendClient":
        """Create a client from application settings."""
        settings = settings or get_settings()
        return cls(
            base_url=settings.backend_url,
            anon_key=settings.backend_anon_key,
            timeout=settings.request_timeout
        )

    def _headers(self, access_token: Optional[str] = None, **extra: str) -> Dict[str, str]:
        headers = {
            'apikey': self.anon_key,
            'Authorization': f"Bearer {access_token or self.anon_key}",
        }
        headers.update(extra)
        return headers

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason or 'Unknown error'
        if isinstance(body, dict):
            for key in ('message', 'error_description', 'msg', 'error'):
                if body.get(key):
                    return str(body[key])
        return str(body)

    def _request(
        self,
        method: str,
        path: str,
        error_class: type = BackendError,
        **kwargs
    ) -> requests.Response:
        """Send a request and raise ``error_class`` on transport or HTTP errors."""
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {str(e)}")
            raise error_class(f"Could not reach backend: {str(e)}") from e

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error(f"{method} {path} returned {response.status_code}: {message}")
            raise error_class(message, status_code=response.status_code)
        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(f"Invalid JSON from backend: {str(e)}", response.status_code) from e

    # Tables

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        columns: str = '*',
        order: Optional[str] = None,
        single: bool = False,
        access_token: Optional[str] = None
    ) -> Union[List[Dict[str, Any]], Dict[str, Any]]:
        """Read rows from a table.

        Args:
            table: Table name, e.g. ``jobs``
            filters: Equality filters, column name to value
            columns: Column list, may include joined relations
            order: Ordering such as ``created_at.desc``
            single: Return exactly one row as a dict
            access_token: Signed-in user's token, for row-level security

        Returns:
            A list of rows, or a single row when ``single`` is set

        Raises:
            BackendError: If the request fails, or ``single`` matched no row
        """
        params = {'select': columns}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        if order:
            params['order'] = order

        headers = self._headers(access_token)
        if single:
            headers['Accept'] = 'application/vnd.pgrst.object+json'

        response = self._request('GET', f"/rest/v1/{table}", params=params, headers=headers)
        return self._json(response)

    def insert(
        self,
        table: str,
        row: Dict[str, Any],
        access_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """Insert a row and return it as stored by the backend."""
        headers = self._headers(access_token, Prefer='return=representation')
        response = self._request('POST', f"/rest/v1/{table}", json=row, headers=headers)
        data = self._json(response)
        if isinstance(data, list):
            if not data:
                raise BackendError(f"Insert into {table} returned no row")
            return data[0]
        return data or {}

    # Storage

    def upload(
        self,
        bucket: str,
        name: str,
        content: bytes,
        content_type: str = 'application/octet-stream',
        access_token: Optional[str] = None
    ) -> str:
        """Upload an object and return its key inside the bucket."""
        headers = self._headers(access_token, **{'Content-Type': content_type})
        self._request(
            'POST',
            f"/storage/v1/object/{bucket}/{name}",
            data=content,
            headers=headers
        )
        return name

    # Functions

    def invoke(
        self,
        function: str,
        payload: Dict[str, Any],
        access_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """Call a remote function with a JSON payload."""
        response = self._request(
            'POST',
            f"/functions/v1/{function}",
            json=payload,
            headers=self._headers(access_token)
        )
        return self._json(response) or {}

    # Auth

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """Exchange email and password for an access token."""
        response = self._request(
            'POST',
            '/auth/v1/token',
            error_class=AuthError,
            params={'grant_type': 'password'},
            json={'email': email, 'password': password},
            headers=self._headers()
        )
        return self._json(response)

    def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        """Register a new user."""
        response = self._request(
            'POST',
            '/auth/v1/signup',
            error_class=AuthError,
            json={'email': email, 'password': password},
            headers=self._headers()
        )
        return self._json(response)

    def sign_out(self, access_token: str) -> None:
        """Revoke the given access token."""
        self._request(
            'POST',
            '/auth/v1/logout',
            error_class=AuthError,
            headers=self._headers(access_token)
        )
