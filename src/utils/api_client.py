"""
API client utilities for making HTTP requests to the backend.
"""
import logging
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import RequestException

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"


class APIClientError(Exception):
    """Custom exception for API client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def make_api_request(
    method: str,
    endpoint: str,
    data: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    base_url: str = DEFAULT_BASE_URL
) -> Any:
    """
    Make an HTTP request to the API.

    Args:
        method: HTTP method (GET, POST, etc.)
        endpoint: API endpoint (e.g., "/api/employees")
        data: Request payload
        headers: Request headers
        base_url: Base URL of the API

    Returns:
        Parsed JSON response

    Raises:
        APIClientError: If the request fails or returns an error
    """
    url = f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"
    headers = dict(headers or {})

    # Ensure JSON content type
    if 'Content-Type' not in headers and data is not None:
        headers['Content-Type'] = 'application/json'

    try:
        logger.debug(f"Making {method} request to {url}")
        response = requests.request(
            method=method,
            url=url,
            json=data,
            headers=headers,
            timeout=10
        )
    except RequestException as e:
        logger.error(f"API request failed: {str(e)}")
        raise APIClientError(f"Failed to connect to the server: {str(e)}") from e

    # Parse JSON response
    try:
        response_data = response.json()
    except ValueError:
        response_data = {}

    # Check for error status codes
    if not response.ok:
        error_msg = response_data.get('error', response.text) if isinstance(response_data, dict) else response.text
        logger.error(f"API request failed: {response.status_code} - {error_msg}")
        raise APIClientError(error_msg, status_code=response.status_code)

    return response_data


class PayrollAPIClient:
    """Thin client over the payroll HTTP API."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, api_key: Optional[str] = None):
        self.base_url = base_url
        self.api_key = api_key

    def _auth_headers(self) -> Dict[str, str]:
        if not self.api_key:
            return {}
        return {'Authorization': f'Bearer {self.api_key}'}

    def _request(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None,
                 auth: bool = False) -> Any:
        headers = self._auth_headers() if auth else None
        return make_api_request(method, endpoint, data=data, headers=headers, base_url=self.base_url)

    def health(self) -> Dict[str, Any]:
        return self._request('GET', '/api/health')

    def list_employees(self) -> List[Dict[str, Any]]:
        return self._request('GET', '/api/employees')

    def create_employee(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('POST', '/api/employees', data=fields, auth=True)

    def delete_employee(self, employee_id: int) -> Dict[str, Any]:
        return self._request('DELETE', f'/api/employees/{employee_id}', auth=True)

    def list_payrolls(self) -> List[Dict[str, Any]]:
        return self._request('GET', '/api/payrolls')

    def create_payroll(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('POST', '/api/payrolls', data=fields, auth=True)

    def get_payslip(self, payroll_id: int) -> Dict[str, Any]:
        return self._request('GET', f'/api/payslip/{payroll_id}')
