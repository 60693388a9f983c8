# ui/api.py
import httpx
import logging
from typing import Any, Dict, List, Optional

import config

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, message: str, errors: Optional[List[str]] = None):
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class RecordsApi:
    """Async client for the records endpoints."""

    def __init__(self, base_url: str = config.API_BASE_URL, transport: Optional[httpx.AsyncBaseTransport] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.timeout = timeout

    async def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        async with httpx.AsyncClient(base_url=self.base_url, transport=self.transport, timeout=self.timeout) as client:
            try:
                response = await client.request(method, path, **kwargs)
            except httpx.RequestError as e:
                logger.error(f"{method} {path} failed: {e}")
                raise ApiError(0, f"Network error: {e}")

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.is_error or not body.get("success"):
            message = body.get("message") or f"HTTP error! status: {response.status_code}"
            raise ApiError(response.status_code, message, body.get("errors"))
        return body

    async def list_records(self, **params) -> List[Dict[str, Any]]:
        query = {key: value for key, value in params.items() if value}
        body = await self._request("GET", "/records", params=query)
        return body.get("data") or []

    async def get_record(self, record_id: str) -> Dict[str, Any]:
        body = await self._request("GET", f"/records/{record_id}")
        return body["data"]

    async def create_record(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        body = await self._request("POST", "/records", json=payload)
        return body["data"]

    async def update_record(self, record_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        body = await self._request("PUT", f"/records/{record_id}", json=payload)
        return body["data"]

    async def delete_record(self, record_id: str) -> None:
        await self._request("DELETE", f"/records/{record_id}")
