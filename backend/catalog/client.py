from typing import Any, Dict, List, Optional

import requests

from catalog.utils.log import get_logger

log = get_logger("client")

DEFAULT_BASE = "http://127.0.0.1:8000"


class CatalogClientError(Exception):
    def __init__(self, status_code: int, message: str, details: Optional[list] = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.details = details or []


class CatalogClient:
    """
    Thin client for the catalogue REST API.

    `session` can be any requests.Session-compatible object (FastAPI's
    TestClient included); `base_url` is prefixed to every path.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
        prefix: str = "",
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.prefix = prefix

    def _url(self, path: str) -> str:
        return f"{self.base_url}{self.prefix}{path}"

    def _request(self, method: str, path: str, json: Any = None):
        r = self.session.request(method, self._url(path), json=json, timeout=self.timeout)
        if r.status_code >= 400:
            try:
                body = r.json()
            except ValueError:
                body = {}
            message = body.get("message") if isinstance(body, dict) else None
            details = body.get("details") if isinstance(body, dict) else None
            log.debug("%s %s failed with %s", method, path, r.status_code)
            raise CatalogClientError(r.status_code, message or r.text, details)
        return r

    def list_products(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/products").json()

    def get_product(self, product_id) -> Dict[str, Any]:
        return self._request("GET", f"/products/{product_id}").json()

    def create_product(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/products", json=data).json()

    def update_product(self, product_id, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/products/{product_id}", json=data).json()

    def delete_product(self, product_id) -> bool:
        self._request("DELETE", f"/products/{product_id}")
        return True
