from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

VALIDATE_JSON = "type_validate_json"


RETRY_STATUSES = (502, 503, 504)


def get_session_with_retries(retries: int = 3) -> requests.Session:
    """Session that retries GETs and data source reads on gateway errors."""
    retry = Retry(total=retries, backoff_factor=0.3, status_forcelist=RETRY_STATUSES,
                  allowed_methods=frozenset(["GET", "POST"]), raise_on_status=False)
    session = requests.Session()
    for prefix in ("http://", "https://"):
        session.mount(prefix, HTTPAdapter(max_retries=retry))
    return session


class ProviderClient:
    def __init__(self, base_url: str, timeout: int = 10, verify: bool = True, retries: int = 3,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/") if base_url else ""
        self.session = session or get_session_with_retries(retries=retries)
        self.timeout = timeout
        self.session.verify = verify

    def request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        if "timeout" not in kwargs:
            kwargs["timeout"] = self.timeout
        return self.session.request(method, url, **kwargs)

    def _json(self, resp: requests.Response) -> Dict[str, Any]:
        # 400/404 carry diagnostics in the body
        if resp.status_code not in (200, 400, 404):
            resp.raise_for_status()
        return resp.json()

    def metadata(self) -> Dict[str, Any]:
        return self._json(self.request("GET", "/api/metadata"))

    def schema(self) -> Dict[str, Any]:
        return self._json(self.request("GET", "/api/schema"))

    def read_data_source(self, type_name: str, config: Dict[str, Any]) -> Dict[str, Any]:
        """POST a read request; returns the `state` and `diagnostics` body."""
        resp = self.request("POST", f"/api/data-sources/{type_name}/read", json={"config": config})
        return self._json(resp)

    def validate_json(self, json_schema: str, json_object: str, fail_on_validation_error: bool = False) -> Dict[str, Any]:
        config = {
            "json_schema": json_schema,
            "json_object": json_object,
            "fail_on_validation_error": fail_on_validation_error,
        }
        return self.read_data_source(VALIDATE_JSON, config)
