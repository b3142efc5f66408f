# -*- coding: utf-8 -*-
"""
InLong Manager API Client
=========================

Thin HTTP client for the access-group endpoints used by the access
detail page. Every manager response is wrapped in an envelope::

    {"success": true, "errMsg": null, "data": {...}}

The client unwraps ``data`` and turns unsuccessful envelopes into
``ApiException``.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """Connection settings; unset fields are loaded from Config (.env)."""
    base_url: str = None
    token: str = None
    timeout: int = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.token is None:
            self.token = Config.API_TOKEN
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT


class InlongApiClient:
    """
    Client for the InLong manager access-group API.

    Usage:
        client = InlongApiClient(ApiConfig(base_url="http://localhost:8083/inlong/manager/api"))
        group = client.get_group("b_demo")
        client.start_process("b_demo")
    """

    def __init__(self, config: ApiConfig):
        self.config = config
        self.base_url = config.base_url.rstrip('/')

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Perform a request and unwrap the manager envelope.

        Args:
            method: HTTP method (GET, POST, ...)
            endpoint: Endpoint path (e.g. "/group/get/b_demo")
            json_data: JSON payload
            params: Query parameters

        Returns:
            The envelope's ``data`` member (or the raw body when unwrapped)
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.debug(f"[API REQ] Params: {params}")
        if json_data:
            logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {}
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)

        logger.info(f"[API RES] {response.status_code} {endpoint}")
        if not response.text:
            return None

        try:
            body = response.json()
        except ValueError:
            raise ApiException(
                message=f"Invalid JSON from {endpoint}",
                status_code=response.status_code
            )
        return self._unwrap(body, endpoint, response.status_code)

    @staticmethod
    def _unwrap(body: Any, endpoint: str, status_code: int) -> Any:
        if not isinstance(body, dict) or "success" not in body:
            return body
        if not body["success"]:
            message = body.get("errMsg") or f"Request to {endpoint} was not successful"
            logger.error(f"[API ERR] {endpoint} | {message}")
            raise ApiException(message=message, status_code=status_code, response_data=body)
        return body.get("data")

    # ==================== Access Groups ====================

    def get_group(self, group_id: str) -> Dict[str, Any]:
        """
        Fetch an access group.

        Returns:
            Group dict containing at least ``status`` and ``middlewareType``
        """
        if not group_id:
            raise ValueError("group_id is required")
        group = self._request("GET", f"/group/get/{group_id}")
        return group or {}

    def start_process(self, group_id: str) -> Any:
        """Submit an access group for approval/processing."""
        if not group_id:
            raise ValueError("group_id is required")
        logger.info(f"Starting process for group {group_id}")
        return self._request("POST", f"/group/startProcess/{group_id}")


# ==================== Singleton Instance ====================

_api_client_instance: Optional[InlongApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> InlongApiClient:
    """
    Get the shared API client.

    Args:
        config: Only used the first time the client is created
    """
    global _api_client_instance

    if _api_client_instance is None:
        if config is None:
            config = ApiConfig()
        _api_client_instance = InlongApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Drop the shared client (for tests)."""
    global _api_client_instance
    _api_client_instance = None
