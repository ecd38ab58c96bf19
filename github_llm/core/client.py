# github_llm/core/client.py
"""
GitHub Models API 客户端。
每个操作都是一次阻塞的网络调用：不重试、不缓存、不覆盖传输层默认超时。
"""

from typing import Dict, Any, List, Optional

from .errors import MissingDependencyError, TransportError
from .payload import dump_payload
from ..utils.console import warning

CATALOG_URL = "https://models.github.ai/catalog/models"
COMPLETIONS_URL = "https://models.github.ai/inference/chat/completions"
REST_RATE_LIMIT_URL = "https://api.github.com/rate_limit"

GITHUB_ACCEPT = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"


def _requests():
    try:
        import requests
    except ImportError as e:
        raise MissingDependencyError("requests is required but not installed.") from e
    return requests


def _auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def catalog_headers(token: str) -> Dict[str, str]:
    headers = {
        "Accept": GITHUB_ACCEPT,
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }
    headers.update(_auth_headers(token))
    return headers


def _get_json(url: str, headers: Dict[str, str]) -> Any:
    requests = _requests()
    try:
        resp = requests.get(url, headers=headers)
    except requests.RequestException as e:
        raise TransportError(f"GET {url} failed: {e}") from e
    try:
        return resp.json()
    except ValueError as e:
        raise TransportError(f"GET {url} returned a non-JSON body (http {resp.status_code})") from e


def list_models(token: str) -> List[Dict[str, Any]]:
    """GET the model catalog and return the decoded JSON array."""
    return _get_json(CATALOG_URL, catalog_headers(token))


def find_rate_tier(catalog: Any, model: str) -> Optional[str]:
    """在目录中查找 id 等于 model 的条目的 rate_limit_tier，保留原始大小写"""
    if not isinstance(catalog, list):
        return None
    for entry in catalog:
        if isinstance(entry, dict) and entry.get("id") == model:
            return entry.get("rate_limit_tier") or None
    return None


def get_rate_tier(model: str, token: str) -> Optional[str]:
    """
    Look up the rate-limit tier of ``model``. The catalog is fetched on every
    call. Returns None when no entry matches or the entry carries no tier.
    """
    return find_rate_tier(list_models(token), model)


def complete(payload: Dict[str, Any], token: str) -> str:
    """
    POST the request and return the raw body whatever the HTTP status. A
    network failure yields an empty body.
    """
    requests = _requests()
    headers = {"Content-Type": "application/json"}
    headers.update(_auth_headers(token))
    try:
        resp = requests.post(
            COMPLETIONS_URL,
            data=dump_payload(payload).encode("utf-8"),
            headers=headers,
        )
    except requests.RequestException as e:
        warning(f"Request to {COMPLETIONS_URL} failed: {e}")
        return ""
    return resp.text


def rest_rate_usage(token: str) -> Optional[Dict[str, Any]]:
    """Return ``resources.core`` of the REST API rate-limit endpoint."""
    headers = {"Accept": GITHUB_ACCEPT}
    headers.update(_auth_headers(token))
    data = _get_json(REST_RATE_LIMIT_URL, headers)
    if not isinstance(data, dict):
        return None
    return (data.get("resources") or {}).get("core")
