"""Thin HTTP client helpers for JSON and form requests."""

from __future__ import annotations

from typing import IO, Any, Mapping

import requests

from .common import json_to_map

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
_JSON_CONTENT_TYPE = "application/json"


def _has_content_type(headers: Mapping[str, str]) -> bool:
    return any(key.lower() == "content-type" for key in headers)


def request_body(
    url: str, body: bytes | None, headers: Mapping[str, str] | None, method: str
) -> requests.Response:
    """Send ``body`` with ``method``; JSON content type is assumed if none is given."""
    hdrs = dict(headers or {})
    data = bytes(body or b"")
    if data and not _has_content_type(hdrs):
        hdrs["Content-Type"] = _JSON_CONTENT_TYPE
    return requests.request(method.upper(), url, data=data or None, headers=hdrs)


def request_for_query_params(
    url: str,
    query_params: Mapping[str, str] | None,
    headers: Mapping[str, str] | None,
    method: str,
) -> requests.Response:
    """Send a request whose parameters are encoded in the query string (sorted by key)."""
    params = sorted((query_params or {}).items())
    return requests.request(method.upper(), url, params=params or None, headers=dict(headers or {}))


def post(url: str, body: bytes | None, headers: Mapping[str, str] | None) -> requests.Response:
    return request_body(url, body, headers, "POST")


def put(url: str, body: bytes | None, headers: Mapping[str, str] | None) -> requests.Response:
    return request_body(url, body, headers, "PUT")


def post_for_query_params(
    url: str, query_params: Mapping[str, str] | None, headers: Mapping[str, str] | None
) -> requests.Response:
    return request_for_query_params(url, query_params, headers, "POST")


def get(
    url: str, query_params: Mapping[str, str] | None, headers: Mapping[str, str] | None
) -> requests.Response:
    return request_for_query_params(url, query_params, headers, "GET")


def get_json(
    url: str, query_params: Mapping[str, str] | None, headers: Mapping[str, str] | None
) -> bytes:
    """GET and return the raw response body, whatever the status."""
    return get(url, query_params, headers).content


def _raw_form(params: Mapping[str, str] | None) -> str:
    # Pairs are joined unescaped, the last given pair first.
    return "&".join(f"{key}={value}" for key, value in reversed(list((params or {}).items())))


def _post_form(url: str, data: Any, headers: Mapping[str, str] | None) -> requests.Response:
    hdrs = {key: value for key, value in (headers or {}).items() if key.lower() != "content-type"}
    hdrs["Content-Type"] = _FORM_CONTENT_TYPE
    return requests.post(url, data=data, headers=hdrs)


def _check_ok(resp: requests.Response) -> None:
    if resp.status_code != 200:
        raise requests.HTTPError(f"status code: {resp.status_code}", response=resp)


def post_form_bytes(
    url: str, params: Mapping[str, str] | None, headers: Mapping[str, str] | None
) -> bytes:
    """POST ``params`` as a form and return the body.

    A status other than 200 raises ``requests.HTTPError``; the body is then
    available from the exception's ``response``.
    """
    resp = _post_form(url, _raw_form(params).encode("utf-8"), headers)
    _check_ok(resp)
    return resp.content


def post_form(
    url: str, params: Mapping[str, str] | None, headers: Mapping[str, str] | None
) -> dict[str, Any]:
    """POST ``params`` as a form and decode the JSON object in the reply."""
    return json_to_map(post_form_bytes(url, params, headers))


def post_form_all(
    url: str, body: bytes | str | IO[bytes] | None, headers: Mapping[str, str] | None
) -> bytes:
    """POST a ready-made form body; a status other than 200 raises ``requests.HTTPError``."""
    resp = _post_form(url, body, headers)
    _check_ok(resp)
    return resp.content


def post_form_xml(
    url: str, params: Mapping[str, str] | None, headers: Mapping[str, str] | None
) -> bytes:
    """POST ``params`` as a form and return the body whatever the status."""
    return _post_form(url, _raw_form(params).encode("utf-8"), headers).content