"""Cloud Vision client: request shape and failure reporting."""

from __future__ import annotations

import json

import httpx
import pytest
from respx import MockRouter

from snaplens.analyze.image import normalize_base64
from snaplens.clients.vision import annotate
from snaplens.core.errors import UpstreamError

from .helpers import VISION_URL

FEATURES = [{"type": "LABEL_DETECTION", "maxResults": 10}]


@pytest.fixture
def image(jpeg_b64: str):
    return normalize_base64(jpeg_b64, 1024 * 1024)


def test_returns_first_response_and_sends_features(image, respx_mock: MockRouter) -> None:
    first = {"labelAnnotations": [{"description": "cat"}]}
    route = respx_mock.post(VISION_URL).mock(
        return_value=httpx.Response(200, json={"responses": [first]})
    )

    assert annotate(image, FEATURES) == first

    request = route.calls.last.request
    assert request.url.params["key"] == "test-key"
    body = json.loads(request.content)
    assert body == {"requests": [{"image": {"content": image.data}, "features": FEATURES}]}


def test_empty_first_response_is_valid(image, respx_mock: MockRouter) -> None:
    respx_mock.post(VISION_URL).mock(return_value=httpx.Response(200, json={"responses": [{}]}))
    assert annotate(image, FEATURES) == {}


@pytest.mark.parametrize("payload", [{}, {"responses": []}, {"responses": [None]}])
def test_missing_response_raises(image, respx_mock: MockRouter, payload: dict) -> None:
    respx_mock.post(VISION_URL).mock(return_value=httpx.Response(200, json=payload))
    with pytest.raises(UpstreamError, match="No response from Vision API"):
        annotate(image, FEATURES)


def test_request_level_error_is_surfaced(image, respx_mock: MockRouter) -> None:
    respx_mock.post(VISION_URL).mock(
        return_value=httpx.Response(403, json={"error": {"code": 403, "message": "API key not valid."}})
    )
    with pytest.raises(UpstreamError, match="API key not valid."):
        annotate(image, FEATURES)


def test_per_image_error_is_surfaced(image, respx_mock: MockRouter) -> None:
    respx_mock.post(VISION_URL).mock(
        return_value=httpx.Response(200, json={"responses": [{"error": {"code": 3, "message": "Bad image data."}}]})
    )
    with pytest.raises(UpstreamError, match="Bad image data."):
        annotate(image, FEATURES)


def test_transport_error_becomes_upstream_error(image, respx_mock: MockRouter) -> None:
    respx_mock.post(VISION_URL).mock(side_effect=httpx.ReadTimeout("slow"))
    with pytest.raises(UpstreamError, match="ReadTimeout"):
        annotate(image, FEATURES)


@pytest.mark.parametrize("payload", [["a", "list"], "text", {"responses": ["oops"]}, {"responses": "x"}])
def test_non_object_bodies_read_as_no_response(image, respx_mock: MockRouter, payload) -> None:
    respx_mock.post(VISION_URL).mock(return_value=httpx.Response(200, json=payload))
    with pytest.raises(UpstreamError, match="No response from Vision API"):
        annotate(image, FEATURES)
