"""
Unit tests for the request descriptor model.
"""

import dataclasses

import pytest

from lin_api.models import RequestDescriptor
from lin_api.v1 import groups


class TestRequestDescriptor:
    def test_defaults(self):
        """Test descriptor defaults"""
        descriptor = RequestDescriptor(method="GET", path="people/~")

        assert descriptor.headers == {}
        assert descriptor.resource == ""
        assert descriptor.body is None

    def test_rejects_unknown_method(self):
        """Test unsupported methods are rejected"""
        with pytest.raises(ValueError):
            RequestDescriptor(method="PATCH", path="groups")

    def test_is_frozen(self):
        """Test descriptors cannot be modified"""
        descriptor = RequestDescriptor(method="GET", path="people/~")

        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.path = "groups"

    def test_headers_are_read_only_copies(self):
        """Test headers are copied and read-only"""
        source = {"x-li-format": "json"}
        descriptor = RequestDescriptor(method="GET", path="people/~", headers=source)
        source["x-li-format"] = "xml"

        assert descriptor.headers["x-li-format"] == "json"
        with pytest.raises(TypeError):
            descriptor.headers["x-li-format"] = "xml"

    def test_to_dict_omits_missing_body(self):
        """Test to_dict without a body"""
        descriptor = RequestDescriptor(
            method="GET", path="groups/1", headers={"x-li-format": "json"}, resource="groups"
        )

        assert descriptor.to_dict() == {
            "method": "GET",
            "path": "groups/1",
            "headers": {"x-li-format": "json"},
            "resource": "groups",
        }

    def test_to_dict_includes_body(self):
        """Test to_dict with a body"""
        descriptor = RequestDescriptor(method="PUT", path="posts/1", body="true")
        assert descriptor.to_dict()["body"] == "true"

    def test_to_httpx(self):
        """Test conversion to an httpx request"""
        descriptor = RequestDescriptor(
            method="PUT",
            path="posts/X/relation-to-viewer/is-liked",
            headers={"x-li-format": "json", "Content-Type": "application/json;charset=UTF-8"},
            resource="groups",
            body="true",
        )
        request = descriptor.to_httpx("https://api.example.com/v1")

        assert request.method == "PUT"
        assert str(request.url) == "https://api.example.com/v1/posts/X/relation-to-viewer/is-liked"
        assert request.headers["x-li-format"] == "json"
        assert request.content == b"true"

    def test_to_httpx_uses_configured_base_url(self, monkeypatch):
        """Test the base URL comes from settings"""
        monkeypatch.setenv("LIN_API_BASE_URL", "https://example.test/api/")
        request = RequestDescriptor(method="GET", path="groups/1").to_httpx()

        assert str(request.url) == "https://example.test/api/groups/1"
        assert request.content == b""

    def test_is_hashable(self):
        """Test equal descriptors hash alike and work as set members"""
        first = RequestDescriptor(method="GET", path="groups/1", headers={"x-li-format": "json"})
        second = RequestDescriptor(method="GET", path="groups/1", headers={"x-li-format": "json"})

        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_builder_result_is_hashable(self):
        """Test builder results can be used as dict keys"""
        descriptor = groups.show(1)
        assert {descriptor: "show"}[groups.show(1)] == "show"

    def test_headers_take_part_in_equality(self):
        """Test descriptors differing only in headers are not equal"""
        json_headers = RequestDescriptor(method="GET", path="groups/1", headers={"x-li-format": "json"})
        xml_headers = RequestDescriptor(method="GET", path="groups/1", headers={"x-li-format": "xml"})

        assert json_headers != xml_headers
