"""
Tests for the pure helper functions shared by the builders.
"""

import pytest

from lin_api.core.builders import (
    JSON_FORMAT_HEADERS,
    condition_image_url,
    dasherize,
    encode_uri,
    encode_uri_component,
    is_set,
    is_true_flag,
    is_truthy,
    join_query,
    js_string,
    query_pairs,
    resolve_fields,
    resolve_headers,
    to_json,
    xml_escape,
    xml_fragment,
)


class TestStringCoercion:
    @pytest.mark.parametrize("value,expected", [
        (True, "true"),
        (False, "false"),
        (None, ""),
        (25, "25"),
        (0, "0"),
        ("member", "member"),
    ])
    def test_js_string(self, value, expected):
        """Test JavaScript-style string coercion"""
        assert js_string(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        ("true", True),
        (True, True),
        (False, False),
        ("false", False),
        ("True", False),
        ("yes", False),
        (1, False),
    ])
    def test_is_true_flag_compares_against_true_string(self, value, expected):
        """Test flags compare against the "true" string"""
        assert is_true_flag(value) is expected

    def test_is_true_flag_default(self):
        """Test an unset flag takes the default"""
        assert is_true_flag(None, default=False) is False


class TestFieldsAndHeaders:
    def test_resolve_fields_uses_default_when_unset(self):
        """Test default fields when none are given"""
        assert resolve_fields(None, ":(id)") == ":(id)"
        assert resolve_fields("", ":(id)") == ":(id)"

    def test_resolve_fields_uses_caller_value_verbatim(self):
        """Test caller fields are used verbatim"""
        assert resolve_fields(":(id,name)", ":(id)") == ":(id,name)"

    def test_resolve_headers_default_is_a_copy(self):
        """Test default headers are copied"""
        headers = resolve_headers(None, JSON_FORMAT_HEADERS)
        headers["extra"] = "value"

        assert headers == {"x-li-format": "json", "extra": "value"}
        assert JSON_FORMAT_HEADERS == {"x-li-format": "json"}

    def test_resolve_headers_override_replaces_defaults(self):
        """Test caller headers replace the defaults"""
        override = {"x-li-format": "xml"}
        headers = resolve_headers(override, JSON_FORMAT_HEADERS)

        assert headers == {"x-li-format": "xml"}
        assert headers is not override


class TestQueryAssembly:
    def test_query_pairs_keeps_zero_with_is_set(self):
        """Test zero values are kept when set"""
        params = query_pairs([("start", 0), ("count", None), ("order", "recency")])
        assert params == ["start=0", "order=recency"]

    def test_query_pairs_skips_falsy_with_is_truthy(self):
        """Test falsy values are skipped"""
        params = query_pairs([("start", 0), ("count", 10)], present=is_truthy)
        assert params == ["count=10"]

    def test_query_pairs_applies_encoder(self):
        """Test query values are encoded"""
        params = query_pairs([("keywords", "Alex Zoff")], encode=encode_uri)
        assert params == ["keywords=Alex%20Zoff"]

    def test_query_pairs_coerces_booleans(self):
        """Test booleans become lowercase strings"""
        assert query_pairs([("current-company", True)]) == ["current-company=true"]

    def test_presence_rules(self):
        """Test presence rules"""
        assert is_set(0) is True
        assert is_set(None) is False
        assert is_truthy(0) is False
        assert is_truthy("x") is True

    def test_join_query_without_params(self):
        """Test no query string without params"""
        assert join_query("groups/1", []) == "groups/1"

    def test_join_query_with_params(self):
        """Test params joined into a query string"""
        assert join_query("groups/1", ["start=0", "count=5"]) == "groups/1?start=0&count=5"


class TestBodies:
    def test_to_json_is_compact(self):
        """Test compact JSON output"""
        assert to_json({"visibility": {"code": "anyone"}, "comment": "hi"}) == (
            '{"visibility":{"code":"anyone"},"comment":"hi"}'
        )

    def test_to_json_keeps_non_ascii(self):
        """Test non-ASCII text is kept"""
        assert to_json({"comment": "café"}) == '{"comment":"café"}'

    def test_xml_escape(self):
        """Test XML escaping"""
        assert xml_escape("a & b <c> \"d\" 'e'") == (
            "a &amp; b &lt;c&gt; &quot;d&quot; &#039;e&#039;"
        )

    def test_xml_escape_keeps_raquo_entity(self):
        """Test the raquo entity survives escaping"""
        assert xml_escape("Next &#187;") == "Next &#187;"

    def test_xml_fragment(self):
        """Test XML fragment building"""
        assert xml_fragment("post", [("title", "T"), ("summary", "S")]) == (
            "<post><title>T</title><summary>S</summary></post>"
        )

    def test_xml_fragment_escapes_text(self):
        """Test XML fragment text is escaped"""
        assert xml_fragment("comment", [("text", "<b>")]) == (
            "<comment><text>&lt;b&gt;</text></comment>"
        )


class TestConditionImageUrl:
    def test_unwraps_proxied_url(self, proxied_image_url):
        """Test a proxied image URL is unwrapped"""
        assert condition_image_url(proxied_image_url) == (
            "http://example.com/img.png?size=large"
        )

    def test_returns_plain_url_unchanged(self):
        """Test plain URLs pass through"""
        url = "http://example.com/img.png?url=ignored"
        assert condition_image_url(url) == url


class TestEncoding:
    @pytest.mark.parametrize("name,expected", [
        ("firstName", "first-name"),
        ("currentCompany", "current-company"),
        ("keywords", "keywords"),
    ])
    def test_dasherize(self, name, expected):
        """Test camelCase to dashed names"""
        assert dasherize(name) == expected

    def test_encode_uri_keeps_reserved_characters(self):
        """Test encode_uri keeps reserved characters"""
        assert encode_uri("a,b/c?d=e&f") == "a,b/c?d=e&f"
        assert encode_uri("Alex Zoff") == "Alex%20Zoff"

    def test_encode_uri_component_escapes_reserved_characters(self):
        """Test encode_uri_component escapes reserved characters"""
        assert encode_uri_component("a b/c=d") == "a%20b%2Fc%3Dd"
        assert encode_uri_component("it's(ok)") == "it's(ok)"
