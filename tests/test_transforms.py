"""Tests for the URL transforms and their registry."""

import re
import pytest

from onelink.transforms import (
    Base64Transform,
    LZStringTransform,
    Transform,
    TransformRegistry,
    ZlibTransform,
    get_global_transform_registry,
)

URL_SAFE = re.compile(r"^[A-Za-z0-9_-]+$")

SAMPLE_TEXTS = [
    "a",
    '{"name":"Alice","links":[]}',
    "Zoë 🚀 naïve café",
    "\ud800 lone surrogate",
    "x" * 5000,
]


@pytest.fixture(params=[ZlibTransform, Base64Transform])
def transform(request):
    return request.param()


class TestTransforms:
    """Behaviour shared by all built-in transforms."""

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_round_trip(self, transform, text):
        token = transform.compress(text)

        assert URL_SAFE.match(token)
        assert transform.decompress(token) == text

    @pytest.mark.parametrize("token", ["", "!!!", "abc def", "abc=", "a+b/c", "A", "é"])
    def test_invalid_tokens_decompress_to_none(self, transform, token):
        assert transform.decompress(token) is None

    @pytest.mark.parametrize("token", [None, 42, b"abcd"])
    def test_non_text_decompresses_to_none(self, transform, token):
        assert transform.decompress(token) is None


class TestZlibTransform:
    """Tests for ZlibTransform."""

    def test_compresses_repetitive_text(self):
        text = '{"title":"GitHub","url":"https://github.com/alice"}' * 20
        assert len(ZlibTransform().compress(text)) < len(Base64Transform().compress(text))

    def test_rejects_plain_base64(self):
        token = Base64Transform().compress("hello world")
        assert ZlibTransform().decompress(token) is None

    def test_rejects_non_utf8_payload(self):
        import base64
        import zlib

        token = base64.urlsafe_b64encode(zlib.compress(b"\xff\xfe")).decode().rstrip("=")
        assert ZlibTransform().decompress(token) is None

    def test_levels_are_interchangeable(self):
        token = ZlibTransform(level=1).compress("hello hello hello")
        assert ZlibTransform(level=9).decompress(token) == "hello hello hello"

    @pytest.mark.parametrize("level", [-2, 10])
    def test_invalid_level(self, level):
        with pytest.raises(ValueError):
            ZlibTransform(level=level)


class TestLZStringTransform:
    """Tests for LZStringTransform."""

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_round_trip(self, text):
        transform = LZStringTransform()
        token = transform.compress(text)

        assert transform.is_token(token)
        assert transform.decompress(token) == text

    def test_astral_characters_use_surrogate_pairs(self):
        from onelink.transforms.lzstring_transform import _from_utf16_units, _to_utf16_units

        units = _to_utf16_units("a🚀")

        assert units == "a\ud83d\ude80"
        assert _from_utf16_units(units) == "a🚀"

    @pytest.mark.parametrize("token", ["", "!!!", "abc def", "a/b", "A", "é", None, 42])
    def test_invalid_tokens_decompress_to_none(self, token):
        assert LZStringTransform().decompress(token) is None

    def test_alphabet_allows_plus_and_dollar(self):
        transform = LZStringTransform()

        assert transform.is_token("ab+c$-")
        assert not transform.is_token("ab_c")


class TestTransformRegistry:
    """Tests for TransformRegistry."""

    def test_defaults(self):
        registry = TransformRegistry()

        assert registry.list_names() == ["zlib", "base64", "lzstring"]
        assert registry.get("zlib") is ZlibTransform
        assert registry.get("missing") is None

    def test_create_passes_options(self):
        transform = TransformRegistry().create("zlib", level=3)

        assert isinstance(transform, ZlibTransform)
        assert transform.level == 3

    def test_create_ignores_unknown_options(self):
        transform = TransformRegistry().create("base64", level=3)
        assert isinstance(transform, Base64Transform)

    def test_create_unknown(self):
        with pytest.raises(ValueError, match="Unknown transform"):
            TransformRegistry().create("lzma")

    def test_names_are_case_insensitive(self):
        registry = TransformRegistry()

        assert "ZLIB" in registry
        assert registry.get("Base64") is Base64Transform

    def test_register_and_unregister(self):
        class ReverseTransform(Transform):
            name = "reverse"

            def compress(self, text):
                return text[::-1]

            def decompress(self, token):
                return token[::-1]

        registry = TransformRegistry()
        registry.register(ReverseTransform)

        assert "reverse" in registry
        assert registry.create("reverse").compress("abc") == "cba"

        assert registry.unregister("reverse")
        assert not registry.unregister("reverse")
        assert "reverse" not in registry

    def test_global_registry_is_singleton(self):
        assert get_global_transform_registry() is get_global_transform_registry()
