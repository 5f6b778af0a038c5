"""
Unit tests for handler configuration.
"""

from dataclasses import FrozenInstanceError, replace

import pytest

from bakedassets import HandlerConfig, DEFAULT_CACHE_CONTROL
from bakedassets.config import normalize_mount_path


class TestNormalizeMountPath:

    @pytest.mark.parametrize("raw,expected", [
        ("/", "/"),
        ("/assets", "/assets/"),
        ("/assets/", "/assets/"),
        ("/assets///", "/assets/"),
        ("/a/b", "/a/b/"),
        ("///", "/"),
    ])
    def test_normalisation(self, raw, expected):
        assert normalize_mount_path(raw) == expected

    @pytest.mark.parametrize("raw", ["", "assets", "assets/"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            normalize_mount_path(raw)


class TestHandlerConfig:

    def test_defaults(self, store):
        config = HandlerConfig(store=store)

        assert config.fallthrough_on_miss is True
        assert config.serve_index_html is True
        assert config.cache_control == DEFAULT_CACHE_CONTROL == "max-age=604800"
        assert config.mount_path == "/"
        assert config.is_root_mount

    def test_mount_path_normalised_on_construction(self, store):
        config = HandlerConfig(store=store, mount_path="/static")

        assert config.mount_path == "/static/"
        assert not config.is_root_mount

    def test_frozen(self, store):
        config = HandlerConfig(store=store)
        with pytest.raises(FrozenInstanceError):
            config.mount_path = "/other/"

    def test_replace_renormalises(self, store):
        config = replace(HandlerConfig(store=store), mount_path="/assets")
        assert config.mount_path == "/assets/"

    def test_invalid_mount_fails_fast(self, store):
        with pytest.raises(ValueError):
            HandlerConfig(store=store, mount_path="assets")

    def test_store_must_be_an_asset_store(self):
        with pytest.raises(ValueError):
            HandlerConfig(store={"style.css": b"x"})
