"""Tests for vidfilter.common utilities."""

import pytest

from vidfilter.common import resolve_path_vars


class TestResolvePathVars:
    def test_single_var(self):
        result = resolve_path_vars("${videos}/ep01.mp4", {"videos": "/data/vids"})
        assert result == "/data/vids/ep01.mp4"

    def test_multiple_vars(self):
        paths = {"raw": "/data/raw", "out": "/data/out"}
        result = resolve_path_vars("${raw}/a and ${out}/b", paths)
        assert result == "/data/raw/a and /data/out/b"

    def test_no_vars(self):
        assert resolve_path_vars("/plain/path", {}) == "/plain/path"

    def test_unknown_var_raises(self):
        with pytest.raises(ValueError, match="Unknown path variable"):
            resolve_path_vars("${missing}/x", {})
