"""Tests for frontmatter_core.decoding."""

import pytest
import yaml

from frontmatter_core import MalformedFrontMatterError, decode_yaml


class TestDecodeYaml:
    def test_mapping(self):
        assert decode_yaml("title: hello\ncount: 3\n") == {"title": "hello", "count": 3}

    def test_empty_document(self):
        assert decode_yaml("") == {}

    def test_null_document(self):
        assert decode_yaml("~\n") == {}

    def test_scalar_raises(self):
        with pytest.raises(MalformedFrontMatterError, match="str"):
            decode_yaml("just text")

    def test_list_raises(self):
        with pytest.raises(MalformedFrontMatterError, match="list"):
            decode_yaml("- a\n- b\n")

    def test_invalid_yaml_is_not_wrapped(self):
        with pytest.raises(yaml.YAMLError):
            decode_yaml("key: [unclosed\n")

    def test_safe_load_rejects_python_tags(self):
        with pytest.raises(yaml.YAMLError):
            decode_yaml("obj: !!python/object/apply:os.system ['true']\n")
