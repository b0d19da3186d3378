"""
Tests for structural paths.

Covers both notations, named-list addressing, leaf enumeration and
value lookup with error reporting.
"""

import pytest

from conftest import load
from structident.errors import InvalidPathStringError, KeyNotFoundError, PathTraversalError
from structident.model import OrderedRecord
from structident.path import (
    Path,
    PathElement,
    PathStyle,
    grab,
    list_paths,
    parse_dot_style_path_string,
    parse_go_patch_style_path_string,
    parse_path_string,
)


class TestPathRendering:

    def test_root(self):
        assert Path().to_go_patch_style() == "/"
        assert Path().to_dot_style() == ""

    def test_mixed_elements(self):
        path = (
            Path()
            .with_named_element("spec")
            .with_named_list_element("name", "nginx")
            .with_named_element("ports")
            .with_indexed_list_element(0)
        )
        assert path.to_go_patch_style() == "/spec/name=nginx/ports/0"
        assert path.to_dot_style() == "spec.nginx.ports.0"
        assert str(path) == "/spec/name=nginx/ports/0"

    def test_builders_do_not_modify(self):
        base = Path(document_idx=1).with_named_element("a")
        longer = base.with_named_element("b")
        assert base.elements == (PathElement(name="a"),)
        assert longer.elements == (PathElement(name="a"), PathElement(name="b"))
        assert longer.document_idx == 1


class TestGoPatchStyle:

    def test_root(self):
        assert parse_go_patch_style_path_string("/") == Path()

    def test_elements(self):
        path = parse_go_patch_style_path_string("/spec/containers/name=nginx/ports/1")
        assert path.elements == (
            PathElement(name="spec"),
            PathElement(name="containers"),
            PathElement(key="name", name="nginx"),
            PathElement(name="ports"),
            PathElement(idx=1),
        )

    def test_escaped_slash(self):
        path = parse_go_patch_style_path_string("/metadata/annotations/app.io\\/owner")
        assert path.elements[-1] == PathElement(name="app.io/owner")

    def test_too_many_equal_signs(self):
        with pytest.raises(InvalidPathStringError) as excinfo:
            parse_go_patch_style_path_string("/list/name=a=b")

        err = excinfo.value
        assert err.style is PathStyle.GO_PATCH
        assert err.path_string == "/list/name=a=b"
        assert str(err) == (
            "invalid go-patch style path /list/name=a=b, "
            "element 'name=a=b' cannot contain more than one equal sign"
        )

    def test_non_ascii_digits_are_names(self):
        path = parse_go_patch_style_path_string("/list/٣")
        assert path.elements[-1] == PathElement(name="٣")

    def test_signed_index(self):
        path = parse_go_patch_style_path_string("/list/+2")
        assert path.elements[-1] == PathElement(idx=2)

    def test_round_trip_text(self):
        text = "/spec/template/name=web/0"
        assert parse_go_patch_style_path_string(text).to_go_patch_style() == text


class TestDotStyle:

    def test_map_keys(self, deployment):
        path = parse_dot_style_path_string("metadata.labels.app", deployment)
        assert path.to_go_patch_style() == "/metadata/labels/app"

    def test_named_list_entry(self, deployment):
        path = parse_dot_style_path_string("spec.template.spec.containers.redis.image", deployment)
        assert path.elements[4] == PathElement(key="name", name="redis")
        assert path.to_go_patch_style() == "/spec/template/spec/containers/name=redis/image"

    def test_list_index(self, deployment):
        path = parse_dot_style_path_string("spec.template.spec.args.1", deployment)
        assert path.elements[-1] == PathElement(idx=1)

    def test_index_out_of_range(self, deployment):
        with pytest.raises(InvalidPathStringError) as excinfo:
            parse_dot_style_path_string("spec.template.spec.args.5", deployment)

        assert excinfo.value.style is PathStyle.DOT
        assert excinfo.value.explanation == "provided list index 5 is not in range: 0..1"

    def test_unknown_named_entry_lists_names(self, deployment):
        with pytest.raises(InvalidPathStringError) as excinfo:
            parse_dot_style_path_string("spec.template.spec.containers.postgres", deployment)

        assert excinfo.value.explanation == (
            "provided named list entry 'postgres' cannot be found in list, "
            "available names are: nginx, redis"
        )

    def test_name_in_simple_list(self, deployment):
        with pytest.raises(InvalidPathStringError) as excinfo:
            parse_dot_style_path_string("spec.template.spec.args.verbose", deployment)

        assert excinfo.value.explanation == (
            "provided named list entry 'verbose' cannot be found in list"
        )

    def test_unknown_key_continues_as_map_keys(self, deployment):
        path = parse_dot_style_path_string("metadata.annotations.owner", deployment)
        assert path.elements == (
            PathElement(name="metadata"),
            PathElement(name="annotations"),
            PathElement(name="owner"),
        )


class TestParsePathString:

    def test_dispatch(self, deployment):
        go_patch = parse_path_string("/spec/replicas", deployment)
        dot = parse_path_string("spec.replicas", deployment)
        assert go_patch == dot


class TestListPaths:

    def test_named_lists_by_name(self, containers):
        paths = [str(path) for path in list_paths([containers])]
        assert paths == [
            "/name=nginx/image",
            "/name=nginx/ports/0",
            "/name=nginx/ports/1",
            "/name=redis/image",
            "/name=sidecar/image",
        ]

    def test_multiple_documents(self):
        documents = [load("a: 1"), load("- x\n- y")]
        paths = list_paths(documents)
        assert [(p.document_idx, str(p)) for p in paths] == [
            (0, "/a"),
            (1, "/0"),
            (1, "/1"),
        ]

    def test_repeated_key_next_to_scalar(self):
        """Without full coverage the list is walked by index."""
        values = [
            OrderedRecord.from_pairs([("name", "a"), ("name", "b")]),
            "scalar",
        ]
        paths = [str(path) for path in list_paths([values])]
        assert paths == ["/0/name", "/0/name", "/1"]

    def test_scalar_document(self):
        assert list_paths(["text"]) == [Path()]

    def test_empty(self):
        assert list_paths([]) == []


class TestGrab:

    def test_dot_style(self, deployment):
        assert grab(deployment, "spec.template.spec.containers.nginx.image") == "nginx:1.25"

    def test_go_patch_style(self, deployment):
        assert grab(deployment, "/spec/template/spec/containers/name=redis/image") == "redis:7"

    def test_index(self, deployment):
        assert grab(deployment, "/spec/template/spec/args/0") == "--verbose"

    def test_root(self, deployment):
        assert grab(deployment, "/") is deployment

    def test_missing_key(self, deployment):
        with pytest.raises(KeyNotFoundError) as excinfo:
            grab(deployment, "/metadata/namespace")
        assert excinfo.value.available_keys == ["name", "labels"]

    def test_expected_map(self, deployment):
        with pytest.raises(PathTraversalError) as excinfo:
            grab(deployment, "/spec/replicas/count")

        assert str(excinfo.value) == (
            "failed to traverse tree, expected a map but found type int at /spec/replicas"
        )
        assert str(excinfo.value.path) == "/spec/replicas"

    def test_expected_list(self, deployment):
        with pytest.raises(PathTraversalError) as excinfo:
            grab(deployment, "/metadata/0")
        assert "expected a list but found type map at /metadata" in str(excinfo.value)

    def test_expected_complex_list(self, deployment):
        with pytest.raises(PathTraversalError) as excinfo:
            grab(deployment, "/spec/template/spec/args/name=x")
        assert "expected a complex-list but found type list" in str(excinfo.value)

    def test_missing_named_entry(self, deployment):
        with pytest.raises(PathTraversalError) as excinfo:
            grab(deployment, "/spec/template/spec/containers/name=postgres")
        assert str(excinfo.value) == "there is no entry name: postgres in the list"

    def test_index_out_of_range(self, deployment):
        with pytest.raises(PathTraversalError) as excinfo:
            grab(deployment, "/spec/template/spec/args/2")
        assert "provided list index 2 is not in range: 0..1" in str(excinfo.value)
