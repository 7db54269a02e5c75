# tests/test_labels.py
from __future__ import annotations

import pytest

from skatelib.core.errors import MissingIdentityLabels, SkateError
from skatelib.core.labels import (
    LABEL_PREFIX,
    NamespacedName,
    ReservedLabel,
    current_hash,
    get_label_value,
    get_reserved_label_value,
    metadata_name,
    namespaced_name,
)


def test_reserved_label_keys_serialize_lowercase_with_prefix():
    assert ReservedLabel.NAME.key == "skate.io/name"
    assert ReservedLabel.DAEMONSET.key == "skate.io/daemonset"
    assert str(ReservedLabel.HASH) == "skate.io/hash"


def test_reserved_label_mapping_is_exhaustive():
    expected = {
        "name",
        "namespace",
        "hash",
        "replica",
        "arch",
        "daemonset",
        "deployment",
        "nodename",
        "hostname",
        "cronjob",
    }
    assert {label.value for label in ReservedLabel} == expected
    for label in ReservedLabel:
        assert label.key == LABEL_PREFIX + label.value
        assert label.key == label.key.lower()


def test_reserved_label_parse_roundtrip():
    for label in ReservedLabel:
        assert ReservedLabel.parse(label.key) is label


@pytest.mark.parametrize("key", ["name", "skate.io/Name", "other.io/name", "skate.io/unknown", ""])
def test_reserved_label_parse_rejects_unknown(key):
    with pytest.raises(ValueError):
        ReservedLabel.parse(key)


def test_namespaced_name_roundtrip():
    nn = NamespacedName.parse("web.default")
    assert nn == NamespacedName(name="web", namespace="default")
    assert str(nn) == "web.default"


def test_namespaced_name_takes_first_and_last_segment():
    nn = NamespacedName.parse("a.b.c")
    assert nn.name == "a"
    assert nn.namespace == "c"


def test_namespaced_name_without_dot_is_rejected():
    with pytest.raises(ValueError):
        NamespacedName.parse("web")


def test_namespaced_name_is_hashable():
    assert len({NamespacedName("a", "b"), NamespacedName("a", "b")}) == 1


def test_get_label_value():
    labels = {"skate.io/name": "test", "skate.io/namespace": "default"}
    assert get_label_value(labels, "skate.io/name") == "test"
    assert get_label_value(labels, "missing") is None
    assert get_label_value(None, "skate.io/name") is None


def test_get_reserved_label_value():
    labels = {"skate.io/nodename": "node-1"}
    assert get_reserved_label_value(labels, ReservedLabel.NODENAME) == "node-1"
    assert get_reserved_label_value(labels, ReservedLabel.ARCH) is None


def test_namespaced_name_from_metadata():
    meta = {"labels": {"skate.io/name": "web", "skate.io/namespace": "prod"}}
    assert namespaced_name(meta) == NamespacedName("web", "prod")


def test_namespaced_name_missing_labels_raises_typed_error():
    with pytest.raises(MissingIdentityLabels) as e:
        namespaced_name({"labels": {"app": "web"}})
    assert e.value.missing == ("skate.io/name", "skate.io/namespace")
    assert isinstance(e.value, SkateError)


def test_namespaced_name_missing_namespace_only():
    with pytest.raises(MissingIdentityLabels) as e:
        namespaced_name({"labels": {"skate.io/name": "web"}})
    assert e.value.missing == ("skate.io/namespace",)
    assert "skate.io/namespace" in str(e.value)


def test_namespaced_name_without_labels_block():
    with pytest.raises(MissingIdentityLabels):
        namespaced_name({})


def test_metadata_name_reads_resource_metadata():
    res = {"kind": "Pod", "metadata": {"labels": {"skate.io/name": "p", "skate.io/namespace": "ns"}}}
    assert str(metadata_name(res)) == "p.ns"


def test_current_hash():
    assert current_hash({"labels": {"skate.io/hash": "abc"}}) == "abc"
    assert current_hash({"labels": {}}) == ""
    assert current_hash({}) == ""
