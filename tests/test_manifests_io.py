# tests/test_manifests_io.py
from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from skatelib.io.manifests import dump_manifest, read_manifests, write_manifest


def test_read_manifests_multi_document(tmp_path: Path):
    p = tmp_path / "m.yaml"
    p.write_text(
        "kind: Pod\nmetadata:\n  name: a\n---\nkind: Service\nmetadata:\n  name: b\n---\n",
        encoding="utf-8",
    )
    docs = read_manifests(p)
    assert [d["kind"] for d in docs] == ["Pod", "Service"]


def test_read_manifests_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_manifests(tmp_path / "nope.yaml")


def test_read_manifests_invalid_yaml(tmp_path: Path):
    p = tmp_path / "m.yaml"
    p.write_text("kind: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError) as e:
        read_manifests(p)
    assert "invalid yaml" in str(e.value).lower()


def test_read_manifests_rejects_non_mapping_document(tmp_path: Path):
    p = tmp_path / "m.yaml"
    p.write_text("kind: Pod\n---\n- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError) as e:
        read_manifests(p)
    assert "document 1" in str(e.value).lower()


def test_read_manifests_rejects_non_mapping_metadata(tmp_path: Path):
    p = tmp_path / "m.yaml"
    p.write_text("kind: Pod\nmetadata: nope\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_manifests(p)


def test_write_manifest_preserves_key_order(tmp_path: Path):
    res = {"kind": "Pod", "apiVersion": "v1", "metadata": {"name": "a"}}
    out = write_manifest(tmp_path / "pod.yaml", res)
    text = out.read_text(encoding="utf-8")
    assert text.index("kind") < text.index("apiVersion")
    assert yaml.safe_load(text) == res


def test_dump_manifest_keeps_unicode():
    assert "café" in dump_manifest({"metadata": {"annotations": {"note": "café"}}})
