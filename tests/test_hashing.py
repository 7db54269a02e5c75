# tests/test_hashing.py
from __future__ import annotations

import re
from pathlib import Path

from skatelib.utils.hashing import DIGEST_SIZE, hash64_bytes, hash64_file, hash64_text


def test_hash64_text_is_fixed_width_hex():
    for s in ["", "a", "hello world", "北京" * 100]:
        h = hash64_text(s)
        assert len(h) == DIGEST_SIZE * 2 == 16
        assert re.fullmatch(r"[0-9a-f]{16}", h)


def test_hash64_text_matches_utf8_bytes():
    assert hash64_text("café") == hash64_bytes("café".encode("utf-8"))


def test_hash64_text_distinguishes_inputs():
    assert hash64_text("a") != hash64_text("b")


def test_hash64_file_matches_content(tmp_path: Path):
    p = tmp_path / "m.yaml"
    p.write_bytes(b"kind: Pod\n")
    assert hash64_file(p) == hash64_bytes(b"kind: Pod\n")
    assert hash64_file(str(p)) == hash64_file(p)
