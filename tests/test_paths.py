# tests/test_paths.py

from pathlib import Path

from skatelib.utils.paths import config_base_dir, repo_root_from_parameters_path, resolve_path


def test_repo_root_from_parameters_path(tmp_path: Path):
    configs = tmp_path / "configs"
    configs.mkdir()
    params = configs / "parameters.yaml"
    params.write_text("", encoding="utf-8")

    assert repo_root_from_parameters_path(params) == tmp_path.resolve()


def test_repo_root_from_relative_parameters_path(monkeypatch, tmp_path: Path):
    configs = tmp_path / "configs"
    configs.mkdir()
    (configs / "parameters.yaml").write_text("", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    assert repo_root_from_parameters_path("configs/parameters.yaml") == tmp_path.resolve()


def test_config_base_dir_uses_repo_root_for_configs_dir(tmp_path: Path):
    configs = tmp_path / "configs"
    configs.mkdir()
    assert config_base_dir(configs / "parameters.yaml") == tmp_path.resolve()


def test_config_base_dir_uses_file_dir_elsewhere(tmp_path: Path):
    assert config_base_dir(tmp_path / "params.yaml") == tmp_path.resolve()


def test_resolve_path_relative(tmp_path: Path):
    result = resolve_path("manifests/input.yaml", base_dir=tmp_path)
    assert result == (tmp_path / "manifests" / "input.yaml").resolve()


def test_resolve_path_absolute():
    p = Path("/absolute/path/to/stamp.lock")
    assert resolve_path(p, base_dir="/some/base") == p
