from pathlib import Path

from free_nonprofits.paths import ProjectPaths


def test_defaults_under_root(tmp_path: Path):
    paths = ProjectPaths(tmp_path)
    assert paths.root_path == tmp_path.resolve()
    assert paths.registry_path == tmp_path.resolve() / "scripts" / "services.json"
    assert paths.readme_path == tmp_path.resolve() / "README.md"
    assert paths.catalog_path == (
        tmp_path.resolve() / "app" / "src" / "data" / "services.json"
    )
    assert paths.logos_path == tmp_path.resolve() / "app" / "public" / "logos"


def test_none_root_is_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert ProjectPaths().root_path == tmp_path.resolve()


def test_relative_and_absolute_overrides(tmp_path: Path):
    absolute = tmp_path / "elsewhere" / "catalog.json"
    paths = ProjectPaths(str(tmp_path), registry="data/registry.yml", catalog=absolute)
    assert paths.registry_path == tmp_path.resolve() / "data" / "registry.yml"
    assert paths.catalog_path == absolute.resolve()


def test_construction_has_no_side_effects(tmp_path: Path):
    paths = ProjectPaths(tmp_path)
    assert not paths.catalog_path.parent.exists()
    paths.ensure_output_dirs()
    assert paths.catalog_path.parent.is_dir()
