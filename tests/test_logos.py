from pathlib import Path

from free_nonprofits.logos import (
    DirectoryLogoProbe,
    logo_filename,
    no_logos,
    sanitize_logo_filename,
)


def test_logo_filename_derivation():
    assert logo_filename("Acme Cloud!") == "acme-cloud.png"
    assert sanitize_logo_filename("  Google for Nonprofits ") == "google-for-nonprofits"
    assert sanitize_logo_filename("Microsoft 365 (E3)") == "microsoft-365-e3"


def test_directory_probe_reports_existing_logo(tmp_path: Path):
    (tmp_path / "acme-cloud.png").write_bytes(b"png")
    probe = DirectoryLogoProbe(tmp_path)
    assert probe("Acme Cloud!") == "/logos/acme-cloud.png"
    assert probe("Other") is None


def test_directory_probe_custom_prefix(tmp_path: Path):
    (tmp_path / "canva.png").write_bytes(b"png")
    assert DirectoryLogoProbe(tmp_path, "/static/")("Canva") == "/static/canva.png"


def test_missing_directory_is_not_an_error(tmp_path: Path):
    assert DirectoryLogoProbe(tmp_path / "absent")("Canva") is None
    assert no_logos("Canva") is None
