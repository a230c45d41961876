import pytest


@pytest.fixture(autouse=True)
def audit_dir(tmp_path, monkeypatch):
    """Keep audit records out of the working tree."""
    d = tmp_path / "audit"
    monkeypatch.setenv("PRSM_AUDIT_DIR", str(d))
    return d


@pytest.fixture
def changelog(tmp_path):
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# Changelog\n\n## 0.1.0\n- first release\n", encoding="utf-8")
    return path
