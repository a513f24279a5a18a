"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

INDEX_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Demo</title></head>
<body>
<div id="app"></div>
<script>
const app = document.getElementById('app');
app.addEventListener('click', () => {
  setTimeout(() => app.classList.add('on'), 100);
});
</script>
</body>
</html>
"""

STYLES_CSS = """\
.card { transition: transform 0.2s; }
.card:hover { transform: scale(1.05); }
.spinner { animation: spin 1s linear infinite; }
@media (max-width: 600px) { .card { width: 100%; } }
"""


@pytest.fixture
def sample_site(tmp_path: Path) -> Path:
    """Create a small site with a page, a stylesheet and two assets."""
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text(INDEX_HTML)
    (site / "styles.css").write_text(STYLES_CSS)

    assets = site / "assets"
    assets.mkdir()
    (assets / "hero.png").write_bytes(b"\0" * 2048)
    (assets / "logo.gif").write_bytes(b"\0" * 1024)
    return site


@pytest.fixture
def tmp_config(sample_site: Path, tmp_path: Path) -> Path:
    """Write a minimal valid config YAML pointing at ``sample_site``."""
    cfg = tmp_path / "perfaudit.yml"
    cfg.write_text(
        """\
target_path: "{target}"
site_name: "Demo"
output_path: "{out}"
""".format(target=str(sample_site), out=str(tmp_path / "out" / "report.json"))
    )
    return cfg
