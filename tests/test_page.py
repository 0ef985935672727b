"""Tests for page assembly and the static export script."""

import importlib.util
from pathlib import Path

import pytest

from folio.errors import ConfigError, UnresolvedReference
from folio.portfolio.loader import load_portfolio
from folio.views.page import render_page, write_page

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _load_script():
    path = PROJECT_ROOT / "scripts" / "render_portfolio.py"
    spec = importlib.util.spec_from_file_location("render_portfolio", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRenderPage:
    """Tests for render_page."""

    def test_full_document(self, sample_config_text, style_registry):
        html = render_page(load_portfolio(sample_config_text), registry=style_registry)
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Ada</title>" in html
        assert '<h1 class="folio-' in html
        assert 'href="mailto:ada@x.io"' in html
        assert "Your browser does not support HTML5 videos" in html

    def test_stylesheet_covers_tree_classes(self, sample_config_text, style_registry):
        html = render_page(load_portfolio(sample_config_text), registry=style_registry)
        styles = style_registry.portfolio_styles("default")
        for class_id in styles.model_dump().values():
            assert f".{class_id} {{" in html
            assert f'class="{class_id}"' in html

    def test_other_sheet(self, ada_portfolio, style_registry):
        html = render_page(ada_portfolio, registry=style_registry, sheet_key="plain")
        assert "Georgia, serif" in html

    def test_other_sheet_rules_do_not_leak(self, ada_portfolio, style_registry):
        default_html = render_page(ada_portfolio, registry=style_registry)
        plain_html = render_page(ada_portfolio, registry=style_registry, sheet_key="plain")
        assert "video { width: 100%; }" not in plain_html
        assert render_page(ada_portfolio, registry=style_registry) == default_html
        assert "Georgia" not in default_html

    def test_unresolved_reference_propagates(self, sample_config_text, style_registry):
        text = sample_config_text.replace("[Rust, Python, Go]", "[Rust, Zig]")
        with pytest.raises(UnresolvedReference):
            render_page(load_portfolio(text), registry=style_registry)


class TestWritePage:
    """Tests for write_page."""

    def test_writes_file(self, sample_config_file, tmp_path, style_registry):
        output = write_page(sample_config_file, tmp_path / "out" / "index.html", registry=style_registry)
        assert output.exists()
        assert "P2" in output.read_text(encoding="utf-8")

    def test_invalid_config(self, tmp_path, style_registry):
        config = tmp_path / "bad.yaml"
        config.write_text("name: Ada\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            write_page(config, tmp_path / "index.html", registry=style_registry)
        assert not (tmp_path / "index.html").exists()


class TestRenderScript:
    """Tests for scripts/render_portfolio.py."""

    def test_writes_page(self, sample_config_file, tmp_path, capsys):
        script = _load_script()
        output = tmp_path / "site" / "index.html"
        assert script.main([str(sample_config_file), "-o", str(output)]) == 0
        assert output.exists()
        assert "Wrote" in capsys.readouterr().out

    def test_reports_config_error(self, tmp_path, capsys):
        script = _load_script()
        config = tmp_path / "bad.yaml"
        config.write_text("- not a mapping\n", encoding="utf-8")
        assert script.main([str(config), "-o", str(tmp_path / "index.html")]) == 1
        assert "malformed" in capsys.readouterr().err

    def test_reports_unknown_sheet(self, sample_config_file, tmp_path, capsys):
        script = _load_script()
        code = script.main([str(sample_config_file), "-o", str(tmp_path / "i.html"), "--sheet", "neon"])
        assert code == 1
        assert "neon" in capsys.readouterr().err
