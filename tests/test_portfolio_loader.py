"""Tests for loading portfolio configuration."""

import json

import pytest
from pydantic import ValidationError

from folio.errors import ConfigError, ConfigErrorKind
from folio.portfolio.loader import load_portfolio, load_portfolio_file
from folio.portfolio.schemas import Portfolio, SkillKind


class TestLoadPortfolio:
    """Tests for load_portfolio."""

    def test_loads_yaml(self, sample_config_text):
        """A valid YAML document yields a Portfolio."""
        portfolio = load_portfolio(sample_config_text)
        assert isinstance(portfolio, Portfolio)
        assert portfolio.name == "Ada"
        assert portfolio.email == "ada@x.io"
        assert portfolio.languages["Rust"] == "https://rust-lang.org"

    def test_preserves_project_order(self, sample_config_text):
        """Projects keep configuration order."""
        portfolio = load_portfolio(sample_config_text)
        assert [p.name for p in portfolio.projects] == ["P1", "P2"]

    def test_preserves_reference_order(self, sample_config_text):
        """Skill references keep configuration order."""
        portfolio = load_portfolio(sample_config_text)
        assert portfolio.projects[0].languages == ["Rust", "Python", "Go"]

    def test_video_is_optional(self, sample_config_text):
        """A project without a video loads with video=None."""
        portfolio = load_portfolio(sample_config_text)
        assert portfolio.projects[0].video == "media/p1"
        assert portfolio.projects[1].video is None

    def test_accepts_json(self, sample_config_text):
        """JSON text is accepted as well as YAML."""
        data = load_portfolio(sample_config_text).model_dump()
        portfolio = load_portfolio(json.dumps(data))
        assert portfolio.projects[1].technologies == ["Docker", "WebAssembly"]

    def test_does_not_check_skill_references(self, sample_config_text):
        """Unknown skill references are left for the builder."""
        text = sample_config_text.replace("[Rust, Python, Go]", "[Rust, Cobol]")
        portfolio = load_portfolio(text)
        assert portfolio.projects[0].languages == ["Rust", "Cobol"]

    def test_strips_header_fields(self, sample_config_text):
        """Name, email and about are stripped of surrounding whitespace."""
        text = sample_config_text.replace("name: Ada", "name: '  Ada  '")
        assert load_portfolio(text).name == "Ada"

    def test_numeric_scalars_become_text(self, sample_config_text):
        text = sample_config_text.replace("name: P1", "name: 2048").replace("role: Lead", "role: 1.5")
        portfolio = load_portfolio(text)
        assert portfolio.projects[0].name == "2048"
        assert portfolio.projects[0].role == "1.5"


class TestLoadPortfolioErrors:
    """Tests for configuration errors."""

    def test_invalid_yaml_is_malformed(self):
        with pytest.raises(ConfigError) as exc_info:
            load_portfolio("name: [unclosed")
        assert exc_info.value.kind == ConfigErrorKind.MALFORMED

    def test_non_mapping_root_is_malformed(self):
        with pytest.raises(ConfigError) as exc_info:
            load_portfolio("- just\n- a list\n")
        assert exc_info.value.kind == ConfigErrorKind.MALFORMED
        assert "mapping" in str(exc_info.value)

    def test_empty_document_is_malformed(self):
        with pytest.raises(ConfigError) as exc_info:
            load_portfolio("")
        assert exc_info.value.kind == ConfigErrorKind.MALFORMED

    def test_missing_root_field(self, sample_config_text):
        text = sample_config_text.replace("email: ada@x.io\n", "")
        with pytest.raises(ConfigError) as exc_info:
            load_portfolio(text)
        assert exc_info.value.kind == ConfigErrorKind.MISSING_FIELD
        assert exc_info.value.field == "email"

    def test_missing_project_field(self, sample_config_text):
        text = sample_config_text.replace("    role: Contributor\n", "")
        with pytest.raises(ConfigError) as exc_info:
            load_portfolio(text)
        assert exc_info.value.kind == ConfigErrorKind.MISSING_FIELD
        assert exc_info.value.field == "projects.1.role"

    def test_blank_name_is_malformed(self, sample_config_text):
        text = sample_config_text.replace("name: Ada", "name: '   '")
        with pytest.raises(ConfigError) as exc_info:
            load_portfolio(text)
        assert exc_info.value.kind == ConfigErrorKind.MALFORMED
        assert exc_info.value.field == "name"

    def test_wrong_type_is_malformed(self, sample_config_text):
        text = sample_config_text.split("projects:")[0] + "projects: 5\n"
        with pytest.raises(ConfigError) as exc_info:
            load_portfolio(text)
        assert exc_info.value.kind == ConfigErrorKind.MALFORMED
        assert exc_info.value.field == "projects"


class TestLoadPortfolioFile:
    """Tests for load_portfolio_file."""

    def test_reads_file(self, sample_config_file):
        portfolio = load_portfolio_file(sample_config_file)
        assert len(portfolio.projects) == 2

    def test_missing_file_is_malformed(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_portfolio_file(tmp_path / "nope.yaml")
        assert exc_info.value.kind == ConfigErrorKind.MALFORMED


class TestPortfolioModel:
    """Tests for Portfolio and Project behaviour."""

    def test_portfolio_is_read_only(self, ada_portfolio):
        with pytest.raises(ValidationError):
            ada_portfolio.name = "Someone else"

    def test_video_sources(self, sample_config_text):
        project = load_portfolio(sample_config_text).projects[0]
        assert project.video_sources() == [
            ("media/p1.webm", "video/webm"),
            ("media/p1.mp4", "video/mp4"),
        ]

    def test_no_video_sources(self, ada_portfolio):
        assert ada_portfolio.projects[0].video_sources() == []

    def test_skill_tables_by_kind(self, ada_portfolio):
        assert ada_portfolio.skill_table(SkillKind.LANGUAGE) == {"Rust": "https://rust-lang.org"}
        assert ada_portfolio.skill_table(SkillKind.TECHNOLOGY) == {}
        project = ada_portfolio.projects[0]
        assert project.skills(SkillKind.LANGUAGE) == ["Rust"]
        assert project.skills(SkillKind.TECHNOLOGY) == []
