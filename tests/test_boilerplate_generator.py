"""
Tests for the boilerplate generator — validate, defaults, render.

Pure unit tests: BoilerplateConfig in → text / GeneratedFile out.
"""

from datetime import datetime
from pathlib import Path

import pytest

from scaffold.core.models.boilerplate import BoilerplateConfig
from scaffold.core.services.generators import boilerplate as gen
from scaffold.core.services.generators.boilerplate import (
    BOILERPLATE_TEMPLATE,
    KNOWN_LICENSES,
    UnknownLicenseError,
    apply_defaults,
    generate_boilerplate,
    merged_licenses,
    render_boilerplate,
    supported_licenses,
    validate_boilerplate,
)


class _FixedDatetime(datetime):
    @classmethod
    def now(cls, tz=None):
        return cls(2031, 6, 1, tzinfo=tz)


@pytest.fixture
def fixed_year(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the generator's clock to 2031."""
    monkeypatch.setattr(gen, "datetime", _FixedDatetime)
    return "2031"


# ═══════════════════════════════════════════════════════════════════
#  License table
# ═══════════════════════════════════════════════════════════════════


class TestKnownLicenses:
    def test_builtin_keys(self):
        assert supported_licenses() == ["apache2", "none"]

    def test_none_is_empty(self):
        assert KNOWN_LICENSES["none"] == ""

    def test_apache2_notice(self):
        body = KNOWN_LICENSES["apache2"]
        assert 'Licensed under the Apache License, Version 2.0 (the "License");' in body
        assert "http://www.apache.org/licenses/LICENSE-2.0" in body
        assert body.startswith("\n")
        assert body.endswith("limitations under the License.\n")

    def test_read_only(self):
        with pytest.raises(TypeError):
            KNOWN_LICENSES["mit"] = "MIT"  # type: ignore[index]


# ═══════════════════════════════════════════════════════════════════
#  validate_boilerplate
# ═══════════════════════════════════════════════════════════════════


class TestValidate:
    @pytest.mark.parametrize("key", ["", "apache2", "none"])
    def test_known_or_empty_passes(self, key: str):
        validate_boilerplate(BoilerplateConfig(license=key))

    def test_custom_license_passes(self):
        config = BoilerplateConfig(license="mit", licenses={"mit": "\nMIT\n"})
        validate_boilerplate(config)

    def test_unknown_license_fails_with_key(self):
        with pytest.raises(UnknownLicenseError) as exc:
            validate_boilerplate(BoilerplateConfig(license="mit"))
        assert exc.value.license == "mit"
        assert "mit" in str(exc.value)

    def test_unknown_with_other_customs_fails(self):
        config = BoilerplateConfig(license="bsd", licenses={"mit": "MIT"})
        with pytest.raises(UnknownLicenseError) as exc:
            validate_boilerplate(config)
        assert exc.value.license == "bsd"

    def test_is_value_error(self):
        """Callers catching ValueError also see unknown licenses."""
        with pytest.raises(ValueError):
            validate_boilerplate(BoilerplateConfig(license="gpl3"))

    def test_does_not_modify_config(self):
        config = BoilerplateConfig()
        validate_boilerplate(config)
        assert config == BoilerplateConfig()


# ═══════════════════════════════════════════════════════════════════
#  apply_defaults
# ═══════════════════════════════════════════════════════════════════


class TestApplyDefaults:
    def test_fills_empty_fields(self, fixed_year: str):
        result = apply_defaults(BoilerplateConfig())
        assert result.path == "hack/boilerplate.go.txt"
        assert result.license == "apache2"
        assert result.year == fixed_year
        assert result.licenses == dict(KNOWN_LICENSES)
        assert result.template_body == BOILERPLATE_TEMPLATE

    def test_default_path_uses_extension(self):
        result = apply_defaults(BoilerplateConfig(extension="py"))
        assert result.path == "hack/boilerplate.py.txt"

    def test_keeps_set_fields(self):
        config = BoilerplateConfig(
            license="none", owner="Acme", year="1999", path="HEADER.txt",
        )
        result = apply_defaults(config)
        assert result.license == "none"
        assert result.owner == "Acme"
        assert result.year == "1999"
        assert result.path == "HEADER.txt"

    def test_year_is_current(self):
        result = apply_defaults(BoilerplateConfig())
        assert result.year == str(datetime.now().year)
        assert len(result.year) == 4

    def test_does_not_mutate_input(self):
        customs = {"mit": "MIT"}
        config = BoilerplateConfig(licenses=customs)
        apply_defaults(config)
        assert config.licenses == {"mit": "MIT"}
        assert customs == {"mit": "MIT"}
        assert config.path == ""
        assert config.year == ""

    def test_adds_builtins_next_to_customs(self):
        result = apply_defaults(BoilerplateConfig(licenses={"mit": "MIT"}))
        assert set(result.licenses) == {"mit", "apache2", "none"}

    def test_caller_entry_kept_on_collision(self):
        result = apply_defaults(BoilerplateConfig(licenses={"apache2": "CUSTOM"}))
        assert result.licenses["apache2"] == "CUSTOM"

    def test_idempotent(self, fixed_year: str):
        config = BoilerplateConfig(owner="Acme", licenses={"mit": "MIT"})
        once = apply_defaults(config)
        twice = apply_defaults(once)
        assert once == twice

    def test_explicit_body_becomes_template(self):
        result = apply_defaults(BoilerplateConfig(boilerplate="// hello\n"))
        assert result.template_body == "// hello\n"


# ═══════════════════════════════════════════════════════════════════
#  merged_licenses
# ═══════════════════════════════════════════════════════════════════


class TestMergedLicenses:
    def test_union(self):
        table = merged_licenses(BoilerplateConfig(licenses={"mit": "MIT"}))
        assert set(table) == {"mit", "apache2", "none"}

    def test_builtin_not_overridden(self):
        config = apply_defaults(BoilerplateConfig(licenses={"apache2": "CUSTOM"}))
        table = merged_licenses(config)
        assert table["apache2"] == KNOWN_LICENSES["apache2"]
        assert table["apache2"] != "CUSTOM"

    def test_without_customs(self):
        assert merged_licenses(BoilerplateConfig()) == dict(KNOWN_LICENSES)


# ═══════════════════════════════════════════════════════════════════
#  render_boilerplate
# ═══════════════════════════════════════════════════════════════════


class TestRender:
    def test_none_license_without_owner(self):
        config = apply_defaults(BoilerplateConfig(license="none", year="2024"))
        assert render_boilerplate(config) == "/*\nCopyright 2024.\n*/"

    def test_apache2_with_owner(self):
        config = apply_defaults(
            BoilerplateConfig(license="apache2", owner="Acme Corp", year="2020")
        )
        text = render_boilerplate(config)
        lines = text.split("\n")
        assert lines[0] == "/*"
        assert lines[1] == "Copyright 2020 Acme Corp."
        assert text == "/*\nCopyright 2020 Acme Corp.\n" + KNOWN_LICENSES["apache2"] + "*/"
        assert text.endswith("limitations under the License.\n*/")

    def test_default_license_is_apache2(self):
        config = apply_defaults(BoilerplateConfig(year="2022"))
        assert "Apache License, Version 2.0" in render_boilerplate(config)

    def test_custom_license_body_verbatim(self):
        body = "\nSPDX-License-Identifier: MIT {not a placeholder}\n"
        config = apply_defaults(
            BoilerplateConfig(license="mit", licenses={"mit": body}, year="2023", owner="Me")
        )
        assert render_boilerplate(config) == "/*\nCopyright 2023 Me.\n" + body + "*/"

    def test_custom_apache2_ignored(self):
        config = apply_defaults(
            BoilerplateConfig(license="apache2", licenses={"apache2": "CUSTOM"}, year="2020")
        )
        text = render_boilerplate(config)
        assert "CUSTOM" not in text
        assert KNOWN_LICENSES["apache2"] in text

    def test_explicit_body_returned_exactly(self):
        config = apply_defaults(
            BoilerplateConfig(boilerplate="XYZ", owner="Acme", license="none", year="2020")
        )
        assert render_boilerplate(config) == "XYZ"

    def test_explicit_body_without_defaults(self):
        assert render_boilerplate(BoilerplateConfig(boilerplate="XYZ")) == "XYZ"

    def test_unresolvable_license_is_contract_violation(self):
        """Skipping validate/apply_defaults is a programming error."""
        config = BoilerplateConfig(license="mit", year="2020")
        with pytest.raises(RuntimeError, match="apply_defaults"):
            render_boilerplate(config)


# ═══════════════════════════════════════════════════════════════════
#  generate_boilerplate
# ═══════════════════════════════════════════════════════════════════


class TestGenerateBoilerplate:
    def test_generated_file(self, tmp_path: Path):
        result = generate_boilerplate(
            tmp_path, BoilerplateConfig(license="none", year="2024", owner="Acme")
        )
        assert result.path == "hack/boilerplate.go.txt"
        assert result.content == "/*\nCopyright 2024 Acme.\n*/"
        assert result.overwrite is False
        assert "none" in result.reason
        assert "Acme" in result.reason

    def test_overwrite_flag_passed_through(self, tmp_path: Path):
        result = generate_boilerplate(tmp_path, BoilerplateConfig(), overwrite=True)
        assert result.overwrite is True

    def test_custom_path(self, tmp_path: Path):
        result = generate_boilerplate(tmp_path, BoilerplateConfig(path="LICENSE_HEADER"))
        assert result.path == "LICENSE_HEADER"

    def test_explicit_body(self, tmp_path: Path):
        result = generate_boilerplate(tmp_path, BoilerplateConfig(boilerplate="XYZ"))
        assert result.content == "XYZ"
        assert "explicit" in result.reason

    def test_unknown_license_raises(self, tmp_path: Path):
        with pytest.raises(UnknownLicenseError) as exc:
            generate_boilerplate(tmp_path, BoilerplateConfig(license="mit"))
        assert exc.value.license == "mit"

    def test_unknown_license_checked_before_explicit_body(self, tmp_path: Path):
        with pytest.raises(UnknownLicenseError):
            generate_boilerplate(
                tmp_path, BoilerplateConfig(license="mit", boilerplate="XYZ")
            )

    def test_input_untouched(self, tmp_path: Path):
        config = BoilerplateConfig(owner="Acme")
        generate_boilerplate(tmp_path, config)
        assert config == BoilerplateConfig(owner="Acme")
