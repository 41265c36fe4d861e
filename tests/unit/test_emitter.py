from __future__ import annotations

import ast

import pytest

from conftest import SAMPLE_CURRENCIES, SAMPLE_ISO3166, SIMPLE_TEMPLATE
from generator.capitals import build_capital_index
from generator.emitter import (
    RECORD_FIELDS,
    build_lookup_indices,
    emit_source,
    format_source,
    normalize_source,
    render_template,
)
from generator.errors import FormatError, TemplateError
from generator.merge import merge_alternates
from generator.parsing import CountryRecord, parse_alternate, parse_primary
from generator.sources import PackageTemplateProvider


def _merged() -> list[CountryRecord]:
    countries = parse_primary(SAMPLE_ISO3166)
    merge_alternates(countries, parse_alternate(SAMPLE_CURRENCIES))
    return countries


def _emit(countries: list[CountryRecord], template: str = SIMPLE_TEMPLATE) -> str:
    return emit_source(
        countries,
        build_capital_index(countries),
        template=template,
        repo_url="https://example.invalid/repo",
    )


def test_record_fields_follow_runtime_model() -> None:
    assert RECORD_FIELDS[0] == "alpha2"
    assert "country_code" in RECORD_FIELDS
    assert len(RECORD_FIELDS) == 14


def test_emit_simple_template_contains_records_and_index() -> None:
    code = _emit(_merged())

    assert code.startswith("# Test Template\n")
    assert '        alpha2="TC",' in code
    assert '        capital="Test Capital",' in code
    assert '        currency_code="ANO",' in code
    assert '    "TC": 0,' in code
    assert '    "AC": 1,' in code
    ast.parse(code)


def test_emit_package_template_compiles_and_has_all_sections() -> None:
    template = PackageTemplateProvider().get_package_template()
    code = _emit(_merged(), template)

    tree = ast.parse(code)
    assigned = {
        node.target.id if isinstance(node, ast.AnnAssign) else node.targets[0].id
        for node in tree.body
        if isinstance(node, (ast.Assign, ast.AnnAssign))
    }
    for name in ("COUNTRIES", "BY_NAME", "BY_ALPHA2", "BY_ALPHA3", "BY_COUNTRY_CODE", "BY_ISO31662", "BY_CAPITAL"):
        assert name in assigned
    assert {"ALPHA2_TC", "ALPHA2_AC", "ALPHA3_TST", "ALPHA3_ANO"} <= assigned
    assert "# Project: https://example.invalid/repo" in code
    assert '    "test capital": 0,' in code
    assert '    "another capital": 1,' in code


def test_emit_is_deterministic() -> None:
    template = PackageTemplateProvider().get_package_template()
    assert _emit(_merged(), template) == _emit(_merged(), template)


def test_string_values_are_escaped() -> None:
    countries = [CountryRecord(alpha2="QQ", alpha3="QQQ", name='Say "hi"\\', capital="Côte")]
    code = _emit(countries)

    assert '        name="Say \\"hi\\"\\\\",' in code
    assert '        capital="Côte",' in code
    ast.parse(code)


def test_lookup_indices_normalize_keys() -> None:
    countries = [
        CountryRecord(name="Test Country", alpha2="tc", alpha3="tst", country_code="999", iso31662="iso 3166-2:tc"),
    ]
    indices = build_lookup_indices(countries)

    assert indices["by_name"] == {"test country": 0}
    assert indices["by_alpha2"] == {"TC": 0}
    assert indices["by_alpha3"] == {"TST": 0}
    assert indices["by_country_code"] == {"999": 0}
    assert indices["by_iso31662"] == {"ISO 3166-2:TC": 0}


def test_lookup_indices_last_duplicate_wins() -> None:
    countries = [
        CountryRecord(name="Dup", alpha2="DD", country_code="001"),
        CountryRecord(name="Other", alpha2="OO", country_code="002"),
        CountryRecord(name="DUP", alpha2="dd", country_code="001"),
    ]
    indices = build_lookup_indices(countries)

    assert indices["by_name"]["dup"] == 2
    assert indices["by_alpha2"]["DD"] == 2
    assert indices["by_country_code"]["001"] == 2


def test_lookup_indices_keep_empty_keys() -> None:
    indices = build_lookup_indices([CountryRecord(name="No Codes")])
    assert indices["by_alpha2"] == {"": 0}


def test_empty_alpha_codes_produce_no_constants() -> None:
    template = PackageTemplateProvider().get_package_template()
    code = _emit([CountryRecord(name="No Codes")], template)

    assert "ALPHA2_ =" not in code
    ast.parse(code)


def test_invalid_identifier_in_constants_raises_format_error() -> None:
    template = PackageTemplateProvider().get_package_template()
    with pytest.raises(FormatError, match="failed to format generated source") as exc:
        _emit([CountryRecord(name="Broken", alpha2="A-B", alpha3="ABB")], template)
    assert exc.value.lineno is not None


def test_syntactically_broken_template_raises_format_error() -> None:
    with pytest.raises(FormatError):
        _emit(_merged(), "COUNTRIES = (\n${countries}\n")


@pytest.mark.parametrize("template", ["", "   \n\t\n"])
def test_empty_template_raises_template_error(template: str) -> None:
    with pytest.raises(TemplateError, match="template is empty"):
        render_template(template, {})


def test_unknown_placeholder_raises_template_error() -> None:
    with pytest.raises(TemplateError, match="unknown placeholder"):
        _emit(_merged(), "X = 1\n${not_a_placeholder}\n")


def test_invalid_placeholder_syntax_raises_template_error() -> None:
    with pytest.raises(TemplateError, match="invalid template"):
        render_template("X = ${\n", {})


def test_normalize_source() -> None:
    text = "a = 1   \n\n\n\n\nb = 2\t\n\n\n"
    assert normalize_source(text) == "a = 1\n\n\nb = 2\n"


def test_format_source_is_idempotent() -> None:
    once = format_source("x = 1  \n\n\n\n\ny = 2")
    assert format_source(once) == once
