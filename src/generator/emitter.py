from __future__ import annotations

import ast
import json
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import fields
from string import Template

from countries.models import Country
from generator.capitals import CapitalIndexEntry
from generator.errors import FormatError, TemplateError
from generator.parsing import CountryRecord


GENERATED_FILENAME = "countries_data.py"

# Country(...) keyword order follows the runtime dataclass.
RECORD_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(Country))

MAX_BLANK_LINES = 2


def _literal(value: str) -> str:
    # JSON string escapes are a subset of Python's.
    return json.dumps(value, ensure_ascii=False)


def _render_record(country: CountryRecord) -> str:
    lines = ["    Country("]
    for name in RECORD_FIELDS:
        lines.append(f"        {name}={_literal(getattr(country, name))},")
    lines.append("    ),")
    return "\n".join(lines)


def _render_index(index: Mapping[str, int]) -> str:
    return "\n".join(f"    {_literal(key)}: {pos}," for key, pos in index.items())


def _render_constants(prefix: str, codes: Iterable[str]) -> str:
    return "\n".join(f"{prefix}_{code} = {_literal(code)}" for code in codes if code)


def build_lookup_indices(countries: Sequence[CountryRecord]) -> dict[str, dict[str, int]]:
    """
    Key -> catalog position for the name / alpha2 / alpha3 / code / ISO-3166-2 indices.

    Plain insertion in catalog order: a duplicated key ends up pointing at the
    LAST record carrying it. The capital index (build_capital_index) keeps the
    FIRST one instead; the two policies are intentionally left as they are.
    """
    by_name: dict[str, int] = {}
    by_alpha2: dict[str, int] = {}
    by_alpha3: dict[str, int] = {}
    by_country_code: dict[str, int] = {}
    by_iso31662: dict[str, int] = {}

    for pos, c in enumerate(countries):
        by_name[c.name.lower()] = pos
        by_alpha2[c.alpha2.upper()] = pos
        by_alpha3[c.alpha3.upper()] = pos
        by_country_code[c.country_code] = pos
        by_iso31662[c.iso31662.upper()] = pos

    return {
        "by_name": by_name,
        "by_alpha2": by_alpha2,
        "by_alpha3": by_alpha3,
        "by_country_code": by_country_code,
        "by_iso31662": by_iso31662,
    }


def render_template(template: str, values: Mapping[str, str]) -> str:
    if not template.strip():
        raise TemplateError("template is empty")
    try:
        return Template(template).substitute(values)
    except KeyError as e:
        raise TemplateError(f"template references unknown placeholder {e}") from e
    except ValueError as e:
        raise TemplateError(f"invalid template: {e}") from e


def normalize_source(text: str) -> str:
    """Strip trailing whitespace, cap blank-line runs, end with exactly one newline."""
    out: list[str] = []
    blank_run = 0
    for line in text.splitlines():
        line = line.rstrip()
        if line:
            blank_run = 0
        else:
            blank_run += 1
            if blank_run > MAX_BLANK_LINES:
                continue
        out.append(line)

    while out and not out[-1]:
        out.pop()
    return "\n".join(out) + "\n"


def format_source(text: str, *, filename: str = GENERATED_FILENAME) -> str:
    source = normalize_source(text)
    try:
        compile(ast.parse(source, filename=filename), filename, "exec")
    except SyntaxError as e:
        raise FormatError(f"failed to format generated source: {e.msg} (line {e.lineno})", lineno=e.lineno) from e
    except ValueError as e:
        raise FormatError(f"failed to format generated source: {e}") from e
    return source


def emit_source(
    countries: Sequence[CountryRecord],
    capital_index: Sequence[CapitalIndexEntry],
    *,
    template: str,
    repo_url: str,
) -> str:
    """
    Render the catalog module.

    Raises TemplateError when the template cannot be rendered and FormatError
    when the rendered text is not valid Python.
    """
    values: dict[str, str] = {
        "repo_url": repo_url,
        "alpha2_constants": _render_constants("ALPHA2", (c.alpha2 for c in countries)),
        "alpha3_constants": _render_constants("ALPHA3", (c.alpha3 for c in countries)),
        "countries": "\n".join(_render_record(c) for c in countries),
        "by_capital": _render_index({e.key: e.index for e in capital_index}),
    }
    for name, index in build_lookup_indices(countries).items():
        values[name] = _render_index(index)

    return format_source(render_template(template, values))
