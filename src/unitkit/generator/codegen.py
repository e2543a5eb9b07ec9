"""Render unit family definitions into Python quantity modules."""

from __future__ import annotations

import json
import logging
import pathlib
import textwrap
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..constants import constant_symbol
from ..conversion import NamedConstantScale
from ..culture import normalize_culture
from ..errors import SchemaValidationError
from ..schema import UnitFamilySchema, UnitMember, load_schema, validate_schemas

logger = logging.getLogger(__name__)

TEMPLATE_DIR = pathlib.Path(__file__).resolve().parent / "templates"
DOC_WIDTH = 76

SchemaSource = Union[UnitFamilySchema, Mapping[str, Any], str, pathlib.Path]


def _pystr(value: str) -> str:
    return json.dumps(str(value), ensure_ascii=False)


def _pytuple(values: Sequence[str]) -> str:
    items = ", ".join(_pystr(value) for value in values)
    if len(values) == 1:
        items += ","
    return f"({items})"


def _doc_lines(text: str, fallback: str) -> list[str]:
    body = (text or fallback).replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    return textwrap.wrap(body, width=DOC_WIDTH)


@dataclass(frozen=True)
class _UnitView:
    name: str
    plural: str
    accessor: str
    factory: str
    to_base: str
    from_base: str


@dataclass(frozen=True)
class _FamilyView:
    name: str
    enum: str
    module: str
    field: str
    doc_lines: list[str]
    base: _UnitView
    display: _UnitView
    units: list[_UnitView]
    constants: list[str]


@dataclass
class GenerationResult:
    """Rendered files keyed by path relative to the package root, plus rejected families."""

    files: dict[str, str] = field(default_factory=dict)
    errors: list[SchemaValidationError] = field(default_factory=list)
    families: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _unit_view(schema: UnitFamilySchema, unit: UnitMember) -> _UnitView:
    return _UnitView(
        name=unit.singular_name,
        plural=unit.plural_name,
        accessor=unit.accessor_name,
        factory=unit.factory_name,
        to_base=unit.conversion.to_base_source(unit.accessor_name),
        from_base=unit.conversion.from_base_source(f"self.{schema.value_field}"),
    )


def _family_view(schema: UnitFamilySchema) -> _FamilyView:
    views = {unit.singular_name: _unit_view(schema, unit) for unit in schema.units}
    constants = sorted(
        {
            constant_symbol(unit.conversion.formula.constant)
            for unit in schema.units
            if isinstance(unit.conversion.formula, NamedConstantScale)
        }
    )
    return _FamilyView(
        name=schema.name,
        enum=schema.unit_enum_name,
        module=schema.module_name,
        field=schema.value_field,
        doc_lines=_doc_lines(schema.documentation, f"{schema.name} quantity."),
        base=views[schema.base_member.singular_name],
        display=views[schema.display_member.singular_name],
        units=list(views.values()),
        constants=constants,
    )


def _header(sources: Iterable[str | None] = ()) -> str:
    names = [pathlib.Path(source).name for source in sources if source]
    if len(names) == 1:
        return f"# This file is generated by unitkit.generator from {names[0]}. Do not edit."
    return "# This file is generated by unitkit.generator. Do not edit."


class QuantityTypeGenerator:
    """Expand validated unit family schemas into Python source files.

    Output depends only on the input schemas and their order: no timestamps,
    stable orderings and ``repr`` float literals, so regenerating unchanged
    definitions gives byte-identical files.
    """

    def __init__(
        self,
        *,
        fallback_culture: str | None = None,
        template_dir: str | pathlib.Path = TEMPLATE_DIR,
    ) -> None:
        self.fallback_culture = fallback_culture
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["pystr"] = _pystr
        self.env.filters["pytuple"] = _pytuple

    def load(
        self, sources: Iterable[SchemaSource]
    ) -> tuple[list[UnitFamilySchema], list[SchemaValidationError]]:
        """Load and validate ``sources``; invalid families are reported, not raised."""

        schemas: list[UnitFamilySchema] = []
        errors: list[SchemaValidationError] = []
        for source in sources:
            try:
                if isinstance(source, UnitFamilySchema):
                    source.validate(self.fallback_culture)
                    schema = source
                else:
                    schema = load_schema(source, fallback_culture=self.fallback_culture)
            except SchemaValidationError as exc:
                logger.error("Skipping invalid unit family: %s", exc)
                errors.append(exc)
                continue
            schemas.append(schema)

        valid, duplicates = validate_schemas(schemas)
        for exc in duplicates:
            logger.error("Skipping invalid unit family: %s", exc)
        return valid, errors + duplicates

    def render_quantity(self, schema: UnitFamilySchema) -> str:
        template = self.env.get_template("quantity.py.jinja")
        view = _family_view(schema)
        return template.render(header=_header([schema.source]), **vars(view))

    def render_units(self, schemas: Sequence[UnitFamilySchema]) -> str:
        template = self.env.get_template("units.py.jinja")
        return template.render(header=_header(), families=[_family_view(s) for s in schemas])

    def render_abbreviations(self, schemas: Sequence[UnitFamilySchema]) -> str:
        table: dict[str, list[tuple[str, str, tuple[str, ...]]]] = {}
        for schema in schemas:
            for unit in schema.units:
                for culture, values in unit.abbreviations.items():
                    table.setdefault(normalize_culture(culture), []).append(
                        (schema.name, unit.singular_name, values)
                    )
        template = self.env.get_template("abbreviations.py.jinja")
        return template.render(header=_header(), table=sorted(table.items()))

    def render_package(self, schemas: Sequence[UnitFamilySchema]) -> str:
        template = self.env.get_template("package_init.py.jinja")
        return template.render(header=_header(), families=[_family_view(s) for s in schemas])

    def generate(self, sources: Iterable[SchemaSource]) -> GenerationResult:
        """Render every valid family; rejected families do not affect the others."""

        schemas, errors = self.load(sources)
        result = GenerationResult(errors=errors, families=[schema.name for schema in schemas])

        result.files["units.py"] = self.render_units(schemas)
        result.files["abbreviations.py"] = self.render_abbreviations(schemas)
        result.files["quantities/__init__.py"] = self.render_package(schemas)
        for schema in schemas:
            result.files[f"quantities/{schema.module_name}.py"] = self.render_quantity(schema)
            logger.info("Rendered %s (%d units)", schema.name, len(schema.units))
        return result


def generate(
    sources: Iterable[SchemaSource], *, fallback_culture: str | None = None
) -> GenerationResult:
    """Shortcut for ``QuantityTypeGenerator(...).generate(sources)``."""

    return QuantityTypeGenerator(fallback_culture=fallback_culture).generate(sources)


def stale_files(result: GenerationResult, directory: str | pathlib.Path) -> list[str]:
    """Relative paths whose content under ``directory`` differs from ``result``."""

    root = pathlib.Path(directory)
    stale: list[str] = []
    for relative, text in result.files.items():
        target = root / relative
        if not target.exists() or target.read_text(encoding="utf-8") != text:
            stale.append(relative)
    return stale


def write_output(result: GenerationResult, directory: str | pathlib.Path) -> list[pathlib.Path]:
    """Write changed files below ``directory`` and return the paths written."""

    root = pathlib.Path(directory)
    written: list[pathlib.Path] = []
    for relative in stale_files(result, root):
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(result.files[relative])
        logger.info("Wrote %s", target)
        written.append(target)
    return written


__all__ = [
    "GenerationResult",
    "QuantityTypeGenerator",
    "SchemaSource",
    "generate",
    "stale_files",
    "write_output",
]
