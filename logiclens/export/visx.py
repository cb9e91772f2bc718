"""
ⒸAngelaMos | 2026
export/visx.py
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, PositiveInt, ValidationError

from logiclens.analysis.scoring import evaluate, round_half_up
from logiclens.models import CounterSet, Theme

if TYPE_CHECKING:
    from logiclens.analysis.aggregate import ProjectAnalysis


VISX_NAMESPACE = "http://schemas.microsoft.com/visx/2021"
FORMAT_VERSION = "1.0"
GENERATOR = "LogicLens Report Exporter"

CONSTRUCTS_DATASET = "logic-constructs"
METRICS_DATASET = "complexity-metrics"
RANKING_DATASET = "unit-ranking"

CATEGORIES: dict[str, frozenset[str]] = {
    "conditions": frozenset({"if", "elseIf", "else", "switch", "ternary"}),
    "loops": frozenset({"for", "while", "doWhile"}),
    "logical": frozenset({"logicalAnd", "logicalOr"}),
}

TREND_THRESHOLD = 10

XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


class ReportOptionsError(ValueError):
    """
    Raised when report options are structurally invalid
    """
    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid report option '{field}': {message}")
        self.field = field
        self.message = message


class ReportOptions(BaseModel):
    """
    Display options for a rendered report
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = "Code Analysis"
    width: PositiveInt = 800
    height: PositiveInt = 600
    theme: Theme = Theme.LIGHT

    @classmethod
    def coerce(cls, options: ReportOptions | Mapping[str, Any] | None) -> ReportOptions:
        """
        Accept options as a model, a mapping or None
        Unset mapping entries fall back to the defaults
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        try:
            return cls.model_validate(
                {k: v for k, v in dict(options).items() if v is not None}
            )
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or "options"
            raise ReportOptionsError(field, error["msg"]) from e


@dataclass(frozen=True)
class DataPoint:
    """
    One construct record in the constructs dataset
    """
    name: str
    value: int
    category: str
    percentage: float


def escape_xml(value: object) -> str:
    """
    Escape the five reserved markup characters
    """
    text = str(value)
    for char, entity in XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def format_number(value: float) -> str:
    """
    Render whole numbers without a trailing .0
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def category_for(name: str) -> str:
    for category, members in CATEGORIES.items():
        if name in members:
            return category
    return "other"


def prepare_data_points(counters: CounterSet) -> list[DataPoint]:
    """
    Build one data point per primitive counter
    """
    total = counters.total
    return [
        DataPoint(
            name=name,
            value=value,
            category=category_for(name),
            percentage=round_half_up(value / total * 100) if total else 0.0,
        )
        for name, value in counters.primitives().items()
    ]


def _data_point_xml(point: DataPoint) -> str:
    return (
        "<Record>\n"
        f'        <Field name="name">{escape_xml(point.name)}</Field>\n'
        f'        <Field name="value">{point.value}</Field>\n'
        f'        <Field name="category">{escape_xml(point.category)}</Field>\n'
        f'        <Field name="percentage">{format_number(point.percentage)}</Field>\n'
        "      </Record>"
    )


def _ranking_dataset_xml(project: ProjectAnalysis, top_n: int) -> str:
    records = []
    for position, unit in enumerate(project.top(top_n), start=1):
        records.append(
            "<Record>\n"
            f'        <Field name="rank">{position}</Field>\n'
            f'        <Field name="unit">{escape_xml(unit.identifier)}</Field>\n'
            f'        <Field name="complexity">{format_number(unit.complexity)}</Field>\n'
            f'        <Field name="total">{unit.counters.total}</Field>\n'
            "      </Record>"
        )
    body = "\n      ".join(records)
    return (
        f'\n    <Dataset id="{RANKING_DATASET}">\n'
        f"      {body}\n"
        "    </Dataset>\n"
    )


def _timestamp(created: datetime | None) -> str:
    if created is None:
        created = datetime.now(timezone.utc)
    return created.isoformat()


def render(
    counters: CounterSet,
    options: ReportOptions | Mapping[str, Any] | None = None,
    *,
    created: datetime | None = None,
) -> str:
    """
    Render a counter set as a VISX visualization document
    Raises ReportOptionsError naming the offending option
    """
    return _document(counters, ReportOptions.coerce(options), created)


def _document(
    counters: CounterSet,
    opts: ReportOptions,
    created: datetime | None,
    extra_datasets: str = "",
) -> str:
    metrics = evaluate(counters)
    points = prepare_data_points(counters)

    score_value = format_number(metrics.complexity_score)
    maintainability = format_number(metrics.maintainability_index)
    score_trend = "up" if metrics.complexity_score > TREND_THRESHOLD else "down"
    maintainability_trend = "down" if metrics.complexity_score > TREND_THRESHOLD else "up"
    records = "\n      ".join(_data_point_xml(p) for p in points)

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<Visualization xmlns="{VISX_NAMESPACE}">
  <Metadata>
    <Title>{escape_xml(opts.title)}</Title>
    <Created>{escape_xml(_timestamp(created))}</Created>
    <Generator>{escape_xml(GENERATOR)}</Generator>
    <Version>{FORMAT_VERSION}</Version>
  </Metadata>

  <Configuration>
    <Dimensions>
      <Width>{opts.width}</Width>
      <Height>{opts.height}</Height>
    </Dimensions>
    <Theme>{escape_xml(opts.theme.value)}</Theme>
    <Interactivity enabled="true">
      <Tooltips enabled="true"/>
      <Zoom enabled="true"/>
      <Pan enabled="true"/>
    </Interactivity>
  </Configuration>

  <Data>
    <Dataset id="{CONSTRUCTS_DATASET}">
      {records}
    </Dataset>

    <Dataset id="{METRICS_DATASET}">
      <Record>
        <Field name="totalConstructs">{metrics.total}</Field>
        <Field name="complexityScore">{score_value}</Field>
        <Field name="cyclomaticComplexity">{metrics.cyclomatic_complexity}</Field>
        <Field name="maintainabilityIndex">{maintainability}</Field>
      </Record>
    </Dataset>
{extra_datasets}  </Data>

  <Visualizations>
    <BarChart dataset="{CONSTRUCTS_DATASET}" x="name" y="value" color="category">
      <Title>Logical Constructs Distribution</Title>
      <Axis position="left" label="Count"/>
      <Axis position="bottom" label="Construct Type"/>
      <Legend position="top-right"/>
    </BarChart>

    <PieChart dataset="{CONSTRUCTS_DATASET}" value="value" label="name" innerRadius="80">
      <Title>Constructs Proportion</Title>
      <Legend position="bottom"/>
    </PieChart>

    <RadarChart dataset="{CONSTRUCTS_DATASET}" angle="name" radius="value">
      <Title>Code Complexity Radar</Title>
      <Grid levels="5"/>
    </RadarChart>

    <MetricsPanel dataset="{METRICS_DATASET}">
      <Metric title="Total Constructs" value="{metrics.total}" trend="neutral"/>
      <Metric title="Complexity Score" value="{score_value}" trend="{score_trend}"/>
      <Metric title="Maintainability" value="{maintainability}%" trend="{maintainability_trend}"/>
    </MetricsPanel>
  </Visualizations>

  <ExportOptions>
    <Format>SVG</Format>
    <Format>PNG</Format>
    <Format>PDF</Format>
    <Resolution>300</Resolution>
  </ExportOptions>
</Visualization>"""


def render_project(
    project: ProjectAnalysis,
    options: ReportOptions | Mapping[str, Any] | None = None,
    *,
    top_n: int = 10,
    created: datetime | None = None,
) -> str:
    """
    Render the project aggregate plus a ranking of its most complex units
    """
    if top_n < 1:
        raise ReportOptionsError("top_n", "must be a positive integer")
    return _document(
        project.aggregate,
        ReportOptions.coerce(options),
        created,
        extra_datasets=_ranking_dataset_xml(project, top_n),
    )
