"""Shared fixtures for LogicLens tests."""

from pathlib import Path

import pytest
import structlog
import yaml

from logiclens.analysis import analyze_unit


BRANCHING_SOURCE = "if (x) { for (int i=0;i<10;i++) {} } else if (y) {}"


@pytest.fixture
def example_source():
    """One if, one else-if and one for loop."""
    return BRANCHING_SOURCE


@pytest.fixture
def js_source():
    """A small JavaScript file mixing constructs, literals and comments."""
    return (
        "// if (commented) { }\n"
        "function pick(items, flag) {\n"
        "  const label = \"for (;;) && || ?\";\n"
        "  /* while (true) {\n"
        "     do { } */\n"
        "  for (let i = 0; i < items.length; i++) {\n"
        "    if (items[i] && flag) {\n"
        "      return `done ${i}`;\n"
        "    } else if (items[i] || !flag) {\n"
        "      continue;\n"
        "    } else {\n"
        "      flag = flag ? false : true;\n"
        "    }\n"
        "  }\n"
        "  switch (label) { default: break; }\n"
        "  while (flag) { flag = false; }\n"
        "}\n"
    )


@pytest.fixture
def make_unit():
    """Build a UnitAnalysis from an identifier and raw text."""
    return analyze_unit


@pytest.fixture
def config_dir(tmp_path) -> Path:
    """Config directory whose data_dir lives under tmp_path."""
    directory = tmp_path / "config"
    directory.mkdir()
    config = {
        "data_dir": str(tmp_path / "data"),
        "json_logs": True,
        "report": {"width": 1024, "height": 768},
        "history": {"max_entries": 5},
    }
    (directory / "config.yaml").write_text(yaml.safe_dump(config), encoding="utf-8")
    return directory


@pytest.fixture
def titled_config_dir(config_dir) -> Path:
    """Same config with a report title set."""
    path = config_dir / "config.yaml"
    config = yaml.safe_load(path.read_text(encoding="utf-8"))
    config["report"]["title"] = "Configured"
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return config_dir


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging config so loggers never keep a closed capture stream."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
