"""Unit tests for configuration loading."""

import json
from pathlib import Path

import pytest

from folio.contexts.intake import ConfigLoadError, load_config, normalize_config, parse_config_text
from folio.contexts.intake.loader import EMBEDDED_CONFIG_PATH, config_candidates


@pytest.mark.unit
def test_embedded_default_loads():
    raw = load_config()

    assert EMBEDDED_CONFIG_PATH.is_file()
    assert raw["basic"]["name"] == "张三"
    assert isinstance(raw["site"]["order"], list)


@pytest.mark.unit
def test_config_candidates_order_and_dedup():
    assert config_candidates("/cv/me.yml", Path("site")) == [Path("/cv/me.yml"), Path("site/cv/me.yml")]
    assert config_candidates("me.yml", Path(".")) == [Path("me.yml")]


@pytest.mark.unit
def test_requested_path_loaded_verbatim(tmp_path):
    config = tmp_path / "me.yml"
    config.write_text("basic:\n  name: Ada\n", encoding="utf-8")

    assert load_config(config) == {"basic": {"name": "Ada"}}


@pytest.mark.unit
def test_falls_back_to_base_path(tmp_path):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "me.yml").write_text("basic:\n  name: Ada\n", encoding="utf-8")

    assert load_config("/configs/me.yml", base_path=tmp_path) == {"basic": {"name": "Ada"}}


@pytest.mark.unit
def test_blank_candidate_is_skipped(tmp_path):
    blank = tmp_path / "blank.yml"
    blank.write_text("  \n", encoding="utf-8")

    with pytest.raises(ConfigLoadError) as excinfo:
        load_config(blank, base_path=tmp_path / "elsewhere")

    assert excinfo.value.requested == str(blank)
    assert "Config file not found" in str(excinfo.value)


@pytest.mark.unit
def test_missing_config_lists_candidates(tmp_path):
    with pytest.raises(ConfigLoadError) as excinfo:
        load_config("nope.yml", base_path=tmp_path)

    assert excinfo.value.candidates == [Path("nope.yml"), tmp_path / "nope.yml"]
    assert str(tmp_path / "nope.yml") in str(excinfo.value)


@pytest.mark.unit
def test_invalid_yaml_raises(tmp_path):
    broken = tmp_path / "broken.yml"
    broken.write_text("basic: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigLoadError):
        load_config(broken)


@pytest.mark.unit
def test_interpolation_syntax_is_left_alone():
    raw = parse_config_text("site:\n  title: ${basic.name}\nbasic:\n  name: Ada\n")

    assert raw["site"]["title"] == "${basic.name}"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "模板字符串写作 `${name}`",
        "JS: ${a + b} and ${}",
        "price ${",
        "${oc.env:HOME}",
    ],
)
def test_template_literal_text_loads_verbatim(tmp_path, text):
    config = tmp_path / "me.yml"
    config.write_text(f"profile:\n  content: {json.dumps(text, ensure_ascii=False)}\n", encoding="utf-8")

    assert load_config(config) == {"profile": {"content": text}}


@pytest.mark.unit
def test_template_literal_profile_normalizes(tmp_path):
    config = tmp_path / "me.yml"
    config.write_text("profile: 熟悉 ${} 模板字符串与 ${a.b} 写法\n", encoding="utf-8")

    doc = normalize_config(load_config(config))

    assert doc.profile.content == "熟悉 ${} 模板字符串与 ${a.b} 写法"


@pytest.mark.unit
def test_dates_stay_text():
    raw = parse_config_text("basic:\n  workPeriod:\n    start: 2021-03-01\n")

    assert raw["basic"]["workPeriod"]["start"] == "2021-03-01"
