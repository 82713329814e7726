"""Unit tests for coordconv.config."""

import pytest
import yaml

from coordconv.config import DEFAULT_LOCATION, CoordConfig, get_default_config
from coordconv.display import LayerVisibility
from coordconv.precision import PrecisionSettings


def _write(tmp_path, data) -> str:
    path = tmp_path / "coordconv.yaml"
    path.write_text(yaml.safe_dump(data) if not isinstance(data, str) else data)
    return str(path)


class TestDefaults:

    def test_default_config(self) -> None:
        config = get_default_config()

        assert config.precision == PrecisionSettings(dd=5, dm=5, dms=5)
        assert config.default_location == DEFAULT_LOCATION == (48.816662, -123.508873)
        assert config.layers == LayerVisibility()


class TestFromYaml:

    def test_full_file(self, tmp_path) -> None:
        path = _write(tmp_path, {
            "coordconv": {
                "precision": {"dd": 6, "dm": 3, "dms": 1},
                "default_location": {"lat": 39.640472, "lon": -0.230194},
                "layers": {"dms": False},
            }
        })

        config = CoordConfig.from_yaml(path)

        assert config.precision == PrecisionSettings(dd=6, dm=3, dms=1)
        assert config.default_location == (39.640472, -0.230194)
        assert config.layers == LayerVisibility(dms=False)

    def test_precision_fallback_rules_apply(self, tmp_path) -> None:
        path = _write(tmp_path, {"coordconv": {"precision": {"dd": 0, "dm": -2, "dms": "x"}}})

        config = CoordConfig.from_yaml(path)

        assert config.precision == PrecisionSettings(dd=5, dm=1, dms=5)

    def test_empty_section_uses_defaults(self, tmp_path) -> None:
        path = _write(tmp_path, "coordconv:\n")

        assert CoordConfig.from_yaml(path) == get_default_config()

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            CoordConfig.from_yaml(tmp_path / "missing.yaml")

    @pytest.mark.parametrize(
        "content",
        ["", "other: {}\n", "coordconv: [1, 2\n", "- just\n- a list\n"],
        ids=["empty", "no-section", "bad-yaml", "list"],
    )
    def test_malformed_file(self, tmp_path, content) -> None:
        path = _write(tmp_path, content)

        with pytest.raises(ValueError):
            CoordConfig.from_yaml(path)


class TestFromDict:

    @pytest.mark.parametrize(
        "data",
        [
            {"precision": {"ddd": 3}},
            {"precision": [1, 2, 3]},
            {"default_location": {"lat": 91, "lon": 0}},
            {"default_location": {"lat": 10}},
            {"layers": {"satellite": True}},
        ],
        ids=["unknown-precision-key", "precision-list", "bad-location", "partial-location", "unknown-layer"],
    )
    def test_invalid(self, data) -> None:
        with pytest.raises(ValueError):
            CoordConfig.from_dict(data)

    def test_to_dict_round_trip(self) -> None:
        config = CoordConfig(
            precision=PrecisionSettings(dd=7, dm=2, dms=3),
            default_location=(1.5, 2.5),
            layers=LayerVisibility(input=False),
        )

        assert CoordConfig.from_dict(config.to_dict()) == config
