"""
Configuration for coordinate display.

Loaded from YAML with a top-level `coordconv` section:

    coordconv:
      precision:
        dd: 5
        dm: 5
        dms: 5
      default_location:
        lat: 48.816662
        lon: -123.508873
      layers:
        input: true
        dd: true
        dm: true
        dms: false
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from coordconv.display import LayerVisibility
from coordconv.precision import PrecisionSettings
from coordconv.validation import is_valid_coordinate

logger = logging.getLogger(__name__)

# Salt Spring Island
DEFAULT_LOCATION: Tuple[float, float] = (48.816662, -123.508873)

CONFIG_SECTION = 'coordconv'


@dataclass
class CoordConfig:
    """Display configuration.

    Attributes:
        precision: Decimal places per display format.
        default_location: (lat, lon) used when no location is supplied.
        layers: Which marker layers are shown.
    """
    precision: PrecisionSettings = field(default_factory=PrecisionSettings)
    default_location: Tuple[float, float] = DEFAULT_LOCATION
    layers: LayerVisibility = field(default_factory=LayerVisibility)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'CoordConfig':
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            CoordConfig instance loaded from file

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If configuration file is malformed or contains invalid values
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a '{CONFIG_SECTION}' section"
            )

        if not isinstance(data, dict) or CONFIG_SECTION not in data:
            raise ValueError(
                f"Configuration file missing '{CONFIG_SECTION}' section: {path}\n"
                f"Expected structure: {CONFIG_SECTION}:\n  precision: ...\n  ..."
            )

        logger.debug("Loaded configuration from %s", config_path)
        return cls.from_dict(data[CONFIG_SECTION] or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CoordConfig':
        """Create configuration from a dictionary.

        Precision values go through the same fallback rules as form input, so
        a missing or non-numeric value becomes the default.

        Raises:
            ValueError: If a section has the wrong shape or the default
                location is not a valid coordinate.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

        precision_data = data.get('precision') or {}
        if not isinstance(precision_data, dict):
            raise ValueError("'precision' must be a mapping with dd, dm and dms keys")
        unknown = set(precision_data) - {'dd', 'dm', 'dms'}
        if unknown:
            raise ValueError(f"Unknown precision keys: {sorted(unknown)}. Valid keys: dd, dm, dms")
        precision = PrecisionSettings.from_raw(
            dd=precision_data.get('dd'),
            dm=precision_data.get('dm'),
            dms=precision_data.get('dms'),
        )

        location = DEFAULT_LOCATION
        if data.get('default_location') is not None:
            location_data = data['default_location']
            if not isinstance(location_data, dict) or not {'lat', 'lon'} <= set(location_data):
                raise ValueError("'default_location' must have 'lat' and 'lon' keys")
            location = (location_data['lat'], location_data['lon'])
            if not is_valid_coordinate(*location):
                raise ValueError(f"Invalid default_location: {location}")

        layers_data = data.get('layers') or {}
        if not isinstance(layers_data, dict):
            raise ValueError("'layers' must be a mapping of layer name to boolean")
        valid_layers = {'input', 'dd', 'dm', 'dms'}
        unknown = set(layers_data) - valid_layers
        if unknown:
            raise ValueError(f"Unknown layers: {sorted(unknown)}. Valid layers: {sorted(valid_layers)}")
        layers = LayerVisibility(**{name: bool(value) for name, value in layers_data.items()})

        return cls(precision=precision, default_location=location, layers=layers)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to the dictionary shape accepted by from_dict."""
        return {
            'precision': {
                'dd': self.precision.dd,
                'dm': self.precision.dm,
                'dms': self.precision.dms,
            },
            'default_location': {
                'lat': self.default_location[0],
                'lon': self.default_location[1],
            },
            'layers': {
                'input': self.layers.input,
                'dd': self.layers.dd,
                'dm': self.layers.dm,
                'dms': self.layers.dms,
            },
        }


def get_default_config() -> CoordConfig:
    """Get default configuration (precision 5 everywhere, Salt Spring Island, all layers)."""
    return CoordConfig()
