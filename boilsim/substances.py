#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Substance Properties and Loader
================================================================================

Project:        Boiling Point Simulator
Module:         substances.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 22, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Substance definitions live as JSON files in ``boilsim/data/``. Measured
quantities are wrapped as ``{"value": ..., "unit": ...}``:

    {
      "id": "water",
      "name": "Water",
      "properties": {
        "specificHeatLiquid": {"value": 4.186, "unit": "J/(g·°C)"},
        "heatOfVaporization": {"value": 2257, "unit": "kJ/kg"},
        "density": {"value": 1.0, "unit": "kg/L"},
        "boilingPoint": {"seaLevel": 100.0, "altitudeLapseRate": 0.0033},
        "antoineCoefficients": {"A": 8.07131, "B": 1730.63, "C": 233.426,
                                "TminC": 1, "TmaxC": 100}
      },
      "coolingModel": {"heatTransferCoefficient": 0.0015}
    }

:func:`parse_substance` flattens this into the :class:`SubstanceProperties`
record the physics modules consume. To add a substance, drop a new JSON file
next to the bundled ones.
"""

import json
import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import SubstanceDataError, SubstanceNotFoundError
from .vapor_pressure import AntoineCoefficients

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_SUBSTANCE = "water"

REQUIRED_PATHS = (
    "id",
    "name",
    "properties.specificHeatLiquid",
    "properties.heatOfVaporization",
    "properties.density",
    "properties.boilingPoint",
    "coolingModel.heatTransferCoefficient",
)


@dataclass(frozen=True)
class SubstanceProperties:
    """
    Flattened thermal properties of one substance.

    The physics core reads these fields only; it tolerates missing optional
    values and degrades to simpler models instead of failing.
    """
    specific_heat: float                                   # J/(g·°C)
    cooling_coefficient: float                             # 1/s (Newton's law)
    heat_of_vaporization: Optional[float] = None           # kJ/kg
    boiling_point_sea_level: Optional[float] = None        # °C
    altitude_lapse_rate: Optional[float] = None            # °C/m
    antoine_coefficients: Optional[AntoineCoefficients] = None
    van_hoff_factor: Optional[float] = None
    molality: Optional[float] = None                       # mol/kg
    boiling_point_elevation: Optional[float] = None        # °C, static fallback
    residue_fraction: float = 0.0                          # non-volatile mass fraction
    can_boil: bool = True

    # Descriptive data, not used by the physics
    id: str = ""
    name: str = ""
    formula: Optional[str] = None
    density: Optional[float] = None                        # kg/L
    heat_of_fusion: float = 0.0                            # kJ/kg
    freezing_point: float = 0.0                            # °C
    molecular_mass: Optional[float] = None                 # g/mol


def _nested(data: Dict[str, Any], path: str) -> Any:
    """Get a nested value by dotted path, or None."""
    current: Any = data
    for key in path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _quantity(node: Any) -> Optional[float]:
    """Unwrap a ``{value, unit}`` quantity (bare numbers are accepted too)."""
    if isinstance(node, dict):
        node = node.get("value")
    if node is None:
        return None
    try:
        return float(node)
    except (TypeError, ValueError) as exc:
        raise SubstanceDataError(f"Expected a number, got {node!r}") from exc


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else _quantity(value)


def _positive(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def validate_substance_data(raw: Dict[str, Any]) -> None:
    """
    Check that a raw substance definition has every required property.

    Raises:
        SubstanceDataError: naming the first missing dotted path
    """
    if not isinstance(raw, dict):
        raise SubstanceDataError("Substance definition must be a JSON object")

    for path in REQUIRED_PATHS:
        if _nested(raw, path) is None:
            raise SubstanceDataError(f"Missing required property: {path}")


def validate_substance(props: SubstanceProperties) -> SubstanceProperties:
    """
    Enforce the invariants of a parsed substance.

    Raises:
        SubstanceDataError: if a value is out of its physical range
    """
    label = props.id or props.name or "substance"

    if not _positive(props.specific_heat):
        raise SubstanceDataError(f"{label}: specific heat must be > 0")
    if not _positive(props.cooling_coefficient):
        raise SubstanceDataError(f"{label}: cooling coefficient must be > 0")
    if props.heat_of_vaporization is not None and props.heat_of_vaporization < 0:
        raise SubstanceDataError(f"{label}: heat of vaporization must be >= 0")

    coefficients = props.antoine_coefficients
    if coefficients is not None:
        if not coefficients.is_complete:
            raise SubstanceDataError(
                f"{label}: Antoine coefficients A, B and C must be finite and non-zero"
            )
        if (
            coefficients.t_min_c is not None
            and coefficients.t_max_c is not None
            and coefficients.t_min_c > coefficients.t_max_c
        ):
            raise SubstanceDataError(f"{label}: Antoine TminC exceeds TmaxC")

    return props


def _parse_antoine(node: Optional[Dict[str, Any]]) -> Optional[AntoineCoefficients]:
    if not node:
        return None
    return AntoineCoefficients(
        a=_quantity(node.get("A")),
        b=_quantity(node.get("B")),
        c=_quantity(node.get("C")),
        t_min_c=_optional_float(node.get("TminC")),
        t_max_c=_optional_float(node.get("TmaxC")),
    )


def parse_substance(raw: Dict[str, Any]) -> SubstanceProperties:
    """
    Convert a raw JSON definition into SubstanceProperties.

    Args:
        raw: Parsed JSON object in the nested ``{value, unit}`` format

    Returns:
        Validated SubstanceProperties

    Raises:
        SubstanceDataError: if required data is missing or invalid
    """
    validate_substance_data(raw)

    props = raw["properties"]
    boiling = props["boilingPoint"]
    if not isinstance(boiling, dict):
        raise SubstanceDataError("properties.boilingPoint must be an object with seaLevel")
    solution = props.get("solution") or {}
    phase = raw.get("phaseTransitions") or {}

    heat_of_vaporization = _quantity(props["heatOfVaporization"])

    substance = SubstanceProperties(
        id=str(raw["id"]),
        name=str(raw["name"]),
        formula=raw.get("chemicalFormula"),
        specific_heat=_quantity(props["specificHeatLiquid"]),
        heat_of_vaporization=heat_of_vaporization,
        heat_of_fusion=_quantity(props.get("heatOfFusion")) or 0.0,
        density=_quantity(props["density"]),
        boiling_point_sea_level=_optional_float(boiling.get("seaLevel")),
        altitude_lapse_rate=_optional_float(boiling.get("altitudeLapseRate")),
        freezing_point=_quantity(props.get("freezingPoint")) or 0.0,
        antoine_coefficients=_parse_antoine(props.get("antoineCoefficients")),
        cooling_coefficient=_quantity(raw["coolingModel"]["heatTransferCoefficient"]),
        van_hoff_factor=_optional_float(solution.get("vanHoffFactor")),
        molality=_optional_float(solution.get("molality")),
        boiling_point_elevation=_optional_float(solution.get("boilingPointElevation")),
        residue_fraction=_quantity(solution.get("residueFraction")) or 0.0,
        molecular_mass=_quantity(props.get("molecularMass")),
        can_boil=bool(phase.get("canBoil", bool(heat_of_vaporization))),
    )

    return validate_substance(substance)


def load_substance_file(path: Union[str, Path]) -> SubstanceProperties:
    """
    Load and parse a single substance JSON file.

    Raises:
        SubstanceNotFoundError: if the file does not exist
        SubstanceDataError: if the file is not valid JSON or fails validation
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except FileNotFoundError as exc:
        raise SubstanceNotFoundError(f"Substance file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise SubstanceDataError(f"Invalid JSON in {path}: {exc}") from exc

    try:
        return parse_substance(raw)
    except SubstanceDataError as exc:
        raise SubstanceDataError(f"{path.name}: {exc}") from exc


@lru_cache(maxsize=None)
def _load_cached(substance_id: str, data_dir: str) -> SubstanceProperties:
    substance = load_substance_file(Path(data_dir) / f"{substance_id}.json")
    logger.debug("Loaded substance %r from %s", substance_id, data_dir)
    return substance


def _is_plain_id(substance_id: Any) -> bool:
    """Ids are bare file stems: no separators, no dot-only names."""
    if not isinstance(substance_id, str) or substance_id.strip(".") == "":
        return False
    return "/" not in substance_id and "\\" not in substance_id


def load_substance(
    substance_id: str = DEFAULT_SUBSTANCE,
    data_dir: Optional[Union[str, Path]] = None
) -> SubstanceProperties:
    """
    Load a substance by id (its file name without ``.json``).

    Args:
        substance_id: e.g. "water", "saltwater", "ethanol"
        data_dir: Directory to search (default: bundled data)

    Returns:
        SubstanceProperties (cached per id and directory)
    """
    if not _is_plain_id(substance_id):
        raise SubstanceNotFoundError(f"Invalid substance id {substance_id!r}")

    directory = Path(data_dir) if data_dir is not None else DATA_DIR
    if not (directory / f"{substance_id}.json").is_file():
        raise SubstanceNotFoundError(
            f"Substance {substance_id!r} not found. "
            f"Available: {', '.join(available_substances(directory)) or 'none'}"
        )
    return _load_cached(substance_id, str(directory.resolve()))


def available_substances(data_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """List the ids of all substance definitions in a directory."""
    directory = Path(data_dir) if data_dir is not None else DATA_DIR
    if not directory.is_dir():
        return []
    return sorted(path.stem for path in directory.glob("*.json"))
