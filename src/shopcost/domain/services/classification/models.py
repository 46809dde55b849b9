"""Classification data models and the geometry source protocol.

This module provides:
- ClassificationConfig: thresholds used by the detectors
- SheetMetalParameters / TubeGeometry: geometry captured on success
- Classification: the immutable outcome of a classification pass
- SheetMetalConversion / ConversionRejectedError: conversion trial results
- GeometrySource: the protocol a CAD adapter implements
- StaticGeometrySource: a GeometrySource over pre-extracted values
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from shopcost.domain.services.costing.constants import DEFAULT_K_FACTOR, TUBE_MIN_WALL_IN
from shopcost.domain.value_objects import PartCategory, TubeShape


@dataclass(frozen=True)
class ClassificationConfig:
    """Detector thresholds.

    Attributes:
        min_wall: Minimum tube wall in inches; thinner candidates are rejected.
        default_k_factor: K-factor assumed when a conversion reports none.
        accept_solid_round_bar: Accept a zero-wall round candidate as round bar.
        min_round_bar_length: Minimum length in inches for a round bar.
    """

    min_wall: float = TUBE_MIN_WALL_IN
    default_k_factor: float = DEFAULT_K_FACTOR
    accept_solid_round_bar: bool = False
    min_round_bar_length: float = 0.5

    def __post_init__(self) -> None:
        if self.min_wall < 0:
            raise ValueError("min_wall must be non-negative")
        if not 0 < self.default_k_factor <= 1:
            raise ValueError("default_k_factor must be between 0 and 1")
        if self.min_round_bar_length < 0:
            raise ValueError("min_round_bar_length must be non-negative")


@dataclass(frozen=True)
class SheetMetalParameters:
    """Sheet-metal parameters captured from a successful detection."""

    thickness: float
    bend_radius: float = 0.0
    k_factor: float = DEFAULT_K_FACTOR


@dataclass(frozen=True)
class TubeGeometry:
    """Tube geometry captured from a tube extraction.

    Attributes:
        outer_diameter: OD, or largest outside dimension, in inches.
        wall_thickness: Wall in inches; 0 for solid stock.
        length: Length along the axis in inches.
        inner_diameter: ID in inches; derived when 0.
        shape: Cross-section shape.
        axis: Unit vector of the tube axis, when known.
    """

    outer_diameter: float
    wall_thickness: float
    length: float
    inner_diameter: float = 0.0
    shape: TubeShape = TubeShape.ROUND
    axis: tuple[float, float, float] | None = None


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one part.

    Created once per pass and never modified; a new attempt produces a
    new Classification.

    Attributes:
        category: Assigned category.
        reason: Why the category was chosen (or the failure message).
        sheet_metal: Captured parameters when category is SHEET_METAL.
        tube: Captured geometry when category is TUBE.
    """

    category: PartCategory
    reason: str = ""
    sheet_metal: SheetMetalParameters | None = None
    tube: TubeGeometry | None = None

    def __post_init__(self) -> None:
        if self.category is PartCategory.SHEET_METAL and self.sheet_metal is None:
            raise ValueError("Sheet metal classification requires sheet_metal parameters")
        if self.category is PartCategory.TUBE and self.tube is None:
            raise ValueError("Tube classification requires tube geometry")

    @classmethod
    def sheet(cls, parameters: SheetMetalParameters, reason: str) -> Classification:
        return cls(PartCategory.SHEET_METAL, reason, sheet_metal=parameters)

    @classmethod
    def tube_stock(cls, geometry: TubeGeometry, reason: str = "tube geometry") -> Classification:
        return cls(PartCategory.TUBE, reason, tube=geometry)

    @classmethod
    def generic(cls, reason: str = "not sheet metal or tube") -> Classification:
        return cls(PartCategory.GENERIC, reason)

    @classmethod
    def failed(cls, reason: str) -> Classification:
        return cls(PartCategory.FAILED, reason)

    @property
    def routing_category(self) -> PartCategory:
        """Category used for routing; a failed part is routed as generic."""
        if self.category is PartCategory.FAILED:
            return PartCategory.GENERIC
        return self.category

    @property
    def needs_review(self) -> bool:
        return self.category is PartCategory.FAILED


@dataclass(frozen=True)
class SheetMetalConversion:
    """Result of asking the geometry source to convert a part to sheet metal.

    Attributes:
        success: Whether the conversion command succeeded.
        is_sheet_metal: Whether a sheet-metal feature could be read back
            after the conversion.
        parameters: Thickness, bend radius and K-factor when successful.
        message: Source diagnostic.
    """

    success: bool
    is_sheet_metal: bool = False
    parameters: SheetMetalParameters | None = None
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.success and self.is_sheet_metal and self.parameters is not None


class ConversionRejectedError(Exception):
    """Raised by a geometry source when a sheet-metal conversion is rejected.

    This is a normal trial outcome rather than a failure; the pipeline
    moves on to the next detector.
    """


@runtime_checkable
class GeometrySource(Protocol):
    """Access to a part's geometry, implemented by a CAD adapter."""

    def has_sheet_metal_features(self) -> bool:
        """True when the part already carries sheet-metal features."""
        ...

    def existing_sheet_metal_parameters(self) -> SheetMetalParameters | None:
        """Parameters of existing sheet-metal features, if readable."""
        ...

    def try_convert_to_sheet_metal(self) -> SheetMetalConversion:
        """Attempt a sheet-metal conversion.

        May raise ConversionRejectedError when the geometry is refused.
        """
        ...

    def extract_tube_geometry(self) -> TubeGeometry | None:
        """Return tube geometry, or None when no tube profile is found."""
        ...


class StaticGeometrySource:
    """GeometrySource backed by values extracted ahead of time.

    Used when geometry has already been measured, for example from a
    part JSON file or in tests.
    """

    def __init__(
        self,
        sheet_metal_features: SheetMetalParameters | None = None,
        conversion: SheetMetalConversion | None = None,
        tube: TubeGeometry | None = None,
        reject_conversion: bool = False,
    ) -> None:
        self.sheet_metal_features = sheet_metal_features
        self.conversion = conversion
        self.tube = tube
        self.reject_conversion = reject_conversion

    def has_sheet_metal_features(self) -> bool:
        return self.sheet_metal_features is not None

    def existing_sheet_metal_parameters(self) -> SheetMetalParameters | None:
        return self.sheet_metal_features

    def try_convert_to_sheet_metal(self) -> SheetMetalConversion:
        if self.reject_conversion:
            raise ConversionRejectedError("Conversion rejected by geometry source")
        if self.conversion is None:
            return SheetMetalConversion(success=False, message="No sheet metal conversion available")
        return self.conversion

    def extract_tube_geometry(self) -> TubeGeometry | None:
        return self.tube
