"""Shop rate and process constants used as built-in costing defaults.

This module provides:
- Hourly work-center rates
- Raw material prices and densities
- Press brake, laser, deburr, tapping and roll forming parameters
- Tube routing thresholds
"""

from __future__ import annotations


# Hourly burden rates in $/hr, keyed by work-center code
WORK_CENTER_RATES: dict[str, float] = {
    "F115": 120.0,  # Laser
    "F140": 80.0,  # Press brake
    "F145": 175.0,  # CNC bending
    "F155": 120.0,  # Waterjet
    "F210": 42.0,  # Deburr
    "F220": 65.0,  # Tapping
    "F300": 44.0,  # Material handling
    "F325": 65.0,  # Roll forming
    "F385": 37.0,  # Assembly
    "F400": 48.0,  # Welding
    "F500": 48.0,  # Finishing
    "F525": 47.0,  # Packaging
    "ENG": 50.0,  # Engineering
}

# Raw material price in $/lb
MATERIAL_PRICE_PER_LB: dict[str, float] = {
    "304": 1.75,
    "316": 2.25,
    "CS": 0.55,
    "6061": 2.50,
    "5052": 2.35,
    "GALV": 0.65,
}

# Sheet utilization after nesting; material cost is divided by this
DEFAULT_NEST_EFFICIENCY = 0.85

# Material densities in lb/in^3
DENSITY_STAINLESS = 0.289  # 304 / 316
DENSITY_CARBON_STEEL = 0.284  # A36 / CS
DENSITY_ALUMINUM = 0.098  # 6061 / 5052

# Standard full sheet, inches
STANDARD_SHEET_WIDTH = 60.0
STANDARD_SHEET_LENGTH = 120.0

# Laser
LASER_MINUTES_PER_SHEET = 5.0  # load/unload time per full sheet
LASER_SETUP_FIXED_MINUTES = 0.5
LASER_MIN_SETUP_HOURS = 0.01
LASER_THICKNESS_TOLERANCE = 0.005
# Flat speeds used when no speed table row is available
LASER_FALLBACK_IPM_STEEL = 60.0
LASER_FALLBACK_IPM_ALUMINUM = 100.0
LASER_FALLBACK_PIERCE_SECONDS = 0.5

# Press brake
BRAKE_SETUP_MINUTES_PER_FOOT = 1.25
BRAKE_SETUP_FIXED_MINUTES = 10.0
BRAKE_SECONDS_PER_BEND = (10.0, 30.0, 45.0, 200.0, 400.0)  # small, medium, large, heavy, extra heavy
BRAKE_WEIGHT_THRESHOLDS_LB = (5.0, 40.0, 100.0)
BRAKE_LENGTH_THRESHOLDS_IN = (12.0, 60.0)

# Deburr
DEBURR_INCHES_PER_MINUTE = 60.0

# Tapping
TAP_SETUP_HOURS_PER_SETUP = 0.015
TAP_SETUP_FIXED_HOURS = 0.085
TAP_MIN_SETUP_HOURS = 0.1
TAP_RUN_HOURS_PER_HOLE = 0.01

# Roll forming
ROLL_SETUP_HOURS = 0.5
ROLL_FEET_PER_MINUTE = 10.0
ROLL_MIN_RADIUS_IN = 2.0

# Tube routing
TUBE_MIN_WALL_IN = 0.015
TUBE_HEAVY_WALL_IN = 0.165  # wall at or above this needs the brake
TUBE_MEDIUM_WEIGHT_LB = 40.0
TUBE_HEAVY_WEIGHT_LB = 150.0

# Forming
DEFAULT_K_FACTOR = 0.44
