"""Base enums and shared models for costing configuration schemas.

Domain enums are imported directly from the domain layer and aliased here
so schema modules and callers share one definition.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

# Import domain enums directly - these use (str, Enum) for JSON compatibility
from shopcost.domain.value_objects import TubeShape

# Supported schema versions for configuration files
# Version 1.0: Rates, material pricing and process parameters
# Version 1.1: Laser speed tables and classification thresholds
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

TubeShapeConfig = TubeShape


def check_schema_version(v: str) -> str:
    """Accept a supported version or a newer minor of a supported major.

    Raises:
        ValueError: If the major version is not supported.
    """
    if v in SUPPORTED_VERSIONS:
        return v

    major_version = int(v.split(".")[0])
    supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
    if major_version in supported_majors:
        return v

    raise ValueError(
        f"Unsupported schema version '{v}'. "
        f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
    )


class BoundingBoxConfig(BaseModel):
    """Part bounding box.

    Attributes:
        length: Longest dimension in inches
        width: Second dimension in inches
        height: Third dimension in inches
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(default=0.0, ge=0)
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)
