"""
contracts - Validated configuration payloads.

Converts camelCase JSON from the builder into frozen configuration
records, raising ``ConfigurationError`` for structurally invalid input.
"""

from .payloads import (
    PayloadModel,
    PointPayload,
    HullPayload,
    TurbinePayload,
    HullDimensionsPayload,
    YachtDesignPayload,
    validate_payload,
    format_issues,
    parse_hull_config,
    parse_turbine_config,
    parse_hull_dimensions,
    parse_yacht_design,
)

__all__ = [
    "PayloadModel",
    "PointPayload",
    "HullPayload",
    "TurbinePayload",
    "HullDimensionsPayload",
    "YachtDesignPayload",
    "validate_payload",
    "format_issues",
    "parse_hull_config",
    "parse_turbine_config",
    "parse_hull_dimensions",
    "parse_yacht_design",
]
