"""CLI command implementations for shopcost.

- estimate: Classify and cost a part file
- validate-config: Validate a shop rates file
"""

from shopcost.cli.commands.estimate import estimate_command
from shopcost.cli.commands.validate import validate_config_command

__all__ = ["estimate_command", "validate_config_command"]
