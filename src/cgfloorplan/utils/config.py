"""
Global configuration flags.
"""

from dataclasses import dataclass


@dataclass
class FPConfig:
    debug: bool = False
    output_suffix: str = "_result"
    log_level: str = "WARNING"


config = FPConfig()
