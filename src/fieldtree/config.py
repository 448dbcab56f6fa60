"""
Configuration for the field selector and its row rendering.
"""

from dataclasses import dataclass


@dataclass
class SelectorConfig:
    """Configuration for field tree labels and row layout."""

    transform_label: str = "Transform"
    children_label: str = "Children"
    transform_fields: tuple[str, ...] = ("Position", "Rotation", "Scale")
    header: str = "Select a property"
    indent_amount: int = 5  # Extra indentation per tree level
    padding: int = 5  # Leading space before every row

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "SelectorConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        config = dict(config)
        if "transform_fields" in config:
            config["transform_fields"] = tuple(config["transform_fields"])
        return cls(**config)
