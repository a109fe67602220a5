"""Validation helpers for request bodies and raw Riot payloads."""

from typing import Any, Dict, List, Mapping
import structlog

logger = structlog.get_logger(__name__)


def is_empty_or_none(value: Any) -> bool:
    """
    Check if value is None or empty (empty string, list, dict, etc.).

    Whitespace-only strings count as empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, set, tuple)):
        return len(value) == 0
    return False


def missing_fields(data: Mapping[str, Any], required_fields: List[str]) -> List[str]:
    """Return the required fields that are absent or empty in ``data``."""
    return [field for field in required_fields if is_empty_or_none(data.get(field))]


def validate_nested_fields(
    data: Dict[str, Any],
    required_structure: Dict[str, List[str]],
) -> bool:
    """
    Validate nested dictionary structure with required fields at each level.

    Args:
        data: Root dictionary to validate
        required_structure: Dict mapping nested keys to their required fields
                          e.g., {"info": ["participants", "teams"]}

    Returns:
        True if all nested required fields are present, False otherwise
    """
    for parent_key, required_fields in required_structure.items():
        nested_data = data.get(parent_key)
        if not isinstance(nested_data, dict):
            logger.warning(
                "Missing or invalid nested field",
                parent_key=parent_key,
                got_type=type(nested_data).__name__,
            )
            return False

        for field in required_fields:
            if field not in nested_data:
                logger.warning("Missing required field", context=parent_key, field=field)
                return False

    return True
