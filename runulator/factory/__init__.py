from .builders import (
    BUILDERS,
    create_with,
    create_with_distance_and_duration,
    create_with_distance_and_pace,
    create_with_distance_and_speed,
    create_with_duration_and_pace,
    create_with_duration_and_speed,
    get_builder,
)
from .inputs import create_from_input, parse_parameter
from .storage import (
    StoredRun,
    from_storage_form,
    parse_storage_form,
    runs_from_storage,
    runs_to_storage,
    storage_form_with_distance_and_duration,
    storage_form_with_distance_and_pace,
    storage_form_with_distance_and_speed,
    storage_form_with_duration_and_pace,
    storage_form_with_duration_and_speed,
    to_storage_form,
)

__all__ = [
    "BUILDERS",
    "create_with",
    "create_with_distance_and_duration",
    "create_with_distance_and_pace",
    "create_with_distance_and_speed",
    "create_with_duration_and_pace",
    "create_with_duration_and_speed",
    "get_builder",
    "create_from_input",
    "parse_parameter",
    "StoredRun",
    "from_storage_form",
    "parse_storage_form",
    "runs_from_storage",
    "runs_to_storage",
    "storage_form_with_distance_and_duration",
    "storage_form_with_distance_and_pace",
    "storage_form_with_distance_and_speed",
    "storage_form_with_duration_and_pace",
    "storage_form_with_duration_and_speed",
    "to_storage_form",
]
