from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'rooms': 0,
        'room_attempts': 0,
        'rooms_rejected': 0,
        'cells_carved': 0,
        'carve_steps': 0,
        'backtracks': 0,
        'doors_created': 0,
        'doors_into_void': 0,
        'deadends_found': 0,
        'cells_pruned': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
