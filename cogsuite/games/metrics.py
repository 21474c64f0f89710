from typing import Dict


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'attempts': 0,
        'candidates_rejected': 0,
        'walls_requested': 0,
        'walls_placed': 0,
        'placement_tries': 0,
        'exhausted': False,
        'runtime_ms': 0.0,
    }
