from typing import Dict


def init_metrics() -> Dict[str, int | float | bool | dict]:
    return {
        'rooms_target': 0,
        'rooms_placed': 0,
        'rooms_failed': 0,
        'horizontal_corridors': 0,
        'vertical_corridors': 0,
        'duplicate_corridors': 0,
        'floor_cells': 0,
        'components_before_repair': 0,
        'connectors_carved': 0,
        'connected': False,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
