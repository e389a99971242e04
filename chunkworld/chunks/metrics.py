from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'cells_carved': 0,
        'cells_pruned': 0,
        'doors_placed': 0,
        'edges_reinforced': 0,
        'bridges_opened': 0,
        'cells_stranded': 0,
        'decorations': 0,
        'runtime_ms': 0.0,
    }
