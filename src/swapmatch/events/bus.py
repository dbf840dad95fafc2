from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"      # payload: src=(x,y), dst=(x,y)
EVENT_BOARD_RESET_REQUEST = "board_reset_request"  # payload: reason=str|None


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILE_SWAP_VALID = "tile_swap_valid"          # payload: src=(x,y), dst=(x,y)
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"      # payload: src=(x,y), dst=(x,y), reason=str
EVENT_MATCH_FOUND = "match_found"                  # payload: matches=list[Match], positions=[(x,y),...], reason=str
EVENT_MATCH_CLEARED = "match_cleared"              # payload: positions=[(x,y),...], affected=dict[int,int], score=int
EVENT_CASCADE_STEP = "cascade_step"                # payload: depth=int, matches=list[Match], positions=[(x,y),...]
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: depth=int
EVENT_BOARD_RESET = "board_reset"                  # payload: reason=str|None
EVENT_NO_MOVES_LEFT = "no_moves_left"              # payload: None


# ============================================================================
# SCORE
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: total=int, delta=int


# ============================================================================
# DIAGNOSTICS
# ============================================================================
EVENT_BOARD_INVARIANT_VIOLATION = "board_invariant_violation"  # payload: problem=str, empties=list, previous=list[int], swap=tuple|None, matches=list[Match]
