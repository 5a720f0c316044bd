"""Rule-evaluation options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RulesOptions:
    """Switches that tune how the rules core evaluates a position.

    Attributes:
        pawn_push_attacks: Treat the square straight ahead of a pawn as
            attacked whenever the pawn could step there.  This matches the
            attack set the check/checkmate predicates were defined against.
            Set to ``False`` for chess-exact pawn attacks (forward diagonals
            only, regardless of occupancy).
    """

    pawn_push_attacks: bool = True


DEFAULT_OPTIONS = RulesOptions()
