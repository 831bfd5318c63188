"""Script command surface for dialogue and quest events.

Each command is one call, named the way event scripts refer to it:

    npc = ScriptCommands(session.tracker)

    npc.check_var_npc("YUKES", "affection", ">=", 50)  # conditional branch
    npc.set_npc("YUKES", "state", 1)                   # quest progression
    npc.switch_npc("YUKES", "alive", False)            # kill an NPC
    npc.toggle_npc("VIRIDIANCITY", "OwnHouse")         # flip an event flag
    npc.change_npc("YUKES", "affection", 5)            # reward
    npc.has_npc("YUKES")                               # safety check
    npc.reset_npc("YUKES")                             # memory wipe / NG+
"""

from __future__ import annotations

from npcstate.core import EntityKey, OperatorLike, SwitchName, VariableName
from npcstate.tracker import NPCTracker


class ScriptCommands:
    """Thin command facade over an NPCTracker.

    Args:
        tracker: Tracker the commands read and write.
    """

    def __init__(self, tracker: NPCTracker):
        self.tracker = tracker

    def has_npc(self, npc: EntityKey) -> bool:
        """True if the id is defined in the static table."""
        return self.tracker.exists_definition(npc)

    def check_npc(self, npc: EntityKey, switch: SwitchName) -> bool:
        """Read a switch."""
        return self.tracker.read_switch(npc, switch)

    def get_var(self, npc: EntityKey, variable: VariableName) -> int | float:
        """Read a variable."""
        return self.tracker.read_variable(npc, variable)

    def switch_npc(self, npc: EntityKey, switch: SwitchName, value: bool) -> None:
        self.tracker.set_switch(npc, switch, value)

    def set_npc(self, npc: EntityKey, variable: VariableName, value: int | float) -> None:
        self.tracker.set_variable(npc, variable, value)

    def change_npc(self, npc: EntityKey, variable: VariableName, amount: int | float) -> None:
        self.tracker.change_variable(npc, variable, amount)

    def toggle_npc(self, npc: EntityKey, switch: SwitchName) -> None:
        self.tracker.toggle_switch(npc, switch)

    def reset_npc(self, npc: EntityKey) -> None:
        self.tracker.reset(npc)

    def check_var_npc(
        self, npc: EntityKey, variable: VariableName, op: OperatorLike, value: int | float
    ) -> bool:
        """Compare a variable, e.g. check_var_npc("YUKES", "affection", ">", 10)."""
        return self.tracker.evaluate(npc, variable, op, value)
