"""Dialogue demo: drives NPC state from event scripts and saves it.

Run from the repository root:
    python -m examples.dialogue_demo
"""

from pathlib import Path

from npcstate import GameSession, ScriptCommands, TrackerSettings, configure_logging, get_logger

logger = get_logger(__name__)


def talk_to_yukes(npc: ScriptCommands) -> str:
    if not npc.check_npc("YUKES", "alive"):
        return "..."
    npc.change_npc("YUKES", "affection", 5)
    if npc.check_var_npc("YUKES", "affection", ">=", 50):
        npc.switch_npc("YUKES", "friend", True)
        return "Yukes: Good to see you, friend!"
    if npc.check_npc("YUKES", "known"):
        return "Yukes: Oh, it's you again."
    npc.switch_npc("YUKES", "known", True)
    npc.switch_npc("YUKES", "unknow", False)
    return "Yukes: Hi, I'm Yukes."


def visit_shop(npc: ScriptCommands) -> str:
    npc.change_npc("SHOPKEEPER", "visits", 1)
    if npc.check_var_npc("SHOPKEEPER", "visits", ">", 3):
        npc.set_npc("SHOPKEEPER", "discount", 0.1)
    return f"Shopkeeper: {npc.get_var('SHOPKEEPER', 'discount'):.0%} off today."


def main() -> None:
    settings = TrackerSettings(definitions_path=Path(__file__).with_name("npcs.toml"))
    configure_logging(settings.log_level)

    session = GameSession.from_settings(settings)
    npc = ScriptCommands(session.tracker)

    for _ in range(10):
        print(talk_to_yukes(npc))
    for _ in range(5):
        print(visit_shop(npc))

    save_data = session.save()
    logger.info("game_saved", size=len(save_data["npc_tracker"]))

    reloaded = GameSession.from_settings(settings)
    reloaded.load(save_data)
    print("Affection after reload:", reloaded.tracker.read_variable("YUKES", "affection"))

    # Typos in scripts are logged, never fatal
    npc.set_npc("YUKE", "state", 1)


if __name__ == "__main__":
    main()
