"""Console front end for the destination lookup client.

Every line typed at the prompt replaces the search box text, like a
burst of keystrokes. Commands:

    <text>     search for <text>
    :clear     clear the search box
    :N         select option N of the list
    :cN        select entry N of the "closest destinations" panel
    :quit      leave
"""

from __future__ import annotations

import asyncio
import locale
import logging
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from destination_lookup.adapters.store import HttpDestinationStore
from destination_lookup.config import configure_logging, get_config
from destination_lookup.container import Container
from destination_lookup.domain.models import Destination, SearchPhase
from destination_lookup.ports import DestinationStorePort
from destination_lookup.services import SearchCoordinator


def render(coordinator: SearchCoordinator) -> str:
    """Render the session as text: options, details, closest, error."""
    state = coordinator.state
    lines: List[str] = []

    if state.phase == SearchPhase.SEARCHING:
        lines.append("Searching...")
    for index, option in enumerate(state.options, start=1):
        marker = "*" if state.selected and state.selected.id == option.id else " "
        lines.append(f"{marker}{index:>2}. {option.name}")

    details = state.details
    if details is not None:
        lines += [
            "",
            f"== {details.name} ==",
            details.description,
            f"Country: {details.country}",
            f"Climate: {details.climate}",
            f"Currency: {details.currency}",
        ]

    if state.error:
        lines += ["", f"Error: {state.error}"]

    if state.selected is not None:
        lines += ["", "Closest destinations:"]
        for index, entry in enumerate(coordinator.closest(), start=1):
            lines.append(
                f"  c{index}. {entry.destination.name} ({entry.distance_km:.0f} km)"
            )

    return "\n".join(lines)


def _pick(command: str, coordinator: SearchCoordinator) -> Optional[Destination]:
    if command.startswith("c"):
        candidates = [entry.destination for entry in coordinator.closest()]
        command = command[1:]
    else:
        candidates = list(coordinator.state.options)

    if not command.isdigit():
        return None
    index = int(command) - 1
    if 0 <= index < len(candidates):
        return candidates[index]
    return None


async def run(coordinator: SearchCoordinator) -> None:
    print("Travel Destination Searcher (:quit to leave)")
    while True:
        line = await asyncio.to_thread(input, "search> ")
        line = line.rstrip("\n")

        if line == ":quit":
            return
        if line == ":clear":
            coordinator.on_input("")
        elif line.startswith(":"):
            destination = _pick(line[1:], coordinator)
            if destination is None:
                print("No such entry.")
                continue
            await coordinator.select(destination)
        else:
            coordinator.on_input(line)
            await coordinator.wait_idle()

        print(render(coordinator))


def use_environment_collation() -> None:
    """Sort option names with the user's LC_COLLATE instead of the C locale."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logging.getLogger(__name__).warning(
            "Keeping code-point collation", extra={"error": str(e)}
        )


def main() -> None:
    config = get_config()
    configure_logging(config.observability)
    use_environment_collation()
    container = Container.create_default(config)
    coordinator = container.resolve(SearchCoordinator)
    try:
        asyncio.run(run(coordinator))
    except (EOFError, KeyboardInterrupt):
        print()
    finally:
        store = container.resolve(DestinationStorePort)
        if isinstance(store, HttpDestinationStore):
            store.close()


if __name__ == "__main__":
    main()
