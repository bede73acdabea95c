"""
Console report for the simulator.

Renders encounters, their rounds, and their outcomes as rich tables so a
chain of encounters can be read round by round from a terminal.
"""

from rich.table import Table

from battlesim.combat.encounter import Encounter
from battlesim.combat.round_engine import RoundSnapshot
from battlesim.core.constants import Side
from battlesim.core.utils import cprint, crule
from battlesim.roster.combatant import Roster
from battlesim.roster.expansion import count_alive
from battlesim.roster.stat_block import Team


def team_table(team: Team, title: str) -> Table:
    """Builds a table listing stat blocks."""
    table = Table(title=title, pad_edge=False)
    table.add_column("Name", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("HP", justify="right", style="green")
    table.add_column("DPR", justify="right", style="red")
    table.add_column("To Hit", justify="right", style="magenta")
    table.add_column("AC", justify="right", style="cyan")
    table.add_column("Target", style="dim")
    for stats in team:
        table.add_row(
            stats.name,
            str(stats.count),
            str(stats.hp),
            f"{stats.dpr:g}",
            f"{stats.to_hit:+d}",
            str(stats.ac),
            stats.target or "-",
        )
    return table


def _roster_cell(roster: Roster) -> str:
    return "\n".join(combatant.get_status_line() for combatant in roster)


def round_table(snapshot: RoundSnapshot) -> Table:
    """
    Builds a two-column table with both rosters after a round.

    Args:
        snapshot (RoundSnapshot): The round to render.

    Returns:
        Table: The rendered round.

    """
    table = Table(title=f"Round {snapshot.round_number}", pad_edge=False)
    for side in (Side.PLAYERS, Side.MONSTERS):
        roster = snapshot.get_roster(side)
        table.add_column(
            f"{side.emoji} {side.display_name} ({count_alive(roster)}/{len(roster)})",
            header_style=side.color,
        )
    table.add_row(_roster_cell(snapshot.players), _roster_cell(snapshot.monsters))
    return table


def print_encounter(encounter: Encounter, index: int, verbose: int = 0) -> None:
    """
    Prints one encounter.

    Args:
        encounter (Encounter): The simulated encounter.
        index (int): The 1-based position of the encounter in the chain.
        verbose (int): 0 prints the last round only, 1 every round, 2 every
            round with its attack log.

    """
    crule(f":crossed_swords:  Encounter {index}", style="bold green")
    cprint(team_table(encounter.monsters, "Monsters"))
    rounds = encounter.simulation_results
    if not rounds:
        cprint("[dim]No round fought.[/]")
    shown = rounds if verbose > 0 else rounds[-1:]
    for snapshot in shown:
        cprint(round_table(snapshot))
        if verbose > 1:
            for attack in snapshot.attacks:
                cprint(attack.describe())
    print_outcome(encounter)


def print_outcome(encounter: Encounter) -> None:
    """Prints the one-line outcome of an encounter."""
    if encounter.outcome is None:
        cprint("[dim white]Not simulated.[/]")
        return
    players = encounter.final_players()
    cprint(
        f"{encounter.outcome.colored_name} after "
        f"{len(encounter.simulation_results)} rounds, "
        f"{count_alive(players)}/{len(players)} players standing."
    )


def print_summary(team: Team, encounters: list[Encounter]) -> None:
    """
    Prints the player team followed by the outcome of every encounter.

    Args:
        team (Team): The player stat blocks.
        encounters (list[Encounter]): The simulated encounters.

    """
    cprint(team_table(team, "Players"))
    for index, encounter in enumerate(encounters, 1):
        cprint(f"[bold]Encounter {index}:[/] ", end="")
        print_outcome(encounter)
