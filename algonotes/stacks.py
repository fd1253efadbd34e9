"""Stack-based problems: collisions, monotonic stacks and voting rounds."""

from __future__ import annotations

from collections.abc import Sequence


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Asteroids left after all collisions.

    Positive values move right, negative left. When two meet, the smaller
    one explodes; equal sizes both explode.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        if asteroid > 0:
            survivors.append(asteroid)
            continue
        while survivors and 0 < survivors[-1] < -asteroid:
            survivors.pop()
        if not survivors or survivors[-1] < 0:
            survivors.append(asteroid)
        elif survivors[-1] == -asteroid:
            survivors.pop()
    return survivors


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait for a strictly warmer temperature, or 0 if none comes."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def predict_party_victory(senate: str) -> str:
    """Winning party, ``"Radiant"`` or ``"Dire"``, of the senate voting rounds.

    In each round every senator with power, in order, bans the next one of
    the other party whose ban is pending, or else adds a pending ban
    against that party. Pending bans carry over between rounds.
    """
    has_power = [True] * len(senate)
    bans_on_radiant = 0
    bans_on_dire = 0
    while True:
        banned_someone = False
        for index, party in enumerate(senate):
            if not has_power[index]:
                continue
            if party == "R":
                if bans_on_radiant > 0:
                    has_power[index] = False
                    banned_someone = True
                    bans_on_radiant -= 1
                else:
                    bans_on_dire += 1
            else:
                if bans_on_dire > 0:
                    has_power[index] = False
                    banned_someone = True
                    bans_on_dire -= 1
                else:
                    bans_on_radiant += 1
        if not banned_someone:
            return "Radiant" if bans_on_dire > 0 else "Dire"