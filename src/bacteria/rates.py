"""
Event rates for the two-strain birth-death process.
"""

from .config import BIOLOGICAL_PARAMS


def hill_kill_rate(concentration, max_net, min_net, mic, hill):
    """
    Antibiotic-induced per-capita death rate.

    Saturating Hill term keyed to the strain's MIC and steepness. Zero when
    the concentration is zero.

    Args:
        concentration (float): Current antibiotic concentration
        max_net (float): Max net growth rate without antibiotic
        min_net (float): Min net growth rate at high antibiotic
        mic (float): Pharmacodynamic MIC of the strain
        hill (float): Hill coefficient

    Returns:
        float: Per-capita death rate due to the antibiotic
    """
    effect = (concentration / mic) ** hill
    return (max_net - min_net) * effect / (effect - min_net / max_net)


def event_rates(s1, s2, concentration, params=BIOLOGICAL_PARAMS):
    """
    Compute the four event rates in their fixed order.

    Args:
        s1 (int): Strain 1 population
        s2 (int): Strain 2 population
        concentration (float): Current antibiotic concentration
        params (dict): Biological parameters

    Returns:
        tuple: (growth_1, growth_2, death_1, death_2)
    """
    crowding = 1 - (s1 + s2) / params["K"]

    growth_1 = params["r"] * s1 * crowding
    growth_2 = params["r"] * s2 * crowding * (1 - params["c1"])

    death_1 = params["ms"] * s1 + hill_kill_rate(
        concentration, params["max_s"], params["min_s"],
        params["mic_s"], params["k_s"]) * s1
    death_2 = params["mr"] * s2 + hill_kill_rate(
        concentration, params["max_r"], params["min_r"],
        params["mic_r"], params["k_r"]) * s2

    return growth_1, growth_2, death_1, death_2
