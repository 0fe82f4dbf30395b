"""
Single stochastic realization of the two-strain treatment model.
"""

import math
from collections import namedtuple

from .config import BIOLOGICAL_PARAMS, DOSE_TIMES, MAX_EVENTS_PER_RUN
from .exceptions import NumericDegeneracyError
from .rates import event_rates


RunResult = namedtuple("RunResult", ["strain_1", "strain_2"])


def interval_doses(doses):
    """
    Dose added at the start of each simulation interval.

    The first interval (time 0 to 1) and the last one (day 11 to the end of
    the horizon) carry no dose; slot ``k`` of the schedule is applied at
    time ``k + 1``.

    Args:
        doses (sequence): Padded dosing schedule

    Returns:
        tuple: One dose per interval in ``DOSE_TIMES``
    """
    return (0,) + tuple(doses) + (0,)


def simulate_run(doses, initial_load_1, initial_load_2, rng,
                 params=BIOLOGICAL_PARAMS, max_events=MAX_EVENTS_PER_RUN):
    """
    Run one Gillespie-style realization over the treatment horizon.

    Each event consumes two draws from ``rng``: the first selects the event
    from the ordered partition (growth 1, growth 2, death 1, death 2), the
    second gives the exponential waiting time. Between doses the
    concentration decays exponentially from its level at the start of the
    interval.

    Args:
        doses (sequence): Padded dosing schedule (length ``MAX_LENGTH``)
        initial_load_1 (int): Initial strain 1 population
        initial_load_2 (int): Initial strain 2 population
        rng (numpy.random.Generator): Source of randomness
        params (dict): Biological parameters
        max_events (int): Circuit breaker on the number of events

    Returns:
        RunResult: Final populations of both strains

    Raises:
        NumericDegeneracyError: If the total rate is zero or not finite while
            bacteria remain, or the event limit is exceeded
    """
    cint = interval_doses(doses)
    decay = params["a"]

    s1 = initial_load_1
    s2 = initial_load_2
    concentration = 0.0
    time = 0.0
    events = 0

    for j in range(1, len(DOSE_TIMES)):
        if s1 < 1 and s2 < 1:
            break

        concentration += cint[j - 1]
        c0 = concentration
        interval_start = time
        boundary = DOSE_TIMES[j]

        while time <= boundary:
            growth_1, growth_2, death_1, death_2 = event_rates(
                s1, s2, concentration, params)
            rate_sum = growth_1 + growth_2 + death_1 + death_2

            if not (rate_sum > 0) or math.isinf(rate_sum):
                raise NumericDegeneracyError(
                    f"rate sum = {rate_sum} with populations ({s1}, {s2}) "
                    f"at time {time:.4f}")

            # Event
            x1 = rng.random()
            if x1 < growth_1 / rate_sum:
                s1 += 1
            elif x1 < (growth_1 + growth_2) / rate_sum:
                s2 += 1
            elif x1 < (growth_1 + growth_2 + death_1) / rate_sum:
                s1 -= 1
            else:
                s2 -= 1

            # Waiting time and decayed concentration
            time -= math.log(1.0 - rng.random()) / rate_sum
            concentration = c0 * math.exp(-decay * (time - interval_start))

            events += 1
            if events > max_events:
                raise NumericDegeneracyError(
                    f"run exceeded {max_events} events at time {time:.4f}")

            if s1 < 1 and s2 < 1:
                break

    return RunResult(s1, s2)
