"""
Basic example of evaluating dosing schedules with the stochastic model.

This demonstrates the raw statistics, the objectives built on them, and the
feasibility penalties for schedules over the dosage or concentration limits.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np

from treatment.model import AntibioticModel
from objectives.objective import (
    uncured_proportion, overdose_amount, maximum_concentration,
    treatment_duration, total_antibiotic, weighting,
)
from objectives.problem import AntibioticProblem


RUNS = 200
SEED = 42
STRAIN_1 = 900
STRAIN_2 = 100

SCHEDULES = {
    "no treatment": [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    "constant 10": [10, 10, 10, 10, 10, 10, 10, 10, 10, 10],
    "front loaded": [40, 30, 20, 10, 10, 10, 0, 0, 0, 0],
    "overdose": [60, 60, 0, 0, 0, 0, 0, 0, 0, 0],
}


def main():
    """Evaluate a few schedules and print their fitness values."""
    print("Evaluating dosing schedules...")

    model = AntibioticModel.fixed_sample_size(
        RUNS, STRAIN_1, STRAIN_2, random=np.random.default_rng(SEED))
    problem = AntibioticProblem(model, [
        uncured_proportion(),
        total_antibiotic(),
        treatment_duration(),
        maximum_concentration(),
        overdose_amount(60),
    ])

    for label, schedule in SCHEDULES.items():
        evaluation = problem.evaluate(schedule)
        uncured, total, duration, peak, overdose = evaluation.objectives
        print(f"\n{label}: {schedule}")
        print(f"  Uncured proportion:    {uncured:.3f} ({evaluation.samples} runs)")
        print(f"  Total antibiotic:      {total:.0f}")
        print(f"  Treatment duration:    {duration:.0f} days")
        print(f"  Peak concentration:    {peak:.2f}")
        print(f"  Overdose above 60:     {overdose:.2f}")
        print(f"  Weighted (reference):  {model.evaluate(schedule):.4g}")

    # Same objective computed outside the problem
    print(f"\n{'='*60}")
    print(f"Weighting objective for 'constant 10': "
          f"{weighting().compute(model.aggregate(SCHEDULES['constant 10'])):.4f}")
    print(f"{'='*60}")


if __name__ == "__main__":
    main()
