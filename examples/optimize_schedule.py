"""
Multi-objective search for dosing schedules with DEAP's NSGA-II selection.

Minimizes the uncured proportion against a second objective, with an
optional constraint on the acceptable failure rate.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import random
import numpy as np
from deap import algorithms, base, creator, tools

from treatment.model import AntibioticModel
from objectives.objective import (
    uncured_proportion, maximum_concentration, total_antibiotic, treatment_duration,
)
from objectives.problem import AntibioticProblem
from utils.logger import Logger
from utils.metrics import EvaluationTracker


# ---------------------------
# 1. Problem and Parameters
# ---------------------------

LENGTH = 10          # treatment days
RUNS = 100           # samples per evaluation
SAMPLE_TYPE = "fixed"  # "fixed" or "dynamic"
FAILURES = 20        # target failures for the dynamic sample size
STRAIN_1 = 700
STRAIN_2 = 100
MIN_START = 0
MAX_DOSAGE = 60
MAX_FAIL = 1.0       # below 1.0 adds the failure-rate constraint
SECOND_OBJECTIVES = ["maximumconcentration"]

N_GEN = 20
POP_SIZE = 40
CX_PB = 0.9
MUT_PB = 1.0
CONSTRAINT_PENALTY = 10.0
SEED = 42

OBJECTIVE_FACTORIES = {
    "maximumconcentration": maximum_concentration,
    "totalantibiotic": total_antibiotic,
    "treatmentduration": treatment_duration,
}


def build_problem():
    """Create the model and problem from the parameters above."""
    rng = np.random.default_rng(SEED)
    if SAMPLE_TYPE == "fixed":
        model = AntibioticModel.fixed_sample_size(RUNS, STRAIN_1, STRAIN_2, random=rng)
    elif SAMPLE_TYPE == "dynamic":
        model = AntibioticModel.dynamic_sample_size(FAILURES, RUNS, STRAIN_1, STRAIN_2,
                                                    random=rng)
    else:
        raise ValueError("SAMPLE_TYPE expected fixed or dynamic")

    objectives = [uncured_proportion()]
    for name in SECOND_OBJECTIVES:
        if name not in OBJECTIVE_FACTORIES:
            raise ValueError(f"Unknown objective : {name}")
        objectives.append(OBJECTIVE_FACTORIES[name]())

    return AntibioticProblem(model, objectives,
                             treatment_length=LENGTH,
                             max_individual_dosage=MAX_DOSAGE,
                             min_initial_dosage=MIN_START,
                             max_failure_rate=MAX_FAIL)


def main():
    """Run the search and report the final front."""
    random.seed(SEED)
    logger = Logger(log_dir='logs', experiment_name='optimize_schedule')
    problem = build_problem()
    logger.log_config({
        "problem": problem,
        "model": problem.model,
        "n_gen": N_GEN,
        "pop_size": POP_SIZE,
        "seed": SEED,
    })
    tracker = EvaluationTracker(problem, expected_limit=POP_SIZE * (N_GEN + 1),
                                log=logger)

    # ---------------------------
    # 2. DEAP Setup
    # ---------------------------

    lower = [problem.lower_bound(i) for i in range(problem.number_of_variables)]
    upper = [problem.upper_bound(i) for i in range(problem.number_of_variables)]

    creator.create("FitnessMin", base.Fitness,
                   weights=(-1.0,) * problem.number_of_objectives)
    creator.create("Individual", list, fitness=creator.FitnessMin)

    def random_schedule():
        return [random.randint(lo, up) for lo, up in zip(lower, upper)]

    def evaluate(individual):
        evaluation = tracker.evaluate(individual)
        if evaluation.violated_constraints:
            penalty = -evaluation.constraint_violation * CONSTRAINT_PENALTY
            return tuple(value + penalty for value in evaluation.objectives)
        return evaluation.objectives

    toolbox = base.Toolbox()
    toolbox.register("individual", tools.initIterate, creator.Individual, random_schedule)
    toolbox.register("population", tools.initRepeat, list, toolbox.individual)
    toolbox.register("evaluate", evaluate)
    toolbox.register("mate", tools.cxTwoPoint)
    toolbox.register("mutate", tools.mutUniformInt, low=lower, up=upper,
                     indpb=1.0 / problem.number_of_variables)
    toolbox.register("select", tools.selNSGA2)

    # ---------------------------
    # 3. Evolutionary Loop
    # ---------------------------

    pop = toolbox.population(n=POP_SIZE)
    for ind in pop:
        ind.fitness.values = toolbox.evaluate(ind)
    pop = toolbox.select(pop, len(pop))

    for gen in range(N_GEN):
        offspring = algorithms.varAnd(pop, toolbox, CX_PB, MUT_PB)
        for ind in offspring:
            if not ind.fitness.valid:
                ind.fitness.values = toolbox.evaluate(ind)
        pop = toolbox.select(pop + offspring, POP_SIZE)

        fits = np.array([ind.fitness.values for ind in pop])
        logger.log_metrics(gen, {
            "best_uncured": float(fits[:, 0].min()),
            "mean_uncured": float(fits[:, 0].mean()),
            **tracker.get_statistics(window=POP_SIZE),
        })

    # ---------------------------
    # 4. Report
    # ---------------------------

    front = tools.sortNondominated(pop, len(pop), first_front_only=True)[0]
    print(f"\n{'='*60}")
    print(f"Non-dominated schedules ({len(front)}):")
    print(f"{'='*60}")
    for ind in sorted(front, key=lambda ind: ind.fitness.values):
        values = "\t".join(f"{v:.4f}" for v in ind.fitness.values)
        print(f"{list(ind)}\t{values}")

    logger.save_metrics()
    logger.close()


if __name__ == "__main__":
    main()
