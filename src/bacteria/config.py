"""
Configuration parameters for the antibiotic treatment model.
Contains the biological constants, the dosing time structure, and the
reference weighting/penalty values.
"""

# -----------------------
# Biological Parameters
# -----------------------
BIOLOGICAL_PARAMS = {
    "r": 2.7726,             # reproduction rate of the susceptible strain
    "c1": 0.2,               # cost of carrying resistance
    "K": 1000,               # carrying capacity
    "ms": 0.2,               # mortality rate of susceptibles
    "mr": 0.2,               # mortality rate of resistants
    "min_s": -2.1,           # min net growth rate at high AB, susceptibles
    "min_r": -2.1,           # min net growth rate at high AB, resistants
    "mic_s": 16,             # pharmacodynamic MIC, susceptibles
    "mic_r": 32,             # pharmacodynamic MIC, resistants
    "k_s": 4,                # Hill coefficient, susceptibles
    "k_r": 4,                # Hill coefficient, resistants
    "a": 0.48,               # degradation rate of AB
}

# Max net growth rates in the absence of antibiotic
BIOLOGICAL_PARAMS["max_s"] = BIOLOGICAL_PARAMS["r"] - BIOLOGICAL_PARAMS["ms"]
BIOLOGICAL_PARAMS["max_r"] = (BIOLOGICAL_PARAMS["r"] * (1 - BIOLOGICAL_PARAMS["c1"])
                              - BIOLOGICAL_PARAMS["mr"])

# -----------------------
# Initial Bacterial Load
# -----------------------
DEFAULT_INITIAL_LOAD_1 = 900        # strain 1, least resistant
DEFAULT_INITIAL_LOAD_2 = 100        # strain 2, medium resistant
MAX_TOTAL_LOAD = 1000               # bound on each load and on their sum

# -----------------------
# Treatment Time Structure
# -----------------------
MAX_LENGTH = 10                     # dosing slots, one per treatment day
END_TIME = 15                       # simulation horizon
DOSE_TIMES = (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, END_TIME)

# Circuit breaker on events within one run
MAX_EVENTS_PER_RUN = 10_000_000

# -----------------------
# Reference Weighting (MATLAB)
# -----------------------
MATLAB_REF_W1 = 1.0
MATLAB_REF_W2 = 0.1
MATLAB_REF_V_MAX = 184              # global cap on total dosage
MATLAB_REF_MAX_CONC = 60            # safety ceiling on concentration
MATLAB_REF_PENALTY_V_MAX = 10.0 ** 10
MATLAB_REF_PENALTY_CONC = 10.0 ** 10

# -----------------------
# Problem Defaults
# -----------------------
PROBLEM_DEFAULTS = {
    "treatment_length": 10,
    "max_individual_dosage": 60,
    "min_initial_dosage": 0,
    "max_failure_rate": 1.0,        # 1.0 means unconstrained
}
