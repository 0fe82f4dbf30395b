"""
Logger utility for schedule optimization experiments.
"""

import json
import logging
import os
from datetime import datetime


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """
    Logger for experiment tracking and console output.

    Messages go to a per-experiment log file and to the console. Metrics
    recorded with :meth:`log_metrics` are kept in memory until saved.
    """

    def __init__(self, log_dir='logs', experiment_name=None, level=logging.INFO):
        """
        Initialize logger.

        Args:
            log_dir (str): Directory for log files
            experiment_name (str): Name of experiment
            level (int): Logging level of the experiment logger
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        if experiment_name is None:
            experiment_name = f"exp_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.experiment_name = experiment_name
        self.log_file = os.path.join(log_dir, f"{experiment_name}.log")

        self.logger = logging.getLogger(experiment_name)
        self.logger.setLevel(level)
        if not self.logger.handlers:
            formatter = logging.Formatter(LOG_FORMAT)
            for handler in (logging.FileHandler(self.log_file), logging.StreamHandler()):
                handler.setFormatter(formatter)
                self.logger.addHandler(handler)

        self.metrics = []

    def info(self, message):
        """Log info message."""
        self.logger.info(message)

    def warning(self, message):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message):
        """Log error message."""
        self.logger.error(message)

    def log_metrics(self, step, metrics_dict):
        """
        Log metrics for a step (e.g. a generation of the search).

        Args:
            step (int): Step number
            metrics_dict (dict): Dictionary of metrics
        """
        metrics_entry = {'step': step, **metrics_dict}
        self.metrics.append(metrics_entry)

        metrics_str = ', '.join(f"{k}: {v:.4f}" if isinstance(v, float) else f"{k}: {v}"
                                for k, v in metrics_dict.items())
        self.info(f"Step {step} - {metrics_str}")

    def save_metrics(self):
        """
        Save metrics to JSON file.

        Returns:
            str: Path of the written file
        """
        metrics_file = os.path.join(self.log_dir, f"{self.experiment_name}_metrics.json")
        with open(metrics_file, 'w') as f:
            json.dump(self.metrics, f, indent=2)
        self.info(f"Metrics saved to {metrics_file}")
        return metrics_file

    def log_config(self, config_dict):
        """
        Log experiment configuration (model, problem and search settings).

        Args:
            config_dict (dict): Configuration parameters

        Returns:
            str: Path of the written file
        """
        config_file = os.path.join(self.log_dir, f"{self.experiment_name}_config.json")
        with open(config_file, 'w') as f:
            json.dump(config_dict, f, indent=2, default=repr)
        for key, value in config_dict.items():
            self.info(f"{key} = {value!r}")
        return config_file

    def close(self):
        """Detach and close the handlers of this experiment."""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
