import importlib.util
import os
import re

from mergedeep import merge

from scripts.utils import log
from scripts.utils.simulation import Simulation
from scripts.utils.deploy_args import DeployArgs


class ScenarioError(Exception):
    """
    Error representing an exception that occurs while running a scenario.
    Provides the `failure_number` of the scenario that failed so a later run
    can resume from it with `--start`.
    """

    def __init__(self, failure_number, message="An error occurred while running scenario"):
        self.failure_number = failure_number
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message}. Number of failed scenario script: {self.failure_number}"


class ScenarioRunner:
    """
    Runs numbered scenario scripts. Each script defines `run(simulation)` and
    gets its own `Simulation` (and so its own `Env`).
    """

    def __init__(self, scenarios_dir):
        self.scenarios_dir = scenarios_dir
        self.count = 0

    def run(self, deploy_args: DeployArgs, start_number=None, end_number=None, continue_running=True):
        """
        Run scenarios numbered ON OR AFTER `start_number` and up to
        `end_number` (both optional), in numeric order. With
        `continue_running` False only the first of them runs.

        Returns the manifest: every scenario's own manifest deep-merged
        into one dictionary.
        """
        manifest = {}
        for run, number, name in self._scenarios(start_number, end_number):
            log.h1(f"Running scenario {number} ({name})...")
            try:
                simulation = Simulation(deploy_args, number, name)
                run(simulation)
                merge(manifest, simulation.manifest())
                self.count += 1

                if not continue_running:
                    break
            except Exception as exception:
                raise ScenarioError(number) from exception
        return manifest

    def _scenarios(self, start_number=None, end_number=None):
        # Generator that returns a `(run, number, name)` tuple for each
        # scenario script, in numeric order.
        for filename, number, name in self._filtered_scenario_filenames(start_number, end_number):
            spec = importlib.util.spec_from_file_location(f"scenario_{number}", filename)
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)
            yield module.run, number, name

    def _filtered_scenario_filenames(self, start_number, end_number):
        # The number of a scenario is the leading run of digits in its
        # filename; the rest (after an optional dash) is its name.
        numbered = []
        for file in os.listdir(self.scenarios_dir):
            match = re.fullmatch(r"(\d+)-?(.*)\.py$", file)
            if match:
                numbered.append((os.path.join(self.scenarios_dir, file), int(match.group(1)), match.group(2)))

        # sort order of `os.listdir` is not guaranteed
        numbered.sort(key=lambda x: x[1])

        return [
            (filename, number, name)
            for filename, number, name in numbered
            if (start_number is None or number >= start_number)
            and (end_number is None or number <= end_number)
        ]
