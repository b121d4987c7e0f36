import os

import click
import dotenv

from config.BluePrint import PARAMS
from scripts.utils import log
from scripts.utils import json_file
from scripts.utils.deploy_args import DeployArgs
from scripts.utils.scenario_runner import ScenarioRunner, ScenarioError

dotenv.load_dotenv()


SCENARIOS_DIR = "./scenarios"


CLICK_PROMPTS = {
    "blueprint": {
        "prompt": "Blueprint",
        "default": os.environ.get("SHAREVAULT_BLUEPRINT", "local"),
        "help": "Blueprint from config/BluePrint.py to run with. Defaults to $SHAREVAULT_BLUEPRINT or `local`.",
        "type": click.Choice(sorted(PARAMS.keys()), case_sensitive=False),
    },
    "scenarios_dir": {
        "default": SCENARIOS_DIR,
        "help": f"Directory holding the numbered scenario scripts. Defaults to `{SCENARIOS_DIR}`.",
    },
    "start": {
        "prompt": "Start scenario number",
        "default": 0,
        "help": "First scenario number to run. Defaults to the first one.",
    },
    "end": {
        "prompt": "End scenario number",
        "default": 0,
        "help": "Last scenario number to run. Defaults to the last one.",
        "depends": {
            "single": False
        }
    },
    "single": {
        "default": False,
        "help": "Runs only the first selected scenario.",
    },
    "output": {
        "default": "",
        "help": "Path of the JSON manifest to write. Nothing is written if empty.",
    },
}


def param_prompt(ctx, param, value):
    param_config = CLICK_PROMPTS.get(param.name)
    if param_config is None or "prompt" not in param_config:
        return value

    if value != param_config["default"] or ctx.params.get("silent"):
        return value

    depends = param_config.get("depends")
    if depends is not None:
        if not any(ctx.params.get(key) == expected for key, expected in depends.items()):
            return value

    return click.prompt(
        f"{param_config['prompt']} --{param.name.replace('_', '-')}",
        default=param_config["default"],
        type=param_config.get("type", type(param_config["default"])),
    )


@click.command()
@click.option("--silent", is_flag=True, default=False, is_eager=True, help="Run command without prompts.")
@click.option(
    "--single", "-s",
    is_flag=True,
    is_eager=True,
    default=CLICK_PROMPTS["single"]["default"],
    help=CLICK_PROMPTS["single"]["help"],
)
@click.option(
    "--blueprint", "-b",
    default=CLICK_PROMPTS["blueprint"]["default"],
    help=CLICK_PROMPTS["blueprint"]["help"],
    type=CLICK_PROMPTS["blueprint"]["type"],
    callback=param_prompt,
)
@click.option(
    "--scenarios-dir",
    default=CLICK_PROMPTS["scenarios_dir"]["default"],
    help=CLICK_PROMPTS["scenarios_dir"]["help"],
    type=click.Path(exists=True, file_okay=False),
)
@click.option(
    "--start", "-t",
    default=CLICK_PROMPTS["start"]["default"],
    help=CLICK_PROMPTS["start"]["help"],
    type=int,
    callback=param_prompt,
)
@click.option(
    "--end", "-e",
    default=CLICK_PROMPTS["end"]["default"],
    help=CLICK_PROMPTS["end"]["help"],
    type=int,
    callback=param_prompt,
)
@click.option(
    "--output", "-o",
    default=CLICK_PROMPTS["output"]["default"],
    help=CLICK_PROMPTS["output"]["help"],
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Print every event emitted.")
def cli(silent, single, blueprint, scenarios_dir, start, end, output, verbose):
    """
    Runs vault scenarios against fresh in-memory environments.

    Scenario scripts live in `./scenarios`. Their filenames start with a
    number that sets the order in which they run. Each script defines
    `run(simulation)`, which deploys assets, vaults and strategies through
    the `Simulation` it is handed, drives them, and records results.

    The manifests of all scenarios are merged into one JSON document that
    is written to `--output` when given.
    """
    deploy_args = DeployArgs(blueprint, verbose=verbose)

    log.h1("Vault Scenarios")
    log.info(f"Blueprint: {blueprint}.")
    log.info(f"Scenarios are read from `{scenarios_dir}`.")
    log.info(f"Running scenarios starting with number {start or 'first'}.")
    log.info(f"Deployment arguments: {deploy_args}")
    log.info("")

    runner = ScenarioRunner(scenarios_dir)
    try:
        manifest = runner.run(deploy_args, start or None, end or None, not single)
    except ScenarioError as exception:
        log.error(str(exception))
        log.error(f"Cause: {exception.__cause__!r}")
        raise SystemExit(1)

    if output:
        json_file.save(output, manifest)
        log.info(f"Manifest written to `{output}`.")

    if runner.count == 0:
        log.warn(f"No scenarios matched in `{scenarios_dir}`.")
    log.info(f"Scenarios run: {runner.count}")
    log.info("Done.")
    log.info("")


if __name__ == "__main__":
    cli()
