# cli/main.py

"""
Entry point for the TeachStack terminal front end.

Loads the config, preferences, and rosters from the data directory, then runs a read-eval-render loop:
each line is handed to `Logic.execute()`, the feedback is printed, and the filtered class list is
re-rendered. Result flags open the help listing, the grade summary, or the archive, or end the session.
"""

import argparse
import logging
import os
from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from core.config import DEFAULT_CONFIG_FILE, Config
from core.logs import setup_logging
from cli.path_utils import resolve_data_dir, resolve_in_dir
from logic.commands.command_result import CommandResult
from logic.commands.view_commands import ClearCommand
from logic.logic import Logic
from models.model import Model
from models.roster import StudentPredicate, show_all_students
from models.storage import Storage
from models.user_prefs import UserPrefs

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="teachstack",
        description="Manage a course roster from the terminal.",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="directory holding rosters, preferences, and logs (default: ~/Documents/TeachStack)",
    )
    return parser.parse_args(argv)


def load_config(data_dir: str) -> Config:
    config_response = Config.load(os.path.join(data_dir, DEFAULT_CONFIG_FILE))

    if not config_response.success:
        helpers.display_response_failure(config_response)
        print("Using the default configuration.")
        return Config()

    return config_response.data["config"]


def load_user_prefs(data_dir: str, prefs_path: str) -> UserPrefs:
    prefs_response = UserPrefs.load(prefs_path, default=UserPrefs.in_directory(data_dir))

    if not prefs_response.success:
        logger.warning("Preferences could not be read: %s", prefs_response.detail)
        prefs = UserPrefs.in_directory(data_dir)
    else:
        prefs = prefs_response.data["prefs"]

    prefs.students_file_path = resolve_in_dir(data_dir, prefs.students_file_path)
    prefs.archive_file_path = resolve_in_dir(data_dir, prefs.archive_file_path)

    return prefs


def starting_filter_for(config: Config, prefs: UserPrefs) -> StudentPredicate:
    if config.starting_view == "weak":
        # prefs is shared with the model, so threshold changes apply to this filter too
        return lambda student: student.is_weak(prefs.weak_threshold)

    return show_all_students


def init_logic(data_dir: str) -> Logic:
    """
    Builds the `Logic` for a session from the files in `data_dir`.

    Notes:
        - A missing or corrupt roster file never stops the program; the session starts with empty rosters
          and the problem is logged. The bad file is only overwritten once a command changes the data.
    """
    config = load_config(data_dir)
    setup_logging(data_dir, config.log_level)

    logger.info("=============================[ Starting TeachStack ]===========================")

    prefs_path = resolve_in_dir(data_dir, config.user_prefs_file_path)
    prefs = load_user_prefs(data_dir, prefs_path)
    storage = Storage.from_prefs(prefs, prefs_path)
    starting_filter = starting_filter_for(config, prefs)

    model_response = storage.load_model(prefs, starting_filter=starting_filter)

    if model_response.success:
        model = cast(Model, model_response.data["model"])
    else:
        logger.warning(
            "Data files could not be loaded, starting with empty rosters: %s",
            model_response.detail,
        )
        model = Model(user_prefs=prefs, starting_filter=starting_filter)

    return Logic(model, storage)


def handle_result(logic: Logic, result: CommandResult) -> bool:
    """
    Acts on the flags of a `CommandResult`.

    Returns:
        True if the session should end.
    """
    width = logic.gui_settings.width

    if result.show_help:
        helpers.display_help(width)

    if result.show_summary:
        helpers.display_summary(result.attachment, width)

    if result.show_archived:
        helpers.display_archive(logic.model)

    return result.exit


def run_cli(argv: list[str] | None = None) -> None:
    """
    Top-level read-eval-render loop.

    Notes:
        - The finally block saves any unsaved changes before returning, including on Ctrl-C or end of input.
    """
    args = parse_args(argv)
    data_dir = resolve_data_dir(args.data_dir)
    logic = init_logic(data_dir)
    width = logic.gui_settings.width
    debug = logging.getLogger().isEnabledFor(logging.DEBUG)

    print(f"\n{formatters.format_banner_text('TEACHSTACK', width)}")
    print("Type 'help' to see every command.")

    try:
        helpers.display_class_list(logic.model)

        while True:
            command_text = helpers.prompt_command()

            if not command_text:
                continue

            is_clear = command_text.split()[0] == ClearCommand.COMMAND_WORD

            if is_clear and not helpers.confirm_action(
                "This removes every student from the class list and the archive. Continue?"
            ):
                print("\nReturning without changes.")
                continue

            response = logic.execute(command_text)

            if not response.success:
                helpers.display_response_failure(response, debug)
                continue

            print(f"\n{response.detail}")

            result = cast(CommandResult, response.data["result"])

            if handle_result(logic, result):
                break

            helpers.display_class_list(logic.model)

    except (KeyboardInterrupt, EOFError):
        print()

    finally:
        if logic.model.has_unsaved_changes:
            save_response = logic.save()
            if not save_response.success:
                helpers.display_response_failure(save_response, debug)
        logger.info("=============================[ Exiting TeachStack ]============================")

    print(f"\n{formatters.format_banner_text('Exiting Program', width)}\n")


if __name__ == "__main__":
    run_cli()
