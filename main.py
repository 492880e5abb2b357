import argparse
import os
import shutil
import sys

import yaml

from YamlParser import InputConfigParser
from MeshBlock import BlockCollection
from MeshErrors import MeshError
from UserLogger import UserLogger, Verbosity, PerformanceTimer


FIRST_SNAPSHOT_DIRECTORY = 't0000'


def prep(config, logger):
    """
    Load every grid block named in the config and write them to the first
    snapshot directory of the grid output.

    Returns:
        list: Paths of the written block files
    """
    blockFiles = config.get_block_files()
    if not blockFiles:
        logger.warning(f"No grid blocks given in '{config.filePath_}'")

    blocks = BlockCollection(logger)
    timer = PerformanceTimer(logger)
    timer.start_timer("load grid")
    for blockFile in blockFiles:
        blocks.add_block(blockFile)
    timer.end_timer()

    outputDirectory = os.path.join(config.get_grid_directory(), FIRST_SNAPSHOT_DIRECTORY)
    paths = blocks.write_blocks(outputDirectory)
    logger.debug(f"Wrote {len(paths)} blocks to '{outputDirectory}'")
    return paths


def clean(config, logger):
    gridDirectory = config.get_grid_directory()
    if os.path.isdir(gridDirectory):
        shutil.rmtree(gridDirectory)
        logger.debug(f"Removed '{gridDirectory}'")
    else:
        logger.debug(f"Nothing to clean, '{gridDirectory}' does not exist")


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Prepare the grid blocks of a simulation.")
    parser.add_argument('-i', '--input', type=str, required=True, help="Path to the input YAML file")
    parser.add_argument(
        '-v', '--verbosity', type=str, default=None,
        choices=[verbosity.value for verbosity in Verbosity],
        help="Override the verbosity given in the input file"
    )
    parser.add_argument('command', choices=['prep', 'clean'], help="What to do with the grid")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logger = UserLogger(args.verbosity or Verbosity.WARNING)
    try:
        config = InputConfigParser(args.input, logger)
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        logger.error(f"An error occurred while trying to parse '{args.input}': {e}")
        sys.exit(1)

    if args.verbosity is None:
        logger = UserLogger(config.get_verbosity())

    try:
        if args.command == 'prep':
            prep(config, logger)
        else:
            clean(config, logger)
    except (MeshError, OSError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
