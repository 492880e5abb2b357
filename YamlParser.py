import os

import yaml

from UserLogger import UserLogger, Verbosity


GRID_SECTION = 'grid'
OUTPUT_SECTION = 'output'


class InputConfigParser:
    """
    Reads the YAML file describing a simulation's grid and output settings.

        grid:
          blocks: [inlet.su2, body.su2]
        output:
          verbosity: debug
          grid_directory: grid

    File paths are taken relative to the directory holding the YAML file.
    """

    def __init__(self, file_path, logger=None):
        self.filePath_ = file_path
        self.logger_ = logger if logger is not None else UserLogger()
        self.config_ = None
        self.blockFiles_ = []
        self.verbosity_ = Verbosity.WARNING
        self.gridDirectory_ = 'grid'
        self.load_config()
        self.check_sections()
        self.parse_grid_settings()
        self.parse_output_settings()

    def load_config(self):
        try:
            with open(self.filePath_, 'r') as file:
                self.config_ = yaml.safe_load(file)
                self.logger_.debug(f"Successfully loaded: {self.filePath_}")
        except FileNotFoundError:
            self.logger_.error(f"The file '{self.filePath_}' was not found.")
            raise
        except yaml.YAMLError as exc:
            self.logger_.error(f"Parsing YAML: {exc}")
            raise
        if self.config_ is None:
            raise ValueError(f"Configuration file '{self.filePath_}' is empty")
        if not isinstance(self.config_, dict):
            raise ValueError(f"Configuration file '{self.filePath_}' must hold a mapping of sections")

    def check_sections(self):
        unknown = [key for key in self.config_ if key not in (GRID_SECTION, OUTPUT_SECTION)]
        if unknown:
            raise ValueError(
                f"Unknown sections {unknown} in '{self.filePath_}', "
                f"expected '{GRID_SECTION}' and/or '{OUTPUT_SECTION}'"
            )

    def _section(self, name, allowed_keys):
        section = self.config_.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Section '{name}' must be a mapping")
        unknown = [key for key in section if key not in allowed_keys]
        if unknown:
            raise ValueError(f"Unknown keys {unknown} in section '{name}'")
        return section

    def _resolve_path(self, path):
        baseDirectory = os.path.dirname(os.path.abspath(self.filePath_))
        return os.path.normpath(os.path.join(baseDirectory, str(path)))

    def parse_grid_settings(self):
        grid_settings = self._section(GRID_SECTION, ('blocks',))
        blocks = grid_settings.get('blocks') or []
        if not isinstance(blocks, list):
            raise ValueError(f"'{GRID_SECTION}.blocks' must be a list of grid files")
        self.blockFiles_ = [self._resolve_path(block) for block in blocks]

    def parse_output_settings(self):
        output_settings = self._section(OUTPUT_SECTION, ('verbosity', 'grid_directory'))
        self.verbosity_ = Verbosity.from_string(output_settings.get('verbosity', self.verbosity_))
        self.gridDirectory_ = self._resolve_path(output_settings.get('grid_directory', self.gridDirectory_))

    def get_block_files(self):
        return self.blockFiles_

    def get_verbosity(self):
        return self.verbosity_

    def get_grid_directory(self):
        return self.gridDirectory_

    def __repr__(self):
        return (
            f"InputConfigParser(\n"
            f"  filePath_='{self.filePath_}',\n"
            f"  blockFiles_={self.blockFiles_},\n"
            f"  verbosity_='{self.verbosity_.value}',\n"
            f"  gridDirectory_='{self.gridDirectory_}',\n"
            f")"
        )
