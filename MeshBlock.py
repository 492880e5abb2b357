import os
from enum import Enum

from Su2Format import read_su2, write_su2
from MeshErrors import UnknownFileType
from UserLogger import UserLogger


class GridFileType(Enum):
    SU2 = "su2"
    NATIVE = "grid"

    @staticmethod
    def from_file_name(file_name):
        """
        Work out the grid format from a file's extension.

        Raises:
            UnknownFileType: If the file has no extension, or one we do not read
        """
        extension = os.path.splitext(os.path.basename(str(file_name)))[1]
        if not extension:
            raise UnknownFileType(file_name)
        extension = extension[1:]
        for fileType in GridFileType:
            if extension == fileType.value:
                return fileType
        raise UnknownFileType(file_name, extension)

    def get_extension(self):
        return self.value


def read_block(file_path, block_id):
    """Read a grid file of any supported type into a Block"""
    # the native format shares its layout with su2
    GridFileType.from_file_name(file_path)
    return read_su2(file_path, block_id)


def write_block(block_provider, file_path):
    GridFileType.from_file_name(file_path)
    write_su2(file_path, block_provider)


def block_file_name(block_id):
    """Name of the file a block is written to, e.g. blk0003.grid"""
    return f"blk{block_id:04d}.{GridFileType.NATIVE.get_extension()}"


class BlockCollection:
    """
    The blocks making up a simulation's grid.
    A block's id is its position in the collection, in the order it was added.
    """

    def __init__(self, logger=None):
        self.blocks_ = []
        self.logger_ = logger if logger is not None else UserLogger()

    def add_block(self, file_path):
        """
        Read a grid file and add it to the collection.

        Args:
            file_path (str): Path to an .su2 or .grid file

        Returns:
            int: Id of the new block
        """
        blockId = len(self.blocks_)
        block = read_block(file_path, blockId)
        self.blocks_.append(block)
        self.logger_.debug(
            f"Loaded block {blockId} from '{file_path}': {block.get_num_vertices()} vertices, "
            f"{block.get_num_interfaces()} interfaces, {block.get_num_cells()} cells"
        )
        return blockId

    def get_block(self, block_id):
        if not 0 <= block_id < len(self.blocks_):
            raise IndexError(f"No block with id {block_id}, collection has {len(self.blocks_)} blocks")
        return self.blocks_[block_id]

    def get_blocks(self):
        return self.blocks_

    def get_num_blocks(self):
        return len(self.blocks_)

    def write_blocks(self, directory):
        """
        Write every block to directory/blk<id>.grid, creating the directory if needed.

        Returns:
            list: Paths of the written files, in block id order
        """
        os.makedirs(directory, exist_ok=True)
        paths = []
        for block in self.blocks_:
            path = os.path.join(directory, block_file_name(block.get_id()))
            write_block(block, path)
            self.logger_.debug(f"Wrote block {block.get_id()} to '{path}'")
            paths.append(path)
        return paths

    def __len__(self):
        return len(self.blocks_)

    def __iter__(self):
        return iter(self.blocks_)

    def __repr__(self):
        return f"BlockCollection(# blocks={len(self.blocks_)})"
