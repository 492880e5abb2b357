import unittest
import tempfile
import os
import shutil
import math
import numpy as np
from GridCell import CellShape
from GridInterface import InterfaceShape
from Su2Format import read_su2
from FluidBlock import FluidBlock, Ids
from BlockIO import FluidBlockIO, read_fluid_block
from MeshTestData import SQUARE_SU2, TRIANGLE_SU2, write_grid_file


class TestIds(unittest.TestCase):
	def test_ragged_lists(self):
		ids = Ids([[0, 1, 2], [3, 4], [], [5, 6, 7, 8]])
		self.assertEqual(len(ids), 4)
		np.testing.assert_array_equal(ids[0], [0, 1, 2])
		np.testing.assert_array_equal(ids[1], [3, 4])
		self.assertEqual(len(ids[2]), 0)
		np.testing.assert_array_equal(ids[3], [5, 6, 7, 8])
		np.testing.assert_array_equal(ids.get_offsets(), [0, 3, 5, 5, 9])
		self.assertEqual(ids.to_lists(), [[0, 1, 2], [3, 4], [], [5, 6, 7, 8]])

	def test_index_out_of_range(self):
		ids = Ids([[0, 1]])
		with self.assertRaises(IndexError):
			ids[1]

	def test_empty(self):
		ids = Ids([])
		self.assertEqual(len(ids), 0)
		self.assertEqual(len(ids.get_flat()), 0)


class TestFluidBlock(unittest.TestCase):
	def setUp(self):
		self.tmpdir = tempfile.mkdtemp()
		self.squarePath = write_grid_file(self.tmpdir, 'square.su2', SQUARE_SU2)

	def tearDown(self):
		shutil.rmtree(self.tmpdir)

	def test_square_arrays(self):
		block = read_su2(self.squarePath, 0)
		fluidBlock = FluidBlock(block)
		self.assertEqual(fluidBlock.get_num_vertices(), 16)
		self.assertEqual(fluidBlock.get_num_interfaces(), 24)
		self.assertEqual(fluidBlock.get_num_cells(), 9)
		self.assertEqual(fluidBlock.get_dimensions(), 2)
		self.assertEqual(fluidBlock.get_vertex_positions().shape, (16, 3))
		np.testing.assert_allclose(fluidBlock.get_vertex_positions()[5], [1.0, 1.0, 0.0])
		np.testing.assert_allclose(fluidBlock.get_interface_areas(), np.ones(24))
		np.testing.assert_allclose(fluidBlock.get_interface_normals()[0], [0.0, -1.0, 0.0], atol=1e-12)
		np.testing.assert_allclose(fluidBlock.get_interface_tangent1()[0], [1.0, 0.0, 0.0], atol=1e-12)
		np.testing.assert_allclose(fluidBlock.get_interface_tangent2()[0], [0.0, 0.0, 1.0])
		np.testing.assert_allclose(fluidBlock.get_interface_centroids()[1], [1.0, 0.5, 0.0])
		np.testing.assert_allclose(fluidBlock.get_cell_volumes(), np.ones(9))
		np.testing.assert_allclose(fluidBlock.get_cell_centroids()[8], [2.5, 2.5, 0.0])
		self.assertEqual(fluidBlock.get_interface_shapes(), [InterfaceShape.LINE] * 24)
		self.assertEqual(fluidBlock.get_cell_shapes(), [CellShape.QUADRILATERAL] * 9)

	def test_square_connectivity(self):
		fluidBlock = FluidBlock(read_su2(self.squarePath, 0))
		np.testing.assert_array_equal(fluidBlock.get_interface_vertices()[1], [1, 5])
		np.testing.assert_array_equal(fluidBlock.get_cell_vertices()[0], [0, 1, 5, 4])
		np.testing.assert_array_equal(fluidBlock.get_cell_interfaces()[1], [4, 5, 6, 1])
		np.testing.assert_array_equal(fluidBlock.get_cell_interface_directions()[0], [-1, -1, -1, -1])
		np.testing.assert_array_equal(fluidBlock.get_cell_interface_directions()[1], [-1, -1, -1, 1])
		np.testing.assert_array_equal(fluidBlock.get_boundaries()['slip_wall_bottom'], [0, 4, 7])

	def test_requires_block(self):
		with self.assertRaises(TypeError):
			FluidBlock("square.su2")

	def test_read_fluid_block(self):
		path = write_grid_file(self.tmpdir, 'triangle.su2', TRIANGLE_SU2)
		fluidBlock = read_fluid_block(path, 2)
		self.assertEqual(fluidBlock.get_id(), 2)
		np.testing.assert_allclose(fluidBlock.get_cell_volumes(), [0.5])
		np.testing.assert_allclose(fluidBlock.get_cell_centroids()[0], [0.5, 1.0 / 3.0, 0.0])
		np.testing.assert_allclose(fluidBlock.get_interface_areas()[1], math.sqrt(1.25))


class TestFluidBlockIO(unittest.TestCase):
	def setUp(self):
		self.tmpdir = tempfile.mkdtemp()
		self.squarePath = write_grid_file(self.tmpdir, 'square.su2', SQUARE_SU2)

	def tearDown(self):
		shutil.rmtree(self.tmpdir)

	def test_write_and_read_back(self):
		block = read_su2(self.squarePath, 3)
		fluidBlockIO = FluidBlockIO(FluidBlock(block))
		outputDirectory = os.path.join(self.tmpdir, 'grid', 't0000')
		path = fluidBlockIO.write_fluid_block(outputDirectory)
		self.assertEqual(path, os.path.join(outputDirectory, 'blk0003.grid'))
		reread = read_su2(path, 3)
		self.assertEqual(reread.get_vertices(), block.get_vertices())
		self.assertEqual(reread.get_interfaces(), block.get_interfaces())
		self.assertEqual(reread.get_cells(), block.get_cells())
		self.assertEqual(reread.get_boundaries(), block.get_boundaries())

	def test_vertex_positions_refreshed_on_write(self):
		fluidBlock = FluidBlock(read_su2(self.squarePath, 0))
		fluidBlockIO = FluidBlockIO(fluidBlock)
		fluidBlock.get_vertex_positions()[:, 0] *= 2.0
		path = fluidBlockIO.write_fluid_block(self.tmpdir)
		reread = read_fluid_block(path, 0)
		np.testing.assert_allclose(reread.get_vertex_positions()[15], [6.0, 3.0, 0.0])
		np.testing.assert_allclose(reread.get_cell_volumes(), 2.0 * np.ones(9))

	def test_topology_copied(self):
		fluidBlockIO = FluidBlockIO(FluidBlock(read_su2(self.squarePath, 0)))
		self.assertEqual(len(fluidBlockIO.get_interfaces()), 24)
		self.assertEqual(fluidBlockIO.get_cells()[1].get_interface_ids(), [4, 5, 6, 1])
		self.assertEqual(fluidBlockIO.get_cells()[1].get_shape(), CellShape.QUADRILATERAL)
		self.assertEqual(fluidBlockIO.get_boundaries()['inflow'], [3, 12, 19])
		self.assertEqual(fluidBlockIO.get_dimensions(), 2)

	def test_requires_fluid_block(self):
		with self.assertRaises(TypeError):
			FluidBlockIO(read_su2(self.squarePath, 0))


if __name__ == '__main__':
	unittest.main()
