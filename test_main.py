import unittest
import tempfile
import os
import io
import shutil
from contextlib import redirect_stdout, redirect_stderr
import yaml
from main import main
from Su2Format import read_su2
from MeshTestData import SQUARE_SU2, TRIANGLE_SU2, write_grid_file


class TestMain(unittest.TestCase):
	def setUp(self):
		self.tmpdir = tempfile.mkdtemp()
		write_grid_file(self.tmpdir, 'square.su2', SQUARE_SU2)
		write_grid_file(self.tmpdir, 'triangle.su2', TRIANGLE_SU2)
		self.gridDirectory = os.path.join(self.tmpdir, 'grid')

	def tearDown(self):
		shutil.rmtree(self.tmpdir)

	def _write_config(self, blocks, verbosity='error'):
		cfg = {
			'grid': {'blocks': blocks},
			'output': {'verbosity': verbosity, 'grid_directory': 'grid'}
		}
		path = os.path.join(self.tmpdir, 'sim.yaml')
		with open(path, 'w') as f:
			yaml.safe_dump(cfg, f)
		return path

	def _run(self, argv):
		out = io.StringIO()
		err = io.StringIO()
		with redirect_stdout(out), redirect_stderr(err):
			main(argv)
		return out.getvalue(), err.getvalue()

	def test_prep_writes_blocks(self):
		config = self._write_config(['square.su2', 'triangle.su2'])
		self._run(['-i', config, 'prep'])
		snapshot = os.path.join(self.gridDirectory, 't0000')
		self.assertEqual(sorted(os.listdir(snapshot)), ['blk0000.grid', 'blk0001.grid'])
		block = read_su2(os.path.join(snapshot, 'blk0000.grid'), 0)
		self.assertEqual(block.get_num_cells(), 9)
		self.assertEqual(block.get_boundary('slip_wall_bottom'), [0, 4, 7])

	def test_prep_debug_output(self):
		config = self._write_config(['square.su2'])
		out, err = self._run(['-i', config, '-v', 'debug', 'prep'])
		self.assertIn("For event load grid", out)
		self.assertIn("blk0000.grid", out)
		self.assertEqual(err, "")

	def test_prep_quiet_at_error_verbosity(self):
		config = self._write_config(['square.su2'])
		out, err = self._run(['-i', config, 'prep'])
		self.assertEqual(out, "")
		self.assertEqual(err, "")

	def test_clean_removes_grid_directory(self):
		config = self._write_config(['square.su2'])
		self._run(['-i', config, 'prep'])
		self.assertTrue(os.path.isdir(self.gridDirectory))
		self._run(['-i', config, 'clean'])
		self.assertFalse(os.path.exists(self.gridDirectory))
		# cleaning twice is fine
		self._run(['-i', config, 'clean'])

	def test_bad_grid_file_exits(self):
		write_grid_file(self.tmpdir, 'broken.su2', "NDIME=2\nNPOIN=2\n0.0 0.0\n")
		config = self._write_config(['broken.su2'])
		with self.assertRaises(SystemExit) as context:
			self._run(['-i', config, 'prep'])
		self.assertEqual(context.exception.code, 1)

	def test_unknown_grid_type_exits(self):
		write_grid_file(self.tmpdir, 'square.msh', SQUARE_SU2)
		config = self._write_config(['square.msh'])
		with self.assertRaises(SystemExit) as context:
			self._run(['-i', config, 'prep'])
		self.assertEqual(context.exception.code, 1)

	def test_coincident_points_exits(self):
		write_grid_file(self.tmpdir, 'collapsed.su2', TRIANGLE_SU2.replace("1.0 0.0\n", "0.0 0.0\n"))
		config = self._write_config(['collapsed.su2'])
		with self.assertRaises(SystemExit) as context:
			self._run(['-i', config, 'prep'])
		self.assertEqual(context.exception.code, 1)

	def test_invalid_utf8_exits(self):
		path = os.path.join(self.tmpdir, 'latin1.su2')
		with open(path, 'wb') as f:
			f.write(b"% caf\xe9\n" + TRIANGLE_SU2.encode('utf-8'))
		config = self._write_config(['latin1.su2'])
		with self.assertRaises(SystemExit) as context:
			self._run(['-i', config, 'prep'])
		self.assertEqual(context.exception.code, 1)

	def test_missing_config_exits(self):
		with self.assertRaises(SystemExit) as context:
			self._run(['-i', os.path.join(self.tmpdir, 'missing.yaml'), 'prep'])
		self.assertEqual(context.exception.code, 1)


if __name__ == '__main__':
	unittest.main()
