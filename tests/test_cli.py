"""
Tests for the anyglb CLI
"""
from pathlib import Path

import pytest
from click.testing import CliRunner

from anyglb import __version__
from anyglb.cli import cli


CUBE_OBJ = """# Minimal cube
v -0.5 -0.5 -0.5
v -0.5 -0.5  0.5
v -0.5  0.5 -0.5
v -0.5  0.5  0.5
v  0.5 -0.5 -0.5
v  0.5 -0.5  0.5
v  0.5  0.5 -0.5
v  0.5  0.5  0.5
f 1 2 4 3
f 5 7 8 6
f 1 5 6 2
f 3 4 8 7
f 1 3 7 5
f 2 6 8 4
"""


@pytest.fixture
def cube_path(tmp_path):
    path = tmp_path / "cube.obj"
    path.write_text(CUBE_OBJ)
    return path


class TestCLI:
    """Test CLI flags, exit codes and notice output"""

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, flag):
        """Test that help works and lists the supported formats"""
        runner = CliRunner()
        result = runner.invoke(cli, [flag])
        assert result.exit_code == 0
        assert 'Convert a 3D model file to GLB format' in result.output
        assert 'INPUT_PATH' in result.output
        assert 'OUTPUT_PATH' in result.output
        assert 'Supported input formats: dae, fbx, glb, gltf, obj, off, ply, stl' in result.output

    @pytest.mark.parametrize("flag", ["-v", "--version"])
    def test_version(self, flag):
        runner = CliRunner()
        result = runner.invoke(cli, [flag])
        assert result.exit_code == 0
        assert f'anyglb version {__version__}' in result.output

    def test_missing_input_path(self):
        runner = CliRunner()
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert 'Missing input_path argument' in result.output
        assert 'Usage:' in result.output

    def test_missing_output_path(self):
        runner = CliRunner()
        result = runner.invoke(cli, ['cube.obj'])
        assert result.exit_code == 1
        assert 'Missing output_path argument' in result.output

    def test_convert_works(self, cube_path, tmp_path):
        """Test converting a real OBJ file"""
        output_path = tmp_path / "cube.glb"
        runner = CliRunner()
        result = runner.invoke(cli, [str(cube_path), str(output_path), '-n2'])

        if result.exit_code != 0:
            print(f"Output: {result.output}")
            if result.exception:
                print(f"Exception: {result.exception}")
        assert result.exit_code == 0
        assert 'Conversion succeeded' in result.output
        assert '2_7345: Converted model in' in result.output
        assert f'2_6152: Wrote {output_path.stat().st_size} bytes' in result.output
        assert output_path.read_bytes()[:4] == b'glTF'

    def test_default_level_reports_info(self, cube_path, tmp_path):
        """Without -n, info notices are shown but debug ones are not"""
        output_path = tmp_path / "cube.glb"
        runner = CliRunner()
        result = runner.invoke(cli, [str(cube_path), str(output_path)])
        assert result.exit_code == 0
        assert f'2_6152: Wrote {output_path.stat().st_size} bytes' in result.output
        assert '1_4481' not in result.output

    def test_quiet_level(self, cube_path, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, [str(cube_path), str(tmp_path / "cube.glb"), '-n3'])
        assert result.exit_code == 0
        assert '2_' not in result.output
        assert '1_' not in result.output

    def test_debug_level(self, cube_path, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, [str(cube_path), str(tmp_path / "cube.glb"), '-n1'])
        assert result.exit_code == 0
        assert f'1_4481: Reading input file {cube_path}' in result.output
        assert '1_5118: Converting cube.obj' in result.output

    def test_notice_level_from_environment(self, cube_path, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli, [str(cube_path), str(tmp_path / "cube.glb")],
            env={'ANYGLB_NOTICE_LEVEL': '1'},
        )
        assert result.exit_code == 0
        assert '1_4481' in result.output

    @pytest.mark.parametrize("flag", ['-n5', '-n0', '-nx'])
    def test_invalid_notice_level(self, cube_path, tmp_path, flag):
        """Test that an out-of-range level exits 1 without converting"""
        output_path = tmp_path / "cube.glb"
        runner = CliRunner()
        result = runner.invoke(cli, [str(cube_path), str(output_path), flag])
        assert result.exit_code == 1
        assert f"Invalid notice level '{flag[2:]}', should be 1, 2, 3, or 4" in result.output
        assert not output_path.exists()

    def test_invalid_notice_level_from_environment(self, cube_path, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli, [str(cube_path), str(tmp_path / "cube.glb")],
            env={'ANYGLB_NOTICE_LEVEL': '9'},
        )
        assert result.exit_code == 1

    def test_missing_input_file(self, tmp_path):
        """Test that a read failure exits 1 and prints the error notice"""
        runner = CliRunner()
        output_path = tmp_path / "out.glb"
        result = runner.invoke(cli, [str(tmp_path / "missing.obj"), str(output_path)])
        assert result.exit_code == 1
        assert 'Conversion failed' in result.output
        assert '4_8172: Error reading file at' in result.output
        assert not Path(output_path).exists()

    def test_invalid_output_extension(self, cube_path, tmp_path):
        """Test that argument errors exit 1 with the validation message"""
        runner = CliRunner()
        result = runner.invoke(cli, [str(cube_path), str(tmp_path / "cube.stl")])
        assert result.exit_code == 1
        assert "extension '.stl' is not supported, should be '.glb'" in result.output
