"""Tests for CLI."""

import pytest

from pykoord.cli import main


@pytest.fixture
def init_dir(tmp_path):
    """An init-file directory with a private authority."""
    directory = tmp_path / "init"
    directory.mkdir()
    (directory / "site").write_text(
        "# site grid\n"
        "<1> +proj=tmerc +lon_0=10 +k=0.9999 +x_0=50000 +ellps=bessel\n"
        "    +towgs84=1,2,3 +units=m <>\n"
        "<2> +proj=bogus <>\n"
        "<3> <>\n"
    )
    return str(directory)


@pytest.fixture
def prj_file(tmp_path, bc_albers_esri):
    path = tmp_path / "bc_albers.prj"
    path.write_text(bc_albers_esri)
    return str(path)


class TestCliResolve:
    def test_resolve(self, capsys):
        ret = main(["--no-database", "resolve", "EPSG:4326"])
        assert ret == 0
        assert capsys.readouterr().out.strip() == "+proj=longlat +datum=WGS84 +no_defs"

    def test_resolve_unknown(self, capsys):
        ret = main(["--no-database", "resolve", "EPSG:123456789"])
        assert ret == 1
        assert "Unknown authority code" in capsys.readouterr().err

    def test_init_path(self, init_dir, capsys):
        ret = main(["--no-database", "--init-path", init_dir, "resolve", "SITE:1"])
        assert ret == 0
        assert "+towgs84=1,2,3" in capsys.readouterr().out


class TestCliInfo:
    def test_info(self, capsys):
        ret = main(["--no-database", "info", "EPSG:3005"])
        assert ret == 0
        output = capsys.readouterr().out
        assert "Name: EPSG:3005" in output
        assert "Projection: aea" in output
        assert "Ellipsoid: GRS80" in output
        assert "Units: m" in output
        assert "PROJ.4: +proj=aea" in output

    def test_info_utm_zone(self, capsys):
        main(["--no-database", "info", "EPSG:32733"])
        assert "Zone: 33S" in capsys.readouterr().out

    def test_info_custom_datum(self, init_dir, capsys):
        ret = main(["--no-database", "--init-path", init_dir, "info", "SITE:1"])
        assert ret == 0
        output = capsys.readouterr().out
        assert "Datum: (custom)" in output
        assert "TOWGS84: 1, 2, 3" in output

    def test_info_unknown(self, capsys):
        ret = main(["--no-database", "info", "NOPE:1"])
        assert ret == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_info_unsupported(self, init_dir, capsys):
        ret = main(["--no-database", "--init-path", init_dir, "info", "SITE:2"])
        assert ret == 1
        assert "bogus" in capsys.readouterr().err


class TestCliParse:
    def test_parse(self, capsys):
        ret = main(["parse", "+proj=utm", "+zone=32", "+datum=WGS84", "--name", "mine"])
        assert ret == 0
        output = capsys.readouterr().out
        assert "Name: mine" in output
        assert "Zone: 32N" in output

    def test_parse_single_string(self, bc_albers, capsys):
        ret = main(["parse", bc_albers])
        assert ret == 0
        assert "Name: (anonymous)" in capsys.readouterr().out

    def test_parse_invalid(self, capsys):
        ret = main(["parse", "+proj=merc", "+x_0=abc"])
        assert ret == 1
        assert "x_0" in capsys.readouterr().err

    def test_parse_blank(self, capsys):
        ret = main(["parse", " "])
        assert ret == 1
        assert "No parameters" in capsys.readouterr().err


class TestCliEsri:
    def test_esri(self, prj_file, capsys):
        ret = main(["esri", prj_file])
        assert ret == 0
        output = capsys.readouterr().out
        assert "Name: NAD_1983_BC_Environment_Albers" in output
        assert "Datum: NAD83" in output

    def test_esri_missing_file(self, capsys):
        ret = main(["esri", "/nonexistent/file.prj"])
        assert ret == 1
        assert "File not found" in capsys.readouterr().err

    def test_esri_malformed(self, tmp_path, capsys):
        path = tmp_path / "broken.prj"
        path.write_text('GEOGCS["x",DATUM["y"]')
        ret = main(["esri", str(path)])
        assert ret == 1
        assert "Malformed syntax" in capsys.readouterr().err


class TestCliTransform:
    def test_transform(self, capsys):
        ret = main(["--no-database", "transform", "EPSG:4326", "EPSG:32632", "9", "0"])
        assert ret == 0
        x, y, z = (float(v) for v in capsys.readouterr().out.split())
        assert x == pytest.approx(500000.0, abs=1e-3)
        assert y == pytest.approx(0.0, abs=1e-3)
        assert z == pytest.approx(0.0)

    def test_transform_unknown(self, capsys):
        ret = main(["--no-database", "transform", "EPSG:4326", "NOPE:1", "9", "0"])
        assert ret == 1

    def test_transform_empty_definition(self, init_dir, capsys):
        ret = main([
            "--no-database", "--init-path", init_dir,
            "transform", "EPSG:4326", "SITE:3", "9", "0",
        ])
        assert ret == 1
        assert "SITE:3 has an empty definition" in capsys.readouterr().err

    def test_transform_pyproj_error(self, monkeypatch, capsys):
        from pyproj.exceptions import CRSError

        import pykoord.utils.crs

        def failing(*args):
            raise CRSError("Invalid projection")

        monkeypatch.setattr(pykoord.utils.crs, "reproject_arrays", failing)
        ret = main(["--no-database", "transform", "EPSG:4326", "EPSG:32632", "9", "0"])
        assert ret == 1
        assert capsys.readouterr().err.startswith("Error: Invalid projection")


class TestCliMain:
    def test_no_command(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "pykoord" in capsys.readouterr().out

    def test_verbose(self, capsys):
        assert main(["-v", "--no-database", "resolve", "EPSG:4326"]) == 0
