"""Tests for the Esri projection string parser."""

import pytest

from pykoord.errors import InvalidValue, MalformedSyntax, UnsupportedParameter
from pykoord.parsers.esri import WktNode, esri_to_proj4, parse_esri, read_wkt, tokenize


class TestTokenize:
    def test_kinds(self):
        kinds = [t[0] for t in tokenize('UNIT["Meter",1.0]')]
        assert kinds == ["ident", "open", "string", "comma", "number", "close"]

    def test_positions(self):
        tokens = tokenize('A[ "x" ]')
        assert [t[2] for t in tokens] == [0, 1, 3, 7]

    def test_escaped_quote(self):
        tokens = tokenize('"say ""hi"""')
        assert len(tokens) == 1

    def test_unterminated_string(self):
        with pytest.raises(MalformedSyntax, match="unterminated") as exc_info:
            tokenize('UNIT["Meter,1.0]')
        assert exc_info.value.position == 5

    def test_unexpected_character(self):
        with pytest.raises(MalformedSyntax, match="unexpected character"):
            tokenize("UNIT{1}")


class TestReadWkt:
    def test_tree(self, wgs84_esri):
        root = read_wkt(wgs84_esri)
        assert isinstance(root, WktNode)
        assert root.keyword == "GEOGCS"
        assert root.name == "GCS_WGS_1984"
        spheroid = root.child("DATUM").child("SPHEROID")
        assert spheroid.args == ["WGS_1984", 6378137.0, 298.257223563]
        assert root.child("missing") is None

    def test_children(self, bc_albers_esri):
        root = read_wkt(bc_albers_esri)
        names = [p.name for p in root.children("PARAMETER")]
        assert names[0] == "False_Easting"
        assert len(names) == 6

    def test_parentheses(self):
        root = read_wkt('UNIT("Meter",1.0)')
        assert root.args == ["Meter", 1.0]

    def test_bare_identifier(self):
        root = read_wkt('AXIS["Easting",EAST]')
        assert root.args == ["Easting", "EAST"]

    def test_empty_brackets(self):
        assert read_wkt("AUTHORITY[]").args == []

    def test_escaped_quote_in_name(self):
        assert read_wkt('X["a ""b"""]').name == 'a "b"'

    @pytest.mark.parametrize(
        "text, message",
        [
            ("", "empty input"),
            ("   ", "empty input"),
            ('UNIT["Meter",1.0', "missing ']' for UNIT"),
            ('UNIT["Meter",1.0]]', "unbalanced brackets"),
            ('UNIT["Meter",1.0)', "unbalanced brackets"),
            ('UNIT["Meter" 1.0]', "expected ','"),
            ('UNIT["Meter",]', "expected a value"),
            ('UNIT["Meter"] extra', "trailing text"),
            ('"Meter"', "expected keyword"),
            ("UNIT", "unexpected end of input"),
        ],
    )
    def test_malformed(self, text, message):
        with pytest.raises(MalformedSyntax, match=message):
            read_wkt(text)


class TestEsriToProj4:
    def test_bc_albers_tokens(self, registry, bc_albers_esri):
        name, tokens = esri_to_proj4(registry, bc_albers_esri)
        assert name == "NAD_1983_BC_Environment_Albers"
        assert tokens == [
            "+proj=aea", "+x_0=1000000", "+y_0=0", "+lon_0=-126",
            "+lat_1=50", "+lat_2=58.5", "+lat_0=45",
            "+datum=NAD83", "+units=m", "+no_defs",
        ]

    def test_geogcs(self, registry, wgs84_esri):
        name, tokens = esri_to_proj4(registry, wgs84_esri)
        assert name == "GCS_WGS_1984"
        assert tokens == ["+proj=longlat", "+datum=WGS84", "+no_defs"]

    def test_unknown_datum_known_spheroid(self, registry):
        text = (
            'GEOGCS["GCS_Local",DATUM["D_Local",SPHEROID["International_1924",6378388.0,297.0]],'
            'PRIMEM["Greenwich",0.0],UNIT["Degree",0.0174532925199433]]'
        )
        _, tokens = esri_to_proj4(registry, text)
        assert "+ellps=intl" in tokens

    def test_custom_spheroid(self, registry):
        text = 'GEOGCS["X",DATUM["D_X",SPHEROID["Mine",6378000.0,300.0]]]'
        _, tokens = esri_to_proj4(registry, text)
        assert tokens[1:3] == ["+a=6378000", "+rf=300"]

    def test_sphere_with_zero_rf(self, registry):
        text = 'GEOGCS["X",DATUM["D_X",SPHEROID["Ball",6371000.0,0.0]]]'
        _, tokens = esri_to_proj4(registry, text)
        assert "+R=6371000" in tokens

    def test_towgs84(self, registry):
        text = (
            'GEOGCS["X",DATUM["D_North_American_1983",SPHEROID["GRS_1980",6378137.0,298.257222101],'
            "TOWGS84[1,2,3]]]"
        )
        _, tokens = esri_to_proj4(registry, text)
        assert tokens[1:3] == ["+ellps=GRS80", "+towgs84=1,2,3"]

    def test_paris_meridian(self, registry):
        text = (
            'GEOGCS["NTF",DATUM["D_NTF",SPHEROID["Clarke_1880_IGN",6378249.2,293.46602]],'
            'PRIMEM["Paris",2.337229166667]]'
        )
        _, tokens = esri_to_proj4(registry, text)
        assert "+pm=paris" in tokens

    def test_us_feet(self, registry):
        text = (
            'PROJCS["X",GEOGCS["G",DATUM["D_North_American_1983",SPHEROID["GRS_1980",6378137.0,298.257222101]]],'
            'PROJECTION["Transverse_Mercator"],PARAMETER["Scale_Factor",0.9999],'
            'UNIT["Foot_US",0.3048006096012192]]'
        )
        _, tokens = esri_to_proj4(registry, text)
        assert "+proj=tmerc" in tokens
        assert "+k_0=0.9999" in tokens
        assert "+units=us-ft" in tokens

    def test_unnamed_unit_by_factor(self, registry):
        text = (
            'PROJCS["X",GEOGCS["G",DATUM["D_WGS_1984",SPHEROID["WGS_1984",6378137.0,298.257223563]]],'
            'PROJECTION["Mercator"],UNIT["Whatever",1000.0]]'
        )
        _, tokens = esri_to_proj4(registry, text)
        assert "+units=km" in tokens

    def test_mercator_standard_parallel(self, registry):
        text = (
            'PROJCS["X",GEOGCS["G",DATUM["D_WGS_1984",SPHEROID["WGS_1984",6378137.0,298.257223563]]],'
            'PROJECTION["Mercator"],PARAMETER["Standard_Parallel_1",41.0],UNIT["Meter",1.0]]'
        )
        _, tokens = esri_to_proj4(registry, text)
        assert "+lat_ts=41" in tokens


class TestParseEsri:
    def test_bc_albers(self, registry, bc_albers_esri):
        crs = parse_esri(registry, bc_albers_esri)
        assert crs.name == "NAD_1983_BC_Environment_Albers"
        assert crs.projection.code == "aea"
        assert crs.projection.lat_1 == 50.0
        assert crs.projection.lat_2 == 58.5
        assert crs.projection.x_0 == 1000000.0
        assert crs.ellipsoid.code == "GRS80"
        assert crs.units.code == "m"

    def test_geographic(self, registry, wgs84_esri):
        crs = parse_esri(registry, wgs84_esri)
        assert crs.is_geographic
        assert crs.datum.is_wgs84

    def test_unknown_projection(self, registry):
        text = 'PROJCS["X",GEOGCS["G",DATUM["D_WGS_1984",SPHEROID["WGS_1984",6378137.0,298.257223563]]],PROJECTION["Bonne"]]'
        with pytest.raises(UnsupportedParameter) as exc_info:
            parse_esri(registry, text)
        assert exc_info.value.key == "PROJECTION"
        assert exc_info.value.value == "Bonne"

    def test_unknown_parameter(self, registry):
        text = (
            'PROJCS["X",GEOGCS["G",DATUM["D_WGS_1984",SPHEROID["WGS_1984",6378137.0,298.257223563]]],'
            'PROJECTION["Mercator"],PARAMETER["Pseudo_Standard_Parallel_1",1.0]]'
        )
        with pytest.raises(UnsupportedParameter) as exc_info:
            parse_esri(registry, text)
        assert exc_info.value.key == "Pseudo_Standard_Parallel_1"

    def test_unknown_root(self, registry):
        with pytest.raises(UnsupportedParameter) as exc_info:
            parse_esri(registry, 'VERTCS["NAVD_1988"]')
        assert exc_info.value.key == "VERTCS"

    def test_non_numeric_parameter(self, registry):
        text = (
            'PROJCS["X",GEOGCS["G",DATUM["D_WGS_1984",SPHEROID["WGS_1984",6378137.0,298.257223563]]],'
            'PROJECTION["Mercator"],PARAMETER["False_Easting","abc"]]'
        )
        with pytest.raises(InvalidValue):
            parse_esri(registry, text)

    def test_missing_geogcs(self, registry):
        with pytest.raises(InvalidValue, match="missing GEOGCS"):
            parse_esri(registry, 'PROJCS["X",PROJECTION["Mercator"]]')

    def test_missing_projection(self, registry):
        text = 'PROJCS["X",GEOGCS["G",DATUM["D_WGS_1984",SPHEROID["WGS_1984",6378137.0,298.257223563]]]]'
        with pytest.raises(InvalidValue) as exc_info:
            parse_esri(registry, text)
        assert exc_info.value.key == "PROJECTION"

    def test_malformed_is_not_invalid_value(self, registry, bc_albers_esri):
        with pytest.raises(MalformedSyntax) as exc_info:
            parse_esri(registry, bc_albers_esri[:-1])
        assert not isinstance(exc_info.value, InvalidValue)

    def test_latitude_range_checked(self, registry):
        text = (
            'PROJCS["X",GEOGCS["G",DATUM["D_WGS_1984",SPHEROID["WGS_1984",6378137.0,298.257223563]]],'
            'PROJECTION["Albers"],PARAMETER["Standard_Parallel_1",95.0]]'
        )
        with pytest.raises(InvalidValue) as exc_info:
            parse_esri(registry, text)
        assert exc_info.value.key == "lat_1"


# NAD83 / New York Long Island (US feet), as shipped in Esri .prj files
NY_LONG_ISLAND_FEET = (
    'PROJCS["NAD_1983_StatePlane_New_York_Long_Island_FIPS_3104_Feet",'
    'GEOGCS["GCS_North_American_1983",'
    'DATUM["D_North_American_1983",SPHEROID["GRS_1980",6378137.0,298.257222101]],'
    'PRIMEM["Greenwich",0.0],UNIT["Degree",0.0174532925199433]],'
    'PROJECTION["Lambert_Conformal_Conic"],'
    'PARAMETER["False_Easting",984250.0],'
    'PARAMETER["False_Northing",0.0],'
    'PARAMETER["Central_Meridian",-74.0],'
    'PARAMETER["Standard_Parallel_1",40.66666666666666],'
    'PARAMETER["Standard_Parallel_2",41.03333333333333],'
    'PARAMETER["Latitude_Of_Origin",40.16666666666666],'
    'UNIT["Foot_US",0.3048006096012192]]'
)


class TestLinearUnits:
    def test_false_origin_in_meters(self, registry):
        crs = parse_esri(registry, NY_LONG_ISLAND_FEET)
        assert crs.projection.code == "lcc"
        assert crs.projection.x_0 == pytest.approx(300000.0, abs=0.01)
        assert crs.projection.y_0 == 0.0
        assert crs.units.code == "us-ft"

    def test_matches_pyproj(self, registry):
        from pyproj import CRS

        expected = CRS.from_wkt(NY_LONG_ISLAND_FEET).to_dict()
        crs = parse_esri(registry, NY_LONG_ISLAND_FEET)
        assert crs.projection.x_0 == pytest.approx(expected["x_0"], abs=0.01)

    def test_meter_unit_unchanged(self, registry, bc_albers_esri):
        assert parse_esri(registry, bc_albers_esri).projection.x_0 == 1000000.0


class TestSpheroidFlattening:
    @pytest.mark.parametrize("rf", ["1.0", "0.5", "-3.0"])
    def test_degenerate_rf(self, registry, rf):
        text = f'GEOGCS["X",DATUM["D_X",SPHEROID["Mine",6378137.0,{rf}]]]'
        with pytest.raises(InvalidValue, match="inverse flattening") as exc_info:
            parse_esri(registry, text)
        assert exc_info.value.key == "SPHEROID"

    def test_zero_rf_is_sphere(self, registry):
        text = 'GEOGCS["X",DATUM["D_X",SPHEROID["Ball",6371000.0,0.0]]]'
        assert parse_esri(registry, text).ellipsoid.is_sphere
