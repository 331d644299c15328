"""Shared test fixtures."""

import pytest

from pykoord.factory import CRSFactory
from pykoord.registry import ParameterRegistry
from pykoord.resolvers.mapping import MappingResolver

# NAD83 / BC Albers
BC_ALBERS = (
    "+proj=aea +lat_1=50 +lat_2=58.5 +lat_0=45 +lon_0=-126 "
    "+x_0=1000000 +y_0=0 +ellps=GRS80 +units=m"
)

BC_ALBERS_ESRI = (
    'PROJCS["NAD_1983_BC_Environment_Albers",'
    'GEOGCS["GCS_North_American_1983",'
    'DATUM["D_North_American_1983",SPHEROID["GRS_1980",6378137.0,298.257222101]],'
    'PRIMEM["Greenwich",0.0],UNIT["Degree",0.0174532925199433]],'
    'PROJECTION["Albers"],'
    'PARAMETER["False_Easting",1000000.0],'
    'PARAMETER["False_Northing",0.0],'
    'PARAMETER["Central_Meridian",-126.0],'
    'PARAMETER["Standard_Parallel_1",50.0],'
    'PARAMETER["Standard_Parallel_2",58.5],'
    'PARAMETER["Latitude_Of_Origin",45.0],'
    'UNIT["Meter",1.0]]'
)

WGS84_ESRI = (
    'GEOGCS["GCS_WGS_1984",DATUM["D_WGS_1984",'
    'SPHEROID["WGS_1984",6378137.0,298.257223563]],'
    'PRIMEM["Greenwich",0.0],UNIT["Degree",0.0174532925199433]]'
)


@pytest.fixture
def resolver() -> MappingResolver:
    """A small in-memory catalogue."""
    return MappingResolver({
        "EPSG:3005": BC_ALBERS,
        "EPSG:4326": "+proj=longlat +datum=WGS84 +no_defs",
        "EPSG:9999": "   ",
    })


@pytest.fixture
def factory(resolver) -> CRSFactory:
    """A factory backed by the in-memory catalogue."""
    return CRSFactory(resolver)


@pytest.fixture
def registry() -> ParameterRegistry:
    return ParameterRegistry()


@pytest.fixture
def bc_albers() -> str:
    return BC_ALBERS


@pytest.fixture
def bc_albers_esri() -> str:
    return BC_ALBERS_ESRI


@pytest.fixture
def wgs84_esri() -> str:
    return WGS84_ESRI
