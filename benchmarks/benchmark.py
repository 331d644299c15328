"""Performance benchmark: the three CRSFactory entry points."""

import json
import sys
import time

N = 2000

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
    'PARAMETER["False_Easting",1000000.0],PARAMETER["False_Northing",0.0],'
    'PARAMETER["Central_Meridian",-126.0],PARAMETER["Standard_Parallel_1",50.0],'
    'PARAMETER["Standard_Parallel_2",58.5],PARAMETER["Latitude_Of_Origin",45.0],'
    'UNIT["Meter",1.0]]'
)


def bench(name, func, n=N):
    """Run func n times and record the time per call."""
    t0 = time.perf_counter()
    for _ in range(n):
        result = func()
    elapsed = time.perf_counter() - t0
    print(f"  {name}: {elapsed / n * 1e6:.1f}us/call ({n} calls)")
    return elapsed / n, result


def run_pykoord():
    print("\n" + "=" * 60)
    print("PYKOORD benchmarks")
    print("=" * 60)

    sys.path.insert(0, "src")
    from pykoord import CRSFactory
    from pykoord.resolvers import ChainResolver, InitFileResolver, PyprojResolver

    factory = CRSFactory(ChainResolver(InitFileResolver()))
    results = {}

    # 1. PROJ.4 string
    t, _ = bench("create_from_parameters",
        lambda: factory.create_from_parameters(None, BC_ALBERS))
    results["create_from_parameters"] = t

    # 2. Name through the bundled init files (cached after the first call)
    t, _ = bench("create_from_name_init",
        lambda: factory.create_from_name("EPSG:3005"))
    results["create_from_name_init"] = t

    # 3. Esri .prj text
    t, _ = bench("create_from_esri_string",
        lambda: factory.create_from_esri_string(BC_ALBERS_ESRI))
    results["create_from_esri_string"] = t

    # 4. Name through the PROJ database
    db_factory = CRSFactory(PyprojResolver())
    t, _ = bench("create_from_name_database",
        lambda: db_factory.create_from_name("EPSG:32633"), n=N // 10)
    results["create_from_name_database"] = t

    return results


if __name__ == "__main__":
    results = run_pykoord()
    with open("/tmp/bench_pykoord.json", "w") as f:
        json.dump(results, f, indent=2)
    print("\nResults saved to /tmp/bench_pykoord.json")
