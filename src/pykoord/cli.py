"""pykoord CLI — command-line interface for CRS lookup and construction."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pykoord._version import __version__
from pykoord.core.crs import CoordinateReferenceSystem
from pykoord.errors import KoordError
from pykoord.factory import CRSFactory


def _make_factory(args: argparse.Namespace) -> CRSFactory:
    """Factory with the resolver configured from global options."""
    from pykoord.resolvers import ChainResolver, InitFileResolver, PyprojResolver

    resolvers = [InitFileResolver(search_path=args.init_path)]
    if not args.no_database:
        resolvers.append(PyprojResolver())
    return CRSFactory(ChainResolver(*resolvers))


def _print_crs(crs: CoordinateReferenceSystem) -> None:
    proj = crs.projection
    ell = crs.ellipsoid
    print(f"Name: {crs.name or '(anonymous)'}")
    print(f"Projection: {proj.code} ({proj.method.name})")
    if proj.code == "utm":
        print(f"Zone: {proj.zone}{'S' if proj.south else 'N'}")
    print(f"Datum: {crs.datum.code or '(custom)'}")
    print(f"Ellipsoid: {ell.code or '(custom)'} (a={ell.a:.3f}, rf={ell.rf:.9f})")
    if crs.datum.towgs84 is not None:
        print(f"TOWGS84: {', '.join(f'{v:g}' for v in crs.datum.towgs84)}")
    if not crs.is_geographic:
        unit = crs.units.code if crs.units is not None else f"{crs.to_meter:g} m"
        print(f"Units: {unit}")
    if crs.prime_meridian.longitude != 0.0:
        print(f"Prime meridian: {crs.prime_meridian.code or crs.prime_meridian.longitude}")
    print(f"PROJ.4: {crs.to_proj4()}")


def cmd_resolve(args: argparse.Namespace) -> int:
    """Print the raw parameter string for a name."""
    factory = _make_factory(args)
    params = factory.resolver.lookup(args.name)
    if params is None:
        print(f"Error: Unknown authority code: {args.name}", file=sys.stderr)
        return 1
    print(params)
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Describe the CRS for a name."""
    factory = _make_factory(args)
    try:
        crs = factory.create_from_name(args.name)
    except KoordError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if crs is None:
        print(f"Error: {args.name} has an empty definition", file=sys.stderr)
        return 1
    _print_crs(crs)
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    """Describe the CRS for a PROJ.4 parameter string."""
    factory = _make_factory(args)
    try:
        crs = factory.create_from_parameters(args.name, " ".join(args.params))
    except KoordError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if crs is None:
        print("Error: No parameters given", file=sys.stderr)
        return 1
    _print_crs(crs)
    return 0


def cmd_esri(args: argparse.Namespace) -> int:
    """Describe the CRS in an Esri .prj file."""
    path = args.file
    if not Path(path).exists():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1

    factory = _make_factory(args)
    try:
        crs = factory.create_from_esri_string(Path(path).read_text())
    except KoordError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _print_crs(crs)
    return 0


def cmd_transform(args: argparse.Namespace) -> int:
    """Transform one coordinate between two named CRSs."""
    from pyproj.exceptions import CRSError

    from pykoord.utils.crs import reproject_arrays

    factory = _make_factory(args)
    try:
        src = factory.create_from_name(args.src)
        dst = factory.create_from_name(args.dst)
    except KoordError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for name, crs in ((args.src, src), (args.dst, dst)):
        if crs is None:
            print(f"Error: {name} has an empty definition", file=sys.stderr)
            return 1

    try:
        x, y, z = reproject_arrays([args.x], [args.y], [args.z], src, dst)
    except CRSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"{x[0]:.6f} {y[0]:.6f} {z[0]:.6f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pykoord",
        description="pykoord — coordinate reference system lookup and construction",
    )
    parser.add_argument(
        "--version", action="version", version=f"pykoord {__version__}"
    )
    parser.add_argument(
        "--init-path", action="append", metavar="DIR",
        help="Extra directory with PROJ init files (repeatable)",
    )
    parser.add_argument(
        "--no-database", action="store_true",
        help="Do not fall back to the PROJ database for names",
    )
    parser.add_argument("-v", "--verbose", action="store_true")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # resolve
    resolve_parser = subparsers.add_parser("resolve", help="Print the parameters for a name")
    resolve_parser.add_argument("name", help="CRS name, e.g. EPSG:3005")

    # info
    info_parser = subparsers.add_parser("info", help="Describe the CRS for a name")
    info_parser.add_argument("name", help="CRS name, e.g. EPSG:3005")

    # parse
    parse_parser = subparsers.add_parser("parse", help="Describe a PROJ.4 parameter string")
    parse_parser.add_argument("params", nargs="+", help="PROJ.4 parameters")
    parse_parser.add_argument("--name", default=None, help="Name for the CRS")

    # esri
    esri_parser = subparsers.add_parser("esri", help="Describe an Esri .prj file")
    esri_parser.add_argument("file", help="Path to the .prj file")

    # transform
    transform_parser = subparsers.add_parser("transform", help="Transform one coordinate")
    transform_parser.add_argument("src", help="Source CRS name")
    transform_parser.add_argument("dst", help="Target CRS name")
    transform_parser.add_argument("x", type=float)
    transform_parser.add_argument("y", type=float)
    transform_parser.add_argument("z", type=float, nargs="?", default=0.0)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    commands = {
        "resolve": cmd_resolve,
        "info": cmd_info,
        "parse": cmd_parse,
        "esri": cmd_esri,
        "transform": cmd_transform,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
