"""
Command line interface for the INP analyzer

Usage:
    python backend parse model.inp
    python backend summary model.inp --source baseline
    python backend cooling --area 42000 --system 7 --sqft-per-ton 350
    python backend heating --area 42000 --system 3 --btu-per-sqft 30
    python backend baseline --zip 33101 --area 42000 --floors 4 --building-type OFFICE \
        --heating-fuel "FOSSIL FUEL" --data-dir ./lookup
"""
import argparse
import json
import logging

from pydantic import ValidationError

from core import config
from domain.calculations.efficiency import get_cool_eff, get_heat_eff
from models.enums import FileSource, HeatingFuel
from models.schemas import CompareFields
from services.baseline_analyzer import analyze_baseline
from services.error_types import CriticalError, StructuralParseError, UpstreamDependencyError
from services.file_summary import summarize_file_result
from services.inp_parser import analyze_inp_path
from services.lookup_tables import get_lookups

logger = logging.getLogger(__name__)


def _print(model) -> None:
    print(json.dumps(model.dict(), indent=2, ensure_ascii=False))


def cmd_parse(args) -> int:
    result = analyze_inp_path(args.file, encoding=args.encoding)
    _print(result)
    return 0


def cmd_summary(args) -> int:
    result = analyze_inp_path(args.file, encoding=args.encoding)
    _print(summarize_file_result(result, FileSource(args.source)))
    return 0


def cmd_cooling(args) -> int:
    _print(get_cool_eff(args.area, args.system, args.sqft_per_ton))
    return 0


def cmd_heating(args) -> int:
    _print(get_heat_eff(args.area, args.system, args.btu_per_sqft))
    return 0


def cmd_baseline(args) -> int:
    if args.data_dir is None:
        logger.error("No lookup directory given; pass --data-dir or set LOOKUP_DATA_DIR")
        return 2
    fields = CompareFields(
        zip_code=args.zip,
        area=args.area,
        number_floors=args.floors,
        building_type=args.building_type,
        hvac_heating_type=args.heating_fuel,
        cooling_sqft_per_ton=args.sqft_per_ton,
        heating_btu_per_sqft=args.btu_per_sqft,
    )
    _print(analyze_baseline(fields, get_lookups(str(args.data_dir))))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='eQuest INP analyzer and baseline efficiency calculator')
    parser.add_argument('--log-level', default=None, help='Override LOG_LEVEL')
    subparsers = parser.add_subparsers(dest='command', required=True)

    parse = subparsers.add_parser('parse', help='Extract building parameters from an INP file')
    parse.add_argument('file', help='Path to the .inp file')
    parse.add_argument('--encoding', default=config.INP_FILE_ENCODING)
    parse.set_defaults(handler=cmd_parse)

    summary = subparsers.add_parser('summary', help='Display summary of an INP file next to the baseline')
    summary.add_argument('file', help='Path to the .inp file')
    summary.add_argument('--source', choices=[source.value for source in FileSource],
                         default=FileSource.proposed.value)
    summary.add_argument('--encoding', default=config.INP_FILE_ENCODING)
    summary.set_defaults(handler=cmd_summary)

    cooling = subparsers.add_parser('cooling', help='Minimum cooling efficiency for a baseline system')
    cooling.add_argument('--area', type=float, required=True)
    cooling.add_argument('--system', type=int, required=True, help='Baseline system number 1-8')
    cooling.add_argument('--sqft-per-ton', type=float, default=config.DEFAULT_COOLING_SQFT_PER_TON)
    cooling.set_defaults(handler=cmd_cooling)

    heating = subparsers.add_parser('heating', help='Minimum heating efficiency for a baseline system')
    heating.add_argument('--area', type=float, required=True)
    heating.add_argument('--system', type=int, required=True, help='Baseline system number 1-8')
    heating.add_argument('--btu-per-sqft', type=float, default=config.DEFAULT_HEATING_BTU_PER_SQFT)
    heating.set_defaults(handler=cmd_heating)

    baseline = subparsers.add_parser('baseline', help='Code baseline for a project')
    baseline.add_argument('--zip', type=int, required=True)
    baseline.add_argument('--area', type=float, required=True)
    baseline.add_argument('--floors', type=int, required=True)
    baseline.add_argument('--building-type', required=True)
    baseline.add_argument('--heating-fuel', choices=[fuel.value for fuel in HeatingFuel],
                          default=HeatingFuel.fossil_fuel.value)
    baseline.add_argument('--sqft-per-ton', type=float, default=config.DEFAULT_COOLING_SQFT_PER_TON)
    baseline.add_argument('--btu-per-sqft', type=float, default=config.DEFAULT_HEATING_BTU_PER_SQFT)
    baseline.add_argument('--data-dir', default=config.LOOKUP_DATA_DIR)
    baseline.set_defaults(handler=cmd_baseline)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config.setup_logging(args.log_level)

    try:
        return args.handler(args)
    except StructuralParseError as e:
        logger.error(f"Could not parse INP file: {e}")
        return 1
    except UpstreamDependencyError as e:
        logger.error(f"Reference data missing: {e}")
        return 2
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid input: {e}")
        return 1
    except (CriticalError, OSError) as e:
        logger.error(f"Failed: {e}")
        return 1
