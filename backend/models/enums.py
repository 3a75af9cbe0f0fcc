"""
Enums for INP analysis models to ensure type safety and consistency
"""

from enum import Enum


class EfficiencyMetric(str, Enum):
    """Unit kind attached to a computed or extracted efficiency value"""
    eir = 'EIR'
    afue = 'AFUE'
    cop = 'COP'
    none = ''


class HeatingFuel(str, Enum):
    """Heating fuel codes accepted by the baseline analyzer"""
    fossil_fuel = 'FOSSIL FUEL'
    electric = 'ELECTRIC'


class ScheduleType(str, Enum):
    """Baseline operating schedule families"""
    non_residential = 'N2-5 Non Residential'
    hotel_function = 'N2-6 Hotel Function'
    residential_setback = 'N2-7 Residential, with Setback'
    retail = 'N2-9 Retail'


class BlockName(str, Enum):
    """Declared block names the extractors look up"""
    root = 'INPUT'
    glass_types = 'Glass Types'
    materials = 'Materials / Layers / Constructions'
    misc_objects = 'Misc Cost Related Objects'
    utility_rates = 'Utility Rates'
    chilled_water_meters = 'Chilled Water Meters'
    hvac_systems = 'HVAC Systems / Zones'
    boilers = 'Boilers'
    chillers = 'Chillers'
    polygons = 'Polygons'


class FileSource(str, Enum):
    """Which of a project's two INP files a result came from"""
    baseline = 'baseline'
    proposed = 'proposed'
